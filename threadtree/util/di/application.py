"""Application layer DI providers."""

from dishka import Scope, provide

from threadtree.application.usecase.thread import (
    AddCommentUseCase,
    CreatePostUseCase,
    GetThreadUseCase,
    ListThreadsUseCase,
    ReconcileChildrenUseCase,
)
from threadtree.application.usecase.user import GetAuthoredThreadsUseCase
from threadtree.config import ThreadSettings
from threadtree.domain.service import CommentLinker, ThreadService, UserIndex
from threadtree.util.di.base import ProviderBase


class ProdApplicationProvider(ProviderBase):
    """Production application use cases provider - concrete, no mocks needed."""

    # Thread use cases
    @provide(scope=Scope.REQUEST)
    def get_create_post_use_case(
        self, thread_service: ThreadService
    ) -> CreatePostUseCase:
        """Provide create post use case."""
        return CreatePostUseCase(thread_service=thread_service)

    @provide(scope=Scope.REQUEST)
    def get_list_threads_use_case(
        self, thread_service: ThreadService, thread_settings: ThreadSettings
    ) -> ListThreadsUseCase:
        """Provide list threads use case."""
        return ListThreadsUseCase(
            thread_service=thread_service, thread_settings=thread_settings
        )

    @provide(scope=Scope.REQUEST)
    def get_get_thread_use_case(
        self, thread_service: ThreadService, thread_settings: ThreadSettings
    ) -> GetThreadUseCase:
        """Provide get thread use case."""
        return GetThreadUseCase(
            thread_service=thread_service, thread_settings=thread_settings
        )

    # Comment use cases
    @provide(scope=Scope.REQUEST)
    def get_add_comment_use_case(
        self, comment_linker: CommentLinker
    ) -> AddCommentUseCase:
        """Provide add comment use case."""
        return AddCommentUseCase(comment_linker=comment_linker)

    @provide(scope=Scope.REQUEST)
    def get_reconcile_children_use_case(
        self, comment_linker: CommentLinker
    ) -> ReconcileChildrenUseCase:
        """Provide reconcile children use case."""
        return ReconcileChildrenUseCase(comment_linker=comment_linker)

    # User use cases
    @provide(scope=Scope.REQUEST)
    def get_get_authored_threads_use_case(
        self, user_index: UserIndex, thread_settings: ThreadSettings
    ) -> GetAuthoredThreadsUseCase:
        """Provide get authored threads use case."""
        return GetAuthoredThreadsUseCase(
            user_index=user_index, thread_settings=thread_settings
        )
