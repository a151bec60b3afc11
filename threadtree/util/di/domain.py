"""Domain layer DI providers."""

from dishka import Scope, provide

from threadtree.config import ThreadSettings
from threadtree.domain.repository import ThreadRepository, UserRepository
from threadtree.domain.service import (
    CommentLinker,
    InvalidationSignal,
    ThreadExpander,
    ThreadService,
    UserIndex,
)
from threadtree.util.di.base import ProviderBase


class ProdDomainProvider(ProviderBase):
    """Production domain services provider - concrete, no mocks needed.

    Domain services are REQUEST-scoped to align with repository/session lifecycle.
    Each HTTP request gets fresh service instances with their own transaction.
    """

    scope = Scope.REQUEST

    @provide
    def get_thread_expander(
        self, thread_repository: ThreadRepository, user_repository: UserRepository
    ) -> ThreadExpander:
        """Provide bounded thread expander."""
        return ThreadExpander(
            thread_repository=thread_repository, user_repository=user_repository
        )

    @provide
    def get_user_index(
        self,
        user_repository: UserRepository,
        thread_repository: ThreadRepository,
        thread_expander: ThreadExpander,
    ) -> UserIndex:
        """Provide authored-thread index service."""
        return UserIndex(
            user_repository=user_repository,
            thread_repository=thread_repository,
            thread_expander=thread_expander,
        )

    @provide
    def get_thread_service(
        self,
        thread_repository: ThreadRepository,
        thread_expander: ThreadExpander,
        user_index: UserIndex,
        invalidation_signal: InvalidationSignal,
        thread_settings: ThreadSettings,
    ) -> ThreadService:
        """Provide thread domain service."""
        return ThreadService(
            thread_repository=thread_repository,
            thread_expander=thread_expander,
            user_index=user_index,
            invalidation_signal=invalidation_signal,
            default_max_depth=thread_settings.max_depth,
        )

    @provide
    def get_comment_linker(
        self,
        thread_repository: ThreadRepository,
        invalidation_signal: InvalidationSignal,
    ) -> CommentLinker:
        """Provide comment linking service."""
        return CommentLinker(
            thread_repository=thread_repository,
            invalidation_signal=invalidation_signal,
        )
