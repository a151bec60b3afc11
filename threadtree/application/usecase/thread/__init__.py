"""Thread use cases."""

from .add_comment import AddCommentRequest, AddCommentResponse, AddCommentUseCase
from .create_post import CreatePostRequest, CreatePostResponse, CreatePostUseCase
from .get_thread import GetThreadRequest, GetThreadUseCase
from .list_threads import ListThreadsRequest, ListThreadsResponse, ListThreadsUseCase
from .reconcile_children import (
    ReconcileChildrenRequest,
    ReconcileChildrenResponse,
    ReconcileChildrenUseCase,
)
from .views import AuthorView, ThreadView, to_thread_view

__all__ = [
    "AddCommentRequest",
    "AddCommentResponse",
    "AddCommentUseCase",
    "AuthorView",
    "CreatePostRequest",
    "CreatePostResponse",
    "CreatePostUseCase",
    "GetThreadRequest",
    "GetThreadUseCase",
    "ListThreadsRequest",
    "ListThreadsResponse",
    "ListThreadsUseCase",
    "ReconcileChildrenRequest",
    "ReconcileChildrenResponse",
    "ReconcileChildrenUseCase",
    "ThreadView",
    "to_thread_view",
]
