"""Domain services."""

from .base import Service
from .comment_linker import CommentLinker
from .expansion import ThreadExpander
from .invalidation import InvalidationSignal
from .thread_service import ThreadService
from .user_index import UserIndex

__all__ = [
    "CommentLinker",
    "InvalidationSignal",
    "Service",
    "ThreadExpander",
    "ThreadService",
    "UserIndex",
]
