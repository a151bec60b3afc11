"""In-memory repository implementations for testing."""

from .store import InMemoryStore
from .thread import InMemoryThreadRepository
from .user import InMemoryUserRepository

__all__ = [
    "InMemoryStore",
    "InMemoryThreadRepository",
    "InMemoryUserRepository",
]
