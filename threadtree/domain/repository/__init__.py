"""Repository interfaces for threadtree.

Repository interfaces are defined in the domain layer (dependency inversion).
Implementations live in the persistence layer.
"""

from threadtree.domain.repository.thread import ThreadRepository
from threadtree.domain.repository.user import UserRepository

__all__ = [
    "ThreadRepository",
    "UserRepository",
]
