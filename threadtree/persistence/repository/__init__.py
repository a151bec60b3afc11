"""PostgreSQL repository implementations."""

from threadtree.persistence.repository.thread import PostgresThreadRepository
from threadtree.persistence.repository.user import PostgresUserRepository

__all__ = [
    "PostgresThreadRepository",
    "PostgresUserRepository",
]
