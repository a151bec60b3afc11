"""User repository interface."""

from abc import ABC, abstractmethod
from typing import Iterable, Optional

from threadtree.domain.model.user import User
from threadtree.domain.value import ThreadId, UserId


class UserRepository(ABC):
    """Repository for User aggregate."""

    @abstractmethod
    async def find_by_id(self, user_id: UserId) -> Optional[User]:
        """Find a user by ID.

        Args:
            user_id: The user's unique identifier

        Returns:
            The user if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_ids(self, user_ids: Iterable[UserId]) -> dict[UserId, User]:
        """Find several users in one query.

        Returns:
            Mapping of id to user for the ids that exist
        """
        pass

    @abstractmethod
    async def save(self, user: User) -> User:
        """Save a user (create or update).

        Args:
            user: The user to save

        Returns:
            The saved user
        """
        pass

    @abstractmethod
    async def add_thread(self, user_id: UserId, thread_id: ThreadId) -> None:
        """Atomically add a thread id to the user's authored set.

        Adding an id that is already present is a no-op.

        Raises:
            StoreError: If the user does not exist or the store fails
        """
        pass
