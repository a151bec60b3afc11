"""In-memory user repository for testing."""

from typing import Iterable, Optional

from threadtree.domain.error import StoreError
from threadtree.domain.model import User
from threadtree.domain.repository import UserRepository
from threadtree.domain.value import ThreadId, UserId

from .store import InMemoryStore


class InMemoryUserRepository(UserRepository):
    """In-memory implementation of UserRepository for testing."""

    def __init__(self, store: InMemoryStore | None = None) -> None:
        self.store = store or InMemoryStore()

    async def find_by_id(self, user_id: UserId) -> Optional[User]:
        """Find a user by ID."""
        return self.store.users.get(user_id)

    async def find_by_ids(self, user_ids: Iterable[UserId]) -> dict[UserId, User]:
        """Find several users."""
        return {
            user_id: self.store.users[user_id]
            for user_id in user_ids
            if user_id in self.store.users
        }

    async def save(self, user: User) -> User:
        """Save or update a user."""
        self.store.put_user(user)
        return user

    async def add_thread(self, user_id: UserId, thread_id: ThreadId) -> None:
        """Atomically add a thread id to the user's authored set."""
        user = self.store.users.get(user_id)
        if not user:
            raise StoreError(f"User not found: {user_id}")
        if thread_id in user.threads:
            return

        self.store.put_user(
            user.model_copy(update={"threads": user.threads | {thread_id}})
        )
