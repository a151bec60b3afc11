"""PostgreSQL implementation of User repository."""

from typing import Iterable, Optional

from sqlalchemy import cast, func, select, update
from sqlalchemy.dialects.postgresql import UUID
from sqlalchemy.ext.asyncio import AsyncSession

from threadtree.domain.error import StoreError
from threadtree.domain.model import User
from threadtree.domain.repository import UserRepository
from threadtree.domain.value import ThreadId, UserId
from threadtree.persistence.error import translate_store_errors
from threadtree.persistence.mappers import row_to_user, user_to_dict
from threadtree.persistence.tables import users_table


class PostgresUserRepository(UserRepository):
    """PostgreSQL implementation of UserRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    @translate_store_errors
    async def find_by_id(self, user_id: UserId) -> Optional[User]:
        """Find a user by ID."""
        stmt = select(users_table).where(users_table.c.id == user_id)
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_user(row._asdict()) if row else None

    @translate_store_errors
    async def find_by_ids(self, user_ids: Iterable[UserId]) -> dict[UserId, User]:
        """Find several users in one query."""
        ids = list(set(user_ids))
        if not ids:
            return {}

        stmt = select(users_table).where(users_table.c.id.in_(ids))
        result = await self.session.execute(stmt)
        users = [row_to_user(row._asdict()) for row in result.fetchall()]
        return {user.id: user for user in users}

    @translate_store_errors
    async def save(self, user: User) -> User:
        """Save a user (create or update)."""
        existing = await self.find_by_id(user.id)
        user_dict = user_to_dict(user)

        if existing:
            stmt = (
                users_table.update()
                .where(users_table.c.id == user.id)
                .values(**user_dict)
            )
        else:
            stmt = users_table.insert().values(**user_dict)

        await self.session.execute(stmt)
        await self.session.flush()
        return user

    @translate_store_errors
    async def add_thread(self, user_id: UserId, thread_id: ThreadId) -> None:
        """Atomically add a thread id to the user's authored set."""
        stmt = (
            update(users_table)
            .where(users_table.c.id == user_id)
            .where(~users_table.c.threads.contains([thread_id]))
            .values(
                threads=func.array_append(users_table.c.threads, cast(thread_id, UUID))
            )
        )
        result = await self.session.execute(stmt)
        await self.session.flush()

        if result.rowcount == 0 and not await self.find_by_id(user_id):
            raise StoreError(f"User not found: {user_id}")
