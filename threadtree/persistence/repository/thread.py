"""PostgreSQL implementation of Thread repository."""

from typing import Iterable, List, Optional

import logfire
from sqlalchemy import cast, desc, func, select, update
from sqlalchemy.dialects.postgresql import UUID
from sqlalchemy.ext.asyncio import AsyncSession

from threadtree.domain.error import StoreError
from threadtree.domain.model import Thread
from threadtree.domain.repository import ThreadRepository
from threadtree.domain.value import ThreadId
from threadtree.persistence.error import translate_store_errors
from threadtree.persistence.mappers import row_to_thread, thread_to_dict
from threadtree.persistence.tables import threads_table


class PostgresThreadRepository(ThreadRepository):
    """PostgreSQL implementation of ThreadRepository.

    Writes are flushed into the request-scoped session; the DI provider
    commits them together at the end of the request.
    """

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    def _append_child_stmt(self, parent_id: ThreadId, child_id: ThreadId):
        """UPDATE that appends child_id unless the array already holds it.

        The append happens inside the UPDATE, so Postgres row locking
        serializes concurrent appends to the same parent.
        """
        child = cast(child_id, UUID)
        return (
            update(threads_table)
            .where(threads_table.c.id == parent_id)
            .where(~threads_table.c.children.contains([child_id]))
            .values(children=func.array_append(threads_table.c.children, child))
        )

    def _insert_stmt(self, thread: Thread):
        """INSERT returning the stored row, with created_at from the database."""
        return threads_table.insert().values(**thread_to_dict(thread)).returning(
            threads_table
        )

    @translate_store_errors
    async def find_by_id(self, thread_id: ThreadId) -> Optional[Thread]:
        """Find a thread by ID."""
        stmt = select(threads_table).where(threads_table.c.id == thread_id)
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_thread(row._asdict()) if row else None

    @translate_store_errors
    async def find_by_ids(self, thread_ids: Iterable[ThreadId]) -> dict[ThreadId, Thread]:
        """Find several threads in one query."""
        ids = list(set(thread_ids))
        if not ids:
            return {}

        stmt = select(threads_table).where(threads_table.c.id.in_(ids))
        result = await self.session.execute(stmt)
        threads = [row_to_thread(row._asdict()) for row in result.fetchall()]
        return {thread.id: thread for thread in threads}

    @translate_store_errors
    async def find_top_level(self, limit: int = 20, offset: int = 0) -> List[Thread]:
        """Find top-level threads, newest first."""
        with logfire.span("thread_repository.find_top_level", limit=limit, offset=offset):
            stmt = (
                select(threads_table)
                .where(threads_table.c.parent_id.is_(None))
                .order_by(desc(threads_table.c.created_at), desc(threads_table.c.id))
                .limit(limit)
                .offset(offset)
            )
            result = await self.session.execute(stmt)
            return [row_to_thread(row._asdict()) for row in result.fetchall()]

    @translate_store_errors
    async def count_top_level(self) -> int:
        """Count top-level threads."""
        stmt = (
            select(func.count())
            .select_from(threads_table)
            .where(threads_table.c.parent_id.is_(None))
        )
        result = await self.session.execute(stmt)
        return result.scalar() or 0

    @translate_store_errors
    async def find_by_parent(self, parent_id: ThreadId) -> List[Thread]:
        """Find threads replying to parent_id, oldest first."""
        stmt = (
            select(threads_table)
            .where(threads_table.c.parent_id == parent_id)
            .order_by(threads_table.c.created_at)
        )
        result = await self.session.execute(stmt)
        return [row_to_thread(row._asdict()) for row in result.fetchall()]

    @translate_store_errors
    async def insert(self, thread: Thread) -> Thread:
        """Persist a new thread."""
        result = await self.session.execute(self._insert_stmt(thread))
        row = result.fetchone()
        await self.session.flush()
        return row_to_thread(row._asdict())

    @translate_store_errors
    async def insert_child(self, comment: Thread) -> Thread:
        """Insert the comment and link it into its parent in one savepoint."""
        if comment.parent_id is None:
            raise StoreError(f"Comment {comment.id} has no parent_id")

        with logfire.span(
            "thread_repository.insert_child",
            comment_id=str(comment.id),
            parent_id=str(comment.parent_id),
        ):
            async with self.session.begin_nested():
                inserted = await self.session.execute(self._insert_stmt(comment))
                row = inserted.fetchone()
                result = await self.session.execute(
                    self._append_child_stmt(comment.parent_id, comment.id)
                )
                if result.rowcount != 1:
                    # Rolls back the savepoint, discarding the comment row
                    raise StoreError(
                        f"Parent thread {comment.parent_id} could not be linked"
                    )
            await self.session.flush()
            return row_to_thread(row._asdict())

    @translate_store_errors
    async def append_child(self, parent_id: ThreadId, child_id: ThreadId) -> bool:
        """Atomically append a child id if absent."""
        result = await self.session.execute(self._append_child_stmt(parent_id, child_id))
        await self.session.flush()
        return result.rowcount == 1
