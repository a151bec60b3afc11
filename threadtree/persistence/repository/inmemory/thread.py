"""In-memory thread repository for testing."""

from typing import Iterable, Optional

from threadtree.domain.error import StoreError
from threadtree.domain.model import Thread
from threadtree.domain.repository import ThreadRepository
from threadtree.domain.value import ThreadId

from .store import InMemoryStore


class InMemoryThreadRepository(ThreadRepository):
    """In-memory implementation of ThreadRepository for testing."""

    def __init__(self, store: InMemoryStore | None = None) -> None:
        self.store = store or InMemoryStore()

    async def find_by_id(self, thread_id: ThreadId) -> Optional[Thread]:
        """Find a thread by ID."""
        return self.store.threads.get(thread_id)

    async def find_by_ids(self, thread_ids: Iterable[ThreadId]) -> dict[ThreadId, Thread]:
        """Find several threads."""
        return {
            thread_id: self.store.threads[thread_id]
            for thread_id in thread_ids
            if thread_id in self.store.threads
        }

    async def find_top_level(self, limit: int = 20, offset: int = 0) -> list[Thread]:
        """Find top-level threads, newest first."""
        threads = [t for t in self.store.threads.values() if t.parent_id is None]

        # Sort by created_at descending, later inserts first on ties
        threads.sort(
            key=lambda t: (t.created_at, self.store.insertion_order(t.id)),
            reverse=True,
        )

        # Paginate
        return threads[offset : offset + limit]

    async def count_top_level(self) -> int:
        """Count top-level threads."""
        return sum(1 for t in self.store.threads.values() if t.parent_id is None)

    async def find_by_parent(self, parent_id: ThreadId) -> list[Thread]:
        """Find threads replying to parent_id, oldest first."""
        threads = [t for t in self.store.threads.values() if t.parent_id == parent_id]
        threads.sort(key=lambda t: (t.created_at, self.store.insertion_order(t.id)))
        return threads

    async def insert(self, thread: Thread) -> Thread:
        """Persist a new thread."""
        self.store.put_thread(thread)
        return thread

    async def insert_child(self, comment: Thread) -> Thread:
        """Insert the comment and link it with no suspension point in between."""
        if comment.parent_id is None:
            raise StoreError(f"Comment {comment.id} has no parent_id")

        self.store.put_thread(comment)
        self.store.append_child(comment.parent_id, comment.id)
        return comment

    async def append_child(self, parent_id: ThreadId, child_id: ThreadId) -> bool:
        """Atomically append a child id if absent."""
        return self.store.append_child(parent_id, child_id)
