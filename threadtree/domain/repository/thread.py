"""Thread repository interface."""

from abc import ABC, abstractmethod
from typing import Iterable, List, Optional

from threadtree.domain.model.thread import Thread
from threadtree.domain.value import ThreadId


class ThreadRepository(ABC):
    """Repository for Thread entities.

    Defines the contract for thread persistence operations.
    Implementations raise StoreError for any backend failure.

    There is no update operation: threads are immutable apart from
    ``children``, which only changes through the atomic append methods.
    """

    @abstractmethod
    async def find_by_id(self, thread_id: ThreadId) -> Optional[Thread]:
        """Find a thread by ID.

        Args:
            thread_id: The thread's unique identifier

        Returns:
            The thread if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_ids(self, thread_ids: Iterable[ThreadId]) -> dict[ThreadId, Thread]:
        """Find several threads in one query.

        Args:
            thread_ids: Ids to look up (duplicates allowed)

        Returns:
            Mapping of id to thread for the ids that exist
        """
        pass

    @abstractmethod
    async def find_top_level(self, limit: int = 20, offset: int = 0) -> List[Thread]:
        """Find top-level threads, newest first.

        Args:
            limit: Maximum number of threads to return
            offset: Number of threads to skip

        Returns:
            Threads with no parent ordered by created_at descending
        """
        pass

    @abstractmethod
    async def count_top_level(self) -> int:
        """Count top-level threads.

        Runs independently of find_top_level; the two results are not a
        consistent snapshot.
        """
        pass

    @abstractmethod
    async def find_by_parent(self, parent_id: ThreadId) -> List[Thread]:
        """Find threads whose parent_id is the given thread, oldest first.

        This reads the reverse reference, so it also returns comments that
        were persisted but never linked into the parent's children.
        """
        pass

    @abstractmethod
    async def insert(self, thread: Thread) -> Thread:
        """Persist a new thread.

        Args:
            thread: The thread to create

        Returns:
            The stored thread. Stores with their own clock may replace
            created_at.
        """
        pass

    @abstractmethod
    async def insert_child(self, comment: Thread) -> Thread:
        """Persist a new comment and link it into its parent, atomically.

        Either both the comment row and the parent's children entry are
        written, or neither is.

        Args:
            comment: The comment to create; parent_id must be set

        Returns:
            The stored comment
        """
        pass

    @abstractmethod
    async def append_child(self, parent_id: ThreadId, child_id: ThreadId) -> bool:
        """Atomically append a child id to a thread's children if absent.

        Never reads the array into memory first, so concurrent callers
        cannot overwrite each other's appends.

        Returns:
            True if the id was appended, False if it was already present
            or the parent does not exist
        """
        pass
