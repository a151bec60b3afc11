"""Shared in-memory store backing the in-memory repositories."""

from itertools import count

from threadtree.domain.error import StoreError
from threadtree.domain.model import Thread, User
from threadtree.domain.value import ThreadId, UserId


class InMemoryStore:
    """Both collections plus the reference checks a database would enforce.

    One instance plays the role of the process-wide connection: the thread
    and user repositories of a container share it. Every mutation bumps
    ``writes`` so tests can assert that nothing was written.
    """

    def __init__(self) -> None:
        self.threads: dict[ThreadId, Thread] = {}
        self.users: dict[UserId, User] = {}
        self.writes = 0
        self._sequence = count()
        self._inserted_at: dict[ThreadId, int] = {}

    def insertion_order(self, thread_id: ThreadId) -> int:
        """Position of a thread in insert order, used to break timestamp ties."""
        return self._inserted_at[thread_id]

    def put_thread(self, thread: Thread) -> None:
        """Insert a new thread, enforcing key and reference constraints."""
        if thread.id in self.threads:
            raise StoreError(f"Duplicate thread id: {thread.id}")
        if thread.author_id not in self.users:
            raise StoreError(f"Author does not exist: {thread.author_id}")
        if thread.parent_id is not None and thread.parent_id not in self.threads:
            raise StoreError(f"Parent thread does not exist: {thread.parent_id}")

        self.threads[thread.id] = thread
        self._inserted_at[thread.id] = next(self._sequence)
        self.writes += 1

    def append_child(self, parent_id: ThreadId, child_id: ThreadId) -> bool:
        """Append child_id to the parent's children unless already there.

        Contains no await, so it cannot interleave with another coroutine.
        """
        parent = self.threads.get(parent_id)
        if parent is None or child_id in parent.children:
            return False

        self.threads[parent_id] = parent.model_copy(
            update={"children": parent.children + (child_id,)}
        )
        self.writes += 1
        return True

    def put_user(self, user: User) -> None:
        """Insert or replace a user."""
        self.users[user.id] = user
        self.writes += 1
