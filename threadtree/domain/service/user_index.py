"""Authored-thread index service."""

import logfire

from threadtree.domain.error import NotFoundError
from threadtree.domain.model import ExpandedThread
from threadtree.domain.repository import ThreadRepository, UserRepository
from threadtree.domain.value import ThreadId, UserId

from .base import Service, store_boundary
from .expansion import ThreadExpander


class UserIndex(Service):
    """Maintains each user's set of authored top-level threads.

    The set is a denormalized index for fast "my posts" lookups. Comments
    are deliberately not recorded here.
    """

    def __init__(
        self,
        user_repository: UserRepository,
        thread_repository: ThreadRepository,
        thread_expander: ThreadExpander,
    ) -> None:
        """Initialize user index.

        Args:
            user_repository: User repository
            thread_repository: Thread repository
            thread_expander: Expander for the authored threads view
        """
        self.user_repository = user_repository
        self.thread_repository = thread_repository
        self.thread_expander = thread_expander

    async def record_authored(self, user_id: UserId, thread_id: ThreadId) -> None:
        """Add a thread to the user's authored set.

        Args:
            user_id: Author user ID
            thread_id: ID of the thread the user created

        Raises:
            PersistenceError: If the user is missing or the store fails
        """
        with logfire.span(
            "user_index.record_authored",
            user_id=str(user_id),
            thread_id=str(thread_id),
        ):
            with store_boundary("indexing authored thread"):
                await self.user_repository.add_thread(user_id, thread_id)
            logfire.info(
                "Authored thread indexed",
                user_id=str(user_id),
                thread_id=str(thread_id),
            )

    async def authored_thread_ids(self, user_id: UserId) -> frozenset[ThreadId]:
        """Get the ids of the threads a user created.

        Raises:
            NotFoundError: If the user does not exist
        """
        with store_boundary("fetching user"):
            user = await self.user_repository.find_by_id(user_id)
        if not user:
            raise NotFoundError("User", str(user_id))
        return user.threads

    async def authored_threads(
        self, user_id: UserId, max_depth: int = 1
    ) -> list[ExpandedThread]:
        """Get a user's threads, newest first, with bounded expansion.

        Args:
            user_id: Author user ID
            max_depth: Child levels to expand (default: reply previews only)

        Raises:
            NotFoundError: If the user does not exist
        """
        with logfire.span(
            "user_index.authored_threads", user_id=str(user_id), max_depth=max_depth
        ):
            thread_ids = await self.authored_thread_ids(user_id)
            with store_boundary("fetching authored threads"):
                found = await self.thread_repository.find_by_ids(thread_ids)
                threads = sorted(
                    found.values(), key=lambda t: t.created_at, reverse=True
                )
                expanded = await self.thread_expander.expand(threads, max_depth)
            logfire.info(
                "Authored threads retrieved", user_id=str(user_id), count=len(expanded)
            )
            return expanded
