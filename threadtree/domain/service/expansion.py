"""Bounded expansion of thread trees."""

from typing import Sequence

import logfire

from threadtree.domain.error import ValidationError
from threadtree.domain.model import AuthorSummary, ExpandedThread, Thread, User
from threadtree.domain.repository import ThreadRepository, UserRepository
from threadtree.domain.value import ThreadId

from .base import Service


class ThreadExpander(Service):
    """Resolves author and child references of threads, down to a fixed depth.

    Each level costs one thread query and one user query regardless of how
    many threads sit on it. Depth 0 expands authors only; depth ``n``
    expands ``n`` levels of children. Ids past the bound are returned as-is.
    Children that cannot be found are returned as bare ids as well.
    """

    def __init__(
        self, thread_repository: ThreadRepository, user_repository: UserRepository
    ) -> None:
        """Initialize thread expander.

        Args:
            thread_repository: Thread repository
            user_repository: User repository
        """
        self.thread_repository = thread_repository
        self.user_repository = user_repository

    async def expand(
        self, threads: Sequence[Thread], max_depth: int
    ) -> list[ExpandedThread]:
        """Expand threads, keeping their order.

        Args:
            threads: Threads to expand
            max_depth: Number of child levels to resolve

        Returns:
            Expanded threads in the same order as ``threads``

        Raises:
            ValidationError: If max_depth is negative
        """
        if max_depth < 0:
            raise ValidationError(f"max_depth must be >= 0, got {max_depth}")
        if not threads:
            return []

        authors = await self.user_repository.find_by_ids(
            {thread.author_id for thread in threads}
        )

        expanded_children: dict[ThreadId, ExpandedThread] = {}
        if max_depth > 0:
            child_ids = [child_id for thread in threads for child_id in thread.children]
            if child_ids:
                found = await self.thread_repository.find_by_ids(child_ids)
                missing = len(set(child_ids)) - len(found)
                if missing:
                    logfire.warn("Dangling child references", count=missing)
                children = await self.expand(list(found.values()), max_depth - 1)
                expanded_children = {child.id: child for child in children}

        return [
            self._to_expanded(thread, authors.get(thread.author_id), expanded_children)
            for thread in threads
        ]

    @staticmethod
    def _to_expanded(
        thread: Thread,
        author: User | None,
        expanded_children: dict[ThreadId, ExpandedThread],
    ) -> ExpandedThread:
        return ExpandedThread(
            id=thread.id,
            text=thread.text,
            author_id=thread.author_id,
            author=(
                AuthorSummary(id=author.id, name=author.name, image=author.image)
                if author
                else None
            ),
            parent_id=thread.parent_id,
            community_id=thread.community_id,
            created_at=thread.created_at,
            children=[
                expanded_children.get(child_id, child_id) for child_id in thread.children
            ],
        )
