"""Thread domain service."""

from datetime import datetime, timezone
from uuid import uuid4

import logfire

from threadtree.domain.error import NotFoundError
from threadtree.domain.model import ExpandedThread, Thread, ThreadPage
from threadtree.domain.repository import ThreadRepository
from threadtree.domain.value import CommunityId, PageWindow, ThreadId, UserId

from .base import Service, require_text, store_boundary
from .expansion import ThreadExpander
from .invalidation import InvalidationSignal
from .user_index import UserIndex

# Listing shows reply previews (who replied) but no nested replies
LISTING_DEPTH = 1


class ThreadService(Service):
    """Domain service for creating, listing and expanding threads."""

    def __init__(
        self,
        thread_repository: ThreadRepository,
        thread_expander: ThreadExpander,
        user_index: UserIndex,
        invalidation_signal: InvalidationSignal,
        default_max_depth: int = 2,
    ) -> None:
        """Initialize thread service.

        Args:
            thread_repository: Thread repository
            thread_expander: Bounded expander for read paths
            user_index: Authored-thread index, updated on post creation
            invalidation_signal: Signal fired after each mutation
            default_max_depth: Expansion depth used by get_by_id
        """
        self.thread_repository = thread_repository
        self.thread_expander = thread_expander
        self.user_index = user_index
        self.invalidation_signal = invalidation_signal
        self.default_max_depth = default_max_depth

    async def create_post(
        self,
        text: str,
        author_id: UserId,
        community_id: CommunityId | None,
        invalidation_topic: str,
    ) -> ThreadId:
        """Create a top-level thread.

        Steps:
        1. Persist the thread (parent_id = None)
        2. Add it to the author's authored set
        3. Signal invalidation of ``invalidation_topic``

        A failed step stops the sequence, so a failed thread write leaves
        the index and the signal untouched.

        Args:
            text: Thread text (must not be blank)
            author_id: Author user ID (must exist in the store)
            community_id: Optional community the post belongs to
            invalidation_topic: Opaque topic passed to the invalidation signal

        Returns:
            ID of the new thread

        Raises:
            ValidationError: If text is blank
            PersistenceError: If the store fails (including a missing author)
        """
        with logfire.span(
            "thread_service.create_post",
            author_id=str(author_id),
            community_id=str(community_id) if community_id else None,
        ):
            thread = Thread(
                id=ThreadId(uuid4()),
                text=require_text(text),
                author_id=author_id,
                parent_id=None,
                children=(),
                community_id=community_id,
                created_at=datetime.now(timezone.utc),
            )

            with store_boundary("creating thread"):
                saved = await self.thread_repository.insert(thread)

            await self.user_index.record_authored(author_id, saved.id)
            await self.invalidation_signal.notify(invalidation_topic)

            logfire.info(
                "Thread created", thread_id=str(saved.id), author_id=str(author_id)
            )
            return saved.id

    async def list_top_level(
        self, page_number: int = 1, page_size: int = 20
    ) -> ThreadPage:
        """List top-level threads, newest first.

        Each thread carries its author summary and a one-level preview of
        its replies (reply authors only, no nested replies).

        The total count is a separate query from the page query. Under
        concurrent inserts they may disagree, so ``has_next`` is a best
        effort answer.

        Args:
            page_number: 1-based page number
            page_size: Threads per page (0 yields an empty page)

        Returns:
            Page of expanded threads and whether another page exists

        Raises:
            ValidationError: If the page window is invalid
        """
        window = PageWindow.of(page_number, page_size)

        with logfire.span(
            "thread_service.list_top_level",
            page_number=window.page_number,
            page_size=window.page_size,
        ):
            with store_boundary("fetching threads"):
                threads = await self.thread_repository.find_top_level(
                    limit=window.page_size, offset=window.skip
                )
                total = await self.thread_repository.count_top_level()
                items = await self.thread_expander.expand(threads, LISTING_DEPTH)

            has_next = total > window.skip + len(items)
            logfire.info(
                "Threads listed", count=len(items), total=total, has_next=has_next
            )
            return ThreadPage(
                items=items,
                has_next=has_next,
                page_number=window.page_number,
                page_size=window.page_size,
            )

    async def get_by_id(
        self, thread_id: ThreadId, max_depth: int | None = None
    ) -> ExpandedThread:
        """Get a thread with its reply tree expanded to a bounded depth.

        With the default depth of 2, the thread's replies and the replies
        to those are expanded; anything deeper is returned as bare ids.

        Args:
            thread_id: Thread ID
            max_depth: Child levels to expand (defaults to configuration)

        Returns:
            Expanded thread

        Raises:
            NotFoundError: If the thread does not exist
            ValidationError: If max_depth is negative
        """
        depth = self.default_max_depth if max_depth is None else max_depth

        with logfire.span(
            "thread_service.get_by_id", thread_id=str(thread_id), max_depth=depth
        ):
            with store_boundary("fetching thread"):
                thread = await self.thread_repository.find_by_id(thread_id)
                if not thread:
                    logfire.warn("Thread not found", thread_id=str(thread_id))
                    raise NotFoundError("Thread", str(thread_id))
                [expanded] = await self.thread_expander.expand([thread], depth)
            return expanded
