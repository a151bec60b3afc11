"""Comment linking service."""

from datetime import datetime, timezone
from uuid import uuid4

import logfire

from threadtree.domain.error import NotFoundError
from threadtree.domain.model import Thread
from threadtree.domain.repository import ThreadRepository
from threadtree.domain.value import ThreadId, UserId

from .base import Service, require_text, store_boundary
from .invalidation import InvalidationSignal


class CommentLinker(Service):
    """Creates replies and links them into their parent's children.

    The commenter's authored set is not updated; only top-level posts are
    indexed per user.
    """

    def __init__(
        self,
        thread_repository: ThreadRepository,
        invalidation_signal: InvalidationSignal,
    ) -> None:
        """Initialize comment linker.

        Args:
            thread_repository: Thread repository
            invalidation_signal: Signal fired after a comment is linked
        """
        self.thread_repository = thread_repository
        self.invalidation_signal = invalidation_signal

    async def add_comment(
        self,
        parent_id: ThreadId,
        text: str,
        author_id: UserId,
        invalidation_topic: str,
    ) -> ThreadId:
        """Reply to a thread (post or comment).

        Steps:
        1. Load the parent; fail before any write if it is missing
        2. Create the comment and append it to the parent's children as
           one atomic store operation
        3. Signal invalidation of ``invalidation_topic``

        Args:
            parent_id: Thread being replied to
            text: Comment text (must not be blank)
            author_id: Commenter user ID
            invalidation_topic: Opaque topic passed to the invalidation signal

        Returns:
            ID of the new comment

        Raises:
            ValidationError: If text is blank
            NotFoundError: If the parent thread does not exist
            PersistenceError: If the store fails
        """
        with logfire.span(
            "comment_linker.add_comment",
            parent_id=str(parent_id),
            author_id=str(author_id),
        ):
            require_text(text)

            with store_boundary("fetching parent thread"):
                parent = await self.thread_repository.find_by_id(parent_id)
            if not parent:
                logfire.error("Parent thread not found", parent_id=str(parent_id))
                raise NotFoundError("Thread", str(parent_id))

            comment = Thread(
                id=ThreadId(uuid4()),
                text=text,
                author_id=author_id,
                parent_id=parent.id,
                children=(),
                community_id=None,
                created_at=datetime.now(timezone.utc),
            )

            with store_boundary("creating comment"):
                saved = await self.thread_repository.insert_child(comment)

            await self.invalidation_signal.notify(invalidation_topic)

            logfire.info(
                "Comment created",
                comment_id=str(saved.id),
                parent_id=str(parent_id),
                author_id=str(author_id),
            )
            return saved.id

    async def reconcile(self, parent_id: ThreadId) -> list[ThreadId]:
        """Link comments that point at a parent but are missing from its children.

        Such comments exist when a writer persisted the comment and failed
        before linking it. Each one is appended with the atomic
        append-unique primitive, so running this concurrently with
        add_comment or with itself is safe.

        Args:
            parent_id: Thread whose children should be repaired

        Returns:
            IDs that were linked by this call, oldest first

        Raises:
            NotFoundError: If the parent thread does not exist
            PersistenceError: If the store fails
        """
        with logfire.span("comment_linker.reconcile", parent_id=str(parent_id)):
            with store_boundary("reconciling children"):
                parent = await self.thread_repository.find_by_id(parent_id)
                if not parent:
                    raise NotFoundError("Thread", str(parent_id))

                linked = set(parent.children)
                relinked: list[ThreadId] = []
                for comment in await self.thread_repository.find_by_parent(parent_id):
                    if comment.id in linked:
                        continue
                    if await self.thread_repository.append_child(parent_id, comment.id):
                        relinked.append(comment.id)

            if relinked:
                logfire.warn(
                    "Unlinked comments repaired",
                    parent_id=str(parent_id),
                    count=len(relinked),
                )
            return relinked
