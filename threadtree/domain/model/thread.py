"""Thread entity.

A thread is a single content node. Top-level posts have no parent;
comments point at the thread they reply to. The parent keeps the ordered
ids of its replies in ``children``.
"""

from datetime import datetime, timezone
from typing import Optional

from pydantic import Field

from threadtree.domain.model.common import DomainModel
from threadtree.domain.value import CommunityId, ThreadId, UserId


class Thread(DomainModel):
    """Thread entity.

    Immutable once created, except that ``children`` grows as replies are
    linked. Children are kept in reply order.
    """

    id: ThreadId
    text: str = Field(min_length=1)
    author_id: UserId
    parent_id: Optional[ThreadId] = None
    children: tuple[ThreadId, ...] = ()
    community_id: Optional[CommunityId] = None
    created_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))

    @property
    def is_top_level(self) -> bool:
        """True for posts, False for comments."""
        return self.parent_id is None
