"""Read models produced by bounded expansion.

Expansion replaces reference ids with the referenced data inline. Children
past the expansion bound stay as bare ``ThreadId`` values.
"""

from datetime import datetime
from typing import Optional, Union

from threadtree.domain.model.common import DomainModel
from threadtree.domain.value import CommunityId, ThreadId, UserId


class AuthorSummary(DomainModel):
    """Compact author data attached to expanded threads."""

    id: UserId
    name: str
    image: Optional[str] = None


class ExpandedThread(DomainModel):
    """A thread with its author and (some of) its children resolved.

    ``author`` is None when the author record could not be found.
    """

    id: ThreadId
    text: str
    author_id: UserId
    author: Optional[AuthorSummary] = None
    parent_id: Optional[ThreadId] = None
    community_id: Optional[CommunityId] = None
    created_at: datetime
    children: list[Union["ExpandedThread", ThreadId]] = []

    @property
    def child_ids(self) -> list[ThreadId]:
        """Ids of all children, expanded or not, in reply order."""
        return [
            child.id if isinstance(child, ExpandedThread) else child
            for child in self.children
        ]


class ThreadPage(DomainModel):
    """One page of the top-level listing."""

    items: list[ExpandedThread]
    has_next: bool
    page_number: int
    page_size: int
