"""Domain value objects for threadtree."""

from threadtree.domain.value.identifiers import CommunityId, ThreadId, UserId
from threadtree.domain.value.types import PageWindow, Username

__all__ = [
    # Identifiers
    "UserId",
    "ThreadId",
    "CommunityId",
    # Types
    "Username",
    "PageWindow",
]
