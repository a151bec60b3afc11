"""Domain model entities for threadtree."""

from threadtree.domain.model.expanded import AuthorSummary, ExpandedThread, ThreadPage
from threadtree.domain.model.thread import Thread
from threadtree.domain.model.user import User

__all__ = [
    "User",
    "Thread",
    "AuthorSummary",
    "ExpandedThread",
    "ThreadPage",
]
