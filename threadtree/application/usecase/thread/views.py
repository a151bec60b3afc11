"""Response views shared by the thread use cases."""

from datetime import datetime
from typing import Union

from pydantic import BaseModel

from threadtree.domain.model import ExpandedThread


class AuthorView(BaseModel):
    """Author summary in responses."""

    user_id: str
    name: str
    image: str | None


class ThreadView(BaseModel):
    """Expanded thread in responses.

    ``children`` entries are nested views where the thread tree was
    expanded and plain id strings past the expansion bound.
    """

    thread_id: str
    text: str
    author_id: str
    author: AuthorView | None
    parent_id: str | None
    community_id: str | None
    created_at: datetime
    children: list[Union["ThreadView", str]]


def to_thread_view(thread: ExpandedThread) -> ThreadView:
    """Convert an expanded domain thread to its response view."""
    return ThreadView(
        thread_id=str(thread.id),
        text=thread.text,
        author_id=str(thread.author_id),
        author=(
            AuthorView(
                user_id=str(thread.author.id),
                name=thread.author.name,
                image=thread.author.image,
            )
            if thread.author
            else None
        ),
        parent_id=str(thread.parent_id) if thread.parent_id else None,
        community_id=str(thread.community_id) if thread.community_id else None,
        created_at=thread.created_at,
        children=[
            to_thread_view(child) if isinstance(child, ExpandedThread) else str(child)
            for child in thread.children
        ],
    )
