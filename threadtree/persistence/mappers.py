"""Mappers for converting between database rows and domain models.

Since we're using Pydantic domain models (immutable), we use manual mapping
instead of SQLAlchemy's classical imperative mapping.
"""

from typing import Any, Dict, Iterable, Optional
from uuid import UUID

from threadtree.domain.model import Thread, User
from threadtree.domain.value import CommunityId, ThreadId, UserId, Username


def _uuid(value: Any) -> UUID:
    return UUID(value) if isinstance(value, str) else value


def _optional_uuid(value: Any) -> Optional[UUID]:
    return _uuid(value) if value is not None else None


def _thread_ids(values: Optional[Iterable[Any]]) -> list[ThreadId]:
    return [ThreadId(_uuid(v)) for v in values or ()]


def row_to_user(row: Dict[str, Any]) -> User:
    """Convert database row to User domain model.

    Args:
        row: Database row as dict

    Returns:
        User domain model
    """
    return User(
        id=UserId(_uuid(row["id"])),
        name=row["name"],
        username=Username(row["username"]),
        image=row.get("image"),
        threads=frozenset(_thread_ids(row.get("threads"))),
        onboarded=row.get("onboarded", False),
        created_at=row["created_at"],
    )


def user_to_dict(user: User) -> Dict[str, Any]:
    """Convert User domain model to database dict.

    Args:
        user: User domain model

    Returns:
        Dict suitable for database insertion/update
    """
    return {
        "id": user.id,
        "name": user.name,
        "username": user.username.root,
        "image": user.image,
        "threads": sorted(user.threads),
        "onboarded": user.onboarded,
        "created_at": user.created_at,
    }


def row_to_thread(row: Dict[str, Any]) -> Thread:
    """Convert database row to Thread domain model.

    Args:
        row: Database row as dict

    Returns:
        Thread domain model
    """
    parent_id = _optional_uuid(row.get("parent_id"))
    community_id = _optional_uuid(row.get("community_id"))
    return Thread(
        id=ThreadId(_uuid(row["id"])),
        text=row["text"],
        author_id=UserId(_uuid(row["author_id"])),
        parent_id=ThreadId(parent_id) if parent_id else None,
        children=tuple(_thread_ids(row.get("children"))),
        community_id=CommunityId(community_id) if community_id else None,
        created_at=row["created_at"],
    )


def thread_to_dict(thread: Thread) -> Dict[str, Any]:
    """Convert Thread domain model to database dict.

    Args:
        thread: Thread domain model

    Returns:
        Dict suitable for database insertion. ``created_at`` is left out so
        the database clock assigns it.
    """
    return {
        "id": thread.id,
        "text": thread.text,
        "author_id": thread.author_id,
        "parent_id": thread.parent_id,
        "children": list(thread.children),
        "community_id": thread.community_id,
    }
