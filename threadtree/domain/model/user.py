"""User aggregate root."""

from datetime import datetime, timezone
from typing import Optional

from pydantic import Field

from threadtree.domain.model.common import DomainModel
from threadtree.domain.value import ThreadId, UserId
from threadtree.domain.value.types import Username


class User(DomainModel):
    """User aggregate root.

    ``threads`` is a denormalized index of the top-level posts the user
    created. Comments are not tracked here.
    """

    id: UserId
    name: str = Field(min_length=1, max_length=255)
    username: Username
    image: Optional[str] = None
    threads: frozenset[ThreadId] = frozenset()
    onboarded: bool = False
    created_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
