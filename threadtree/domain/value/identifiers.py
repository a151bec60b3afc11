"""Strongly typed identifiers for threadtree entities.

Threads reference each other (and their authors) by id only; the tree is
resolved through the repositories, never through embedded objects.
"""

from typing import NewType
from uuid import UUID

UserId = NewType("UserId", UUID)
ThreadId = NewType("ThreadId", UUID)
CommunityId = NewType("CommunityId", UUID)
