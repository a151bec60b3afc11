"""SQLAlchemy table definitions for threadtree.

They match the schema defined in Alembic migrations.
"""

from sqlalchemy import (
    Boolean,
    CheckConstraint,
    Column,
    ForeignKey,
    Index,
    MetaData,
    String,
    Table,
    Text,
)
from sqlalchemy.dialects.postgresql import ARRAY, TIMESTAMP, UUID

metadata = MetaData()

# ============================================================================
# USERS TABLE
# ============================================================================
users_table = Table(
    "users",
    metadata,
    Column("id", UUID, primary_key=True, server_default="uuid_generate_v4()"),
    Column("name", String(255), nullable=False),
    Column("username", String(64), nullable=False),
    Column("image", Text, nullable=True),
    # Authored top-level thread ids (set semantics, maintained by array_append)
    Column("threads", ARRAY(UUID), nullable=False, server_default="{}"),
    Column("onboarded", Boolean, nullable=False, server_default="false"),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
)

Index("idx_users_username", users_table.c.username, unique=True)

# ============================================================================
# THREADS TABLE (posts and comments)
# ============================================================================
threads_table = Table(
    "threads",
    metadata,
    Column("id", UUID, primary_key=True, server_default="uuid_generate_v4()"),
    Column("text", Text, nullable=False),
    Column(
        "author_id", UUID, ForeignKey("users.id", ondelete="RESTRICT"), nullable=False
    ),
    # NULL for top-level posts
    Column(
        "parent_id",
        UUID,
        ForeignKey("threads.id", ondelete="RESTRICT"),
        nullable=True,
    ),
    # Reply ids in reply order
    Column("children", ARRAY(UUID), nullable=False, server_default="{}"),
    Column("community_id", UUID, nullable=True),
    Column(
        "created_at",
        TIMESTAMP(timezone=True),
        nullable=False,
        server_default="clock_timestamp()",
    ),
    CheckConstraint("length(text) > 0", name="text_not_empty"),
)

Index("idx_threads_created_at", threads_table.c.created_at.desc())
Index("idx_threads_parent_id", threads_table.c.parent_id)
Index("idx_threads_author_id", threads_table.c.author_id)
