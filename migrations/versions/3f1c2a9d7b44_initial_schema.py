"""initial_schema

Create the thread tree schema:
- Users (with the set of authored top-level thread ids)
- Threads (top-level posts and replies, children kept as an ordered id array)

Revision ID: 3f1c2a9d7b44
Revises:
Create Date: 2026-10-18 10:12:44.512031

"""

from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa
from sqlalchemy.dialects import postgresql


# revision identifiers, used by Alembic.
revision: str = "3f1c2a9d7b44"
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Upgrade schema."""
    op.execute('CREATE EXTENSION IF NOT EXISTS "uuid-ossp"')

    # ========================================================================
    # USERS table
    # ========================================================================
    op.create_table(
        "users",
        sa.Column(
            "id",
            sa.UUID(),
            server_default=sa.text("uuid_generate_v4()"),
            nullable=False,
        ),
        sa.Column("name", sa.String(255), nullable=False),
        sa.Column("username", sa.String(64), nullable=False),
        sa.Column("image", sa.Text(), nullable=True),
        sa.Column(
            "threads",
            postgresql.ARRAY(sa.UUID()),
            nullable=False,
            server_default=sa.text("'{}'"),
        ),
        sa.Column("onboarded", sa.Boolean(), nullable=False, server_default="false"),
        sa.Column(
            "created_at",
            sa.TIMESTAMP(timezone=True),
            nullable=False,
            server_default=sa.text("NOW()"),
        ),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("idx_users_username", "users", ["username"], unique=True)

    # ========================================================================
    # THREADS table (posts and comments)
    # ========================================================================
    op.create_table(
        "threads",
        sa.Column(
            "id",
            sa.UUID(),
            server_default=sa.text("uuid_generate_v4()"),
            nullable=False,
        ),
        sa.Column("text", sa.Text(), nullable=False),
        sa.Column("author_id", sa.UUID(), nullable=False),
        sa.Column("parent_id", sa.UUID(), nullable=True),  # NULL = top-level post
        sa.Column(
            "children",
            postgresql.ARRAY(sa.UUID()),
            nullable=False,
            server_default=sa.text("'{}'"),
        ),
        sa.Column("community_id", sa.UUID(), nullable=True),
        # clock_timestamp() so rows inserted in one transaction still sort by insert
        sa.Column(
            "created_at",
            sa.TIMESTAMP(timezone=True),
            nullable=False,
            server_default=sa.text("clock_timestamp()"),
        ),
        sa.ForeignKeyConstraint(["author_id"], ["users.id"], ondelete="RESTRICT"),
        sa.ForeignKeyConstraint(["parent_id"], ["threads.id"], ondelete="RESTRICT"),
        sa.PrimaryKeyConstraint("id"),
        sa.CheckConstraint("length(text) > 0", name="text_not_empty"),
    )
    op.create_index(
        "idx_threads_created_at",
        "threads",
        [sa.text("created_at DESC")],
    )
    op.create_index("idx_threads_parent_id", "threads", ["parent_id"])
    op.create_index("idx_threads_author_id", "threads", ["author_id"])


def downgrade() -> None:
    """Downgrade schema."""
    op.drop_index("idx_threads_author_id", table_name="threads")
    op.drop_index("idx_threads_parent_id", table_name="threads")
    op.drop_index("idx_threads_created_at", table_name="threads")
    op.drop_table("threads")

    op.drop_index("idx_users_username", table_name="users")
    op.drop_table("users")
