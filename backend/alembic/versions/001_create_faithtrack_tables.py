"""Create prayers, prayer wall, journal, search history and devotional tables

Revision ID: 001
Revises: None
Create Date: 2026-10-19 00:00:00.000000+00:00

What:  Creates the five per-user tables and their listing indexes.
How:   PostgreSQL UUID primary keys generated by gen_random_uuid() and
       TIMESTAMP WITH TIME ZONE creation times defaulting to now().

Rollback: downgrade() drops every table (all data lost).
"""

from typing import Sequence, Union
from alembic import op
import sqlalchemy as sa
from sqlalchemy.dialects import postgresql

# revision identifiers
revision: str = "001"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def _id_column() -> sa.Column:
    return sa.Column(
        "id",
        postgresql.UUID(as_uuid=True),
        server_default=sa.text("gen_random_uuid()"),
        nullable=False,
    )


def _user_id_column() -> sa.Column:
    return sa.Column(
        "user_id",
        sa.String(255),
        nullable=False,
        comment="Identity-provider subject of the owner",
    )


def _created_at_column() -> sa.Column:
    return sa.Column(
        "created_at",
        sa.TIMESTAMP(timezone=True),
        server_default=sa.text("CURRENT_TIMESTAMP"),
        nullable=False,
    )


def upgrade() -> None:
    op.create_table(
        "prayers",
        _id_column(),
        _user_id_column(),
        sa.Column("title", sa.String(200), nullable=False),
        sa.Column("content", sa.Text(), nullable=False),
        sa.Column(
            "prayer_type",
            sa.String(20),
            nullable=False,
            comment="gratitude, petition, intercession, confession, praise",
        ),
        sa.Column("is_answered", sa.Boolean(), nullable=False, server_default=sa.text("false")),
        sa.Column("is_public", sa.Boolean(), nullable=False, server_default=sa.text("false")),
        _created_at_column(),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("idx_prayers_user_created", "prayers", ["user_id", sa.text("created_at DESC")])
    op.create_index("idx_prayers_public", "prayers", ["is_public"])

    op.create_table(
        "prayer_wall_posts",
        _id_column(),
        _user_id_column(),
        sa.Column("user_name", sa.String(100), nullable=True, comment="Optional display name"),
        sa.Column("intention", sa.Text(), nullable=False),
        sa.Column("prayer_count", sa.Integer(), nullable=False, server_default=sa.text("0")),
        _created_at_column(),
        sa.PrimaryKeyConstraint("id"),
        sa.CheckConstraint("prayer_count >= 0", name="ck_prayer_wall_count_non_negative"),
    )
    op.create_index("idx_prayer_wall_created", "prayer_wall_posts", [sa.text("created_at DESC")])

    op.create_table(
        "journal_entries",
        _id_column(),
        _user_id_column(),
        sa.Column("title", sa.String(200), nullable=False),
        sa.Column("content", sa.Text(), nullable=False),
        sa.Column("mood", sa.String(20), nullable=False),
        _created_at_column(),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(
        "idx_journal_user_created", "journal_entries", ["user_id", sa.text("created_at DESC")]
    )

    op.create_table(
        "search_history",
        _id_column(),
        _user_id_column(),
        sa.Column("query", sa.Text(), nullable=False),
        sa.Column("response", sa.Text(), nullable=False),
        _created_at_column(),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(
        "idx_search_history_user_created", "search_history", ["user_id", sa.text("created_at DESC")]
    )

    op.create_table(
        "devotionals",
        _id_column(),
        _user_id_column(),
        sa.Column("date", sa.String(10), nullable=False, comment="Calendar day in YYYY-MM-DD format"),
        sa.Column("verse", sa.Text(), nullable=False),
        sa.Column("reflection", sa.Text(), nullable=False),
        _created_at_column(),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(
        "idx_devotionals_user_created", "devotionals", ["user_id", sa.text("created_at DESC")]
    )
    op.create_index("idx_devotionals_user_date", "devotionals", ["user_id", "date"])


def downgrade() -> None:
    op.drop_index("idx_devotionals_user_date", table_name="devotionals")
    op.drop_index("idx_devotionals_user_created", table_name="devotionals")
    op.drop_table("devotionals")
    op.drop_index("idx_search_history_user_created", table_name="search_history")
    op.drop_table("search_history")
    op.drop_index("idx_journal_user_created", table_name="journal_entries")
    op.drop_table("journal_entries")
    op.drop_index("idx_prayer_wall_created", table_name="prayer_wall_posts")
    op.drop_table("prayer_wall_posts")
    op.drop_index("idx_prayers_public", table_name="prayers")
    op.drop_index("idx_prayers_user_created", table_name="prayers")
    op.drop_table("prayers")
