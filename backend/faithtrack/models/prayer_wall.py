"""
Faithtrack Backend: Prayer Wall SQLAlchemy Model
==================================================

What:  ORM model for the `prayer_wall_posts` table, the shared public wall.
Who:   Used by PrayerWallService and by Alembic.

Table Design:
    - user_id: author's subject; user_name is an optional display name
    - prayer_count: how many times someone prayed for the intention.
      Starts at 0 and only ever grows; there is no record of who prayed.
    - Index on created_at DESC serves the wall listing (newest 50)
"""

import uuid
from datetime import datetime, timezone
from typing import Optional

from sqlalchemy import CheckConstraint, DateTime, Index, Integer, String, Text, Uuid, text
from sqlalchemy.orm import Mapped, mapped_column

from faithtrack.database import Base


class PrayerWallPost(Base):
    """An intention posted to the public prayer wall."""

    __tablename__ = "prayer_wall_posts"

    id: Mapped[uuid.UUID] = mapped_column(Uuid, primary_key=True, default=uuid.uuid4)

    user_id: Mapped[str] = mapped_column(String(255), nullable=False)

    user_name: Mapped[Optional[str]] = mapped_column(
        String(100),
        nullable=True,
        default=None,
        comment="Optional display name chosen by the author",
    )

    intention: Mapped[str] = mapped_column(Text, nullable=False)

    prayer_count: Mapped[int] = mapped_column(
        Integer,
        nullable=False,
        default=0,
        server_default=text("0"),
    )

    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
    )

    __table_args__ = (
        Index("idx_prayer_wall_created", created_at.desc()),
        CheckConstraint("prayer_count >= 0", name="ck_prayer_wall_count_non_negative"),
    )

    def __repr__(self) -> str:
        return f"<PrayerWallPost(id={self.id}, prayer_count={self.prayer_count})>"
