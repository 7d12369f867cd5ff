"""
Faithtrack Backend: Devotional SQLAlchemy Model
=================================================

What:  ORM model for the `devotionals` table: a daily verse with the user's
       reflection on it.

Table Design:
    - date: calendar day the devotional belongs to, stored as YYYY-MM-DD text
      so it reflects the user's local day rather than a UTC instant
    - Index (user_id, date) serves "my devotional for a given day"
    - Index (user_id, created_at DESC) serves the listing
"""

import uuid
from datetime import datetime, timezone

from sqlalchemy import DateTime, Index, String, Text, Uuid
from sqlalchemy.orm import Mapped, mapped_column

from faithtrack.database import Base


class Devotional(Base):
    """A daily devotional entry."""

    __tablename__ = "devotionals"

    id: Mapped[uuid.UUID] = mapped_column(Uuid, primary_key=True, default=uuid.uuid4)
    user_id: Mapped[str] = mapped_column(String(255), nullable=False)

    date: Mapped[str] = mapped_column(
        String(10),
        nullable=False,
        comment="Calendar day in YYYY-MM-DD format",
    )

    verse: Mapped[str] = mapped_column(Text, nullable=False)
    reflection: Mapped[str] = mapped_column(Text, nullable=False)

    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
    )

    __table_args__ = (
        Index("idx_devotionals_user_created", "user_id", created_at.desc()),
        Index("idx_devotionals_user_date", "user_id", "date"),
    )

    def __repr__(self) -> str:
        return f"<Devotional(id={self.id}, date='{self.date}')>"
