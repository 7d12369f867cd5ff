"""
Faithtrack Backend: Prayer SQLAlchemy Model
=============================================

What:  ORM model for the `prayers` table (a user's private prayer requests).
Who:   Used by PrayerService and by Alembic for schema management.

Table Design:
    - UUID primary key assigned at insert
    - user_id: identity-provider subject of the owner, immutable
    - prayer_type: one of gratitude/petition/intercession/confession/praise
      (validated by the request schema; stored as a short string)
    - is_answered: changed only by the mark-answered toggle
    - is_public: recorded for future sharing, not used by any listing today

    Index (user_id, created_at DESC) serves "my prayers, newest first".
    Index on is_public mirrors the public-prayer lookup of the data model.
"""

import uuid
from datetime import datetime, timezone

from sqlalchemy import Boolean, DateTime, Index, String, Text, Uuid, text
from sqlalchemy.orm import Mapped, mapped_column

from faithtrack.database import Base


class Prayer(Base):
    """
    A prayer request or intention recorded by one user.

    Lifecycle:
        1. Created with is_answered = False
        2. is_answered flips each time the owner marks it answered
        3. Deleted only by its owner; nothing references it
    """

    __tablename__ = "prayers"

    id: Mapped[uuid.UUID] = mapped_column(
        Uuid,
        primary_key=True,
        default=uuid.uuid4,
    )

    user_id: Mapped[str] = mapped_column(
        String(255),
        nullable=False,
        comment="Identity-provider subject of the owner",
    )

    title: Mapped[str] = mapped_column(String(200), nullable=False)
    content: Mapped[str] = mapped_column(Text, nullable=False)

    prayer_type: Mapped[str] = mapped_column(
        String(20),
        nullable=False,
        comment="gratitude, petition, intercession, confession, praise",
    )

    is_answered: Mapped[bool] = mapped_column(
        Boolean,
        nullable=False,
        default=False,
        server_default=text("false"),
    )

    is_public: Mapped[bool] = mapped_column(
        Boolean,
        nullable=False,
        default=False,
        server_default=text("false"),
    )

    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
        comment="When this prayer was recorded (UTC)",
    )

    __table_args__ = (
        Index("idx_prayers_user_created", "user_id", created_at.desc()),
        Index("idx_prayers_public", "is_public"),
    )

    def __repr__(self) -> str:
        return (
            f"<Prayer(id={self.id}, type='{self.prayer_type}', "
            f"answered={self.is_answered})>"
        )
