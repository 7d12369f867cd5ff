"""
Faithtrack Backend: Journal Entry SQLAlchemy Model
====================================================

What:  ORM model for the `journal_entries` table. Entries are private to
       their owner; there is no sharing flag.
"""

import uuid
from datetime import datetime, timezone

from sqlalchemy import DateTime, Index, String, Text, Uuid
from sqlalchemy.orm import Mapped, mapped_column

from faithtrack.database import Base


class JournalEntry(Base):
    """A spiritual journal entry tagged with the writer's mood."""

    __tablename__ = "journal_entries"

    id: Mapped[uuid.UUID] = mapped_column(Uuid, primary_key=True, default=uuid.uuid4)
    user_id: Mapped[str] = mapped_column(String(255), nullable=False)
    title: Mapped[str] = mapped_column(String(200), nullable=False)
    content: Mapped[str] = mapped_column(Text, nullable=False)

    mood: Mapped[str] = mapped_column(
        String(20),
        nullable=False,
        comment="hopeful, grateful, struggling, peaceful, seeking",
    )

    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
    )

    __table_args__ = (
        Index("idx_journal_user_created", "user_id", created_at.desc()),
    )

    def __repr__(self) -> str:
        return f"<JournalEntry(id={self.id}, mood='{self.mood}')>"
