"""
Faithtrack Backend: Search History SQLAlchemy Model
=====================================================

What:  ORM model for the `search_history` table. One row per answered AI
       guidance query. Rows are appended and never updated.
"""

import uuid
from datetime import datetime, timezone

from sqlalchemy import DateTime, Index, String, Text, Uuid
from sqlalchemy.orm import Mapped, mapped_column

from faithtrack.database import Base


class SearchHistoryRecord(Base):
    """A question asked of the AI advisor together with the answer received."""

    __tablename__ = "search_history"

    id: Mapped[uuid.UUID] = mapped_column(Uuid, primary_key=True, default=uuid.uuid4)
    user_id: Mapped[str] = mapped_column(String(255), nullable=False)

    # No length limits: history stores whatever the user asked and the model said
    query: Mapped[str] = mapped_column(Text, nullable=False)
    response: Mapped[str] = mapped_column(Text, nullable=False)

    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
    )

    __table_args__ = (
        Index("idx_search_history_user_created", "user_id", created_at.desc()),
    )

    def __repr__(self) -> str:
        return f"<SearchHistoryRecord(id={self.id}, created_at='{self.created_at}')>"
