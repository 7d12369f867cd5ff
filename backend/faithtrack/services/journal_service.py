"""
Faithtrack Backend: Journal Service
=====================================

What:  Private spiritual journal. Same ownership rules as prayers; the
       listing is capped at the 50 newest entries.
"""

import logging
import uuid
from typing import List, Optional

from sqlalchemy import desc, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from faithtrack.exceptions import DatabaseError
from faithtrack.models.journal import JournalEntry
from faithtrack.schemas.journal import JournalEntryCreate, JournalEntryResponse
from faithtrack.services.access import get_owned, require_caller

logger = logging.getLogger(__name__)

JOURNAL_LIMIT = 50


class JournalService:

    async def list_entries(
        self,
        db: AsyncSession,
        caller_id: Optional[str],
    ) -> List[JournalEntryResponse]:
        """Caller's newest JOURNAL_LIMIT entries; [] for anonymous callers."""
        if not caller_id:
            return []

        try:
            result = await db.execute(
                select(JournalEntry)
                .where(JournalEntry.user_id == caller_id)
                .order_by(desc(JournalEntry.created_at))
                .limit(JOURNAL_LIMIT)
            )
            entries = result.scalars().all()
        except SQLAlchemyError as e:
            logger.error("Database error listing journal: %s", str(e), exc_info=True)
            raise DatabaseError(
                message="Could not retrieve your journal. Please try again.",
                context={"error_type": type(e).__name__},
            )

        return [JournalEntryResponse.model_validate(entry) for entry in entries]

    async def create_entry(
        self,
        db: AsyncSession,
        caller_id: Optional[str],
        payload: JournalEntryCreate,
    ) -> uuid.UUID:
        user_id = require_caller(caller_id)

        entry = JournalEntry(
            user_id=user_id,
            title=payload.title,
            content=payload.content,
            mood=payload.mood.value,
        )
        try:
            db.add(entry)
            await db.flush()
        except SQLAlchemyError as e:
            logger.error("Database error creating journal entry: %s", str(e), exc_info=True)
            raise DatabaseError(
                message="Could not save your journal entry. Please try again.",
                context={"error_type": type(e).__name__},
            )

        logger.info("Journal entry %s created (mood=%s)", entry.id, entry.mood)
        return entry.id

    async def remove_entry(
        self,
        db: AsyncSession,
        caller_id: Optional[str],
        entry_id: uuid.UUID,
    ) -> None:
        """
        Raises:
            UnauthenticatedError: no caller identity
            NotFoundOrForbiddenError: missing, or owned by someone else
        """
        user_id = require_caller(caller_id)

        try:
            entry = await get_owned(db, JournalEntry, entry_id, user_id, "journal entry")
            await db.delete(entry)
            await db.flush()
        except SQLAlchemyError as e:
            logger.error("Database error deleting journal entry %s: %s", entry_id, str(e))
            raise DatabaseError(
                message="Could not delete the journal entry. Please try again.",
                context={"entry_id": str(entry_id)},
            )

        logger.info("Journal entry %s deleted", entry_id)


# ── Singleton Instance ────────────────────────────────────────────────────
journal_service = JournalService()
