"""
Faithtrack Backend: Prayer Service
====================================

What:  Business rules for a user's private prayer list.
How:   Each method performs one auth check and one store operation on the
       `prayers` table through the request's AsyncSession.
Who:   Called by the /api/prayers route handlers.

Operations:
    list_prayers()   → caller's prayers, newest first, no cap ([] when anonymous)
    create_prayer()  → new prayer with is_answered=False, returns its id
    mark_answered()  → flips is_answered (calling twice restores the original)
    remove_prayer()  → deletes the caller's prayer

Error Handling Strategy:
    Application errors (UnauthenticatedError, NotFoundOrForbiddenError)
    propagate unchanged. SQLAlchemy errors are logged and wrapped in
    DatabaseError so no SQL detail reaches the client.
"""

import logging
import uuid
from typing import List, Optional

from sqlalchemy import desc, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from faithtrack.exceptions import DatabaseError
from faithtrack.models.prayer import Prayer
from faithtrack.schemas.prayer import PrayerCreate, PrayerResponse
from faithtrack.services.access import get_owned, require_caller

logger = logging.getLogger(__name__)


class PrayerService:
    """Stateless service; receives the session and caller on every call."""

    async def list_prayers(
        self,
        db: AsyncSession,
        caller_id: Optional[str],
    ) -> List[PrayerResponse]:
        """
        Return every prayer owned by the caller, newest first.

        Anonymous callers get an empty list rather than an error, so the
        prayer tab can render before sign-in completes.

        Query plan:
            SELECT * FROM prayers WHERE user_id = :caller ORDER BY created_at DESC
            → idx_prayers_user_created
        """
        if not caller_id:
            return []

        try:
            result = await db.execute(
                select(Prayer)
                .where(Prayer.user_id == caller_id)
                .order_by(desc(Prayer.created_at))
            )
            prayers = result.scalars().all()
        except SQLAlchemyError as e:
            logger.error("Database error listing prayers: %s", str(e), exc_info=True)
            raise DatabaseError(
                message="Could not retrieve your prayers. Please try again.",
                context={"error_type": type(e).__name__},
            )

        return [PrayerResponse.model_validate(prayer) for prayer in prayers]

    async def create_prayer(
        self,
        db: AsyncSession,
        caller_id: Optional[str],
        payload: PrayerCreate,
    ) -> uuid.UUID:
        """
        Record a new prayer for the caller.

        Returns:
            The new prayer's id.

        Raises:
            UnauthenticatedError: no caller identity
            DatabaseError: insert failed
        """
        user_id = require_caller(caller_id)

        prayer = Prayer(
            user_id=user_id,
            title=payload.title,
            content=payload.content,
            prayer_type=payload.prayer_type.value,
            is_public=payload.is_public,
            is_answered=False,
        )
        try:
            db.add(prayer)
            await db.flush()  # Assigns id and created_at; commit happens in get_db_session
        except SQLAlchemyError as e:
            logger.error("Database error creating prayer: %s", str(e), exc_info=True)
            raise DatabaseError(
                message="Could not save your prayer. Please try again.",
                context={"error_type": type(e).__name__},
            )

        logger.info("Prayer %s created (type=%s)", prayer.id, prayer.prayer_type)
        return prayer.id

    async def mark_answered(
        self,
        db: AsyncSession,
        caller_id: Optional[str],
        prayer_id: uuid.UUID,
    ) -> PrayerResponse:
        """
        Toggle the answered flag of one of the caller's prayers.

        This flips the current value instead of setting it to True, which lets
        the same action undo an accidental mark.

        Raises:
            UnauthenticatedError: no caller identity
            NotFoundOrForbiddenError: missing, or owned by someone else
        """
        user_id = require_caller(caller_id)

        try:
            prayer = await get_owned(db, Prayer, prayer_id, user_id, "prayer")
            prayer.is_answered = not prayer.is_answered
            await db.flush()
        except SQLAlchemyError as e:
            logger.error("Database error updating prayer %s: %s", prayer_id, str(e))
            raise DatabaseError(
                message="Could not update the prayer. Please try again.",
                context={"prayer_id": str(prayer_id)},
            )

        logger.info("Prayer %s is_answered=%s", prayer.id, prayer.is_answered)
        return PrayerResponse.model_validate(prayer)

    async def remove_prayer(
        self,
        db: AsyncSession,
        caller_id: Optional[str],
        prayer_id: uuid.UUID,
    ) -> None:
        """
        Delete one of the caller's prayers.

        Raises:
            UnauthenticatedError: no caller identity
            NotFoundOrForbiddenError: missing, or owned by someone else
        """
        user_id = require_caller(caller_id)

        try:
            prayer = await get_owned(db, Prayer, prayer_id, user_id, "prayer")
            await db.delete(prayer)
            await db.flush()
        except SQLAlchemyError as e:
            logger.error("Database error deleting prayer %s: %s", prayer_id, str(e))
            raise DatabaseError(
                message="Could not delete the prayer. Please try again.",
                context={"prayer_id": str(prayer_id)},
            )

        logger.info("Prayer %s deleted", prayer_id)


# ── Singleton Instance ────────────────────────────────────────────────────
prayer_service = PrayerService()
