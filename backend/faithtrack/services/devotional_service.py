"""
Faithtrack Backend: Devotional Service
========================================

What:  Daily devotionals (a verse and the user's reflection) kept per
       calendar day. Private to their owner.
Who:   Called by the /api/devotionals route handlers.

Operations:
    list_devotionals()  → newest 50, [] when anonymous
    get_for_date()      → latest devotional written for a day, or None
    create_devotional() → returns the new id
    remove_devotional() → owner-only delete
"""

import logging
import uuid
from typing import List, Optional

from sqlalchemy import desc, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from faithtrack.exceptions import DatabaseError
from faithtrack.models.devotional import Devotional
from faithtrack.schemas.devotional import DevotionalCreate, DevotionalResponse
from faithtrack.services.access import get_owned, require_caller

logger = logging.getLogger(__name__)

DEVOTIONAL_LIMIT = 50


class DevotionalService:

    async def list_devotionals(
        self,
        db: AsyncSession,
        caller_id: Optional[str],
    ) -> List[DevotionalResponse]:
        if not caller_id:
            return []

        try:
            result = await db.execute(
                select(Devotional)
                .where(Devotional.user_id == caller_id)
                .order_by(desc(Devotional.created_at))
                .limit(DEVOTIONAL_LIMIT)
            )
            devotionals = result.scalars().all()
        except SQLAlchemyError as e:
            logger.error("Database error listing devotionals: %s", str(e), exc_info=True)
            raise DatabaseError(
                message="Could not retrieve your devotionals. Please try again.",
                context={"error_type": type(e).__name__},
            )

        return [DevotionalResponse.model_validate(d) for d in devotionals]

    async def get_for_date(
        self,
        db: AsyncSession,
        caller_id: Optional[str],
        day: str,
    ) -> Optional[DevotionalResponse]:
        """
        Return the caller's most recent devotional for `day` (YYYY-MM-DD).

        Query plan:
            SELECT * FROM devotionals WHERE user_id = :caller AND date = :day
            ORDER BY created_at DESC LIMIT 1
            → idx_devotionals_user_date
        """
        if not caller_id:
            return None

        try:
            result = await db.execute(
                select(Devotional)
                .where(Devotional.user_id == caller_id, Devotional.date == day)
                .order_by(desc(Devotional.created_at))
                .limit(1)
            )
            devotional = result.scalars().first()
        except SQLAlchemyError as e:
            logger.error("Database error reading devotional for %s: %s", day, str(e))
            raise DatabaseError(
                message="Could not retrieve the devotional. Please try again.",
                context={"date": day},
            )

        if devotional is None:
            return None
        return DevotionalResponse.model_validate(devotional)

    async def create_devotional(
        self,
        db: AsyncSession,
        caller_id: Optional[str],
        payload: DevotionalCreate,
    ) -> uuid.UUID:
        user_id = require_caller(caller_id)

        devotional = Devotional(
            user_id=user_id,
            date=payload.date,
            verse=payload.verse,
            reflection=payload.reflection,
        )
        try:
            db.add(devotional)
            await db.flush()
        except SQLAlchemyError as e:
            logger.error("Database error creating devotional: %s", str(e), exc_info=True)
            raise DatabaseError(
                message="Could not save your devotional. Please try again.",
                context={"error_type": type(e).__name__},
            )

        logger.info("Devotional %s created for %s", devotional.id, devotional.date)
        return devotional.id

    async def remove_devotional(
        self,
        db: AsyncSession,
        caller_id: Optional[str],
        devotional_id: uuid.UUID,
    ) -> None:
        user_id = require_caller(caller_id)

        try:
            devotional = await get_owned(db, Devotional, devotional_id, user_id, "devotional")
            await db.delete(devotional)
            await db.flush()
        except SQLAlchemyError as e:
            logger.error("Database error deleting devotional %s: %s", devotional_id, str(e))
            raise DatabaseError(
                message="Could not delete the devotional. Please try again.",
                context={"devotional_id": str(devotional_id)},
            )

        logger.info("Devotional %s deleted", devotional_id)


# ── Singleton Instance ────────────────────────────────────────────────────
devotional_service = DevotionalService()
