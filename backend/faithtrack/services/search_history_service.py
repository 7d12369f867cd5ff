"""
Faithtrack Backend: Search History Service
============================================

What:  Append-only log of AI guidance questions and answers per user.
Who:   save_search() is called by GrokService after every parsed upstream
       response and by POST /api/search/history; get_history() backs the
       "Recent Searches" list.
"""

import logging
import uuid
from typing import List, Optional

from sqlalchemy import desc, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from faithtrack.exceptions import DatabaseError
from faithtrack.models.search_history import SearchHistoryRecord
from faithtrack.schemas.search import SearchHistoryResponse
from faithtrack.services.access import require_caller

logger = logging.getLogger(__name__)

HISTORY_LIMIT = 20


class SearchHistoryService:

    async def get_history(
        self,
        db: AsyncSession,
        caller_id: Optional[str],
    ) -> List[SearchHistoryResponse]:
        """Caller's HISTORY_LIMIT most recent searches, newest first; [] when anonymous."""
        if not caller_id:
            return []

        try:
            result = await db.execute(
                select(SearchHistoryRecord)
                .where(SearchHistoryRecord.user_id == caller_id)
                .order_by(desc(SearchHistoryRecord.created_at))
                .limit(HISTORY_LIMIT)
            )
            records = result.scalars().all()
        except SQLAlchemyError as e:
            logger.error("Database error reading search history: %s", str(e), exc_info=True)
            raise DatabaseError(
                message="Could not retrieve your search history. Please try again.",
                context={"error_type": type(e).__name__},
            )

        return [SearchHistoryResponse.model_validate(record) for record in records]

    async def save_search(
        self,
        db: AsyncSession,
        caller_id: Optional[str],
        query: str,
        response: str,
    ) -> uuid.UUID:
        """
        Append one question/answer pair. Content is stored as given.

        Raises:
            UnauthenticatedError: no caller identity
        """
        user_id = require_caller(caller_id)

        record = SearchHistoryRecord(user_id=user_id, query=query, response=response)
        try:
            db.add(record)
            await db.flush()
        except SQLAlchemyError as e:
            logger.error("Database error saving search: %s", str(e), exc_info=True)
            raise DatabaseError(
                message="Could not save the search. Please try again.",
                context={"error_type": type(e).__name__},
            )

        logger.info(
            "Search %s saved (query=%d chars, response=%d chars)",
            record.id,
            len(query),
            len(response),
        )
        return record.id


# ── Singleton Instance ────────────────────────────────────────────────────
search_history_service = SearchHistoryService()
