"""
Faithtrack Backend: Prayer Wall Service
=========================================

What:  The shared public wall of intentions that anyone signed in can pray for.
Who:   Called by the /api/prayer-wall route handlers.

Visibility Rules:
    - Listing is public: no caller is needed and nothing is filtered by owner
    - Posting requires a caller
    - Praying (incrementing) requires a caller but not ownership. A caller
      may pray for the same post any number of times; nobody tracks who prayed.

Concurrency:
    The increment is written as `prayer_count = prayer_count + 1` so the
    database applies it against the current row value. Two concurrent
    increments both land even though each request read the post first.
"""

import logging
import uuid
from typing import List, Optional

from sqlalchemy import desc, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from faithtrack.exceptions import DatabaseError, NotFoundError
from faithtrack.models.prayer_wall import PrayerWallPost
from faithtrack.schemas.prayer_wall import PrayerWallCreate, PrayerWallPostResponse
from faithtrack.services.access import require_caller

logger = logging.getLogger(__name__)

# Number of posts shown on the wall
WALL_LIMIT = 50


class PrayerWallService:

    async def list_posts(self, db: AsyncSession) -> List[PrayerWallPostResponse]:
        """Return the newest WALL_LIMIT posts, newest first."""
        try:
            result = await db.execute(
                select(PrayerWallPost)
                .order_by(desc(PrayerWallPost.created_at))
                .limit(WALL_LIMIT)
            )
            posts = result.scalars().all()
        except SQLAlchemyError as e:
            logger.error("Database error listing prayer wall: %s", str(e), exc_info=True)
            raise DatabaseError(
                message="Could not load the prayer wall. Please try again.",
                context={"error_type": type(e).__name__},
            )

        return [PrayerWallPostResponse.model_validate(post) for post in posts]

    async def create_post(
        self,
        db: AsyncSession,
        caller_id: Optional[str],
        payload: PrayerWallCreate,
    ) -> uuid.UUID:
        """
        Post an intention to the wall with prayer_count = 0.

        The caller's id is stored alongside the optional display name.
        """
        user_id = require_caller(caller_id)

        post = PrayerWallPost(
            user_id=user_id,
            user_name=payload.user_name,
            intention=payload.intention,
            prayer_count=0,
        )
        try:
            db.add(post)
            await db.flush()
        except SQLAlchemyError as e:
            logger.error("Database error creating wall post: %s", str(e), exc_info=True)
            raise DatabaseError(
                message="Could not post your intention. Please try again.",
                context={"error_type": type(e).__name__},
            )

        logger.info("Prayer wall post %s created", post.id)
        return post.id

    async def increment_prayer(
        self,
        db: AsyncSession,
        caller_id: Optional[str],
        post_id: uuid.UUID,
    ) -> PrayerWallPostResponse:
        """
        Add exactly one prayer to a post.

        Raises:
            UnauthenticatedError: no caller identity
            NotFoundError: no post with that id
        """
        require_caller(caller_id)

        try:
            post = await db.get(PrayerWallPost, post_id)
            if post is None:
                raise NotFoundError(resource="prayer wall post", resource_id=str(post_id))

            post.prayer_count = PrayerWallPost.prayer_count + 1
            await db.flush()
            # The SQL expression leaves the attribute expired; reload the stored value
            await db.refresh(post)
        except SQLAlchemyError as e:
            logger.error("Database error incrementing post %s: %s", post_id, str(e))
            raise DatabaseError(
                message="Could not record your prayer. Please try again.",
                context={"post_id": str(post_id)},
            )

        logger.debug("Prayer wall post %s prayer_count=%d", post.id, post.prayer_count)
        return PrayerWallPostResponse.model_validate(post)


# ── Singleton Instance ────────────────────────────────────────────────────
prayer_wall_service = PrayerWallService()
