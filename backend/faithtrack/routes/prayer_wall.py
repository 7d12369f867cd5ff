"""
Faithtrack Backend: Prayer Wall Route Handlers
================================================

What:  GET/POST /api/prayer-wall and POST /api/prayer-wall/{id}/pray.
Who:   Called by the frontend Prayer Wall tab.

Caching:
    The wall is public but changes with every post and prayer, so the listing
    is sent with `Cache-Control: no-cache`.
"""

from typing import List, Optional
from uuid import UUID

from fastapi import APIRouter, Depends, Response
from sqlalchemy.ext.asyncio import AsyncSession

from faithtrack.auth import get_caller_id
from faithtrack.database import get_db_session
from faithtrack.schemas.common import CreatedResponse, ErrorResponse
from faithtrack.schemas.prayer_wall import PrayerWallCreate, PrayerWallPostResponse
from faithtrack.services.prayer_wall_service import prayer_wall_service

router = APIRouter(prefix="/api/prayer-wall", tags=["Prayer Wall"])


@router.get(
    "",
    response_model=List[PrayerWallPostResponse],
    summary="List the prayer wall",
    description="Returns the 50 newest intentions from all users. No sign-in required.",
)
async def list_posts(
    response: Response,
    db: AsyncSession = Depends(get_db_session),
) -> List[PrayerWallPostResponse]:
    response.headers["Cache-Control"] = "no-cache"
    return await prayer_wall_service.list_posts(db)


@router.post(
    "",
    status_code=201,
    response_model=CreatedResponse,
    responses={401: {"description": "Not authenticated", "model": ErrorResponse}},
    summary="Post an intention to the wall",
)
async def create_post(
    payload: PrayerWallCreate,
    db: AsyncSession = Depends(get_db_session),
    caller_id: Optional[str] = Depends(get_caller_id),
) -> CreatedResponse:
    post_id = await prayer_wall_service.create_post(db, caller_id, payload)
    return CreatedResponse(id=post_id)


@router.post(
    "/{post_id}/pray",
    response_model=PrayerWallPostResponse,
    responses={
        401: {"description": "Not authenticated", "model": ErrorResponse},
        404: {"description": "Post not found", "model": ErrorResponse},
    },
    summary="Pray for an intention",
    description=(
        "Adds one to the post's prayer count. Any signed-in user may pray for any "
        "post, as often as they like."
    ),
)
async def increment_prayer(
    post_id: UUID,
    db: AsyncSession = Depends(get_db_session),
    caller_id: Optional[str] = Depends(get_caller_id),
) -> PrayerWallPostResponse:
    return await prayer_wall_service.increment_prayer(db, caller_id, post_id)
