"""
Faithtrack Backend: Prayer Route Handlers
===========================================

What:  GET/POST /api/prayers, POST /api/prayers/{id}/answered,
       DELETE /api/prayers/{id}.
How:   Resolves the caller, delegates to PrayerService, returns JSON.
Who:   Called by the frontend Prayers tab.
"""

from typing import List, Optional
from uuid import UUID

from fastapi import APIRouter, Depends, Response
from sqlalchemy.ext.asyncio import AsyncSession

from faithtrack.auth import get_caller_id
from faithtrack.database import get_db_session
from faithtrack.schemas.common import CreatedResponse, ErrorResponse
from faithtrack.schemas.prayer import PrayerCreate, PrayerResponse
from faithtrack.services.prayer_service import prayer_service

router = APIRouter(prefix="/api/prayers", tags=["Prayers"])


@router.get(
    "",
    response_model=List[PrayerResponse],
    summary="List the caller's prayers",
    description="Returns every prayer owned by the caller, newest first. Anonymous callers get an empty list.",
)
async def list_prayers(
    db: AsyncSession = Depends(get_db_session),
    caller_id: Optional[str] = Depends(get_caller_id),
) -> List[PrayerResponse]:
    return await prayer_service.list_prayers(db, caller_id)


@router.post(
    "",
    status_code=201,
    response_model=CreatedResponse,
    responses={401: {"description": "Not authenticated", "model": ErrorResponse}},
    summary="Record a prayer",
)
async def create_prayer(
    payload: PrayerCreate,
    db: AsyncSession = Depends(get_db_session),
    caller_id: Optional[str] = Depends(get_caller_id),
) -> CreatedResponse:
    prayer_id = await prayer_service.create_prayer(db, caller_id, payload)
    return CreatedResponse(id=prayer_id)


@router.post(
    "/{prayer_id}/answered",
    response_model=PrayerResponse,
    responses={
        401: {"description": "Not authenticated", "model": ErrorResponse},
        404: {"description": "Prayer not found", "model": ErrorResponse},
    },
    summary="Toggle a prayer's answered flag",
    description="Flips is_answered on one of the caller's prayers and returns the updated prayer.",
)
async def mark_answered(
    prayer_id: UUID,
    db: AsyncSession = Depends(get_db_session),
    caller_id: Optional[str] = Depends(get_caller_id),
) -> PrayerResponse:
    return await prayer_service.mark_answered(db, caller_id, prayer_id)


@router.delete(
    "/{prayer_id}",
    status_code=204,
    responses={
        401: {"description": "Not authenticated", "model": ErrorResponse},
        404: {"description": "Prayer not found", "model": ErrorResponse},
    },
    summary="Delete a prayer",
)
async def remove_prayer(
    prayer_id: UUID,
    db: AsyncSession = Depends(get_db_session),
    caller_id: Optional[str] = Depends(get_caller_id),
) -> Response:
    await prayer_service.remove_prayer(db, caller_id, prayer_id)
    return Response(status_code=204)
