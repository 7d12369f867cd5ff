"""
Faithtrack Backend: Devotional Route Handlers
===============================================

What:  GET/POST /api/devotionals, GET /api/devotionals/by-date/{date},
       DELETE /api/devotionals/{id}.

Path Validation:
    The by-date path segment must be YYYY-MM-DD; anything else is rejected
    with 422 before the service is called.
"""

from typing import List, Optional
from uuid import UUID

from fastapi import APIRouter, Depends, Path, Response
from sqlalchemy.ext.asyncio import AsyncSession

from faithtrack.auth import get_caller_id
from faithtrack.database import get_db_session
from faithtrack.schemas.common import CreatedResponse, ErrorResponse
from faithtrack.schemas.devotional import DevotionalCreate, DevotionalResponse
from faithtrack.services.devotional_service import devotional_service

router = APIRouter(prefix="/api/devotionals", tags=["Devotionals"])


@router.get(
    "",
    response_model=List[DevotionalResponse],
    summary="List the caller's 50 newest devotionals",
)
async def list_devotionals(
    db: AsyncSession = Depends(get_db_session),
    caller_id: Optional[str] = Depends(get_caller_id),
) -> List[DevotionalResponse]:
    return await devotional_service.list_devotionals(db, caller_id)


@router.get(
    "/by-date/{day}",
    response_model=Optional[DevotionalResponse],
    summary="Get the caller's devotional for a day",
    description="Returns the most recent devotional written for the given day, or null.",
)
async def get_for_date(
    day: str = Path(pattern=r"^\d{4}-\d{2}-\d{2}$", description="Calendar day (YYYY-MM-DD)"),
    db: AsyncSession = Depends(get_db_session),
    caller_id: Optional[str] = Depends(get_caller_id),
) -> Optional[DevotionalResponse]:
    return await devotional_service.get_for_date(db, caller_id, day)


@router.post(
    "",
    status_code=201,
    response_model=CreatedResponse,
    responses={401: {"description": "Not authenticated", "model": ErrorResponse}},
    summary="Write a devotional",
)
async def create_devotional(
    payload: DevotionalCreate,
    db: AsyncSession = Depends(get_db_session),
    caller_id: Optional[str] = Depends(get_caller_id),
) -> CreatedResponse:
    devotional_id = await devotional_service.create_devotional(db, caller_id, payload)
    return CreatedResponse(id=devotional_id)


@router.delete(
    "/{devotional_id}",
    status_code=204,
    responses={
        401: {"description": "Not authenticated", "model": ErrorResponse},
        404: {"description": "Devotional not found", "model": ErrorResponse},
    },
    summary="Delete a devotional",
)
async def remove_devotional(
    devotional_id: UUID,
    db: AsyncSession = Depends(get_db_session),
    caller_id: Optional[str] = Depends(get_caller_id),
) -> Response:
    await devotional_service.remove_devotional(db, caller_id, devotional_id)
    return Response(status_code=204)
