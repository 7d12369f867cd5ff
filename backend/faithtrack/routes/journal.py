"""
Faithtrack Backend: Journal Route Handlers
============================================

What:  GET/POST /api/journal and DELETE /api/journal/{id}.
"""

from typing import List, Optional
from uuid import UUID

from fastapi import APIRouter, Depends, Response
from sqlalchemy.ext.asyncio import AsyncSession

from faithtrack.auth import get_caller_id
from faithtrack.database import get_db_session
from faithtrack.schemas.common import CreatedResponse, ErrorResponse
from faithtrack.schemas.journal import JournalEntryCreate, JournalEntryResponse
from faithtrack.services.journal_service import journal_service

router = APIRouter(prefix="/api/journal", tags=["Journal"])


@router.get(
    "",
    response_model=List[JournalEntryResponse],
    summary="List the caller's 50 newest journal entries",
)
async def list_entries(
    db: AsyncSession = Depends(get_db_session),
    caller_id: Optional[str] = Depends(get_caller_id),
) -> List[JournalEntryResponse]:
    return await journal_service.list_entries(db, caller_id)


@router.post(
    "",
    status_code=201,
    response_model=CreatedResponse,
    responses={401: {"description": "Not authenticated", "model": ErrorResponse}},
    summary="Write a journal entry",
)
async def create_entry(
    payload: JournalEntryCreate,
    db: AsyncSession = Depends(get_db_session),
    caller_id: Optional[str] = Depends(get_caller_id),
) -> CreatedResponse:
    entry_id = await journal_service.create_entry(db, caller_id, payload)
    return CreatedResponse(id=entry_id)


@router.delete(
    "/{entry_id}",
    status_code=204,
    responses={
        401: {"description": "Not authenticated", "model": ErrorResponse},
        404: {"description": "Entry not found", "model": ErrorResponse},
    },
    summary="Delete a journal entry",
)
async def remove_entry(
    entry_id: UUID,
    db: AsyncSession = Depends(get_db_session),
    caller_id: Optional[str] = Depends(get_caller_id),
) -> Response:
    await journal_service.remove_entry(db, caller_id, entry_id)
    return Response(status_code=204)
