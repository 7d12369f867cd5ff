"""
Faithtrack Backend: Search Route Handlers
===========================================

What:  POST /api/search (ask Grok), GET/POST /api/search/history.
Who:   Called by the frontend Search tab.

Request Flow (POST /api/search):
    1. Client sends {query, api_key}; the key is the user's own xAI key
    2. GrokService performs one upstream call
    3. The answer is saved to the caller's history and returned

    The api_key is never logged here; only the query length is.
"""

import logging
from typing import List, Optional

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from faithtrack.auth import get_caller_id
from faithtrack.database import get_db_session
from faithtrack.schemas.common import CreatedResponse, ErrorResponse
from faithtrack.schemas.search import (
    SearchAnswer,
    SearchHistoryResponse,
    SearchRequest,
    SearchSaveRequest,
)
from faithtrack.services.grok_service import grok_service
from faithtrack.services.search_history_service import search_history_service

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/search", tags=["Search"])


@router.post(
    "",
    response_model=SearchAnswer,
    responses={
        401: {"description": "Not authenticated", "model": ErrorResponse},
        502: {"description": "Grok API failed", "model": ErrorResponse},
    },
    summary="Ask the AI spiritual advisor",
    description=(
        "Sends the question to xAI Grok using the supplied API key and stores the "
        "answer in the caller's search history. The key is used for this request only."
    ),
)
async def search_with_grok(
    payload: SearchRequest,
    db: AsyncSession = Depends(get_db_session),
    caller_id: Optional[str] = Depends(get_caller_id),
) -> SearchAnswer:
    logger.info("Received search request: query=%d chars", len(payload.query))
    answer = await grok_service.search_with_grok(
        db,
        caller_id,
        query=payload.query,
        api_key=payload.api_key,
    )
    return SearchAnswer(query=payload.query, response=answer)


@router.get(
    "/history",
    response_model=List[SearchHistoryResponse],
    summary="The caller's 20 most recent searches",
)
async def get_history(
    db: AsyncSession = Depends(get_db_session),
    caller_id: Optional[str] = Depends(get_caller_id),
) -> List[SearchHistoryResponse]:
    return await search_history_service.get_history(db, caller_id)


@router.post(
    "/history",
    status_code=201,
    response_model=CreatedResponse,
    responses={401: {"description": "Not authenticated", "model": ErrorResponse}},
    summary="Append a search to history",
)
async def save_search(
    payload: SearchSaveRequest,
    db: AsyncSession = Depends(get_db_session),
    caller_id: Optional[str] = Depends(get_caller_id),
) -> CreatedResponse:
    record_id = await search_history_service.save_search(
        db,
        caller_id,
        query=payload.query,
        response=payload.response,
    )
    return CreatedResponse(id=record_id)
