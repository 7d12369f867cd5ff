"""
Faithtrack Backend: Search Schemas
====================================

What:  Request and response models for /api/search.

Note:
    SearchRequest.api_key is the caller's own xAI key. It is accepted on every
    request and never stored; it is excluded from the model's repr so it
    cannot leak into logs through an accidental `%r`.
"""

from pydantic import BaseModel, Field

from faithtrack.schemas.common import RecordResponse


class SearchRequest(BaseModel):
    """Body of POST /api/search."""
    query: str = Field(min_length=1, description="Question for the AI advisor")
    api_key: str = Field(min_length=1, repr=False, description="Caller's xAI API key")


class SearchAnswer(BaseModel):
    """Result of POST /api/search."""
    query: str
    response: str


class SearchSaveRequest(BaseModel):
    """Body of POST /api/search/history. Stored verbatim, empty strings included."""
    query: str
    response: str


class SearchHistoryResponse(RecordResponse):
    user_id: str
    query: str
    response: str
