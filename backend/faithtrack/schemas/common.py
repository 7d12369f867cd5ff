"""
Faithtrack Backend: Shared Pydantic Schemas
=============================================

What:  Response models shared by every resource: created-id payloads, the
       standard error body, the health report, and the base class that all
       record responses inherit from.
"""

import uuid
from datetime import datetime, timezone
from typing import Optional

from pydantic import BaseModel, Field, field_validator


class RecordResponse(BaseModel):
    """
    Base for every stored-record response.

    SQLite returns naive datetimes even for timezone-aware columns; all
    timestamps are written in UTC, so a missing tzinfo is restored as UTC.
    """

    id: uuid.UUID = Field(description="Unique record identifier (UUID)")
    created_at: datetime = Field(description="When the record was created (UTC ISO 8601)")

    model_config = {"from_attributes": True}

    @field_validator("created_at")
    @classmethod
    def ensure_utc(cls, v: datetime) -> datetime:
        if v.tzinfo is None:
            return v.replace(tzinfo=timezone.utc)
        return v


class CreatedResponse(BaseModel):
    """Returned with HTTP 201 by every create endpoint."""
    id: uuid.UUID = Field(description="Identifier of the new record")


class ErrorResponse(BaseModel):
    """
    Standardized error response format for all API errors.

    Example:
        {
            "error": "unauthenticated",
            "message": "Not authenticated",
            "request_id": "1f0c9a2b"
        }
    """
    error: str = Field(description="Machine-readable error code")
    message: str = Field(description="Human-readable error description")
    details: Optional[dict] = Field(default=None, description="Additional error context")
    request_id: Optional[str] = Field(default=None, description="Request correlation ID")


class HealthResponse(BaseModel):
    """Health check response showing service and dependency status."""
    status: str = Field(description="Overall service status: healthy, unhealthy")
    version: str = Field(description="Application version")
    database: str = Field(description="Database connectivity: connected, disconnected")
    uptime_seconds: float = Field(description="Seconds since service started")
