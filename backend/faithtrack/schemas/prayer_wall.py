"""
Faithtrack Backend: Prayer Wall Schemas
=========================================

What:  Request and response models for /api/prayer-wall.
"""

from typing import Optional

from pydantic import BaseModel, Field

from faithtrack.schemas.common import RecordResponse


class PrayerWallCreate(BaseModel):
    """Body of POST /api/prayer-wall. user_name is shown instead of anonymity."""
    intention: str = Field(min_length=1)
    user_name: Optional[str] = Field(default=None, max_length=100)


class PrayerWallPostResponse(RecordResponse):
    user_id: str
    user_name: Optional[str] = None
    intention: str
    prayer_count: int = Field(ge=0)
