"""
Faithtrack Backend: Prayer Schemas
====================================

What:  Request and response models for /api/prayers.
"""

from enum import Enum

from pydantic import BaseModel, Field

from faithtrack.schemas.common import RecordResponse


class PrayerType(str, Enum):
    GRATITUDE = "gratitude"
    PETITION = "petition"
    INTERCESSION = "intercession"
    CONFESSION = "confession"
    PRAISE = "praise"


class PrayerCreate(BaseModel):
    """Body of POST /api/prayers."""
    title: str = Field(min_length=1, max_length=200)
    content: str = Field(min_length=1)
    prayer_type: PrayerType = Field(description="Kind of prayer")
    is_public: bool = Field(description="Whether the owner marked the prayer shareable")


class PrayerResponse(RecordResponse):
    """A prayer as returned to its owner."""
    user_id: str
    title: str
    content: str
    prayer_type: PrayerType
    is_answered: bool
    is_public: bool
