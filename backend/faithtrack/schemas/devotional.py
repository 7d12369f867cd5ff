"""
Faithtrack Backend: Devotional Schemas
========================================

What:  Request and response models for /api/devotionals.
"""

from datetime import date as date_type

from pydantic import BaseModel, Field, field_validator

from faithtrack.schemas.common import RecordResponse


def validate_devotional_date(value: str) -> str:
    """Accepts YYYY-MM-DD strings that name a real calendar day."""
    try:
        parsed = date_type.fromisoformat(value)
    except ValueError:
        raise ValueError(f"Invalid date '{value}'. Expected YYYY-MM-DD")
    if parsed.isoformat() != value:
        raise ValueError(f"Invalid date '{value}'. Expected YYYY-MM-DD")
    return value


class DevotionalCreate(BaseModel):
    date: str = Field(description="Calendar day (YYYY-MM-DD)")
    verse: str = Field(min_length=1)
    reflection: str = Field(min_length=1)

    @field_validator("date")
    @classmethod
    def validate_date(cls, v: str) -> str:
        return validate_devotional_date(v)


class DevotionalResponse(RecordResponse):
    user_id: str
    date: str
    verse: str
    reflection: str
