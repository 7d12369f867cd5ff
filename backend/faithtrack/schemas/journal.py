"""
Faithtrack Backend: Journal Schemas
=====================================

What:  Request and response models for /api/journal.
"""

from enum import Enum

from pydantic import BaseModel, Field

from faithtrack.schemas.common import RecordResponse


class Mood(str, Enum):
    HOPEFUL = "hopeful"
    GRATEFUL = "grateful"
    STRUGGLING = "struggling"
    PEACEFUL = "peaceful"
    SEEKING = "seeking"


class JournalEntryCreate(BaseModel):
    title: str = Field(min_length=1, max_length=200)
    content: str = Field(min_length=1)
    mood: Mood


class JournalEntryResponse(RecordResponse):
    user_id: str
    title: str
    content: str
    mood: Mood
