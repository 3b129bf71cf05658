"""
Notekeeper — Note Domain Model
================================

What:  Pydantic model for a single note, as stored in the notes document.
How:   Attributes are snake_case in Python and camelCase on disk and on the
       wire (`createdAt`, `updatedAt`) through field aliases.
Who:   Built by NoteService, persisted by NoteStore, returned by the routes.

Document layout (one JSON array, newest note first):
    [
      {
        "id": "4f1c0d6e9b6a4d1f8a1e2b3c4d5e6f70",
        "title": "Groceries",
        "content": "milk, eggs",
        "createdAt": "2024-01-15T12:00:00.123456Z",
        "updatedAt": "2024-01-15T12:00:00.123456Z"
      }
    ]
"""

import uuid
from datetime import datetime, timezone
from typing import List

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter


def new_note_id() -> str:
    """Random 32-char hex id, unique regardless of clock resolution."""
    return uuid.uuid4().hex


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


class Note(BaseModel):
    """
    A titled piece of free-text content with creation/update timestamps.

    Lifecycle:
        1. Created by NoteService.create_note (created_at == updated_at)
        2. Deleted by NoteService.delete_note
        No in-place update exists, so updated_at never diverges.
    """

    model_config = ConfigDict(populate_by_name=True)

    id: str = Field(description="Unique note identifier")
    title: str = Field(description="Non-empty, trimmed title")
    content: str = Field(default="", description="Trimmed free-text body")
    created_at: datetime = Field(alias="createdAt", description="Creation time (UTC)")
    updated_at: datetime = Field(alias="updatedAt", description="Last update time (UTC)")

    def to_document(self) -> dict:
        """JSON-ready dict using the on-disk (camelCase) key names."""
        return self.model_dump(mode="json", by_alias=True)


# Validates a whole decoded document (list of dicts) into Note objects
NoteList = TypeAdapter(List[Note])
