"""
Notekeeper — Pydantic Request/Response Schemas
================================================

What:  The API contract between the frontend and the backend.
How:   FastAPI validates request bodies against these models and serializes
       responses through them. Every response uses the envelope
       `{success: bool, data | message | error}`.

Schemas are separate from the Note domain model so the envelope can change
without touching the stored document format.
"""

from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field

from notekeeper.models.note import Note


# ══════════════════════════════════════════════════════════════════════════
# Request Models
# ══════════════════════════════════════════════════════════════════════════


class NoteCreate(BaseModel):
    """
    Body of POST /api/notes.

    Both fields are optional at the schema level: a missing or blank title is
    a business rule enforced by NoteService, which answers 400
    "title required" rather than FastAPI's generic 422.
    """
    title: Optional[str] = Field(default=None, description="Note title (required, non-blank)")
    content: Optional[str] = Field(default=None, description="Note body")


# ══════════════════════════════════════════════════════════════════════════
# Response Models
# ══════════════════════════════════════════════════════════════════════════


class NoteEnvelope(BaseModel):
    """Returned by POST /api/notes."""
    success: bool = True
    data: Note


class NoteListEnvelope(BaseModel):
    """Returned by GET /api/notes; `data` is newest first."""
    success: bool = True
    data: List[Note]


class DeleteResponse(BaseModel):
    """Returned by DELETE /api/notes/{id}; echoes the removed id as `deletedId`."""
    model_config = ConfigDict(populate_by_name=True)

    success: bool = True
    message: str = Field(default="Note deleted")
    deleted_id: str = Field(alias="deletedId", description="Id of the removed note")


class PingResponse(BaseModel):
    """Returned by GET /api/test, a liveness probe for the frontend."""
    success: bool = True
    message: str
    timestamp: str
    version: str


class ErrorResponse(BaseModel):
    """
    Standardized error body for all API errors.

    Example:
        {"success": false, "error": "title required", "request_id": "a1b2c3d4"}
    """
    success: bool = False
    error: str = Field(description="Human-readable error description")
    request_id: Optional[str] = Field(default=None, description="Request correlation ID")


class HealthResponse(BaseModel):
    """Returned by GET /health."""
    status: str = Field(description="Overall service status: healthy, unhealthy")
    version: str = Field(description="Application version")
    storage: str = Field(description="Notes document status: available, unavailable")
    uptime_seconds: float = Field(description="Seconds since service started")
