"""
Notekeeper — Notes Route Handlers
===================================

What:  GET /api/notes (list), POST /api/notes (create),
       DELETE /api/notes/{id} (delete).
How:   Extracts request data, delegates to NoteService, wraps the result in
       the `{success, data}` envelope. Errors raised by the service are
       turned into `{success: false, error}` by the global handlers in main.py.
Who:   Called by the browser frontend.
"""

import logging
from typing import Optional

from fastapi import APIRouter, Body, Depends

from notekeeper.schemas.note import (
    DeleteResponse,
    ErrorResponse,
    NoteCreate,
    NoteEnvelope,
    NoteListEnvelope,
)
from notekeeper.services.note_service import NoteService, get_note_service

logger = logging.getLogger(__name__)

# ── Router Configuration ──────────────────────────────────────────────────
router = APIRouter(prefix="/api", tags=["Notes"])


@router.get(
    "/notes",
    response_model=NoteListEnvelope,
    responses={
        500: {"description": "Notes document unreadable", "model": ErrorResponse},
    },
    summary="List all notes, newest first",
)
async def list_notes(
    service: NoteService = Depends(get_note_service),
) -> NoteListEnvelope:
    notes = await service.list_notes()
    return NoteListEnvelope(data=notes)


@router.post(
    "/notes",
    response_model=NoteEnvelope,
    responses={
        400: {"description": "Title missing or blank", "model": ErrorResponse},
        500: {"description": "Notes document unreadable or unwritable", "model": ErrorResponse},
    },
    summary="Create a note",
    description=(
        "Creates a note from `title` and optional `content`. Both are trimmed; "
        "the new note is placed first in the collection."
    ),
)
async def create_note(
    payload: Optional[NoteCreate] = Body(default=None),
    service: NoteService = Depends(get_note_service),
) -> NoteEnvelope:
    """
    Create a single note.

    An empty body is treated like `{}`, so it answers 400 "title required".
    """
    payload = payload or NoteCreate()
    note = await service.create_note(title=payload.title, content=payload.content)
    return NoteEnvelope(data=note)


@router.delete(
    "/notes/{note_id}",
    response_model=DeleteResponse,
    responses={
        404: {"description": "No note with this id", "model": ErrorResponse},
        500: {"description": "Notes document unreadable or unwritable", "model": ErrorResponse},
    },
    summary="Delete a note by id",
)
async def delete_note(
    note_id: str,
    service: NoteService = Depends(get_note_service),
) -> DeleteResponse:
    """
    Delete a single note.

    Unknown ids answer 404 and leave the notes document untouched.
    """
    await service.delete_note(note_id)
    return DeleteResponse(deleted_id=note_id)
