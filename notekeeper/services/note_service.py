"""
Notekeeper — Note Service (Business Logic)
============================================

What:  Validation, identity assignment and ordering policy on top of NoteStore.
How:   Every operation is one full load → modify → save cycle against the
       store, run under a per-instance asyncio.Lock so concurrent requests in
       this process never overwrite each other's changes.
Who:   Called by the /api/notes route handlers; receives its NoteStore from
       the application factory.

Operations:
    list_notes()                → store.load() unchanged (newest first)
    create_note(title, content) → validate, build Note, prepend, save
    delete_note(note_id)        → filter out, save; NotFoundError if absent
"""

import asyncio
import logging
from typing import List, Optional

from fastapi import Request

from notekeeper.exceptions import NotFoundError, ValidationError
from notekeeper.models.note import Note, new_note_id, utc_now
from notekeeper.store import NoteStore

logger = logging.getLogger(__name__)


class NoteService:
    """
    Business logic layer for note operations.

    Error Handling Strategy:
        Bad input raises ValidationError before the store is touched.
        A missing id raises NotFoundError without saving, so the document
        stays byte-for-byte unchanged. StorageError from the store propagates
        as-is.
    """

    def __init__(self, store: NoteStore):
        self.store = store
        self._lock = asyncio.Lock()

    async def list_notes(self) -> List[Note]:
        """Return the stored collection, newest first."""
        async with self._lock:
            return await self.store.load()

    async def create_note(self, title: Optional[str], content: Optional[str] = None) -> Note:
        """
        Create a note and put it at the head of the collection.

        Args:
            title:   Required. Surrounding whitespace is removed; blank or None
                     is rejected.
            content: Optional body, trimmed. None is stored as "".

        Returns:
            The created Note.

        Raises:
            ValidationError: Title missing or blank ("title required").
            StorageError:    The collection could not be loaded or saved.
        """
        clean_title = (title or "").strip()
        if not clean_title:
            raise ValidationError(message="title required", field="title")

        now = utc_now()
        note = Note(
            id=new_note_id(),
            title=clean_title,
            content=(content or "").strip(),
            created_at=now,
            updated_at=now,
        )

        async with self._lock:
            notes = await self.store.load()
            notes.insert(0, note)
            await self.store.save(notes)

        logger.info("Note %s created (%d notes total)", note.id, len(notes))
        return note

    async def delete_note(self, note_id: str) -> None:
        """
        Remove the note with the given id.

        Raises:
            NotFoundError: No note has this id. Nothing is written.
            StorageError:  The collection could not be loaded or saved.
        """
        async with self._lock:
            notes = await self.store.load()
            remaining = [note for note in notes if note.id != note_id]

            if len(remaining) == len(notes):
                logger.warning("Delete requested for unknown note %s", note_id)
                raise NotFoundError(resource="note", resource_id=note_id)

            await self.store.save(remaining)

        logger.info("Note %s deleted (%d notes left)", note_id, len(remaining))


# ── Request Dependency ────────────────────────────────────────────────────
def get_note_service(request: Request) -> NoteService:
    """
    FastAPI dependency returning the NoteService composed by create_app().

    The instance lives on app.state, so each application (and each test app)
    has its own store, lock and notes document.

    Example usage in a route:
        @router.get("/notes")
        async def list_notes(service: NoteService = Depends(get_note_service)):
            return await service.list_notes()
    """
    return request.app.state.note_service
