"""
Notekeeper — JSON Document Store
==================================

What:  Durable representation of the note collection as one JSON document.
How:   Whole-document in, whole-document out. load() reads and validates the
       full array; save() serializes the full array to a temporary sibling
       file and swaps it over the document with os.replace.
Who:   Owned by NoteService, which serializes access to it. The store itself
       takes no locks.

File lifecycle:
    first load()  → document missing → written as "[]" → returns []
    save(notes)   → notes.json.tmp written + fsynced → replaces notes.json
    any I/O or parse failure → StorageError
"""

import asyncio
import json
import logging
import os
from pathlib import Path
from typing import List, Sequence, Union

import aiofiles
import aiofiles.os
from pydantic import ValidationError as SchemaValidationError

from notekeeper.exceptions import StorageError
from notekeeper.models.note import Note, NoteList

logger = logging.getLogger(__name__)


class NoteStore:
    """
    Reads and writes the full note collection.

    Args:
        path: Location of the notes document. Parent directories are created
              on the first write.
    """

    def __init__(self, path: Union[str, Path]):
        self.path = Path(path)
        self._tmp_path = self.path.with_suffix(self.path.suffix + ".tmp")

    async def load(self) -> List[Note]:
        """
        Return every stored note, newest first.

        Creates the document containing an empty array when it does not exist.

        Raises:
            StorageError: The document exists but cannot be read, is not valid UTF-8
                          JSON, or is not an array of note objects.
        """
        try:
            async with aiofiles.open(self.path, "rb") as f:
                raw = await f.read()
        except FileNotFoundError:
            logger.info("Notes document %s not found, creating an empty one", self.path)
            await self.save([])
            return []
        except OSError as e:
            logger.error("Failed to read notes document %s: %s", self.path, str(e))
            raise StorageError(
                message="Failed to load notes",
                context={"path": str(self.path), "os_error": str(e)},
            )

        try:
            notes = NoteList.validate_python(json.loads(raw.decode("utf-8")))
        except (UnicodeDecodeError, json.JSONDecodeError, SchemaValidationError) as e:
            logger.error("Notes document %s is malformed: %s", self.path, str(e))
            raise StorageError(
                message="Failed to load notes",
                context={"path": str(self.path), "parse_error": str(e)},
            )

        logger.debug("Loaded %d notes from %s", len(notes), self.path)
        return notes

    async def save(self, notes: Sequence[Note]) -> None:
        """
        Overwrite the document with the given notes, in order.

        Raises:
            StorageError: Directory creation, write or replace failed. The
                          previous document is left in place.
        """
        payload = json.dumps(
            [note.to_document() for note in notes],
            ensure_ascii=False,
            indent=2,
        )

        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            async with aiofiles.open(self._tmp_path, "w", encoding="utf-8") as f:
                await f.write(payload)
                await f.flush()
                await asyncio.to_thread(os.fsync, f.fileno())
            await aiofiles.os.replace(self._tmp_path, self.path)
        except OSError as e:
            logger.error("Failed to write notes document %s: %s", self.path, str(e))
            self._discard_tmp()
            raise StorageError(
                message="Failed to save notes",
                context={"path": str(self.path), "os_error": str(e)},
            )

        logger.debug("Saved %d notes to %s", len(notes), self.path)

    def _discard_tmp(self) -> None:
        """Best-effort removal of a leftover temporary file."""
        try:
            self._tmp_path.unlink(missing_ok=True)
        except OSError as e:
            logger.warning("Failed to remove temporary file %s: %s", self._tmp_path, str(e))
