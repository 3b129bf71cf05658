"""
Notekeeper — Custom Exception Hierarchy
=========================================

What:  Application-specific exceptions for the note CRUD workflow.
How:   Each exception carries a user-facing message and an optional context
       dict. Global handlers registered in main.py turn them into the
       `{success: false, error}` response envelope with the matching status.
Who:   Raised by NoteStore and NoteService; caught by the handlers.

Exception Hierarchy:
    NotekeeperError (base)
    ├── ValidationError   → 400 Bad Request (client can fix the input)
    ├── NotFoundError     → 404 Not Found
    └── StorageError      → 500 Internal Server Error (I/O or parse failure)
"""

from typing import Any, Dict, Optional


class NotekeeperError(Exception):
    """
    Base exception for all Notekeeper application errors.

    Attributes:
        message:  User-facing error description (safe to return in API response)
        context:  Additional debug info (logged but NOT returned to client)
    """

    def __init__(
        self,
        message: str = "An unexpected error occurred",
        context: Optional[Dict[str, Any]] = None,
    ):
        self.message = message
        self.context = context or {}
        super().__init__(self.message)


class ValidationError(NotekeeperError):
    """
    Raised when client input fails a business rule.

    When:    Blank or missing note title.
    HTTP:    400 Bad Request

    Schema-level problems (wrong JSON types) never reach the service; FastAPI
    rejects them with 422 first.
    """

    def __init__(
        self,
        message: str = "Validation failed",
        field: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None,
    ):
        ctx = context or {}
        if field:
            ctx["field"] = field
        super().__init__(message=message, context=ctx)
        self.field = field


class NotFoundError(NotekeeperError):
    """
    Raised when a requested resource does not exist.

    When:    DELETE /api/notes/{id} with an id that is not in the collection.
    HTTP:    404 Not Found
    """

    def __init__(
        self,
        resource: str = "resource",
        resource_id: Optional[str] = None,
        message: str = "not found",
        context: Optional[Dict[str, Any]] = None,
    ):
        ctx = context or {}
        ctx["resource"] = resource
        if resource_id:
            ctx["resource_id"] = resource_id
        super().__init__(message=message, context=ctx)
        self.resource = resource
        self.resource_id = resource_id


class StorageError(NotekeeperError):
    """
    Raised when the notes document cannot be read, parsed or written.

    When:    Permission denied, disk full, malformed JSON, document is not an
             array of notes.
    HTTP:    500 Internal Server Error

    Recovery:
        Not retried automatically. The file path and OS error go into
        `context` for the log; the client only sees `message`.
    """

    def __init__(
        self,
        message: str = "Note storage operation failed",
        context: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message=message, context=context)
