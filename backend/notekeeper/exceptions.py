"""
NoteKeeper Backend — Custom Exception Hierarchy
=================================================

What:  Application-specific exceptions for the two failure modes the API has.
How:   Each exception carries a message and optional context dict.
       Global exception handlers (registered in main.py) catch these and
       return `{"error": <message>}` JSON bodies with the right status code.
Who:   Raised by the note service; caught by global handlers.

Exception Hierarchy:
    NoteKeeperError (base)
    ├── ValidationError   → 400 Bad Request
    └── NotFoundError     → 404 Not Found

Anything else is unexpected and falls through to the catch-all 500 handler.
Create and update never raise ValidationError: their input is normalized,
not rejected.
"""

from typing import Any, Dict, Optional


class NoteKeeperError(Exception):
    """
    Base exception for all NoteKeeper application errors.

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


class ValidationError(NoteKeeperError):
    """
    Raised when client input cannot be normalized into a usable request.

    When:    Bulk delete called with neither a truthy `all` flag nor an `ids` list.
    HTTP:    400 Bad Request
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


class NotFoundError(NoteKeeperError):
    """
    Raised when a requested note does not exist.

    When:    GET/PUT/DELETE /api/notes/{id} with an unknown id.
    HTTP:    404 Not Found

    The store returns None for missing ids; the service converts that into
    this exception so routes never inspect None themselves.
    """

    def __init__(
        self,
        resource: str = "Note",
        resource_id: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None,
    ):
        ctx = context or {}
        ctx["resource"] = resource
        if resource_id:
            ctx["resource_id"] = resource_id
        super().__init__(message=f"{resource} not found", context=ctx)
        self.resource_id = resource_id
