"""
NoteKeeper Backend — Pydantic Request/Response Schemas
=======================================================

What:  Pydantic models defining the API contract between UI and backend.
Why:   Loose client input (form posts send strings, JSON sends anything) is
       normalized once, here, into strictly typed values.
How:   Every request field is optional and has a `mode="before"` validator
       that calls one documented normalization function. Create and update
       never reject input: malformed values are coerced or defaulted.

Normalization rules:
    text fields      falsy (None, "", False, 0) means "not provided"
    tags             list or "," separated string; every label trimmed,
                     null/empty labels dropped, order kept
    pinned           True or "true" is pinned, anything else is not
    timestamps       parseable values honoured, anything else ignored;
                     naive datetimes are taken as UTC

Update-specific rules:
    title/content/color   not provided → prior value kept (so they cannot be
                          cleared to "" through an update)
    tags                  None/"" → prior tags kept; a list, even [], replaces
    pinned                any present value overrides, absence keeps prior
"""

from datetime import date, datetime, time, timezone
from typing import Any, List, Optional

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter, field_validator
from pydantic import ValidationError as PydanticValidationError

from notekeeper.models.note import Note

_DATETIME_ADAPTER = TypeAdapter(datetime)


# ══════════════════════════════════════════════════════════════════════════
# Normalization Functions — one per field rule
# ══════════════════════════════════════════════════════════════════════════


def is_blank(value: Any) -> bool:
    """True for values a form or JSON client uses to mean "nothing here"."""
    if value is None or isinstance(value, bool):
        return not value
    if isinstance(value, (int, float)):
        return value == 0 or value != value  # NaN
    return value == ""


def as_text(value: Any) -> str:
    """Coerce a scalar to text; booleans use their JSON spelling."""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, str):
        return value
    return str(value)


def normalize_text(value: Any) -> Optional[str]:
    """Text field value, or None when the client sent nothing usable."""
    if is_blank(value):
        return None
    return as_text(value)


def normalize_tags(value: Any) -> Optional[List[str]]:
    """
    Tags from a list or a comma-delimited string.

    Both forms get the same label rule: each label is trimmed, and null or
    empty labels are dropped; order is kept. Returns None for blank input so
    callers can tell "not provided" apart from an explicit empty list.
    """
    if isinstance(value, (list, tuple)):
        labels = [as_text(tag) for tag in value if tag is not None]
    elif is_blank(value):
        return None
    else:
        labels = as_text(value).split(",")
    return [label.strip() for label in labels if label.strip()]


def normalize_pinned(value: Any) -> bool:
    """Only the boolean true or the literal string "true" pins a note."""
    return value is True or (isinstance(value, str) and value == "true")


def normalize_timestamp(value: Any) -> Optional[datetime]:
    """Parse a caller-supplied timestamp; unparseable input yields None."""
    if is_blank(value):
        return None
    if isinstance(value, datetime):
        parsed = value
    elif isinstance(value, date):
        parsed = datetime.combine(value, time.min)
    else:
        try:
            parsed = _DATETIME_ADAPTER.validate_python(value)
        except PydanticValidationError:
            try:
                parsed = datetime.combine(date.fromisoformat(as_text(value)), time.min)
            except ValueError:
                return None
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed


# ══════════════════════════════════════════════════════════════════════════
# Request Models — What the client sends
# ══════════════════════════════════════════════════════════════════════════


class NoteCreate(BaseModel):
    """
    Body of POST /api/notes. Every field is optional.

    Defaults: title "Untitled", content "", tags [], color "default",
    pinned false. Timestamps left as None are set to "now" by the service.
    """

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    title: str = "Untitled"
    content: str = ""
    tags: List[str] = Field(default_factory=list)
    color: str = "default"
    pinned: bool = False
    created_at: Optional[datetime] = Field(default=None, alias="createdAt")
    updated_at: Optional[datetime] = Field(default=None, alias="updatedAt")

    @field_validator("title", mode="before")
    @classmethod
    def _title(cls, v: Any) -> str:
        return normalize_text(v) or "Untitled"

    @field_validator("content", mode="before")
    @classmethod
    def _content(cls, v: Any) -> str:
        return normalize_text(v) or ""

    @field_validator("color", mode="before")
    @classmethod
    def _color(cls, v: Any) -> str:
        return normalize_text(v) or "default"

    @field_validator("tags", mode="before")
    @classmethod
    def _tags(cls, v: Any) -> List[str]:
        return normalize_tags(v) or []

    @field_validator("pinned", mode="before")
    @classmethod
    def _pinned(cls, v: Any) -> bool:
        return normalize_pinned(v)

    @field_validator("created_at", "updated_at", mode="before")
    @classmethod
    def _timestamp(cls, v: Any) -> Optional[datetime]:
        return normalize_timestamp(v)


class NoteUpdate(BaseModel):
    """
    Body of PUT /api/notes/{id}. None means "keep the prior value".

    `createdAt` and `updatedAt` are accepted but ignored: the server owns
    both timestamps after creation.
    """

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    title: Optional[str] = None
    content: Optional[str] = None
    tags: Optional[List[str]] = None
    color: Optional[str] = None
    pinned: Optional[bool] = None

    @field_validator("title", "content", "color", mode="before")
    @classmethod
    def _text(cls, v: Any) -> Optional[str]:
        return normalize_text(v)

    @field_validator("tags", mode="before")
    @classmethod
    def _tags(cls, v: Any) -> Optional[List[str]]:
        return normalize_tags(v)

    @field_validator("pinned", mode="before")
    @classmethod
    def _pinned(cls, v: Any) -> bool:
        # Runs only when the key is present, so an explicit null unpins
        return normalize_pinned(v)


class BulkDeleteRequest(BaseModel):
    """
    Body of DELETE /api/notes: `{"all": true}` or `{"ids": [...]}`.

    Both fields are loosely typed on purpose; the service decides whether
    the combination is usable and raises ValidationError otherwise.
    """

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    ids: Any = None
    delete_all: Any = Field(default=None, alias="all")


# ══════════════════════════════════════════════════════════════════════════
# Response Models — What the API returns
# ══════════════════════════════════════════════════════════════════════════


class DeleteResponse(BaseModel):
    success: bool = True


class BulkDeleteResponse(BaseModel):
    success: bool = True
    deleted: int = Field(description="Number of notes actually removed")


class DashboardResponse(BaseModel):
    """
    The dashboard split: pinned notes in storage order, then every unpinned
    note ordered by most recent update.
    """

    model_config = ConfigDict(populate_by_name=True)

    pinned_notes: List[Note] = Field(alias="pinnedNotes")
    recent_notes: List[Note] = Field(alias="recentNotes")


class ErrorResponse(BaseModel):
    """Error body shared by every 4xx/5xx response: `{"error": "<message>"}`."""

    error: str = Field(description="Human-readable error description")


class HealthResponse(BaseModel):
    status: str = Field(description="Overall service status")
    version: str = Field(description="Application version")
    notes: int = Field(description="Number of notes currently held")
    uptime_seconds: float = Field(description="Seconds since service started")
