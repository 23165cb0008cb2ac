"""
NoteKeeper Backend — Note Record
==================================

What:  The strictly typed internal record for a single note.
Why:   Every request shape is normalized into this record exactly once,
       at the service boundary, so nothing downstream deals with loose input.
How:   A Pydantic model with snake_case attributes and camelCase aliases
       (`createdAt`, `updatedAt`) matching the JSON wire format.
Who:   Created and mutated by NoteService; held by NoteStore; serialized
       by the JSON routes and read by the HTML templates.

Lifecycle:
    1. Created by NoteService.create_note (id generated, defaults applied)
    2. Mutated in place by NoteService.update_note (updated_at advances)
    3. Removed by delete / bulk delete; ids are never reused
"""

import uuid
from datetime import datetime, timezone
from typing import List

from pydantic import BaseModel, ConfigDict, Field


def utc_now() -> datetime:
    """Current time as a timezone-aware UTC datetime."""
    return datetime.now(timezone.utc)


def new_note_id() -> str:
    """Opaque unique identifier for a new note."""
    return str(uuid.uuid4())


class Note(BaseModel):
    """
    A single user-authored note.

    `created_at` is fixed at creation; `updated_at` is reset by every
    successful update. Both are timezone-aware.
    """

    model_config = ConfigDict(populate_by_name=True)

    id: str = Field(default_factory=new_note_id, description="Unique note identifier (UUID4)")
    title: str = Field(default="Untitled", description="Note title")
    content: str = Field(default="", description="Note body text")
    tags: List[str] = Field(default_factory=list, description="Ordered tag labels")
    color: str = Field(default="default", description="UI color theme name")
    pinned: bool = Field(default=False, description="Shown in the pinned section")
    created_at: datetime = Field(
        default_factory=utc_now,
        alias="createdAt",
        description="When the note was created (UTC ISO 8601)",
    )
    updated_at: datetime = Field(
        default_factory=utc_now,
        alias="updatedAt",
        description="When the note was last updated (UTC ISO 8601)",
    )

    def __repr__(self) -> str:
        return f"<Note(id={self.id}, title={self.title!r}, pinned={self.pinned})>"
