"""
NoteKeeper Backend — Note Service (Business Logic)
====================================================

What:  Every sanctioned read and mutation of the note collection.
Why:   Keeps defaulting, partial updates, presentation ordering and audit
       logging out of the route handlers.
How:   Stateless methods that receive the NoteStore explicitly, the same way
       a per-request database session would be passed in.
Who:   Called by the JSON routes and the HTML page routes.

Operations:
    list_notes      every note, storage order
    dashboard       (pinned in storage order, unpinned newest-updated first)
    get_note        note or NotFoundError
    create_note     normalized NoteCreate → new Note appended
    update_note     partial update; updated_at always advances
    delete_note     removed count (0 or 1)
    bulk_delete     all-flag or id list; removed count

Every mutation writes one audit line to the module logger. The log is for
operational visibility only; nothing reads it back.
"""

import logging
from typing import List, Tuple

from notekeeper.exceptions import NotFoundError, ValidationError
from notekeeper.models.note import Note, new_note_id, utc_now
from notekeeper.schemas.note import BulkDeleteRequest, NoteCreate, NoteUpdate
from notekeeper.store import NoteStore

logger = logging.getLogger(__name__)


class NoteService:
    """
    Business logic layer for note operations.

    Error Handling Strategy:
        Only two failures exist: a missing id (NotFoundError) and an unusable
        bulk-delete body (ValidationError). Both propagate to the global
        handlers registered in main.py.
    """

    def list_notes(self, store: NoteStore) -> List[Note]:
        """Every note, unfiltered, in storage order. No pagination."""
        return store.all()

    def dashboard(self, store: NoteStore) -> Tuple[List[Note], List[Note]]:
        """
        Split the collection into the two dashboard views.

        Returns:
            (pinned, recent): pinned notes in storage order, and unpinned
            notes sorted by updated_at descending. sorted() is stable, so
            ties keep their storage order.
        """
        notes = store.all()
        pinned = [note for note in notes if note.pinned]
        recent = sorted(
            (note for note in notes if not note.pinned),
            key=lambda note: note.updated_at,
            reverse=True,
        )
        return pinned, recent

    def get_note(self, store: NoteStore, note_id: str) -> Note:
        """
        Raises:
            NotFoundError: No note with this id (→ 404)
        """
        note = store.get(note_id)
        if note is None:
            raise NotFoundError(resource="Note", resource_id=note_id)
        return note

    def create_note(self, store: NoteStore, data: NoteCreate) -> Note:
        """
        Append a new note built from an already-normalized request.

        Caller-supplied timestamps are trusted verbatim; missing ones become
        "now". Always succeeds.
        """
        now = utc_now()
        note = Note(
            id=new_note_id(),
            title=data.title,
            content=data.content,
            tags=list(data.tags),
            color=data.color,
            pinned=data.pinned,
            created_at=data.created_at or now,
            updated_at=data.updated_at or now,
        )
        store.add(note)
        logger.info(
            "Created note: id=%s title=%r pinned=%s", note.id, note.title, note.pinned
        )
        logger.info("Total notes: %d", len(store))
        return note

    def update_note(self, store: NoteStore, note_id: str, data: NoteUpdate) -> Note:
        """
        Apply a partial update in place.

        Fields left as None keep their prior value. This means an empty
        title/content/color cannot clear the field: "" is indistinguishable
        from "not sent". updated_at is set to now even if nothing changed.

        Raises:
            NotFoundError: No note with this id (→ 404)
        """
        note = self.get_note(store, note_id)

        if data.title is not None:
            note.title = data.title
        if data.content is not None:
            note.content = data.content
        if data.tags is not None:
            note.tags = list(data.tags)
        if data.color is not None:
            note.color = data.color
        if data.pinned is not None:
            note.pinned = data.pinned
        note.updated_at = utc_now()

        logger.info(
            "Updated note: id=%s title=%r pinned=%s", note.id, note.title, note.pinned
        )
        return note

    def delete_note(self, store: NoteStore, note_id: str) -> int:
        """
        Remove one note. Returns the removed count (0 or 1); the caller
        decides whether 0 is a 404.
        """
        deleted = store.remove(note_id)
        if deleted:
            logger.info("Deleted note: %s", note_id)
        return deleted

    def bulk_delete(self, store: NoteStore, request: BulkDeleteRequest) -> int:
        """
        Remove many notes at once.

        A truthy `all` clears the collection and ignores `ids`. Otherwise
        `ids` must be a list; ids with no match are skipped silently.

        Raises:
            ValidationError: Neither a truthy `all` nor an `ids` list (→ 400)
        """
        if request.delete_all:
            deleted = store.clear()
            logger.info("Deleted all notes: %d removed", deleted)
            return deleted

        if not isinstance(request.ids, list):
            raise ValidationError(message="ids array required", field="ids")

        deleted = 0
        for note_id in request.ids:
            if isinstance(note_id, str):
                deleted += store.remove(note_id)
        logger.info("Bulk deleted %d notes (%d ids requested)", deleted, len(request.ids))
        return deleted


# ── Singleton Instance ────────────────────────────────────────────────────
# NoteService holds no state; the store is passed to every call
note_service = NoteService()
