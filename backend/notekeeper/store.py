"""
NoteKeeper Backend — In-Memory Note Store
===========================================

What:  The authoritative collection of notes, plus the FastAPI dependency
       that hands it to route handlers.
Why:   One explicitly owned object instead of module-level state: the app
       factory creates it, attaches it to `app.state`, and tests build their
       own.
How:   An insertion-ordered dict keyed by note id. Updates mutate the stored
       record in place, so they keep its position; deletions leave the
       relative order of survivors unchanged.
When:  Created once per application instance; cleared on shutdown.

Concurrency:
    All access happens from synchronous service calls on the event loop
    thread. No handler awaits between reading and mutating the store, so
    no lock is used.
"""

from datetime import datetime, timedelta
from typing import Dict, List, Optional

from fastapi import Request

from notekeeper.models.note import Note, utc_now


class NoteStore:
    """
    Insertion-ordered mapping of id → Note.

    The store only holds records; defaulting, ordering and audit logging
    belong to NoteService.
    """

    def __init__(self, notes: Optional[List[Note]] = None):
        self._notes: Dict[str, Note] = {}
        for note in notes or []:
            self.add(note)

    def __len__(self) -> int:
        return len(self._notes)

    def __contains__(self, note_id: object) -> bool:
        return note_id in self._notes

    def all(self) -> List[Note]:
        """Every note, in storage order."""
        return list(self._notes.values())

    def get(self, note_id: str) -> Optional[Note]:
        return self._notes.get(note_id)

    def add(self, note: Note) -> Note:
        if note.id in self._notes:
            raise KeyError(f"Duplicate note id {note.id}")
        self._notes[note.id] = note
        return note

    def remove(self, note_id: str) -> int:
        """Remove one note; returns how many were removed (0 or 1)."""
        return 1 if self._notes.pop(note_id, None) is not None else 0

    def clear(self) -> int:
        """Remove every note; returns the prior count."""
        count = len(self._notes)
        self._notes.clear()
        return count

    @classmethod
    def seeded(cls, now: Optional[datetime] = None) -> "NoteStore":
        """A store holding the sample notes a fresh process starts with."""
        return cls(seed_notes(now))


# ── Seed Data ─────────────────────────────────────────────────────────────
# Six sample notes, two pinned. Relative timestamps are computed from `now`
# so the dashboard shows "Edited 2h ago" / "Edited yesterday" on startup.
def seed_notes(now: Optional[datetime] = None) -> List[Note]:
    now = now or utc_now()
    two_hours_ago = now - timedelta(hours=2)
    yesterday = now - timedelta(days=1)

    def fixed(day: str) -> datetime:
        return datetime.fromisoformat(f"{day}T00:00:00+00:00")

    return [
        Note(
            title="Grocery List",
            content="Milk, Eggs, Bread, Coffee beans, Almond milk, Greek yogurt, Berries",
            tags=["shopping"],
            pinned=True,
            created_at=two_hours_ago,
            updated_at=two_hours_ago,
        ),
        Note(
            title="App Ideas 2024",
            content="Fitness tracker with social features, Plant watering reminder with AI detection...",
            tags=["ideas"],
            pinned=True,
            created_at=yesterday,
            updated_at=yesterday,
        ),
        Note(
            title="Meeting Notes: Q3 Roadmap",
            content="Attendees: Sarah, Mike, Jessica. Action items: Define MVP scope...",
            tags=["work", "meeting"],
            created_at=fixed("2023-10-24"),
            updated_at=fixed("2023-10-24"),
        ),
        Note(
            title="Book Recommendations",
            content="The Pragmatic Programmer, Clean Code, Atomic Habits, Deep Work",
            tags=["books"],
            created_at=fixed("2023-10-22"),
            updated_at=fixed("2023-10-22"),
        ),
        Note(
            title="Workout Plan",
            content="Mon: Chest/Tri, Tue: Back/Bi, Wed: Legs, Thu: Rest, Fri: Shoulders",
            tags=["fitness"],
            created_at=fixed("2023-10-20"),
            updated_at=fixed("2023-10-20"),
        ),
        Note(
            title="Gift Ideas",
            content="Mom: Scarf, Dad: Drill set, Sis: Gift card",
            tags=["personal"],
            created_at=fixed("2023-10-15"),
            updated_at=fixed("2023-10-15"),
        ),
    ]


# ── Store Dependency ──────────────────────────────────────────────────────
def get_note_store(request: Request) -> NoteStore:
    """
    FastAPI dependency returning the store owned by the running app.

    Example usage in a route:
        @router.get("/notes")
        async def list_notes(store: NoteStore = Depends(get_note_store)):
            return note_service.list_notes(store)
    """
    return request.app.state.note_store
