"""
NoteKeeper Backend — Application Package Initializer
=====================================================

What: Marks the `notekeeper` directory as a Python package.
Why:  Enables module imports like `from notekeeper.config import settings`.
Who:  Used implicitly by Python's import system and explicitly by pytest and uvicorn.

Architecture Note:
    The backend follows a layered layout:

    ┌─────────────────────────────────────┐
    │     Routes (JSON API + HTML views)  │  ← HTTP concerns only
    ├─────────────────────────────────────┤
    │         Services (Business Logic)   │  ← Normalization, ordering, audit
    ├─────────────────────────────────────┤
    │       Models & Schemas (Data)       │  ← Note record + request shapes
    ├─────────────────────────────────────┤
    │        NoteStore (In-memory)        │  ← Owned by the app instance
    └─────────────────────────────────────┘
"""

__version__ = "1.0.0"
