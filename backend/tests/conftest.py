"""
NoteKeeper Backend — Test Configuration (conftest.py)
======================================================

What:  Shared pytest fixtures for the entire test suite.
How:   pytest auto-discovers conftest.py and makes fixtures available to all tests.

Fixture Hierarchy (all function-scoped, created fresh for each test):
    ├── note_store: Empty NoteStore
    ├── seeded_store: NoteStore holding the six sample notes
    ├── sample_note_data: Raw create payload in wire format
    └── test_client: HTTPX AsyncClient bound to an app that owns seeded_store
"""

import os
from datetime import datetime, timezone

import pytest
import pytest_asyncio
from httpx import AsyncClient, ASGITransport


# ══════════════════════════════════════════════════════════════════════════
# Environment Setup
# ══════════════════════════════════════════════════════════════════════════

# Set BEFORE any notekeeper imports so the settings singleton picks them up
os.environ["LOG_LEVEL"] = "WARNING"
os.environ["SEED_NOTES"] = "false"

from notekeeper.store import NoteStore  # noqa: E402

FIXED_NOW = datetime(2024, 6, 1, 12, 0, tzinfo=timezone.utc)


@pytest.fixture
def note_store():
    """A fresh, empty store."""
    return NoteStore()


@pytest.fixture
def seeded_store():
    """
    The startup collection: 6 notes, 2 pinned.

    Timestamps are computed from FIXED_NOW so ordering assertions are stable.
    """
    return NoteStore.seeded(now=FIXED_NOW)


@pytest.fixture
def sample_note_data():
    return {
        "title": "Reading list",
        "content": "Dune, Neuromancer",
        "tags": "books, sci-fi",
        "color": "blue",
        "pinned": "true",
    }


@pytest_asyncio.fixture
async def test_client(seeded_store):
    """
    Async HTTP client talking to an app that owns `seeded_store`.

    Usage:
        async def test_list(test_client, seeded_store):
            response = await test_client.get("/api/notes")
            assert len(response.json()) == len(seeded_store)
    """
    from notekeeper.main import create_app

    app = create_app(store=seeded_store)
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client
