"""
Trapper Keeper Backend — Test Configuration (conftest.py)
==========================================================

What:  Shared pytest fixtures for the entire test suite.
How:   pytest auto-discovers conftest.py and makes fixtures available to all tests.

Fixture Hierarchy (all function-scoped, created fresh for each test):
    ├── id_sequence: Deterministic id factory (note-1, note-2, ...)
    ├── note_store: Seeded NoteStore using id_sequence
    ├── empty_store: NoteStore with no notes
    ├── valid_payload: Body that passes the presence check
    └── test_client: HTTPX AsyncClient bound to a fresh app owning note_store
"""

import itertools
import os

# Override settings for testing BEFORE any app imports
os.environ["LOG_LEVEL"] = "WARNING"
os.environ["SEED_FIXTURES"] = "true"
os.environ["API_PREFIX"] = "/api/v1"

import pytest
import pytest_asyncio
from httpx import AsyncClient, ASGITransport

from trapperkeeper.store import NoteStore


@pytest.fixture
def id_sequence():
    """
    Provides an id factory yielding note-1, note-2, ... in order.

    Why: Generated ids are random by default; tests that assert on the id of
    a created note need them predictable.
    """
    counter = itertools.count(1)
    return lambda: f"note-{next(counter)}"


@pytest.fixture
def note_store(id_sequence):
    """A store holding the two fixture notes (ids '1' and '2')."""
    return NoteStore.seeded(id_factory=id_sequence)


@pytest.fixture
def empty_store(id_sequence):
    return NoteStore(id_factory=id_sequence)


@pytest.fixture
def valid_payload():
    return {
        "title": "Groceries",
        "color": "green",
        "issues": [
            {"id": 1, "body": "Milk", "completed": False},
            {"id": 2, "body": "Eggs", "completed": True},
        ],
    }


@pytest_asyncio.fixture
async def test_client(note_store):
    """
    Provides an async HTTP test client for endpoint testing.

    Each test gets its own app instance owning `note_store`, so mutations in
    one test never leak into another. Tests can inspect `note_store` directly
    to check side effects.

    Usage:
        async def test_health(test_client):
            response = await test_client.get("/health")
            assert response.status_code == 200
    """
    from trapperkeeper.main import create_app

    app = create_app(store=note_store)
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client
