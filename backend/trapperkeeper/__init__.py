"""
Trapper Keeper Backend — Application Package Initializer
=========================================================

What: Marks the `trapperkeeper` directory as a Python package.
Why:  Enables module imports like `from trapperkeeper.config import settings`.
Who:  Used implicitly by Python's import system and explicitly by pytest and uvicorn.

Architecture Note:
    The backend follows the same layered shape as any database-backed service,
    with the database swapped for an in-memory store:

    ┌─────────────────────────────────────┐
    │           Routes (API Layer)        │  ← HTTP concerns only
    ├─────────────────────────────────────┤
    │         Services (Business Logic)   │  ← Presence checks, not-found handling
    ├─────────────────────────────────────┤
    │          Models (Note / Issue)      │  ← Pydantic records
    ├─────────────────────────────────────┤
    │        Store (In-Memory List)       │  ← Owned by the app instance
    └─────────────────────────────────────┘

    Routes set status codes and delegate to services; services can be tested
    against a bare NoteStore without any HTTP machinery.
"""

__version__ = "1.0.0"
