"""
Trapper Keeper Backend — In-Memory Note Store
==============================================

What:  Ordered, lock-guarded list of Note records plus the FastAPI dependency
       that hands the app's store to route handlers.
Why:   The store is the only stateful component. It is owned by the app
       instance (app.state.note_store) rather than living as module state, so
       tests and embedding processes can inject their own.
How:   Every public method takes the store lock for its whole duration.
       Locate-then-mutate sequences (replace, remove) happen inside a single
       call, so a reader never observes a half-applied change even when
       handlers run on worker threads.

Ordering:
    Notes iterate in insertion order. Replace swaps a record at its current
    index; remove shifts everything after it left by one.
"""

import copy
import logging
import threading
import uuid
from typing import Any, Callable, Dict, Iterable, List, Optional

from starlette.requests import Request

from trapperkeeper.models.note import Note

logger = logging.getLogger(__name__)

# Two notes every seeded store starts with
SEED_NOTES: List[Dict[str, Any]] = [
    {
        "id": "1",
        "title": "Trapper Keeper",
        "color": "purple",
        "issues": [
            {"id": 21, "body": "Finish project", "completed": False},
            {"id": 22, "body": "Start project", "completed": False},
            {"id": 23, "body": "Test project", "completed": False},
            {"id": 24, "body": "Deploy to Heroku", "completed": False},
        ],
    },
    {
        "id": "2",
        "title": "This is a great note",
        "color": "blue",
        "issues": [{"id": 25, "body": "beep boop", "completed": True}],
    },
]


def generate_note_id() -> str:
    """Default id factory: a random UUID4 hex string."""
    return uuid.uuid4().hex


class NoteStore:
    """
    In-process collection of notes.

    Args:
        notes: Initial records, kept in the given order.
        id_factory: Zero-argument callable returning a candidate string id.
            Candidates that collide with an existing id are discarded.
    """

    def __init__(
        self,
        notes: Optional[Iterable[Note]] = None,
        id_factory: Callable[[], str] = generate_note_id,
    ):
        self._notes: List[Note] = list(notes or [])
        self._id_factory = id_factory
        self._lock = threading.RLock()

    @classmethod
    def seeded(cls, id_factory: Callable[[], str] = generate_note_id) -> "NoteStore":
        """A store holding fresh copies of SEED_NOTES."""
        notes = [Note.model_validate(copy.deepcopy(data)) for data in SEED_NOTES]
        return cls(notes=notes, id_factory=id_factory)

    def __len__(self) -> int:
        with self._lock:
            return len(self._notes)

    def all(self) -> List[Note]:
        """Snapshot of every note in store order."""
        with self._lock:
            return list(self._notes)

    def get(self, note_id: str) -> Optional[Note]:
        """First note whose id equals `note_id`, or None."""
        with self._lock:
            index = self._index_of(note_id)
            return self._notes[index] if index >= 0 else None

    def add(self, build: Callable[[str], Note]) -> Note:
        """
        Generate a unique id, build a note from it, and append it at the tail.

        `build` receives the new id and returns the record to store. It runs
        under the store lock, so it must not call back into the store.
        """
        with self._lock:
            note_id = self._new_id()
            note = build(note_id)
            self._notes.append(note)
            return note

    def replace(self, note_id: str, build: Callable[[Note], Note]) -> Optional[Note]:
        """
        Swap the note matching `note_id` for `build(existing)` at the same index.

        Returns the new record, or None when no note matches.
        """
        with self._lock:
            index = self._index_of(note_id)
            if index < 0:
                return None
            note = build(self._notes[index])
            self._notes[index] = note
            return note

    def remove(self, note_id: str) -> Optional[Note]:
        """Remove and return the note matching `note_id`, or None."""
        with self._lock:
            index = self._index_of(note_id)
            if index < 0:
                return None
            return self._notes.pop(index)

    def _index_of(self, note_id: str) -> int:
        for index, note in enumerate(self._notes):
            if note.id == note_id:
                return index
        return -1

    def _new_id(self) -> str:
        taken = {note.id for note in self._notes}
        while True:
            candidate = str(self._id_factory())
            if candidate not in taken:
                return candidate
            logger.debug("Discarding colliding note id %s", candidate)


# ── FastAPI Dependency ────────────────────────────────────────────────────

def get_note_store(request: Request) -> NoteStore:
    """
    FastAPI dependency returning the store owned by the running app.

    Usage:
        @router.get("/notes")
        async def list_notes(store: NoteStore = Depends(get_note_store)):
            ...
    """
    return request.app.state.note_store
