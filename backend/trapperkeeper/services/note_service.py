"""
Trapper Keeper Backend — Note Service (Business Logic)
=======================================================

What:  The five note operations: list, create, get, replace, delete.
Why:   Keeps presence checks, not-found handling and the open/closed schema
       rules in one place, independent of HTTP concerns.
How:   Each method receives the NoteStore to act on (injected per request by
       the route layer) and raises ValidationError / NotFoundError, which the
       global handlers in main.py turn into 422 / 404 responses.

Presence check:
    A required field is missing when it is absent, None, False, "" or a
    numeric zero. Empty lists and dicts count as present, so a note may be
    created or replaced with `issues: []`.

Ordering on replace:
    The body is checked BEFORE the target note is located, so a bad body on
    an unknown id yields 422, not 404.
"""

import logging
from typing import Any, List, Mapping

from trapperkeeper.exceptions import NotFoundError, ValidationError
from trapperkeeper.models.note import Note
from trapperkeeper.store import NoteStore

logger = logging.getLogger(__name__)

REQUIRED_FIELDS = ("title", "color", "issues")


def is_present(value: Any) -> bool:
    """Truthiness as the API defines it: only None, False, "", 0 and NaN are missing."""
    if value is None or value is False:
        return False
    if isinstance(value, str):
        return value != ""
    if isinstance(value, (int, float)):
        # NaN is the only value not equal to itself
        return value != 0 and value == value
    return True


def missing_fields(payload: Mapping[str, Any]) -> List[str]:
    """Names from REQUIRED_FIELDS that fail the presence check, in declaration order."""
    return [name for name in REQUIRED_FIELDS if not is_present(payload.get(name))]


class NoteService:
    """
    Stateless business logic over a NoteStore.

    Responsibilities:
        - list_notes(): every note, in store order
        - create_note(): presence check, open-schema build, append
        - get_note(): lookup by id
        - replace_note(): presence check, lookup, closed-schema build in place
        - delete_note(): lookup and remove
    """

    def list_notes(self, store: NoteStore) -> List[Note]:
        return store.all()

    def create_note(self, store: NoteStore, payload: Mapping[str, Any]) -> Note:
        """
        Create a note from the whole request body.

        Extra fields in `payload` are kept on the stored record. A body-supplied
        `id` is ignored in favour of a freshly generated one.

        Raises:
            ValidationError: title, color or issues is missing
        """
        self._require_fields(payload)
        fields = dict(payload)

        note = store.add(lambda note_id: Note.from_fields(note_id, fields))
        logger.info("Note %s created", note.id)
        return note

    def get_note(self, store: NoteStore, note_id: str) -> Note:
        """
        Raises:
            NotFoundError: no note has this id
        """
        note = store.get(note_id)
        if note is None:
            raise NotFoundError(resource="Note", resource_id=note_id)
        return note

    def replace_note(
        self, store: NoteStore, note_id: str, payload: Mapping[str, Any]
    ) -> Note:
        """
        Fully replace a note's title, color and issues, keeping its id and position.

        Any field other than the three named ones is discarded.

        Raises:
            ValidationError: checked first, before the note is looked up
            NotFoundError: no note has this id
        """
        self._require_fields(payload)
        title, color, issues = (payload[name] for name in REQUIRED_FIELDS)

        note = store.replace(
            note_id, lambda existing: existing.replacing(title, color, issues)
        )

        if note is None:
            raise NotFoundError(resource="Note", resource_id=note_id)
        logger.info("Note %s replaced", note_id)
        return note

    def delete_note(self, store: NoteStore, note_id: str) -> None:
        """
        Raises:
            NotFoundError: no note has this id
        """
        if store.remove(note_id) is None:
            raise NotFoundError(resource="Note", resource_id=note_id)
        logger.info("Note %s deleted", note_id)

    @staticmethod
    def _require_fields(payload: Mapping[str, Any]) -> None:
        missing = missing_fields(payload)
        if missing:
            raise ValidationError(missing=missing)


# ── Singleton Instance ────────────────────────────────────────────────────
# NoteService holds no state of its own; the store is passed to every call
note_service = NoteService()
