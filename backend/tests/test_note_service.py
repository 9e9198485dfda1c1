"""
Trapper Keeper Backend — Note Service Unit Tests
=================================================

What:  Tests for NoteService business logic (list, create, get, replace, delete).
How:   Runs against real in-memory stores; no HTTP involved.

What we test:
    ✅ Presence check treats only None/False/""/0 as missing
    ✅ Create keeps extra fields and always uses the generated id
    ✅ Field values pass through as sent; only presence is checked
    ✅ Replace drops extra fields, keeps id and position
    ✅ Replace checks the body before looking up the note
    ✅ Not-found handling for get, replace and delete
"""

import pytest

from trapperkeeper.exceptions import NotFoundError, ValidationError
from trapperkeeper.services.note_service import NoteService, is_present, missing_fields


class TestPresenceCheck:

    @pytest.mark.parametrize("value", [None, False, "", 0, 0.0, float("nan")])
    def test_falsy_values_are_missing(self, value):
        assert is_present(value) is False

    @pytest.mark.parametrize("value", [[], {}, "x", 1, -1, True, [{"id": 1}], "0"])
    def test_empty_containers_and_truthy_values_are_present(self, value):
        assert is_present(value) is True

    def test_missing_fields_lists_every_offender_in_order(self):
        assert missing_fields({}) == ["title", "color", "issues"]
        assert missing_fields({"title": "t", "issues": []}) == ["color"]
        assert missing_fields({"title": "t", "color": "c", "issues": []}) == []


class TestNoteServiceCreate:
    """Tests for the create_note workflow."""

    def setup_method(self):
        self.service = NoteService()

    def test_create_appends_note(self, note_store, valid_payload):
        note = self.service.create_note(note_store, valid_payload)

        assert note.id == "note-1"
        assert note.title == "Groceries"
        assert [i["body"] for i in note.issues] == ["Milk", "Eggs"]
        assert note_store.all()[-1] == note
        assert len(note_store) == 3

    def test_create_keeps_extra_fields(self, note_store, valid_payload):
        note = self.service.create_note(note_store, {**valid_payload, "pinned": True})
        assert note.model_dump()["pinned"] is True

    def test_create_ignores_body_id(self, note_store, valid_payload):
        note = self.service.create_note(note_store, {**valid_payload, "id": "1"})
        assert note.id == "note-1"
        assert [n.id for n in note_store.all()] == ["1", "2", "note-1"]

    def test_create_accepts_empty_issues(self, empty_store):
        note = self.service.create_note(
            empty_store, {"title": "T", "color": "red", "issues": []}
        )
        assert note.issues == []

    @pytest.mark.parametrize("field", ["title", "color", "issues"])
    def test_create_missing_field_raises(self, note_store, valid_payload, field):
        payload = {k: v for k, v in valid_payload.items() if k != field}

        with pytest.raises(ValidationError) as exc_info:
            self.service.create_note(note_store, payload)

        assert exc_info.value.missing == [field]
        assert len(note_store) == 2

    def test_create_empty_title_raises(self, note_store, valid_payload):
        with pytest.raises(ValidationError):
            self.service.create_note(note_store, {**valid_payload, "title": ""})

    @pytest.mark.parametrize(
        "payload",
        [
            {"title": 5, "color": "red", "issues": []},
            {"title": "T", "color": "red", "issues": [{"body": "no id", "completed": False}]},
            {"title": "T", "color": "red", "issues": [{"id": 1.5, "body": "x", "completed": False}]},
            {"title": "T", "color": "red", "issues": "abc"},
        ],
    )
    def test_create_stores_truthy_fields_unchecked(self, note_store, payload):
        note = self.service.create_note(note_store, payload)

        assert note.title == payload["title"]
        assert note.issues == payload["issues"]
        assert len(note_store) == 3


class TestNoteServiceGet:

    def setup_method(self):
        self.service = NoteService()

    def test_get_note_found(self, note_store):
        note = self.service.get_note(note_store, "1")
        assert note.title == "Trapper Keeper"

    def test_get_note_not_found(self, note_store):
        with pytest.raises(NotFoundError) as exc_info:
            self.service.get_note(note_store, "nonexistent")
        assert exc_info.value.message == "Note not found"
        assert exc_info.value.resource_id == "nonexistent"

    def test_list_notes_in_store_order(self, note_store, valid_payload):
        created = self.service.create_note(note_store, valid_payload)
        assert [n.id for n in self.service.list_notes(note_store)] == ["1", "2", created.id]


class TestNoteServiceReplace:

    def setup_method(self):
        self.service = NoteService()

    def test_replace_swaps_fields_in_place(self, note_store):
        self.service.replace_note(
            note_store,
            "1",
            {
                "title": "T2",
                "color": "green",
                "issues": [{"id": 99, "body": "x", "completed": False}],
            },
        )

        notes = note_store.all()
        assert [n.id for n in notes] == ["1", "2"]
        assert notes[0].title == "T2"
        assert notes[0].color == "green"
        assert [i["id"] for i in notes[0].issues] == [99]

    def test_replace_stores_issues_as_sent(self, note_store):
        issues = [{"id": "99", "body": 7}]
        self.service.replace_note(note_store, "1", {"title": 1, "color": "c", "issues": issues})

        note = note_store.get("1")
        assert note.title == 1
        assert note.issues == [{"id": "99", "body": 7}]

    def test_replace_discards_extra_fields(self, note_store, valid_payload):
        self.service.replace_note(note_store, "2", {**valid_payload, "pinned": True, "id": "x"})

        note = note_store.get("2")
        assert "pinned" not in note.model_dump()
        assert note.id == "2"

    def test_replace_drops_extra_fields_from_create(self, note_store, valid_payload):
        created = self.service.create_note(note_store, {**valid_payload, "pinned": True})
        self.service.replace_note(note_store, created.id, valid_payload)
        assert "pinned" not in note_store.get(created.id).model_dump()

    def test_replace_unknown_id_raises_not_found(self, note_store, valid_payload):
        with pytest.raises(NotFoundError):
            self.service.replace_note(note_store, "missing", valid_payload)

    def test_replace_checks_body_before_lookup(self, note_store):
        with pytest.raises(ValidationError):
            self.service.replace_note(note_store, "missing", {"title": "only"})

    def test_replace_missing_field_leaves_note_untouched(self, note_store):
        with pytest.raises(ValidationError):
            self.service.replace_note(note_store, "1", {"title": "T", "color": "red"})
        assert note_store.get("1").title == "Trapper Keeper"


class TestNoteServiceDelete:

    def setup_method(self):
        self.service = NoteService()

    def test_delete_removes_exactly_one(self, note_store):
        self.service.delete_note(note_store, "1")
        assert [n.id for n in note_store.all()] == ["2"]

    def test_delete_unknown_id_raises_not_found(self, note_store):
        with pytest.raises(NotFoundError):
            self.service.delete_note(note_store, "missing")
        assert len(note_store) == 2
