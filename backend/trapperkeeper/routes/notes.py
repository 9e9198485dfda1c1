"""
Trapper Keeper Backend — Notes Route Handlers
==============================================

What:  CRUD endpoints for notes: list, create, get, replace, delete.
How:   Each handler resolves the app's NoteStore via dependency injection and
       delegates to NoteService. Errors propagate as ValidationError /
       NotFoundError and are rendered by the global handlers in main.py.

Bodies are taken as plain JSON objects rather than request models: the only
check the API makes is a presence check on title, color and issues, and
create keeps every other field the client sends.
"""

from typing import Any, Dict, List, Optional

from fastapi import APIRouter, Body, Depends, Response

from trapperkeeper.models.note import Note
from trapperkeeper.services.note_service import note_service
from trapperkeeper.store import NoteStore, get_note_store

router = APIRouter(prefix="/notes", tags=["Notes"])

NOT_FOUND_RESPONSE = {404: {"description": "Note not found"}}
MISSING_FIELDS_RESPONSE = {422: {"description": "title, color or issues missing"}}


@router.get(
    "",
    response_model=List[Note],
    summary="List every note",
    description="Returns all notes in store order. No pagination or filtering.",
)
async def list_notes(
    response: Response,
    store: NoteStore = Depends(get_note_store),
) -> List[Note]:
    notes = note_service.list_notes(store)
    response.headers["X-Total-Count"] = str(len(notes))
    return notes


@router.post(
    "",
    response_model=Note,
    status_code=201,
    responses=MISSING_FIELDS_RESPONSE,
    summary="Create a note",
    description=(
        "Creates a note from the request body and appends it to the collection. "
        "Fields beyond title, color and issues are stored as sent."
    ),
)
async def create_note(
    payload: Optional[Dict[str, Any]] = Body(default=None),
    store: NoteStore = Depends(get_note_store),
) -> Note:
    return note_service.create_note(store, payload or {})


@router.get(
    "/{note_id}",
    response_model=Note,
    responses=NOT_FOUND_RESPONSE,
    summary="Get a note by id",
)
async def get_note(
    note_id: str,
    store: NoteStore = Depends(get_note_store),
) -> Note:
    return note_service.get_note(store, note_id)


@router.put(
    "/{note_id}",
    status_code=204,
    response_class=Response,
    responses={**MISSING_FIELDS_RESPONSE, **NOT_FOUND_RESPONSE},
    summary="Replace a note",
    description=(
        "Replaces title, color and issues of an existing note, keeping its id "
        "and position. Other body fields are ignored. The body is checked "
        "before the note is looked up."
    ),
)
async def replace_note(
    note_id: str,
    payload: Optional[Dict[str, Any]] = Body(default=None),
    store: NoteStore = Depends(get_note_store),
) -> Response:
    note_service.replace_note(store, note_id, payload or {})
    return Response(status_code=204)


@router.delete(
    "/{note_id}",
    status_code=204,
    response_class=Response,
    responses=NOT_FOUND_RESPONSE,
    summary="Delete a note",
)
async def delete_note(
    note_id: str,
    store: NoteStore = Depends(get_note_store),
) -> Response:
    note_service.delete_note(store, note_id)
    return Response(status_code=204)
