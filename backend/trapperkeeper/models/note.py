"""
Trapper Keeper Backend — Note Model
====================================

What:  Pydantic record for the notes held in the in-memory store.
Why:   The same shape is stored, returned by the API, and documented in
       the OpenAPI schema, so one model serves all three.

No type checking:
    The only rule the API enforces on a body is the presence check in the
    note service. Field values are stored exactly as sent, so `title`,
    `color` and `issues` are typed `Any` and an issue is whatever JSON the
    client put in the list (conventionally `{id, body, completed}`).

Schema asymmetry:
    Create builds a Note from the whole request body, so unknown fields are
    kept on the record (`extra="allow"`). Replace builds a Note from exactly
    `title`, `color` and `issues`, so anything else in the body is dropped.
    See Note.from_fields and Note.replacing.
"""

from typing import Any, Dict

from pydantic import BaseModel, ConfigDict, Field


class Note(BaseModel):
    """
    A note with a title, a color tag and an ordered list of issues.

    `id` is always a string. It is assigned once at creation and carried
    over unchanged by full-replace.
    """

    id: str = Field(description="Unique note identifier")
    title: Any = Field(description="Note title")
    color: Any = Field(description="Color tag")
    issues: Any = Field(
        description="Ordered issues owned by this note, each {id, body, completed}"
    )

    model_config = ConfigDict(extra="allow")

    @classmethod
    def from_fields(cls, note_id: str, fields: Dict[str, Any]) -> "Note":
        """Open schema: every field in `fields` lands on the record; `note_id` wins over any `id` in it."""
        return cls.model_validate({**fields, "id": note_id})

    def replacing(self, title: Any, color: Any, issues: Any) -> "Note":
        """Closed schema: a new record with this note's id and only the three named fields."""
        return type(self).model_validate(
            {"id": self.id, "title": title, "color": color, "issues": issues}
        )
