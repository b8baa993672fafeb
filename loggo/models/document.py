"""LogDocument data model."""

from pydantic import BaseModel, Field, field_validator

from loggo.models.activity import Activity
from loggo.models.note import Note


class LogDocument(BaseModel):
    """A named collection of notes and activities.

    This is the unit of persistence: it is always saved and loaded whole.
    Documents are immutable; the ``with_*``/``without_*`` helpers return
    updated copies.
    """

    name: str = Field(..., description="Log name")
    notes: list[Note] = Field(default_factory=list, description="Notes in insertion order")
    activities: list[Activity] = Field(
        default_factory=list, description="Activities in insertion order"
    )

    model_config = {"frozen": True}

    @field_validator("notes", "activities", mode="before")
    @classmethod
    def _default_empty(cls, value):
        return [] if value is None else value

    @classmethod
    def create(cls, name: str) -> "LogDocument":
        """Create an empty named log.

        Raises:
            ValueError: If the name is empty.
        """
        name = (name or "").strip()
        if not name:
            raise ValueError("Log name cannot be empty")
        return cls(name=name)

    def ids(self) -> set[str]:
        """All note and activity ids in this document."""
        return {n.id for n in self.notes} | {a.id for a in self.activities}

    def find_note(self, note_id: str) -> Note | None:
        for note in self.notes:
            if note.id == note_id:
                return note
        return None

    def with_note(self, note: Note) -> "LogDocument":
        return self.model_copy(update={"notes": [*self.notes, note]})

    def without_note(self, note_id: str) -> "LogDocument":
        """Copy of this document with the given note removed.

        The remaining notes keep their order.

        Raises:
            KeyError: If no note has that id.
        """
        if self.find_note(note_id) is None:
            raise KeyError(note_id)
        return self.model_copy(
            update={"notes": [n for n in self.notes if n.id != note_id]}
        )

    def with_activity(self, activity: Activity) -> "LogDocument":
        return self.model_copy(update={"activities": [*self.activities, activity]})
