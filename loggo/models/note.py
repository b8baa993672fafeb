"""Note data model."""

from datetime import datetime
from typing import Iterable

from pydantic import BaseModel, Field, field_serializer, field_validator

from loggo.models.base import (
    new_id,
    normalize_timestamp,
    now_utc,
    parse_timestamp,
    to_epoch_millis,
)


class Note(BaseModel):
    """A free-form timestamped reminder, independent of activities."""

    id: str = Field(..., min_length=1, description="Unique note identifier")
    text: str = Field(..., description="Note text")
    timestamp: datetime = Field(default_factory=now_utc, description="Creation time")

    model_config = {"frozen": True}

    @field_validator("id", mode="before")
    @classmethod
    def _coerce_id(cls, value):
        # Ids written as numbers are kept as strings
        return str(value) if isinstance(value, int) else value

    @field_validator("timestamp", mode="before")
    @classmethod
    def _parse_timestamp(cls, value):
        return parse_timestamp(value)

    @field_validator("timestamp")
    @classmethod
    def _normalize_timestamp(cls, value: datetime) -> datetime:
        return normalize_timestamp(value)

    @field_serializer("timestamp")
    def _serialize_timestamp(self, value: datetime) -> int:
        return to_epoch_millis(value)

    @classmethod
    def create(cls, text: str, existing_ids: Iterable[str] = ()) -> "Note":
        """Create a note from user input.

        Args:
            text: Note text; surrounding whitespace is removed.
            existing_ids: Ids already used in the document.

        Returns:
            A new Note stamped with the current time.

        Raises:
            ValueError: If the text is empty.
        """
        text = (text or "").strip()
        if not text:
            raise ValueError("Note text cannot be empty")
        return cls(id=new_id(existing_ids), text=text)
