"""Activity data model."""

import math
from datetime import datetime
from enum import Enum
from typing import Iterable, Optional, Union

from pydantic import BaseModel, Field, field_serializer, field_validator

from loggo.models.base import (
    new_id,
    normalize_timestamp,
    now_utc,
    parse_timestamp,
    to_epoch_millis,
)


class ActivityType(str, Enum):
    """Outcome of a single activity."""

    WIN = "win"
    LOSS = "loss"

    @classmethod
    def parse(cls, value: Union[str, "ActivityType"]) -> "ActivityType":
        """Parse user or file input, accepting ``gain`` for a win."""
        if isinstance(value, cls):
            return value
        normalized = str(value).strip().lower()
        if normalized == "gain":
            return cls.WIN
        try:
            return cls(normalized)
        except ValueError:
            raise ValueError(f"Unknown activity type: {value!r}") from None


class Activity(BaseModel):
    """A single recorded win or loss with a magnitude."""

    id: str = Field(..., min_length=1, description="Unique activity identifier")
    type: ActivityType = Field(..., description="Outcome (win/loss)")
    amount: float = Field(..., ge=0, description="Non-negative magnitude")
    description: str = Field(default="", description="Optional description")
    timestamp: datetime = Field(default_factory=now_utc, description="Creation time")

    model_config = {"frozen": True}

    @field_validator("id", mode="before")
    @classmethod
    def _coerce_id(cls, value):
        return str(value) if isinstance(value, int) else value

    @field_validator("type", mode="before")
    @classmethod
    def _parse_type(cls, value):
        return ActivityType.parse(value)

    @field_validator("description", mode="before")
    @classmethod
    def _default_description(cls, value):
        return "" if value is None else value

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

    @property
    def is_win(self) -> bool:
        return self.type is ActivityType.WIN

    @property
    def signed_amount(self) -> float:
        """Amount with the sign of the outcome (losses negative)."""
        return self.amount if self.is_win else -self.amount

    @classmethod
    def create(
        cls,
        amount: float,
        type: Optional[Union[str, ActivityType]] = None,
        description: str = "",
        existing_ids: Iterable[str] = (),
    ) -> "Activity":
        """Create an activity from user input.

        With an explicit ``type`` the amount is the magnitude and must be
        positive. Without one, the sign of ``amount`` picks the outcome.

        Args:
            amount: Magnitude, or signed amount when ``type`` is None.
            type: Outcome, ``win``/``gain`` or ``loss``.
            description: Optional free text.
            existing_ids: Ids already used in the document.

        Returns:
            A new Activity stamped with the current time.

        Raises:
            ValueError: If the amount is zero, negative with an explicit
                type, or not a finite number.
        """
        amount = float(amount)
        if not math.isfinite(amount):
            raise ValueError("Amount must be a finite number")
        if amount == 0:
            raise ValueError("Amount must be non-zero")

        if type is None:
            outcome = ActivityType.WIN if amount > 0 else ActivityType.LOSS
        else:
            outcome = ActivityType.parse(type)
            if amount < 0:
                raise ValueError("Amount must be positive when the type is given")

        return cls(
            id=new_id(existing_ids),
            type=outcome,
            amount=abs(amount),
            description=(description or "").strip(),
        )
