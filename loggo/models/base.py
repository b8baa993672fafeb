"""Shared helpers for Loggo models: ids and millisecond timestamps."""

import math
import uuid
from datetime import datetime, timedelta, timezone
from typing import Any, Iterable

EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)
ONE_MS = timedelta(milliseconds=1)


def new_id(existing: Iterable[str] = ()) -> str:
    """Generate an id that does not collide with any in ``existing``."""
    taken = set(existing)
    while True:
        candidate = uuid.uuid4().hex[:12]
        if candidate not in taken:
            return candidate


def now_utc() -> datetime:
    """Current time as an aware UTC datetime at millisecond precision."""
    return normalize_timestamp(datetime.now(timezone.utc))


def parse_timestamp(value: Any) -> Any:
    """Interpret bare numbers as epoch milliseconds.

    Anything else is handed back untouched for pydantic to parse.
    """
    if isinstance(value, bool):
        return value
    if isinstance(value, (int, float)):
        try:
            if not math.isfinite(value):
                raise ValueError(f"timestamp must be a finite number, got {value}")
            return EPOCH + timedelta(milliseconds=value)
        except OverflowError as e:
            raise ValueError(f"timestamp {value} is out of range") from e
    return value


def normalize_timestamp(value: datetime) -> datetime:
    """Convert to aware UTC and drop sub-millisecond precision.

    Naive datetimes are taken as local time.
    """
    try:
        if value.tzinfo is None:
            value = value.astimezone()
        value = value.astimezone(timezone.utc)
    except (OverflowError, OSError) as e:
        raise ValueError(f"timestamp {value.isoformat()} is out of range") from e
    return value.replace(microsecond=value.microsecond // 1000 * 1000)


def to_epoch_millis(value: datetime) -> int:
    """Exact epoch milliseconds for a normalized timestamp."""
    return (normalize_timestamp(value) - EPOCH) // ONE_MS
