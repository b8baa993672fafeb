"""Data models for Loggo."""

from loggo.models.activity import Activity, ActivityType
from loggo.models.document import LogDocument
from loggo.models.note import Note
from loggo.models.stats import ActivityStats, CumulativePoint

__all__ = [
    "Activity",
    "ActivityType",
    "ActivityStats",
    "CumulativePoint",
    "LogDocument",
    "Note",
]
