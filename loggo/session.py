"""Working document state and its mutators.

A LogSession holds the one open LogDocument plus the file it was last
saved to or loaded from. Every change replaces the document with an
updated copy.
"""

import logging
from pathlib import Path
from typing import Optional, Union

from loggo.analytics import compute_stats, cumulative_series
from loggo.models import (
    Activity,
    ActivityStats,
    ActivityType,
    CumulativePoint,
    LogDocument,
    Note,
)
from loggo.storage.base import FileChooser, LoadResult, SaveResult
from loggo.storage.log_file import load_log, save_log

logger = logging.getLogger(__name__)

APP_TITLE = "Loggo"


class NoActiveLogError(RuntimeError):
    """Raised when an operation needs an open log and there is none."""

    def __init__(self, message: str = "Please create a new log first"):
        super().__init__(message)


class LogSession:
    """The open log and the file it is associated with."""

    def __init__(
        self,
        document: Optional[LogDocument] = None,
        current_file: Optional[Path] = None,
    ):
        self.document = document
        self.current_file = current_file

    @property
    def is_open(self) -> bool:
        return self.document is not None

    @property
    def title(self) -> str:
        if self.document is None:
            return APP_TITLE
        return f"{APP_TITLE} - {self.document.name}"

    def _require_document(self) -> LogDocument:
        if self.document is None:
            raise NoActiveLogError()
        return self.document

    def new_log(self, name: str) -> LogDocument:
        """Start a new empty log, discarding the current one.
        
        Raises:
            ValueError: If the name is empty.
        """
        self.document = LogDocument.create(name)
        self.current_file = None
        logger.debug("Created log %r", self.document.name)
        return self.document

    def add_note(self, text: str) -> Note:
        document = self._require_document()
        note = Note.create(text, existing_ids=document.ids())
        self.document = document.with_note(note)
        return note

    def delete_note(self, note_id: str) -> Note:
        """Remove a note by id.
        
        Returns:
            The removed note.
            
        Raises:
            KeyError: If no note has that id.
        """
        document = self._require_document()
        note = document.find_note(note_id)
        if note is None:
            raise KeyError(note_id)
        self.document = document.without_note(note_id)
        return note

    def add_activity(
        self,
        amount: float,
        type: Optional[Union[str, ActivityType]] = None,
        description: str = "",
    ) -> Activity:
        document = self._require_document()
        activity = Activity.create(
            amount,
            type=type,
            description=description,
            existing_ids=document.ids(),
        )
        self.document = document.with_activity(activity)
        return activity

    def stats(self) -> ActivityStats:
        if self.document is None:
            return compute_stats([])
        return compute_stats(self.document.activities)

    def series(self) -> list[CumulativePoint]:
        if self.document is None:
            return []
        return cumulative_series(self.document.activities)

    def save(self, chooser: FileChooser) -> SaveResult:
        """Save the open log through a file chooser.
        
        On success the chosen file becomes the current file.
        
        Raises:
            NoActiveLogError: If no log is open.
        """
        document = self._require_document()
        result = save_log(document, chooser)
        if result.success:
            self.current_file = result.file_path
        return result

    def load(self, chooser: FileChooser) -> LoadResult:
        """Replace the open log with one read through a file chooser.
        
        The session is only changed when the whole file loads.
        """
        result = load_log(chooser)
        if result.success:
            self.document = result.data
            self.current_file = result.file_path
        return result
