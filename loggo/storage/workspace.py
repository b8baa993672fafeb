"""Workspace file keeping the open log between command invocations."""

import json
import logging
from pathlib import Path

from pydantic import ValidationError

from loggo.models import LogDocument
from loggo.session import LogSession
from loggo.storage.files import write_text_atomic

logger = logging.getLogger(__name__)


class WorkspaceStore:
    """JSON-backed store for the CLI's working session."""

    def __init__(self, path: Path):
        """Initialize the store.
        
        Args:
            path: Workspace file location.
        """
        self.path = path

    def load(self) -> LogSession:
        """Restore the working session.
        
        A missing or unreadable workspace gives an empty session.
        """
        if not self.path.exists():
            return LogSession()
        
        try:
            data = json.loads(self.path.read_text(encoding="utf-8"))
            document_data = data.get("document")
            document = (
                LogDocument.model_validate(document_data)
                if document_data is not None
                else None
            )
            current_file = data.get("current_file")
            current_file = Path(current_file) if current_file else None
        except (OSError, ValueError, TypeError, AttributeError, ValidationError) as e:
            logger.warning("Ignoring unreadable workspace %s: %s", self.path, e)
            return LogSession()
        
        return LogSession(document=document, current_file=current_file)

    def save(self, session: LogSession) -> None:
        """Persist the working session.
        
        The previous workspace is kept if the write fails.
        
        Raises:
            OSError: If the workspace cannot be written.
            UnicodeEncodeError: If the document text cannot be encoded.
        """
        data = {
            "document": (
                session.document.model_dump(mode="json")
                if session.document is not None
                else None
            ),
            "current_file": str(session.current_file) if session.current_file else None,
        }
        write_text_atomic(self.path, json.dumps(data, indent=2, ensure_ascii=False))
