"""Reading and writing whole log documents as JSON."""

import json
import logging
from pathlib import Path

from pydantic import ValidationError

from loggo.models import LogDocument
from loggo.storage.base import LOG_EXTENSION, FileChooser, LoadResult, SaveResult
from loggo.storage.files import write_text_atomic

logger = logging.getLogger(__name__)


class LogFormatError(ValueError):
    """Raised when a log file is not valid JSON or not a log document."""


def default_file_name(document: LogDocument) -> str:
    return f"{document.name}{LOG_EXTENSION}"


def write_log(document: LogDocument, path: Path) -> None:
    """Write a document as indented UTF-8 JSON.
    
    The previous content of ``path`` survives a failed write.
    
    Args:
        document: Document to persist.
        path: Destination file; parent directories are created.
        
    Raises:
        OSError: If the file cannot be written.
        UnicodeEncodeError: If the text cannot be encoded as UTF-8.
    """
    content = json.dumps(document.model_dump(mode="json"), indent=2, ensure_ascii=False)
    write_text_atomic(path, content)


def read_log(path: Path) -> LogDocument:
    """Read a document from a JSON file.
    
    Missing ``notes`` or ``activities`` arrays load as empty lists.
    
    Args:
        path: File to read.
        
    Returns:
        The parsed LogDocument.
        
    Raises:
        OSError: If the file cannot be read.
        LogFormatError: If the content is not a valid log document.
    """
    try:
        content = path.read_text(encoding="utf-8")
    except UnicodeDecodeError as e:
        raise LogFormatError(f"{path.name} is not UTF-8 text: {e}") from e

    try:
        data = json.loads(content)
    except json.JSONDecodeError as e:
        raise LogFormatError(f"Invalid JSON in {path.name}: {e}") from e
    
    if not isinstance(data, dict):
        raise LogFormatError(f"{path.name} does not contain a log document")
    
    try:
        return LogDocument.model_validate(data)
    except ValidationError as e:
        raise LogFormatError(f"{path.name} is not a valid log: {e}") from e


def save_log(document: LogDocument, chooser: FileChooser) -> SaveResult:
    """Ask for a destination and save the document there.
    
    Args:
        document: Document to save.
        chooser: File chooser presenting the save dialog.
        
    Returns:
        SaveResult with the written path, a cancel flag, or the error.
    """
    path = chooser.ask_save_path(default_file_name(document))
    if path is None:
        logger.debug("Save of %r canceled", document.name)
        return SaveResult.cancel()
    
    try:
        write_log(document, path)
    except (OSError, ValueError) as e:
        logger.warning("Failed to save log to %s: %s", path, e)
        return SaveResult.failed(str(e))
    
    logger.info("Saved log %r to %s", document.name, path)
    return SaveResult.ok(path)


def load_log(chooser: FileChooser) -> LoadResult:
    """Ask for a log file and read it.
    
    Args:
        chooser: File chooser presenting the open dialog.
        
    Returns:
        LoadResult with the document, a cancel flag, or the error.
    """
    path = chooser.ask_open_path()
    if path is None:
        logger.debug("Load canceled")
        return LoadResult.cancel()
    
    try:
        document = read_log(path)
    except (OSError, LogFormatError) as e:
        logger.warning("Failed to load log from %s: %s", path, e)
        return LoadResult.failed(str(e))
    
    logger.info("Loaded log %r from %s", document.name, path)
    return LoadResult.ok(document, path)
