"""Log file persistence for Loggo."""

from loggo.storage.base import FileChooser, LoadResult, SaveResult
from loggo.storage.choosers import (
    PromptFileChooser,
    StaticFileChooser,
    TkFileChooser,
)
from loggo.storage.log_file import (
    LogFormatError,
    load_log,
    read_log,
    save_log,
    write_log,
)

__all__ = [
    "FileChooser",
    "LoadResult",
    "LogFormatError",
    "PromptFileChooser",
    "SaveResult",
    "StaticFileChooser",
    "TkFileChooser",
    "load_log",
    "read_log",
    "save_log",
    "write_log",
]
