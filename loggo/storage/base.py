"""Base file chooser interface and save/load results for Loggo."""

from abc import ABC, abstractmethod
from pathlib import Path
from typing import Optional

from pydantic import BaseModel, Field

from loggo.models import LogDocument

LOG_EXTENSION = ".json"
LOG_FILE_FILTER = ("Log Files", "*.json")


class SaveResult(BaseModel):
    """Outcome of a save: success, user cancel, or failure."""

    success: bool = Field(..., description="Whether the file was written")
    canceled: bool = Field(default=False, description="User dismissed the dialog")
    file_path: Optional[Path] = Field(default=None, description="Written file")
    error: Optional[str] = Field(default=None, description="Failure message")

    model_config = {"frozen": True}

    @classmethod
    def ok(cls, file_path: Path) -> "SaveResult":
        return cls(success=True, file_path=file_path)

    @classmethod
    def cancel(cls) -> "SaveResult":
        return cls(success=False, canceled=True)

    @classmethod
    def failed(cls, error: str) -> "SaveResult":
        return cls(success=False, error=error)


class LoadResult(BaseModel):
    """Outcome of a load: success with data, user cancel, or failure."""

    success: bool = Field(..., description="Whether a document was read")
    canceled: bool = Field(default=False, description="User dismissed the dialog")
    data: Optional[LogDocument] = Field(default=None, description="Loaded document")
    file_path: Optional[Path] = Field(default=None, description="File read")
    error: Optional[str] = Field(default=None, description="Failure message")

    model_config = {"frozen": True}

    @classmethod
    def ok(cls, data: LogDocument, file_path: Path) -> "LoadResult":
        return cls(success=True, data=data, file_path=file_path)

    @classmethod
    def cancel(cls) -> "LoadResult":
        return cls(success=False, canceled=True)

    @classmethod
    def failed(cls, error: str) -> "LoadResult":
        return cls(success=False, error=error)


class FileChooser(ABC):
    """Abstract base class for picking log files.
    
    Implementations (terminal prompt, fixed path, native dialog) return
    None when the user cancels. Only ``.json`` files are offered.
    """

    @abstractmethod
    def ask_save_path(self, default_name: str) -> Optional[Path]:
        """Ask where to save a log.
        
        Args:
            default_name: Suggested file name, e.g. ``"<name>.json"``.
            
        Returns:
            Chosen path, or None if canceled.
        """
        pass

    @abstractmethod
    def ask_open_path(self) -> Optional[Path]:
        """Ask which log file to open.
        
        Returns:
            Chosen path, or None if canceled.
        """
        pass
