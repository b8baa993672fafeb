"""File chooser implementations.

Provides a terminal prompt chooser, a fixed-path chooser for scripted
use, and a native dialog chooser backed by tkinter.
"""

from pathlib import Path
from typing import Optional

import click

from loggo.storage.base import LOG_EXTENSION, LOG_FILE_FILTER, FileChooser


def ensure_log_extension(path: Path) -> Path:
    """Append ``.json`` unless the path already has it."""
    if path.suffix.lower() == LOG_EXTENSION:
        return path
    return path.with_name(path.name + LOG_EXTENSION)


class StaticFileChooser(FileChooser):
    """Chooser that always answers with the same path."""

    def __init__(self, path: Path):
        self.path = Path(path).expanduser()

    def ask_save_path(self, default_name: str) -> Optional[Path]:
        return ensure_log_extension(self.path)

    def ask_open_path(self) -> Optional[Path]:
        return self.path


class PromptFileChooser(FileChooser):
    """Chooser that asks on the terminal with click prompts.
    
    Pressing Enter accepts the suggested path; Ctrl-C or end of input
    cancels. Relative answers are resolved against ``directory``.
    """

    def __init__(self, directory: Path):
        """Initialize the chooser.
        
        Args:
            directory: Directory offered by default and used to resolve
                relative paths.
        """
        self.directory = Path(directory).expanduser()

    def _resolve(self, answer: str) -> Path:
        path = Path(answer.strip()).expanduser()
        if not path.is_absolute():
            path = self.directory / path
        return path

    def list_logs(self) -> list[Path]:
        """Log files in the default directory, sorted by name."""
        if not self.directory.is_dir():
            return []
        return sorted(
            p for p in self.directory.iterdir()
            if p.is_file() and p.suffix.lower() == LOG_EXTENSION
        )

    def ask_save_path(self, default_name: str) -> Optional[Path]:
        try:
            answer = click.prompt(
                "Save log as",
                default=str(self.directory / default_name),
                show_default=True,
            )
        except click.Abort:
            return None
        
        if not answer.strip():
            return None
        return ensure_log_extension(self._resolve(answer))

    def ask_open_path(self) -> Optional[Path]:
        logs = self.list_logs()
        if logs:
            click.echo(f"Log files in {self.directory}:")
            for i, log_path in enumerate(logs, start=1):
                click.echo(f"  {i}. {log_path.name}")
        
        while True:
            try:
                answer = click.prompt("Open log (number or path)")
            except click.Abort:
                return None
            
            answer = answer.strip()
            if not answer:
                return None
            
            if answer.isdigit() and 1 <= int(answer) <= len(logs):
                return logs[int(answer) - 1]
            
            path = self._resolve(answer)
            if path.suffix.lower() != LOG_EXTENSION:
                click.echo(f"Only {LOG_EXTENSION} log files can be opened.")
                continue
            if not path.is_file():
                click.echo(f"File not found: {path}")
                continue
            return path


class TkFileChooser(FileChooser):
    """Chooser that shows the operating system's file dialogs via tkinter."""

    def __init__(self, directory: Optional[Path] = None):
        self.directory = Path(directory).expanduser() if directory else None

    def _run_dialog(self, dialog_name: str, **options) -> Optional[Path]:
        import tkinter
        from tkinter import filedialog
        
        root = tkinter.Tk()
        root.withdraw()
        try:
            if self.directory is not None:
                options["initialdir"] = str(self.directory)
            selected = getattr(filedialog, dialog_name)(
                parent=root,
                filetypes=[LOG_FILE_FILTER],
                **options,
            )
        finally:
            root.destroy()
        
        # Dialogs return an empty string or tuple when dismissed
        if not selected:
            return None
        return Path(selected)

    def ask_save_path(self, default_name: str) -> Optional[Path]:
        path = self._run_dialog(
            "asksaveasfilename",
            title="Save Log",
            initialfile=default_name,
            defaultextension=LOG_EXTENSION,
        )
        return ensure_log_extension(path) if path else None

    def ask_open_path(self) -> Optional[Path]:
        return self._run_dialog("askopenfilename", title="Load Log")
