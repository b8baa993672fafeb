"""Helpers shared by the Loggo commands."""

from pathlib import Path
from typing import NoReturn, Optional

from rich.console import Console
from rich.markup import escape
from rich.panel import Panel

from loggo.config import (
    get_chooser_kind,
    get_log_dir,
    get_workspace_path,
    load_config,
)
from loggo.session import LogSession
from loggo.storage.base import FileChooser
from loggo.storage.choosers import PromptFileChooser, StaticFileChooser, TkFileChooser
from loggo.storage.workspace import WorkspaceStore

console = Console()


def fail(message: str, title: str = "Error") -> NoReturn:
    """Show an error panel and exit with status 1."""
    console.print(Panel(
        f"[red]{message}[/red]",
        title=f"[bold red]{title}[/bold red]",
        border_style="red",
    ))
    raise SystemExit(1)


def get_workspace(config: dict) -> WorkspaceStore:
    return WorkspaceStore(get_workspace_path(config))


def open_session() -> tuple[dict, WorkspaceStore, LogSession]:
    """Load config and restore the working session."""
    config = load_config()
    store = get_workspace(config)
    return config, store, store.load()


def require_open(session: LogSession) -> None:
    if not session.is_open:
        fail(
            "No log is open.\n\n"
            "Run [cyan]loggo new NAME[/cyan] or [cyan]loggo load[/cyan] first."
        )


def persist(store: WorkspaceStore, session: LogSession) -> None:
    """Write the working session back, exiting on failure."""
    try:
        store.save(session)
    except (OSError, ValueError) as e:
        fail(escape(f"Failed to update workspace {store.path}:\n\n{e}"))


def get_chooser(config: dict, path: Optional[Path], gui: bool) -> FileChooser:
    """Pick the file chooser for a save or load.
    
    An explicit path wins, then ``--gui``, then the configured chooser.
    """
    if path is not None:
        return StaticFileChooser(path)
    
    log_dir = get_log_dir(config)
    if gui or get_chooser_kind(config) == "tk":
        return TkFileChooser(log_dir)
    return PromptFileChooser(log_dir)
