"""Log lifecycle commands for Loggo CLI.

Handles creating, saving, loading and inspecting the open log.
"""

from pathlib import Path
from typing import Optional

import click
from rich.markup import escape
from rich.panel import Panel

from loggo.cli.charts import format_money
from loggo.cli.common import (
    console,
    fail,
    get_chooser,
    open_session,
    persist,
)
from loggo.config import get_currency


@click.command()
@click.argument("name", required=False)
def new(name: Optional[str]) -> None:
    """Create a new, empty log.
    
    NAME is the log name; you are prompted for it when omitted.
    Any log currently open is replaced.
    
    \b
    Examples:
      loggo new "Poker nights"
      loggo new
    """
    config, store, session = open_session()
    
    if name is None:
        name = click.prompt("Log name")
    
    previous = session.document.name if session.is_open else None
    
    try:
        document = session.new_log(name)
    except ValueError as e:
        fail(escape(str(e)))
    
    persist(store, session)
    
    if previous is not None:
        console.print(f"[dim]Closed log '{escape(previous)}'[/dim]")
    console.print(f"[green]✓ Created log '{escape(document.name)}'[/green]")


@click.command()
def status() -> None:
    """Show the open log.
    
    \b
    Examples:
      loggo status
    """
    config, store, session = open_session()
    
    if not session.is_open:
        console.print(Panel(
            "Create a new log or load an existing one to get started\n\n"
            "[cyan]loggo new NAME[/cyan]   [cyan]loggo load[/cyan]",
            title="[bold]Welcome to Loggo[/bold]",
            border_style="cyan",
        ))
        return
    
    document = session.document
    stats = session.stats()
    net_color = "green" if stats.net_profit >= 0 else "red"
    file_label = escape(str(session.current_file)) if session.current_file else "[dim]not saved[/dim]"
    
    console.print(Panel(
        f"File:       {file_label}\n"
        f"Notes:      {len(document.notes)}\n"
        f"Activities: {stats.total_activities}\n"
        f"Net:        [{net_color}]{format_money(stats.net_profit, get_currency(config))}[/{net_color}]\n"
        f"Win Rate:   {stats.win_rate:.1f}%",
        title=f"[bold cyan]{escape(session.title)}[/bold cyan]",
        border_style="cyan",
    ))


@click.command()
@click.option(
    "--path",
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help="Save to this file instead of asking.",
)
@click.option("--gui", is_flag=True, help="Use the native file dialog.")
def save(path: Optional[Path], gui: bool) -> None:
    """Save the open log to a JSON file.
    
    \b
    Examples:
      loggo save                       # Ask where to save
      loggo save --path ~/poker.json   # Save without asking
      loggo save --gui                 # Native save dialog
    """
    config, store, session = open_session()
    
    if not session.is_open:
        fail("Please create a new log first")
    
    result = session.save(get_chooser(config, path, gui))
    
    if result.canceled:
        console.print("[dim]Save canceled.[/dim]")
        return
    
    if not result.success:
        fail(f"Failed to save log: {escape(result.error or 'Unknown error')}")
    
    persist(store, session)
    console.print(f"[green]✓ Log saved successfully![/green] [dim]{escape(str(result.file_path))}[/dim]")


@click.command()
@click.option(
    "--path",
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help="Load this file instead of asking.",
)
@click.option("--gui", is_flag=True, help="Use the native file dialog.")
def load(path: Optional[Path], gui: bool) -> None:
    """Load a log from a JSON file, replacing the open one.
    
    \b
    Examples:
      loggo load                       # Ask which file to open
      loggo load --path ~/poker.json   # Load without asking
    """
    config, store, session = open_session()
    
    result = session.load(get_chooser(config, path, gui))
    
    if result.canceled:
        console.print("[dim]Load canceled.[/dim]")
        return
    
    if not result.success:
        fail(f"Failed to load log: {escape(result.error or 'Unknown error')}")
    
    persist(store, session)
    document = result.data
    console.print(
        f"[green]✓ Loaded log '{escape(document.name)}'[/green] "
        f"[dim]({len(document.notes)} notes, {len(document.activities)} activities)[/dim]"
    )

