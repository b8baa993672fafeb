"""Note commands for Loggo CLI.

Handles adding, listing and deleting notes in the open log.
"""

import click
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table

from loggo.cli.common import console, fail, open_session, persist, require_open


@click.group()
def note() -> None:
    """Manage notes and reminders.
    
    \b
    Commands:
      add     - Add a note
      list    - Show all notes
      delete  - Delete a note by id
    """
    pass


@note.command("add")
@click.argument("text", nargs=-1, required=True)
def add_note(text: tuple[str, ...]) -> None:
    """Add a note to the open log.
    
    \b
    Examples:
      loggo note add "Take a break after two losses"
      loggo note add Review hand history
    """
    config, store, session = open_session()
    require_open(session)
    
    try:
        created = session.add_note(" ".join(text))
    except ValueError as e:
        fail(escape(str(e)))
    
    persist(store, session)
    console.print(f"[green]✓ Added note[/green] [dim]{created.id}[/dim]")


@note.command("list")
def list_notes() -> None:
    """Show the notes of the open log in the order they were added."""
    config, store, session = open_session()
    require_open(session)
    
    notes = session.document.notes
    if not notes:
        console.print(Panel(
            "[dim]No notes yet. Add your first note with [cyan]loggo note add[/cyan][/dim]",
            title="[bold]Notes & Reminders[/bold]",
            border_style="dim",
        ))
        return
    
    table = Table(
        title="Notes & Reminders",
        show_header=True,
        header_style="bold cyan",
    )
    table.add_column("ID", style="dim")
    table.add_column("Added", style="dim")
    table.add_column("Note")
    
    for item in notes:
        table.add_row(
            escape(item.id),
            item.timestamp.astimezone().strftime("%Y-%m-%d %H:%M"),
            escape(item.text),
        )
    
    console.print(table)


@note.command("delete")
@click.argument("note_id")
def delete_note(note_id: str) -> None:
    """Delete a note by its id.
    
    \b
    Examples:
      loggo note delete 3f2a9c1b7d4e
    """
    config, store, session = open_session()
    require_open(session)
    
    try:
        removed = session.delete_note(note_id)
    except KeyError:
        fail(f"No note with id {escape(note_id)}")
    
    persist(store, session)
    console.print(f"[green]✓ Deleted note[/green] [dim]{escape(removed.text)}[/dim]")
