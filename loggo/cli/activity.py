"""Activity commands for Loggo CLI.

Handles recording and listing win/loss activities.
"""

from typing import Optional

import click
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table

from loggo.cli.charts import format_money
from loggo.cli.common import console, fail, open_session, persist, require_open
from loggo.config import get_currency


@click.group()
def activity() -> None:
    """Record and review win/loss activities.
    
    \b
    Commands:
      add   - Record a win or a loss
      list  - Show all activities
    """
    pass


@activity.command("add")
@click.argument("amount", type=float)
@click.option("--win", "outcome", flag_value="win", help="Record AMOUNT as a win.")
@click.option("--loss", "outcome", flag_value="loss", help="Record AMOUNT as a loss.")
@click.option("-d", "--description", default="", help="Optional description.")
def add_activity(amount: float, outcome: Optional[str], description: str) -> None:
    """Record a win or a loss.
    
    AMOUNT is the magnitude when --win or --loss is given. Without
    either flag the sign decides: positive is a win, negative a loss
    (put negative amounts after --).
    
    \b
    Examples:
      loggo activity add 120 --win -d "Friday game"
      loggo activity add 40 --loss
      loggo activity add -- -40
    """
    config, store, session = open_session()
    require_open(session)
    
    try:
        created = session.add_activity(amount, type=outcome, description=description)
    except ValueError as e:
        fail(escape(str(e)))
    
    persist(store, session)
    
    currency = get_currency(config)
    color = "green" if created.is_win else "red"
    console.print(
        f"[{color}]✓ Logged {created.type.value} of "
        f"{format_money(created.amount, currency)}[/{color}]"
    )


@activity.command("list")
def list_activities() -> None:
    """Show the activities of the open log in the order they were added."""
    config, store, session = open_session()
    require_open(session)
    
    activities = session.document.activities
    if not activities:
        console.print(Panel(
            "[dim]No activity data yet. Log your first activity with "
            "[cyan]loggo activity add[/cyan][/dim]",
            title="[bold]Activities[/bold]",
            border_style="dim",
        ))
        return
    
    currency = get_currency(config)
    table = Table(
        title="Activities",
        show_header=True,
        header_style="bold cyan",
    )
    table.add_column("Date/Time", style="dim")
    table.add_column("Type", justify="center")
    table.add_column("Amount", justify="right")
    table.add_column("Description", max_width=30)
    table.add_column("ID", style="dim")
    
    for item in activities:
        color = "green" if item.is_win else "red"
        table.add_row(
            item.timestamp.astimezone().strftime("%Y-%m-%d %H:%M"),
            f"[{color}]{item.type.value.upper()}[/{color}]",
            f"[{color}]{format_money(item.signed_amount, currency)}[/{color}]",
            escape(item.description) or "-",
            escape(item.id),
        )
    
    console.print(table)
