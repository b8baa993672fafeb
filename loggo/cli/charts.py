"""Terminal rendering of Loggo statistics and charts with rich."""

from typing import Sequence

from rich.console import Group
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from loggo.analytics import amount_distribution, outcome_counts
from loggo.models import ActivityStats, CumulativePoint

SPARK_CHARS = "▁▂▃▄▅▆▇█"
BAR_CHAR = "█"


def format_money(value: float, currency: str = "$") -> str:
    """Format an amount with the sign before the currency symbol."""
    sign = "-" if value < 0 else ""
    return f"{sign}{currency}{abs(value):,.2f}"


def sparkline(values: Sequence[float]) -> str:
    """Render values as a one-line block chart.
    
    Args:
        values: Series to draw.
        
    Returns:
        One character per value; empty for empty input and a flat
        line when all values are equal.
    """
    if not values:
        return ""
    
    low = min(values)
    high = max(values)
    if high == low:
        return SPARK_CHARS[len(SPARK_CHARS) // 2] * len(values)
    
    steps = len(SPARK_CHARS) - 1
    return "".join(SPARK_CHARS[round((v - low) / (high - low) * steps)] for v in values)


def bar(value: float, max_value: float, width: int) -> str:
    """Horizontal bar proportional to ``abs(value) / max_value``."""
    if max_value <= 0 or value == 0:
        return ""
    length = round(abs(value) / max_value * width)
    return BAR_CHAR * max(length, 1)


def render_stats_panel(stats: ActivityStats, currency: str = "$") -> Panel:
    """Summary figures: totals, net and win rate."""
    net_color = "green" if stats.net_profit >= 0 else "red"
    
    table = Table.grid(padding=(0, 2))
    table.add_column(style="bold")
    table.add_column(justify="right")
    table.add_row("Total Activities", str(stats.total_activities))
    table.add_row("Total Wins", f"[green]{format_money(stats.total_gains, currency)}[/green]")
    table.add_row("Total Losses", f"[red]{format_money(stats.total_losses, currency)}[/red]")
    table.add_row(
        "Net Profit/Loss",
        f"[{net_color}]{format_money(stats.net_profit, currency)}[/{net_color}]",
    )
    table.add_row("Win Rate", f"{stats.win_rate:.1f}%")
    
    return Panel(table, title="[bold cyan]Statistics[/bold cyan]", border_style="cyan")


def render_cumulative(
    series: Sequence[CumulativePoint],
    width: int = 40,
    currency: str = "$",
) -> Panel:
    """Cumulative profit/loss: sparkline plus one bar row per activity."""
    values = [point.value for point in series]
    peak = max((abs(v) for v in values), default=0.0)
    
    table = Table(show_header=True, header_style="bold cyan", box=None)
    table.add_column("Activity", style="dim")
    table.add_column("Cumulative", justify="right")
    table.add_column("", no_wrap=True)
    
    for point in series:
        color = "green" if point.value >= 0 else "red"
        table.add_row(
            point.label,
            f"[{color}]{format_money(point.value, currency)}[/{color}]",
            f"[{color}]{bar(point.value, peak, width)}[/{color}]",
        )
    
    return Panel(
        Group(Text(sparkline(values), style="cyan"), Text(""), table),
        title="[bold]Cumulative Profit/Loss Over Time[/bold]",
        border_style="cyan",
    )


def render_counts(stats: ActivityStats, width: int = 40) -> Panel:
    """Win/loss count bars."""
    counts = outcome_counts(stats)
    peak = max(counts.values(), default=0)
    
    table = Table.grid(padding=(0, 2))
    table.add_column(style="bold")
    table.add_column(justify="right")
    table.add_column(no_wrap=True)
    for (label, count), color in zip(counts.items(), ("green", "red")):
        table.add_row(label, str(count), f"[{color}]{bar(count, peak, width)}[/{color}]")
    
    return Panel(table, title="[bold]Win/Loss Count[/bold]", border_style="cyan")


def render_distribution(stats: ActivityStats, width: int = 40, currency: str = "$") -> Panel:
    """Share of the total amount taken by wins and by losses."""
    distribution = amount_distribution(stats)
    total = sum(distribution.values())
    
    table = Table.grid(padding=(0, 2))
    table.add_column(style="bold")
    table.add_column(justify="right")
    table.add_column(justify="right")
    table.add_column(no_wrap=True)
    for (label, amount), color in zip(distribution.items(), ("green", "red")):
        share = (amount / total * 100) if total > 0 else 0.0
        table.add_row(
            label,
            format_money(amount, currency),
            f"{share:.1f}%",
            f"[{color}]{bar(amount, total, width)}[/{color}]",
        )
    
    return Panel(
        table,
        title="[bold]Win/Loss Distribution by Amount[/bold]",
        border_style="cyan",
    )
