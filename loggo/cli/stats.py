"""Statistics command for Loggo CLI."""

import json

import click
from rich.panel import Panel

from loggo.analytics import chart_data
from loggo.cli.charts import (
    render_counts,
    render_cumulative,
    render_distribution,
    render_stats_panel,
)
from loggo.cli.common import console, open_session, require_open
from loggo.config import get_chart_width, get_currency


@click.command()
@click.option("--json", "as_json", is_flag=True, help="Print chart data as JSON.")
def stats(as_json: bool) -> None:
    """Show statistics and charts for the open log.
    
    \b
    Examples:
      loggo stats          # Panels and charts
      loggo stats --json   # Chart data for other tools
    """
    config, store, session = open_session()
    require_open(session)
    
    activities = session.document.activities
    
    if as_json:
        click.echo(json.dumps(chart_data(activities), indent=2))
        return
    
    currency = get_currency(config)
    width = get_chart_width(config)
    summary = session.stats()
    
    console.print(render_stats_panel(summary, currency))
    
    if not activities:
        console.print(Panel(
            "[dim]No activity data yet\n\n"
            "Log your first activity to see visualizations[/dim]",
            border_style="dim",
        ))
        return
    
    console.print(render_cumulative(session.series(), width, currency))
    console.print(render_counts(summary, width))
    console.print(render_distribution(summary, width, currency))
