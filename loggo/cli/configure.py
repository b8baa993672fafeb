"""Configuration command for Loggo CLI."""

import click
from rich.markup import escape
from rich.panel import Panel

from loggo.cli.common import console, fail
from loggo.config import create_template_config


@click.command()
@click.option("--force", is_flag=True, help="Overwrite an existing config file.")
def init(force: bool) -> None:
    """Create a template configuration file.
    
    \b
    Examples:
      loggo init
      loggo init --force
    """
    try:
        config_path = create_template_config(force=force)
    except FileExistsError as e:
        fail(f"{escape(str(e))}\n\nUse [cyan]--force[/cyan] to overwrite it.")
    except OSError as e:
        fail(f"Failed to write config:\n\n{escape(str(e))}")
    
    console.print(Panel(
        f"[green]Config written to[/green] {escape(str(config_path))}\n\n"
        "Edit it to change the default log directory, currency or chooser.",
        title="[bold green]Config Created[/bold green]",
        border_style="green",
    ))
