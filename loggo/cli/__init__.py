"""CLI commands for Loggo.

This package provides the command-line interface for Loggo: creating,
saving and loading logs, recording notes and activities, and viewing
statistics.
"""

from loggo.cli.main import cli, main

__all__ = ["cli", "main"]
