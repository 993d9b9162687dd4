"""CLI entry point for pinmark.

This module provides the main CLI application that combines all commands
into a single interface.
"""

import typer

from pinmark.cli.annotate import annotate_command, watch_command
from pinmark.cli.pin import pin_command, status_command, toggle_command, unpin_command
from pinmark.cli.main import main_command

# Main application
app = typer.Typer(
    name="pinmark",
    help="pinmark: git change markers against HEAD or a pinned reference",
    add_completion=False,
)

# Add individual commands
app.command("annotate")(annotate_command)
app.command("watch")(watch_command)
app.command("toggle")(toggle_command)
app.command("pin")(pin_command)
app.command("unpin")(unpin_command)
app.command("status")(status_command)

app.callback()(main_command)


__all__ = [
    "app",
    "annotate_command",
    "watch_command",
    "toggle_command",
    "pin_command",
    "unpin_command",
    "status_command",
    "main_command",
]
