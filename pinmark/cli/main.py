"""Root CLI callback: --version and --verbose."""

import logging
from typing import Optional

import typer

from pinmark import __version__


def _version_callback(value: bool) -> None:
    if value:
        typer.echo(f"pinmark {__version__}")
        raise typer.Exit()


def main_command(
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Log git calls and discarded annotations to stderr",
    ),
    version: Optional[bool] = typer.Option(
        None,
        "--version",
        callback=_version_callback,
        is_eager=True,
        help="Show the version and exit",
    ),
) -> None:
    """Mark lines changed since HEAD or a pinned git reference."""
    if verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            format="%(levelname)s %(name)s: %(message)s",
        )
