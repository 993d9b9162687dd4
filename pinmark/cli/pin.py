"""CLI commands for managing the pinned reference."""

from pathlib import Path
from typing import Optional

import typer

from pinmark.host.terminal import FileDocument
from pinmark.cli.utils import build_session, print_annotated, resolve_repo_root


def toggle_command(
    file: Optional[Path] = typer.Argument(
        None,
        exists=True,
        dir_okay=False,
        help="File to re-annotate afterwards",
    ),
) -> None:
    """Pin, change, or clear the reference interactively."""
    repo_root = resolve_repo_root(file)
    document = FileDocument(file) if file is not None else None
    session, surface, indicator = build_session(repo_root, document)

    session.toggle_pinned_reference()

    if document is not None:
        print_annotated(document, surface, indicator)
    else:
        typer.echo(indicator.text)


def pin_command(
    ref: str = typer.Argument(
        ...,
        help="Commit SHA, branch, or remote reference (e.g. main, origin/develop, HEAD~2)",
    ),
) -> None:
    """Pin a reference to compare working files against."""
    if not ref.strip():
        typer.echo("Error: reference must not be empty", err=True)
        raise typer.Exit(1)

    repo_root = resolve_repo_root()
    session, _, indicator = build_session(repo_root)

    if not session.controller.pin(ref):
        raise typer.Exit(1)
    typer.echo(indicator.text)


def unpin_command() -> None:
    """Clear the pinned reference and compare against HEAD again."""
    repo_root = resolve_repo_root()
    session, _, indicator = build_session(repo_root)

    if session.controller.pinned_ref is None:
        typer.echo("No reference pinned. Comparing against HEAD.")
    session.controller.clear()
    typer.echo(indicator.text)


def status_command() -> None:
    """Show the active comparison target."""
    repo_root = resolve_repo_root()
    session, _, indicator = build_session(repo_root)
    session.controller.refresh_indicator()

    typer.echo(indicator.text)
    typer.echo(indicator.tooltip)
    typer.echo(f"Comparing against: {session.controller.active_target}")
