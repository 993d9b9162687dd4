"""CLI commands for annotating a file."""

import time
from pathlib import Path
from typing import Optional

import typer

from pinmark.git import verify_reference
from pinmark.host.terminal import FileDocument
from pinmark.cli.utils import build_session, print_annotated, resolve_repo_root


def annotate_command(
    file: Path = typer.Argument(
        ...,
        exists=True,
        dir_okay=False,
        help="File to annotate",
    ),
    ref: Optional[str] = typer.Option(
        None,
        "--ref",
        help="Compare against this reference instead of the pinned one",
    ),
    color: bool = typer.Option(
        True,
        "--color/--no-color",
        help="Colour the gutter markers",
    ),
) -> None:
    """Show FILE with a gutter marking lines changed since the pinned reference."""
    repo_root = resolve_repo_root(file)

    if ref is not None:
        ref = ref.strip()
        if not verify_reference(ref, cwd=repo_root):
            typer.echo(f"Invalid git reference: {ref}", err=True)
            raise typer.Exit(1)

    document = FileDocument(file)
    session, surface, indicator = build_session(repo_root, document, ref=ref)
    session.start()
    print_annotated(document, surface, indicator, color=color)


def watch_command(
    file: Path = typer.Argument(
        ...,
        exists=True,
        dir_okay=False,
        help="File to watch",
    ),
    interval: float = typer.Option(
        1.0,
        "--interval",
        min=0.1,
        help="Seconds between checks for a saved file",
    ),
    color: bool = typer.Option(
        True,
        "--color/--no-color",
        help="Colour the gutter markers",
    ),
) -> None:
    """Re-annotate FILE every time it is saved. Stop with Ctrl+C."""
    repo_root = resolve_repo_root(file)
    document = FileDocument(file)
    session, surface, indicator = build_session(repo_root, document)

    session.start()
    print_annotated(document, surface, indicator, color=color)
    last_mtime = file.stat().st_mtime

    try:
        while True:
            time.sleep(interval)
            try:
                mtime = file.stat().st_mtime
            except FileNotFoundError:
                # Editors may replace the file on save
                continue
            if mtime == last_mtime:
                continue
            last_mtime = mtime
            document.reload()
            session.on_document_saved(document)
            typer.clear()
            print_annotated(document, surface, indicator, color=color)
    except KeyboardInterrupt:
        typer.echo()
