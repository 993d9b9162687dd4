"""Shared utility functions for CLI commands."""

from pathlib import Path
from typing import Optional

import typer

from pinmark.annotate.models import ChangeKind
from pinmark.git import GitError, get_repo_root
from pinmark.host.base import UserInteraction
from pinmark.host.terminal import (
    FileDocument,
    TerminalIndicator,
    TerminalSurface,
    TyperInteraction,
)
from pinmark.pin.controller import PinState
from pinmark.pipeline import AnnotationContext, AnnotationSession
from pinmark.user_config import ConfigError, RepoPinStore, get_category_styles


def resolve_repo_root(file: Optional[Path] = None) -> Path:
    """Find the repository containing file (or the current directory).

    Exits with status 1 outside a repository.
    """
    start = file.resolve().parent if file is not None else None
    try:
        return get_repo_root(start)
    except GitError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1)


def build_session(
    repo_root: Path,
    document: Optional[FileDocument] = None,
    ref: Optional[str] = None,
    interaction: Optional[UserInteraction] = None,
) -> tuple[AnnotationSession, TerminalSurface, TerminalIndicator]:
    """Wire a terminal session for one repository and document.

    Args:
        repo_root: The repository root; git runs here.
        document: The document to annotate, if any.
        ref: One-off comparison target. When given, the saved pin is
            neither read nor written.
        interaction: Prompt implementation (defaults to the terminal).

    Returns:
        Tuple of (session, surface, indicator).
    """
    try:
        styles = get_category_styles(repo_root)
    except ConfigError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1)

    surface = TerminalSurface(styles)
    indicator = TerminalIndicator()
    context = AnnotationContext(
        workspace_root=repo_root,
        surface=surface,
        active_document=lambda: document,
        pin_state=PinState(pinned_ref=ref),
    )
    store = RepoPinStore(repo_root) if ref is None else None
    session = AnnotationSession(
        context,
        interaction or TyperInteraction(),
        indicator=indicator,
        store=store,
    )
    return session, surface, indicator


def format_counts(surface: TerminalSurface) -> str:
    """Summarize annotation counts, e.g. '2 modified, 1 added, 0 removed'."""
    counts = surface.counts()
    return ", ".join(f"{counts[kind]} {kind.value}" for kind in ChangeKind)


def print_annotated(
    document: FileDocument,
    surface: TerminalSurface,
    indicator: TerminalIndicator,
    color: bool = True,
) -> None:
    """Print the indicator, the annotated document and a summary line."""
    typer.echo(indicator.text)
    typer.echo(surface.render(document, color=color))
    typer.echo()
    typer.echo(format_counts(surface))
