"""Terminal host for pinmark.

Contains:
- FileDocument: A snapshot of a file on disk
- TerminalSurface: Collects ranges and renders a coloured gutter
- TerminalIndicator: Holds the pinned-reference indicator text
- TyperInteraction: Prompts and notifications via typer
"""

from pathlib import Path
from typing import Hashable, Optional

import typer

from pinmark.annotate.models import AnnotationRange, ChangeKind
from pinmark.host.base import Document, RedrawSurface, StatusIndicator, UserInteraction
from pinmark.user_config import CategoryStyle


class FileDocument(Document):
    """A file's lines as read from disk."""

    def __init__(self, path: Path):
        self._path = Path(path).resolve()
        self._lines = self._read()

    def _read(self) -> list[str]:
        text = self._path.read_text(encoding="utf-8", errors="replace")
        lines = text.splitlines()
        # An editor shows a trailing empty line after a final newline
        if text.endswith(("\n", "\r")) or not lines:
            lines.append("")
        return lines

    def reload(self) -> None:
        self._lines = self._read()

    @property
    def identity(self) -> Hashable:
        return str(self._path)

    @property
    def path(self) -> str:
        return str(self._path)

    def line_count(self) -> int:
        return len(self._lines)

    def line_text(self, index: int) -> str:
        return self._lines[index]


class TerminalSurface(RedrawSurface):
    """Keeps the current ranges per category and draws them as a gutter."""

    def __init__(self, styles: dict[ChangeKind, CategoryStyle]):
        self.styles = styles
        self.ranges: dict[ChangeKind, list[AnnotationRange]] = {kind: [] for kind in ChangeKind}

    def apply_ranges(self, kind: ChangeKind, ranges: list[AnnotationRange]) -> None:
        self.ranges[kind] = list(ranges)

    def clear_ranges(self, kind: ChangeKind) -> None:
        self.ranges[kind] = []

    def line_kinds(self) -> dict[int, ChangeKind]:
        """Map annotated lines to their category; later categories win."""
        kinds = {}
        for kind in ChangeKind:
            for annotation in self.ranges[kind]:
                kinds[annotation.line] = kind
        return kinds

    def counts(self) -> dict[ChangeKind, int]:
        return {kind: len(self.ranges[kind]) for kind in ChangeKind}

    def render(self, document: Document, color: bool = True) -> str:
        """Render the document with a one-character gutter and line numbers.

        Args:
            document: The document the ranges were drawn for.
            color: Whether to emit ANSI colours.

        Returns:
            The rendered text, one output line per document line.
        """
        kinds = self.line_kinds()
        width = len(str(document.line_count()))
        out = []
        for index in range(document.line_count()):
            kind = kinds.get(index)
            if kind is None:
                glyph = " "
            else:
                style = self.styles[kind]
                glyph = typer.style(style.glyph, fg=style.color) if color else style.glyph
            out.append(f"{glyph} {index + 1:>{width}} │ {document.line_text(index)}")
        return "\n".join(out)


class TerminalIndicator(StatusIndicator):
    """Remembers the last indicator update for the CLI to print."""

    def __init__(self):
        self.text = ""
        self.tooltip = ""

    def update(self, text: str, tooltip: str) -> None:
        self.text = text
        self.tooltip = tooltip


class TyperInteraction(UserInteraction):
    """Terminal prompts. An empty answer counts as dismissing the prompt."""

    def choose(self, options: list[str], placeholder: str = "") -> Optional[str]:
        if placeholder:
            typer.echo(placeholder)
        for number, option in enumerate(options, start=1):
            typer.echo(f"  {number}. {option}")
        answer = typer.prompt("Choice", default="", show_default=False).strip()
        if not answer:
            return None
        if answer.isdigit() and 1 <= int(answer) <= len(options):
            return options[int(answer) - 1]
        return None

    def prompt(
        self, message: str, placeholder: str = "", value: Optional[str] = None
    ) -> Optional[str]:
        text = f"{message} ({placeholder})" if placeholder else message
        answer = typer.prompt(text, default=value or "", show_default=bool(value))
        return answer or None

    def show_info(self, message: str) -> None:
        typer.echo(message)

    def show_error(self, message: str) -> None:
        typer.echo(typer.style(message, fg="red"), err=True)
