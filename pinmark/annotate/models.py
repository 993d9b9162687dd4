"""Data models for pinmark annotations.

Contains:
- ChangeKind: The three gutter categories (modified, added, removed)
- HunkHeader: A parsed @@ -a,b +c,d @@ record
- LineClassification: Line indices grouped by ChangeKind
- AnnotationRange: A full-line range in the live document
"""

from dataclasses import dataclass, field
from enum import Enum


class ChangeKind(str, Enum):
    """Gutter category of a changed line."""

    MODIFIED = "modified"
    ADDED = "added"
    REMOVED = "removed"


@dataclass(frozen=True)
class HunkHeader:
    """One parsed hunk header. Starts and counts are 1-based, as in the diff."""

    old_start: int
    old_count: int
    new_start: int
    new_count: int


def _empty_lines() -> dict[ChangeKind, list[int]]:
    return {kind: [] for kind in ChangeKind}


@dataclass
class LineClassification:
    """Zero-based line indices of the working file, grouped by category.

    Indices keep the order in which hunks appear in the diff. Indices from
    different hunks are not deduplicated.
    """

    lines: dict[ChangeKind, list[int]] = field(default_factory=_empty_lines)

    @property
    def modified(self) -> list[int]:
        return self.lines[ChangeKind.MODIFIED]

    @property
    def added(self) -> list[int]:
        return self.lines[ChangeKind.ADDED]

    @property
    def removed(self) -> list[int]:
        return self.lines[ChangeKind.REMOVED]

    def add(self, kind: ChangeKind, index: int) -> None:
        self.lines[kind].append(index)

    def is_empty(self) -> bool:
        return not any(self.lines.values())


@dataclass(frozen=True)
class AnnotationRange:
    """A range on a single document line, from start_column to end_column."""

    line: int
    start_column: int
    end_column: int
