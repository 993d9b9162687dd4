"""Hunk header parser.

Contains functions for turning unified diff text into gutter categories:
- parse_hunk_headers: Extract every @@ header from a diff
- classify_hunk: Add the lines of one hunk to a classification
- classify_diff: Classify all hunks of a diff
"""

import re

from pinmark.annotate.models import ChangeKind, HunkHeader, LineClassification


# Format: @@ -old_start[,old_count] +new_start[,new_count] @@
HUNK_HEADER_RE = re.compile(
    r"^@@ -(\d+)(?:,(\d+))? \+(\d+)(?:,(\d+))? @@",
    re.MULTILINE,
)


def parse_hunk_headers(diff_text: str) -> list[HunkHeader]:
    """Extract hunk headers from unified diff text, top to bottom.

    Omitted counts default to 1. Text without any header yields an empty list.

    Args:
        diff_text: Raw output of git diff.

    Returns:
        List of HunkHeader objects in order of appearance.
    """
    headers: list[HunkHeader] = []
    if not diff_text:
        return headers

    for match in HUNK_HEADER_RE.finditer(diff_text):
        headers.append(
            HunkHeader(
                old_start=int(match.group(1)),
                old_count=int(match.group(2)) if match.group(2) else 1,
                new_start=int(match.group(3)),
                new_count=int(match.group(4)) if match.group(4) else 1,
            )
        )
    return headers


def classify_hunk(header: HunkHeader, classification: LineClassification) -> None:
    """Add the working-file lines touched by one hunk to a classification.

    - Both sides non-empty: the new range is modified.
    - Only the new side: the new range is added.
    - Only the old side: one removed marker on the line before the deletion.
    - Neither side: nothing.

    Args:
        header: The hunk to classify.
        classification: Classification to append to (mutated in place).
    """
    new_lines = range(header.new_start, header.new_start + header.new_count)

    if header.old_count > 0 and header.new_count > 0:
        for line in new_lines:
            classification.add(ChangeKind.MODIFIED, line - 1)
    elif header.new_count > 0:
        for line in new_lines:
            classification.add(ChangeKind.ADDED, line - 1)
    elif header.old_count > 0:
        # For a deletion new_start names the line before the removed block
        classification.add(ChangeKind.REMOVED, max(0, header.new_start - 1))


def classify_diff(diff_text: str) -> LineClassification:
    """Classify every hunk of a diff into modified, added and removed lines.

    Args:
        diff_text: Raw output of git diff (may be empty or malformed).

    Returns:
        LineClassification with zero-based line indices.
    """
    classification = LineClassification()
    for header in parse_hunk_headers(diff_text):
        classify_hunk(header, classification)
    return classification
