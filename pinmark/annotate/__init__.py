"""Diff classification and projection for pinmark.

This package turns git diff text into gutter annotations:
- models: ChangeKind, HunkHeader, LineClassification, AnnotationRange
- parser: parse_hunk_headers, classify_hunk, classify_diff
- projector: project_classification, apply_annotations
"""

from pinmark.annotate.models import (
    AnnotationRange,
    ChangeKind,
    HunkHeader,
    LineClassification,
)
from pinmark.annotate.parser import (
    HUNK_HEADER_RE,
    classify_diff,
    classify_hunk,
    parse_hunk_headers,
)
from pinmark.annotate.projector import (
    apply_annotations,
    project_classification,
)


__all__ = [
    # Models
    "AnnotationRange",
    "ChangeKind",
    "HunkHeader",
    "LineClassification",
    # Parser
    "HUNK_HEADER_RE",
    "classify_diff",
    "classify_hunk",
    "parse_hunk_headers",
    # Projector
    "apply_annotations",
    "project_classification",
]
