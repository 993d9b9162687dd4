"""Projection of classified lines onto a live document.

Contains:
- project_classification: Map line indices to full-line ranges
- apply_annotations: Replace the ranges shown on a redraw surface
"""

import logging
from typing import Optional

from pinmark.annotate.models import AnnotationRange, ChangeKind, LineClassification
from pinmark.host.base import Document, RedrawSurface

logger = logging.getLogger(__name__)


def _to_range(document: Document, index: int, line_count: int) -> Optional[AnnotationRange]:
    if 0 <= index < line_count:
        return AnnotationRange(index, 0, len(document.line_text(index)))
    return None


def project_classification(
    classification: LineClassification, document: Document
) -> dict[ChangeKind, list[AnnotationRange]]:
    """Convert line indices into ranges bounded by the current document.

    Indices outside the document are dropped; the document may have changed
    since the diff was taken.

    Args:
        classification: Classified line indices.
        document: The document being annotated.

    Returns:
        Mapping with an entry (possibly empty) for every ChangeKind.
    """
    line_count = document.line_count()
    projected: dict[ChangeKind, list[AnnotationRange]] = {}
    dropped = 0

    for kind in ChangeKind:
        ranges = []
        for index in classification.lines[kind]:
            annotation = _to_range(document, index, line_count)
            if annotation is None:
                dropped += 1
                continue
            ranges.append(annotation)
        projected[kind] = ranges

    if dropped:
        logger.debug("Dropped %d line(s) outside %d-line document", dropped, line_count)
    return projected


def apply_annotations(
    surface: RedrawSurface, ranges: dict[ChangeKind, list[AnnotationRange]]
) -> None:
    """Clear every category on the surface, then apply the new ranges.

    Args:
        surface: The redraw surface to update.
        ranges: Ranges per category; missing categories are left empty.
    """
    for kind in ChangeKind:
        surface.clear_ranges(kind)
    for kind in ChangeKind:
        surface.apply_ranges(kind, ranges.get(kind, []))
