"""Annotation pipeline.

Contains:
- AnnotationContext: Workspace, surface and pin state for one host session
- run_pipeline: Diff, classify, project and draw one document
- AnnotationSession: Wires host events and the pin command to the pipeline
"""

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Callable, Optional

from pinmark.annotate import (
    AnnotationRange,
    ChangeKind,
    apply_annotations,
    classify_diff,
    project_classification,
)
from pinmark.git.diff import get_file_diff
from pinmark.host.base import Document, RedrawSurface, StatusIndicator, UserInteraction
from pinmark.pin.controller import PinController, PinState, PinStore

logger = logging.getLogger(__name__)


@dataclass
class AnnotationContext:
    """State one pipeline run reads.

    Attributes:
        workspace_root: Directory git commands run in.
        surface: Where annotations are drawn.
        active_document: Returns the document the host currently shows.
        pin_state: The active comparison target.
    """

    workspace_root: Path
    surface: RedrawSurface
    active_document: Callable[[], Optional[Document]]
    pin_state: PinState = field(default_factory=PinState)


def run_pipeline(
    context: AnnotationContext, document: Optional[Document]
) -> Optional[dict[ChangeKind, list[AnnotationRange]]]:
    """Annotate a document with its changes against the active target.

    A missing diff (git failure, untracked file) clears the annotations.
    If the host switched to another document while the diff ran, the
    results are discarded and the surface is left untouched.

    Args:
        context: The session context.
        document: Document to annotate; None does nothing.

    Returns:
        The ranges drawn per category, or None if nothing was drawn.
    """
    if document is None:
        return None

    target = context.pin_state.active_target
    result = get_file_diff(document.path, target, cwd=context.workspace_root)
    classification = classify_diff(result.text)
    ranges = project_classification(classification, document)

    active = context.active_document()
    if active is None or active.identity != document.identity:
        logger.debug("Discarding annotations for %s: no longer the active document", document.path)
        return None

    apply_annotations(context.surface, ranges)
    return ranges


class AnnotationSession:
    """Runs the pipeline on focus, save and pin changes."""

    def __init__(
        self,
        context: AnnotationContext,
        interaction: UserInteraction,
        indicator: Optional[StatusIndicator] = None,
        store: Optional[PinStore] = None,
    ):
        self.context = context
        self.controller = PinController(
            context.pin_state,
            interaction,
            cwd=context.workspace_root,
            indicator=indicator,
            store=store,
            on_change=self.refresh,
        )

    def start(self) -> None:
        """Show the indicator and annotate whatever document is open."""
        self.controller.refresh_indicator()
        self.refresh()

    def refresh(self) -> None:
        run_pipeline(self.context, self.context.active_document())

    def on_focus_changed(self, document: Optional[Document]) -> None:
        run_pipeline(self.context, document)

    def on_document_saved(self, document: Optional[Document] = None) -> None:
        # Saves re-annotate the active document, whichever one was saved
        self.refresh()

    def toggle_pinned_reference(self) -> None:
        self.controller.toggle()
