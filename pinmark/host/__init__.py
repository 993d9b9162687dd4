"""Host integration for pinmark.

- base: Document, RedrawSurface, UserInteraction, StatusIndicator
- terminal: File-backed document and a terminal gutter renderer
"""

from pinmark.host.base import (
    Document,
    RedrawSurface,
    StatusIndicator,
    UserInteraction,
)


__all__ = [
    "Document",
    "RedrawSurface",
    "StatusIndicator",
    "UserInteraction",
]
