"""Interfaces a host editor provides to pinmark.

Contains:
- Document: Read access to the annotated document
- RedrawSurface: Applies and clears ranges per gutter category
- UserInteraction: Choices, prompts and notifications
- StatusIndicator: The pinned-reference indicator
"""

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Hashable, Optional

if TYPE_CHECKING:
    from pinmark.annotate.models import AnnotationRange, ChangeKind


class Document(ABC):
    """A document open in the host."""

    @property
    @abstractmethod
    def identity(self) -> Hashable:
        """Value that stays equal for as long as this is the same document."""
        pass

    @property
    @abstractmethod
    def path(self) -> str:
        """Filesystem path of the document."""
        pass

    @abstractmethod
    def line_count(self) -> int:
        pass

    @abstractmethod
    def line_text(self, index: int) -> str:
        pass


class RedrawSurface(ABC):
    """Where gutter annotations are drawn."""

    @abstractmethod
    def apply_ranges(self, kind: "ChangeKind", ranges: list["AnnotationRange"]) -> None:
        """Draw ranges for one category in that category's style."""
        pass

    @abstractmethod
    def clear_ranges(self, kind: "ChangeKind") -> None:
        """Remove every range previously drawn for one category."""
        pass


class UserInteraction(ABC):
    """Prompts and notifications shown to the user."""

    @abstractmethod
    def choose(self, options: list[str], placeholder: str = "") -> Optional[str]:
        """Let the user pick one option. Returns None if dismissed."""
        pass

    @abstractmethod
    def prompt(
        self, message: str, placeholder: str = "", value: Optional[str] = None
    ) -> Optional[str]:
        """Ask for free text, pre-filled with value. Returns None if dismissed."""
        pass

    @abstractmethod
    def show_info(self, message: str) -> None:
        pass

    @abstractmethod
    def show_error(self, message: str) -> None:
        pass


class StatusIndicator(ABC):
    """Displays the active comparison target."""

    @abstractmethod
    def update(self, text: str, tooltip: str) -> None:
        pass
