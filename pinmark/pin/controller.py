"""Pinned reference state machine.

Contains:
- PinState: The active comparison target (pinned ref or HEAD)
- PinStore: Interface for keeping a pin across process runs
- PinController: Pin, change, clear and toggle the pinned reference
"""

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Callable, Optional, Protocol, Union

from pinmark.git.refs import DEFAULT_TARGET, verify_reference
from pinmark.host.base import StatusIndicator, UserInteraction
from pinmark.pin.display import indicator_text, short_ref

logger = logging.getLogger(__name__)

CHANGE_OPTION = "Change pinned reference"
CLEAR_OPTION = "Clear pinned reference"
REF_PROMPT = "Enter git reference to pin"
REF_PLACEHOLDER = "e.g., main, origin/develop, a1b2c3d, HEAD~2"


@dataclass
class PinState:
    """Either unpinned (compare against HEAD) or pinned to one ref."""

    pinned_ref: Optional[str] = None

    @property
    def is_pinned(self) -> bool:
        return self.pinned_ref is not None

    @property
    def active_target(self) -> str:
        return self.pinned_ref or DEFAULT_TARGET


class PinStore(Protocol):
    def load(self) -> Optional[str]: ...

    def save(self, ref: Optional[str]) -> None: ...


class PinController:
    """Changes the pinned reference in response to user actions.

    Every public operation ends by refreshing the status indicator and
    calling ``on_change``, even when the state did not change.
    """

    def __init__(
        self,
        state: PinState,
        interaction: UserInteraction,
        cwd: Optional[Union[str, Path]] = None,
        indicator: Optional[StatusIndicator] = None,
        store: Optional[PinStore] = None,
        on_change: Optional[Callable[[], None]] = None,
        verify: Optional[Callable[..., bool]] = None,
    ):
        self.state = state
        self.interaction = interaction
        self.cwd = cwd
        self.indicator = indicator
        self.store = store
        self.on_change = on_change
        self._verify = verify or verify_reference

        if store is not None and state.pinned_ref is None:
            state.pinned_ref = store.load()

    @property
    def pinned_ref(self) -> Optional[str]:
        return self.state.pinned_ref

    @property
    def active_target(self) -> str:
        return self.state.active_target

    def pin(self, ref: Optional[str]) -> bool:
        """Pin a reference after checking it exists in the repository.

        Args:
            ref: User input; surrounding whitespace is ignored.

        Returns:
            True if the pin changed to ``ref``.
        """
        try:
            return self._pin(ref)
        finally:
            self._finish()

    def clear(self) -> None:
        """Go back to comparing against HEAD."""
        try:
            self._clear()
        finally:
            self._finish()

    def toggle(self) -> None:
        """Interactive pin command.

        When pinned, offers to change or clear the pin; otherwise asks for a
        reference. Dismissing a prompt leaves the state as it was.
        """
        try:
            if self.state.is_pinned:
                choice = self.interaction.choose(
                    [CHANGE_OPTION, CLEAR_OPTION],
                    placeholder=f"Current pinned reference: {short_ref(self.state.pinned_ref, ellipsis=True)}",
                )
                if choice == CLEAR_OPTION:
                    self._clear()
                elif choice == CHANGE_OPTION:
                    self._pin(
                        self.interaction.prompt(
                            REF_PROMPT, placeholder=REF_PLACEHOLDER, value=self.state.pinned_ref
                        )
                    )
            else:
                self._pin(self.interaction.prompt(REF_PROMPT, placeholder=REF_PLACEHOLDER))
        finally:
            self._finish()

    def refresh_indicator(self) -> None:
        if self.indicator is not None:
            self.indicator.update(*indicator_text(self.state.pinned_ref))

    def _pin(self, ref: Optional[str]) -> bool:
        ref = (ref or "").strip()
        if not ref:
            return False

        if not self._verify(ref, cwd=self.cwd):
            logger.debug("Rejected pin of unknown reference %r", ref)
            self.interaction.show_error(f"Invalid git reference: {ref}")
            return False

        was_pinned = self.state.is_pinned
        self.state.pinned_ref = ref
        if self.store is not None:
            self.store.save(ref)

        shown = short_ref(ref, ellipsis=True)
        if was_pinned:
            self.interaction.show_info(f"Pinned reference updated to: {shown}")
        else:
            self.interaction.show_info(f"Reference pinned: {shown}")
        return True

    def _clear(self) -> None:
        if not self.state.is_pinned:
            return
        self.state.pinned_ref = None
        if self.store is not None:
            self.store.save(None)
        self.interaction.show_info("Pinned reference cleared. Now comparing against HEAD.")

    def _finish(self) -> None:
        self.refresh_indicator()
        if self.on_change is not None:
            self.on_change()
