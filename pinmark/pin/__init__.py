"""Pinned reference handling.

- controller: PinState, PinController
- display: short_ref, indicator_text
"""

from pinmark.pin.controller import (
    CHANGE_OPTION,
    CLEAR_OPTION,
    PinController,
    PinState,
    PinStore,
)
from pinmark.pin.display import (
    indicator_text,
    short_ref,
)


__all__ = [
    "CHANGE_OPTION",
    "CLEAR_OPTION",
    "PinController",
    "PinState",
    "PinStore",
    "indicator_text",
    "short_ref",
]
