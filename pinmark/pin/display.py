"""Display helpers for the pinned reference.

Contains:
- short_ref: Shorten long refs (usually SHAs) for display
- indicator_text: Status indicator text and tooltip for the current pin
"""

from typing import Optional

PIN_ICON = "📌"

# Refs longer than this are shown by their first SHORT_REF_LENGTH characters
MAX_DISPLAY_LENGTH = 10
SHORT_REF_LENGTH = 7


def short_ref(ref: str, ellipsis: bool = False) -> str:
    """Shorten a ref for display.

    Args:
        ref: The full reference.
        ellipsis: Append "..." when the ref was shortened.

    Returns:
        The ref itself, or its first seven characters if it is long.
    """
    if len(ref) <= MAX_DISPLAY_LENGTH:
        return ref
    return ref[:SHORT_REF_LENGTH] + ("..." if ellipsis else "")


def indicator_text(pinned_ref: Optional[str]) -> tuple[str, str]:
    """Build the status indicator text and tooltip.

    Args:
        pinned_ref: The pinned reference, or None.

    Returns:
        Tuple of (text, tooltip).
    """
    if pinned_ref:
        return (
            f"{PIN_ICON} {short_ref(pinned_ref)}",
            f"Pinned reference: {pinned_ref}. Click to change or clear.",
        )
    return (
        f"{PIN_ICON} Pin Reference",
        "Click to pin a commit SHA, branch, or remote reference for highlighting changes",
    )
