"""Reference validation.

Contains:
- DEFAULT_TARGET: The comparison target used when nothing is pinned
- verify_reference: Check that a ref resolves to an object in the repository
"""

import logging
from pathlib import Path
from typing import Optional, Union

from pinmark.git.exceptions import GitError
from pinmark.git.runner import _run_git_command

logger = logging.getLogger(__name__)

DEFAULT_TARGET = "HEAD"


def verify_reference(ref: str, cwd: Optional[Union[str, Path]] = None) -> bool:
    """Check that a commit, branch, or remote ref exists in the repository.

    Refs beginning with '-' are rejected outright so that user input is
    never interpreted as a git option.

    Args:
        ref: The reference to check (e.g. "main", "origin/develop", "HEAD~2").
        cwd: Working directory for git (the workspace root).

    Returns:
        True if git can resolve the reference to an object.
    """
    if not ref or ref.startswith("-"):
        return False
    try:
        _run_git_command(["rev-parse", "--verify", "--quiet", f"{ref}^{{object}}"], cwd=cwd)
        return True
    except GitError as e:
        logger.debug("Reference %r did not verify: %s", ref, e)
        return False
