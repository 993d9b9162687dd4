"""Git diff retrieval for a single working file.

Contains:
- DiffResult: Outcome of a diff request (text on success, error on failure)
- get_file_diff: Diff one file in the working tree against a comparison target
"""

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Union

from pinmark.git.exceptions import GitError
from pinmark.git.refs import DEFAULT_TARGET
from pinmark.git.runner import _run_git_command

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class DiffResult:
    """Outcome of a diff request.

    A failed request carries empty text, so callers may treat it the same
    as "no differences" without inspecting ``ok``.
    """

    ok: bool
    text: str = ""
    error: Optional[str] = None

    @classmethod
    def success(cls, text: str) -> "DiffResult":
        return cls(ok=True, text=text)

    @classmethod
    def failure(cls, error: str) -> "DiffResult":
        return cls(ok=False, text="", error=error)

    @property
    def is_empty(self) -> bool:
        return not self.text.strip()


def get_file_diff(
    file_path: Union[str, Path],
    target: Optional[str] = None,
    cwd: Optional[Union[str, Path]] = None,
    context_lines: int = 0,
) -> DiffResult:
    """Get the unified diff of a working file against a comparison target.

    Runs ``git diff -U<context_lines> <target> -- <file_path>``. The repository
    is only read, never modified.

    Args:
        file_path: Path of the file in the working tree.
        target: Commit, branch, or ref to compare against (defaults to HEAD).
        cwd: Working directory for git (the workspace root).
        context_lines: Number of context lines around each hunk.

    Returns:
        A DiffResult. Any git failure (untracked file, bad target, no
        repository, git missing) yields a failed result with empty text.
        Targets starting with "-" fail without running git.
    """
    target = target or DEFAULT_TARGET
    if target.startswith("-"):
        logger.debug("Refusing option-like diff target %r", target)
        return DiffResult.failure(f"Invalid comparison target: {target}")

    args = ["diff", f"-U{context_lines}", target, "--", str(file_path)]
    try:
        text = _run_git_command(args, cwd=cwd, strip=False)
    except GitError as e:
        logger.debug("Diff unavailable for %s against %s: %s", file_path, target, e)
        return DiffResult.failure(str(e))
    return DiffResult.success(text)
