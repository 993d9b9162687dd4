"""Git command runner and repository utilities.

Contains:
- _run_git_command: Run a git command and return its output
- get_repo_root: Get the root directory of the git repository
"""

import subprocess
from pathlib import Path
from typing import Optional, Union

from pinmark.git.exceptions import GitError, GitNotInstalledError, NotARepositoryError


def _run_git_command(
    args: list[str],
    cwd: Optional[Union[str, Path]] = None,
    strip: bool = True,
) -> str:
    """Run a git command and return its output.

    The command never goes through a shell, so refs and paths are passed
    to git verbatim. Output is decoded as UTF-8; undecodable bytes (files in
    other encodings) become U+FFFD.

    Args:
        args: List of arguments to pass to git.
        cwd: Working directory for the command (defaults to the process cwd).
        strip: Whether to strip surrounding whitespace from stdout.

    Returns:
        The stdout of the git command.

    Raises:
        GitError: If the command fails.
        GitNotInstalledError: If git is not on PATH.
    """
    try:
        result = subprocess.run(
            ["git"] + args,
            capture_output=True,
            encoding="utf-8",
            errors="replace",
            check=True,
            cwd=str(cwd) if cwd is not None else None,
        )
        return result.stdout.strip() if strip else result.stdout
    except subprocess.CalledProcessError as e:
        stderr = (e.stderr or "").strip()
        raise GitError(f"Git command failed: git {' '.join(args)}\n{stderr}")
    except FileNotFoundError:
        raise GitNotInstalledError("Git is not installed or not in PATH.")


def get_repo_root(cwd: Optional[Union[str, Path]] = None) -> Path:
    """Get the root directory of the git repository containing cwd.

    Args:
        cwd: Directory to start from (defaults to the process cwd).

    Returns:
        Path to the repository root.

    Raises:
        GitNotInstalledError: If git is not on PATH.
        NotARepositoryError: If not in a git repository.
    """
    try:
        root = _run_git_command(["rev-parse", "--show-toplevel"], cwd=cwd)
        return Path(root)
    except GitNotInstalledError:
        raise
    except GitError:
        raise NotARepositoryError(
            "Not in a git repository. Please run this command from within a git repo."
        )
