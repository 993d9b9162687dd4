"""Git access for pinmark.

This package provides the read-only git operations pinmark needs:
- exceptions: GitError, GitNotInstalledError, NotARepositoryError
- runner: _run_git_command, get_repo_root
- refs: verify_reference, DEFAULT_TARGET
- diff: get_file_diff, DiffResult
"""

# Exceptions
from pinmark.git.exceptions import (
    GitError,
    GitNotInstalledError,
    NotARepositoryError,
)

# Runner utilities
from pinmark.git.runner import (
    _run_git_command,
    get_repo_root,
)

# Reference utilities
from pinmark.git.refs import (
    DEFAULT_TARGET,
    verify_reference,
)

# Diff utilities
from pinmark.git.diff import (
    DiffResult,
    get_file_diff,
)


__all__ = [
    # Exceptions
    "GitError",
    "GitNotInstalledError",
    "NotARepositoryError",
    # Runner
    "_run_git_command",
    "get_repo_root",
    # Refs
    "DEFAULT_TARGET",
    "verify_reference",
    # Diff
    "DiffResult",
    "get_file_diff",
]
