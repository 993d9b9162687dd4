"""Git-related exception classes.

Contains all exception classes for Git operations:
- GitError: Base exception for git-related errors
- GitNotInstalledError: Raised when the git executable cannot be found
- NotARepositoryError: Raised when a directory is not inside a git repository
"""


class GitError(Exception):
    """Custom exception for git-related errors."""

    pass


class GitNotInstalledError(GitError):
    """Raised when the git executable cannot be found."""

    pass


class NotARepositoryError(GitError):
    """Raised when a directory is not inside a git repository."""

    pass
