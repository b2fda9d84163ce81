"""Git-related exception classes.

Contains all exception classes for git diff operations:
- GitError: Base exception for git-related errors
- DiffCommandError: Raised when `git diff` fails or cannot be run
- EmptyDiffError: Raised when `git diff` produces no output
"""


class GitError(Exception):
    """Custom exception for git-related errors."""

    pass


class DiffCommandError(GitError):
    """Raised when the git diff command exits non-zero or cannot be started."""

    pass


class EmptyDiffError(GitError):
    """Raised when there are no changes to review."""

    pass
