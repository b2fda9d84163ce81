"""Review-related exception classes.

Contains:
- ReviewError: Base exception for prompt preparation errors
- DiffTooLargeError: Raised when the diff stays over budget after reduction
"""


class ReviewError(Exception):
    """Base exception for review prompt errors."""

    pass


class DiffTooLargeError(ReviewError):
    """Raised when the diff does not fit the token budget even with reduced context."""

    pass
