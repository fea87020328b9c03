"""
Classification errors.

Every failure a classifier or statistic can raise. Each kind also derives
from the nearest builtin so callers that only know ``ValueError`` or
``ZeroDivisionError`` still catch it.

PRINCIPLE: "Fail loudly, before any arithmetic"
"""

from typing import Optional, Sequence


class ClassificationError(Exception):
    """Base class for all natbreaks errors."""


class EmptyInputError(ClassificationError, ValueError):
    """Raised when a sample has no usable values."""

    def __init__(self, what: str = "sample", message: Optional[str] = None):
        self.what = what
        if message is None:
            message = f"{what} is empty (no usable values after preprocessing)"
        super().__init__(message)


class NonFiniteValueError(ClassificationError, ValueError):
    """Raised when a sample holds NaN or infinite values."""

    def __init__(self, positions: Sequence[int], message: Optional[str] = None):
        self.positions = list(positions)
        if message is None:
            shown = ", ".join(str(p) for p in self.positions[:10])
            if len(self.positions) > 10:
                shown += f", ... ({len(self.positions) - 10} more)"
            message = f"sample contains non-finite values at positions: {shown}"
        super().__init__(message)


class InvalidClassCountError(ClassificationError, ValueError):
    """Raised when k is missing, below 1, or above the number of usable values."""

    def __init__(self, k, n: Optional[int] = None, message: Optional[str] = None):
        self.k = k
        self.n = n
        if message is None:
            if k is None:
                message = "a class count k is required for this method"
            elif n is None:
                message = f"invalid class count k={k}"
            else:
                message = f"invalid class count k={k}: must satisfy 1 <= k <= {n}"
        super().__init__(message)


class DivisionByZeroError(ClassificationError, ZeroDivisionError):
    """Raised by statistics that are undefined when a value is zero."""

    def __init__(self, statistic: str, message: Optional[str] = None):
        self.statistic = statistic
        if message is None:
            message = f"{statistic} is undefined for samples containing zero"
        super().__init__(message)


class InvalidInputError(ClassificationError, ValueError):
    """Raised when an input is outside the domain of the requested operation."""
