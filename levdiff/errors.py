"""
levdiff.errors — Exceptions raised by levdiff.

    LevenshteinError
    ├── InvalidDistanceMatrixError   (also a ValueError)
    │   └── DimensionMismatchError
    └── InvalidEditPositionError     (also an IndexError)

Degenerate inputs (empty, identical or disjoint sequences) are never
errors; they produce distance 0 or max(m, n) and empty or full scripts.
"""

from typing import Any


class LevenshteinError(Exception):
    """Base class for every error raised by levdiff."""


class InvalidDistanceMatrixError(LevenshteinError, ValueError):
    """The distance matrix does not belong to the (source, target) pair."""


class DimensionMismatchError(InvalidDistanceMatrixError):
    """The distance matrix has the wrong shape for the (source, target) pair."""

    def __init__(self, expected: tuple[int, int], actual: tuple[int, int]):
        self.expected = expected
        self.actual = actual
        super().__init__(
            f"distance matrix has shape {actual}, expected {expected} "
            f"(len(source)+1, len(target)+1)"
        )


class InvalidEditPositionError(LevenshteinError, IndexError):
    """An edit points outside the sequence it is being applied to."""

    def __init__(self, edit: Any, index: int, length: int):
        self.edit = edit
        self.index = index
        self.length = length
        super().__init__(
            f"edit #{index} ({edit!r}) is out of range for a sequence "
            f"of length {length}"
        )
