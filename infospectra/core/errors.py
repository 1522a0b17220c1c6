"""
Error taxonomy for the analysis pipeline.

All errors are raised synchronously at the boundary where the bad input
is detected and carry a ``to_dict()`` for API responses.
"""

from __future__ import annotations

from typing import Any


class AnalysisError(Exception):
    """Base exception for analysis errors."""

    def __init__(self, message: str, details: str | None = None):
        self.details = details
        super().__init__(message)

    def to_dict(self) -> dict[str, Any]:
        return {
            "error": str(self),
            "type": type(self).__name__,
            "details": self.details,
        }


class InvalidInputError(AnalysisError, ValueError):
    """Empty or whitespace-only text submitted for analysis."""


class DimensionMismatchError(AnalysisError, ValueError):
    """Explicit grid dimensions that are not positive integers."""

    def __init__(self, message: str, rows: Any = None, cols: Any = None):
        self.rows = rows
        self.cols = cols
        super().__init__(message, details=f"rows={rows!r}, cols={cols!r}")


class DegenerateStatisticError(AnalysisError, ArithmeticError):
    """
    A statistic is undefined for the given input.

    Raised for Pearson correlation when either series has zero variance.
    """
