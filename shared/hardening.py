"""Boundary hardening utilities for infospectra.

Provides upload limits, user-friendly error formatting, and input
validation with path traversal prevention. Used by the HTTP layer and
by callers that accept files or text from end users.
"""

from __future__ import annotations

import math
import re
from dataclasses import dataclass
from pathlib import Path

from infospectra.core.errors import (
    DegenerateStatisticError,
    DimensionMismatchError,
    InvalidInputError,
)
from infospectra.loaders.base import LoaderError

# ---------------------------------------------------------------------------
# 1. Resource Limits
# ---------------------------------------------------------------------------


@dataclass
class ResourceLimits:
    """Thresholds for user-supplied input.

    Attributes:
        max_file_size_mb: Maximum uploaded file size in megabytes.
        max_text_chars: Maximum text length accepted for analysis.
        max_grid_cells: Maximum rows x cols of a requested grid.
    """

    max_file_size_mb: float = 5.0
    max_text_chars: int = 1_000_000
    max_grid_cells: int = 1_000_000

    @property
    def max_file_size_bytes(self) -> int:
        return int(self.max_file_size_mb * 1024 * 1024)


# ---------------------------------------------------------------------------
# 2. Error Formatting
# ---------------------------------------------------------------------------


@dataclass
class UserFriendlyError:
    """A structured error designed for end-user consumption.

    Attributes:
        message: Clear description for the user.
        suggestion: Actionable guidance.
        component: Originating subsystem (analysis, comparison, upload).
        error_code: Machine-readable identifier (e.g. "ANLZ_005").
        technical_detail: Debugging info for logs only -- never shown to users.
    """

    message: str
    suggestion: str
    component: str
    error_code: str
    technical_detail: str = ""

    def to_dict(self) -> dict[str, str]:
        """Serialize for API responses (excludes technical_detail).

        Returns:
            Dictionary safe for sending to end users.
        """
        return {
            "message": self.message,
            "suggestion": self.suggestion,
            "component": self.component,
            "error_code": self.error_code,
        }


class ErrorFormatter:
    """Convert internal exceptions to user-friendly messages.

    All methods return a ``UserFriendlyError`` and never expose internal
    paths, stack traces, or implementation details to the end user.
    """

    def format_analysis_error(self, error: Exception) -> UserFriendlyError:
        """Format an error raised while analyzing one text.

        Args:
            error: The caught exception.

        Returns:
            User-friendly error with actionable suggestion.
        """
        return self._format(error, component="analysis", code_prefix="ANLZ")

    def format_comparison_error(self, error: Exception) -> UserFriendlyError:
        """Format an error raised while comparing two texts.

        Args:
            error: The caught exception.

        Returns:
            User-friendly error with actionable suggestion.
        """
        return self._format(error, component="comparison", code_prefix="CMPR")

    def format_upload_error(self, error: Exception) -> UserFriendlyError:
        """Format an error raised while reading an uploaded file.

        Args:
            error: The caught exception.

        Returns:
            User-friendly error with actionable suggestion.
        """
        return self._format(error, component="upload", code_prefix="UPLD")

    # ------------------------------------------------------------------

    def _format(
        self,
        error: Exception,
        *,
        component: str,
        code_prefix: str,
    ) -> UserFriendlyError:
        """Shared formatting logic.

        Args:
            error: The caught exception.
            component: Subsystem name.
            code_prefix: Short prefix for error code.

        Returns:
            Structured error with safe user message.
        """
        message, suggestion, code_suffix = _classify_error(error)
        return UserFriendlyError(
            message=message,
            suggestion=suggestion,
            component=component,
            error_code=f"{code_prefix}_{code_suffix}",
            technical_detail=repr(error),
        )


def _classify_error(error: Exception) -> tuple[str, str, str]:
    """Map an exception to (message, suggestion, code_suffix).

    Specific analysis errors are checked before ValueError, which they
    subclass.

    Args:
        error: The caught exception.

    Returns:
        Tuple of user message, suggestion text, and error code suffix.
    """
    if isinstance(error, DimensionMismatchError):
        return (
            "The requested grid size is not valid.",
            "Use positive whole numbers for rows and columns, or leave them empty.",
            "006",
        )
    if isinstance(error, InvalidInputError):
        return (
            "There is no text to analyze.",
            "Enter or upload a non-empty text.",
            "005",
        )
    if isinstance(error, DegenerateStatisticError):
        return (
            "The correlation is undefined because a spectrum is constant.",
            "Try a longer or more varied text.",
            "007",
        )
    if isinstance(error, (LoaderError, UnicodeDecodeError)):
        return (
            "The file could not be read as text.",
            "Upload a plain text (.txt) file.",
            "008",
        )
    if isinstance(error, ValidationError):
        return (
            "The input was rejected.",
            "Check the input values and try again.",
            "009",
        )
    if isinstance(error, FileNotFoundError):
        return (
            "A required file could not be found.",
            "Check that the file path is correct and the file exists.",
            "001",
        )
    if isinstance(error, PermissionError):
        return (
            "Permission denied when accessing a resource.",
            "Check file permissions and ensure the application has access.",
            "002",
        )
    if isinstance(error, MemoryError):
        return (
            "The system ran out of memory.",
            "Analyze a shorter text.",
            "004",
        )
    if isinstance(error, ValueError):
        return (
            "Invalid input was provided.",
            "Check the input values and try again.",
            "005",
        )
    return (
        "An unexpected error occurred.",
        "If this keeps happening, please report the issue.",
        "999",
    )


# ---------------------------------------------------------------------------
# 3. Input Validation
# ---------------------------------------------------------------------------

# Characters that could be used for path traversal
_TRAVERSAL_PATTERN = re.compile(r"(\.\.[\\/]|[\\/]\.\.)")
# Null bytes in paths
_NULL_BYTE = re.compile(r"\x00")


class ValidationError(Exception):
    """Raised when input validation fails."""


class InputValidator:
    """Validate inputs at system boundaries.

    All methods raise ``ValidationError`` on failure unless
    documented otherwise.

    Args:
        limits: Size limits. Uses defaults when None.
    """

    def __init__(self, limits: ResourceLimits | None = None) -> None:
        self.limits = limits or ResourceLimits()

    def validate_file_path(
        self,
        path: str | Path,
        *,
        must_exist: bool = True,
        allowed_extensions: tuple[str, ...] | None = None,
        base_directory: Path | None = None,
    ) -> Path:
        """Validate a file path, preventing traversal attacks.

        Args:
            path: Raw path from user input.
            must_exist: Require the file to exist on disk.
            allowed_extensions: Restrict to these suffixes (e.g. (".txt",)).
            base_directory: Confine resolved path under this directory.

        Returns:
            Resolved, validated Path.

        Raises:
            ValidationError: On any validation failure.
        """
        raw = str(path)
        self._check_traversal(raw)
        resolved = Path(raw).resolve()

        if base_directory is not None:
            base = base_directory.resolve()
            if not _is_subpath(resolved, base):
                raise ValidationError("Path is outside the allowed directory.")

        if allowed_extensions is not None:
            if resolved.suffix.lower() not in {e.lower() for e in allowed_extensions}:
                allowed = ", ".join(allowed_extensions)
                raise ValidationError(f"File type not allowed. Accepted types: {allowed}")

        if must_exist and not resolved.exists():
            raise ValidationError("File does not exist.")

        if must_exist and resolved.stat().st_size > self.limits.max_file_size_bytes:
            raise ValidationError(
                f"File exceeds the maximum size of {self.limits.max_file_size_mb} MB."
            )

        return resolved

    def validate_upload_size(self, size_bytes: int) -> None:
        """Reject uploads larger than the configured limit.

        Args:
            size_bytes: Size of the uploaded content.

        Raises:
            ValidationError: When the upload is too large.
        """
        if size_bytes > self.limits.max_file_size_bytes:
            raise ValidationError(
                f"File exceeds the maximum size of {self.limits.max_file_size_mb} MB."
            )

    def validate_text(self, text: str | None) -> str:
        """Check that text is non-blank and within the length limit.

        The text itself is returned unchanged; normalization is the
        pipeline's job.

        Args:
            text: Raw user text.

        Returns:
            The same text.

        Raises:
            ValidationError: When the text is blank or too long.
        """
        if text is None or not text.strip():
            raise ValidationError("Text is empty.")
        if len(text) > self.limits.max_text_chars:
            raise ValidationError(
                f"Text exceeds the maximum of {self.limits.max_text_chars} characters."
            )
        return text

    def validate_dimensions(self, rows: object, cols: object, text_length: int) -> None:
        """Reject explicit grid dimensions whose cell count exceeds the limit.

        A missing dimension takes the square default for ``text_length``.
        Non-integer values are left to the grid packer, which rejects them.

        Args:
            rows: Requested row count, or None.
            cols: Requested column count, or None.
            text_length: Length of the text to be packed.

        Raises:
            DimensionMismatchError: When rows x cols exceeds ``max_grid_cells``.
        """
        side = math.ceil(math.sqrt(max(text_length, 1)))
        n_rows = rows if _is_count(rows) else side
        n_cols = cols if _is_count(cols) else side
        cells = n_rows * n_cols
        if cells > self.limits.max_grid_cells:
            raise DimensionMismatchError(
                f"Grid {n_rows}x{n_cols} has {cells} cells; "
                f"the maximum is {self.limits.max_grid_cells}.",
                rows=rows,
                cols=cols,
            )

    # ------------------------------------------------------------------

    @staticmethod
    def _check_traversal(raw: str) -> None:
        """Reject paths with traversal sequences or null bytes.

        Args:
            raw: Raw path string.

        Raises:
            ValidationError: On dangerous patterns.
        """
        if _NULL_BYTE.search(raw):
            raise ValidationError("Path contains null bytes.")
        if _TRAVERSAL_PATTERN.search(raw):
            raise ValidationError("Path traversal is not allowed.")


def _is_count(value: object) -> bool:
    return isinstance(value, int) and not isinstance(value, bool) and value > 0


def _is_subpath(child: Path, parent: Path) -> bool:
    """Return True when *child* is under *parent*.

    Args:
        child: Resolved candidate path.
        parent: Resolved base directory.

    Returns:
        True if child is equal to or nested inside parent.
    """
    try:
        child.relative_to(parent)
        return True
    except ValueError:
        return False
