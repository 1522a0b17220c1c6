"""
Grid packer.

Lays a character sequence out row-major into a rows x cols grid. The
default grid is square with side ceil(sqrt(length)); rows and cols
default independently when only one is supplied.
"""

from __future__ import annotations

import logging
import math
from numbers import Integral

from infospectra.core.errors import DimensionMismatchError, InvalidInputError
from infospectra.core.models import PADDING_CHAR, CharacterGrid

logger = logging.getLogger(__name__)


def default_size(length: int) -> int:
    """Side of the smallest square grid that holds ``length`` characters."""
    if length <= 0:
        raise InvalidInputError("Cannot size a grid for an empty sequence")
    return math.ceil(math.sqrt(length))


def _check_dimension(name: str, value: object, rows: object, cols: object) -> int:
    # bool is an Integral subclass but never a meaningful dimension
    if isinstance(value, bool) or not isinstance(value, Integral):
        raise DimensionMismatchError(
            f"{name} must be a positive integer, got {value!r}", rows=rows, cols=cols
        )
    if value <= 0:
        raise DimensionMismatchError(
            f"{name} must be a positive integer, got {value}", rows=rows, cols=cols
        )
    return int(value)


def pack_grid(
    chars: str,
    rows: int | None = None,
    cols: int | None = None,
    padding: str = PADDING_CHAR,
) -> CharacterGrid:
    """
    Arrange characters into a rows x cols grid.

    Args:
        chars: Normalized, non-empty character sequence.
        rows: Explicit row count, or None for the square default.
        cols: Explicit column count, or None for the square default.
        padding: Single character used for cells past the end of ``chars``.

    Returns:
        CharacterGrid with exactly ``rows`` rows of ``cols`` cells.

    Raises:
        InvalidInputError: If ``chars`` is empty or ``padding`` is not one character.
        DimensionMismatchError: If an explicit dimension is not a positive integer.
    """
    if not chars:
        raise InvalidInputError("Cannot pack an empty sequence into a grid")
    if len(padding) != 1:
        raise InvalidInputError(f"Padding must be a single character, got {padding!r}")

    size = default_size(len(chars))
    n_rows = size if rows is None else _check_dimension("rows", rows, rows, cols)
    n_cols = size if cols is None else _check_dimension("cols", cols, rows, cols)

    capacity = n_rows * n_cols
    if capacity < len(chars):
        logger.warning(
            "Grid %dx%d holds %d of %d characters; the rest is dropped",
            n_rows,
            n_cols,
            capacity,
            len(chars),
        )

    cells = []
    for i in range(n_rows):
        start = i * n_cols
        row = list(chars[start : start + n_cols])
        row.extend(padding * (n_cols - len(row)))
        cells.append(tuple(row))

    return CharacterGrid(tuple(cells))
