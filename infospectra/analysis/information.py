"""Information grid builder: map each grid cell to its information in bits."""

from __future__ import annotations

import numpy as np

from infospectra.core.errors import InvalidInputError
from infospectra.core.models import CharacterGrid, FrequencyTable, InformationGrid


def build_information_grid(grid: CharacterGrid, table: FrequencyTable) -> InformationGrid:
    """
    Look up every cell's information value in ``table``.

    The table is expected to be built from the same grid, in which case
    every lookup succeeds.
    """
    values = np.empty(grid.dimensions, dtype=float)
    for i, row in enumerate(grid):
        for j, char in enumerate(row):
            try:
                values[i, j] = table[char].information
            except KeyError as exc:
                raise InvalidInputError(
                    f"Character {char!r} at ({i}, {j}) is missing from the frequency table"
                ) from exc
    return InformationGrid(values)
