"""
Data model for infospectra.

This module defines the structures that flow through the analysis
pipeline: the character grid, the frequency table, the information grid,
spectra, and the aggregate analysis result. Every structure is immutable
once constructed and validates its invariants at construction time.
"""

from __future__ import annotations

import math
from collections.abc import Iterator, Mapping
from dataclasses import dataclass
from enum import Enum
from types import MappingProxyType
from typing import Any

import numpy as np

from infospectra.core.errors import DimensionMismatchError, InvalidInputError

# Fill character for grid cells beyond the end of the text
PADDING_CHAR = " "

# Presentation thresholds (labels only, not invariants)
HIGH_CORRELATION = 0.7
MEDIUM_CORRELATION = 0.5
HIGH_REDUNDANCY_BITS = 3.0
MEDIUM_REDUNDANCY_BITS = 1.0


def correlation_band(coefficient: float) -> str:
    """Qualitative label for a correlation coefficient."""
    if coefficient > HIGH_CORRELATION:
        return "high"
    if coefficient > MEDIUM_CORRELATION:
        return "medium"
    return "low"


def redundancy_band(redundancy: float) -> str:
    """Qualitative label for absolute redundancy in bits."""
    if redundancy > HIGH_REDUNDANCY_BITS:
        return "high"
    if redundancy > MEDIUM_REDUNDANCY_BITS:
        return "medium"
    return "low"


class Aggregation(Enum):
    """How grid cells are reduced into a spectrum value."""

    SUM = "sum"
    FILTERED_SUM = "filtered_sum"


# ---------------------------------------------------------------------------
# Character grid
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class CharacterGrid:
    """
    Rectangular grid of single characters laid out row-major.

    All rows have the same length. Cells beyond the source text are
    filled with ``PADDING_CHAR`` by the grid packer.
    """

    cells: tuple[tuple[str, ...], ...]

    def __post_init__(self) -> None:
        rows = tuple(tuple(row) for row in self.cells)
        object.__setattr__(self, "cells", rows)

        if not rows or not rows[0]:
            raise DimensionMismatchError(
                "Character grid must have at least one row and one column",
                rows=len(rows),
                cols=len(rows[0]) if rows else 0,
            )

        width = len(rows[0])
        for i, row in enumerate(rows):
            if len(row) != width:
                raise DimensionMismatchError(
                    f"Row {i} has {len(row)} cells, expected {width}",
                    rows=len(rows),
                    cols=width,
                )
            for char in row:
                if not isinstance(char, str) or len(char) != 1:
                    raise InvalidInputError(
                        f"Grid cells must be single characters, got {char!r} in row {i}"
                    )

    @property
    def n_rows(self) -> int:
        return len(self.cells)

    @property
    def n_cols(self) -> int:
        return len(self.cells[0])

    @property
    def dimensions(self) -> tuple[int, int]:
        return self.n_rows, self.n_cols

    def __iter__(self) -> Iterator[tuple[str, ...]]:
        return iter(self.cells)

    def __len__(self) -> int:
        return self.n_rows

    def __getitem__(self, index: int) -> tuple[str, ...]:
        return self.cells[index]

    def flatten(self) -> str:
        """Row-major concatenation of all cells."""
        return "".join("".join(row) for row in self.cells)

    def to_list(self) -> list[list[str]]:
        return [list(row) for row in self.cells]


# ---------------------------------------------------------------------------
# Frequency table
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class FrequencyEntry:
    """Occurrence statistics for one character."""

    count: int
    probability: float
    information: float  # bits, log2(1 / probability)

    def to_dict(self) -> dict[str, Any]:
        return {
            "count": self.count,
            "probability": self.probability,
            "information": self.information,
        }


class FrequencyTable(Mapping[str, FrequencyEntry]):
    """
    Read-only mapping from character to its frequency entry.

    Invariants checked on construction:
    - every key is a single character with a positive count
    - probabilities equal count / total and sum to 1
    - information equals log2(1 / probability)

    Use ``FrequencyTable.from_counts`` to build a table from raw counts.
    """

    TOLERANCE = 1e-9

    def __init__(self, entries: Mapping[str, FrequencyEntry]) -> None:
        self._entries: Mapping[str, FrequencyEntry] = MappingProxyType(dict(entries))
        self._total = sum(entry.count for entry in self._entries.values())
        self._validate()

    @classmethod
    def from_counts(cls, counts: Mapping[str, int]) -> FrequencyTable:
        """Build a table from character counts."""
        total = sum(counts.values())
        if total <= 0:
            raise InvalidInputError("Cannot build a frequency table from an empty source")

        entries = {}
        for char, count in counts.items():
            if not isinstance(count, int) or count <= 0:
                raise InvalidInputError(f"Count for {char!r} must be a positive integer, got {count!r}")
            probability = count / total
            entries[char] = FrequencyEntry(
                count=count,
                probability=probability,
                information=math.log2(1 / probability),
            )
        return cls(entries)

    def _validate(self) -> None:
        if not self._entries:
            raise InvalidInputError("Frequency table must contain at least one character")

        probability_sum = 0.0
        for char, entry in self._entries.items():
            if not isinstance(char, str) or len(char) != 1:
                raise InvalidInputError(f"Frequency table keys must be single characters, got {char!r}")
            if not isinstance(entry.count, int) or entry.count <= 0:
                raise InvalidInputError(f"Count for {char!r} must be a positive integer, got {entry.count!r}")

            expected = entry.count / self._total
            if abs(entry.probability - expected) > self.TOLERANCE:
                raise InvalidInputError(
                    f"Probability for {char!r} is {entry.probability}, expected {expected}"
                )
            if not math.isclose(entry.information, math.log2(1 / entry.probability), abs_tol=self.TOLERANCE):
                raise InvalidInputError(f"Information for {char!r} does not match its probability")
            probability_sum += entry.probability

        if abs(probability_sum - 1.0) > self.TOLERANCE:
            raise InvalidInputError(f"Probabilities sum to {probability_sum}, expected 1")

    def __getitem__(self, char: str) -> FrequencyEntry:
        return self._entries[char]

    def __iter__(self) -> Iterator[str]:
        return iter(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def __repr__(self) -> str:
        return f"FrequencyTable(alphabet={len(self)}, total={self._total})"

    @property
    def total(self) -> int:
        """Total number of characters counted."""
        return self._total

    @property
    def alphabet_size(self) -> int:
        """Number of distinct characters."""
        return len(self._entries)

    def probabilities(self) -> np.ndarray:
        return np.array([entry.probability for entry in self._entries.values()], dtype=float)

    def sorted_entries(self) -> list[tuple[str, FrequencyEntry]]:
        """Entries ordered by count descending, ties by character, for display."""
        return sorted(self._entries.items(), key=lambda item: (-item[1].count, item[0]))

    def to_dict(self) -> dict[str, dict[str, Any]]:
        return {char: entry.to_dict() for char, entry in self.sorted_entries()}


# ---------------------------------------------------------------------------
# Information grid
# ---------------------------------------------------------------------------


@dataclass(frozen=True, eq=False)
class InformationGrid:
    """Numeric grid of per-cell information values (bits)."""

    values: np.ndarray

    def __post_init__(self) -> None:
        array = np.array(self.values, dtype=float)
        if array.ndim != 2 or array.size == 0:
            raise DimensionMismatchError(
                f"Information grid must be a non-empty 2D array, got shape {array.shape}",
                rows=array.shape[0] if array.ndim >= 1 else None,
                cols=array.shape[1] if array.ndim >= 2 else None,
            )
        array.setflags(write=False)
        object.__setattr__(self, "values", array)

    @property
    def n_rows(self) -> int:
        return int(self.values.shape[0])

    @property
    def n_cols(self) -> int:
        return int(self.values.shape[1])

    @property
    def dimensions(self) -> tuple[int, int]:
        return self.n_rows, self.n_cols

    def to_list(self) -> list[list[float]]:
        return self.values.tolist()


# ---------------------------------------------------------------------------
# Spectra
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class SpectralPoint:
    """One spectrum value at a row or column position."""

    index: int
    value: float

    def to_dict(self) -> dict[str, Any]:
        return {"index": self.index, "value": self.value}


Spectrum = tuple[SpectralPoint, ...]


def spectrum_values(spectrum: Spectrum) -> np.ndarray:
    """Extract the values of a spectrum as a float array."""
    return np.array([point.value for point in spectrum], dtype=float)


@dataclass(frozen=True)
class SpectrumData:
    """Row and column spectra of one information grid."""

    row_spectrum: Spectrum
    column_spectrum: Spectrum
    aggregation: Aggregation = Aggregation.SUM

    def __post_init__(self) -> None:
        object.__setattr__(self, "row_spectrum", tuple(self.row_spectrum))
        object.__setattr__(self, "column_spectrum", tuple(self.column_spectrum))

    def row_values(self) -> np.ndarray:
        return spectrum_values(self.row_spectrum)

    def column_values(self) -> np.ndarray:
        return spectrum_values(self.column_spectrum)

    def summary(self) -> dict[str, dict[str, float]]:
        """Maximum and mean of each spectrum."""
        result = {}
        for name, values in (("row", self.row_values()), ("column", self.column_values())):
            result[name] = {
                "max": float(values.max()) if values.size else 0.0,
                "mean": float(values.mean()) if values.size else 0.0,
            }
        return result

    def to_dict(self) -> dict[str, Any]:
        return {
            "aggregation": self.aggregation.value,
            "row_spectrum": [point.to_dict() for point in self.row_spectrum],
            "column_spectrum": [point.to_dict() for point in self.column_spectrum],
            "summary": self.summary(),
        }


# ---------------------------------------------------------------------------
# Derived statistics
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class SummaryStatistics:
    """
    Information characteristics of a frequency table.

    Attributes:
        capacity: log2 of the alphabet size, bits.
        entropy: Shannon entropy, bits.
        redundancy: Absolute redundancy, capacity - entropy, bits.
        relative_redundancy: redundancy / capacity (0 for a one-letter alphabet).
    """

    capacity: float
    entropy: float
    redundancy: float
    relative_redundancy: float

    @property
    def level(self) -> str:
        return redundancy_band(self.redundancy)

    def to_dict(self) -> dict[str, Any]:
        return {
            "capacity": self.capacity,
            "entropy": self.entropy,
            "redundancy": self.redundancy,
            "relative_redundancy": self.relative_redundancy,
            "level": self.level,
        }


@dataclass(frozen=True)
class SpectralCorrelation:
    """Pearson correlation between two spectra and the derived identity level."""

    coefficient: float
    identity_level: float  # percent, |coefficient| * 100

    @property
    def level(self) -> str:
        return correlation_band(self.coefficient)

    def to_dict(self) -> dict[str, Any]:
        return {
            "coefficient": self.coefficient,
            "identity_level": self.identity_level,
            "level": self.level,
        }


# ---------------------------------------------------------------------------
# Analysis result
# ---------------------------------------------------------------------------


@dataclass(frozen=True, eq=False)
class AnalysisResult:
    """Everything produced by one pipeline run over one text."""

    text: str
    character_grid: CharacterGrid
    information_grid: InformationGrid
    frequency_table: FrequencyTable
    spectra: SpectrumData

    @property
    def dimensions(self) -> tuple[int, int]:
        return self.character_grid.dimensions

    @property
    def statistics(self) -> SummaryStatistics:
        """Summary statistics of this result's frequency table."""
        from infospectra.analysis.statistics import summary_statistics

        return summary_statistics(self.frequency_table)

    def to_dict(self) -> dict[str, Any]:
        rows, cols = self.dimensions
        return {
            "text": self.text,
            "dimensions": {"rows": rows, "cols": cols},
            "character_grid": self.character_grid.to_list(),
            "information_grid": self.information_grid.to_list(),
            "frequencies": self.frequency_table.to_dict(),
            "spectra": self.spectra.to_dict(),
            "statistics": self.statistics.to_dict(),
        }
