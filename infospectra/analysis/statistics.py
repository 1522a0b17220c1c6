"""
Summary statistics engine.

Information characteristics of a frequency table (capacity, entropy,
absolute and relative redundancy) and the Pearson correlation between
two spectra with its identity level.

Correlation of a zero-variance series is undefined; ``correlate`` raises
``DegenerateStatisticError`` rather than returning NaN. A series counts as
constant when its range is within ``FLAT_TOLERANCE`` of its magnitude, so
spectra that differ only by float summation error are caught as well.
"""

from __future__ import annotations

import math
from collections.abc import Sequence

import numpy as np

from infospectra.analysis.spectrum import resample
from infospectra.core.errors import DegenerateStatisticError, InvalidInputError
from infospectra.core.models import (
    FrequencyTable,
    SpectralCorrelation,
    SpectrumData,
    SummaryStatistics,
    correlation_band,
    redundancy_band,
)

__all__ = [
    "FLAT_TOLERANCE",
    "capacity",
    "correlate",
    "correlate_spectra",
    "correlation_band",
    "entropy",
    "identity_level",
    "redundancy_band",
    "summary_statistics",
]

# Relative range below which a series is treated as constant
FLAT_TOLERANCE = 1e-9


def capacity(table: FrequencyTable) -> float:
    """Information capacity: log2 of the number of distinct characters."""
    return math.log2(table.alphabet_size)


def entropy(table: FrequencyTable) -> float:
    """Shannon entropy H = -sum(p * log2(p)) over characters with p > 0."""
    probs = table.probabilities()
    probs = probs[probs > 0]
    return float(-np.sum(probs * np.log2(probs)))


def summary_statistics(table: FrequencyTable) -> SummaryStatistics:
    """Capacity, entropy and redundancy of a frequency table."""
    cap = capacity(table)
    ent = entropy(table)
    # capacity bounds entropy; only float rounding can push this below zero
    redundancy = max(0.0, cap - ent)
    relative = redundancy / cap if cap > 0 else 0.0
    return SummaryStatistics(
        capacity=cap,
        entropy=ent,
        redundancy=redundancy,
        relative_redundancy=relative,
    )


def _is_flat(values: np.ndarray) -> bool:
    scale = max(1.0, float(np.abs(values).max()))
    return float(np.ptp(values)) <= FLAT_TOLERANCE * scale


def correlate(series_a: Sequence[float], series_b: Sequence[float]) -> float:
    """
    Pearson correlation coefficient of two numeric series.

    Series of different lengths are first resampled to the longer length.

    Raises:
        InvalidInputError: If either series is empty.
        DegenerateStatisticError: If either series has zero variance.
    """
    a = np.asarray(series_a, dtype=float)
    b = np.asarray(series_b, dtype=float)
    if a.size == 0 or b.size == 0:
        raise InvalidInputError("Cannot correlate an empty series")

    if a.size != b.size:
        n = max(a.size, b.size)
        a, b = resample(a, n), resample(b, n)

    if _is_flat(a) or _is_flat(b):
        raise DegenerateStatisticError(
            "Correlation is undefined for a constant series",
            details=f"variance_a={float(np.var(a))}, variance_b={float(np.var(b))}",
        )

    da = a - a.mean()
    db = b - b.mean()
    coefficient = float(np.sum(da * db) / math.sqrt(float(np.sum(da * da)) * float(np.sum(db * db))))
    return max(-1.0, min(1.0, coefficient))


def identity_level(coefficient: float) -> float:
    """Identity level in percent: |r| * 100."""
    return abs(coefficient) * 100


def correlate_spectra(spectra: SpectrumData) -> SpectralCorrelation:
    """Correlate a text's row spectrum with its column spectrum."""
    r = correlate(spectra.row_values(), spectra.column_values())
    return SpectralCorrelation(coefficient=r, identity_level=identity_level(r))
