"""
Spectrum calculator.

Reduces an information grid along its rows and along its columns into
two ordered sequences: the row spectrum (one point per row) and the
column spectrum (one point per column).

Aggregation policy
------------------
``Aggregation.SUM`` (the default) sums every cell of a row or column.
``Aggregation.FILTERED_SUM`` sums only strictly positive cells, so a row
or column without positive cells yields 0. The chosen policy is applied
to rows and columns alike and recorded on the returned ``SpectrumData``.
"""

from __future__ import annotations

from collections.abc import Sequence

import numpy as np

from infospectra.core.models import (
    Aggregation,
    InformationGrid,
    SpectralPoint,
    Spectrum,
    SpectrumData,
    spectrum_values,
)


def _to_spectrum(values: np.ndarray) -> Spectrum:
    return tuple(SpectralPoint(index=i, value=float(v)) for i, v in enumerate(values))


def compute_spectra(
    grid: InformationGrid,
    aggregation: Aggregation = Aggregation.SUM,
) -> SpectrumData:
    """
    Compute the row and column spectra of an information grid.

    Args:
        grid: Information grid to reduce.
        aggregation: Cell reduction policy, applied to both axes.

    Returns:
        SpectrumData with ``grid.n_rows`` row points and ``grid.n_cols``
        column points, 0-based indices matching grid positions.
    """
    values = grid.values
    if aggregation is Aggregation.FILTERED_SUM:
        values = np.where(values > 0, values, 0.0)

    return SpectrumData(
        row_spectrum=_to_spectrum(values.sum(axis=1)),
        column_spectrum=_to_spectrum(values.sum(axis=0)),
        aggregation=aggregation,
    )


def normalize_spectrum(spectrum: Spectrum) -> Spectrum:
    """Scale a spectrum so its maximum value is 1. All-zero spectra are returned as is."""
    values = spectrum_values(spectrum)
    peak = values.max() if values.size else 0.0
    if peak <= 0:
        return tuple(spectrum)
    return tuple(SpectralPoint(index=p.index, value=p.value / peak) for p in spectrum)


def resample(values: Sequence[float] | np.ndarray, target_length: int) -> np.ndarray:
    """
    Linearly resample a sequence to ``target_length`` points.

    Target index ``i`` maps to source position ``i * len(values) / target_length``
    and interpolates between the bracketing source points. Positions past the
    last source point take the last value. Resampling to the source length is
    the identity.
    """
    source = np.asarray(values, dtype=float)
    if target_length <= 0:
        raise ValueError(f"target_length must be positive, got {target_length}")
    if source.size == 0:
        return np.zeros(target_length)
    if source.size == target_length:
        return source.copy()

    positions = np.arange(target_length) * source.size / target_length
    return np.interp(positions, np.arange(source.size), source)
