"""
Text comparer.

Runs the pipeline independently over two texts and scores how similar
their information spectra are. Spectra of different lengths are
resampled to the longer length before a point-wise comparison.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from dataclasses import dataclass
from typing import Any

import numpy as np

from infospectra.analysis.spectrum import resample
from infospectra.analysis.statistics import correlate, identity_level
from infospectra.core.errors import DegenerateStatisticError
from infospectra.core.models import AnalysisResult, SpectralCorrelation
from infospectra.pipeline import AnalysisConfig, run_pipeline

logger = logging.getLogger(__name__)


def compare_spectra(spectrum_a: Sequence[float], spectrum_b: Sequence[float]) -> float:
    """
    Point-wise similarity of two spectra in [0, 1] for non-negative input.

    Both are resampled to ``max(len_a, len_b)``; each position scores
    ``1 - |a - b| / max(a, b, 1)`` and the scores are averaged. The floor
    of 1 in the denominator keeps near-zero values from dividing by zero.
    """
    n = max(len(spectrum_a), len(spectrum_b))
    if n == 0:
        raise ValueError("Cannot compare two empty spectra")

    a = resample(spectrum_a, n)
    b = resample(spectrum_b, n)
    scale = np.maximum(np.maximum(a, b), 1.0)
    return float(np.mean(1.0 - np.abs(a - b) / scale))


@dataclass(frozen=True, eq=False)
class ComparisonResult:
    """
    Result of comparing two texts.

    ``identity_level`` is the mean of row and column similarity, clamped
    to [0, 1]; ``identity_percent`` is the same value scaled to 100.
    """

    result_a: AnalysisResult
    result_b: AnalysisResult
    row_similarity: float
    column_similarity: float
    identity_level: float

    @property
    def identity_percent(self) -> float:
        return self.identity_level * 100

    def correlation(self, axis: str = "row") -> SpectralCorrelation:
        """
        Pearson correlation between the two texts' spectra along one axis.

        Raises:
            ValueError: If ``axis`` is not "row" or "column".
            DegenerateStatisticError: If either spectrum is constant.
        """
        if axis == "row":
            a, b = self.result_a.spectra.row_values(), self.result_b.spectra.row_values()
        elif axis == "column":
            a, b = self.result_a.spectra.column_values(), self.result_b.spectra.column_values()
        else:
            raise ValueError(f"axis must be 'row' or 'column', got {axis!r}")
        r = correlate(a, b)
        return SpectralCorrelation(coefficient=r, identity_level=identity_level(r))

    def get_summary(self) -> str:
        """Human-readable one-line verdict."""
        return (
            f"Identity level {self.identity_level:.2f}: "
            f"rows {self.row_similarity:.2f}, columns {self.column_similarity:.2f}"
        )

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for JSON export."""
        correlations: dict[str, Any] = {}
        for axis in ("row", "column"):
            try:
                correlations[axis] = self.correlation(axis).to_dict()
            except DegenerateStatisticError as exc:
                correlations[axis] = None
                correlations[f"{axis}_error"] = str(exc)

        return {
            "text_a": self.result_a.to_dict(),
            "text_b": self.result_b.to_dict(),
            "row_similarity": self.row_similarity,
            "column_similarity": self.column_similarity,
            "identity_level": self.identity_level,
            "identity_percent": self.identity_percent,
            "correlations": correlations,
            "summary": self.get_summary(),
        }


class TextComparer:
    """Compare two texts by their information spectra."""

    @staticmethod
    def compare_results(result_a: AnalysisResult, result_b: AnalysisResult) -> ComparisonResult:
        """Score two existing analysis results against each other."""
        row_similarity = compare_spectra(
            result_a.spectra.row_values(), result_b.spectra.row_values()
        )
        column_similarity = compare_spectra(
            result_a.spectra.column_values(), result_b.spectra.column_values()
        )
        identity = (row_similarity + column_similarity) / 2
        identity = min(1.0, max(0.0, identity))

        logger.debug(
            "Compared %dx%d with %dx%d: rows=%.4f columns=%.4f identity=%.4f",
            *result_a.dimensions,
            *result_b.dimensions,
            row_similarity,
            column_similarity,
            identity,
        )

        return ComparisonResult(
            result_a=result_a,
            result_b=result_b,
            row_similarity=row_similarity,
            column_similarity=column_similarity,
            identity_level=identity,
        )

    @staticmethod
    def compare(
        text_a: str,
        text_b: str,
        config: AnalysisConfig | None = None,
    ) -> ComparisonResult:
        """
        Analyze both texts and compare them.

        Each text is sized from its own normalized length unless
        ``config`` fixes the dimensions.

        Raises:
            InvalidInputError: If either text is empty after normalization.
        """
        result_a = run_pipeline(text_a, config=config)
        result_b = run_pipeline(text_b, config=config)
        return TextComparer.compare_results(result_a, result_b)


def compare_texts(
    text_a: str,
    text_b: str,
    config: AnalysisConfig | None = None,
) -> ComparisonResult:
    """Analyze and compare two texts. See ``TextComparer.compare``."""
    return TextComparer.compare(text_a, text_b, config)
