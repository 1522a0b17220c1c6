"""
Analysis pipeline.

Runs the full chain over one text::

    text -> normalize -> pack_grid -> analyze_frequencies
         -> build_information_grid -> compute_spectra -> AnalysisResult

``AnalysisConfig`` is the explicit context passed into a run; the
pipeline itself keeps no state between calls.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any

from infospectra.analysis.frequency import analyze_frequencies
from infospectra.analysis.grid import pack_grid
from infospectra.analysis.information import build_information_grid
from infospectra.analysis.spectrum import compute_spectra
from infospectra.cleaning.normalizer import is_blank, normalize
from infospectra.core.errors import InvalidInputError
from infospectra.core.models import PADDING_CHAR, Aggregation, AnalysisResult

logger = logging.getLogger(__name__)


@dataclass
class AnalysisConfig:
    """Configuration for a pipeline run."""

    rows: int | None = None  # None = square default
    cols: int | None = None  # None = square default
    aggregation: Aggregation = Aggregation.SUM
    padding: str = PADDING_CHAR

    def to_dict(self) -> dict[str, Any]:
        return {
            "rows": self.rows,
            "cols": self.cols,
            "aggregation": self.aggregation.value,
            "padding": self.padding,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> AnalysisConfig:
        return cls(
            rows=data.get("rows"),
            cols=data.get("cols"),
            aggregation=Aggregation(data.get("aggregation") or Aggregation.SUM.value),
            padding=data.get("padding", PADDING_CHAR),
        )


def run_pipeline(
    text: str,
    rows: int | None = None,
    cols: int | None = None,
    config: AnalysisConfig | None = None,
) -> AnalysisResult:
    """
    Analyze one text end to end.

    Args:
        text: Raw input text.
        rows: Explicit grid rows; overrides ``config.rows``.
        cols: Explicit grid columns; overrides ``config.cols``.
        config: Run configuration. Uses defaults when None.

    Returns:
        AnalysisResult for the normalized text.

    Raises:
        InvalidInputError: If the text is empty or whitespace only.
        DimensionMismatchError: If explicit dimensions are not positive integers.
    """
    cfg = config or AnalysisConfig()
    rows = cfg.rows if rows is None else rows
    cols = cfg.cols if cols is None else cols

    if is_blank(text):
        raise InvalidInputError("Text is empty; nothing to analyze")
    normalized = normalize(text)

    grid = pack_grid(normalized, rows=rows, cols=cols, padding=cfg.padding)
    table = analyze_frequencies(grid)
    info_grid = build_information_grid(grid, table)
    spectra = compute_spectra(info_grid, cfg.aggregation)

    logger.debug(
        "Analyzed %d characters into %dx%d grid (%d distinct, aggregation=%s)",
        len(normalized),
        grid.n_rows,
        grid.n_cols,
        table.alphabet_size,
        cfg.aggregation.value,
    )

    return AnalysisResult(
        text=normalized,
        character_grid=grid,
        information_grid=info_grid,
        frequency_table=table,
        spectra=spectra,
    )
