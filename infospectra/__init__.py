"""
infospectra: information spectra of natural-language texts.

A text is normalized, packed into a character grid, and each cell is
replaced by the information content of its character. Summing along rows
and columns yields two spectra that characterize the text and can be
compared against another text's spectra.
"""

__version__ = "0.1.0"

from infospectra.analysis import (
    analyze_frequencies,
    build_information_grid,
    build_surface,
    compute_spectra,
    correlate,
    normalize_spectrum,
    pack_grid,
    summary_statistics,
)
from infospectra.cleaning import normalize
from infospectra.comparison import ComparisonResult, TextComparer, compare_texts
from infospectra.core import (
    PADDING_CHAR,
    Aggregation,
    AnalysisError,
    AnalysisResult,
    CharacterGrid,
    DegenerateStatisticError,
    DimensionMismatchError,
    FrequencyEntry,
    FrequencyTable,
    InformationGrid,
    InvalidInputError,
    SpectralCorrelation,
    SpectralPoint,
    SpectrumData,
    SummaryStatistics,
)
from infospectra.loaders import load_text
from infospectra.pipeline import AnalysisConfig, run_pipeline

__all__ = [
    "PADDING_CHAR",
    "Aggregation",
    "AnalysisConfig",
    "AnalysisError",
    "AnalysisResult",
    "CharacterGrid",
    "ComparisonResult",
    "DegenerateStatisticError",
    "DimensionMismatchError",
    "FrequencyEntry",
    "FrequencyTable",
    "InformationGrid",
    "InvalidInputError",
    "SpectralCorrelation",
    "SpectralPoint",
    "SpectrumData",
    "SummaryStatistics",
    "TextComparer",
    "analyze_frequencies",
    "build_information_grid",
    "build_surface",
    "compare_texts",
    "compute_spectra",
    "correlate",
    "load_text",
    "normalize",
    "normalize_spectrum",
    "pack_grid",
    "run_pipeline",
    "summary_statistics",
]
