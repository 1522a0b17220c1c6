"""Core data models and errors for infospectra."""

from infospectra.core.errors import (
    AnalysisError,
    DegenerateStatisticError,
    DimensionMismatchError,
    InvalidInputError,
)
from infospectra.core.models import (
    PADDING_CHAR,
    AnalysisResult,
    Aggregation,
    CharacterGrid,
    FrequencyEntry,
    FrequencyTable,
    InformationGrid,
    SpectralCorrelation,
    SpectralPoint,
    SpectrumData,
    SummaryStatistics,
)

__all__ = [
    "PADDING_CHAR",
    "AnalysisError",
    "AnalysisResult",
    "Aggregation",
    "CharacterGrid",
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
]
