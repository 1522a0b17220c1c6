"""
Comparison module - compare two texts by their information spectra.
"""

from infospectra.comparison.comparer import (
    ComparisonResult,
    TextComparer,
    compare_spectra,
    compare_texts,
)

__all__ = [
    "ComparisonResult",
    "TextComparer",
    "compare_spectra",
    "compare_texts",
]
