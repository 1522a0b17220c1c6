"""
Frequency analyzer.

Counts character occurrences over a flat sequence or a grid and turns
the counts into probabilities and per-character information content.
"""

from __future__ import annotations

from collections import Counter
from collections.abc import Iterable

from infospectra.core.errors import InvalidInputError
from infospectra.core.models import CharacterGrid, FrequencyTable


def analyze_frequencies(source: str | CharacterGrid | Iterable[Iterable[str]]) -> FrequencyTable:
    """
    Build the frequency table of a character source.

    A grid is flattened row-major before counting, so a grid and its
    flattened string produce identical tables. Padding cells count like
    any other character.

    Raises:
        InvalidInputError: If the source holds no characters.
    """
    if isinstance(source, str):
        chars = source
    elif isinstance(source, CharacterGrid):
        chars = source.flatten()
    else:
        chars = "".join("".join(row) for row in source)

    if not chars:
        raise InvalidInputError("Cannot analyze frequencies of an empty source")

    return FrequencyTable.from_counts(Counter(chars))
