"""
Text normalizer.

Produces the canonical character sequence that the grid packer lays
out: whitespace runs collapse to one space, the text is trimmed, and
spaces before closing punctuation are removed.
"""

from __future__ import annotations

import re

# --- Compiled patterns for normalization ---

# Any run of whitespace, including newlines and tabs
_WHITESPACE_RUN_RE = re.compile(r"\s+")

# Whitespace immediately before . , ! ?
_SPACE_BEFORE_PUNCT_RE = re.compile(r"\s+([.,!?])")


def normalize(text: str) -> str:
    """
    Normalize text into a canonical character sequence.

    Example::

        >>> normalize("  Hello ,\\n\\n world  !")
        'Hello, world!'

    Empty or whitespace-only input yields an empty string; callers must
    gate on that before running the pipeline.
    """
    collapsed = _WHITESPACE_RUN_RE.sub(" ", text).strip()
    return _SPACE_BEFORE_PUNCT_RE.sub(r"\1", collapsed)


def is_blank(text: str | None) -> bool:
    """True when the text has nothing to analyze."""
    return text is None or not text.strip()
