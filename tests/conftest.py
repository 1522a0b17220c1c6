"""
Pytest configuration and fixtures for infospectra tests.
"""

from pathlib import Path

import pytest

from infospectra.comparison import ComparisonResult, compare_texts
from infospectra.core.models import AnalysisResult
from infospectra.pipeline import run_pipeline

SAMPLE_TEXT = (
    "The quick brown fox jumps over the lazy dog. "
    "A second sentence, with punctuation , and  extra   spaces !"
)

OTHER_TEXT = (
    "Information theory studies the quantification, storage, "
    "and communication of information."
)


@pytest.fixture
def sample_text() -> str:
    """A short English text with irregular spacing."""
    return SAMPLE_TEXT


@pytest.fixture
def other_text() -> str:
    """A second text for comparisons."""
    return OTHER_TEXT


@pytest.fixture
def aabb_result() -> AnalysisResult:
    """Analysis of the two-letter text "aabb"."""
    return run_pipeline("aabb")


@pytest.fixture
def sample_result(sample_text: str) -> AnalysisResult:
    """Analysis of the sample text with default sizing."""
    return run_pipeline(sample_text)


@pytest.fixture
def sample_comparison(sample_text: str, other_text: str) -> ComparisonResult:
    """Comparison of the two sample texts."""
    return compare_texts(sample_text, other_text)


@pytest.fixture
def text_file(tmp_path: Path, sample_text: str) -> Path:
    """The sample text written to a UTF-8 .txt file."""
    path = tmp_path / "sample.txt"
    path.write_text(sample_text, encoding="utf-8")
    return path
