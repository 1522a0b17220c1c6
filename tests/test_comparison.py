"""Tests for text comparison."""

from __future__ import annotations

import pytest

from infospectra import compare_texts
from infospectra.comparison import ComparisonResult, TextComparer, compare_spectra
from infospectra.core.errors import DegenerateStatisticError, InvalidInputError
from infospectra.pipeline import AnalysisConfig, run_pipeline


class TestCompareSpectra:
    """Tests for compare_spectra()."""

    def test_identical_spectra(self) -> None:
        """Identical spectra are fully similar."""
        assert compare_spectra([1.0, 2.0, 3.0], [1.0, 2.0, 3.0]) == pytest.approx(1.0)

    def test_pointwise_formula(self) -> None:
        """Each point scores 1 - |a - b| / max(a, b, 1)."""
        # points: 1 - 2/4 = 0.5 and 1 - 0/2 = 1.0
        assert compare_spectra([2.0, 2.0], [4.0, 2.0]) == pytest.approx(0.75)

    def test_floor_of_one(self) -> None:
        """Small values are divided by 1, not by themselves."""
        assert compare_spectra([0.0], [0.5]) == pytest.approx(0.5)

    def test_resampled_to_longer(self) -> None:
        """Different lengths are compared after resampling."""
        assert compare_spectra([2.0], [2.0, 2.0, 2.0]) == pytest.approx(1.0)

    def test_symmetric(self) -> None:
        """Order of arguments does not matter."""
        a, b = [1.0, 5.0, 2.0], [3.0, 1.0]
        assert compare_spectra(a, b) == pytest.approx(compare_spectra(b, a))

    def test_both_empty_rejected(self) -> None:
        """Two empty spectra cannot be compared."""
        with pytest.raises(ValueError):
            compare_spectra([], [])


class TestCompareTexts:
    """Tests for compare_texts() and TextComparer."""

    def test_identical_texts(self) -> None:
        """Comparing "aaaa" with itself gives full identity."""
        result = compare_texts("aaaa", "aaaa")
        assert result.identity_level == pytest.approx(1.0)
        assert result.identity_percent == pytest.approx(100.0)
        assert result.row_similarity == pytest.approx(1.0)
        assert result.column_similarity == pytest.approx(1.0)

    def test_self_comparison(self, sample_text: str) -> None:
        """Any text is identical to itself."""
        assert compare_texts(sample_text, sample_text).identity_level == pytest.approx(1.0)

    def test_identity_in_unit_interval(self, sample_comparison: ComparisonResult) -> None:
        """Identity, row and column similarity all lie in [0, 1]."""
        for value in (
            sample_comparison.identity_level,
            sample_comparison.row_similarity,
            sample_comparison.column_similarity,
        ):
            assert 0.0 <= value <= 1.0

    def test_identity_is_mean_of_axes(self, sample_comparison: ComparisonResult) -> None:
        """Identity averages row and column similarity."""
        expected = (sample_comparison.row_similarity + sample_comparison.column_similarity) / 2
        assert sample_comparison.identity_level == pytest.approx(expected)

    def test_different_texts_score_lower(self, sample_comparison: ComparisonResult) -> None:
        """Unrelated texts are less than fully identical."""
        assert sample_comparison.identity_level < 1.0

    def test_texts_sized_independently(self) -> None:
        """Each text gets its own default grid from its normalized length."""
        result = compare_texts("abcd", "  abcdefghij  ")
        assert result.result_a.dimensions == (2, 2)
        assert result.result_b.dimensions == (4, 4)
        assert 0.0 <= result.identity_level <= 1.0

    def test_config_fixes_dimensions(self, sample_text: str, other_text: str) -> None:
        """A config with dimensions applies to both texts."""
        result = compare_texts(sample_text, other_text, AnalysisConfig(rows=4, cols=5))
        assert result.result_a.dimensions == result.result_b.dimensions == (4, 5)

    def test_compare_results_matches_compare(self, sample_text: str, other_text: str) -> None:
        """Comparing precomputed results equals comparing the texts."""
        direct = TextComparer.compare(sample_text, other_text)
        staged = TextComparer.compare_results(run_pipeline(sample_text), run_pipeline(other_text))
        assert staged.identity_level == pytest.approx(direct.identity_level)

    def test_empty_text_rejected(self) -> None:
        """Blank input on either side is rejected."""
        with pytest.raises(InvalidInputError):
            compare_texts("text", "   ")


class TestComparisonResult:
    """Tests for ComparisonResult accessors and serialization."""

    def test_correlation_by_axis(self, sample_comparison: ComparisonResult) -> None:
        """Row and column correlations are bounded."""
        for axis in ("row", "column"):
            corr = sample_comparison.correlation(axis)
            assert -1.0 <= corr.coefficient <= 1.0
            assert corr.identity_level == pytest.approx(abs(corr.coefficient) * 100)

    def test_bad_axis_rejected(self, sample_comparison: ComparisonResult) -> None:
        """Only "row" and "column" are axes."""
        with pytest.raises(ValueError, match="axis"):
            sample_comparison.correlation("diagonal")

    def test_degenerate_correlation_raises(self) -> None:
        """Flat spectra have no correlation."""
        result = compare_texts("aaaa", "aaaa")
        with pytest.raises(DegenerateStatisticError):
            result.correlation("row")

    def test_to_dict_reports_degenerate_correlation(self) -> None:
        """Serialization marks undefined correlations explicitly."""
        d = compare_texts("aaaa", "aaaa").to_dict()
        assert d["correlations"]["row"] is None
        assert "row_error" in d["correlations"]
        assert d["identity_level"] == pytest.approx(1.0)

    def test_to_dict_keys(self, sample_comparison: ComparisonResult) -> None:
        """Serialization includes both analyses and the scores."""
        d = sample_comparison.to_dict()
        for key in ("text_a", "text_b", "row_similarity", "column_similarity", "identity_level",
                    "identity_percent", "correlations", "summary"):
            assert key in d
        assert "level" not in d

    def test_get_summary(self) -> None:
        """The summary line reports identity and both similarities without a band."""
        summary = compare_texts("aaaa", "aaaa").get_summary()
        assert summary == "Identity level 1.00: rows 1.00, columns 1.00"
