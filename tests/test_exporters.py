"""
Tests for result exporters.
"""

import csv
import json

import pytest

from infospectra.exporters import CSVExporter, ExporterRegistry, JSONExporter


class TestExporterRegistry:
    """Tests for ExporterRegistry."""

    def test_available_exporters(self):
        """Test listing available exporters."""
        exporters = ExporterRegistry.available_exporters()
        names = [e["name"] for e in exporters]

        assert "json" in names
        assert "csv" in names
        assert {"name": "csv", "extension": ".csv"} in exporters

    def test_get_exporter(self):
        """Test getting exporters by name."""
        assert isinstance(ExporterRegistry.get_exporter("json"), JSONExporter)
        assert isinstance(ExporterRegistry.get_exporter("csv"), CSVExporter)

    def test_get_unknown_exporter(self):
        """Test getting an unknown exporter."""
        with pytest.raises(ValueError, match="Unknown exporter"):
            ExporterRegistry.get_exporter("xlsx")


class TestJSONExporter:
    """Tests for JSONExporter."""

    def test_export_result(self, aabb_result, tmp_path):
        """Test exporting one analysis."""
        path = JSONExporter().export_result(aabb_result, tmp_path / "aabb.json")

        data = json.loads(path.read_text(encoding="utf-8"))
        assert data["type"] == "analysis"
        assert data["text"] == "aabb"
        assert data["information_grid"] == [[1.0, 1.0], [1.0, 1.0]]
        assert data["frequencies"]["a"]["count"] == 2
        assert "exported_at" in data

    def test_export_comparison(self, sample_comparison, tmp_path):
        """Test exporting a comparison."""
        path = JSONExporter().export_comparison(sample_comparison, tmp_path / "cmp.json")

        data = json.loads(path.read_text(encoding="utf-8"))
        assert data["type"] == "comparison"
        assert data["identity_level"] == pytest.approx(sample_comparison.identity_level)
        assert data["text_a"]["text"] == sample_comparison.result_a.text

    def test_extension_enforced(self, aabb_result, tmp_path):
        """Test that the .json extension is applied."""
        path = JSONExporter().export_result(aabb_result, tmp_path / "out.txt")
        assert path.suffix == ".json"
        assert path.exists()

    def test_non_ascii_preserved(self, tmp_path):
        """Test that Cyrillic text is written unescaped."""
        from infospectra import run_pipeline

        path = JSONExporter().export_result(run_pipeline("мир"), tmp_path / "ru.json")
        assert "мир" in path.read_text(encoding="utf-8")


class TestCSVExporter:
    """Tests for CSVExporter."""

    def test_export_result(self, tmp_path):
        """Test exporting a frequency table."""
        from infospectra import run_pipeline

        result = run_pipeline("aaab")
        path = CSVExporter().export_result(result, tmp_path / "freq")

        assert path.suffix == ".csv"
        with open(path, newline="", encoding="utf-8") as f:
            rows = list(csv.DictReader(f))

        assert list(rows[0].keys()) == CSVExporter.FREQUENCY_COLUMNS
        assert [r["char"] for r in rows] == ["a", "b"]
        assert rows[0]["count"] == "3"
        assert float(rows[1]["information"]) == pytest.approx(2.0)

    def test_export_comparison(self, sample_comparison, tmp_path):
        """Test exporting both texts' spectra."""
        path = CSVExporter().export_comparison(sample_comparison, tmp_path / "spectra.csv")

        with open(path, newline="", encoding="utf-8") as f:
            rows = list(csv.DictReader(f))

        rows_a, cols_a = sample_comparison.result_a.dimensions
        rows_b, cols_b = sample_comparison.result_b.dimensions
        assert len(rows) == rows_a + cols_a + rows_b + cols_b
        assert {r["text"] for r in rows} == {"a", "b"}
        assert {r["axis"] for r in rows} == {"row", "column"}

    def test_export_handles_special_chars(self, tmp_path):
        """Test that commas and quotes survive as characters."""
        from infospectra import run_pipeline

        result = run_pipeline('a,"b"')
        path = CSVExporter().export_result(result, tmp_path / "special.csv")

        with open(path, newline="", encoding="utf-8") as f:
            chars = {r["char"] for r in csv.DictReader(f)}
        assert {",", '"', "a", "b"} <= chars
