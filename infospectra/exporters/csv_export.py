"""
CSV exporter.

Exports the frequency table of a result, or the spectra of a comparison,
as flat CSV for spreadsheet viewing.
"""

from __future__ import annotations

import csv
from pathlib import Path
from typing import ClassVar

from infospectra.comparison.comparer import ComparisonResult
from infospectra.core.models import AnalysisResult
from infospectra.exporters.base import BaseExporter, ExporterRegistry


@ExporterRegistry.register
class CSVExporter(BaseExporter):
    """
    Export frequency tables and spectra as CSV.

    One row per character (by count, descending) for a single result;
    one row per spectrum point for a comparison.
    """

    EXPORTER_NAME: ClassVar[str] = "csv"
    FILE_EXTENSION: ClassVar[str] = ".csv"

    FREQUENCY_COLUMNS = ["char", "count", "probability", "information"]
    SPECTRUM_COLUMNS = ["text", "axis", "index", "value"]

    def export_result(self, result: AnalysisResult, path: Path) -> Path:
        """Export the frequency table."""
        path = self._ensure_extension(path)
        with open(path, "w", newline="", encoding="utf-8") as f:
            writer = csv.DictWriter(f, fieldnames=self.FREQUENCY_COLUMNS)
            writer.writeheader()
            for char, entry in result.frequency_table.sorted_entries():
                writer.writerow({"char": char, **entry.to_dict()})
        return path

    def export_comparison(self, comparison: ComparisonResult, path: Path) -> Path:
        """Export both texts' row and column spectra."""
        path = self._ensure_extension(path)
        with open(path, "w", newline="", encoding="utf-8") as f:
            writer = csv.DictWriter(f, fieldnames=self.SPECTRUM_COLUMNS)
            writer.writeheader()
            for label, result in (("a", comparison.result_a), ("b", comparison.result_b)):
                for axis, spectrum in (
                    ("row", result.spectra.row_spectrum),
                    ("column", result.spectra.column_spectrum),
                ):
                    for point in spectrum:
                        writer.writerow(
                            {"text": label, "axis": axis, "index": point.index, "value": point.value}
                        )
        return path
