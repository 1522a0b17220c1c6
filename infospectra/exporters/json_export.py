"""
JSON exporter.

Writes the full ``to_dict()`` form of a result, suitable for a web
client that renders tables, charts and the 3D surface.
"""

from __future__ import annotations

import json
from datetime import datetime
from pathlib import Path
from typing import Any, ClassVar

from infospectra.comparison.comparer import ComparisonResult
from infospectra.core.models import AnalysisResult
from infospectra.exporters.base import BaseExporter, ExporterRegistry


@ExporterRegistry.register
class JSONExporter(BaseExporter):
    """Export results as indented JSON."""

    EXPORTER_NAME: ClassVar[str] = "json"
    FILE_EXTENSION: ClassVar[str] = ".json"

    def __init__(self, indent: int = 2) -> None:
        self.indent = indent

    def export_result(self, result: AnalysisResult, path: Path) -> Path:
        return self._write({"type": "analysis", **result.to_dict()}, path)

    def export_comparison(self, comparison: ComparisonResult, path: Path) -> Path:
        return self._write({"type": "comparison", **comparison.to_dict()}, path)

    def _write(self, payload: dict[str, Any], path: Path) -> Path:
        path = self._ensure_extension(path)
        payload["exported_at"] = datetime.now().isoformat()
        with open(path, "w", encoding="utf-8") as f:
            json.dump(payload, f, ensure_ascii=False, indent=self.indent)
        return path
