"""
Base exporter class and registry.

All exporters inherit from BaseExporter and register themselves
with the ExporterRegistry.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from pathlib import Path
from typing import ClassVar

from infospectra.comparison.comparer import ComparisonResult
from infospectra.core.models import AnalysisResult


class BaseExporter(ABC):
    """
    Abstract base class for result exporters.

    Exporters write analysis and comparison results to files for use
    in spreadsheets, notebooks, or external renderers.
    """

    EXPORTER_NAME: ClassVar[str] = "base"
    FILE_EXTENSION: ClassVar[str] = ""

    @abstractmethod
    def export_result(self, result: AnalysisResult, path: Path) -> Path:
        """
        Export a single analysis result.

        Args:
            result: Result to export
            path: Output file path

        Returns:
            Path to exported file
        """

    @abstractmethod
    def export_comparison(self, comparison: ComparisonResult, path: Path) -> Path:
        """Export a comparison of two texts."""

    def _ensure_extension(self, path: Path) -> Path:
        """Ensure the path has the correct extension."""
        path = Path(path)
        if path.suffix.lower() != self.FILE_EXTENSION.lower():
            return path.with_suffix(self.FILE_EXTENSION)
        return path


class ExporterRegistry:
    """Registry of available exporters."""

    _exporters: ClassVar[dict[str, type[BaseExporter]]] = {}

    @classmethod
    def register(cls, exporter_class: type[BaseExporter]) -> type[BaseExporter]:
        """Register an exporter class. Usable as a decorator."""
        cls._exporters[exporter_class.EXPORTER_NAME] = exporter_class
        return exporter_class

    @classmethod
    def get_exporter(cls, name: str) -> BaseExporter:
        """Get an exporter instance by name."""
        if name not in cls._exporters:
            available = ", ".join(sorted(cls._exporters.keys()))
            raise ValueError(f"Unknown exporter: {name}. Available: {available}")
        return cls._exporters[name]()

    @classmethod
    def available_exporters(cls) -> list[dict[str, str]]:
        """List exporters with their file extensions."""
        return [
            {"name": name, "extension": exporter.FILE_EXTENSION}
            for name, exporter in sorted(cls._exporters.items())
        ]
