"""Exporters for analysis and comparison results."""

from infospectra.exporters.base import BaseExporter, ExporterRegistry
from infospectra.exporters.csv_export import CSVExporter
from infospectra.exporters.json_export import JSONExporter

__all__ = [
    "BaseExporter",
    "CSVExporter",
    "ExporterRegistry",
    "JSONExporter",
]
