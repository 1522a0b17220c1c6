"""
Analysis stages: grid packing, frequency analysis, information grid,
spectra, summary statistics, and the 3D surface mesh.
"""

from infospectra.analysis.frequency import analyze_frequencies
from infospectra.analysis.grid import default_size, pack_grid
from infospectra.analysis.information import build_information_grid
from infospectra.analysis.spectrum import compute_spectra, normalize_spectrum, resample
from infospectra.analysis.statistics import (
    correlate,
    correlate_spectra,
    identity_level,
    summary_statistics,
)
from infospectra.analysis.surface import SurfaceMesh, build_surface

__all__ = [
    "SurfaceMesh",
    "analyze_frequencies",
    "build_information_grid",
    "build_surface",
    "compute_spectra",
    "correlate",
    "correlate_spectra",
    "default_size",
    "identity_level",
    "normalize_spectrum",
    "pack_grid",
    "resample",
    "summary_statistics",
]
