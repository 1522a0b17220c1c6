"""Tests for the hourglass surface mesh."""

from __future__ import annotations

import numpy as np
import pytest

from infospectra.analysis.surface import MAX_RADIUS, WAIST_RATIO, SurfaceMesh, build_surface
from infospectra.core.models import SpectralPoint, SpectrumData


def _spectra(rows: list[float], cols: list[float]) -> SpectrumData:
    return SpectrumData(
        tuple(SpectralPoint(i, v) for i, v in enumerate(rows)),
        tuple(SpectralPoint(i, v) for i, v in enumerate(cols)),
    )


class TestBuildSurface:
    """Tests for build_surface()."""

    def test_shapes(self, sample_result) -> None:
        """x, y and z are square grids of the requested resolution."""
        mesh = build_surface(sample_result.spectra, resolution=20)
        assert isinstance(mesh, SurfaceMesh)
        assert mesh.resolution == 20
        for coords in (mesh.x, mesh.y, mesh.z):
            assert coords.shape == (20, 20)
            assert np.all(np.isfinite(coords))

    def test_radius_bounded(self, sample_result) -> None:
        """Distance from the axis never exceeds the widest hourglass radius."""
        mesh = build_surface(sample_result.spectra, resolution=30)
        # undo the rotation about z to recover the radial y component
        angle = np.radians(100.0)
        radial_y = -mesh.x * np.sin(angle) + mesh.y * np.cos(angle)
        radius = np.sqrt(radial_y**2 + mesh.z**2)
        assert radius.max() <= MAX_RADIUS * (WAIST_RATIO + 1.0) + 1e-9

    def test_zero_spectra_collapse_to_axis(self) -> None:
        """All-zero spectra give a zero radius everywhere."""
        mesh = build_surface(_spectra([0.0, 0.0], [0.0, 0.0]), resolution=8)
        assert np.allclose(mesh.z, 0.0)

    def test_single_point_spectra(self) -> None:
        """A 1x1 analysis still yields a finite mesh."""
        mesh = build_surface(_spectra([0.0], [0.0]), resolution=4)
        assert mesh.x.shape == (4, 4)
        assert np.all(np.isfinite(mesh.x))

    def test_to_dict(self) -> None:
        """Serialization produces nested lists."""
        d = build_surface(_spectra([1.0, 2.0], [2.0, 1.0]), resolution=3).to_dict()
        assert set(d) == {"x", "y", "z"}
        assert len(d["x"]) == 3 and len(d["x"][0]) == 3

    def test_low_resolution_rejected(self) -> None:
        """At least two samples per parameter are needed."""
        with pytest.raises(ValueError):
            build_surface(_spectra([1.0], [1.0]), resolution=1)
