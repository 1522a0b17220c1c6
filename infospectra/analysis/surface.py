"""
Hourglass surface mesh for 3D rendering of a text's spectra.

The surface is a solid of revolution around the x axis. Angle ``theta``
around the axis samples the row spectrum (through ``cos(theta)``),
position ``l`` along the axis samples the column spectrum, and the two
interpolated values scale an hourglass-shaped radius profile. The mesh is
rotated about the z axis for viewing. Rendering itself is left to the
consumer (plotly, matplotlib, a web client).
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Any

import numpy as np

from infospectra.core.models import SpectrumData

MAX_RADIUS = 4.0
AXIS_LENGTH = 10.0
WAIST_RATIO = 0.3
ROTATION_Y_DEG = 0.0
ROTATION_Z_DEG = 100.0


@dataclass(frozen=True, eq=False)
class SurfaceMesh:
    """Grid of surface coordinates, each array shaped (resolution, resolution)."""

    x: np.ndarray
    y: np.ndarray
    z: np.ndarray

    @property
    def resolution(self) -> int:
        return int(self.x.shape[0])

    def to_dict(self) -> dict[str, Any]:
        return {
            "x": self.x.tolist(),
            "y": self.y.tolist(),
            "z": self.z.tolist(),
        }


def _interpolate(values: np.ndarray, positions: np.ndarray) -> np.ndarray:
    return np.interp(positions, np.arange(values.size), values)


def build_surface(spectra: SpectrumData, resolution: int = 100) -> SurfaceMesh:
    """
    Build the hourglass surface for a pair of spectra.

    Args:
        spectra: Row and column spectra of one analysis.
        resolution: Samples along each surface parameter.

    Returns:
        SurfaceMesh with x, y, z coordinate grids.
    """
    if resolution < 2:
        raise ValueError(f"resolution must be at least 2, got {resolution}")

    rows = spectra.row_values()
    cols = spectra.column_values()
    peak = max(rows.max(), cols.max())

    theta = (np.arange(resolution) / resolution * 2 * math.pi)[:, None]
    axis = (np.arange(resolution) / resolution * AXIS_LENGTH - AXIS_LENGTH / 2)[None, :]

    row_pos = (np.cos(theta) + 1) * (rows.size - 1) * 0.5
    col_pos = (axis / (AXIS_LENGTH / 2) + 1) * (cols.size - 1) * 0.5
    row_value = _interpolate(rows, row_pos)
    col_value = _interpolate(cols, col_pos)

    if peak > 0:
        spectral = (row_value + col_value) / (2 * peak)
    else:
        spectral = np.zeros((resolution, resolution))

    radius = MAX_RADIUS * (WAIST_RATIO + np.abs(axis / (AXIS_LENGTH / 2))) * spectral

    base_x = np.broadcast_to(axis, (resolution, resolution))
    base_y = radius * np.cos(theta)
    base_z = radius * np.sin(theta)

    angle_y = math.radians(ROTATION_Y_DEG)
    angle_z = math.radians(ROTATION_Z_DEG)

    tilted_x = base_x * math.cos(angle_y) + base_z * math.sin(angle_y)
    tilted_z = -base_x * math.sin(angle_y) + base_z * math.cos(angle_y)

    x = tilted_x * math.cos(angle_z) - base_y * math.sin(angle_z)
    y = tilted_x * math.sin(angle_z) + base_y * math.cos(angle_z)

    return SurfaceMesh(x=np.array(x), y=np.array(y), z=np.array(tilted_z))
