"""Rectangular and hex grids with interchangeable storage backends.

Backends
--------
DenseGrid   list of rows, origin fixed at (0, 0)
SparseGrid  dict keyed by point, extents follow the populated keys
PixelGrid   RGB image (Pillow), cells are (r, g, b) tuples
HexGrid     dict keyed by cube coordinate
"""

from __future__ import annotations

from gridkit.grid.base import Extents, Grid
from gridkit.grid.dense import DenseGrid
from gridkit.grid.hexgrid import HexGrid
from gridkit.grid.pixel import RGB, PixelGrid
from gridkit.grid.raster import plot_line
from gridkit.grid.sparse import SparseGrid
from gridkit.grid.transforms import (
    HEX_ROTATIONS,
    ORIENTATIONS,
    hex_rotations,
    orient,
    orientations,
    rotate_hex,
)

__all__ = [
    "HEX_ROTATIONS",
    "ORIENTATIONS",
    "RGB",
    "DenseGrid",
    "Extents",
    "Grid",
    "HexGrid",
    "PixelGrid",
    "SparseGrid",
    "hex_rotations",
    "orient",
    "orientations",
    "plot_line",
    "rotate_hex",
]
