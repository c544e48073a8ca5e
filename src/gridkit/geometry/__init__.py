"""Coordinate types and conversions shared by the grid and hex-grid layers."""

from __future__ import annotations

from gridkit.geometry.hexcoords import (
    axial_to_cube,
    cube_to_axial,
    cube_to_oddr,
    is_cube,
    oddr_to_cube,
)
from gridkit.geometry.vectors import (
    DIRECTION_MAP,
    DIRECTIONS,
    DIRECTIONS_INCL_DIAGONALS,
    HEX_DIRECTIONS,
    CubeVec,
    Point,
    hex_neighbors,
    manhattan,
    point_add,
    point_sub,
    vec_add,
    vec_sub,
)

__all__ = [
    "DIRECTION_MAP",
    "DIRECTIONS",
    "DIRECTIONS_INCL_DIAGONALS",
    "HEX_DIRECTIONS",
    "CubeVec",
    "Point",
    "axial_to_cube",
    "cube_to_axial",
    "cube_to_oddr",
    "hex_neighbors",
    "is_cube",
    "manhattan",
    "oddr_to_cube",
    "point_add",
    "point_sub",
    "vec_add",
    "vec_sub",
]
