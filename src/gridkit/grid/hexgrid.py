"""Hex grid keyed by cube coordinates.

Storage is a plain dict from :data:`CubeVec` to value.  Extents are reported
in both the axial and the oddr projection: axial for iteration, oddr for
display and as the frame the two mirror flips are computed in.

Every reflection and rotation about the pivot works the same way::

    p' = permute(p - pivot) + pivot

where *pivot* is recomputed before each transform as the cell nearest the
mean of the occupied cells.  A rotation about that cell carries the mean
along with the cells, and the rotated mean still lies inside the same cell,
so the next pivot is unchanged and six ``rotate_60_cw`` calls restore the
grid wherever it sits.  The exception is a mean lying exactly on a border
between cells (two neighbours, or three cells around a corner): that tie may
round to a different cell after a rotation, and the grid then drifts.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterator, Mapping
from typing import Generic, TypeVar

from gridkit.geometry.hexcoords import (
    axial_to_cube,
    cube_to_axial,
    cube_round,
    cube_to_oddr,
    is_cube,
    oddr_to_cube,
)
from gridkit.geometry.vectors import CubeVec, Point, vec_add, vec_sub
from gridkit.grid.base import Extents
from gridkit.grid.sparse import SparseGrid

logger = logging.getLogger(__name__)

T = TypeVar("T")


class HexGrid(Generic[T]):
    """Sparse mapping from cube coordinate to value."""

    def __init__(self, cells: Mapping[CubeVec, T] | None = None) -> None:
        self._cells: dict[CubeVec, T] = {}
        for pos, value in (cells or {}).items():
            self.set(pos, value)

    @classmethod
    def from_oddr(cls, cells: Mapping[Point, T]) -> HexGrid[T]:
        """Build from a mapping keyed by oddr ``(col, row)``."""
        return cls({oddr_to_cube(p): v for p, v in cells.items()})

    # ------------------------------------------------------------------
    # Contract
    # ------------------------------------------------------------------

    def get(self, pos: CubeVec) -> T | None:
        return self._cells.get(pos)

    def set(self, pos: CubeVec, value: T) -> None:
        if not is_cube(pos):
            raise ValueError(f"Not a cube coordinate (x + y + z != 0): {pos}")
        self._cells[pos] = value

    def axial_extents(self) -> Extents:
        return _bounds(cube_to_axial(p) for p in self._cells)

    def oddr_extents(self) -> Extents:
        return _bounds(cube_to_oddr(p) for p in self._cells)

    def points(self) -> Iterator[CubeVec]:
        """Cube coordinates of the axial bounding box, row-major (r outer)."""
        (min_q, min_r), (max_q, max_r) = self.axial_extents()
        for r in range(min_r, max_r + 1):
            for q in range(min_q, max_q + 1):
                yield axial_to_cube((q, r))

    def items(self) -> Iterator[tuple[CubeVec, T]]:
        return iter(self._cells.items())

    def values(self) -> Iterator[T]:
        return iter(self._cells.values())

    def copy(self) -> HexGrid[T]:
        return HexGrid(self._cells)

    def to_oddr_grid(self) -> SparseGrid[T]:
        """Re-key into a rectangular :class:`SparseGrid` of oddr coordinates."""
        return SparseGrid({cube_to_oddr(p): v for p, v in self._cells.items()})

    # ------------------------------------------------------------------
    # Oddr mirrors
    # ------------------------------------------------------------------

    def flip_horizontal(self) -> None:
        """Mirror the oddr columns across the bounding box's vertical mid-line."""
        (min_x, _), (max_x, _) = self.oddr_extents()

        def mirror(p: CubeVec) -> CubeVec:
            col, row = cube_to_oddr(p)
            return oddr_to_cube((max_x - (col - min_x), row))

        self._remap(mirror)

    def flip_vertical(self) -> None:
        """Mirror the oddr rows across the bounding box's horizontal mid-line."""
        (_, min_y), (_, max_y) = self.oddr_extents()

        def mirror(p: CubeVec) -> CubeVec:
            col, row = cube_to_oddr(p)
            return oddr_to_cube((col, max_y - (row - min_y)))

        self._remap(mirror)

    # ------------------------------------------------------------------
    # Pivot-relative reflections and rotations
    # ------------------------------------------------------------------

    def pivot(self) -> CubeVec:
        """Cell nearest the mean of the occupied cells (origin when empty)."""
        if not self._cells:
            return (0, 0, 0)
        n = len(self._cells)
        xs, ys, zs = zip(*self._cells)
        return cube_round(sum(xs) / n, sum(ys) / n, sum(zs) / n)

    def flip_x(self) -> None:
        self._about_pivot(lambda x, y, z: (x, z, y))

    def flip_y(self) -> None:
        self._about_pivot(lambda x, y, z: (z, y, x))

    def flip_z(self) -> None:
        self._about_pivot(lambda x, y, z: (y, x, z))

    def rotate_60_cw(self) -> None:
        """Rotate one step clockwise about :meth:`pivot`.

        Six calls give back the original cells unless the mean of the cells
        is a rounding tie (see the module docstring).
        """
        self._about_pivot(lambda x, y, z: (-z, -x, -y))

    def rotate_120_cw(self) -> None:
        self._about_pivot(lambda x, y, z: (y, z, x))

    def rotate_180_cw(self) -> None:
        self._about_pivot(lambda x, y, z: (-x, -y, -z))

    def rotate_240_cw(self) -> None:
        self._about_pivot(lambda x, y, z: (z, x, y))

    def rotate_300_cw(self) -> None:
        self._about_pivot(lambda x, y, z: (-y, -z, -x))

    def _about_pivot(self, permute: Callable[[int, int, int], CubeVec]) -> None:
        pivot = self.pivot()
        logger.debug("Transforming %d hex cells about pivot %s", len(self._cells), pivot)
        self._remap(lambda p: vec_add(permute(*vec_sub(p, pivot)), pivot))

    def _remap(self, fn: Callable[[CubeVec], CubeVec]) -> None:
        self._cells = {fn(p): v for p, v in self._cells.items()}

    # ------------------------------------------------------------------
    # Dunder
    # ------------------------------------------------------------------

    def __contains__(self, pos: object) -> bool:
        return pos in self._cells

    def __len__(self) -> int:
        return len(self._cells)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, HexGrid):
            return NotImplemented
        return self._cells == other._cells

    def __repr__(self) -> str:
        return f"HexGrid(cells={len(self._cells)}, oddr_extents={self.oddr_extents()})"


def _bounds(points: Iterator[Point]) -> Extents:
    pts = list(points)
    if not pts:
        return (0, 0), (0, 0)
    xs = [p[0] for p in pts]
    ys = [p[1] for p in pts]
    return (min(xs), min(ys)), (max(xs), max(ys))
