"""Abstract rectangular grid: the capability contract and its algorithms.

A backend only has to provide ``get``, ``set`` and ``extents`` plus the three
geometric primitives that depend on its storage (``flip_horizontal``,
``flip_vertical``, ``transpose``) and ``copy``.  Everything else (iteration,
rotation, flood fill, line drawing, region copy) is written once here,
against that contract, and therefore behaves identically on every backend.

Conventions
-----------
* Reads never raise: an out-of-bounds or unpopulated cell is ``None``.
* Extents are inclusive ``(min, max)`` corners.
* Transforms mutate the grid in place.  Backends build the transformed
  storage in full before swapping it in, so a half-transformed grid is never
  observable.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from collections.abc import Callable, Iterator
from typing import Generic, TypeVar

from gridkit.geometry.vectors import Point, point_add
from gridkit.grid.raster import plot_line

logger = logging.getLogger(__name__)

T = TypeVar("T")
U = TypeVar("U")
G = TypeVar("G", bound="Grid")

Extents = tuple[Point, Point]


class Grid(ABC, Generic[T]):
    """Mapping from :data:`Point` to a cell value of type ``T``.

    Cell values must support ``==`` and are treated as immutable values;
    ``None`` is reserved for "no value here".
    """

    # ------------------------------------------------------------------
    # Contract
    # ------------------------------------------------------------------

    @abstractmethod
    def get(self, pos: Point) -> T | None:
        """Return the value at *pos*, or ``None`` if there is none."""

    @abstractmethod
    def set(self, pos: Point, value: T) -> None:
        """Store *value* at *pos*.

        Fixed-shape backends silently ignore positions outside their shape.
        """

    @abstractmethod
    def extents(self) -> Extents:
        """Inclusive ``(min, max)`` corners covering every defined cell."""

    @abstractmethod
    def flip_horizontal(self) -> None:
        """Mirror across the vertical mid-line of the bounding box."""

    @abstractmethod
    def flip_vertical(self) -> None:
        """Mirror across the horizontal mid-line of the bounding box."""

    @abstractmethod
    def transpose(self) -> None:
        """Swap the x and y axes."""

    @abstractmethod
    def copy(self: G) -> G:
        """Return an independent copy."""

    # ------------------------------------------------------------------
    # Iteration
    # ------------------------------------------------------------------

    def points(self) -> Iterator[Point]:
        """Every coordinate of the bounding box, row-major (y outer, x inner).

        Sparse backends yield their holes too; ``get`` returns ``None`` there.
        """
        (min_x, min_y), (max_x, max_y) = self.extents()
        for y in range(min_y, max_y + 1):
            for x in range(min_x, max_x + 1):
                yield (x, y)

    def cells(self) -> Iterator[tuple[Point, T]]:
        """``(pos, value)`` for every defined cell, in :meth:`points` order."""
        for p in self.points():
            v = self.get(p)
            if v is not None:
                yield p, v

    def values(self) -> Iterator[T]:
        """Defined cell values, row-major."""
        for _, v in self.cells():
            yield v

    def width(self) -> int:
        (min_x, _), (max_x, _) = self.extents()
        return max_x - min_x + 1

    def height(self) -> int:
        (_, min_y), (_, max_y) = self.extents()
        return max_y - min_y + 1

    # ------------------------------------------------------------------
    # Rotations, always composed from the primitives above
    # ------------------------------------------------------------------

    def rotate_90_cw(self) -> None:
        self.transpose()
        self.flip_horizontal()

    def rotate_180_cw(self) -> None:
        self.flip_vertical()
        self.flip_horizontal()

    def rotate_270_cw(self) -> None:
        self.transpose()
        self.flip_vertical()

    # ------------------------------------------------------------------
    # Painting
    # ------------------------------------------------------------------

    def fill(self, pos: Point, value: T) -> None:
        """4-connected flood fill of the region containing *pos* with *value*.

        The flood is clipped to the extents as they were when the fill
        started, so a sparse grid growing during the fill does not widen it.
        """
        old = self.get(pos)
        if old is None or old == value:
            return
        (min_x, min_y), (max_x, max_y) = self.extents()
        todo = [pos]
        changed = 0
        while todo:
            x, y = todo.pop()
            if self.get((x, y)) != old:
                continue
            self.set((x, y), value)
            changed += 1
            if x > min_x:
                todo.append((x - 1, y))
            if x < max_x:
                todo.append((x + 1, y))
            if y > min_y:
                todo.append((x, y - 1))
            if y < max_y:
                todo.append((x, y + 1))
        logger.debug("Flood fill from %s recoloured %d cells", pos, changed)

    def line(self, a: Point, b: Point, value: T) -> None:
        """Draw a Bresenham line from *a* to *b* inclusive."""
        for p in plot_line(a, b):
            self.set(p, value)

    # ------------------------------------------------------------------
    # Region copy
    # ------------------------------------------------------------------

    def blit(self, pos: Point, source: Grid[T]) -> None:
        """Copy all of *source* so that its minimum corner lands on *pos*."""
        start, end = source.extents()
        self.blit_rect(pos, source, start, end)

    def blit_rect(self, pos: Point, source: Grid[T], start: Point, end: Point) -> None:
        """Copy the ``[start, end]`` rectangle of *source* to *pos*.

        The rectangle is first clipped to the source extents.  Cells without
        a value in *source* leave the destination untouched.
        """
        self._copy_rect(pos, source, start, end, None)

    def blit_rect_convert(
        self,
        pos: Point,
        source: Grid[U],
        start: Point,
        end: Point,
        convert: Callable[[U], T],
    ) -> None:
        """Like :meth:`blit_rect` but passes every copied value through *convert*."""
        self._copy_rect(pos, source, start, end, convert)

    def _copy_rect(
        self,
        pos: Point,
        source: Grid,
        start: Point,
        end: Point,
        convert: Callable | None,
    ) -> None:
        (min_x, min_y), (max_x, max_y) = source.extents()
        x0, y0 = max(min_x, start[0]), max(min_y, start[1])
        x1, y1 = min(max_x, end[0]), min(max_y, end[1])
        for dy, sy in enumerate(range(y0, y1 + 1)):
            for dx, sx in enumerate(range(x0, x1 + 1)):
                v = source.get((sx, sy))
                if v is None:
                    continue
                self.set(point_add(pos, (dx, dy)), v if convert is None else convert(v))
