"""Sparse grid backed by a ``dict`` keyed by point."""

from __future__ import annotations

from collections.abc import Callable, Iterable, Iterator, Mapping
from typing import Any, TypeVar

from gridkit.geometry.vectors import Point
from gridkit.grid.base import Extents, Grid

T = TypeVar("T")


class SparseGrid(Grid[T]):
    """Unbounded grid storing only populated cells.

    The extents are the bounding box of the current keys and are recomputed
    on every call (O(n)).  An empty grid reports the single-point box at the
    origin.
    """

    def __init__(self, cells: Mapping[Point, T] | None = None) -> None:
        self._cells: dict[Point, T] = dict(cells) if cells else {}

    @classmethod
    def from_lines(
        cls,
        lines: Iterable[str],
        convert: Callable[[str], Any | None] | None = None,
    ) -> SparseGrid:
        """Populate from text, keeping cells where *convert* returns a value.

        Without *convert*, every non-space character is kept as-is.
        """
        if convert is None:
            convert = _keep_non_space
        cells: dict[Point, Any] = {}
        for y, line in enumerate(lines):
            for x, ch in enumerate(line):
                v = convert(ch)
                if v is not None:
                    cells[(x, y)] = v
        return cls(cells)

    # ------------------------------------------------------------------
    # Contract
    # ------------------------------------------------------------------

    def get(self, pos: Point) -> T | None:
        return self._cells.get(pos)

    def set(self, pos: Point, value: T) -> None:
        self._cells[pos] = value

    def extents(self) -> Extents:
        if not self._cells:
            return (0, 0), (0, 0)
        xs = [p[0] for p in self._cells]
        ys = [p[1] for p in self._cells]
        return (min(xs), min(ys)), (max(xs), max(ys))

    def flip_horizontal(self) -> None:
        (min_x, _), (max_x, _) = self.extents()
        self._cells = {
            (max_x - (x - min_x), y): v for (x, y), v in self._cells.items()
        }

    def flip_vertical(self) -> None:
        (_, min_y), (_, max_y) = self.extents()
        self._cells = {
            (x, max_y - (y - min_y)): v for (x, y), v in self._cells.items()
        }

    def transpose(self) -> None:
        self._cells = {(y, x): v for (x, y), v in self._cells.items()}

    def copy(self) -> SparseGrid[T]:
        return SparseGrid(self._cells)

    # ------------------------------------------------------------------
    # Mapping helpers
    # ------------------------------------------------------------------

    def remove(self, pos: Point) -> T | None:
        """Drop the cell at *pos*, returning its value if it had one."""
        return self._cells.pop(pos, None)

    def items(self) -> Iterator[tuple[Point, T]]:
        """Populated cells in insertion order (cheaper than :meth:`cells`)."""
        return iter(self._cells.items())

    def to_dict(self) -> dict[Point, T]:
        return dict(self._cells)

    def __contains__(self, pos: object) -> bool:
        return pos in self._cells

    def __len__(self) -> int:
        return len(self._cells)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, SparseGrid):
            return NotImplemented
        return self._cells == other._cells

    def __repr__(self) -> str:
        return f"SparseGrid(cells={len(self._cells)}, extents={self.extents()})"


def _keep_non_space(ch: str) -> str | None:
    return None if ch == " " else ch
