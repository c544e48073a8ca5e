"""Dense grid backed by a list of equal-length rows."""

from __future__ import annotations

from collections.abc import Callable, Iterable, Sequence
from typing import Any, TypeVar

import numpy as np

from gridkit.geometry.vectors import Point
from gridkit.grid.base import Extents, Grid

T = TypeVar("T")


class DenseGrid(Grid[T]):
    """Rectangular grid with its origin fixed at ``(0, 0)``.

    ``rows[y][x]`` holds the value at ``(x, y)``.  Writes outside the
    rectangle are dropped; the shape only changes through :meth:`transpose`.
    """

    def __init__(self, rows: Iterable[Sequence[T]] = ()) -> None:
        self._rows: list[list[T]] = [list(row) for row in rows]
        if self._rows:
            width = len(self._rows[0])
            for y, row in enumerate(self._rows):
                if len(row) != width:
                    raise ValueError(
                        f"Row {y} has length {len(row)}, expected {width}"
                    )
            if width == 0:
                # Zero-width rows hold no cells.
                self._rows = []

    # ------------------------------------------------------------------
    # Construction
    # ------------------------------------------------------------------

    @classmethod
    def from_lines(
        cls,
        lines: Iterable[str],
        convert: Callable[[str], Any] | None = None,
    ) -> DenseGrid:
        """One row per line, one cell per character (optionally converted)."""
        if convert is None:
            return cls(list(line) for line in lines)
        return cls([convert(ch) for ch in line] for line in lines)

    @classmethod
    def filled(cls, width: int, height: int, value: T) -> DenseGrid[T]:
        return cls([value] * width for _ in range(height))

    @classmethod
    def from_array(cls, array: np.ndarray) -> DenseGrid:
        """Wrap a 2D numpy array (``array[y, x]``) as Python-valued rows."""
        if array.ndim != 2:
            raise ValueError(f"Expected a 2D array, got shape {array.shape}")
        return cls(array.tolist())

    def to_array(self, dtype: Any = None) -> np.ndarray:
        return np.array(self._rows, dtype=dtype)

    # ------------------------------------------------------------------
    # Contract
    # ------------------------------------------------------------------

    def get(self, pos: Point) -> T | None:
        x, y = pos
        if 0 <= y < len(self._rows) and 0 <= x < len(self._rows[y]):
            return self._rows[y][x]
        return None

    def set(self, pos: Point, value: T) -> None:
        x, y = pos
        if 0 <= y < len(self._rows) and 0 <= x < len(self._rows[y]):
            self._rows[y][x] = value

    def extents(self) -> Extents:
        if self._rows:
            return (0, 0), (len(self._rows[0]) - 1, len(self._rows) - 1)
        return (0, 0), (0, 0)

    def flip_horizontal(self) -> None:
        self._rows = [row[::-1] for row in self._rows]

    def flip_vertical(self) -> None:
        self._rows = [row[:] for row in self._rows[::-1]]

    def transpose(self) -> None:
        self._rows = [list(col) for col in zip(*self._rows)]

    def copy(self) -> DenseGrid[T]:
        return DenseGrid(self._rows)

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    @property
    def rows(self) -> list[list[T]]:
        """Row-major copy of the cell values."""
        return [row[:] for row in self._rows]

    def to_lines(self) -> list[str]:
        """Rows joined into strings (for character grids)."""
        return ["".join(str(v) for v in row) for row in self._rows]

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, DenseGrid):
            return NotImplemented
        return self._rows == other._rows

    def __repr__(self) -> str:
        return f"DenseGrid(width={self.width()}, height={len(self._rows)})"
