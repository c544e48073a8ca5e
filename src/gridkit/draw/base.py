"""Drawing-sink contract.

A drawer is a read-only observer: ``draw(grid)`` renders one frame of the
grid somewhere (nowhere, stdout, the terminal, a PNG sequence) and must not
change it.  The grid is only borrowed for the duration of the call.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any

from gridkit.grid.base import Grid
from gridkit.grid.hexgrid import HexGrid
from gridkit.grid.sparse import SparseGrid


class GridDrawer(ABC):
    """Renders rectangular grids."""

    @abstractmethod
    def draw(self, grid: Grid[Any]) -> None:
        """Render one frame of *grid*."""


class HexGridDrawer(ABC):
    """Renders hex grids, usually via their oddr projection."""

    @abstractmethod
    def draw(self, grid: HexGrid[Any]) -> None:
        """Render one frame of *grid*."""

    def convert(self, grid: HexGrid[Any]) -> SparseGrid[Any]:
        """Offset-coordinate view of *grid* for row/column based output."""
        return grid.to_oddr_grid()


class NopGridDrawer(GridDrawer):
    """Draws nothing; lets callers keep their draw calls unconditionally."""

    def draw(self, grid: Grid[Any]) -> None:
        pass


class NopHexGridDrawer(HexGridDrawer):
    def draw(self, grid: HexGrid[Any]) -> None:
        pass
