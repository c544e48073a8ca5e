"""Shared test fixtures for gridkit.

Provides the small sample grids most test modules start from, and resets
the settings singleton so environment tweaks never leak between tests.
"""

from __future__ import annotations

from collections.abc import Iterator

import pytest

from gridkit.config.settings import reload_settings
from gridkit.geometry.vectors import HEX_E, HEX_NE, HEX_NW, HEX_SE, HEX_SW, HEX_W
from gridkit.grid.dense import DenseGrid
from gridkit.grid.hexgrid import HexGrid
from gridkit.grid.sparse import SparseGrid


@pytest.fixture(autouse=True)
def _fresh_settings() -> Iterator[None]:
    """Re-read the (already restored) environment before every test."""
    reload_settings()
    yield


# ---------------------------------------------------------------------------
# Rectangular grids
# ---------------------------------------------------------------------------


@pytest.fixture()
def dense_sample() -> DenseGrid[str]:
    """``####`` over ``#   ``."""
    return DenseGrid.from_lines(["####", "#   "])


@pytest.fixture()
def sparse_sample() -> SparseGrid[str]:
    """Four walls in row 0 starting at x=-1, plus one below the first."""
    return SparseGrid(
        {(-1, 0): "#", (0, 0): "#", (1, 0): "#", (2, 0): "#", (-1, 1): "#"}
    )


@pytest.fixture()
def numbered_grid() -> DenseGrid[int]:
    """3x2 grid with distinct values, so every orientation is distinguishable."""
    return DenseGrid([[1, 2, 3], [4, 5, 6]])


# ---------------------------------------------------------------------------
# Hex grids
# ---------------------------------------------------------------------------


@pytest.fixture()
def hexagon() -> HexGrid[str]:
    """Radius-1 hexagon around the origin with distinct values.

    Its pivot is the origin, so rotations only permute its cells.
    """
    return HexGrid(
        {
            (0, 0, 0): "o",
            HEX_E: "e",
            HEX_W: "w",
            HEX_SE: "s",
            HEX_SW: "z",
            HEX_NE: "n",
            HEX_NW: "m",
        }
    )
