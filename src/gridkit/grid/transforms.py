"""Symmetry enumeration for rectangular and hex grids.

Tile-matching callers need to try a piece in every orientation.  These
helpers produce each orientation as a fresh copy and never touch the
source grid.
"""

from __future__ import annotations

from collections.abc import Iterator
from typing import TypeVar

from gridkit.grid.base import Grid
from gridkit.grid.hexgrid import HexGrid

G = TypeVar("G", bound=Grid)
H = TypeVar("H", bound=HexGrid)

ORIENTATIONS: tuple[tuple[int, bool], ...] = tuple(
    (rotation, flipped) for rotation in (0, 90, 180, 270) for flipped in (False, True)
)
"""``(clockwise rotation, horizontally flipped)`` in enumeration order."""

HEX_ROTATIONS: tuple[int, ...] = (0, 60, 120, 180, 240, 300)


def orient(grid: G, rotation: int, flipped: bool = False) -> G:
    """Return a copy of *grid* rotated clockwise, then optionally flipped."""
    g = grid.copy()
    if rotation == 90:
        g.rotate_90_cw()
    elif rotation == 180:
        g.rotate_180_cw()
    elif rotation == 270:
        g.rotate_270_cw()
    elif rotation != 0:
        raise ValueError(f"Unsupported rotation: {rotation} (expected 0/90/180/270)")
    if flipped:
        g.flip_horizontal()
    return g


def orientations(grid: G) -> Iterator[G]:
    """All 8 orientations: each rotation un-flipped, then flipped."""
    for rotation, flipped in ORIENTATIONS:
        yield orient(grid, rotation, flipped)


def rotate_hex(grid: H, rotation: int) -> H:
    """Return a copy of *grid* rotated clockwise by *rotation* degrees."""
    g = grid.copy()
    if rotation == 60:
        g.rotate_60_cw()
    elif rotation == 120:
        g.rotate_120_cw()
    elif rotation == 180:
        g.rotate_180_cw()
    elif rotation == 240:
        g.rotate_240_cw()
    elif rotation == 300:
        g.rotate_300_cw()
    elif rotation != 0:
        raise ValueError(f"Unsupported hex rotation: {rotation} (expected a multiple of 60)")
    return g


def hex_rotations(grid: H) -> Iterator[H]:
    """The 6 rotations of a hex grid, 0° first."""
    for rotation in HEX_ROTATIONS:
        yield rotate_hex(grid, rotation)
