"""Plain-text drawers and the line builders the terminal drawers reuse."""

from __future__ import annotations

import sys
from collections.abc import Callable
from typing import Any, TextIO

from gridkit.config.settings import get_settings
from gridkit.draw.base import GridDrawer, HexGridDrawer
from gridkit.grid.base import Grid
from gridkit.grid.hexgrid import HexGrid

ToChar = Callable[[Any], str]


def grid_lines(grid: Grid[Any], to_char: ToChar = str, empty: str = " ") -> list[str]:
    """One string per row of the bounding box; absent cells become *empty*."""
    (min_x, min_y), (max_x, max_y) = grid.extents()
    lines: list[str] = []
    for y in range(min_y, max_y + 1):
        row = []
        for x in range(min_x, max_x + 1):
            v = grid.get((x, y))
            row.append(empty if v is None else to_char(v))
        lines.append("".join(row))
    return lines


def hex_lines(grid: Grid[Any], to_char: ToChar = str, empty: str = " ") -> list[str]:
    """ASCII honeycomb for an oddr-keyed grid.

    Odd rows are indented by two columns::

         / \\ / \\ /
        | a | b |
         \\ / \\ / \\
          | c | d |
         / \\ / \\ /
    """
    (min_x, min_y), (max_x, max_y) = grid.extents()
    width = max_x - min_x + 1
    top = " " + "/ \\ " * width + "/"
    bottom = " " + "\\ / " * width + "\\"

    lines: list[str] = []
    if min_y % 2 == 0:
        lines.append(top)
    for y in range(min_y, max_y + 1):
        odd = y % 2 != 0
        if odd:
            lines.append(bottom)
        cells = []
        for x in range(min_x, max_x + 1):
            v = grid.get((x, y))
            cells.append(f"| {empty if v is None else to_char(v)} ")
        lines.append(("  " if odd else "") + "".join(cells) + "|")
        if odd:
            lines.append(top)
    return lines


class PrintGridDrawer(GridDrawer):
    """Dumps each frame as text to *stream* (stdout by default)."""

    def __init__(self, to_char: ToChar = str, stream: TextIO | None = None) -> None:
        self.to_char = to_char
        self.stream = stream
        self.empty = get_settings().draw.empty_char

    def draw(self, grid: Grid[Any]) -> None:
        out = self.stream or sys.stdout
        for line in grid_lines(grid, self.to_char, self.empty):
            out.write(line + "\n")


class PrintHexGridDrawer(HexGridDrawer):
    """Dumps each frame as an ASCII honeycomb."""

    def __init__(self, to_char: ToChar = str, stream: TextIO | None = None) -> None:
        self.to_char = to_char
        self.stream = stream
        self.empty = get_settings().draw.empty_char

    def draw(self, grid: HexGrid[Any]) -> None:
        out = self.stream or sys.stdout
        for line in hex_lines(self.convert(grid), self.to_char, self.empty):
            out.write(line + "\n")
