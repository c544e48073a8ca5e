"""Tests for Bresenham line rasterisation."""

from __future__ import annotations

import pytest

from gridkit.grid.raster import plot_line


def _is_connected(points: list[tuple[int, int]]) -> bool:
    return all(
        abs(a[0] - b[0]) <= 1 and abs(a[1] - b[1]) <= 1
        for a, b in zip(points, points[1:])
    )


class TestPlotLine:
    def test_horizontal(self) -> None:
        assert plot_line((0, 0), (3, 0)) == [(0, 0), (1, 0), (2, 0), (3, 0)]

    def test_vertical_upwards(self) -> None:
        assert plot_line((1, 2), (1, -1)) == [(1, 2), (1, 1), (1, 0), (1, -1)]

    def test_single_point(self) -> None:
        assert plot_line((4, 4), (4, 4)) == [(4, 4)]

    def test_diagonal(self) -> None:
        assert plot_line((0, 0), (-2, 2)) == [(0, 0), (-1, 1), (-2, 2)]

    @pytest.mark.parametrize(
        ("a", "b"),
        [((0, 0), (7, 3)), ((5, -2), (-4, 6)), ((0, 0), (1, 9)), ((-3, -3), (3, 1))],
    )
    def test_endpoints_and_connectivity(self, a: tuple[int, int], b: tuple[int, int]) -> None:
        pts = plot_line(a, b)
        assert pts[0] == a
        assert pts[-1] == b
        assert _is_connected(pts)
        assert len(pts) == max(abs(b[0] - a[0]), abs(b[1] - a[1])) + 1

    def test_reverse_covers_same_cells(self) -> None:
        forward = plot_line((0, 0), (2, 1))
        backward = plot_line((2, 1), (0, 0))
        assert backward == forward[::-1]
