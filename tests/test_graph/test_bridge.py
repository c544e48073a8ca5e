"""Tests for grid → graph conversion and A* search."""

from __future__ import annotations

import networkx as nx
import pytest

from gridkit.geometry.vectors import Point, manhattan
from gridkit.graph.bridge import astar, grid_to_graph
from gridkit.grid.dense import DenseGrid
from gridkit.grid.sparse import SparseGrid


def _open(_p: Point, v: str) -> bool:
    return v != "#"


def _unit(_p: Point, _v: str, _q: Point, _w: str) -> int:
    return 1


def _king(p: Point, _v: str, q: Point, _w: str) -> int:
    return 1 if p[0] == q[0] or p[1] == q[1] else 2


class TestGridToGraph:
    def test_four_connected_edges(self) -> None:
        g = grid_to_graph(DenseGrid.filled(2, 2, "."), _open, _unit)
        assert g.number_of_nodes() == 4
        assert g.number_of_edges() == 4

    def test_eight_connected_edges(self) -> None:
        g = grid_to_graph(DenseGrid.filled(2, 2, "."), _open, _king, connectivity=8)
        assert g.number_of_edges() == 6
        assert g[(0, 0)][(1, 1)]["weight"] == 2
        assert g[(0, 0)][(1, 0)]["weight"] == 1

    def test_unsupported_connectivity(self) -> None:
        with pytest.raises(ValueError, match="connectivity"):
            grid_to_graph(DenseGrid.filled(2, 2, "."), _open, _unit, connectivity=6)

    def test_walls_are_not_nodes(self) -> None:
        g = grid_to_graph(DenseGrid.from_lines([".#."]), _open, _unit)
        assert set(g.nodes) == {(0, 0), (2, 0)}
        assert g.number_of_edges() == 0

    def test_none_weight_means_no_edge(self) -> None:
        g = grid_to_graph(
            DenseGrid.from_lines(["ab"]),
            lambda _p, _v: True,
            lambda _p, v, _q, w: None if {v, w} == {"a", "b"} else 1,
        )
        assert g.number_of_nodes() == 2
        assert g.number_of_edges() == 0

    def test_sparse_holes_are_skipped(self) -> None:
        sparse = SparseGrid({(0, 0): ".", (2, 0): "."})
        g = grid_to_graph(sparse, _open, _unit)
        assert set(g.nodes) == {(0, 0), (2, 0)}
        assert isinstance(g, nx.Graph)


class TestAstar:
    def test_open_field_cost_is_manhattan(self) -> None:
        g = grid_to_graph(DenseGrid.filled(6, 5, "."), _open, _unit)
        start, goal = (0, 0), (5, 4)
        result = astar(g, start, goal)
        assert result is not None
        cost, path = result
        assert cost == manhattan(start, goal)
        assert path[0] == start
        assert path[-1] == goal
        assert len(path) == cost + 1

    def test_routes_around_walls(self) -> None:
        grid = DenseGrid.from_lines(
            [
                "...",
                ".#.",
                ".#.",
            ]
        )
        result = astar(grid_to_graph(grid, _open, _unit), (0, 2), (2, 2))
        assert result is not None
        cost, path = result
        assert cost == 6
        assert (1, 0) in path

    def test_unreachable_goal(self) -> None:
        grid = DenseGrid.from_lines([".#."])
        assert astar(grid_to_graph(grid, _open, _unit), (0, 0), (2, 0)) is None

    def test_missing_node(self) -> None:
        g = grid_to_graph(DenseGrid.filled(2, 2, "."), _open, _unit)
        assert astar(g, (0, 0), (9, 9)) is None

    def test_start_equals_goal(self) -> None:
        g = grid_to_graph(DenseGrid.filled(2, 2, "."), _open, _unit)
        assert astar(g, (1, 1), (1, 1)) == (0, [(1, 1)])

    def test_diagonal_steps(self) -> None:
        g = grid_to_graph(DenseGrid.filled(3, 3, "."), _open, _king, connectivity=8)
        result = astar(g, (0, 0), (2, 2))
        assert result is not None
        assert result[0] == 4
