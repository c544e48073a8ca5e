"""Grid → weighted graph conversion and A* search.

The grid decides *what* the graph is; ``networkx`` does the graph keeping
and the search.  Nodes are the point tuples themselves and edge weights live
in the ``weight`` attribute.

Edge-weight functions should be symmetric.  Each node offers an edge to
every neighbour independently, so when both directions return a weight the
undirected edge keeps whichever was added last.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import TypeVar

import networkx as nx  # type: ignore[import-untyped]

from gridkit.geometry.vectors import (
    DIRECTIONS,
    DIRECTIONS_INCL_DIAGONALS,
    Point,
    manhattan,
    point_add,
)
from gridkit.grid.base import Grid

logger = logging.getLogger(__name__)

T = TypeVar("T")

_NEIGHBOURHOODS: dict[int, tuple[Point, ...]] = {
    4: DIRECTIONS,
    8: DIRECTIONS_INCL_DIAGONALS,
}


def grid_to_graph(
    grid: Grid[T],
    is_node: Callable[[Point, T], bool],
    get_edge: Callable[[Point, T, Point, T], int | None],
    connectivity: int = 4,
) -> nx.Graph:
    """Build an undirected weighted graph from the cells of *grid*.

    Parameters
    ----------
    is_node:
        ``is_node(pos, value)``: whether a defined cell becomes a node.
    get_edge:
        ``get_edge(p, value, q, value_q)``: weight of the edge between two
        neighbouring nodes, or ``None`` for no edge.
    connectivity:
        4 (orthogonal) or 8 (orthogonal + diagonal) neighbours.

    Raises
    ------
    ValueError
        If *connectivity* is neither 4 nor 8.
    """
    directions = _NEIGHBOURHOODS.get(connectivity)
    if directions is None:
        raise ValueError(f"connectivity must be 4 or 8, got {connectivity!r}")

    graph = nx.Graph()
    (min_x, min_y), (max_x, max_y) = grid.extents()

    for p, value in grid.cells():
        if not is_node(p, value):
            continue
        graph.add_node(p)
        for d in directions:
            q = point_add(p, d)
            if not (min_x <= q[0] <= max_x and min_y <= q[1] <= max_y):
                continue
            q_value = grid.get(q)
            if q_value is None or not is_node(q, q_value):
                continue
            weight = get_edge(p, value, q, q_value)
            if weight is not None:
                graph.add_edge(p, q, weight=weight)

    logger.debug(
        "Built graph: %d nodes, %d edges (connectivity=%d)",
        graph.number_of_nodes(), graph.number_of_edges(), connectivity,
    )
    return graph


def astar(graph: nx.Graph, start: Point, goal: Point) -> tuple[int, list[Point]] | None:
    """Cheapest path from *start* to *goal*.

    Uses the Manhattan distance as heuristic, which is admissible as long as
    every edge weighs at least the Manhattan length of the step it spans.

    Returns
    -------
    ``(cost, path)`` with both endpoints included, or ``None`` if *goal* is
    unreachable or either endpoint is not in the graph.
    """
    try:
        path = nx.astar_path(
            graph, start, goal,
            heuristic=manhattan,
            weight="weight",
        )
    except (nx.NetworkXNoPath, nx.NodeNotFound):
        logger.debug("No path from %s to %s", start, goal)
        return None
    return nx.path_weight(graph, path, weight="weight"), path
