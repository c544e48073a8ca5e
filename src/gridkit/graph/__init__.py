"""Bridge from populated grids to ``networkx`` graphs and shortest paths."""

from __future__ import annotations

from gridkit.graph.bridge import astar, grid_to_graph

__all__ = ["astar", "grid_to_graph"]
