"""gridkit: 2D and hex grids with a transform algebra, painting, pathfinding
and frame renderers.
"""

from __future__ import annotations

__version__ = "0.1.0"

__all__ = ["__version__"]
