"""Integer point and cube-vector arithmetic.

Points are plain ``(x, y)`` tuples and cube vectors plain ``(x, y, z)``
tuples so they hash cheaply and can be used directly as dict keys and graph
nodes.  There is no separate "vector" type: a point doubles as a
displacement, and callers keep track of which is which.

Screen convention: ``y`` grows downwards, so ``NORTH`` is ``(0, -1)``.
"""

from __future__ import annotations

import math
from types import MappingProxyType

Point = tuple[int, int]
CubeVec = tuple[int, int, int]

# ---------------------------------------------------------------------------
# 2D
# ---------------------------------------------------------------------------


def point_add(a: Point, b: Point) -> Point:
    return (a[0] + b[0], a[1] + b[1])


def point_sub(a: Point, b: Point) -> Point:
    return (a[0] - b[0], a[1] - b[1])


def point_mul(a: Point, k: int) -> Point:
    """Scale *a* by the integer *k*."""
    return (a[0] * k, a[1] * k)


def point_neg(a: Point) -> Point:
    return (-a[0], -a[1])


def point_dot(a: Point, b: Point) -> int:
    return a[0] * b[0] + a[1] * b[1]


def point_square_length(a: Point) -> int:
    return point_dot(a, a)


def point_normalize(a: Point) -> tuple[float, float]:
    """Unit vector in the direction of *a* (float components)."""
    n = math.sqrt(point_square_length(a))
    return (a[0] / n, a[1] / n)


def cmul2(a: Point, b: Point) -> Point:
    """Component-wise product."""
    return (a[0] * b[0], a[1] * b[1])


def manhattan(a: Point, b: Point) -> int:
    return abs(a[0] - b[0]) + abs(a[1] - b[1])


# ---------------------------------------------------------------------------
# 3D
# ---------------------------------------------------------------------------


def vec_add(a: CubeVec, b: CubeVec) -> CubeVec:
    return (a[0] + b[0], a[1] + b[1], a[2] + b[2])


def vec_sub(a: CubeVec, b: CubeVec) -> CubeVec:
    return (a[0] - b[0], a[1] - b[1], a[2] - b[2])


def vec_mul(a: CubeVec, k: int) -> CubeVec:
    return (a[0] * k, a[1] * k, a[2] * k)


def vec_neg(a: CubeVec) -> CubeVec:
    return (-a[0], -a[1], -a[2])


def vec_dot(a: CubeVec, b: CubeVec) -> int:
    return a[0] * b[0] + a[1] * b[1] + a[2] * b[2]


def vec_cross(a: CubeVec, b: CubeVec) -> CubeVec:
    return (
        a[1] * b[2] - a[2] * b[1],
        a[2] * b[0] - a[0] * b[2],
        a[0] * b[1] - a[1] * b[0],
    )


def vec_square_length(a: CubeVec) -> int:
    return vec_dot(a, a)


def length(a: CubeVec) -> float:
    return math.sqrt(vec_square_length(a))


def vec_normalize(a: CubeVec) -> tuple[float, float, float]:
    n = length(a)
    return (a[0] / n, a[1] / n, a[2] / n)


def cmul(a: CubeVec, b: CubeVec) -> CubeVec:
    """Component-wise product."""
    return (a[0] * b[0], a[1] * b[1], a[2] * b[2])


# ---------------------------------------------------------------------------
# Directions
# ---------------------------------------------------------------------------

NORTH: Point = (0, -1)
NORTH_EAST: Point = (1, -1)
EAST: Point = (1, 0)
SOUTH_EAST: Point = (1, 1)
SOUTH: Point = (0, 1)
SOUTH_WEST: Point = (-1, 1)
WEST: Point = (-1, 0)
NORTH_WEST: Point = (-1, -1)

UP = NORTH
UP_RIGHT = NORTH_EAST
RIGHT = EAST
DOWN_RIGHT = SOUTH_EAST
DOWN = SOUTH
DOWN_LEFT = SOUTH_WEST
LEFT = WEST
UP_LEFT = NORTH_WEST

DIRECTIONS: tuple[Point, ...] = (NORTH, EAST, SOUTH, WEST)
DIRECTIONS_INCL_DIAGONALS: tuple[Point, ...] = (
    NORTH, NORTH_EAST, EAST, SOUTH_EAST, SOUTH, SOUTH_WEST, WEST, NORTH_WEST,
)

DIRECTION_MAP = MappingProxyType({
    "U": NORTH,
    "D": SOUTH,
    "R": EAST,
    "L": WEST,
    "N": NORTH,
    "S": SOUTH,
    "E": EAST,
    "W": WEST,
    "NW": NORTH_WEST,
    "NE": NORTH_EAST,
    "SW": SOUTH_WEST,
    "SE": SOUTH_EAST,
})
"""Direction letters (``"U"``, ``"NE"``, ...) to unit displacements."""

# Hex directions in cube coordinates (pointy-top, oddr display)
HEX_E: CubeVec = (1, -1, 0)
HEX_W: CubeVec = (-1, 1, 0)
HEX_SE: CubeVec = (0, -1, 1)
HEX_SW: CubeVec = (-1, 0, 1)
HEX_NW: CubeVec = (0, 1, -1)
HEX_NE: CubeVec = (1, 0, -1)

HEX_DIRECTIONS: tuple[CubeVec, ...] = (HEX_E, HEX_W, HEX_SW, HEX_SE, HEX_NW, HEX_NE)


def hex_neighbors(cube: CubeVec) -> list[CubeVec]:
    """Return the six cube neighbours of *cube*."""
    return [vec_add(cube, d) for d in HEX_DIRECTIONS]
