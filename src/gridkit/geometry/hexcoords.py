"""Hex coordinate systems: cube, axial and odd-r offset.

* **cube** ``(x, y, z)`` with ``x + y + z == 0`` is the canonical key.
* **axial** ``(q, r) = (x, z)``; ``y`` is implied.
* **oddr** ``(col, row)`` is the rectangular offset layout used for display,
  with odd rows shoved right by half a cell.

Floor division and Python's ``%`` (always non-negative for a positive
modulus) keep the oddr formulas exact for negative rows.

Reference: https://www.redblobgames.com/grids/hexagons/
"""

from __future__ import annotations

from gridkit.geometry.vectors import CubeVec, Point


def is_cube(cube: CubeVec) -> bool:
    """True if *cube* satisfies the ``x + y + z == 0`` invariant."""
    return cube[0] + cube[1] + cube[2] == 0


def axial_to_cube(axial: Point) -> CubeVec:
    x, z = axial
    return (x, -x - z, z)


def cube_to_axial(cube: CubeVec) -> Point:
    return (cube[0], cube[2])


def cube_to_oddr(cube: CubeVec) -> Point:
    x, _, z = cube
    col = x + (z - (z % 2)) // 2
    return (col, z)


def oddr_to_cube(oddr: Point) -> CubeVec:
    col, row = oddr
    x = col - (row - (row % 2)) // 2
    return (x, -x - row, row)


def cube_round(x: float, y: float, z: float) -> CubeVec:
    """Nearest cube coordinate to a fractional ``(x, y, z)`` with ``x + y + z == 0``.

    Each component is rounded, then the one that moved furthest is rebuilt
    from the other two so the result stays on the ``x + y + z == 0`` plane.
    """
    rx, ry, rz = round(x), round(y), round(z)
    dx, dy, dz = abs(rx - x), abs(ry - y), abs(rz - z)
    if dx > dy and dx > dz:
        rx = -ry - rz
    elif dy > dz:
        ry = -rx - rz
    else:
        rz = -rx - ry
    return (int(rx), int(ry), int(rz))
