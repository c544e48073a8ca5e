"""Line rasterisation."""

from __future__ import annotations

from gridkit.geometry.vectors import Point


def plot_line(a: Point, b: Point) -> list[Point]:
    """Integer Bresenham line from *a* to *b*, both ends included.

    Consecutive points are 8-connected.  The error term breaks ties towards
    one side, so the path is always traced from the lexicographically smaller
    endpoint and reversed if needed; ``plot_line(a, b)`` and
    ``plot_line(b, a)`` therefore cover the same cells.

    >>> plot_line((0, 0), (3, 0))
    [(0, 0), (1, 0), (2, 0), (3, 0)]
    """
    if b < a:
        return _bresenham(b, a)[::-1]
    return _bresenham(a, b)


def _bresenham(a: Point, b: Point) -> list[Point]:
    # https://en.wikipedia.org/wiki/Bresenham%27s_line_algorithm
    x0, y0 = a
    x1, y1 = b
    dx = abs(x1 - x0)
    sx = 1 if x0 < x1 else -1
    dy = -abs(y1 - y0)
    sy = 1 if y0 < y1 else -1
    err = dx + dy  # e_xy
    out: list[Point] = []
    while True:
        out.append((x0, y0))
        if x0 == x1 and y0 == y1:
            break
        e2 = 2 * err
        if e2 >= dy:  # e_xy + e_x > 0
            err += dy
            x0 += sx
        if e2 <= dx:  # e_xy + e_y < 0
            err += dx
            y0 += sy
    return out
