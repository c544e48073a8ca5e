"""Pixel-buffer grid: an RGB :class:`PIL.Image.Image` viewed as ``Grid[RGB]``."""

from __future__ import annotations

import logging
from pathlib import Path

from PIL import Image

from gridkit.geometry.vectors import Point
from gridkit.grid.base import Extents, Grid

logger = logging.getLogger(__name__)

RGB = tuple[int, int, int]

WHITE: RGB = (255, 255, 255)


class PixelGrid(Grid[RGB]):
    """Fixed-size RGB image; cells are ``(r, g, b)`` tuples.

    Extents come straight from the image bounds; writes outside the image
    are dropped.
    """

    def __init__(self, image: Image.Image) -> None:
        self.image = image if image.mode == "RGB" else image.convert("RGB")

    @classmethod
    def new(cls, width: int, height: int, color: RGB = WHITE) -> PixelGrid:
        return cls(Image.new("RGB", (width, height), color))

    @classmethod
    def open(cls, path: str | Path) -> PixelGrid:
        with Image.open(path) as img:
            return cls(img.convert("RGB"))

    # ------------------------------------------------------------------
    # Contract
    # ------------------------------------------------------------------

    def _inside(self, pos: Point) -> bool:
        w, h = self.image.size
        return 0 <= pos[0] < w and 0 <= pos[1] < h

    def get(self, pos: Point) -> RGB | None:
        if not self._inside(pos):
            return None
        return tuple(self.image.getpixel(pos))  # type: ignore[return-value]

    def set(self, pos: Point, value: RGB) -> None:
        if self._inside(pos):
            self.image.putpixel(pos, tuple(value))

    def extents(self) -> Extents:
        w, h = self.image.size
        if w == 0 or h == 0:
            return (0, 0), (0, 0)
        return (0, 0), (w - 1, h - 1)

    def flip_horizontal(self) -> None:
        self.image = self.image.transpose(Image.Transpose.FLIP_LEFT_RIGHT)

    def flip_vertical(self) -> None:
        self.image = self.image.transpose(Image.Transpose.FLIP_TOP_BOTTOM)

    def transpose(self) -> None:
        self.image = self.image.transpose(Image.Transpose.TRANSPOSE)

    def copy(self) -> PixelGrid:
        return PixelGrid(self.image.copy())

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    def save(self, path: str | Path) -> None:
        self.image.save(path)
        logger.debug("Saved %dx%d image to %s", *self.image.size, path)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, PixelGrid):
            return NotImplemented
        return (
            self.image.size == other.image.size
            and self.image.tobytes() == other.image.tobytes()
        )

    def __repr__(self) -> str:
        w, h = self.image.size
        return f"PixelGrid({w}x{h})"
