"""PNG frame-sequence drawers.

Every ``draw`` renders the grid into a fresh image and writes it to
``<basename>_<frame:06d>.png`` next to *basename*; the frame counter starts
at 1.  The sequence can be turned into a movie with e.g.::

    ffmpeg -framerate 25 -i "basename_%06d.png" basename.gif
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Sequence
from pathlib import Path
from typing import Any

import numpy as np
from PIL import Image

from gridkit.config.settings import get_settings
from gridkit.draw.base import GridDrawer, HexGridDrawer
from gridkit.geometry.vectors import Point
from gridkit.grid.base import Extents, Grid
from gridkit.grid.dense import DenseGrid
from gridkit.grid.hexgrid import HexGrid
from gridkit.grid.pixel import RGB, PixelGrid

logger = logging.getLogger(__name__)

ToColor = Callable[[Any], RGB]
ToSprite = Callable[[Any], Sequence[RGB]]

# Hexagon sprite: 7 px wide, 10 px tall.  Rows overlap by 5 px when tiled.
HEX_SPRITE_SIZE = (7, 10)
HEX_OUTLINE: tuple[Point, ...] = (
    (3, 0),
    (2, 1), (4, 1), (1, 1), (5, 1),
    (0, 2), (6, 2),
    (0, 3), (6, 3),
    (0, 4), (6, 4),
    (0, 5), (6, 5),
    (1, 6), (5, 6), (2, 6), (4, 6),
    (3, 7),
)  # fmt: skip


def _check_rect(rect: Extents) -> Extents:
    (min_x, min_y), (max_x, max_y) = rect
    if min_x > max_x or min_y > max_y:
        raise ValueError(f"rect min must not exceed max, got {rect}")
    return rect


class _FrameWriter:
    """Frame counter, output naming and the current image."""

    def __init__(self, basename: str | Path) -> None:
        self.basename = Path(basename)
        self.basename.parent.mkdir(parents=True, exist_ok=True)
        self.frame = 0
        self.image: Image.Image | None = None
        self.background: RGB = tuple(get_settings().draw.background)  # type: ignore[assignment]

    def frame_path(self, frame: int | None = None) -> Path:
        n = self.frame if frame is None else frame
        return self.basename.parent / f"{self.basename.name}_{n:06d}.png"

    def save_image(self) -> Path | None:
        """Write the current image; returns the path or None if nothing was drawn."""
        if self.image is None:
            return None
        path = self.frame_path()
        self.image.save(path)
        logger.debug("Wrote frame %d to %s", self.frame, path)
        return path

    def put_pixel(self, pos: Point, rgb: RGB) -> None:
        """Overlay a single pixel on the current image; out-of-range is ignored."""
        if self.image is None:
            return
        w, h = self.image.size
        x, y = pos
        if 0 <= x < w and 0 <= y < h:
            self.image.putpixel((x, y), tuple(rgb))


class BitmapGridDrawer(_FrameWriter, GridDrawer):
    """One pixel per cell."""

    def __init__(self, to_color: ToColor, basename: str | Path) -> None:
        super().__init__(basename)
        self.to_color = to_color
        self.rect: Extents | None = None

    def set_rect(self, rect: Extents) -> None:
        """Render only this region instead of the grid's extents."""
        self.rect = _check_rect(rect)

    def draw_grid(self, grid: Grid[Any]) -> None:
        self.frame += 1
        (min_x, min_y), (max_x, max_y) = self.rect or grid.extents()
        width = max_x - min_x + 1
        height = max_y - min_y + 1
        pixels = np.full((height, width, 3), self.background, dtype=np.uint8)
        for y in range(min_y, max_y + 1):
            for x in range(min_x, max_x + 1):
                value = grid.get((x, y))
                if value is not None:
                    pixels[y - min_y, x - min_x] = self.to_color(value)
        self.image = Image.fromarray(pixels)

    def draw(self, grid: Grid[Any]) -> None:
        self.draw_grid(grid)
        self.save_image()


class BitmapSpriteGridDrawer(_FrameWriter, GridDrawer):
    """Each cell becomes a ``sprite_width`` x ``sprite_height`` block.

    *to_sprite* returns the block's colours row-major, exactly
    ``sprite_width * sprite_height`` of them.
    """

    def __init__(
        self,
        sprite_size: tuple[int, int] | None,
        to_sprite: ToSprite,
        basename: str | Path,
    ) -> None:
        super().__init__(basename)
        if sprite_size is None:
            cfg = get_settings().draw
            sprite_size = (cfg.sprite_width, cfg.sprite_height)
        if sprite_size[0] < 1 or sprite_size[1] < 1:
            raise ValueError(f"sprite size must be positive, got {sprite_size}")
        self.sprite_width, self.sprite_height = sprite_size
        self.to_sprite = to_sprite
        self.rect: Extents | None = None

    def set_rect(self, rect: Extents) -> None:
        self.rect = _check_rect(rect)

    def _sprite(self, value: Any) -> np.ndarray:
        colors = list(self.to_sprite(value))
        expected = self.sprite_width * self.sprite_height
        if len(colors) != expected:
            raise ValueError(f"sprite has {len(colors)} pixels, expected {expected}")
        return np.asarray(colors, dtype=np.uint8).reshape(
            self.sprite_height, self.sprite_width, 3
        )

    def draw_grid(self, grid: Grid[Any]) -> None:
        self.frame += 1
        (min_x, min_y), (max_x, max_y) = self.rect or grid.extents()
        sw, sh = self.sprite_width, self.sprite_height
        width = (max_x - min_x + 1) * sw
        height = (max_y - min_y + 1) * sh
        pixels = np.full((height, width, 3), self.background, dtype=np.uint8)
        for y in range(min_y, max_y + 1):
            for x in range(min_x, max_x + 1):
                value = grid.get((x, y))
                if value is None:
                    continue
                px = (x - min_x) * sw
                py = (y - min_y) * sh
                pixels[py : py + sh, px : px + sw] = self._sprite(value)
        self.image = Image.fromarray(pixels)

    def draw(self, grid: Grid[Any]) -> None:
        self.draw_grid(grid)
        self.save_image()


class BitmapHexGridDrawer(_FrameWriter, HexGridDrawer):
    """Tiles an outlined hexagon per cell and flood-fills its interior."""

    def __init__(self, to_color: ToColor, basename: str | Path) -> None:
        super().__init__(basename)
        self.to_color = to_color
        outline: RGB = tuple(get_settings().draw.hex_outline)  # type: ignore[assignment]
        self.hexagon: DenseGrid[RGB] = DenseGrid.filled(*HEX_SPRITE_SIZE, self.background)
        for p in HEX_OUTLINE:
            self.hexagon.set(p, outline)

    def draw_grid(self, grid: HexGrid[Any]) -> None:
        self.frame += 1
        g = self.convert(grid)
        (min_x, min_y), (max_x, max_y) = g.extents()
        width = max_x - min_x + 1
        height = max_y - min_y + 1
        canvas = PixelGrid.new((width + 1) * 6, (height + 1) * 5, self.background)

        def origin(x: int, y: int) -> Point:
            xoffs = 3 if y % 2 != 0 else 0
            return (x - min_x) * 6 + xoffs, (y - min_y) * 5

        for y in range(min_y, max_y + 1):
            for x in range(min_x, max_x + 1):
                canvas.blit(origin(x, y), self.hexagon)
        for y in range(min_y, max_y + 1):
            for x in range(min_x, max_x + 1):
                value = g.get((x, y))
                if value is not None:
                    ox, oy = origin(x, y)
                    canvas.fill((ox + 3, oy + 3), tuple(self.to_color(value)))
        self.image = canvas.image

    def draw(self, grid: HexGrid[Any]) -> None:
        self.draw_grid(grid)
        self.save_image()
