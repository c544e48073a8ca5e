"""Drawing sinks: observers that render grid frames somewhere.

Sinks
-----
Nop*       discard every frame
Print*     plain text to a stream
Terminal*  live, in-place redraw via ``rich``
Bitmap*    numbered PNG frames via Pillow
"""

from __future__ import annotations

from gridkit.draw.base import GridDrawer, HexGridDrawer, NopGridDrawer, NopHexGridDrawer
from gridkit.draw.bitmap import (
    BitmapGridDrawer,
    BitmapHexGridDrawer,
    BitmapSpriteGridDrawer,
)
from gridkit.draw.terminal import TerminalGridDrawer, TerminalHexGridDrawer
from gridkit.draw.text import PrintGridDrawer, PrintHexGridDrawer, grid_lines, hex_lines

__all__ = [
    "BitmapGridDrawer",
    "BitmapHexGridDrawer",
    "BitmapSpriteGridDrawer",
    "GridDrawer",
    "HexGridDrawer",
    "NopGridDrawer",
    "NopHexGridDrawer",
    "PrintGridDrawer",
    "PrintHexGridDrawer",
    "TerminalGridDrawer",
    "TerminalHexGridDrawer",
    "grid_lines",
    "hex_lines",
]
