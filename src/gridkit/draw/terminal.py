"""Live terminal drawers built on ``rich``.

Each ``draw`` replaces the previous frame in place.  The drawers own a
``rich.live.Live`` that is started lazily on the first frame and stopped by
``close()`` (or by leaving the ``with`` block).
"""

from __future__ import annotations

import logging
from typing import Any

from rich.align import Align
from rich.console import Console, RenderableType
from rich.live import Live
from rich.text import Text

from gridkit.config.settings import get_settings
from gridkit.draw.base import GridDrawer, HexGridDrawer
from gridkit.draw.text import ToChar, grid_lines, hex_lines
from gridkit.grid.base import Grid
from gridkit.grid.hexgrid import HexGrid

logger = logging.getLogger(__name__)


class _LiveFrame:
    """Shared Live bookkeeping for the two terminal drawers."""

    def __init__(self, console: Console | None) -> None:
        self.console = console or Console()
        self._live: Live | None = None

    def show(self, renderable: RenderableType) -> None:
        if self._live is None:
            self._live = Live(
                renderable,
                console=self.console,
                auto_refresh=False,
                transient=False,
            )
            self._live.start()
            logger.debug("Started live terminal display")
        self._live.update(renderable, refresh=True)

    def close(self) -> None:
        if self._live is not None:
            self._live.stop()
            self._live = None

    def __enter__(self) -> _LiveFrame:
        return self

    def __exit__(self, *exc: object) -> None:
        self.close()


class TerminalGridDrawer(_LiveFrame, GridDrawer):
    """Redraws a rectangular grid in place, one character per cell."""

    def __init__(self, to_char: ToChar = str, console: Console | None = None) -> None:
        super().__init__(console)
        self.to_char = to_char
        self.empty = get_settings().draw.empty_char

    def draw(self, grid: Grid[Any]) -> None:
        text = Text("\n".join(grid_lines(grid, self.to_char, self.empty)))
        self.show(text)


class TerminalHexGridDrawer(_LiveFrame, HexGridDrawer):
    """Redraws a hex grid in place as a centred ASCII honeycomb."""

    def __init__(self, to_char: ToChar = str, console: Console | None = None) -> None:
        super().__init__(console)
        self.to_char = to_char
        self.empty = get_settings().draw.empty_char

    def draw(self, grid: HexGrid[Any]) -> None:
        lines = hex_lines(self.convert(grid), self.to_char, self.empty)
        self.show(Align.center(Text("\n".join(lines))))
