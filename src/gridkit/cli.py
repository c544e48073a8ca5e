"""gridkit CLI: Typer-based entry point.

Commands
--------
show    Print a text grid, or all 8 of its orientations.
fill    Flood-fill a region and print the result.
path    Cheapest path between two cells, avoiding walls.
render  Write a text grid as a PNG frame.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

import typer

from gridkit.config.settings import get_settings
from gridkit.draw.bitmap import BitmapGridDrawer, BitmapSpriteGridDrawer
from gridkit.draw.text import PrintGridDrawer
from gridkit.geometry.vectors import Point
from gridkit.graph.bridge import astar, grid_to_graph
from gridkit.grid.base import Grid
from gridkit.grid.dense import DenseGrid
from gridkit.grid.pixel import RGB
from gridkit.grid.sparse import SparseGrid
from gridkit.grid.transforms import ORIENTATIONS, orientations

logger = logging.getLogger(__name__)

app = typer.Typer(
    name="gridkit",
    help="gridkit: inspect, transform and render character grids",
    add_completion=False,
)

_PALETTE: dict[str, RGB] = {
    "#": (0, 0, 0),
    ".": (255, 255, 255),
    " ": (255, 255, 255),
}


def _setup_logging(verbose: bool = False) -> None:
    level = logging.DEBUG if verbose else getattr(logging, get_settings().log_level)
    logging.basicConfig(
        level=level,
        format="%(asctime)s  %(name)-30s  %(levelname)-7s  %(message)s",
    )


def _read_lines(path: Path) -> list[str]:
    """Lines of *path*, right-padded with spaces to a common width."""
    lines = path.read_text(encoding="utf-8").splitlines()
    width = max((len(line) for line in lines), default=0)
    logger.debug("Read %dx%d grid from %s", width, len(lines), path)
    return [line.ljust(width) for line in lines]


def _parse_point(text: str) -> Point:
    try:
        x, y = (int(part) for part in text.split(","))
    except ValueError:
        raise typer.BadParameter(f"expected X,Y but got {text!r}") from None
    return x, y


def _char_color(ch: str) -> RGB:
    """Stable colour per character; walls black, floor white."""
    if ch in _PALETTE:
        return _PALETTE[ch]
    n = ord(ch)
    return (n * 67) % 256, (n * 131) % 256, (n * 199) % 256


def _print(grid: Grid[str]) -> None:
    PrintGridDrawer().draw(grid)


# ---------------------------------------------------------------------------
# Commands
# ---------------------------------------------------------------------------


@app.command()
def show(
    file: Path = typer.Argument(..., exists=True, dir_okay=False, help="Text grid file."),
    sparse: bool = typer.Option(False, "--sparse", help="Drop blank cells (sparse storage)."),
    all_orientations: bool = typer.Option(
        False, "--orientations", help="Print all 8 rotations/reflections."
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging."),
) -> None:
    """Print a text grid."""
    _setup_logging(verbose)
    lines = _read_lines(file)
    grid: Grid[str] = SparseGrid.from_lines(lines) if sparse else DenseGrid.from_lines(lines)

    if not all_orientations:
        _print(grid)
        return
    for (rotation, flipped), oriented in zip(ORIENTATIONS, orientations(grid)):
        typer.echo(f"rotation={rotation} flipped={flipped}")
        _print(oriented)
        typer.echo("")


@app.command()
def fill(
    file: Path = typer.Argument(..., exists=True, dir_okay=False, help="Text grid file."),
    start: str = typer.Argument(..., help="Seed cell as X,Y."),
    char: str = typer.Argument(..., help="Fill character."),
    verbose: bool = typer.Option(False, "--verbose", "-v"),
) -> None:
    """Flood-fill the region containing START with CHAR."""
    _setup_logging(verbose)
    if len(char) != 1:
        raise typer.BadParameter("CHAR must be a single character")
    grid = DenseGrid.from_lines(_read_lines(file))
    grid.fill(_parse_point(start), char)
    _print(grid)


@app.command()
def path(
    file: Path = typer.Argument(..., exists=True, dir_okay=False, help="Text grid file."),
    start: str = typer.Argument(..., help="Start cell as X,Y."),
    goal: str = typer.Argument(..., help="Goal cell as X,Y."),
    wall: str = typer.Option("#", "--wall", help="Impassable character."),
    diagonal: bool = typer.Option(False, "--diagonal", help="Allow diagonal steps (cost 2)."),
    verbose: bool = typer.Option(False, "--verbose", "-v"),
) -> None:
    """Print the cost and cells of the cheapest path from START to GOAL."""
    _setup_logging(verbose)
    grid = DenseGrid.from_lines(_read_lines(file))

    def step_cost(p: Point, _v: str, q: Point, _w: str) -> int:
        return 1 if p[0] == q[0] or p[1] == q[1] else 2

    graph = grid_to_graph(
        grid,
        lambda _p, v: v != wall,
        step_cost,
        connectivity=8 if diagonal else get_settings().graph.connectivity,
    )
    result = astar(graph, _parse_point(start), _parse_point(goal))
    if result is None:
        typer.echo("No path.")
        raise typer.Exit(1)

    cost, cells = result
    typer.echo(f"cost={cost}")
    typer.echo(" ".join(f"{x},{y}" for x, y in cells))


@app.command()
def render(
    file: Path = typer.Argument(..., exists=True, dir_okay=False, help="Text grid file."),
    basename: str = typer.Argument(..., help="Output basename; frames are <basename>_NNNNNN.png."),
    scale: Optional[int] = typer.Option(
        None, "--scale", min=1, help="Pixels per cell (defaults to the configured sprite size)."
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v"),
) -> None:
    """Render a text grid to a single PNG frame."""
    _setup_logging(verbose)
    cfg = get_settings().draw
    target = Path(basename)
    if target.parent == Path("."):
        target = cfg.output_dir / target

    grid = DenseGrid.from_lines(_read_lines(file))
    drawer: BitmapGridDrawer | BitmapSpriteGridDrawer
    size = (scale, scale) if scale is not None else (cfg.sprite_width, cfg.sprite_height)
    if size == (1, 1):
        drawer = BitmapGridDrawer(_char_color, target)
    else:
        def block(ch: str) -> list[RGB]:
            return [_char_color(ch)] * (size[0] * size[1])

        drawer = BitmapSpriteGridDrawer(size, block, target)

    drawer.draw(grid)
    typer.echo(str(drawer.frame_path()))


def main() -> int:
    """Console-script entry point."""
    app()
    return 0
