"""Tests for the Typer CLI."""

from __future__ import annotations

from pathlib import Path

import pytest
from PIL import Image
from typer.testing import CliRunner

from gridkit.cli import app
from gridkit.config.settings import reload_settings

runner = CliRunner()

MAZE = "\n".join(
    [
        "#####",
        "#...#",
        "#.#.#",
        "#...#",
        "#####",
    ]
)


@pytest.fixture()
def maze_file(tmp_path: Path) -> Path:
    path = tmp_path / "maze.txt"
    path.write_text(MAZE + "\n", encoding="utf-8")
    return path


class TestShow:
    def test_prints_grid(self, maze_file: Path) -> None:
        result = runner.invoke(app, ["show", str(maze_file)])
        assert result.exit_code == 0
        assert result.output.splitlines() == MAZE.splitlines()

    def test_pads_ragged_lines(self, tmp_path: Path) -> None:
        path = tmp_path / "ragged.txt"
        path.write_text("##\n#\n", encoding="utf-8")
        result = runner.invoke(app, ["show", str(path)])
        assert result.exit_code == 0
        assert result.output.splitlines() == ["##", "# "]

    def test_orientations(self, tmp_path: Path) -> None:
        path = tmp_path / "l.txt"
        path.write_text("ab\n", encoding="utf-8")
        result = runner.invoke(app, ["show", str(path), "--orientations"])
        assert result.exit_code == 0
        assert result.output.count("rotation=") == 8
        assert "rotation=90 flipped=False\na\nb\n" in result.output

    def test_sparse(self, tmp_path: Path) -> None:
        path = tmp_path / "s.txt"
        path.write_text("  #\n", encoding="utf-8")
        result = runner.invoke(app, ["show", str(path), "--sparse"])
        assert result.exit_code == 0
        assert result.output == "#\n"

    def test_missing_file(self, tmp_path: Path) -> None:
        result = runner.invoke(app, ["show", str(tmp_path / "nope.txt")])
        assert result.exit_code != 0


class TestFill:
    def test_fill_interior(self, maze_file: Path) -> None:
        result = runner.invoke(app, ["fill", str(maze_file), "1,1", "o"])
        assert result.exit_code == 0
        lines = result.output.splitlines()
        assert lines[1] == "#ooo#"
        assert lines[2] == "#o#o#"
        assert lines[0] == "#####"

    def test_bad_point(self, maze_file: Path) -> None:
        result = runner.invoke(app, ["fill", str(maze_file), "one,two", "o"])
        assert result.exit_code != 0

    def test_char_must_be_single(self, maze_file: Path) -> None:
        result = runner.invoke(app, ["fill", str(maze_file), "1,1", "oo"])
        assert result.exit_code != 0


class TestPath:
    def test_orthogonal(self, maze_file: Path) -> None:
        result = runner.invoke(app, ["path", str(maze_file), "1,1", "3,3"])
        assert result.exit_code == 0
        lines = result.output.splitlines()
        assert lines[0] == "cost=4"
        cells = lines[1].split()
        assert cells[0] == "1,1"
        assert cells[-1] == "3,3"
        assert len(cells) == 5

    def test_diagonal(self, tmp_path: Path) -> None:
        path = tmp_path / "open.txt"
        path.write_text("...\n...\n...\n", encoding="utf-8")
        result = runner.invoke(app, ["path", str(path), "0,0", "2,2", "--diagonal"])
        assert result.exit_code == 0
        assert result.output.splitlines()[0] == "cost=4"

    def test_custom_wall(self, tmp_path: Path) -> None:
        path = tmp_path / "x.txt"
        path.write_text(".x.\n", encoding="utf-8")
        result = runner.invoke(app, ["path", str(path), "0,0", "2,0", "--wall", "x"])
        assert result.exit_code == 1
        assert "No path." in result.output

    def test_start_on_wall(self, maze_file: Path) -> None:
        result = runner.invoke(app, ["path", str(maze_file), "0,0", "3,3"])
        assert result.exit_code == 1


class TestRender:
    def test_writes_first_frame(self, maze_file: Path, tmp_path: Path) -> None:
        base = tmp_path / "frames" / "maze"
        result = runner.invoke(app, ["render", str(maze_file), str(base)])
        assert result.exit_code == 0
        out = tmp_path / "frames" / "maze_000001.png"
        assert result.output.strip() == str(out)
        with Image.open(out) as img:
            assert img.size == (5, 5)
            assert img.convert("RGB").getpixel((0, 0)) == (0, 0, 0)

    def test_scale(self, maze_file: Path, tmp_path: Path) -> None:
        base = tmp_path / "big"
        result = runner.invoke(app, ["render", str(maze_file), str(base), "--scale", "3"])
        assert result.exit_code == 0
        with Image.open(tmp_path / "big_000001.png") as img:
            assert img.size == (15, 15)

    def test_bare_basename_uses_output_dir(
        self, maze_file: Path, tmp_path: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        monkeypatch.setenv("GRIDKIT_DRAW_OUTPUT_DIR", str(tmp_path / "configured"))
        reload_settings()
        result = runner.invoke(app, ["render", str(maze_file), "maze"])
        assert result.exit_code == 0
        assert (tmp_path / "configured" / "maze_000001.png").is_file()
