"""Tests for the painting algorithms shared by every backend."""

from __future__ import annotations

from gridkit.grid.dense import DenseGrid
from gridkit.grid.sparse import SparseGrid


class TestFloodFill:
    def test_fills_connected_region_only(self, dense_sample: DenseGrid[str]) -> None:
        dense_sample.fill((1, 1), ".")
        assert dense_sample.to_lines() == ["####", "#..."]

    def test_same_value_is_noop(self, dense_sample: DenseGrid[str]) -> None:
        before = dense_sample.copy()
        dense_sample.fill((0, 0), "#")
        assert dense_sample == before

    def test_start_without_value_is_noop(self, sparse_sample: SparseGrid[str]) -> None:
        before = sparse_sample.copy()
        sparse_sample.fill((0, 1), ".")
        assert sparse_sample == before

    def test_is_four_connected(self) -> None:
        g = DenseGrid.from_lines(["..#", "#..", "..."])
        g.fill((0, 0), "x")
        assert g.to_lines() == ["xx#", "#xx", "xxx"]

    def test_diagonal_gap_blocks(self) -> None:
        g = DenseGrid.from_lines([".#", "#."])
        g.fill((0, 0), "x")
        assert g.to_lines() == ["x#", "#."]

    def test_sparse_fill_stays_in_extents(self, sparse_sample: SparseGrid[str]) -> None:
        sparse_sample.fill((0, 0), "@")
        assert sparse_sample.extents() == ((-1, 0), (2, 1))
        assert all(v == "@" for _, v in sparse_sample.items())

    def test_large_region_does_not_recurse(self) -> None:
        g = DenseGrid.filled(300, 300, 0)
        g.fill((150, 150), 1)
        assert all(v == 1 for _, v in g.cells())


class TestLine:
    def test_draws_all_cells(self) -> None:
        g = DenseGrid.filled(4, 4, ".")
        g.line((0, 0), (3, 3), "#")
        assert g.to_lines() == ["#...", ".#..", "..#.", "...#"]

    def test_sparse_line_grows_grid(self) -> None:
        g: SparseGrid[str] = SparseGrid()
        g.line((-2, 0), (2, 0), "-")
        assert len(g) == 5
        assert g.extents() == ((-2, 0), (2, 0))


class TestBlit:
    def test_blit_places_min_corner(self) -> None:
        dest = DenseGrid.filled(4, 3, ".")
        src = SparseGrid({(10, 10): "a", (11, 11): "b"})
        dest.blit((1, 1), src)
        assert dest.to_lines() == ["....", ".a..", "..b."]

    def test_blit_skips_absent_cells(self) -> None:
        dest = DenseGrid.filled(2, 2, ".")
        src = SparseGrid({(0, 0): "a", (1, 1): "b"})
        dest.blit((0, 0), src)
        assert dest.get((1, 0)) == "."

    def test_blit_rect_respects_rectangle(self) -> None:
        src = DenseGrid.from_lines(["abcd", "efgh", "ijkl", "mnop"])
        dest = DenseGrid.filled(4, 4, ".")
        dest.blit_rect((0, 0), src, (1, 1), (2, 2))
        assert dest.to_lines() == ["fg..", "jk..", "....", "...."]

    def test_blit_rect_clips_to_source(self) -> None:
        src = DenseGrid.from_lines(["ab", "cd"])
        dest = DenseGrid.filled(3, 3, ".")
        dest.blit_rect((1, 1), src, (-5, -5), (0, 5))
        assert dest.to_lines() == ["...", ".a.", ".c."]

    def test_blit_rect_outside_source_copies_nothing(self) -> None:
        src = DenseGrid.from_lines(["ab", "cd"])
        dest = DenseGrid.filled(2, 2, ".")
        dest.blit_rect((0, 0), src, (5, 5), (9, 9))
        assert dest.to_lines() == ["..", ".."]

    def test_blit_rect_convert(self) -> None:
        src = DenseGrid([[1, 0], [0, 1]])
        dest = DenseGrid.filled(2, 2, " ")
        dest.blit_rect_convert((0, 0), src, (0, 0), (1, 1), lambda v: "#" if v else ".")
        assert dest.to_lines() == ["#.", ".#"]

    def test_blit_into_sparse_offsets(self) -> None:
        dest: SparseGrid[str] = SparseGrid()
        dest.blit((-3, 4), DenseGrid.from_lines(["xy"]))
        assert dest.to_dict() == {(-3, 4): "x", (-2, 4): "y"}
