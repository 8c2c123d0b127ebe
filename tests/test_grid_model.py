"""Tests for the pixel grid model."""

import pytest

from sprite_editor.models.grid_model import GridSnapshot, PixelGrid

RED = (255, 0, 0)
BLUE = (0, 0, 255)


class TestPixelGrid:
    def test_new_grid_is_empty(self):
        grid = PixelGrid(16)
        assert grid.size == 16
        assert grid.is_empty()
        assert all(color is None for _x, _y, color in grid.cells())

    def test_set_then_get_returns_color(self):
        grid = PixelGrid(8)
        grid.set(3, 5, RED)
        assert grid.get(3, 5) == RED
        assert grid.get(5, 3) is None

    def test_set_none_clears_cell(self):
        grid = PixelGrid(8)
        grid.set(0, 0, RED)
        grid.set(0, 0, None)
        assert grid.get(0, 0) is None

    def test_cells_cover_whole_grid(self):
        grid = PixelGrid(8)
        assert len(list(grid.cells())) == 64

    @pytest.mark.parametrize("size", [0, 7, 10, 256])
    def test_unsupported_size_rejected(self, size):
        with pytest.raises(ValueError):
            PixelGrid(size)

    def test_resize_discards_content(self):
        grid = PixelGrid(8)
        grid.set(1, 1, RED)
        grid.resize(32)
        assert grid.size == 32
        assert grid.is_empty()
        assert len(list(grid.cells())) == 32 * 32


class TestSnapshots:
    def test_snapshot_is_independent_copy(self):
        grid = PixelGrid(8)
        grid.set(2, 2, RED)
        snap = grid.snapshot()
        grid.set(2, 2, BLUE)
        assert snap.rows[2][2] == RED
        assert grid.get(2, 2) == BLUE

    def test_restore_brings_back_state(self):
        grid = PixelGrid(8)
        grid.set(4, 1, RED)
        snap = grid.snapshot()
        grid.set(4, 1, None)
        grid.restore(snap)
        assert grid.get(4, 1) == RED

    def test_restore_can_change_size(self):
        small = PixelGrid(8).snapshot()
        grid = PixelGrid(32)
        grid.restore(small)
        assert grid.size == 8

    def test_restore_rejects_malformed_snapshot(self):
        grid = PixelGrid(8)
        bad = GridSnapshot(size=8, rows=((None,) * 8,) * 7)
        with pytest.raises(ValueError):
            grid.restore(bad)
