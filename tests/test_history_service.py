"""Tests for the linear undo/redo history."""

from sprite_editor.models.grid_model import PixelGrid
from sprite_editor.services.history_service import HistoryService


def _make_edits(grid, history, count):
    for i in range(count):
        grid.set(i, 0, (i, i, i))
        history.commit(grid.snapshot())


class TestHistoryService:
    def test_starts_with_single_entry(self):
        grid = PixelGrid(8)
        history = HistoryService(grid.snapshot())
        assert len(history) == 1
        assert history.cursor == 0
        assert not history.can_undo
        assert not history.can_redo

    def test_undo_at_start_is_noop(self):
        history = HistoryService(PixelGrid(8).snapshot())
        assert history.undo() is None
        assert history.cursor == 0

    def test_redo_at_end_is_noop(self):
        grid = PixelGrid(8)
        history = HistoryService(grid.snapshot())
        _make_edits(grid, history, 2)
        assert history.redo() is None
        assert history.cursor == 2

    def test_undo_redo_round_trip(self):
        grid = PixelGrid(8)
        initial = grid.snapshot()
        history = HistoryService(initial)
        _make_edits(grid, history, 5)
        final = grid.snapshot()

        snap = None
        for _ in range(5):
            snap = history.undo()
        assert snap == initial
        assert not history.can_undo

        for _ in range(5):
            snap = history.redo()
        assert snap == final
        assert not history.can_redo

    def test_commit_after_undo_discards_redo(self):
        grid = PixelGrid(8)
        history = HistoryService(grid.snapshot())
        _make_edits(grid, history, 3)
        grid.restore(history.undo())
        grid.set(7, 7, (1, 2, 3))
        history.commit(grid.snapshot())

        assert len(history) == 4
        assert history.redo() is None
        assert history.current.rows[7][7] == (1, 2, 3)

    def test_reset_leaves_one_entry(self):
        grid = PixelGrid(8)
        history = HistoryService(grid.snapshot())
        _make_edits(grid, history, 3)
        grid.resize(16)
        history.reset(grid.snapshot())
        assert len(history) == 1
        assert history.current.size == 16
        assert not history.can_undo
