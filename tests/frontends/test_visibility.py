"""Tests for the renderer-side visibility mapping."""

import pytest

from cubelife.core.engine import step
from cubelife.core.grid import Grid, OutOfBounds
from cubelife.frontends.visibility import CellVisibility


class TestCellVisibility:
    """Test cases for CellVisibility."""

    def test_initially_hidden(self):
        visibility = CellVisibility(4, 3)
        assert visibility.visible_count == 0
        assert not visibility.is_visible(0, 0)

    def test_is_visible_out_of_bounds(self):
        """Negative coordinates do not wrap around to the far edge."""
        visibility = CellVisibility(4, 3)
        visibility.sync(Grid.from_cells(4, 3, [(3, 2)]))

        with pytest.raises(OutOfBounds):
            visibility.is_visible(-1, -1)
        with pytest.raises(OutOfBounds):
            visibility.is_visible(4, 0)  # x == width
        with pytest.raises(OutOfBounds):
            visibility.is_visible(0, 3)

    def test_first_sync_reports_alive_cells(self):
        visibility = CellVisibility(5, 5)
        changed = visibility.sync(Grid.from_cells(5, 5, [(1, 2), (2, 2), (3, 2)]))

        assert sorted(changed) == [(1, 2), (2, 2), (3, 2)]
        assert visibility.visible_count == 3
        assert visibility.is_visible(2, 2)

    def test_sync_reports_only_flips(self):
        """A blinker step flips four cubes; the center stays shown."""
        grid = Grid.from_cells(5, 5, [(1, 2), (2, 2), (3, 2)])
        visibility = CellVisibility(5, 5)
        visibility.sync(grid)

        changed = visibility.sync(step(grid))
        assert sorted(changed) == [(1, 2), (2, 1), (2, 3), (3, 2)]
        assert visibility.is_visible(2, 2)
        assert visibility.is_visible(2, 1)
        assert not visibility.is_visible(1, 2)

    def test_on_change_callback(self):
        calls = []
        visibility = CellVisibility(3, 3, on_change=lambda x, y, visible: calls.append((x, y, visible)))

        visibility.sync(Grid.from_cells(3, 3, [(0, 0)]))
        visibility.sync(Grid.from_cells(3, 3, [(1, 1)]))

        assert calls == [(0, 0, True), (0, 0, False), (1, 1, True)]

    def test_unchanged_grid_reports_nothing(self):
        grid = Grid.from_cells(4, 4, [(1, 1), (1, 2), (2, 1), (2, 2)])
        visibility = CellVisibility(4, 4)
        visibility.sync(grid)
        assert visibility.sync(step(grid)) == []

    def test_dimension_mismatch(self):
        visibility = CellVisibility(3, 3)
        with pytest.raises(ValueError):
            visibility.sync(Grid.from_cells(4, 3, []))

    def test_reset(self):
        visibility = CellVisibility(3, 3)
        visibility.sync(Grid.from_cells(3, 3, [(0, 0), (2, 2)]))
        visibility.reset()
        assert visibility.visible_count == 0
