"""Tests for the Pattern and PatternLibrary classes."""

import pytest

from cubelife.core.engine import step
from cubelife.core.grid import Grid
from cubelife.core.patterns import Pattern, PatternLibrary


class TestPattern:
    """Test cases for the Pattern class."""

    def test_initialization(self):
        """Test pattern initialization."""
        cells = [(0, 0), (1, 0), (2, 0)]
        pattern = Pattern("Blinker", cells, "Period-2 oscillator")

        assert pattern.name == "Blinker"
        assert pattern.cells == cells
        assert pattern.description == "Period-2 oscillator"

    def test_to_grid(self):
        """Test building a grid from a pattern."""
        pattern = Pattern("Blinker", [(0, 0), (1, 0), (2, 0)])
        grid = pattern.to_grid(10, 10)

        assert grid.get(0, 0)
        assert grid.get(1, 0)
        assert grid.get(2, 0)
        assert not grid.get(0, 1)
        assert grid.population == 3

    def test_to_grid_with_offset(self):
        pattern = Pattern("Blinker", [(0, 0), (1, 0), (2, 0)])
        grid = pattern.to_grid(10, 10, offset_x=5, offset_y=3)

        assert set(grid.alive_cells()) == {(5, 3), (6, 3), (7, 3)}

    def test_to_grid_out_of_bounds(self):
        """Cells falling outside the grid are dropped."""
        pattern = Pattern("Test", [(0, 0), (1, 0), (2, 0), (3, 0)])
        grid = pattern.to_grid(3, 3)
        assert grid.population == 3

    def test_centered_offset(self):
        """Centering the library blinker on 5x5 gives the middle row."""
        pattern = Pattern("Blinker", [(0, 1), (1, 1), (2, 1)])
        offset = pattern.centered_offset(5, 5)
        assert offset == (1, 1)
        assert set(pattern.to_grid(5, 5, *offset).alive_cells()) == {(1, 2), (2, 2), (3, 2)}

    def test_get_bounding_box(self):
        assert Pattern("Empty", []).get_bounding_box() == (0, 0, 0, 0)
        assert Pattern("Single", [(5, 3)]).get_bounding_box() == (5, 3, 5, 3)
        assert Pattern("Multi", [(1, 2), (3, 1), (0, 4), (2, 0)]).get_bounding_box() == (0, 0, 3, 4)

    def test_get_size(self):
        assert Pattern("Empty", []).get_size() == (1, 1)
        assert Pattern("Rectangle", [(0, 0), (1, 0), (2, 0), (0, 1), (2, 1)]).get_size() == (3, 2)

    def test_repr(self):
        assert repr(Pattern("Blinker", [(0, 0), (1, 0), (2, 0)])) == "Pattern('Blinker', 3 cells)"

class TestPatternLibrary:
    """Test cases for the PatternLibrary class."""

    @pytest.fixture
    def library(self):
        return PatternLibrary()

    def test_builtin_patterns(self, library):
        names = library.list_patterns()
        for name in ["Block", "Blinker", "Glider", "Pulsar", "R-pentomino"]:
            assert name in names

    def test_get_unknown_pattern(self, library):
        assert library.get_pattern("Nonexistent") is None

    def test_add_and_get_pattern(self, library):
        custom = Pattern("Custom", [(0, 0), (1, 1)])
        library.add_pattern(custom)
        assert library.get_pattern("Custom") is custom

    def test_get_patterns_by_category(self, library):
        categories = library.get_patterns_by_category()
        assert "Block" in categories["Still Life"]
        assert "Glider" in categories["Spaceships"]
        assert "Custom" not in categories

        library.add_pattern(Pattern("Mine", [(0, 0)]))
        assert library.get_patterns_by_category()["Custom"] == ["Mine"]

    def test_pulsar_shape(self, library):
        pulsar = library.get_pattern("Pulsar")
        assert len(pulsar.cells) == 48
        assert pulsar.get_size() == (13, 13)

    @pytest.mark.parametrize("name", ["Block", "Beehive", "Loaf"])
    def test_still_lifes_are_stable(self, library, name):
        pattern = library.get_pattern(name)
        grid = pattern.to_grid(8, 8, 2, 2)
        assert step(grid) == grid

    @pytest.mark.parametrize("name,period", [("Blinker", 2), ("Toad", 2), ("Beacon", 2), ("Pulsar", 3)])
    def test_oscillator_periods(self, library, name, period):
        pattern = library.get_pattern(name)
        grid = pattern.to_grid(21, 21, *pattern.centered_offset(21, 21))

        current = grid
        for generation in range(1, period + 1):
            current = step(current)
            if generation < period:
                assert current != grid
        assert current == grid

    def test_glider_moves(self, library):
        """After 4 generations a glider is shifted one cell diagonally."""
        glider = library.get_pattern("Glider")
        grid = glider.to_grid(10, 10, 1, 1)
        for _ in range(4):
            grid = step(grid)
        assert grid == glider.to_grid(10, 10, 2, 2)
