"""Tests for grid initializers."""

from unittest.mock import patch

import pytest

from cubelife.core.grid import Grid
from cubelife.core.initializers import cells_initializer, constant_initializer, random_initializer


class TestRandomInitializer:
    """Test cases for the Bernoulli initializer."""

    def test_extremes(self):
        assert Grid.create(10, 10, random_initializer(0.0)).population == 0
        assert Grid.create(10, 10, random_initializer(1.0)).population == 100

    def test_default_probability(self):
        """Roughly half the cells start alive."""
        grid = Grid.create(40, 40, random_initializer(seed=123))
        assert 640 <= grid.population <= 960

    def test_low_probability(self):
        grid = Grid.create(40, 40, random_initializer(0.1, seed=5))
        assert 80 <= grid.population <= 250

    def test_seed_reproducible(self):
        first = Grid.create(12, 12, random_initializer(0.5, seed=99))
        second = Grid.create(12, 12, random_initializer(0.5, seed=99))
        assert first == second

    @pytest.mark.parametrize("probability", [-0.1, 1.5])
    def test_invalid_probability(self, probability):
        with pytest.raises(ValueError):
            random_initializer(probability)

    def test_threshold_tie(self):
        """A draw exactly on the threshold is dead unless alive_on_tie is set."""
        with patch("numpy.random.default_rng") as mock_rng:
            mock_rng.return_value.random.return_value = 0.5
            assert random_initializer(0.5)(0, 0) is False
            assert random_initializer(0.5, alive_on_tie=True)(0, 0) is True

    def test_strictly_above_threshold(self):
        with patch("numpy.random.default_rng") as mock_rng:
            mock_rng.return_value.random.return_value = 0.51
            assert random_initializer(0.5)(3, 4) is True
            mock_rng.return_value.random.return_value = 0.49
            assert random_initializer(0.5)(3, 4) is False


class TestOtherInitializers:
    def test_constant(self):
        assert Grid.create(3, 3, constant_initializer(True)).population == 9
        assert Grid.create(3, 3, constant_initializer(False)).population == 0

    def test_cells(self):
        grid = Grid.create(5, 5, cells_initializer([(0, 0), (1, 2)]))
        assert set(grid.alive_cells()) == {(0, 0), (1, 2)}

    def test_cells_with_offset_drops_off_grid(self):
        grid = Grid.create(4, 4, cells_initializer([(0, 0), (2, 2)], offset_x=2, offset_y=1))
        assert set(grid.alive_cells()) == {(2, 1)}
