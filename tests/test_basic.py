"""Basic tests for the cubelife package."""

from cubelife import Grid, PatternLibrary, Simulation, SimulationConfig, step
from cubelife.core.initializers import constant_initializer


def test_grid_creation():
    """Test basic grid creation and cell access."""
    grid = Grid.create(10, 10, constant_initializer(False))
    assert grid.dimensions() == (10, 10)
    assert grid.get(0, 0) is False


def test_pattern_library():
    """Test pattern library has some patterns."""
    patterns = PatternLibrary().list_patterns()
    assert len(patterns) > 0
    assert "Glider" in patterns


def test_blinker_pattern():
    """Test the blinker pattern oscillates correctly."""
    grid = Grid.from_cells(5, 5, [(2, 1), (2, 2), (2, 3)])

    grid = step(grid)
    assert set(grid.alive_cells()) == {(1, 2), (2, 2), (3, 2)}

    grid = step(grid)
    assert set(grid.alive_cells()) == {(2, 1), (2, 2), (2, 3)}


def test_default_simulation():
    """The default session is a 160x160 random field ticking every 0.1."""
    sim = Simulation.from_config(SimulationConfig(seed=0))
    assert sim.grid.dimensions() == (160, 160)
    assert sim.advance(0.1) == 1
