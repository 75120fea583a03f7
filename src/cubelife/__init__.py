"""Conway's Game of Life on a bounded grid, rendered as a field of cubes."""

__version__ = "0.1.0"

from .core.grid import Grid, GridError, InvalidDimension, OutOfBounds
from .core.engine import StepEngine, step
from .core.patterns import Pattern, PatternLibrary
from .core.simulation import Simulation
from .config import SimulationConfig

__all__ = [
    "Grid",
    "GridError",
    "InvalidDimension",
    "OutOfBounds",
    "StepEngine",
    "step",
    "Pattern",
    "PatternLibrary",
    "Simulation",
    "SimulationConfig",
]
