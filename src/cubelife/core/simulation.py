"""Simulation session: owns the current grid and advances it on a fixed tick."""

import math
from typing import Any, Callable, Dict, List, Optional

from .grid import Grid
from .engine import StepEngine
from .initializers import random_initializer
from .patterns import PatternLibrary


Subscriber = Callable[[int, Grid], None]

# Absorbs float drift when summing many small frame times
_TICK_EPSILON = 1e-9


class Simulation:
    """Runs Conway's Game of Life over a bounded grid.

    The current grid is replaced as a whole after each generation has been
    fully computed. Readers that grabbed :attr:`grid` earlier keep a
    consistent snapshot, since grids are never modified in place.

    Generations are driven either directly with :meth:`step` / :meth:`run`
    or from a frame loop with :meth:`advance`, which converts elapsed time
    into whole ticks so the simulation rate is independent of frame rate.
    """

    def __init__(self, grid: Grid, engine: Optional[StepEngine] = None, tick: float = 0.1) -> None:
        """Initialize the simulation.

        Args:
            grid: First generation
            engine: Step engine (defaults to the convolution strategy)
            tick: Simulated time between generations

        Raises:
            ValueError: If tick is not a positive finite number
        """
        if not math.isfinite(tick) or tick <= 0:
            raise ValueError(f"Tick must be a positive finite number, got {tick}")

        self._grid = grid
        self.engine = engine or StepEngine()
        self.tick = tick
        self._generation = 0
        self._accumulator = 0.0
        self._subscribers: List[Subscriber] = []

    @classmethod
    def from_config(cls, config, library: Optional[PatternLibrary] = None) -> "Simulation":
        """Build a simulation and its first generation from a SimulationConfig.

        Raises:
            ValueError: If the configuration is invalid or names an unknown pattern
        """
        config.check()

        if config.pattern:
            library = library or PatternLibrary()
            pattern = library.get_pattern(config.pattern)
            if pattern is None:
                raise ValueError(f"Pattern '{config.pattern}' not found")

            offset_x, offset_y = pattern.centered_offset(config.width, config.height)
            if config.pattern_x is not None:
                offset_x = config.pattern_x
            if config.pattern_y is not None:
                offset_y = config.pattern_y
            initializer = pattern.initializer(offset_x, offset_y)
        else:
            initializer = random_initializer(
                config.initial_alive_probability, seed=config.seed, alive_on_tie=config.alive_on_tie
            )

        grid = Grid.create(config.width, config.height, initializer)
        return cls(grid, StepEngine(config.method), tick=config.tick)

    @property
    def grid(self) -> Grid:
        """The current generation."""
        return self._grid

    @property
    def generation(self) -> int:
        """Current generation number."""
        return self._generation

    @property
    def population(self) -> int:
        """Current number of living cells."""
        return self._grid.population

    def subscribe(self, callback: Subscriber) -> None:
        """Call ``callback(generation, grid)`` after every completed step."""
        self._subscribers.append(callback)

    def unsubscribe(self, callback: Subscriber) -> None:
        self._subscribers.remove(callback)

    def step(self) -> Grid:
        """Advance the simulation by one generation and return the new grid."""
        next_grid = self.engine.step(self._grid)

        # Single reference swap, the next grid is complete at this point
        self._grid = next_grid
        self._generation += 1

        for callback in list(self._subscribers):
            callback(self._generation, next_grid)

        return next_grid

    def run(self, generations: int) -> Grid:
        """Run exactly ``generations`` steps.

        Raises:
            ValueError: If generations is negative
        """
        if generations < 0:
            raise ValueError(f"Generations must be non-negative, got {generations}")

        for _ in range(generations):
            self.step()
        return self._grid

    def advance(self, elapsed: float) -> int:
        """Account for ``elapsed`` simulated time and run any ticks now due.

        Args:
            elapsed: Time since the previous call

        Returns:
            Number of generations computed

        Raises:
            ValueError: If elapsed is negative, infinite or NaN
        """
        if not math.isfinite(elapsed) or elapsed < 0:
            raise ValueError(f"Elapsed time must be a non-negative finite number, got {elapsed}")

        self._accumulator += elapsed
        steps = 0
        while self._accumulator + _TICK_EPSILON >= self.tick:
            self._accumulator -= self.tick
            self.step()
            steps += 1

        self._accumulator = max(self._accumulator, 0.0)
        return steps

    def is_extinct(self) -> bool:
        """Whether no cell is alive."""
        return self.population == 0

    def get_statistics(self) -> Dict[str, Any]:
        """Get a summary of the current generation."""
        grid = self._grid
        bbox = grid.get_bounding_box()

        stats: Dict[str, Any] = {
            "generation": self._generation,
            "population": grid.population,
            "grid_size": grid.shape,
            "population_density": grid.population / (grid.width * grid.height),
            "bounding_box": bbox,
        }

        if bbox:
            stats["bounding_box_size"] = (bbox[2] - bbox[0] + 1, bbox[3] - bbox[1] + 1)
        else:
            stats["bounding_box_size"] = (0, 0)

        return stats
