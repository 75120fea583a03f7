"""Per-cell initial state producers for :meth:`Grid.create`."""

from typing import Iterable, Optional, Tuple
import numpy as np

from .grid import Initializer


def random_initializer(
    probability: float = 0.5, seed: Optional[int] = None, alive_on_tie: bool = False
) -> Initializer:
    """Independent Bernoulli draw per cell.

    Each call draws ``u`` uniformly from [0, 1) and marks the cell alive when
    ``u > 1 - probability``. A draw landing exactly on the threshold counts as
    dead unless ``alive_on_tie`` is set.

    Args:
        probability: Chance each cell will be alive (0.0 to 1.0)
        seed: Optional seed for a reproducible sequence of draws
        alive_on_tie: Treat a draw equal to the threshold as alive

    Returns:
        Initializer callable

    Raises:
        ValueError: If probability is outside [0, 1]
    """
    if not 0.0 <= probability <= 1.0:
        raise ValueError(f"Probability must be between 0.0 and 1.0, got {probability}")

    if probability == 0.0:
        return constant_initializer(False)
    if probability == 1.0:
        return constant_initializer(True)

    rng = np.random.default_rng(seed)
    threshold = 1.0 - probability

    def initializer(x: int, y: int) -> bool:
        value = rng.random()
        if alive_on_tie:
            return bool(value >= threshold)
        return bool(value > threshold)

    return initializer


def constant_initializer(alive: bool) -> Initializer:
    """Every cell starts in the same state."""

    def initializer(x: int, y: int) -> bool:
        return alive

    return initializer


def cells_initializer(cells: Iterable[Tuple[int, int]], offset_x: int = 0, offset_y: int = 0) -> Initializer:
    """Exactly the given coordinates, shifted by the offset, start alive."""
    alive = {(x + offset_x, y + offset_y) for x, y in cells}

    def initializer(x: int, y: int) -> bool:
        return (x, y) in alive

    return initializer
