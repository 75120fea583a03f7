"""Conway's Game of Life transition rule."""

from typing import Callable, Dict, Tuple
import numpy as np
import torch
import torch.nn.functional as F

from .grid import Grid


NEIGHBOR_OFFSETS: Tuple[Tuple[int, int], ...] = tuple(
    (dx, dy) for dx in (-1, 0, 1) for dy in (-1, 0, 1) if (dx, dy) != (0, 0)
)

# The Moore kernel is symmetric, so the [x, y] layout convolves as-is.
_KERNEL = torch.tensor([[1, 1, 1], [1, 0, 1], [1, 1, 1]], dtype=torch.float32).unsqueeze(0).unsqueeze(0)


def next_state(alive: bool, living_neighbors: int) -> bool:
    """Apply the B3/S23 rule to a single cell."""
    if alive:
        return living_neighbors in (2, 3)
    return living_neighbors == 3


def candidate_neighbors(grid: Grid, x: int, y: int) -> int:
    """Number of neighbor positions of (x, y) that lie inside the grid.

    Corners have 3, edges 5 and interior cells 8.
    """
    return sum(1 for dx, dy in NEIGHBOR_OFFSETS if grid.contains(x + dx, y + dy))


def living_neighbors(grid: Grid, x: int, y: int) -> int:
    """Count living neighbors of a cell.

    Positions outside the grid are skipped, there is no wraparound.

    Args:
        grid: Grid to inspect
        x: Column coordinate
        y: Row coordinate

    Returns:
        Number of living neighbors (0-8)
    """
    cells = grid.cells
    width, height = grid.shape
    count = 0
    for dx, dy in NEIGHBOR_OFFSETS:
        nx, ny = x + dx, y + dy
        if 0 <= nx < width and 0 <= ny < height and cells[nx, ny]:
            count += 1
    return count


def count_living_neighbors(grid: Grid) -> np.ndarray:
    """Count neighbors for all cells using a zero-padded convolution.

    Zero padding contributes nothing to the sum, which is the same as leaving
    off-grid positions out of the count.

    Returns:
        Integer array of shape (width, height) with neighbor counts
    """
    cells = torch.from_numpy(grid.cells.astype(np.float32))
    neighbors = F.conv2d(cells.unsqueeze(0).unsqueeze(0), _KERNEL, padding=1)
    return neighbors[0, 0].numpy().astype(np.int8)


def step_convolution(grid: Grid) -> Grid:
    """Advance one generation, counting neighbors with a convolution."""
    neighbor_counts = count_living_neighbors(grid)
    cells = grid.cells

    # Birth on exactly 3, survival on 2 or 3
    next_cells = (neighbor_counts == 3) | (cells & (neighbor_counts == 2))
    return Grid(next_cells)


def step_direct(grid: Grid) -> Grid:
    """Advance one generation with per-cell lookups of the 8 neighbor offsets."""
    width, height = grid.shape
    cells = grid.cells
    next_cells = np.zeros((width, height), dtype=bool)
    for x in range(width):
        for y in range(height):
            next_cells[x, y] = next_state(bool(cells[x, y]), living_neighbors(grid, x, y))
    return Grid(next_cells)


METHODS: Dict[str, Callable[[Grid], Grid]] = {
    "convolution": step_convolution,
    "direct": step_direct,
}


def step(grid: Grid) -> Grid:
    """Compute the next generation of ``grid``.

    Every cell is updated from the input snapshot only; the input is never
    modified and the result has the same dimensions.
    """
    return step_convolution(grid)


class StepEngine:
    """Computes successive generations with a selectable counting strategy.

    Both strategies produce identical grids; ``direct`` exists as a plain
    reference to cross-check the vectorized ``convolution`` path.
    """

    def __init__(self, method: str = "convolution") -> None:
        """Initialize the engine.

        Args:
            method: Name of the strategy, one of ``METHODS``

        Raises:
            ValueError: If the method is unknown
        """
        if method not in METHODS:
            raise ValueError(f"Unknown step method '{method}'. Choose from: {', '.join(METHODS)}")
        self.method = method
        self._step = METHODS[method]

    def step(self, grid: Grid) -> Grid:
        """Return the generation following ``grid``."""
        return self._step(grid)

    def __repr__(self) -> str:
        return f"StepEngine(method={self.method!r})"
