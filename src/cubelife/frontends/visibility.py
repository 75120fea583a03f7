"""Renderer-side mapping from grid coordinate to cube visibility."""

from typing import Callable, List, Optional, Tuple
import numpy as np

from ..core.grid import Grid, OutOfBounds


VisibilityCallback = Callable[[int, int, bool], None]


class CellVisibility:
    """Tracks which cubes are shown and reports the ones that must flip.

    A renderer keeps one visual handle per coordinate. After each completed
    generation it calls :meth:`sync` with the new grid; only coordinates
    whose alive state differs from what is currently shown are reported,
    and ``on_change(x, y, visible)`` is invoked for each of them.
    """

    def __init__(self, width: int, height: int, on_change: Optional[VisibilityCallback] = None) -> None:
        self.width = width
        self.height = height
        self.on_change = on_change
        self._visible = np.zeros((width, height), dtype=bool)

    @property
    def visible_count(self) -> int:
        """Number of cubes currently shown."""
        return int(np.count_nonzero(self._visible))

    def is_visible(self, x: int, y: int) -> bool:
        """Whether the cube at (x, y) is shown.

        Raises:
            OutOfBounds: If coordinates are outside the tracked grid
        """
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise OutOfBounds(f"Coordinates ({x}, {y}) out of bounds for {self.width}x{self.height} grid")
        return bool(self._visible[x, y])

    def sync(self, grid: Grid) -> List[Tuple[int, int]]:
        """Match visibility to ``grid``.

        Returns:
            Coordinates whose visibility changed

        Raises:
            ValueError: If the grid dimensions differ from the tracked ones
        """
        if grid.dimensions() != (self.width, self.height):
            raise ValueError(
                f"Grid dimensions don't match: {grid.dimensions()} vs {(self.width, self.height)}"
            )

        changed = grid.cells != self._visible
        xs, ys = np.nonzero(changed)
        coords = [(int(x), int(y)) for x, y in zip(xs, ys)]

        self._visible[changed] = grid.cells[changed]

        if self.on_change is not None:
            for x, y in coords:
                self.on_change(x, y, bool(self._visible[x, y]))

        return coords

    def reset(self) -> None:
        """Hide everything without notifying; the renderer redraws from scratch."""
        self._visible.fill(False)
