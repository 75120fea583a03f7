"""Grid data structure for the Game of Life simulation."""

from typing import Callable, Iterable, Iterator, List, Optional, Tuple
import numpy as np


Initializer = Callable[[int, int], bool]


class GridError(Exception):
    """Base class for grid precondition violations."""


class InvalidDimension(GridError, ValueError):
    """Raised when a grid is built with a non-positive width or height."""


class OutOfBounds(GridError, IndexError):
    """Raised when a coordinate lies outside the grid."""


def _check_dimension(name: str, value: object) -> int:
    if isinstance(value, bool) or not isinstance(value, (int, np.integer)):
        raise InvalidDimension(f"Grid {name} must be an integer, got {value!r}")
    if value <= 0:
        raise InvalidDimension(f"Grid {name} must be positive, got {value}")
    return int(value)


class Grid:
    """Immutable snapshot of a bounded 2D grid of alive/dead cells.

    Cells are stored in a read-only numpy array indexed ``[x, y]``. A grid
    never changes after construction; advancing the simulation produces a
    new grid, so any holder of a grid always sees one consistent generation.
    """

    __slots__ = ("_cells",)

    def __init__(self, cells: np.ndarray) -> None:
        """Wrap an already validated boolean array.

        Prefer :meth:`create`, :meth:`from_array` or :meth:`from_cells`.

        Args:
            cells: Array of shape (width, height); the grid keeps its own copy
        """
        self._cells = np.array(cells, dtype=bool)
        self._cells.setflags(write=False)

    @classmethod
    def create(cls, width: int, height: int, initializer: Initializer) -> "Grid":
        """Build a grid, asking the initializer for every cell exactly once.

        Args:
            width: Number of columns
            height: Number of rows
            initializer: Callable returning the initial state of cell (x, y)

        Returns:
            New grid

        Raises:
            InvalidDimension: If width or height is not a positive integer
        """
        width = _check_dimension("width", width)
        height = _check_dimension("height", height)

        cells = np.zeros((width, height), dtype=bool)
        for x in range(width):
            for y in range(height):
                cells[x, y] = bool(initializer(x, y))

        return cls(cells)

    @classmethod
    def from_array(cls, data) -> "Grid":
        """Build a grid from a 2D array-like indexed ``[x, y]``.

        Args:
            data: Array-like of truthy/falsy values

        Returns:
            New grid holding a private copy of the data

        Raises:
            InvalidDimension: If the data is not a non-empty 2D array
        """
        arr = np.asarray(data, dtype=bool)
        if arr.ndim != 2:
            raise InvalidDimension(f"Grid data must be 2D, got shape {arr.shape}")
        _check_dimension("width", arr.shape[0])
        _check_dimension("height", arr.shape[1])
        return cls(arr)

    @classmethod
    def from_cells(cls, width: int, height: int, cells: Iterable[Tuple[int, int]]) -> "Grid":
        """Build a grid where exactly the given coordinates are alive.

        Raises:
            InvalidDimension: If width or height is not a positive integer
            OutOfBounds: If a coordinate lies outside the grid
        """
        width = _check_dimension("width", width)
        height = _check_dimension("height", height)

        arr = np.zeros((width, height), dtype=bool)
        for x, y in cells:
            if not (0 <= x < width and 0 <= y < height):
                raise OutOfBounds(f"Coordinates ({x}, {y}) out of bounds for {width}x{height} grid")
            arr[x, y] = True
        return cls(arr)

    @property
    def width(self) -> int:
        """Number of columns."""
        return self._cells.shape[0]

    @property
    def height(self) -> int:
        """Number of rows."""
        return self._cells.shape[1]

    @property
    def shape(self) -> Tuple[int, int]:
        """Get grid dimensions as (width, height)."""
        return (self.width, self.height)

    def dimensions(self) -> Tuple[int, int]:
        """Return (width, height); constant for the grid's lifetime."""
        return self.shape

    @property
    def cells(self) -> np.ndarray:
        """Read-only view of the cell array, indexed ``[x, y]``."""
        # A view of a read-only base cannot be made writeable again
        return self._cells.view()

    def contains(self, x: int, y: int) -> bool:
        """Whether (x, y) is a coordinate of this grid."""
        return 0 <= x < self.width and 0 <= y < self.height

    def get(self, x: int, y: int) -> bool:
        """Get the state of a cell.

        Args:
            x: Column coordinate
            y: Row coordinate

        Returns:
            True if cell is alive, False if dead

        Raises:
            OutOfBounds: If coordinates are outside the grid
        """
        if not self.contains(x, y):
            raise OutOfBounds(f"Coordinates ({x}, {y}) out of bounds for {self.width}x{self.height} grid")
        return bool(self._cells[x, y])

    @property
    def population(self) -> int:
        """Get the number of living cells."""
        return int(np.count_nonzero(self._cells))

    def alive_cells(self) -> Iterator[Tuple[int, int]]:
        """Yield (x, y) of every living cell, ordered by x then y."""
        xs, ys = np.nonzero(self._cells)
        for x, y in zip(xs, ys):
            yield (int(x), int(y))

    def get_bounding_box(self) -> Optional[Tuple[int, int, int, int]]:
        """Get bounding box of living cells.

        Returns:
            Tuple of (min_x, min_y, max_x, max_y) or None if no living cells
        """
        xs, ys = np.nonzero(self._cells)
        if len(xs) == 0:
            return None

        return (int(xs.min()), int(ys.min()), int(xs.max()), int(ys.max()))

    def to_list(self) -> List[List[bool]]:
        """Convert grid to nested list indexed ``[x][y]``."""
        return self._cells.tolist()

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Grid):
            return NotImplemented
        return self.shape == other.shape and np.array_equal(self._cells, other._cells)

    def __hash__(self) -> int:
        return hash((self.shape, self._cells.tobytes()))

    def __repr__(self) -> str:
        return f"Grid(width={self.width}, height={self.height}, population={self.population})"

    def __str__(self) -> str:
        """String representation showing living cells as '*' and dead as '.'."""
        rows = []
        for y in range(self.height):
            rows.append("".join("*" if self._cells[x, y] else "." for x in range(self.width)))
        return "\n".join(rows)
