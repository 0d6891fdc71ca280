"""Grid data structure for the Game of Life."""

from enum import IntEnum
import operator
from typing import Iterator, Optional, Tuple
import numpy as np


class CellState(IntEnum):
    """State of a single cell."""

    DEAD = 0
    ALIVE = 1


class InvalidDimensions(ValueError):
    """Raised when a grid is created with a non-positive width or height."""

    def __init__(self, width: int, height: int) -> None:
        super().__init__(f"Cannot create a grid of size {width}x{height}")
        self.width = width
        self.height = height


class OutOfBounds(IndexError):
    """Raised when a coordinate lies outside the grid."""

    def __init__(self, x: int, y: int, width: int, height: int) -> None:
        super().__init__(f"Coordinates ({x}, {y}) out of bounds for {width}x{height} grid")
        self.x = x
        self.y = y
        self.width = width
        self.height = height


class Grid:
    """Represents a dense 2D grid of cells with hard edges.

    Cells are stored in a flat row-major buffer, so cell ``(x, y)`` lives at
    index ``x + y * width``.
    """

    def __init__(self, width: int, height: int) -> None:
        """Initialize a new grid with every cell dead.

        Args:
            width: Number of columns
            height: Number of rows

        Raises:
            InvalidDimensions: If width or height is not positive
        """
        if width <= 0 or height <= 0:
            raise InvalidDimensions(width, height)

        self.width = width
        self.height = height
        self._cells = np.zeros(width * height, dtype=np.int8)

    @property
    def cells(self) -> np.ndarray:
        """Get the flat cell buffer."""
        return self._cells

    @property
    def shape(self) -> Tuple[int, int]:
        """Get grid dimensions as (width, height)."""
        return (self.width, self.height)

    @property
    def population(self) -> int:
        """Get the number of living cells."""
        return int(np.count_nonzero(self._cells))

    def contains(self, x: int, y: int) -> bool:
        """Check whether a coordinate lies inside the grid."""
        return 0 <= x < self.width and 0 <= y < self.height

    def _x_y_to_idx(self, x: int, y: int) -> int:
        # Non-integer coordinates raise TypeError
        x, y = operator.index(x), operator.index(y)
        if not self.contains(x, y):
            raise OutOfBounds(x, y, self.width, self.height)
        return x + y * self.width

    def get_state(self, x: int, y: int) -> CellState:
        """Get the state of a cell.

        Args:
            x: Column coordinate
            y: Row coordinate

        Returns:
            State of the cell

        Raises:
            OutOfBounds: If the coordinates are outside the grid
            TypeError: If a coordinate is not an integer
        """
        return CellState(int(self._cells[self._x_y_to_idx(x, y)]))

    def set_state(self, state: CellState, x: int, y: int) -> None:
        """Set the state of a cell.

        Args:
            state: New state of the cell
            x: Column coordinate
            y: Row coordinate

        Raises:
            OutOfBounds: If the coordinates are outside the grid
            TypeError: If a coordinate is not an integer
            ValueError: If state is not a valid CellState
        """
        index = self._x_y_to_idx(x, y)
        self._cells[index] = CellState(state)

    def as_array(self) -> np.ndarray:
        """Get a (height, width) view of the cell buffer."""
        return self._cells.reshape(self.height, self.width)

    def replace_cells(self, cells: np.ndarray) -> None:
        """Swap in a copy of a new cell buffer in a single assignment.

        Args:
            cells: Buffer of width * height cells, flat or shaped (height, width)

        Raises:
            ValueError: If the buffer shape doesn't match the grid or it holds
                values other than DEAD and ALIVE
        """
        cells = np.asarray(cells)
        if cells.shape not in ((self.height, self.width), (self.width * self.height,)):
            raise ValueError(f"Buffer of shape {cells.shape} doesn't match grid {self.shape}")

        if not np.isin(cells, (CellState.DEAD, CellState.ALIVE)).all():
            raise ValueError("Buffer may only hold DEAD and ALIVE cells")

        self._cells = np.array(cells, dtype=np.int8).reshape(-1)

    def live_cells(self) -> Iterator[Tuple[int, int]]:
        """Yield (x, y) coordinates of living cells in row-major order."""
        for index in np.flatnonzero(self._cells):
            y, x = divmod(int(index), self.width)
            yield (x, y)

    def clear(self) -> None:
        """Clear all cells (set all to dead)."""
        self._cells.fill(CellState.DEAD)

    def randomize(self, probability: float = 0.5, rng: Optional[np.random.Generator] = None) -> None:
        """Randomly populate the grid.

        Args:
            probability: Chance each cell will be alive (0.0 to 1.0)
            rng: Random generator to draw from (a fresh one if omitted)
        """
        if rng is None:
            rng = np.random.default_rng()
        alive = rng.random(self.width * self.height) < probability
        self.replace_cells(alive.astype(np.int8))

    def copy(self) -> "Grid":
        """Return an independent grid with the same cells."""
        other = Grid(self.width, self.height)
        other.replace_cells(self._cells.copy())
        return other

    def __eq__(self, other: object) -> bool:
        """Check if two grids are equal."""
        if not isinstance(other, Grid):
            return False
        return self.shape == other.shape and np.array_equal(self._cells, other._cells)

    def __str__(self) -> str:
        """String representation showing living cells as '*' and dead as '.'."""
        return "\n".join("".join("*" if cell else "." for cell in row) for row in self.as_array())
