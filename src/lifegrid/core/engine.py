"""Conway's Game of Life step engine."""

import operator

import numpy as np
import torch
import torch.nn.functional as F

from .grid import CellState, Grid, OutOfBounds


class StepEngine:
    """Advances a Grid by whole generations.

    Implements the classic rules:
    - Fewer than 2 live neighbors: the cell dies (underpopulation)
    - Exactly 2 live neighbors: the cell keeps its state
    - Exactly 3 live neighbors: the cell is alive (survival or birth)
    - More than 3 live neighbors: the cell dies (overpopulation)

    Cells outside the grid always count as dead; edges do not wrap.
    """

    def __init__(self) -> None:
        """Initialize the engine."""
        # Steps are single-threaded
        torch.set_num_threads(1)

        self._kernel = (
            torch.tensor([[1, 1, 1], [1, 0, 1], [1, 1, 1]], dtype=torch.float32).unsqueeze(0).unsqueeze(0)
        )

    def count_neighbors(self, grid: Grid, x: int, y: int) -> int:
        """Count living neighbors of a cell.

        Args:
            grid: Grid containing the cell
            x: Column coordinate
            y: Row coordinate

        Returns:
            Number of living neighbors (0-8)

        Raises:
            OutOfBounds: If (x, y) is outside the grid
            TypeError: If a coordinate is not an integer
        """
        x, y = operator.index(x), operator.index(y)
        if not grid.contains(x, y):
            raise OutOfBounds(x, y, grid.width, grid.height)

        count = 0
        for dy in (-1, 0, 1):
            for dx in (-1, 0, 1):
                if dx == 0 and dy == 0:
                    continue

                nx, ny = x + dx, y + dy
                if grid.contains(nx, ny) and grid.get_state(nx, ny) == CellState.ALIVE:
                    count += 1

        return count

    def count_all_neighbors(self, grid: Grid) -> np.ndarray:
        """Count neighbors for every cell at once.

        Zero padding around the grid makes off-grid positions count as dead.

        Returns:
            (height, width) array of neighbor counts
        """
        cells = torch.from_numpy(grid.as_array()).to(torch.float32).unsqueeze(0).unsqueeze(0)
        neighbors = F.conv2d(cells, self._kernel, padding=1)
        return neighbors[0, 0].round().numpy().astype(np.int8)

    @staticmethod
    def next_state(current: CellState, neighbors: int) -> CellState:
        """Apply the transition rule to a single cell."""
        if neighbors < 2:
            return CellState.DEAD
        if neighbors == 2:
            return CellState(current)
        if neighbors == 3:
            return CellState.ALIVE
        return CellState.DEAD

    def step(self, grid: Grid) -> Grid:
        """Advance the grid by one generation.

        Every neighbor count is taken from the current generation before the
        new buffer is swapped in, so all cells update simultaneously.

        Args:
            grid: Grid to advance in place

        Returns:
            The same grid, now holding the next generation
        """
        neighbor_counts = self.count_all_neighbors(grid)
        current = grid.as_array()

        next_cells = np.zeros_like(current)
        next_cells[neighbor_counts == 3] = CellState.ALIVE
        unchanged = neighbor_counts == 2
        next_cells[unchanged] = current[unchanged]

        grid.replace_cells(next_cells)
        return grid

    def run(self, grid: Grid, generations: int) -> Grid:
        """Advance the grid by several generations.

        Raises:
            ValueError: If generations is negative
        """
        if generations < 0:
            raise ValueError(f"Generations must be non-negative, got {generations}")

        for _ in range(generations):
            self.step(grid)
        return grid
