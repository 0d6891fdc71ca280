"""Tkinter window that animates a Game of Life grid."""

import argparse
import tkinter as tk
from typing import Dict, List, Optional, Tuple

import numpy as np

from ..core.grid import CellState, Grid
from ..core.engine import StepEngine


class TkinterGameOfLifeGUI:
    """Window that draws the grid, advances it, and waits, once per frame.

    Escape or closing the window stops the loop. Space pauses and resumes,
    ``r`` reseeds the grid, and clicking a cell toggles it.
    """

    def __init__(
        self,
        master: tk.Tk,
        width: int = 200,
        height: int = 150,
        cell_size: int = 4,
        delay_ms: int = 10,
        population_rate: float = 0.5,
        seed: Optional[int] = None,
        autostart: bool = True,
    ) -> None:
        """Initialize the window.

        Args:
            master: Root Tkinter window
            width: Grid columns
            height: Grid rows
            cell_size: Side of a drawn cell in pixels
            delay_ms: Pause between frames in milliseconds
            population_rate: Chance each cell starts alive
            seed: Random seed for reproducible populations
            autostart: Whether to schedule the frame loop immediately
        """
        self.master = master
        self.master.title("Game of Life")

        self.cell_size = cell_size
        self.delay_ms = delay_ms
        self.population_rate = population_rate
        self.rng = np.random.default_rng(seed)

        self.grid = Grid(width, height)
        self.engine = StepEngine()
        self.generation = 0

        self.running = True
        self.closed = False
        self._after_id: Optional[str] = None

        # Canvas rectangle per living cell, and the cells the canvas currently shows
        self.cell_objects: Dict[Tuple[int, int], int] = {}
        self._drawn = np.zeros((height, width), dtype=np.int8)

        self.canvas = tk.Canvas(
            self.master,
            width=width * cell_size,
            height=height * cell_size,
            bg="white",
            highlightthickness=0,
        )
        self.canvas.pack()
        self.canvas.bind("<Button-1>", self.on_click)

        self.master.bind("<Escape>", lambda _event: self.close())
        self.master.bind("<space>", lambda _event: self.toggle_running())
        self.master.bind("r", lambda _event: self.reset_grid())
        self.master.protocol("WM_DELETE_WINDOW", self.close)

        self.reset_grid()
        if autostart:
            self._after_id = self.master.after(self.delay_ms, self.update_loop)

    def reset_grid(self) -> None:
        """Reseed the grid with a random population."""
        self.grid.randomize(self.population_rate, self.rng)
        self.generation = 0
        self.redraw_all_cells()

    def toggle_running(self) -> None:
        """Pause or resume the simulation."""
        self.running = not self.running

    def on_click(self, event: tk.Event) -> None:
        """Toggle the cell under the mouse."""
        x = event.x // self.cell_size
        y = event.y // self.cell_size
        if not self.grid.contains(x, y):
            return

        if self.grid.get_state(x, y) == CellState.ALIVE:
            self.grid.set_state(CellState.DEAD, x, y)
        else:
            self.grid.set_state(CellState.ALIVE, x, y)
        self.draw_cell(x, y)

    def draw_cell(self, x: int, y: int) -> None:
        """Draw or erase a single cell on the canvas."""
        cell_key = (x, y)
        alive = self.grid.get_state(x, y) == CellState.ALIVE

        if alive and cell_key not in self.cell_objects:
            x1 = x * self.cell_size
            y1 = y * self.cell_size
            self.cell_objects[cell_key] = self.canvas.create_rectangle(
                x1, y1, x1 + self.cell_size, y1 + self.cell_size, fill="black", outline="", tags="cell"
            )
        elif not alive and cell_key in self.cell_objects:
            self.canvas.delete(self.cell_objects.pop(cell_key))

        self._drawn[y, x] = 1 if alive else 0

    def redraw_all_cells(self) -> None:
        """Redraw every living cell."""
        self.canvas.delete("cell")
        self.cell_objects.clear()
        self._drawn.fill(0)

        for x, y in self.grid.live_cells():
            self.draw_cell(x, y)

    def changed_cells(self) -> List[Tuple[int, int]]:
        """Get coordinates of cells whose drawn state is out of date."""
        ys, xs = np.nonzero(self.grid.as_array() != self._drawn)
        return [(int(x), int(y)) for x, y in zip(xs, ys)]

    def draw_changed_cells(self) -> None:
        """Draw only the cells that changed since the last frame."""
        for x, y in self.changed_cells():
            self.draw_cell(x, y)

    def step(self) -> None:
        """Advance one generation and update the canvas."""
        self.engine.step(self.grid)
        self.generation += 1
        self.draw_changed_cells()

    def update_loop(self) -> None:
        """Run one frame and schedule the next."""
        if self.closed:
            return

        if self.running:
            self.step()

        self._after_id = self.master.after(self.delay_ms, self.update_loop)

    def close(self) -> None:
        """Stop the frame loop and destroy the window."""
        if self.closed:
            return

        self.closed = True
        if self._after_id is not None:
            self.master.after_cancel(self._after_id)
            self._after_id = None
        self.master.destroy()


def main() -> None:
    """Main entry point for the Tkinter window."""
    parser = argparse.ArgumentParser(prog="lifegrid-gui", description="Animate Conway's Game of Life")
    parser.add_argument("-W", "--width", type=int, default=200, help="Grid width (default: 200)")
    parser.add_argument("-H", "--height", type=int, default=150, help="Grid height (default: 150)")
    parser.add_argument("-c", "--cell-size", type=int, default=4, help="Cell size in pixels (default: 4)")
    parser.add_argument("-d", "--delay", type=int, default=10, help="Milliseconds between frames (default: 10)")
    parser.add_argument("-p", "--population", type=float, default=0.5, help="Initial population rate (default: 0.5)")
    parser.add_argument("--seed", type=int, help="Random seed for reproducible populations")
    parser.add_argument("--test", action="store_true", help="Run for three seconds and exit")
    args = parser.parse_args()

    root = tk.Tk()
    root.resizable(False, False)

    app = TkinterGameOfLifeGUI(
        root,
        width=args.width,
        height=args.height,
        cell_size=args.cell_size,
        delay_ms=args.delay,
        population_rate=args.population,
        seed=args.seed,
    )

    if args.test:
        print("Running in test mode...")

        def auto_exit() -> None:
            print(f"Test completed. Ran {app.generation} generations.")
            app.close()

        root.after(3000, auto_exit)

    root.mainloop()


if __name__ == "__main__":
    main()
