#!/usr/bin/env python3
"""
Example usage of the lifegrid package.
"""

from lifegrid import CellState, Grid, PatternLibrary, StepEngine


def main():
    """Demonstrate programmatic usage of the lifegrid package."""
    grid = Grid(12, 12)
    engine = StepEngine()

    glider = PatternLibrary().get_pattern("Glider")
    glider.apply_to_grid(grid, offset_x=1, offset_y=1)

    print("Initial state:")
    print(grid)
    print(f"Population: {grid.population}")
    print()

    for generation in range(1, 11):
        engine.step(grid)
        print(f"Generation {generation}:")
        print(grid)
        print(f"Population: {grid.population}")
        print()

    # Renderers only need get_state
    alive = [(x, y) for y in range(grid.height) for x in range(grid.width) if grid.get_state(x, y) == CellState.ALIVE]
    print(f"Living cells: {alive}")


if __name__ == "__main__":
    main()
