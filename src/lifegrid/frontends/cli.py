"""Command-line interface for Conway's Game of Life."""

import argparse
import sys
import time
from typing import Optional, Tuple

import numpy as np

from ..core.grid import Grid
from ..core.engine import StepEngine
from ..core.patterns import PatternLibrary


class CLIGameOfLife:
    """Command-line interface for running Game of Life simulations."""

    def __init__(self) -> None:
        """Initialize CLI interface."""
        self.pattern_library = PatternLibrary()
        self.engine = StepEngine()

    def seed_grid(
        self,
        grid: Grid,
        population_rate: float,
        pattern: Optional[str] = None,
        pattern_x: int = 0,
        pattern_y: int = 0,
        seed: Optional[int] = None,
        verbose: bool = False,
    ) -> None:
        """Seed a grid from a named pattern or with random cells.

        Unknown pattern names fall back to random population.
        """
        if pattern:
            loaded_pattern = self.pattern_library.get_pattern(pattern)
            if loaded_pattern:
                if verbose:
                    print(f"Loading pattern '{pattern}' at ({pattern_x}, {pattern_y})")
                loaded_pattern.apply_to_grid(grid, pattern_x, pattern_y)
                return
            print(f"Warning: Pattern '{pattern}' not found, using random population")

        if verbose:
            print(f"Generating random population (rate: {population_rate:.2%})")
        grid.randomize(population_rate, np.random.default_rng(seed))

    def run_simulation(
        self,
        width: int,
        height: int,
        population_rate: float,
        generations: int,
        pattern: Optional[str] = None,
        pattern_x: int = 0,
        pattern_y: int = 0,
        seed: Optional[int] = None,
        delay: float = 0.0,
        verbose: bool = False,
        show_grid: bool = False,
    ) -> Tuple[int, dict]:
        """Run a Game of Life simulation.

        Args:
            width: Grid width
            height: Grid height
            population_rate: Initial random population rate (0.0-1.0)
            generations: Number of generations to simulate
            pattern: Optional pattern name to seed with
            pattern_x: X offset for pattern placement
            pattern_y: Y offset for pattern placement
            seed: Random seed for reproducible populations
            delay: Seconds to wait between generations
            verbose: Print progress updates
            show_grid: Print the grid after every generation

        Returns:
            Tuple of (generations_run, statistics)
        """
        grid = Grid(width, height)

        if verbose:
            print(f"Initializing {width}x{height} grid")

        self.seed_grid(grid, population_rate, pattern, pattern_x, pattern_y, seed, verbose)
        initial_population = grid.population

        if verbose:
            print(f"Initial population: {initial_population} cells")

        if show_grid:
            print("\nGeneration 0:")
            print(grid)

        start_time = time.time()

        for generation in range(1, generations + 1):
            self.engine.step(grid)

            if show_grid:
                print(f"\nGeneration {generation}:")
                print(grid)
            elif verbose and generation % 100 == 0:
                print(f"Generation {generation}: population {grid.population}")

            if delay > 0:
                time.sleep(delay)

        duration = time.time() - start_time

        stats = {
            "generation": generations,
            "population": grid.population,
            "initial_population": initial_population,
            "population_density": grid.population / (width * height),
            "grid_size": grid.shape,
            "duration_seconds": duration,
            "generations_per_second": generations / duration if duration > 0 else 0,
        }

        return generations, stats


def create_parser() -> argparse.ArgumentParser:
    """Create the command-line argument parser."""
    parser = argparse.ArgumentParser(
        prog="lifegrid",
        description="Run Conway's Game of Life on a bounded grid in the terminal",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Random 40x20 grid for 50 generations
  lifegrid -W 40 -H 20 -n 50

  # Watch a glider, one frame every 0.2 seconds
  lifegrid -W 20 -H 20 --pattern Glider -n 40 -g -d 0.2

  # Reproducible random start
  lifegrid --seed 42 -p 0.3 -n 1000 -v
        """,
    )

    # Grid configuration
    parser.add_argument("-W", "--width", type=int, default=40, help="Grid width (default: 40)")

    parser.add_argument("-H", "--height", type=int, default=20, help="Grid height (default: 20)")

    parser.add_argument(
        "-p",
        "--population",
        type=float,
        default=0.5,
        help="Initial random population rate 0.0-1.0 (default: 0.5)",
    )

    parser.add_argument(
        "--seed",
        type=int,
        help="Random seed for reproducible populations",
    )

    # Pattern configuration
    parser.add_argument(
        "--pattern",
        type=str,
        help="Seed with a named pattern instead of random population",
    )

    parser.add_argument(
        "--pattern-x",
        type=int,
        default=0,
        help="X offset for pattern placement (default: 0)",
    )

    parser.add_argument(
        "--pattern-y",
        type=int,
        default=0,
        help="Y offset for pattern placement (default: 0)",
    )

    # Simulation configuration
    parser.add_argument(
        "-n",
        "--generations",
        type=int,
        default=100,
        help="Number of generations to simulate (default: 100)",
    )

    parser.add_argument(
        "-d",
        "--delay",
        type=float,
        default=0.0,
        help="Seconds to wait between generations (default: 0)",
    )

    # Output configuration
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Print detailed progress information",
    )

    parser.add_argument(
        "-g",
        "--show-grid",
        action="store_true",
        help="Print the grid after every generation (small grids only)",
    )

    parser.add_argument(
        "--list-patterns",
        action="store_true",
        help="List all available patterns and exit",
    )

    return parser


def print_results(generations: int, stats: dict, verbose: bool) -> None:
    """Print simulation results."""
    print(f"\nSimulation finished after {generations} generations")
    print(f"Final population: {stats['population']} cells ({stats['population_density']:.1%} density)")

    if verbose:
        print(f"Initial population: {stats['initial_population']} cells")
        print(f"Grid size: {stats['grid_size'][0]}x{stats['grid_size'][1]}")
        print(f"Duration: {stats['duration_seconds']:.3f}s ({stats['generations_per_second']:.1f} generations/second)")


def validate_args(args: argparse.Namespace) -> bool:
    """Validate command-line arguments.

    Args:
        args: Parsed arguments

    Returns:
        True if arguments are valid
    """
    errors = []

    if args.width <= 0:
        errors.append("Width must be positive")

    if args.height <= 0:
        errors.append("Height must be positive")

    if not 0.0 <= args.population <= 1.0:
        errors.append("Population rate must be between 0.0 and 1.0")

    if args.generations < 0:
        errors.append("Generations must be non-negative")

    if args.delay < 0:
        errors.append("Delay must be non-negative")

    if args.pattern_x < 0:
        errors.append("Pattern X offset must be non-negative")

    if args.pattern_y < 0:
        errors.append("Pattern Y offset must be non-negative")

    if errors:
        print("Error: Invalid arguments:")
        for error in errors:
            print(f"  - {error}")
        return False

    return True


def main() -> int:
    """Main entry point for the CLI."""
    parser = create_parser()
    args = parser.parse_args()

    cli = CLIGameOfLife()

    if args.list_patterns:
        print("Available patterns:")
        for name in cli.pattern_library.list_patterns():
            pattern = cli.pattern_library.get_pattern(name)
            print(f"  {name}: {pattern.description}")
        return 0

    if not validate_args(args):
        return 1

    try:
        generations, stats = cli.run_simulation(
            width=args.width,
            height=args.height,
            population_rate=args.population,
            generations=args.generations,
            pattern=args.pattern,
            pattern_x=args.pattern_x,
            pattern_y=args.pattern_y,
            seed=args.seed,
            delay=args.delay,
            verbose=args.verbose,
            show_grid=args.show_grid,
        )
    except KeyboardInterrupt:
        print("\nSimulation interrupted by user")
        return 1
    except Exception as e:
        print(f"Error: {e}")
        if args.verbose:
            import traceback

            traceback.print_exc()
        return 1

    print_results(generations, stats, args.verbose)
    return 0


if __name__ == "__main__":
    sys.exit(main())
