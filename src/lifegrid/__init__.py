"""Dense-grid Conway's Game of Life engine."""

__version__ = "0.1.0"

from .core.grid import CellState, Grid, InvalidDimensions, OutOfBounds
from .core.engine import StepEngine
from .core.patterns import Pattern, PatternLibrary

__all__ = ["CellState", "Grid", "InvalidDimensions", "OutOfBounds", "StepEngine", "Pattern", "PatternLibrary"]
