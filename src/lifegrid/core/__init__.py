"""Core cellular automaton logic."""

from .grid import CellState, Grid, InvalidDimensions, OutOfBounds
from .engine import StepEngine
from .patterns import Pattern, PatternLibrary

__all__ = ["CellState", "Grid", "InvalidDimensions", "OutOfBounds", "StepEngine", "Pattern", "PatternLibrary"]
