"""Frontends that drive the engine: a terminal CLI and a Tkinter window."""

from .cli import CLIGameOfLife

__all__ = ["CLIGameOfLife"]
