"""Plain-function solvers for classic programming-contest puzzles."""

__version__ = "0.1.0"