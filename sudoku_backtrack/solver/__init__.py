"""Solver module exports."""

from .backtracking import (
    InvalidGridError,
    SudokuSolver,
    find_empty_cell,
    guesses,
    is_solved,
    is_valid,
    solve,
)

__all__ = [
    "InvalidGridError",
    "SudokuSolver",
    "find_empty_cell",
    "guesses",
    "is_solved",
    "is_valid",
    "solve",
]
