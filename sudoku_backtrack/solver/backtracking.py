"""Sudoku solver using backtracking algorithm."""

from typing import Optional, List, Tuple
import copy
import logging


Grid = List[List[int]]

SIZE = 9
BOX = 3
EMPTY = 0

_LOGGER = logging.getLogger(__name__)


class InvalidGridError(ValueError):
    """Raised when a grid breaks the solver's input contract."""


def is_valid(grid: Grid, row: int, col: int, guess: int) -> bool:
    """
    Check if placing guess at (row, col) is valid.

    The target cell's own content is not special-cased: if it already
    holds ``guess`` the placement is rejected as a row conflict.

    Args:
        grid: Current grid state
        row: Row index
        col: Column index
        guess: Number to place (1-9)

    Returns:
        True if no row, column or box peer holds guess, False otherwise
    """
    # Row and column in one pass
    for x in range(SIZE):
        if grid[row][x] == guess or grid[x][col] == guess:
            return False

    # Check 3x3 box
    box_row = row // BOX * BOX
    box_col = col // BOX * BOX

    for r in range(box_row, box_row + BOX):
        for c in range(box_col, box_col + BOX):
            if grid[r][c] == guess:
                return False

    return True


def find_empty_cell(grid: Grid) -> Optional[Tuple[int, int]]:
    """
    Find the first empty cell in row-major order.

    Args:
        grid: Current grid state

    Returns:
        Tuple of (row, col) if empty cell found, None otherwise
    """
    for r in range(SIZE):
        for c in range(SIZE):
            if grid[r][c] == EMPTY:
                return (r, c)
    return None


def is_solved(grid: Grid) -> bool:
    """A grid is solved once no empty cell is left."""
    return find_empty_cell(grid) is None


def guesses(grid: Grid, row: int, col: int) -> List[int]:
    """Digits 1-9, ascending, that may legally occupy (row, col)."""
    return [num for num in range(1, SIZE + 1) if is_valid(grid, row, col, num)]


class SudokuSolver:
    """Solves Sudoku puzzles using backtracking."""

    def __init__(self):
        self.nodes_visited = 0

    def solve(self, grid: Grid) -> Optional[Grid]:
        """
        Solve a Sudoku puzzle.

        Args:
            grid: 9x9 list of lists with 0 for empty cells

        Returns:
            Solved 9x9 grid if solution exists, None otherwise

        Raises:
            InvalidGridError: if the grid is malformed or its givens conflict
        """
        self.nodes_visited = 0
        validate_grid(grid)
        _LOGGER.debug(
            "search started empty_cells=%d",
            sum(row.count(EMPTY) for row in grid),
        )
        result = self.search(copy.deepcopy(grid))
        _LOGGER.debug(
            "search finished solved=%s nodes_visited=%d",
            is_solved(result),
            self.nodes_visited,
        )
        if is_solved(result):
            return result
        return None

    def search(self, grid: Grid) -> Grid:
        """
        Depth-first search from a partial assignment.

        Returns a solved grid, or ``grid`` itself unchanged when no
        solution is reachable from it. Every placement happens on a fresh
        copy, so nothing has to be undone between candidates.
        """
        self.nodes_visited += 1

        empty = find_empty_cell(grid)
        if empty is None:
            return grid

        row, col = empty

        for num in guesses(grid, row, col):
            candidate = copy.deepcopy(grid)
            candidate[row][col] = num

            result = self.search(candidate)
            if is_solved(result):
                return result

        return grid


def solve(grid: Grid) -> Grid:
    """
    Convenience function to solve a Sudoku grid.

    Returns the solved grid, or a board equal to the input when the
    puzzle has no solution; use :func:`is_solved` to tell them apart.
    The caller's grid is never modified.
    """
    return SudokuSolver().search(copy.deepcopy(grid))


def validate_grid(grid: Grid) -> None:
    """
    Validate grid structure, cell range and consistency of the givens.

    Raises:
        InvalidGridError: describing the first problem found
    """
    if not isinstance(grid, list) or len(grid) != SIZE:
        raise InvalidGridError(f"grid must be a list of {SIZE} rows")

    for r, row in enumerate(grid):
        if not isinstance(row, list) or len(row) != SIZE:
            raise InvalidGridError(f"row {r} must be a list of {SIZE} cells")
        for c, cell in enumerate(row):
            # bool is an int subclass but never a cell value
            if isinstance(cell, bool) or not isinstance(cell, int):
                raise InvalidGridError(f"cell ({r}, {c}) is not an integer")
            if cell < EMPTY or cell > SIZE:
                raise InvalidGridError(f"cell ({r}, {c}) value {cell} out of range 0-9")

    for r in range(SIZE):
        for c in range(SIZE):
            num = grid[r][c]
            if num == EMPTY:
                continue
            probe = [list(row) for row in grid]
            probe[r][c] = EMPTY
            if not is_valid(probe, r, c, num):
                raise InvalidGridError(
                    f"value {num} at ({r}, {c}) repeats in its row, column or box"
                )


def is_valid_grid(grid: Grid) -> bool:
    """
    Validate that a grid has correct structure and initial values.

    Args:
        grid: 9x9 grid to validate

    Returns:
        True if grid is valid, False otherwise
    """
    try:
        validate_grid(grid)
    except InvalidGridError:
        return False
    return True
