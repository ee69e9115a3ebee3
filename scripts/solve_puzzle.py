"""Solve a Sudoku puzzle from a text file or stdin."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

from scripts._paths import resolve_puzzle_path
from sudoku_backtrack.config import configure_logging
from sudoku_backtrack.solver.backtracking import (
    Grid,
    InvalidGridError,
    SudokuSolver,
)

LOGGER = logging.getLogger("solve_puzzle")

EXIT_SOLVED = 0
EXIT_UNSOLVED = 1
EXIT_INVALID = 2

_SEPARATORS = set("|-+")
_DIGITS = set("0123456789")


def parse_puzzle(text: str) -> Grid:
    """Parse 81 cell characters into a grid.

    Digits ``1-9`` are givens, ``0`` or ``.`` mark empty cells. Whitespace
    and the box-drawing characters ``|``, ``-`` and ``+`` are ignored.
    """
    values: list[int] = []
    for ch in text:
        if ch.isspace() or ch in _SEPARATORS:
            continue
        if ch == ".":
            values.append(0)
        elif ch in _DIGITS:
            values.append(int(ch))
        else:
            raise ValueError(f"Unexpected character in puzzle: {ch!r}")

    if len(values) != 81:
        raise ValueError(f"Puzzle must contain 81 cells, got {len(values)}")

    return [values[r * 9:(r + 1) * 9] for r in range(9)]


def format_grid(grid: Grid) -> str:
    lines = []
    for r, row in enumerate(grid):
        if r and r % 3 == 0:
            lines.append("------+-------+------")
        chunks = [
            " ".join(str(v) if v else "." for v in row[c:c + 3])
            for c in range(0, 9, 3)
        ]
        lines.append(" | ".join(chunks))
    return "\n".join(lines)


def read_puzzle_text(source: str) -> str:
    if source == "-":
        return sys.stdin.read()
    return resolve_puzzle_path(source).read_text()


def _parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Solve a 9x9 Sudoku by backtracking")
    parser.add_argument(
        "puzzle",
        help="Puzzle file path, a name under data/puzzles/, or '-' for stdin",
    )
    parser.add_argument("--debug", action="store_true")
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    args = _parse_args(argv)
    configure_logging("DEBUG" if args.debug else "INFO")

    try:
        grid = parse_puzzle(read_puzzle_text(args.puzzle))
    except (OSError, ValueError) as exc:
        LOGGER.error("Could not read puzzle: %s", exc)
        return EXIT_INVALID

    solver = SudokuSolver()
    try:
        solved = solver.solve(grid)
    except InvalidGridError as exc:
        LOGGER.error("Invalid puzzle: %s", exc)
        return EXIT_INVALID

    if solved is None:
        LOGGER.info("No solution (nodes_visited=%d)", solver.nodes_visited)
        print(format_grid(grid))
        return EXIT_UNSOLVED

    LOGGER.info("Solved (nodes_visited=%d)", solver.nodes_visited)
    print(format_grid(solved))
    return EXIT_SOLVED


if __name__ == "__main__":
    raise SystemExit(main())
