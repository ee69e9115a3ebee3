"""Tests for the solve_puzzle command-line script."""

import io

import pytest

from scripts._paths import PUZZLE_DIR, resolve_puzzle_path
from scripts.solve_puzzle import (
    EXIT_INVALID,
    EXIT_SOLVED,
    EXIT_UNSOLVED,
    format_grid,
    main,
    parse_puzzle,
)

from tests.test_backtracking import EASY_PUZZLE, EASY_SOLUTION


def _flat(grid):
    return "".join(str(v) for row in grid for v in row)


def test_parse_puzzle_accepts_dots_and_separators():
    text = (PUZZLE_DIR / "easy.txt").read_text()

    assert parse_puzzle(text) == EASY_PUZZLE
    assert parse_puzzle(_flat(EASY_PUZZLE)) == EASY_PUZZLE
    assert parse_puzzle(format_grid(EASY_PUZZLE)) == EASY_PUZZLE


def test_parse_puzzle_rejects_bad_input():
    with pytest.raises(ValueError, match="81 cells"):
        parse_puzzle("123")
    with pytest.raises(ValueError, match="Unexpected character"):
        parse_puzzle("x" * 81)
    # non-ASCII decimal digits are not cell values
    with pytest.raises(ValueError, match="Unexpected character"):
        parse_puzzle("٣" + "0" * 80)
    with pytest.raises(ValueError, match="Unexpected character"):
        parse_puzzle("²" + "0" * 80)


def test_format_grid_layout():
    lines = format_grid(EASY_SOLUTION).splitlines()

    assert len(lines) == 11
    assert lines[0] == "9 8 4 | 2 7 6 | 5 3 1"
    assert lines[3] == "------+-------+------"


def test_resolve_puzzle_path_by_name():
    assert resolve_puzzle_path("easy.txt") == (PUZZLE_DIR / "easy.txt").resolve()

    with pytest.raises(FileNotFoundError, match="Puzzle not found"):
        resolve_puzzle_path("missing.txt")


def test_main_solves_named_puzzle(capsys):
    assert main(["easy.txt"]) == EXIT_SOLVED

    out = capsys.readouterr().out
    assert out.strip() == format_grid(EASY_SOLUTION)


def test_main_reads_stdin(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO(_flat(EASY_PUZZLE)))

    assert main(["-"]) == EXIT_SOLVED
    assert capsys.readouterr().out.strip() == format_grid(EASY_SOLUTION)


def test_main_unsolvable(monkeypatch):
    grid = [[0] * 9 for _ in range(9)]
    grid[0] = [0, 2, 3, 4, 5, 6, 7, 8, 9]
    grid[3][0] = 1
    monkeypatch.setattr("sys.stdin", io.StringIO(_flat(grid)))

    assert main(["-"]) == EXIT_UNSOLVED


def test_main_invalid_inputs(monkeypatch):
    assert main(["missing.txt"]) == EXIT_INVALID

    conflicting = "55" + "0" * 79
    monkeypatch.setattr("sys.stdin", io.StringIO(conflicting))
    assert main(["-"]) == EXIT_INVALID
