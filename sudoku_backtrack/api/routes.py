"""API routes for the Sudoku solver application."""

from __future__ import annotations

import logging

from fastapi import APIRouter, HTTPException

from ..models.schemas import (
    HealthResponse,
    PlacementRequest,
    PlacementResponse,
    SolveRequest,
    SolveResponse,
)
from ..solver.backtracking import InvalidGridError, SudokuSolver, is_valid

API_VERSION = "1.0.0"

router = APIRouter()
_LOGGER = logging.getLogger(__name__)


@router.get("/health", response_model=HealthResponse)
async def health_check():
    """Health check endpoint."""
    return HealthResponse(status="healthy", version=API_VERSION)


@router.post("/api/v1/sudoku:solve", response_model=SolveResponse, tags=["Sudoku"])
async def solve_sudoku(request: SolveRequest):
    """
    Solve a Sudoku puzzle from a JSON grid.

    Expected JSON format:
    {
        "grid": {
            "cells": [[row1], [row2], ...]
        }
    }
    Where each row is a list of 9 integers (0 for empty).
    """
    grid = request.grid.cells
    solver = SudokuSolver()

    try:
        solved = solver.solve(grid)
    except InvalidGridError as e:
        _LOGGER.warning("Rejected grid: %s", e)
        return SolveResponse(
            success=False,
            original=grid,
            solved=None,
            message=f"Invalid Sudoku grid: {e}",
        )
    except Exception as e:
        _LOGGER.exception("Solver failed")
        raise HTTPException(status_code=500, detail=str(e))

    if solved is None:
        return SolveResponse(
            success=False,
            original=grid,
            solved=None,
            message="Puzzle has no solution",
            nodes_visited=solver.nodes_visited,
        )

    return SolveResponse(
        success=True,
        original=grid,
        solved=solved,
        message="Puzzle solved successfully",
        nodes_visited=solver.nodes_visited,
    )


@router.post(
    "/api/v1/sudoku:checkPlacement",
    response_model=PlacementResponse,
    tags=["Sudoku"],
)
async def check_placement(request: PlacementRequest):
    """Check whether a value may be placed at a cell without a conflict."""
    cell = request.cell
    valid = is_valid(request.grid.cells, cell.row, cell.col, cell.value)
    return PlacementResponse(valid=valid, row=cell.row, col=cell.col, value=cell.value)
