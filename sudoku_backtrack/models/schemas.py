"""Pydantic models for API requests and responses."""

from __future__ import annotations

from pydantic import BaseModel, Field, StrictInt, field_validator


class SudokuCell(BaseModel):
    """A single Sudoku cell."""

    value: int = Field(ge=0, le=9, description="Cell value (0 for empty)")
    row: int = Field(ge=0, le=8, description="Row index (0-8)")
    col: int = Field(ge=0, le=8, description="Column index (0-8)")


class SudokuGrid(BaseModel):
    """A Sudoku grid."""

    cells: list[list[StrictInt]] = Field(description="9x9 grid (0 for empty cells)")

    class Config:
        json_schema_extra = {
            "example": {
                "cells": [
                    [9, 8, 4, 2, 7, 0, 0, 3, 1],
                    [6, 1, 3, 9, 4, 5, 0, 2, 0],
                    [2, 5, 7, 1, 3, 8, 0, 0, 9],
                    [8, 3, 2, 7, 5, 0, 4, 9, 0],
                    [0, 4, 0, 0, 9, 0, 0, 1, 8],
                    [0, 0, 6, 0, 8, 2, 0, 0, 3],
                    [3, 7, 8, 0, 1, 0, 9, 0, 0],
                    [4, 0, 0, 0, 0, 7, 0, 0, 0],
                    [5, 6, 0, 0, 0, 0, 0, 0, 4],
                ]
            }
        }

    @field_validator("cells")
    @classmethod
    def _check_shape(cls, cells: list[list[int]]) -> list[list[int]]:
        if len(cells) != 9 or any(len(row) != 9 for row in cells):
            raise ValueError("grid must be 9 rows of 9 cells")
        if any(cell < 0 or cell > 9 for row in cells for cell in row):
            raise ValueError("cell values must be between 0 and 9")
        return cells


class SolveRequest(BaseModel):
    """Request to solve a Sudoku grid."""

    grid: SudokuGrid = Field(description="The Sudoku puzzle to solve")


class SolveResponse(BaseModel):
    """Response from solving a Sudoku."""

    success: bool = Field(description="Whether the puzzle was solved")
    original: list[list[int]] = Field(description="Original grid")
    solved: list[list[int]] | None = Field(description="Solved grid (if successful)")
    message: str = Field(description="Status message")
    nodes_visited: int | None = Field(
        default=None, description="Search nodes explored by the solver"
    )


class PlacementRequest(BaseModel):
    """Request to check a single placement against a grid."""

    grid: SudokuGrid = Field(description="Grid the placement is checked against")
    cell: SudokuCell = Field(description="Target cell and candidate value")

    @field_validator("cell")
    @classmethod
    def _check_candidate(cls, cell: SudokuCell) -> SudokuCell:
        if cell.value == 0:
            raise ValueError("candidate value must be between 1 and 9")
        return cell


class PlacementResponse(BaseModel):
    """Result of a placement check."""

    valid: bool = Field(description="Whether the value may occupy the cell")
    row: int = Field(description="Row index (0-8)")
    col: int = Field(description="Column index (0-8)")
    value: int = Field(description="Candidate value (1-9)")


class HealthResponse(BaseModel):
    """Health check response."""

    status: str = Field(description="Service status")
    version: str | None = Field(default=None, description="Service version")
