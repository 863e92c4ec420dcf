# types_sudoku.py
from __future__ import annotations

from typing import NamedTuple

Grid = list[list[int]]
"""A 9x9 Sudoku grid as rows of integers (0 = empty)."""

Cell = tuple[int, int]
"""A (row, col) coordinate, 0-based."""


class CellChoice(NamedTuple):
    """A cell picked by the MRV selector together with its candidate count."""

    row: int  # -1 when the grid has no empty cell
    col: int
    count: int  # number of digits 1..9 that may legally go there
