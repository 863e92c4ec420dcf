"""Backtracking solvers: plain row-major search, an MRV-guided variant, and the `solve` dispatcher.

All solvers mutate the grid in place. A False return means no completion exists
from the current state; it is a normal result, not an error.
"""

# backtracking.py
from __future__ import annotations

import sys

from types_sudoku import CellChoice, Grid

from .solver_core import DIGITS, SIZE, candidates, check_grid, is_valid, sanity_check

NO_EMPTY_CELL = CellChoice(-1, -1, sys.maxsize)


def solve_board(grid: Grid, r: int = 0, c: int = 0) -> bool:
    """Depth-first search over cells in row-major order starting at (r, c)."""
    if r == SIZE:
        return True
    nr, nc = (r, c + 1) if c + 1 < SIZE else (r + 1, 0)
    if grid[r][c] != 0:
        return solve_board(grid, nr, nc)
    for k in DIGITS:
        if is_valid(grid, r, c, k):
            grid[r][c] = k
            if solve_board(grid, nr, nc):
                return True
            grid[r][c] = 0
    return False


def find_next_cell(grid: Grid) -> CellChoice:
    """Pick the empty cell with the fewest legal digits (first one in row-major order on ties).

    Stops early on a count of 1 (cannot do better) or 0 (dead end).
    Returns NO_EMPTY_CELL when the grid is full.
    """
    best = NO_EMPTY_CELL
    for r in range(SIZE):
        for c in range(SIZE):
            if grid[r][c] != 0:
                continue
            count = len(candidates(grid, r, c))
            if count < best.count:
                best = CellChoice(r, c, count)
                if count <= 1:
                    return best
    return best


def solve_board_efficient(grid: Grid) -> bool:
    """Backtracking where each decision is made on the most constrained cell."""
    r, c, count = find_next_cell(grid)
    if count == NO_EMPTY_CELL.count:
        return True
    if count == 0:
        return False
    for k in DIGITS:
        if is_valid(grid, r, c, k):
            grid[r][c] = k
            if solve_board_efficient(grid):
                return True
            grid[r][c] = 0
    return False


def solve(grid: Grid, efficient: bool = False) -> bool:
    """Solve `grid` in place with the plain (default) or the MRV solver.

    Givens that already repeat a digit in a row, column or box return False
    without searching. Raises ValueError if `grid` is not a 9x9 grid of ints in 0..9.
    """
    check_grid(grid)
    if not sanity_check(grid)["ok"]:
        return False
    if efficient:
        return solve_board_efficient(grid)
    return solve_board(grid, 0, 0)
