"""Random puzzle generation: seed the three independent diagonal boxes, complete the grid with the plain solver, then blank out cells.

Generated puzzles are always solvable (they come from a known full solution), but
uniqueness of the solution is not checked.
"""

# generator.py
from __future__ import annotations

import random
from typing import Optional

from types_sudoku import Grid

from .backtracking import solve_board
from .solver_core import BOX, SIZE, new_grid

CELLS = SIZE * SIZE
DIAGONAL_BOXES = (0, 4, 8)  # top-left, center, bottom-right


def get_empty_board() -> Grid:
    return new_grid()


def get_shuffled_vector(rng: Optional[random.Random] = None) -> list[int]:
    """Digits 1..9 in uniformly random order."""
    rng = rng or random
    digits = list(range(1, SIZE + 1))
    rng.shuffle(digits)
    return digits


def fill_board_with_independent_box(grid: Grid, rng: Optional[random.Random] = None) -> None:
    """Fill the diagonal boxes with independent permutations of 1..9.

    These boxes share no row, column or box, so no validity check is needed.
    Other cells are left untouched.
    """
    for b in DIAGONAL_BOXES:
        r0 = c0 = BOX * (b // BOX)
        digits = get_shuffled_vector(rng)
        for i in range(BOX):
            for j in range(BOX):
                grid[r0 + i][c0 + j] = digits[i * BOX + j]


def delete_random_items(grid: Grid, n: int, rng: Optional[random.Random] = None) -> None:
    """Set `n` distinct, uniformly chosen cells to 0."""
    if not 0 <= n <= CELLS:
        raise ValueError(f"cannot delete {n} cells; expected 0..{CELLS}")
    rng = rng or random
    chosen = set()
    while len(chosen) < n:
        cell = (rng.randrange(SIZE), rng.randrange(SIZE))
        if cell in chosen:
            continue
        chosen.add(cell)
        grid[cell[0]][cell[1]] = 0


def generate_board(empty_boxes: int, rng: Optional[random.Random] = None) -> Grid:
    """Return a new solvable puzzle with exactly `empty_boxes` blank cells (1..81)."""
    if not 1 <= empty_boxes <= CELLS:
        raise ValueError(f"empty_boxes must be in 1..{CELLS}, got {empty_boxes}")
    grid = get_empty_board()
    fill_board_with_independent_box(grid, rng)
    solve_board(grid, 0, 0)
    delete_random_items(grid, empty_boxes, rng)
    return grid
