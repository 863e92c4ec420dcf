"""9x9 Sudoku solving and puzzle generation."""

from .backtracking import NO_EMPTY_CELL, find_next_cell, solve, solve_board, solve_board_efficient
from .generator import generate_board
from .solver_core import is_valid

__all__ = [
    "NO_EMPTY_CELL",
    "find_next_cell",
    "generate_board",
    "is_valid",
    "solve",
    "solve_board",
    "solve_board_efficient",
]
