# tests/test_backtracking.py
import pytest

from solver.backtracking import (
    NO_EMPTY_CELL,
    find_next_cell,
    solve,
    solve_board,
    solve_board_efficient,
)
from solver.solver_core import new_grid


def test_empty_grid_plain(check_complete):
    g = new_grid()
    assert solve_board(g, 0, 0) is True
    check_complete(g)
    # row-major, ascending digits: the first row is 1..9
    assert g[0] == list(range(1, 10))


def test_empty_grid_efficient(check_complete):
    g = new_grid()
    assert solve_board_efficient(g) is True
    check_complete(g)


@pytest.mark.parametrize("efficient", [False, True])
def test_classic_puzzle(puzzle, solved, efficient):
    assert solve(puzzle, efficient=efficient) is True
    assert puzzle == solved


def test_solvers_agree(puzzle):
    a = [row[:] for row in puzzle]
    b = [row[:] for row in puzzle]
    assert solve(a) == solve(b, efficient=True) is True
    # the classic puzzle has a unique solution
    assert a == b


def test_givens_are_kept(puzzle):
    givens = {(r, c): v for r, row in enumerate(puzzle) for c, v in enumerate(row) if v}
    solve(puzzle, efficient=True)
    assert all(puzzle[r][c] == v for (r, c), v in givens.items())


def test_full_grid_is_solved(solved):
    before = [row[:] for row in solved]
    assert solve(solved) is True
    assert solve(solved, efficient=True) is True
    assert solved == before


@pytest.mark.parametrize("efficient", [False, True])
def test_dead_end_returns_false(dead_end_grid, efficient):
    before = [row[:] for row in dead_end_grid]
    assert solve(dead_end_grid, efficient=efficient) is False
    assert dead_end_grid == before


@pytest.mark.parametrize("efficient", [False, True])
def test_backtracking_restores_cells(late_dead_end_grid, efficient):
    # call the searches directly: the fixture repeats a digit in column 7, which solve() rejects up front
    before = [row[:] for row in late_dead_end_grid]
    search = solve_board_efficient if efficient else solve_board
    assert search(late_dead_end_grid) is False
    assert late_dead_end_grid == before


@pytest.mark.parametrize("efficient", [False, True])
@pytest.mark.parametrize(
    "cells",
    [
        [(0, 0), (0, 1)],  # same row
        [(0, 0), (5, 0)],  # same column
        [(3, 3), (5, 5)],  # same box
    ],
    ids=["row", "col", "box"],
)
def test_repeated_givens_are_unsolvable(cells, efficient):
    g = new_grid()
    for r, c in cells:
        g[r][c] = 5
    before = [row[:] for row in g]
    assert solve(g, efficient=efficient) is False
    assert g == before


def test_solve_rejects_bad_shape():
    with pytest.raises(ValueError):
        solve([[0] * 9 for _ in range(3)])


# ------------------------------ MRV selector ------------------------------

def test_find_next_cell_empty_grid():
    # all cells tie at 9; the first in row-major order wins
    assert find_next_cell(new_grid()) == (0, 0, 9)


def test_find_next_cell_full_grid(solved):
    choice = find_next_cell(solved)
    assert choice == NO_EMPTY_CELL
    assert choice.row == -1 and choice.col == -1
    assert choice.count > 9


def test_find_next_cell_dead_end(dead_end_grid):
    assert find_next_cell(dead_end_grid) == (0, 8, 0)


def test_find_next_cell_first_on_ties(solved):
    g = [row[:] for row in solved]
    # every blank is forced (one candidate each); scan order decides
    g[4][0] = g[4][1] = 0
    g[4][3] = 0
    g[8][5] = 0
    assert find_next_cell(g) == (4, 0, 1)


def test_find_next_cell_first_on_ties_above_one():
    g = new_grid()
    g[0][0] = 1
    # row 0, column 0 and box 0 all drop to 8 candidates; (0, 1) is met first
    assert find_next_cell(g) == (0, 1, 8)


def test_find_next_cell_skips_looser_cells():
    g = new_grid()
    g[8][:8] = [1, 2, 3, 4, 5, 6, 7, 8]
    # (8, 8) is the only cell with a single candidate; everything before it has more
    r, c, count = find_next_cell(g)
    assert (r, c, count) == (8, 8, 1)


def test_find_next_cell_counts_at_least_one(puzzle):
    choice = find_next_cell(puzzle)
    assert choice.count >= 1
    assert puzzle[choice.row][choice.col] == 0
