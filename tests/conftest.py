# tests/conftest.py
import sys
from pathlib import Path

import pytest

# Add project root to sys.path so "solver", "apps" and "types_sudoku" can be imported in tests
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

SOLVED = [
    [5, 3, 4, 6, 7, 8, 9, 1, 2],
    [6, 7, 2, 1, 9, 5, 3, 4, 8],
    [1, 9, 8, 3, 4, 2, 5, 6, 7],
    [8, 5, 9, 7, 6, 1, 4, 2, 3],
    [4, 2, 6, 8, 5, 3, 7, 9, 1],
    [7, 1, 3, 9, 2, 4, 8, 5, 6],
    [9, 6, 1, 5, 3, 7, 2, 8, 4],
    [2, 8, 7, 4, 1, 9, 6, 3, 5],
    [3, 4, 5, 2, 8, 6, 1, 7, 9],
]

PUZZLE = [
    [5, 3, 0, 0, 7, 0, 0, 0, 0],
    [6, 0, 0, 1, 9, 5, 0, 0, 0],
    [0, 9, 8, 0, 0, 0, 0, 6, 0],
    [8, 0, 0, 0, 6, 0, 0, 0, 3],
    [4, 0, 0, 8, 0, 3, 0, 0, 1],
    [7, 0, 0, 0, 2, 0, 0, 0, 6],
    [0, 6, 0, 0, 0, 0, 2, 8, 0],
    [0, 0, 0, 4, 1, 9, 0, 0, 5],
    [0, 0, 0, 0, 8, 0, 0, 7, 9],
]


def assert_complete(grid):
    """Every row, column and box is a permutation of 1..9."""
    full = set(range(1, 10))
    for r in range(9):
        assert set(grid[r]) == full, f"row {r}: {grid[r]}"
    for c in range(9):
        assert {grid[r][c] for r in range(9)} == full, f"col {c}"
    for b in range(9):
        r0, c0 = 3 * (b // 3), 3 * (b % 3)
        assert {grid[r0 + i][c0 + j] for i in range(3) for j in range(3)} == full, f"box {b}"


@pytest.fixture
def check_complete():
    return assert_complete


@pytest.fixture
def solved():
    return [row[:] for row in SOLVED]


@pytest.fixture
def puzzle():
    return [row[:] for row in PUZZLE]


@pytest.fixture
def dead_end_grid():
    """Row 0 holds 1..8 and column 8 holds a 9, so (0, 8) has no candidate."""
    g = [[0] * 9 for _ in range(9)]
    g[0][:8] = [1, 2, 3, 4, 5, 6, 7, 8]
    g[4][8] = 9
    return g


@pytest.fixture
def late_dead_end_grid():
    """Two forced cells in row 0, then (8, 8) with no candidate.

    Built from SOLVED: (0,0), (0,1), (8,8) cleared and (8,7) overwritten with SOLVED[8][8].
    """
    g = [row[:] for row in SOLVED]
    g[0][0] = 0
    g[0][1] = 0
    g[8][8] = 0
    g[8][7] = SOLVED[8][8]
    return g
