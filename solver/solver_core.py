"""Core grid utilities used by the solvers and the generator: index math, grid allocation, the placement validator and a conflict report."""

# solver_core.py
# Plain-function helpers over a 9x9 grid:
# - allocation / cloning
# - row / column / box addressing
# - is_valid (the single constraint oracle)
# - check_grid (shape precondition) and sanity_check (duplicate report)
# Grid is 9x9 list of lists of ints (0..9). 0 = blank. Rows/cols are 0-based.

from types_sudoku import Cell, Grid

SIZE = 9
BOX = 3
DIGITS = range(1, SIZE + 1)


def box_origin(r: int, c: int) -> Cell:
    return (BOX * (r // BOX), BOX * (c // BOX))


def unit_cells_box(b: int) -> list[Cell]:
    r0 = BOX * (b // BOX)
    c0 = BOX * (b % BOX)
    return [(r0 + i, c0 + j) for i in range(BOX) for j in range(BOX)]


def new_grid() -> Grid:
    return [[0] * SIZE for _ in range(SIZE)]


def clone_grid(grid: Grid) -> Grid:
    return [row[:] for row in grid]


def count_empty(grid: Grid) -> int:
    return sum(1 for row in grid for v in row if v == 0)


def is_valid(grid: Grid, r: int, c: int, k: int) -> bool:
    """True if digit `k` occurs nowhere in row `r`, column `c` or the 3x3 box of (r, c).

    The cell (r, c) itself is part of all three units, so callers probe empty cells.
    Indices and digit are not checked.
    """
    for i in range(SIZE):
        if grid[r][i] == k or grid[i][c] == k:
            return False
    r0, c0 = box_origin(r, c)
    for i in range(r0, r0 + BOX):
        for j in range(c0, c0 + BOX):
            if grid[i][j] == k:
                return False
    return True


def candidates(grid: Grid, r: int, c: int) -> list[int]:
    return [d for d in DIGITS if is_valid(grid, r, c, d)]


def check_grid(grid) -> None:
    """Raise ValueError unless `grid` is 9 rows of 9 ints in 0..9."""
    if not isinstance(grid, list) or len(grid) != SIZE:
        raise ValueError(f"grid must be a list of {SIZE} rows")
    for r, row in enumerate(grid):
        if not isinstance(row, list) or len(row) != SIZE:
            raise ValueError(f"row {r} must be a list of {SIZE} cells")
        for c, v in enumerate(row):
            if isinstance(v, bool) or not isinstance(v, int) or not 0 <= v <= SIZE:
                raise ValueError(f"cell ({r}, {c}) holds {v!r}; expected an int in 0..{SIZE}")


def _duplicates(vals) -> set:
    seen = set()
    dups = set()
    for v in vals:
        if v == 0:
            continue
        if v in seen:
            dups.add(v)
        seen.add(v)
    return dups


def sanity_check(grid: Grid) -> dict:
    """Report repeated digits per row, column and box.

    Returns {"ok": bool, "issues": [{"type": "duplicate", "unit": "r0", "digits": [...], "cells": [...]}, ...]}.
    """
    issues = []
    for r in range(SIZE):
        dups = _duplicates(grid[r])
        if dups:
            cells = [(r, c) for c in range(SIZE) if grid[r][c] in dups]
            issues.append({"type": "duplicate", "unit": f"r{r}", "digits": sorted(dups), "cells": cells})
    for c in range(SIZE):
        col = [grid[r][c] for r in range(SIZE)]
        dups = _duplicates(col)
        if dups:
            cells = [(r, c) for r in range(SIZE) if grid[r][c] in dups]
            issues.append({"type": "duplicate", "unit": f"c{c}", "digits": sorted(dups), "cells": cells})
    for b in range(SIZE):
        cells = unit_cells_box(b)
        dups = _duplicates(grid[r][c] for r, c in cells)
        if dups:
            bad = [(r, c) for r, c in cells if grid[r][c] in dups]
            issues.append({"type": "duplicate", "unit": f"b{b}", "digits": sorted(dups), "cells": bad})
    return {"ok": len(issues) == 0, "issues": issues}
