"""Board persistence and display: the plain-text board format, zero-padded file names, data folders, and batch generate/solve to disk."""

# sudoku_io.py
# Text format: 9 lines of 9 digits separated by spaces, 0 = blank.
#   5 3 0 0 7 0 0 0 0
#   ...
# The reader also accepts compact lines ("530070000"), skips blank lines and '#' comments.

from __future__ import annotations

import random
from pathlib import Path
from typing import Optional

from tqdm import tqdm

from types_sudoku import Grid

from .backtracking import solve
from .generator import generate_board
from .solver_core import BOX, SIZE


class BoardFormatError(ValueError):
    """A board file does not hold 9 rows of 9 digits."""


def get_file_name(index: int, destination: str | Path, prefix: str) -> Path:
    # e.g. data/puzzles/0001PUZZLE.txt
    return Path(destination) / f"{index:04d}{prefix}.txt"


def create_folder(folder: str | Path, verbose: bool = True) -> Path:
    p = Path(folder)
    if p.is_dir():
        if verbose:
            print(f"[mkdir] exists: {p}")
        return p
    p.mkdir(parents=True, exist_ok=True)
    if verbose:
        print(f"[mkdir] created: {p}")
    return p


def init_data_folder(puzzles_dir: str | Path = "data/puzzles/",
                     solutions_dir: str | Path = "data/solutions/",
                     verbose: bool = True) -> None:
    create_folder(Path(puzzles_dir).parent, verbose)
    create_folder(puzzles_dir, verbose)
    create_folder(solutions_dir, verbose)


def board_to_text(grid: Grid) -> str:
    return "".join(" ".join(str(v) for v in row) + "\n" for row in grid)


def parse_board(text: str, source: str = "<string>") -> Grid:
    rows = []
    for lineno, raw in enumerate(text.splitlines(), 1):
        line = raw.strip()
        if not line or line.startswith("#"):
            continue
        tokens = line.split() if any(ch.isspace() for ch in line) else list(line)
        if len(tokens) != SIZE or not all(len(t) == 1 and t.isdigit() for t in tokens):
            raise BoardFormatError(f"{source}:{lineno}: expected {SIZE} digits, got {line!r}")
        rows.append([int(t) for t in tokens])
    if len(rows) != SIZE:
        raise BoardFormatError(f"{source}: expected {SIZE} rows, got {len(rows)}")
    return rows


def write_board(grid: Grid, path: str | Path) -> Path:
    p = Path(path)
    p.write_text(board_to_text(grid), encoding="utf-8")
    return p


def read_board(path: str | Path) -> Grid:
    p = Path(path)
    return parse_board(p.read_text(encoding="utf-8"), source=str(p))


def format_board(grid: Grid) -> str:
    """Human-readable board with box separators; blanks shown as '.'."""
    sep = "-" * 21
    lines = []
    for r, row in enumerate(grid):
        if r and r % BOX == 0:
            lines.append(sep)
        parts = []
        for c, v in enumerate(row):
            if c and c % BOX == 0:
                parts.append("|")
            parts.append(str(v) if v else ".")
        lines.append(" ".join(parts))
    return "\n".join(lines)


def print_board(grid: Grid) -> None:
    print(format_board(grid))


def create_and_save_n_puzzles(num_puzzles: int,
                              empty_boxes: int,
                              destination: str | Path,
                              prefix: str = "PUZZLE",
                              rng: Optional[random.Random] = None,
                              verbose: bool = True) -> list[Path]:
    """Generate puzzles 1..num_puzzles and write each to `destination`."""
    Path(destination).mkdir(parents=True, exist_ok=True)
    written = []
    for i in tqdm(range(1, num_puzzles + 1), desc="generate", ncols=88, leave=False, disable=not verbose):
        grid = generate_board(empty_boxes, rng)
        written.append(write_board(grid, get_file_name(i, destination, prefix)))
    if verbose:
        print(f"[save] {len(written)} puzzles -> {destination}")
    return written


def solve_and_save_n_puzzles(num_puzzles: int,
                             source: str | Path,
                             destination: str | Path,
                             prefix: str = "SOLUTION",
                             puzzle_prefix: str = "PUZZLE",
                             efficient: bool = False,
                             verbose: bool = True) -> int:
    """Solve saved puzzles 1..num_puzzles from `source` into `destination`.

    Unsolvable puzzles are reported and skipped. Returns the number solved.
    """
    Path(destination).mkdir(parents=True, exist_ok=True)
    solved = 0
    for i in tqdm(range(1, num_puzzles + 1), desc="solve", ncols=88, leave=False, disable=not verbose):
        src = get_file_name(i, source, puzzle_prefix)
        grid = read_board(src)
        if not solve(grid, efficient=efficient):
            if verbose:
                print(f"[fail] no solution for {src}")
            continue
        write_board(grid, get_file_name(i, destination, prefix))
        solved += 1
    if verbose:
        print(f"[solve] {solved}/{num_puzzles} solutions -> {destination}")
    return solved
