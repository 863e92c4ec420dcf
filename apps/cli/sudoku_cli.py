"""Command-line front end: generate puzzles to disk, solve them, compare the two solvers, or run the whole pipeline."""

# sudoku_cli.py
# Subcommands:
#   demo      generate a few boards, print them, solve, print solutions
#   generate  write N puzzles to the puzzles folder
#   solve     solve saved puzzles into the solutions folder
#   compare   time plain vs. MRV backtracking
#   run       folders + generate + solve + configured experiments
#   show      print a saved board
#
# Usage:
#   sudoku generate --num 10 --empty 45 --seed 0
#   sudoku solve --num 10 --efficient
#   sudoku compare --trials 100 --empty 45
#   sudoku run --config configs/default.yaml --yes

from __future__ import annotations

import argparse
import random
import sys
from typing import Optional

from pydantic import ValidationError

from solver.backtracking import solve
from solver.benchmark import compare_sudoku_solvers
from solver.config import ExperimentSpec, RunConfig, load_config
from solver.generator import generate_board
from solver.solver_core import count_empty
from solver.sudoku_io import (
    BoardFormatError,
    create_and_save_n_puzzles,
    init_data_folder,
    print_board,
    read_board,
    solve_and_save_n_puzzles,
)


def _rng(cfg: RunConfig) -> random.Random:
    return random.Random(cfg.seed)


def cmd_demo(cfg: RunConfig, args) -> int:
    rng = _rng(cfg)
    failures = 0
    for count in range(1, cfg.num_puzzles + 1):
        board = generate_board(cfg.empty_boxes, rng)
        print(f"Generated Sudoku Puzzle ({count_empty(board)} empty cells):")
        print_board(board)
        if solve(board, efficient=cfg.efficient):
            print("Solved Puzzle:")
            print_board(board)
        else:
            failures += 1
            print("[fail] Failed to solve the puzzle.")
        print(f"BOARD {count}")
        print("-" * 60)
    return 1 if failures else 0


def cmd_generate(cfg: RunConfig, args) -> int:
    create_and_save_n_puzzles(cfg.num_puzzles, cfg.empty_boxes, cfg.puzzles_dir,
                              cfg.puzzle_prefix, rng=_rng(cfg), verbose=not args.quiet)
    return 0


def cmd_solve(cfg: RunConfig, args) -> int:
    solved = solve_and_save_n_puzzles(cfg.num_puzzles, cfg.puzzles_dir, cfg.solutions_dir,
                                      cfg.solution_prefix, puzzle_prefix=cfg.puzzle_prefix,
                                      efficient=cfg.efficient, verbose=not args.quiet)
    return 0 if solved == cfg.num_puzzles else 1


def _run_experiments(cfg: RunConfig, rng: random.Random, verbose: bool) -> int:
    failures = 0
    for exp in cfg.experiments:
        report = compare_sudoku_solvers(exp.num_puzzles, exp.empty_boxes, rng=rng, verbose=verbose)
        failures += (exp.num_puzzles - report.plain_solved) + (exp.num_puzzles - report.efficient_solved)
    return 1 if failures else 0


def cmd_compare(cfg: RunConfig, args) -> int:
    rng = _rng(cfg)
    if args.trials is not None or args.empty is not None:
        trials = args.trials if args.trials is not None else cfg.num_puzzles
        exp = ExperimentSpec(num_puzzles=trials, empty_boxes=cfg.empty_boxes)
        cfg = cfg.model_copy(update={"experiments": [exp]})
    return _run_experiments(cfg, rng, verbose=not args.quiet)


def _confirm(stdin=None) -> bool:
    stdin = stdin or sys.stdin
    while True:
        print("...........Ready to run the program?..............Y/N:")
        line = stdin.readline()
        if not line:
            return False
        status = line.strip().upper()
        if status == "Y":
            return True
        if status == "N":
            print("See you next time")
            return False
        print("Invalid Input")


def cmd_run(cfg: RunConfig, args) -> int:
    print("......................WELCOME TO OUR SUDOKU SOLVER...........................")
    if not args.yes and not _confirm():
        return 0
    verbose = not args.quiet
    rng = _rng(cfg)
    init_data_folder(cfg.puzzles_dir, cfg.solutions_dir, verbose=verbose)
    create_and_save_n_puzzles(cfg.num_puzzles, cfg.empty_boxes, cfg.puzzles_dir,
                              cfg.puzzle_prefix, rng=rng, verbose=verbose)
    solved = solve_and_save_n_puzzles(cfg.num_puzzles, cfg.puzzles_dir, cfg.solutions_dir,
                                      cfg.solution_prefix, puzzle_prefix=cfg.puzzle_prefix,
                                      efficient=cfg.efficient, verbose=verbose)
    status = _run_experiments(cfg, rng, verbose)
    return 0 if solved == cfg.num_puzzles and status == 0 else 1


def cmd_show(cfg: RunConfig, args) -> int:
    print_board(read_board(args.path))
    return 0


def build_parser() -> argparse.ArgumentParser:
    common = argparse.ArgumentParser(add_help=False)
    common.add_argument("--config", type=str, default=None, help="YAML config (see configs/default.yaml)")
    common.add_argument("--seed", type=int, default=None)
    common.add_argument("--num", type=int, default=None, help="number of puzzles")
    common.add_argument("--empty", type=int, default=None, help="blank cells per puzzle (1..81)")
    common.add_argument("--puzzles", type=str, default=None, help="puzzles folder")
    common.add_argument("--solutions", type=str, default=None, help="solutions folder")
    common.add_argument("--efficient", action="store_true", default=None, help="use the MRV solver")
    common.add_argument("--quiet", action="store_true")

    ap = argparse.ArgumentParser(prog="sudoku", description="9x9 Sudoku generator and backtracking solver")
    sub = ap.add_subparsers(dest="command", required=True)
    sub.add_parser("demo", parents=[common]).set_defaults(func=cmd_demo)
    sub.add_parser("generate", parents=[common]).set_defaults(func=cmd_generate)
    sub.add_parser("solve", parents=[common]).set_defaults(func=cmd_solve)
    p = sub.add_parser("compare", parents=[common])
    p.add_argument("--trials", type=int, default=None, help="puzzles to time (single experiment)")
    p.set_defaults(func=cmd_compare)
    p = sub.add_parser("run", parents=[common])
    p.add_argument("--yes", action="store_true", help="skip the Y/N prompt")
    p.set_defaults(func=cmd_run)
    p = sub.add_parser("show", parents=[common])
    p.add_argument("path")
    p.set_defaults(func=cmd_show)
    return ap


def main(argv: Optional[list[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    try:
        cfg = load_config(
            args.config,
            seed=args.seed,
            num_puzzles=args.num,
            empty_boxes=args.empty,
            puzzles_dir=args.puzzles,
            solutions_dir=args.solutions,
            efficient=args.efficient,
        )
        return args.func(cfg, args)
    except (ValidationError, BoardFormatError, ValueError, FileNotFoundError) as e:
        print(f"[error] {e}", file=sys.stderr)
        return 2


if __name__ == "__main__":
    sys.exit(main())
