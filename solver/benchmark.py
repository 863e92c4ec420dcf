# solver/benchmark.py
# ------------------------------------------------------------
# Plain vs. MRV solver timing:
#  - generate one puzzle per trial
#  - solve two copies of it, one with each solver
#  - collect wall-clock seconds (perf_counter) into numpy arrays
# ------------------------------------------------------------

from __future__ import annotations

import random
import time
from dataclasses import dataclass, field
from typing import Dict, Optional

import numpy as np
from tqdm import tqdm

from .backtracking import solve
from .generator import generate_board
from .solver_core import clone_grid


@dataclass
class BenchmarkReport:
    num_puzzles: int
    empty_boxes: int
    plain_seconds: np.ndarray = field(default_factory=lambda: np.zeros(0, np.float64))
    efficient_seconds: np.ndarray = field(default_factory=lambda: np.zeros(0, np.float64))
    plain_solved: int = 0
    efficient_solved: int = 0

    @property
    def plain_total(self) -> float:
        return float(self.plain_seconds.sum())

    @property
    def efficient_total(self) -> float:
        return float(self.efficient_seconds.sum())

    @property
    def plain_mean(self) -> float:
        return float(self.plain_seconds.mean()) if self.plain_seconds.size else 0.0

    @property
    def efficient_mean(self) -> float:
        return float(self.efficient_seconds.mean()) if self.efficient_seconds.size else 0.0

    @property
    def plain_median(self) -> float:
        return float(np.median(self.plain_seconds)) if self.plain_seconds.size else 0.0

    @property
    def efficient_median(self) -> float:
        return float(np.median(self.efficient_seconds)) if self.efficient_seconds.size else 0.0

    @property
    def speedup(self) -> float:
        # plain / efficient; >1 means the MRV solver was faster overall
        if self.efficient_total <= 0.0:
            return float("inf") if self.plain_total > 0.0 else 1.0
        return self.plain_total / self.efficient_total

    def summary(self) -> Dict:
        return {
            "num_puzzles": self.num_puzzles,
            "empty_boxes": self.empty_boxes,
            "plain": {"solved": self.plain_solved, "total_s": self.plain_total,
                      "mean_s": self.plain_mean, "median_s": self.plain_median},
            "efficient": {"solved": self.efficient_solved, "total_s": self.efficient_total,
                          "mean_s": self.efficient_mean, "median_s": self.efficient_median},
            "speedup": self.speedup,
        }


def compare_sudoku_solvers(num_puzzles: int,
                           empty_boxes: int,
                           rng: Optional[random.Random] = None,
                           verbose: bool = True) -> BenchmarkReport:
    """Time both solvers on the same `num_puzzles` generated puzzles."""
    plain = np.zeros(num_puzzles, np.float64)
    efficient = np.zeros(num_puzzles, np.float64)
    plain_ok = 0
    efficient_ok = 0
    for i in tqdm(range(num_puzzles), desc=f"bench n={num_puzzles} empty={empty_boxes}",
                  ncols=88, leave=False, disable=not verbose):
        puzzle = generate_board(empty_boxes, rng)

        g = clone_grid(puzzle)
        t0 = time.perf_counter()
        plain_ok += int(solve(g, efficient=False))
        plain[i] = time.perf_counter() - t0

        g = clone_grid(puzzle)
        t0 = time.perf_counter()
        efficient_ok += int(solve(g, efficient=True))
        efficient[i] = time.perf_counter() - t0

    report = BenchmarkReport(num_puzzles, empty_boxes, plain, efficient, plain_ok, efficient_ok)
    if verbose:
        print(f"[bench] puzzles={num_puzzles} empty={empty_boxes} | "
              f"plain total={report.plain_total:.4f}s mean={report.plain_mean * 1e3:.3f}ms | "
              f"mrv total={report.efficient_total:.4f}s mean={report.efficient_mean * 1e3:.3f}ms | "
              f"speedup={report.speedup:.2f}x")
    return report
