"""
Propagation-plus-backtracking Sudoku solver for any box size.
"""

from typing import Optional

import numpy as np

from .errors import InvariantViolation
from .grid import Grid
from .propagation import Outcome, propagate_to_fixpoint
from .search import BranchHook, SolveStats, assume_and_solve
from .validator import find_duplicate_givens, is_correct


def _solve(grid, on_branch, stats) -> tuple[bool, str]:
    ok, reason = find_duplicate_givens(grid)
    if not ok:
        return False, reason

    outcome = propagate_to_fixpoint(grid, stats)
    if outcome is Outcome.STALLED and assume_and_solve(grid, on_branch, stats):
        return True, ""
    if outcome is Outcome.SOLVED:
        return True, ""
    return False, "No solution found"


def solve(grid: Grid, on_branch: Optional[BranchHook] = None,
          stats: Optional[SolveStats] = None) -> bool:
    """
    Solve `grid` in place. Returns True if it ends up completely filled.

    Givens that repeat a digit in one group fail straight away. On any other
    failure the grid is left in a consistent but unspecified state.
    """
    solved, _ = _solve(grid, on_branch, stats)
    return solved


def solve_puzzle(board: np.ndarray, on_branch: Optional[BranchHook] = None,
                 stats: Optional[SolveStats] = None) -> tuple[np.ndarray | None, str]:
    """
    Return a solved copy of the board, or (None, reason) if unsolvable or invalid.
    The input board is never modified.
    """
    grid = Grid.from_board(board)
    if stats is None:
        stats = SolveStats()
    solved, reason = _solve(grid, on_branch, stats)
    if not solved:
        return None, reason
    if not is_correct(grid):
        raise InvariantViolation("Solver reported success on a grid that fails validation")

    if stats.branches == 0:
        return grid.to_board(), f"Solved by propagation in {stats.sweeps} sweeps"
    return grid.to_board(), f"Solved with {stats.branches} guesses ({stats.backtracks} backtracks)"
