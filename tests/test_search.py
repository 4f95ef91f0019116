# tests/test_search.py
import numpy as np

from sudoku_cp.grid import Grid
from sudoku_cp.propagation import Outcome, propagate_to_fixpoint
from sudoku_cp.search import SolveStats, assume_and_solve
from sudoku_cp.validator import is_correct

from conftest import HARD_SOLUTION, digits_of


def test_hard_puzzle_needs_guesses(hard_grid):
    assert propagate_to_fixpoint(hard_grid) is Outcome.STALLED
    stats = SolveStats()
    assert assume_and_solve(hard_grid, stats=stats)
    assert stats.branches > 0
    assert stats.max_depth >= 1
    assert is_correct(hard_grid)
    assert hard_grid.values.tolist() == digits_of(HARD_SOLUTION)


def test_branch_events_start_at_first_empty_cell(hard_grid):
    propagate_to_fixpoint(hard_grid)
    first = hard_grid.first_empty()
    first_candidates = hard_grid.cell(first).candidates()
    events = []
    assert assume_and_solve(hard_grid, on_branch=events.append)

    assert events[0].action == "assume"
    assert events[0].index == first
    assert events[0].depth == 1
    assert events[0].digit == first_candidates[0]
    assert (events[0].row, events[0].col) == divmod(first, 9)
    assert {e.action for e in events} <= {"assume", "reject"}


def test_rejections_match_backtracks(hard_grid):
    propagate_to_fixpoint(hard_grid)
    stats = SolveStats()
    events = []
    assume_and_solve(hard_grid, on_branch=events.append, stats=stats)
    assert sum(e.action == "assume" for e in events) == stats.branches
    assert sum(e.action == "reject" for e in events) == stats.backtracks


def test_blank_grids_are_filled_without_recursion_limits():
    for box_size in (2, 3):
        grid = Grid(box_size)
        assert assume_and_solve(grid)
        assert is_correct(grid)


def test_exhausted_search_restores_branch_point():
    # No cell of row 0 may hold a 1, yet no single cell is contradictory
    grid = Grid(2)
    for index in range(4):
        grid.cell(index).eliminate(1)
    assert propagate_to_fixpoint(grid) is Outcome.STALLED
    before = grid.snapshot()

    stats = SolveStats()
    assert not assume_and_solve(grid, stats=stats)
    assert stats.branches >= 3
    assert np.array_equal(grid.values, before.values)
    assert np.array_equal(grid.candidates, before.candidates)
