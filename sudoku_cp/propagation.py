"""
Constraint propagation: naked singles and hidden singles.
"""

from enum import Enum
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .grid import Grid
    from .search import SolveStats


class Outcome(Enum):
    SOLVED = "solved"
    CONTRADICTION = "contradiction"
    STALLED = "stalled"


def propagate_on_assignment(grid: "Grid", index: int) -> None:
    """Remove the digit of Filled cell `index` from every row, column and box neighbor."""
    digit = grid.cell(index).digit
    for peer in grid.topology.peers(index):
        grid.cell(int(peer)).eliminate(digit)


def _is_hidden_single(grid: "Grid", index: int, digit: int) -> bool:
    # Filled cells carry no candidates, so a column count of 1 means only `index` is left.
    for members in grid.topology.groups_of(index):
        if grid.candidates[members, digit - 1].sum() == 1:
            return True
    return False


def propagate_step(grid: "Grid", stats: "SolveStats | None" = None) -> bool:
    """
    One sweep over the cells that are Empty when the sweep starts.

    A cell is assigned the first of its candidates that is either its only
    candidate or the only place left for that digit in its row, column or
    box. Candidates are read when the sweep reaches the cell, so earlier
    assignments in the same sweep are already reflected.

    Returns:
        bool: True if at least one cell was assigned
    """
    progress = False
    for index in grid.empty_indices():
        index = int(index)
        cell = grid.cell(index)
        if cell.is_contradictory():
            continue

        for digit in cell.candidates():
            if cell.has_unique_candidate() or _is_hidden_single(grid, index, digit):
                cell.assign(digit)
                propagate_on_assignment(grid, index)
                progress = True
                if stats is not None:
                    stats.placements += 1
                break

    if stats is not None:
        stats.sweeps += 1
    return progress


def propagate_to_fixpoint(grid: "Grid", stats: "SolveStats | None" = None) -> Outcome:
    """Sweep until the grid is filled, contradictory, or no sweep makes progress."""
    while True:
        if grid.has_contradiction():
            return Outcome.CONTRADICTION
        if grid.is_filled():
            return Outcome.SOLVED
        if not propagate_step(grid, stats):
            return Outcome.STALLED
