"""
Depth-first backtracking over the first undetermined cell.

The search keeps an explicit stack of branch points instead of recursing,
so a blank 25x25 grid does not hit the interpreter recursion limit.
"""

from collections import deque
from dataclasses import dataclass, field
from typing import Callable, Optional

from .grid import Grid, Snapshot
from .propagation import Outcome, propagate_on_assignment, propagate_to_fixpoint


@dataclass
class SolveStats:
    """Counters collected while solving."""

    sweeps: int = 0
    placements: int = 0
    branches: int = 0
    backtracks: int = 0
    max_depth: int = 0


@dataclass(frozen=True)
class BranchEvent:
    """
    A search decision passed to the `on_branch` hook.

    `action` is "assume" just before a candidate is tried and "reject" once
    that candidate led to a dead end. `depth` starts at 1 for the outermost
    branch point.
    """

    action: str
    index: int
    row: int
    col: int
    digit: int
    depth: int


BranchHook = Callable[[BranchEvent], None]


@dataclass
class _Frame:
    snapshot: Snapshot
    index: int
    remaining: deque = field(default_factory=deque)
    digit: int = 0


def _event(grid: Grid, action: str, frame: _Frame, depth: int) -> BranchEvent:
    topology = grid.topology
    return BranchEvent(
        action=action,
        index=frame.index,
        row=topology.row_of(frame.index),
        col=topology.col_of(frame.index),
        digit=frame.digit,
        depth=depth,
    )


def assume_and_solve(grid: Grid, on_branch: Optional[BranchHook] = None,
                     stats: Optional[SolveStats] = None) -> bool:
    """
    Resolve a stalled grid by trying each candidate of its first Empty cell.

    Every trial starts from a snapshot taken at the branch point, assigns the
    candidate, propagates to a fixed point and branches again if needed. A
    trial that hits a contradiction is rolled back and the next candidate is
    tried; a branch point with no candidates left hands failure to its parent.

    Args:
        grid: grid in a consistent, stalled state (modified in place)
        on_branch: optional callback receiving a BranchEvent per decision
        stats: optional counters to update

    Returns:
        bool: True with the grid solved, False when no candidate works. On
            failure the grid is restored to the outermost branch point.
    """
    stack: list[_Frame] = []

    def push():
        index = grid.first_empty()
        frame = _Frame(grid.snapshot(), index, deque(grid.cell(index).candidates()))
        stack.append(frame)
        if stats is not None:
            stats.max_depth = max(stats.max_depth, len(stack))

    push()
    while stack:
        frame = stack[-1]
        if not frame.remaining:
            stack.pop()
            grid.restore(frame.snapshot)
            if stack and on_branch is not None:
                on_branch(_event(grid, "reject", stack[-1], len(stack)))
            if stack and stats is not None:
                stats.backtracks += 1
            continue

        grid.restore(frame.snapshot)
        frame.digit = frame.remaining.popleft()
        if on_branch is not None:
            on_branch(_event(grid, "assume", frame, len(stack)))
        if stats is not None:
            stats.branches += 1

        grid.cell(frame.index).assign(frame.digit)
        propagate_on_assignment(grid, frame.index)

        outcome = propagate_to_fixpoint(grid, stats)
        if outcome is Outcome.SOLVED:
            return True
        if outcome is Outcome.STALLED:
            push()
            continue

        if on_branch is not None:
            on_branch(_event(grid, "reject", frame, len(stack)))
        if stats is not None:
            stats.backtracks += 1

    return False
