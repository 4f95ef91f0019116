"""
Grid state: cell values and candidate masks for an N^2 x N^2 puzzle.
"""

import math
from dataclasses import dataclass
from typing import Iterator, Sequence

import numpy as np

from .cell import Cell
from .propagation import propagate_on_assignment
from .topology import Topology, topology_for


@dataclass(frozen=True)
class Snapshot:
    """Full copy of a grid's state, used to undo a speculative assignment."""

    values: np.ndarray
    candidates: np.ndarray


def box_size_for_board(board: np.ndarray) -> int:
    """Box size N of a square board with side N^2."""
    if board.ndim != 2 or board.shape[0] != board.shape[1]:
        raise ValueError(f"Board must be square, got shape {board.shape}")
    box_size = math.isqrt(board.shape[0])
    if box_size < 1 or box_size * box_size != board.shape[0]:
        raise ValueError(f"Board side must be a perfect square, got {board.shape[0]}")
    return box_size


class Grid:
    """
    NCOUNT^2 cells laid out row-major, NCOUNT = box_size^2.

    `values[i]` is 0 for an Empty cell or its digit. `candidates[i, d-1]` is
    True while digit d is still possible for Empty cell i; Filled cells keep
    an all-False row.
    """

    def __init__(self, box_size: int = 3):
        self.topology: Topology = topology_for(box_size)
        n = self.topology.ncount
        self.values = np.zeros(n * n, dtype=np.int32)
        self.candidates = np.ones((n * n, n), dtype=bool)

    @classmethod
    def from_digits(cls, digits: Sequence[int], box_size: int = 3) -> "Grid":
        """
        Build a grid from row-major digits (0 = empty) and eliminate the
        givens from their neighbors.

        Args:
            digits: NCOUNT^2 values in 0..NCOUNT
            box_size: N

        Returns:
            Grid: populated grid, possibly already contradictory
        """
        grid = cls(box_size)
        if len(digits) != grid.size:
            raise ValueError(f"Expected {grid.size} digits, got {len(digits)}")

        for index, digit in enumerate(digits):
            if digit:
                grid.cell(index).assign(int(digit))
        for index in np.flatnonzero(grid.values):
            propagate_on_assignment(grid, int(index))
        return grid

    @classmethod
    def from_board(cls, board: np.ndarray) -> "Grid":
        """Build a grid from a 2-D board array, inferring the box size from its side."""
        board = np.asarray(board)
        return cls.from_digits(board.ravel().tolist(), box_size_for_board(board))

    @property
    def box_size(self) -> int:
        return self.topology.box_size

    @property
    def ncount(self) -> int:
        return self.topology.ncount

    @property
    def size(self) -> int:
        return self.topology.size

    def cell(self, index: int) -> Cell:
        return Cell(self.values, self.candidates, index)

    def __len__(self):
        return self.size

    def __iter__(self) -> Iterator[Cell]:
        for index in range(self.size):
            yield self.cell(index)

    def empty_indices(self) -> np.ndarray:
        return np.flatnonzero(self.values == 0)

    def first_empty(self) -> int | None:
        empty = self.empty_indices()
        if empty.size == 0:
            return None
        return int(empty[0])

    def count_empty(self) -> int:
        return int(np.count_nonzero(self.values == 0))

    def is_filled(self) -> bool:
        return not (self.values == 0).any()

    def has_contradiction(self) -> bool:
        """True when some Empty cell has run out of candidates."""
        return bool(((self.values == 0) & ~self.candidates.any(axis=1)).any())

    def snapshot(self) -> Snapshot:
        return Snapshot(self.values.copy(), self.candidates.copy())

    def restore(self, snapshot: Snapshot) -> None:
        self.values[:] = snapshot.values
        self.candidates[:] = snapshot.candidates

    def copy(self) -> "Grid":
        clone = Grid(self.box_size)
        clone.restore(self.snapshot())
        return clone

    def to_board(self) -> np.ndarray:
        """Cell values as an NCOUNT x NCOUNT array (0 = empty)."""
        return self.values.reshape(self.ncount, self.ncount).copy()
