"""
Single cell view over a grid's numpy state.

A cell is either Filled (value 1..ncount, no candidates) or Empty (value 0,
with a boolean candidate row where column d-1 stands for digit d).
"""

import numpy as np


class Cell:
    """
    Accessor for one cell of a grid.

    The cell does not own its storage: `values` and `mask` belong to the grid
    and `index` selects the row. `assign` and `eliminate` are the only
    mutating operations.
    """

    __slots__ = ("_values", "_mask", "_index")

    def __init__(self, values: np.ndarray, mask: np.ndarray, index: int):
        self._values = values
        self._mask = mask
        self._index = index

    @classmethod
    def detached(cls, ncount: int, digit: int = 0) -> "Cell":
        """Create a cell with its own storage, Empty with all candidates unless `digit` is given."""
        cell = cls(np.zeros(1, dtype=np.int32), np.ones((1, ncount), dtype=bool), 0)
        if digit:
            cell.assign(digit)
        return cell

    @property
    def index(self) -> int:
        return self._index

    @property
    def ncount(self) -> int:
        return self._mask.shape[1]

    def assign(self, digit: int) -> None:
        if not 1 <= digit <= self.ncount:
            raise ValueError(f"Digit must be 1-{self.ncount}, got {digit}")
        self._values[self._index] = digit
        self._mask[self._index] = False

    def eliminate(self, digit: int) -> None:
        # Digits outside 1..ncount are never candidates.
        if self._values[self._index] == 0 and 1 <= digit <= self.ncount:
            self._mask[self._index, digit - 1] = False

    def is_empty(self) -> bool:
        return bool(self._values[self._index] == 0)

    def is_filled(self) -> bool:
        return not self.is_empty()

    @property
    def digit(self) -> int:
        if self.is_empty():
            raise ValueError(f"Cell {self._index} is empty")
        return int(self._values[self._index])

    def candidates(self) -> tuple[int, ...]:
        """Remaining candidate digits in ascending order."""
        if self.is_filled():
            raise ValueError(f"Cell {self._index} is filled")
        return tuple(int(d) + 1 for d in np.flatnonzero(self._mask[self._index]))

    def has_candidate(self, digit: int) -> bool:
        if not 1 <= digit <= self.ncount:
            return False
        return bool(self._mask[self._index, digit - 1])

    def has_unique_candidate(self) -> bool:
        return self.is_empty() and int(self._mask[self._index].sum()) == 1

    def is_contradictory(self) -> bool:
        return self.is_empty() and not self._mask[self._index].any()

    def __repr__(self):
        if self.is_filled():
            return f"Cell({self._index}, digit={self.digit})"
        return f"Cell({self._index}, candidates={self.candidates()})"
