"""
Neighbor topology for an N^2 x N^2 grid: which cell indices share a row,
a column or a box.

Indices are row-major over the whole grid. Group arrays are built once per
box size and marked read-only.
"""

from enum import IntEnum
from functools import lru_cache

import numpy as np


class GroupKind(IntEnum):
    ROW = 0
    COLUMN = 1
    BOX = 2


class Topology:
    """
    Precomputed row, column and box groups for a given box size.

    Attributes:
        box_size (int): N, the side of one box
        ncount (int): N^2, digits per group and groups per kind
        groups (np.ndarray): shape (3, ncount, ncount), groups[kind][g] lists
            the member indices of group g
        membership (np.ndarray): shape (ncount^2, 3), the group index of each
            kind that a cell belongs to
    """

    def __init__(self, box_size: int):
        if box_size < 1:
            raise ValueError(f"Box size must be positive, got {box_size}")

        self.box_size = box_size
        self.ncount = box_size * box_size
        self.size = self.ncount * self.ncount

        n, b = self.ncount, box_size
        index = np.arange(self.size).reshape(n, n)
        rows = index
        cols = index.T
        boxes = index.reshape(b, b, b, b).transpose(0, 2, 1, 3).reshape(n, n)

        self.groups = np.stack([rows, cols, boxes])
        self.groups.setflags(write=False)

        flat = index.ravel()
        self.membership = np.stack(
            [flat // n, flat % n, (flat // n) // b * b + (flat % n) // b], axis=1
        )
        self.membership.setflags(write=False)

        peers = []
        for i in range(self.size):
            members = np.union1d(
                np.union1d(rows[self.membership[i, 0]], cols[self.membership[i, 1]]),
                boxes[self.membership[i, 2]],
            )
            cell_peers = members[members != i]
            cell_peers.setflags(write=False)
            peers.append(cell_peers)
        self._peers = tuple(peers)

    def neighbors(self, kind: GroupKind, group: int) -> tuple[int, ...]:
        """Return the ordered member indices of one row, column or box."""
        if not 0 <= group < self.ncount:
            raise IndexError(f"Group index {group} out of range 0..{self.ncount - 1}")
        return tuple(int(i) for i in self.groups[kind, group])

    def row_of(self, index: int) -> int:
        return index // self.ncount

    def col_of(self, index: int) -> int:
        return index % self.ncount

    def box_of(self, index: int) -> int:
        return self.row_of(index) // self.box_size * self.box_size + self.col_of(index) // self.box_size

    def groups_of(self, index: int) -> tuple[np.ndarray, np.ndarray, np.ndarray]:
        """Member arrays of the row, column and box containing `index`."""
        row, col, box = self.membership[index]
        return (
            self.groups[GroupKind.ROW, row],
            self.groups[GroupKind.COLUMN, col],
            self.groups[GroupKind.BOX, box],
        )

    def peers(self, index: int) -> np.ndarray:
        """All indices sharing a group with `index`, excluding itself."""
        return self._peers[index]


@lru_cache(maxsize=None)
def topology_for(box_size: int) -> Topology:
    """Shared topology instance for a box size."""
    return Topology(box_size)
