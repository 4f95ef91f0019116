"""
Read-only checks on grid contents.
"""

import numpy as np

from .grid import Grid
from .topology import GroupKind

_GROUP_LABELS = {
    GroupKind.ROW: "Row",
    GroupKind.COLUMN: "Column",
    GroupKind.BOX: "Box",
}


def is_correct(grid: Grid) -> bool:
    """True iff every row, column and box holds NCOUNT distinct filled digits."""
    expected = np.arange(1, grid.ncount + 1)
    for kind in GroupKind:
        for members in grid.topology.groups[kind]:
            if not np.array_equal(np.sort(grid.values[members]), expected):
                return False
    return True


def find_duplicate_givens(grid: Grid) -> tuple[bool, str]:
    """Check for a digit filled twice in one group; fails fast to avoid long searches."""
    for kind in GroupKind:
        for group, members in enumerate(grid.topology.groups[kind]):
            vals = grid.values[members]
            vals = vals[vals != 0]
            if len(vals) != len(np.unique(vals)):
                return False, f"{_GROUP_LABELS[kind]} {group + 1} has duplicate given digit"
    return True, ""
