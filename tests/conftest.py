# tests/conftest.py
import sys
from pathlib import Path

import pytest

# Add project root to sys.path so "sudoku_cp" can be imported without installing
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

# Wikipedia example puzzle, solvable with singles alone
EASY_PUZZLE = (
    "530070000"
    "600195000"
    "098000060"
    "800060003"
    "400803001"
    "700020006"
    "060000280"
    "000419005"
    "000080079"
)
EASY_SOLUTION = (
    "534678912"
    "672195348"
    "198342567"
    "859761423"
    "426853791"
    "713924856"
    "961537284"
    "287419635"
    "345286179"
)

# Arto Inkala's 2012 puzzle, needs guessing
HARD_PUZZLE = (
    "800000000"
    "003600000"
    "070090200"
    "050007000"
    "000045700"
    "000100030"
    "001000068"
    "008500010"
    "090000400"
)
HARD_SOLUTION = (
    "812753649"
    "943682175"
    "675491283"
    "154237896"
    "369845721"
    "287169534"
    "521974368"
    "438526917"
    "796318452"
)


def digits_of(puzzle):
    return [int(ch) for ch in puzzle]


@pytest.fixture
def easy_grid():
    from sudoku_cp.grid import Grid

    return Grid.from_digits(digits_of(EASY_PUZZLE))


@pytest.fixture
def hard_grid():
    from sudoku_cp.grid import Grid

    return Grid.from_digits(digits_of(HARD_PUZZLE))
