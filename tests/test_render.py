# tests/test_render.py
import numpy as np

from sudoku_cp.parsing import read_digits
from sudoku_cp.render import format_board

from conftest import EASY_PUZZLE, digits_of


def test_9x9_layout():
    board = np.array(digits_of(EASY_PUZZLE)).reshape(9, 9)
    lines = format_board(board).splitlines()
    assert len(lines) == 13
    assert lines[0] == "+-------+-------+-------+"
    assert lines[1] == "| 5 3 . | . 7 . | . . . |"
    assert lines[4] == lines[0]


def test_custom_blank():
    board = np.zeros((4, 4), dtype=int)
    assert format_board(board, blank=" ").splitlines()[1] == "|     |     |"


def test_wide_digits_are_aligned():
    board = np.zeros((16, 16), dtype=int)
    board[0, 0] = 16
    board[0, 1] = 3
    line = format_board(board).splitlines()[1]
    assert line.startswith("| 16  3  .  . |")


def test_rendered_board_reads_back():
    board = np.array(digits_of(EASY_PUZZLE)).reshape(9, 9)
    digits, box_size = read_digits(format_board(board))
    assert box_size == 3
    assert digits == digits_of(EASY_PUZZLE)
