"""
Text rendering of boards.
"""

import numpy as np

from .grid import box_size_for_board


def format_board(board: np.ndarray, blank: str = ".") -> str:
    """Render an N^2 x N^2 board as boxes framed by +---+ lines (0 = empty)."""
    board = np.asarray(board)
    box_size = box_size_for_board(board)
    width = len(str(board.shape[0]))

    def segment(values) -> str:
        cells = [str(v).rjust(width) if v != 0 else blank.rjust(width) for v in values]
        return " " + " ".join(cells) + " "

    rule_width = len(segment(board[0, :box_size]))
    rule = "+" + "+".join(["-" * rule_width] * box_size) + "+"

    lines = [rule]
    for r, row in enumerate(board):
        parts = [segment(row[b * box_size:(b + 1) * box_size]) for b in range(box_size)]
        lines.append("|" + "|".join(parts) + "|")
        if (r + 1) % box_size == 0:
            lines.append(rule)
    return "\n".join(lines)
