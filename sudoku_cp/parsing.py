"""
Reading puzzles from text.

Two layouts are accepted:
- compact, one character per cell (boxes up to 3x3, digits 1-9)
- whitespace-separated tokens, required once digits reach two characters

`0`, `.` and `_` mark an empty cell. Grid decoration (`|` and rules made
of `+` and `-`) is skipped, so the output of `format_board` reads back in.
"""

import math
import re
from pathlib import Path
from typing import List, Optional

from .errors import MalformedInputError
from .grid import Grid

BLANK_TOKENS = {"0", ".", "_"}
RULE_CHARS = "+-"

_CHUNK = re.compile(r"[^\s|]+")
_RULE = re.compile("[" + re.escape(RULE_CHARS) + "]+")
_COMMENT = re.compile(r"#.*$", re.MULTILINE)


def _box_size_for_count(count: int) -> Optional[int]:
    box_size = math.isqrt(math.isqrt(count))
    if box_size >= 2 and box_size ** 4 == count:
        return box_size
    return None


def _split_tokens(text: str, box_size: Optional[int]) -> tuple[List[str], int]:
    # Frame rules such as "+-------+" are layout; a sign next to a digit is not.
    chunks = [chunk for chunk in _CHUNK.findall(text) if not _RULE.fullmatch(chunk)]
    chars = [ch for chunk in chunks for ch in chunk]

    if box_size is not None:
        size = box_size ** 4
        if box_size <= 3 and len(chunks) != size:
            return chars, box_size
        return chunks, box_size

    # Separated tokens win when their count already describes a full grid.
    for tokens in (chunks, chars):
        inferred = _box_size_for_count(len(tokens))
        if inferred is not None and (tokens is chunks or inferred <= 3):
            return tokens, inferred

    raise MalformedInputError(
        f"Cannot infer grid size from {len(chunks)} tokens; expected N^4 cells (81 for 9x9)"
    )


def read_digits(text: str, box_size: Optional[int] = None) -> tuple[List[int], int]:
    """
    Turn puzzle text into row-major cell values.

    Args:
        text: puzzle in compact or whitespace-separated layout
        box_size: N if known; inferred from the cell count otherwise

    Returns:
        (digits, box_size) with 0 for empty cells

    Raises:
        MalformedInputError: on short or long input, unknown tokens or digits
            outside 1..N^2
    """
    if box_size is not None and box_size < 1:
        raise MalformedInputError(f"Box size must be positive, got {box_size}")

    tokens, box_size = _split_tokens(text, box_size)
    ncount = box_size * box_size
    size = ncount * ncount

    if len(tokens) < size:
        raise MalformedInputError(f"Puzzle ended early: expected {size} cells, got {len(tokens)}")
    if len(tokens) > size:
        raise MalformedInputError(f"Too many cells: expected {size}, got {len(tokens)}")

    digits = []
    for position, token in enumerate(tokens):
        if token in BLANK_TOKENS:
            digits.append(0)
            continue
        if not token.isdecimal():
            raise MalformedInputError(f"Unexpected token {token!r} at cell {position + 1}")
        value = int(token)
        if not 0 <= value <= ncount:
            raise MalformedInputError(
                f"Digit {value} at cell {position + 1} outside range 1-{ncount}"
            )
        digits.append(value)

    return digits, box_size


def parse_puzzle(text: str, box_size: Optional[int] = None) -> Grid:
    """Parse puzzle text into a Grid with givens already propagated."""
    digits, box_size = read_digits(text, box_size)
    return Grid.from_digits(digits, box_size)


def read_puzzle_file(path, box_size: Optional[int] = None) -> Grid:
    """Load a puzzle file; `#` starts a comment running to end of line."""
    try:
        text = Path(path).read_text(encoding="utf-8")
    except UnicodeDecodeError as e:
        raise MalformedInputError(f"Puzzle file is not UTF-8 text: {path}") from e
    except OSError as e:
        raise MalformedInputError(f"Cannot read puzzle file {path}: {e.strerror}") from e
    return parse_puzzle(_COMMENT.sub("", text), box_size)
