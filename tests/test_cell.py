# tests/test_cell.py
import pytest

from sudoku_cp.cell import Cell


def test_new_cell_has_all_candidates():
    cell = Cell.detached(9)
    assert cell.is_empty()
    assert not cell.is_filled()
    assert cell.candidates() == tuple(range(1, 10))
    assert not cell.has_unique_candidate()
    assert not cell.is_contradictory()


def test_assign_fills_and_clears_candidates():
    cell = Cell.detached(9)
    cell.assign(4)
    assert cell.is_filled()
    assert cell.digit == 4
    assert not cell.has_candidate(4)
    with pytest.raises(ValueError):
        cell.candidates()


def test_assign_rejects_out_of_range_digit():
    cell = Cell.detached(4)
    with pytest.raises(ValueError):
        cell.assign(5)
    with pytest.raises(ValueError):
        cell.assign(0)


def test_eliminate_shrinks_until_contradiction():
    cell = Cell.detached(4)
    cell.eliminate(1)
    cell.eliminate(1)
    cell.eliminate(3)
    assert cell.candidates() == (2, 4)
    cell.eliminate(2)
    assert cell.has_unique_candidate()
    cell.eliminate(4)
    assert cell.is_contradictory()
    assert cell.candidates() == ()


def test_eliminate_is_noop_on_filled_cell():
    cell = Cell.detached(9, digit=7)
    cell.eliminate(7)
    assert cell.digit == 7
    assert not cell.is_contradictory()


def test_digit_of_empty_cell_raises():
    with pytest.raises(ValueError):
        Cell.detached(9).digit


def test_out_of_range_digits_are_never_candidates():
    cell = Cell.detached(9)
    cell.eliminate(0)
    cell.eliminate(10)
    assert cell.candidates() == tuple(range(1, 10))
    assert not cell.has_candidate(0)
    assert not cell.has_candidate(10)
