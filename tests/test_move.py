from __future__ import annotations

import dataclasses

import pytest

from tictactoe.core.move import Move
from tictactoe.errors import InvalidPosition


@pytest.mark.parametrize("position", [1, 9])
def test_bounds_accepted(position):
    assert Move(position, "X").position == position


@pytest.mark.parametrize("position", [0, 10, -1])
def test_out_of_range_rejected(position):
    with pytest.raises(InvalidPosition) as exc:
        Move(position, "O")
    assert exc.value.position == position
    assert str(position) in str(exc.value)


def test_non_int_rejected():
    with pytest.raises(InvalidPosition):
        Move("5", "X")
    with pytest.raises(InvalidPosition):
        Move(True, "X")


def test_row_major_mapping():
    assert (Move(1, "X").row, Move(1, "X").col) == (0, 0)
    assert (Move(3, "X").row, Move(3, "X").col) == (0, 2)
    assert (Move(4, "X").row, Move(4, "X").col) == (1, 0)
    assert (Move(9, "X").row, Move(9, "X").col) == (2, 2)


def test_create_alias_and_immutability():
    m = Move.create(5, "O")
    assert m == Move(5, "O")
    with pytest.raises(dataclasses.FrozenInstanceError):
        m.position = 6
