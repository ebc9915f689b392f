from __future__ import annotations

import pytest

from tictactoe.types import other, parse_player
from tictactoe.ui.prompts import parse_mode, parse_position


def test_parse_position():
    assert parse_position(" 7 \n") == 7
    assert parse_position("12") == 12  # range is checked by Move
    assert parse_position("q") is None
    assert parse_position("QUIT") is None


@pytest.mark.parametrize("raw", ["", "abc", "-1", "4.5"])
def test_parse_position_rejects_garbage(raw):
    with pytest.raises(ValueError):
        parse_position(raw)


def test_parse_mode():
    assert parse_mode("1") == "computer"
    assert parse_mode(" 2\n") == "human"
    assert parse_mode("3") is None


def test_parse_player():
    assert parse_player("x") == "X"
    assert parse_player("O\n") == "O"
    assert parse_player("oops") == "O"
    assert parse_player("z") is None
    assert parse_player("   ") is None


def test_other():
    assert other("X") == "O"
    assert other("O") == "X"
