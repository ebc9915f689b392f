from __future__ import annotations

import pytest

from tictactoe import config
from tictactoe.core.board import Board
from tictactoe.core.move import Move


@pytest.fixture(autouse=True)
def plain_terminal(monkeypatch):
    monkeypatch.setattr(config, "USE_COLOR", False)
    monkeypatch.setattr(config, "CLEAR_SCREEN", False)
    monkeypatch.setattr(config, "AI_THINK_DELAY_SEC", 0)


def play(board: Board, positions):
    """Play positions in order, each by whoever is next. Returns the last state."""
    state = None
    for p in positions:
        state = board.make_move(Move(p, board.get_next_player()))
    return state
