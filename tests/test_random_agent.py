from __future__ import annotations

import random

import pytest

from conftest import play
from tictactoe.ai.random_agent import RandomAgent
from tictactoe.core.board import Board
from tictactoe.errors import NoAvailableMoves


def test_picks_empty_slot_for_next_player():
    b = Board("O")
    play(b, [1, 5, 9])
    agent = RandomAgent(random.Random(7))
    for _ in range(50):
        move = agent.choose_move(b)
        assert move.position in b.empty_positions()
        assert move.player == b.get_next_player() == "X"


def test_covers_every_empty_slot():
    b = Board("X")
    play(b, [5])
    agent = RandomAgent(random.Random(0))
    seen = {agent.choose_move(b).position for _ in range(400)}
    assert seen == {1, 2, 3, 4, 6, 7, 8, 9}


def test_does_not_touch_board():
    b = Board("X")
    RandomAgent().choose_move(b)
    assert b.open_slots() == 9


def test_full_board_raises():
    b = Board("O")
    play(b, [1, 2, 3, 4, 6, 5, 8, 9, 7])
    with pytest.raises(NoAvailableMoves):
        RandomAgent().choose_move(b)


def test_self_play_always_terminates():
    rng = random.Random(42)
    agent = RandomAgent(rng)
    for _ in range(25):
        b = Board(rng.choice(["X", "O"]))
        while not b.is_over():
            b.make_move(agent.choose_move(b))
        assert b.game_winner() is not None or b.open_slots() == 0
