from __future__ import annotations
import random
from typing import Optional

from tictactoe.core.board import Board
from tictactoe.core.move import Move
from tictactoe.errors import NoAvailableMoves


class RandomAgent:
    name = "Random AI"

    def __init__(self, rng: Optional[random.Random] = None) -> None:
        self.rng = rng or random.Random()

    def choose_move(self, board: Board) -> Move:
        positions = board.empty_positions()
        if not positions:
            raise NoAvailableMoves()
        return Move(self.rng.choice(positions), board.get_next_player())
