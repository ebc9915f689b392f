from __future__ import annotations

from tictactoe.core.board import Board
from tictactoe.core.move import Move


class HumanAgent:
    """Marks a seat as typed at the terminal; run_game reads its moves from input()."""

    name = "Human"

    def choose_move(self, board: Board) -> Move:
        raise RuntimeError("HumanAgent moves come from the prompt, not choose_move().")
