# src/tictactoe/errors.py

from __future__ import annotations
from typing import TYPE_CHECKING

from tictactoe.config import NUM_CELLS

if TYPE_CHECKING:
    from tictactoe.core.move import Move


class TicTacToeError(ValueError):
    """Base class for every recoverable game error."""


class InvalidPosition(TicTacToeError):
    def __init__(self, position: object) -> None:
        self.position = position
        super().__init__(
            f"Invalid position {position!r}. Position should be in the range 1 <= position <= {NUM_CELLS}."
        )


class InvalidMove(TicTacToeError):
    def __init__(self, move: "Move") -> None:
        self.move = move
        super().__init__(
            f"Invalid move: player {move.player} cannot play position {move.position}."
        )


class GameAlreadyEnded(TicTacToeError):
    def __init__(self) -> None:
        super().__init__("The game has already ended.")


class NoAvailableMoves(TicTacToeError):
    def __init__(self) -> None:
        super().__init__("No available positions for the computer to play.")
