from tictactoe.core.board import Board, BoardState, Ended, Ongoing
from tictactoe.core.move import Move
from tictactoe.errors import (
    GameAlreadyEnded,
    InvalidMove,
    InvalidPosition,
    NoAvailableMoves,
    TicTacToeError,
)
from tictactoe.types import Player

__all__ = [
    "Board",
    "BoardState",
    "Ended",
    "GameAlreadyEnded",
    "InvalidMove",
    "InvalidPosition",
    "Move",
    "NoAvailableMoves",
    "Ongoing",
    "Player",
    "TicTacToeError",
]
