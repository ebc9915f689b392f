# src/tictactoe/core/move.py

from __future__ import annotations
from dataclasses import dataclass

from tictactoe.config import BOARD_SIZE, NUM_CELLS
from tictactoe.errors import InvalidPosition
from tictactoe.types import Player


@dataclass(frozen=True, slots=True)
class Move:
    """
    A player's mark at a 1-based board position (row-major, 1..9).

    Only the position range is checked here. Whether the move fits the
    current board (turn, occupancy) is decided by Board.make_move.
    """

    position: int
    player: Player

    def __post_init__(self) -> None:
        p = self.position
        if isinstance(p, bool) or not isinstance(p, int) or not 1 <= p <= NUM_CELLS:
            raise InvalidPosition(p)

    @classmethod
    def create(cls, position: int, player: Player) -> "Move":
        return cls(position, player)

    @property
    def row(self) -> int:
        return (self.position - 1) // BOARD_SIZE

    @property
    def col(self) -> int:
        return (self.position - 1) % BOARD_SIZE
