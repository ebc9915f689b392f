# src/tictactoe/core/board.py

from __future__ import annotations
import logging
from dataclasses import dataclass, field
from typing import List, Optional, Union

from tictactoe.config import BOARD_SIZE, NUM_CELLS
from tictactoe.core.move import Move
from tictactoe.core.rules import check_winner
from tictactoe.errors import GameAlreadyEnded, InvalidMove, InvalidPosition
from tictactoe.types import PLAYERS, Cell, Player, other

log = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class Ongoing:
    pass


@dataclass(frozen=True, slots=True)
class Ended:
    winner: Optional[Player] = None  # None means a tie

    @property
    def is_tie(self) -> bool:
        return self.winner is None


BoardState = Union[Ongoing, Ended]
ONGOING = Ongoing()


@dataclass(slots=True)
class Board:
    """
    3x3 tic-tac-toe grid.

    There is no stored "current player". Whose turn it is comes from the
    number of open cells: odd means the first mover plays, even means the
    other player does. The grid is only ever changed through make_move, so
    the two cannot drift apart.
    """

    first_player: Player = "X"
    grid: List[List[Cell]] = field(default_factory=list)

    def __post_init__(self) -> None:
        if self.first_player not in PLAYERS:
            raise ValueError(f"Unknown player {self.first_player!r}.")
        if not self.grid:
            self.grid = [[None for _ in range(BOARD_SIZE)] for _ in range(BOARD_SIZE)]
            return
        # A pre-filled grid must be reachable by alternating play from first_player.
        if len(self.grid) != BOARD_SIZE or any(len(row) != BOARD_SIZE for row in self.grid):
            raise ValueError(f"Board grid must be {BOARD_SIZE}x{BOARD_SIZE}.")
        firsts = sum(row.count(self.first_player) for row in self.grid)
        seconds = sum(row.count(other(self.first_player)) for row in self.grid)
        if firsts + seconds + self.open_slots() != NUM_CELLS:
            raise ValueError("Board grid holds unknown marks.")
        if firsts - seconds not in (0, 1):
            raise ValueError(
                f"Board grid is not reachable with {self.first_player} moving first "
                f"({firsts} vs {seconds} marks)."
            )

    def copy(self) -> "Board":
        b = Board(self.first_player)
        b.grid = [row[:] for row in self.grid]
        return b

    @staticmethod
    def _coords(position: int) -> tuple[int, int]:
        if isinstance(position, bool) or not isinstance(position, int) or not 1 <= position <= NUM_CELLS:
            raise InvalidPosition(position)
        return (position - 1) // BOARD_SIZE, (position - 1) % BOARD_SIZE

    def cell(self, position: int) -> Cell:
        r, c = self._coords(position)
        return self.grid[r][c]

    def is_slot_empty(self, position: int) -> bool:
        return self.cell(position) is None

    def open_slots(self) -> int:
        return sum(row.count(None) for row in self.grid)

    def empty_positions(self) -> List[int]:
        return [p for p in range(1, NUM_CELLS + 1) if self.is_slot_empty(p)]

    def is_full(self) -> bool:
        return self.open_slots() == 0

    def get_next_player(self) -> Player:
        if self.open_slots() % 2 == 0:
            return other(self.first_player)
        return self.first_player

    def check_valid_move(self, move: Move) -> bool:
        return move.player == self.get_next_player() and self.is_slot_empty(move.position)

    def game_winner(self) -> Optional[Player]:
        return check_winner(self)

    def is_over(self) -> bool:
        return self.game_winner() is not None or self.is_full()

    def make_move(self, move: Move) -> BoardState:
        """
        Apply ``move`` and report the resulting state.

        Raises GameAlreadyEnded once a line is complete or the grid is full,
        and InvalidMove when it is not ``move.player``'s turn or the cell is
        taken. A rejected move leaves the board untouched.
        """
        if self.is_over():
            raise GameAlreadyEnded()
        if not self.check_valid_move(move):
            log.debug("rejected %s at %d (next: %s)", move.player, move.position, self.get_next_player())
            raise InvalidMove(move)

        assert self.grid[move.row][move.col] is None, "validated move targets an occupied cell"
        self.grid[move.row][move.col] = move.player
        log.debug("%s played %d, %d open", move.player, move.position, self.open_slots())

        winner = self.game_winner()
        if winner is not None:
            log.debug("%s completed a line", winner)
            return Ended(winner)
        if self.is_full():
            log.debug("board full, tie")
            return Ended(None)
        return ONGOING
