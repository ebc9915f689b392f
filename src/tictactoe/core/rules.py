from __future__ import annotations
from typing import TYPE_CHECKING, List, Optional, Tuple

from tictactoe.config import BOARD_SIZE
from tictactoe.types import Coord, Player

if TYPE_CHECKING:
    from tictactoe.core.board import Board

Line = Tuple[Coord, ...]


def _lines() -> List[Line]:
    n = BOARD_SIZE
    rows = [tuple((r, c) for c in range(n)) for r in range(n)]
    cols = [tuple((r, c) for r in range(n)) for c in range(n)]
    diagonals = [
        tuple((i, i) for i in range(n)),
        tuple((i, n - 1 - i) for i in range(n)),
    ]
    return rows + cols + diagonals


# Scan order is the tie-break when several lines are complete at once:
# rows, then columns, then the main diagonal, then the anti-diagonal.
LINES: Tuple[Line, ...] = tuple(_lines())


def check_winner_with_line(board: "Board") -> Optional[Tuple[Player, Line]]:
    g = board.grid
    for line in LINES:
        (r0, c0) = line[0]
        p = g[r0][c0]
        if p is not None and all(g[r][c] == p for r, c in line[1:]):
            return p, line
    return None


def check_winner(board: "Board") -> Optional[Player]:
    res = check_winner_with_line(board)
    return res[0] if res else None


def is_draw(board: "Board") -> bool:
    return board.is_full() and check_winner(board) is None
