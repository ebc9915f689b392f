from __future__ import annotations
from typing import Iterable, Optional, Set

from tictactoe import config
from tictactoe.config import BOARD_SIZE
from tictactoe.core.board import Board
from tictactoe.types import Cell, Coord
from tictactoe.ui.colors import BOLD, DIM, FG_BLUE, FG_CYAN, FG_RED, FG_WHITE, REVERSE, c

BORDER = "-" * 19


def _piece(cell: Cell, position: int) -> str:
    if cell is None:
        return c(str(position), FG_WHITE)
    if cell == "X":
        return c("X", FG_RED)
    return c("O", FG_BLUE)


def clear_screen() -> None:
    if config.CLEAR_SCREEN:
        print("\033[2J\033[H", end="")


def format_board(board: Board, highlight: Optional[Iterable[Coord]] = None) -> str:
    """
    Draw the grid. Empty cells show their 1-based position so players know
    what to type; occupied cells show the mark.
    """
    hl: Set[Coord] = set(highlight) if highlight else set()

    lines = [c(BORDER, DIM)]
    for r in range(BOARD_SIZE):
        parts = []
        for col in range(BOARD_SIZE):
            p = _piece(board.grid[r][col], r * BOARD_SIZE + col + 1)
            if (r, col) in hl:
                p = c(p, REVERSE)
            parts.append(f"|  {p}  ")
        lines.append("".join(parts) + "|")
        lines.append(c(BORDER, DIM))
    lines.append(f"Total open slots: {board.open_slots()}")
    return "\n".join(lines)


def render(board: Board, status: str = "", highlight: Optional[Iterable[Coord]] = None) -> None:
    clear_screen()

    print(c("TIC TAC TOE", BOLD))
    if status:
        print(c(status, FG_CYAN))
    else:
        print()

    print(format_board(board, highlight))
