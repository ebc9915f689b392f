# src/tictactoe/types.py

from __future__ import annotations
from typing import Literal, Optional, Tuple

Player = Literal["X", "O"]
Cell = Optional[Player]
Coord = Tuple[int, int]  # (row, col)

PLAYERS: Tuple[Player, Player] = ("X", "O")


def other(player: Player) -> Player:
    return "O" if player == "X" else "X"


def parse_player(text: str) -> Optional[Player]:
    s = text.strip()
    if not s:
        return None
    ch = s[0].upper()
    if ch == "X":
        return "X"
    if ch == "O":
        return "O"
    return None
