from __future__ import annotations
from typing import Literal, Optional

Mode = Literal["computer", "human"]

QUIT_WORDS = {"q", "quit", "exit"}


def parse_position(raw: str) -> Optional[int]:
    """
    Read a board position typed by a player.

    Returns None when the player asks to quit. The range is not checked
    here; building the Move does that.
    """
    s = raw.strip().lower()
    if s in QUIT_WORDS:
        return None
    if not s.isdigit():
        raise ValueError("Invalid position selected. Enter a number between 1 and 9, or q.")
    return int(s)


def parse_mode(raw: str) -> Optional[Mode]:
    s = raw.strip()
    if s == "1":
        return "computer"
    if s == "2":
        return "human"
    return None
