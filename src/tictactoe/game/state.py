from __future__ import annotations
from dataclasses import dataclass
from typing import Optional

from tictactoe.core.board import Board
from tictactoe.core.rules import Line


@dataclass(slots=True)
class GameState:
    board: Board
    last_status: str = ""
    winning_line: Optional[Line] = None
