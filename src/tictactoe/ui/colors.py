from __future__ import annotations
from tictactoe import config

RESET = "\033[0m"
BOLD = "\033[1m"
DIM = "\033[2m"
REVERSE = "\033[7m"  # swaps fg/bg; good generic highlight

FG_RED = "\033[31m"
FG_GREEN = "\033[32m"
FG_BLUE = "\033[34m"
FG_CYAN = "\033[36m"
FG_WHITE = "\033[37m"


def c(s: str, code: str) -> str:
    if not config.USE_COLOR:
        return s
    return f"{code}{s}{RESET}"
