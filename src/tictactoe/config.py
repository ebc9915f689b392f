# src/tictactoe/config.py

from __future__ import annotations

BOARD_SIZE = 3
NUM_CELLS = BOARD_SIZE * BOARD_SIZE

# UI toggles
USE_COLOR = True
CLEAR_SCREEN = True

# “AI thinking” effect
AI_THINKING_SPINNER = True
AI_THINK_DELAY_SEC = 1  # short pause so computer moves aren’t instant

LOG_LEVEL = "WARNING"
