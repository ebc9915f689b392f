from __future__ import annotations
import itertools
import sys
import time
from typing import Optional

from tictactoe import config

FRAMES = "|/-\\"


def ai_thinking(label: str = "Computer", delay: Optional[float] = None) -> None:
    """Pause before a computer move, with a spinner when the terminal allows it."""
    delay = config.AI_THINK_DELAY_SEC if delay is None else delay
    if delay <= 0:
        return
    if not (config.AI_THINKING_SPINNER and sys.stdout.isatty()):
        time.sleep(delay)
        return

    text = f"{label} is thinking..."
    deadline = time.monotonic() + delay
    for frame in itertools.cycle(FRAMES):
        if time.monotonic() >= deadline:
            break
        sys.stdout.write(f"\r{text} {frame}")
        sys.stdout.flush()
        time.sleep(0.08)
    sys.stdout.write("\r" + " " * (len(text) + 2) + "\r")
    sys.stdout.flush()
