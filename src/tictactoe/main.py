from __future__ import annotations

import argparse
import logging

from tictactoe import config
from tictactoe.ui.menu import run_menu


def build_argparser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(description="Play tic-tac-toe in the terminal.")
    ap.add_argument("--no-color", action="store_true", help="Disable ANSI colours")
    ap.add_argument("--no-clear", action="store_true", help="Do not clear the screen between turns")
    ap.add_argument("--fast", action="store_true", help="Skip the computer 'thinking' delay")
    ap.add_argument(
        "--log-level",
        type=str,
        default=config.LOG_LEVEL,
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Log level for messages written to stderr",
    )
    return ap


def main(argv: list[str] | None = None) -> int:
    ap = build_argparser()
    args = ap.parse_args(argv)

    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    if args.no_color:
        config.USE_COLOR = False
    if args.no_clear:
        config.CLEAR_SCREEN = False
    if args.fast:
        config.AI_THINK_DELAY_SEC = 0

    try:
        run_menu()
    except (KeyboardInterrupt, EOFError):
        print("\nBye.")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
