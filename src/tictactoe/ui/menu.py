from __future__ import annotations
import random
from typing import Optional

from tictactoe.ai.random_agent import RandomAgent
from tictactoe.core.board import BoardState
from tictactoe.game.controller import run_game
from tictactoe.types import PLAYERS, Player, parse_player
from tictactoe.ui.colors import FG_RED, c
from tictactoe.ui.human import HumanAgent
from tictactoe.ui.prompts import Mode, parse_mode


def print_error(message: str) -> None:
    print(c(message, FG_RED))


def ask_for_starting_player() -> Player:
    while True:
        player = parse_player(input("Select first player, X or O: "))
        if player is not None:
            return player
        print_error("Please choose either X or O")


def ask_for_game_mode() -> Mode:
    while True:
        print("Choose game mode")
        print("1) Play against computer")
        print("2) Play against human")
        mode = parse_mode(input("Choice: "))
        if mode is not None:
            return mode
        print_error("Invalid option selected")


def run_menu(rng: Optional[random.Random] = None, show_thinking: bool = True) -> Optional[BoardState]:
    rng = rng or random.Random()

    print("Tic Tac Toe game")
    first = ask_for_starting_player()
    mode = ask_for_game_mode()

    if mode == "human":
        return run_game(HumanAgent(), HumanAgent(), first_player=first, show_thinking=show_thinking)

    computer: Player = rng.choice(PLAYERS)
    ai = RandomAgent(rng)
    human = HumanAgent()
    if computer == first:
        print(f"Computer has chosen: {computer}")
    else:
        print(f"You are {first}. Computer plays {computer}.")

    if computer == "X":
        return run_game(ai, human, first_player=first, show_thinking=show_thinking)
    return run_game(human, ai, first_player=first, show_thinking=show_thinking)
