from __future__ import annotations
import logging
from typing import Optional

from tictactoe.ai.base import Agent
from tictactoe.core.board import Board, BoardState, Ended
from tictactoe.core.move import Move
from tictactoe.core.rules import check_winner_with_line
from tictactoe.game.state import GameState
from tictactoe.types import Player
from tictactoe.ui.colors import FG_GREEN, FG_RED, c
from tictactoe.ui.effects import ai_thinking
from tictactoe.ui.human import HumanAgent
from tictactoe.ui.prompts import parse_position
from tictactoe.ui.render import render

log = logging.getLogger(__name__)


def _agent_name(agent: Agent, fallback: str) -> str:
    name = getattr(agent, "name", None)
    if not name:
        return fallback
    return str(name)


def _status_with_agents(status: str, agent_x: Agent, agent_o: Agent, current: Player) -> str:
    x_name = _agent_name(agent_x, "Player X")
    o_name = _agent_name(agent_o, "Player O")

    header = f"X: {x_name} | O: {o_name} | Turn: {current}"
    if status:
        return f"{header}\n{status}"
    return header


def _end_message(result: Ended) -> str:
    if result.winner is None:
        return "Tie game!"
    return c(f"Player {result.winner} won the game!!", FG_GREEN)


def run_game(
    agent_x: Agent,
    agent_o: Agent,
    first_player: Player = "X",
    show_thinking: bool = True,
) -> Optional[BoardState]:
    """
    Play one game to the end and return the final state.

    Every rejected input, move or agent failure becomes the status line and
    the same player is asked again. Returns None if a human quits.
    """
    state = GameState(board=Board(first_player), last_status=f"Player {first_player} starts.")

    while True:
        current = state.board.get_next_player()
        render(
            state.board,
            _status_with_agents(state.last_status, agent_x, agent_o, current),
            highlight=state.winning_line,
        )

        current_agent = agent_x if current == "X" else agent_o

        try:
            if current_agent.name == HumanAgent.name:
                raw = input(f"Player {current}: select your move (1-9, q to quit): ")
                position = parse_position(raw)
                if position is None:
                    render(
                        state.board,
                        _status_with_agents("Game quit.", agent_x, agent_o, current),
                    )
                    return None
                move = Move(position, current)
            else:
                if show_thinking:
                    ai_thinking(f"{current_agent.name}")
                move = current_agent.choose_move(state.board)

            result = state.board.make_move(move)

        except ValueError as e:
            log.debug("move by %s rejected: %s", current, e)
            state.last_status = c(str(e), FG_RED)
            continue

        state.last_status = f"{_agent_name(current_agent, current)} ({current}) chose {move.position}"

        if isinstance(result, Ended):
            w = check_winner_with_line(state.board)
            state.winning_line = w[1] if w else None
            log.info("game over: %s", "tie" if result.is_tie else f"{result.winner} wins")
            render(
                state.board,
                _status_with_agents(_end_message(result), agent_x, agent_o, current),
                highlight=state.winning_line,
            )
            return result
