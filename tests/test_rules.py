from __future__ import annotations

from tictactoe.core.board import Board
from tictactoe.core.rules import LINES, check_winner, check_winner_with_line, is_draw


def _board(rows, first="X"):
    return Board(first, [[None if ch == "." else ch for ch in row] for row in rows])


def test_lines_order():
    assert len(LINES) == 8
    assert LINES[0] == ((0, 0), (0, 1), (0, 2))
    assert LINES[3] == ((0, 0), (1, 0), (2, 0))
    assert LINES[6] == ((0, 0), (1, 1), (2, 2))
    assert LINES[7] == ((0, 2), (1, 1), (2, 0))


def test_empty_board_has_no_winner():
    b = Board("X")
    assert check_winner(b) is None
    assert not is_draw(b)


def test_winner_with_line_diagonal():
    b = _board(["XO.", "OX.", "..X"])
    assert check_winner_with_line(b) == ("X", LINES[6])


def test_rows_take_priority_over_columns():
    # Row 0 and column 0 are both complete; the row is reported.
    b = _board(["XXX", "XOO", "XOO"])
    assert check_winner_with_line(b) == ("X", LINES[0])


def test_full_board_without_line_is_draw():
    b = _board(["OXO", "XXO", "OOX"], first="O")
    assert check_winner(b) is None
    assert is_draw(b)


def test_partial_line_is_not_a_win():
    b = _board(["XX.", "OO.", "..."])
    assert check_winner(b) is None
