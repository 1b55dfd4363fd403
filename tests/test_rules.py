"""Win detector tests: every direction, every edge and corner, and no false positives."""

import pytest

from connect4_gui.game.board import Board
from connect4_gui.game.rules import find_winning_line, is_draw, winner
from connect4_gui.utils import COLS, ROWS, Cell, Player


def board_with(marks):
    """Board with ``marks`` ({(column, row): Cell}) placed directly, ignoring gravity."""
    board = Board()
    for (column, row), mark in marks.items():
        board.grid[row, column] = mark.value
    return board


def line(start, step, mark):
    (column, row), (dcol, drow) = start, step
    return {(column + dcol * i, row + drow * i): mark for i in range(4)}


class TestNoWinner:
    def test_empty_board(self):
        assert winner(Board()) is None
        assert find_winning_line(Board()) is None

    def test_three_marks(self):
        board = board_with({(0, 5): Cell.ONE, (1, 5): Cell.ONE, (2, 5): Cell.ONE})
        assert winner(board) is None

    def test_broken_line(self):
        marks = line((0, 5), (1, 0), Cell.ONE)
        marks[(2, 5)] = Cell.TWO
        assert winner(board_with(marks)) is None

    def test_mixed_owners(self):
        marks = {(0, 0): Cell.ONE, (1, 1): Cell.ONE, (2, 2): Cell.TWO, (3, 3): Cell.ONE}
        assert winner(board_with(marks)) is None


class TestDirections:
    def test_horizontal(self):
        board = board_with(line((0, 0), (1, 0), Cell.ONE))
        assert winner(board) == Player.ONE

    def test_vertical(self):
        board = board_with(line((0, 0), (0, 1), Cell.TWO))
        assert winner(board) == Player.TWO

    def test_diagonal_down_right(self):
        board = board_with(line((0, 0), (1, 1), Cell.ONE))
        assert winner(board) == Player.ONE

    def test_diagonal_down_left(self):
        board = board_with(line((3, 0), (-1, 1), Cell.TWO))
        assert winner(board) == Player.TWO

    def test_winning_line_coordinates(self):
        board = board_with(line((3, 0), (-1, 1), Cell.TWO))
        player, coords = find_winning_line(board)
        assert player == Player.TWO
        assert sorted(coords) == [(0, 3), (1, 2), (2, 1), (3, 0)]


# Lines touching each edge and corner, including the far ends of both diagonals
EDGE_LINES = [
    ((COLS - 4, 0), (1, 0)),             # top-right corner, horizontal
    ((COLS - 4, ROWS - 1), (1, 0)),      # bottom-right corner, horizontal
    ((0, ROWS - 1), (1, 0)),             # bottom-left corner, horizontal
    ((COLS - 1, ROWS - 4), (0, 1)),      # bottom-right corner, vertical
    ((COLS - 1, 0), (0, 1)),             # top-right corner, vertical
    ((COLS - 4, ROWS - 4), (1, 1)),      # ends in bottom-right corner
    ((COLS - 4, 0), (1, 1)),             # starts on the top edge, ends on the right edge
    ((0, ROWS - 4), (1, 1)),             # starts on the left edge, ends on the bottom edge
    ((COLS - 1, 0), (-1, 1)),            # starts in top-right corner
    ((3, ROWS - 4), (-1, 1)),            # ends in bottom-left corner
    ((COLS - 1, ROWS - 4), (-1, 1)),     # starts on the right edge, ends on the bottom edge
    ((4, 1), (-1, 1)),                   # mid-board anti-diagonal
    ((2, 1), (1, 1)),                    # mid-board diagonal
]


@pytest.mark.parametrize("start,step", EDGE_LINES)
@pytest.mark.parametrize("mark,player", [(Cell.ONE, Player.ONE), (Cell.TWO, Player.TWO)])
def test_lines_touching_edges(start, step, mark, player):
    marks = line(start, step, mark)
    assert all(0 <= c < COLS and 0 <= r < ROWS for c, r in marks)
    board = board_with(marks)
    assert winner(board) == player
    assert sorted(find_winning_line(board)[1]) == sorted(marks)


def test_five_in_a_row_counts():
    marks = {(c, ROWS - 1): Cell.ONE for c in range(5)}
    assert winner(board_with(marks)) == Player.ONE


def test_scan_is_deterministic():
    marks = line((0, ROWS - 1), (1, 0), Cell.ONE)
    marks.update(line((6, 0), (0, 1), Cell.TWO))
    board = board_with(marks)
    # Column 0 is scanned before column 6
    assert winner(board) == Player.ONE
    assert winner(board) == winner(board.copy())


def test_winner_does_not_mutate():
    board = board_with(line((1, 2), (1, 1), Cell.ONE))
    before = board.get_state()
    winner(board)
    assert (board.get_state() == before).all()


class TestDraw:
    def test_not_draw_when_not_full(self):
        assert not is_draw(Board())

    def test_full_board_without_line(self):
        # Column phases 0,0,1,1,0,0,1 alternating vertically never give four in a row
        phases = [0, 0, 1, 1, 0, 0, 1]
        rows = [[1 + (phases[c] ^ (r % 2)) for c in range(COLS)] for r in range(ROWS)]
        board = Board.from_rows(rows)
        assert board.is_full()
        assert winner(board) is None
        assert is_draw(board)

    def test_full_board_with_line_is_not_draw(self):
        rows = [[1 if r == ROWS - 1 else 1 + ((r + c) % 2) for c in range(COLS)] for r in range(ROWS)]
        board = Board.from_rows(rows)
        assert board.is_full()
        assert not is_draw(board)
