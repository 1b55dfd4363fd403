"""
rules.py - Win and draw detection for Connect Four

Every check here is a pure function of a Board. Lines are found by walking the
DIRECTION_VECTORS table from each occupied cell, so all four directions share
one bounds check.
"""

from typing import List, Optional, Tuple

from connect4_gui.debug import debug, DebugLevel
from connect4_gui.game.board import Board
from connect4_gui.utils import CONNECT_N, DIRECTION_VECTORS, Cell, Coord, Player, is_valid_position

WinningLine = Tuple[Player, List[Coord]]


def _line_from(board: Board, column: int, row: int, dcol: int, drow: int) -> Optional[List[Coord]]:
    """
    Coordinates of the CONNECT_N cells starting at (column, row) and stepping
    by (dcol, drow), or None if the line would leave the board.
    """
    end_col = column + dcol * (CONNECT_N - 1)
    end_row = row + drow * (CONNECT_N - 1)
    if not is_valid_position(end_col, end_row, board.cols, board.rows):
        return None
    return [(column + dcol * i, row + drow * i) for i in range(CONNECT_N)]


def find_winning_line(board: Board) -> Optional[WinningLine]:
    """
    Scan the board for four consecutive equal marks.

    Cells are visited column by column, top to bottom, and the first line found
    is returned, so the result is deterministic for a given board.

    Args:
        board: The board to inspect (not modified)

    Returns:
        (winning player, [(column, row), ...]) or None if nobody has four in a row
    """
    grid = board.grid
    for column in range(board.cols):
        for row in range(board.rows):
            value = grid[row, column]
            if value == Cell.EMPTY.value:
                continue

            for direction, (dcol, drow) in DIRECTION_VECTORS.items():
                line = _line_from(board, column, row, dcol, drow)
                if line is None:
                    continue
                if all(grid[r, c] == value for c, r in line[1:]):
                    player = Cell(int(value)).owner
                    debug.debug(f"{player} has four in a row ({direction.name}) from ({column}, {row})", "rules")
                    return player, line

    return None


def winner(board: Board) -> Optional[Player]:
    """Return the player with four in a row, or None."""
    debug.start_timer("win_check")
    result = find_winning_line(board)
    debug.end_timer("win_check", "rules")
    return result[0] if result else None


def is_draw(board: Board) -> bool:
    """A draw is a full board with no four in a row."""
    return board.is_full() and find_winning_line(board) is None


if __name__ == "__main__":
    debug.configure(level=DebugLevel.DEBUG)

    board = Board()
    for col in [0, 1, 1, 2, 2, 3, 2, 3, 3, 6, 3]:
        board.drop(col, Cell.ONE if board.count(Cell.ONE) == board.count(Cell.TWO) else Cell.TWO)
    print(board)
    print(f"Winner: {winner(board)}")
    print(f"Line: {find_winning_line(board)}")
