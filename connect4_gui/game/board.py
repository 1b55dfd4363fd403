"""
board.py - Board representation for Connect Four

This module implements the Board class: a fixed 7x6 grid of cells that
accepts marks with gravity-drop semantics. Win detection lives in rules.py.
"""

import numpy as np
from typing import List, Sequence

from connect4_gui.debug import debug, DebugLevel
from connect4_gui.utils import ROWS, COLS, Cell, is_valid_position


class ColumnFullError(Exception):
    """Raised when a mark is dropped into a column with no empty row."""

    def __init__(self, column: int):
        super().__init__(f"Column {column} is full")
        self.column = column


class Board:
    """
    Represents a Connect Four game board.

    The grid is a numpy array indexed ``grid[row, column]`` with row 0 at the
    top; the public methods take (column, row) like the rest of the package.
    """

    def __init__(self, rows: int = ROWS, cols: int = COLS):
        """Initialize an empty board."""
        self._rows = rows
        self._cols = cols
        self.grid = np.full((rows, cols), Cell.EMPTY.value, dtype=np.int8)
        debug.trace(f"Created {cols}x{rows} board", "board")

    @classmethod
    def from_rows(cls, rows: Sequence[Sequence[int]]) -> 'Board':
        """
        Build a board from a row-major list of cell values (top row first).

        No gravity check is made, so floating marks are allowed.

        Args:
            rows: Nested sequence of 0 (empty), 1 (player one) or 2 (player two)

        Returns:
            A new Board with those contents
        """
        grid = np.array(rows, dtype=np.int8)
        if grid.ndim != 2:
            raise ValueError("Board rows must form a 2D grid")
        if not np.isin(grid, [c.value for c in Cell]).all():
            raise ValueError("Board values must be 0, 1 or 2")

        board = cls(rows=grid.shape[0], cols=grid.shape[1])
        board.grid = grid
        return board

    @property
    def rows(self) -> int:
        return self._rows

    @property
    def cols(self) -> int:
        return self._cols

    def clear(self) -> None:
        """Empty every cell."""
        debug.debug("Clearing board", "board")
        self.grid.fill(Cell.EMPTY.value)

    def copy(self) -> 'Board':
        new_board = Board(self._rows, self._cols)
        new_board.grid = self.grid.copy()
        return new_board

    def _check_column(self, column: int) -> None:
        if not 0 <= column < self._cols:
            raise IndexError(f"Column {column} out of range 0..{self._cols - 1}")

    def cell_at(self, column: int, row: int) -> Cell:
        """
        Look up a single cell.

        Raises:
            IndexError: If (column, row) is off the board
        """
        if not is_valid_position(column, row, self._cols, self._rows):
            raise IndexError(f"Position ({column}, {row}) is off the board")
        return Cell(int(self.grid[row, column]))

    def column_height(self, column: int) -> int:
        """Number of marks already stacked in ``column``."""
        self._check_column(column)
        return int(np.count_nonzero(self.grid[:, column] != Cell.EMPTY.value))

    def is_column_full(self, column: int) -> bool:
        self._check_column(column)
        return bool(self.grid[0, column] != Cell.EMPTY.value)

    def valid_moves(self) -> List[int]:
        """Columns that can still take a mark."""
        return [col for col in range(self._cols) if not self.is_column_full(col)]

    def is_full(self) -> bool:
        """True iff no empty cell remains anywhere on the board."""
        return not (self.grid == Cell.EMPTY.value).any()

    def is_empty(self) -> bool:
        return bool((self.grid == Cell.EMPTY.value).all())

    def count(self, mark: Cell) -> int:
        """Number of cells holding ``mark``."""
        return int(np.count_nonzero(self.grid == mark.value))

    def drop(self, column: int, mark: Cell) -> int:
        """
        Drop a mark into a column; it lands in the lowest empty row.

        Args:
            column: Column index (0-indexed, left to right)
            mark: Cell.ONE or Cell.TWO

        Returns:
            The row index the mark landed in (0 is the top row)

        Raises:
            ColumnFullError: If the column has no empty row
            IndexError: If the column is off the board
            ValueError: If mark is Cell.EMPTY
        """
        self._check_column(column)
        if mark == Cell.EMPTY:
            raise ValueError("Cannot drop an empty mark")

        empty_rows = np.flatnonzero(self.grid[:, column] == Cell.EMPTY.value)
        if empty_rows.size == 0:
            debug.debug(f"Rejected drop: column {column} is full", "board")
            raise ColumnFullError(column)

        row = int(empty_rows[-1])
        self.grid[row, column] = mark.value
        debug.trace(f"Placed {mark} at ({column}, {row})", "board")
        return row

    def get_state(self) -> np.ndarray:
        """
        Get a copy of the grid, safe to hand to the presentation layer.

        Returns:
            2D numpy array (rows x cols) of Cell values
        """
        return self.grid.copy()

    def render(self) -> str:
        """
        Render the board as ASCII art, e.g. for debug logs.

        Returns:
            Multi-line string with column numbers underneath
        """
        lines = ["|" + "-" * (self._cols * 2 - 1) + "|"]
        for row in range(self._rows):
            lines.append("|" + " ".join(str(Cell(int(v))) for v in self.grid[row]) + "|")
        lines.append("|" + "-" * (self._cols * 2 - 1) + "|")
        lines.append("|" + " ".join(str(col) for col in range(self._cols)) + "|")
        return "\n".join(lines)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return self.grid.shape == other.grid.shape and bool((self.grid == other.grid).all())

    def __str__(self) -> str:
        return self.render()


if __name__ == "__main__":
    debug.configure(level=DebugLevel.TRACE)

    board = Board()
    for col in [3, 3, 4, 2, 3]:
        row = board.drop(col, Cell.ONE if col % 2 else Cell.TWO)
        print(f"Dropped into column {col}, landed in row {row}")
    print(board)
