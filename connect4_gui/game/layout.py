"""
layout.py - Screen geometry of the board

Maps pointer positions to board columns and board positions to screen
rectangles. The board is centred in a fixed 1280x720 window.
"""

from typing import NamedTuple, Optional, Tuple

from connect4_gui.debug import debug
from connect4_gui.utils import ROWS, COLS

WINDOW_WIDTH = 1280
WINDOW_HEIGHT = 720
TILE_SIZE = 90    # Tile pitch, including the gap
TILE_GAP = 10
TILE_RADIUS = 10  # Rounded corner radius of a tile outline
DISC_RADIUS = 32


class Rect(NamedTuple):
    x: int
    y: int
    width: int
    height: int

    @property
    def right(self) -> int:
        return self.x + self.width

    @property
    def bottom(self) -> int:
        return self.y + self.height

    @property
    def center(self) -> Tuple[int, int]:
        return self.x + self.width // 2, self.y + self.height // 2


class BoardLayout:
    """Fixed placement of a cols x rows board inside the window."""

    def __init__(self, cols: int = COLS, rows: int = ROWS,
                 window_width: int = WINDOW_WIDTH, window_height: int = WINDOW_HEIGHT,
                 tile_size: int = TILE_SIZE, tile_gap: int = TILE_GAP):
        self.cols = cols
        self.rows = rows
        self.window_width = window_width
        self.window_height = window_height
        self.tile_size = tile_size
        self.tile_gap = tile_gap

        board_width = tile_size * cols - tile_gap
        board_height = tile_size * rows - tile_gap
        self.bounds = Rect(
            (window_width - board_width) // 2,
            (window_height - board_height) // 2,
            board_width,
            board_height,
        )

    @property
    def x_offset(self) -> int:
        return self.bounds.x

    @property
    def y_offset(self) -> int:
        return self.bounds.y

    def contains(self, x: float, y: float) -> bool:
        """True if (x, y) lies on the board, edges included."""
        b = self.bounds
        return b.x <= x <= b.right and b.y <= y <= b.bottom

    def column_at(self, x: float, y: float) -> Optional[int]:
        """
        Column under the pointer.

        Args:
            x: Pointer x in window pixels
            y: Pointer y in window pixels

        Returns:
            Column index, or None if the pointer is outside the board rectangle
        """
        if not self.contains(x, y):
            return None

        column = int(x - self.bounds.x) // self.tile_size
        # The right edge belongs to the last column
        column = min(column, self.cols - 1)
        debug.trace(f"Pointer ({x}, {y}) is over column {column}", "layout")
        return column

    def tile_rect(self, column: int, row: int) -> Rect:
        """Screen rectangle of the tile at (column, row)."""
        size = self.tile_size - self.tile_gap
        return Rect(
            self.bounds.x + column * self.tile_size,
            self.bounds.y + row * self.tile_size,
            size,
            size,
        )

    def disc_center(self, column: int, row: int) -> Tuple[int, int]:
        return self.tile_rect(column, row).center
