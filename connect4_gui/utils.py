"""
utils.py - Constants, enumerations and helpers for the Connect Four game

Coordinates are (column, row) throughout, with row 0 at the top of the board.
"""

from enum import Enum, auto
from typing import Optional, Tuple

# Game constants
ROWS = 6
COLS = 7
CONNECT_N = 4  # Number of marks in a row to win

Coord = Tuple[int, int]  # (column, row)
RGB = Tuple[int, int, int]


def hex_color(value: str) -> RGB:
    """
    Convert a hexadecimal colour string to an RGB tuple.

    Args:
        value: Six hex digits, with or without a leading '#'

    Returns:
        (red, green, blue) with each channel in 0..255
    """
    digits = value.lstrip('#')
    if len(digits) != 6:
        raise ValueError(f"Expected six hex digits, got {value!r}")
    return tuple(int(digits[i:i + 2], 16) for i in (0, 2, 4))


# Palette
BACKGROUND_COLOR = hex_color("1e222a")
PLAYER_ONE_COLOR = hex_color("e06c75")
PLAYER_TWO_COLOR = hex_color("98c379")
TILE_IDLE_COLOR = hex_color("3e4451")
TILE_ACTIVE_COLOR = hex_color("abb2bf")
TILE_HOVER_COLOR = hex_color("ffffff")
ROUND_TEXT_COLOR = hex_color("c8ccd4")
NOTICE_TEXT_COLOR = hex_color("e5c07b")


class Cell(Enum):
    """Contents of a single board position."""
    EMPTY = 0
    ONE = 1    # Player one's mark
    TWO = 2    # Player two's mark

    @property
    def owner(self) -> Optional['Player']:
        """The player owning this mark, or None for an empty cell."""
        if self == Cell.EMPTY:
            return None
        return Player(self.value)

    def __str__(self):
        if self == Cell.ONE:
            return "X"
        elif self == Cell.TWO:
            return "O"
        return "."


class Player(Enum):
    """The two players. Player one always moves first."""
    ONE = 1
    TWO = 2

    @property
    def mark(self) -> Cell:
        return Cell(self.value)

    @property
    def color(self) -> RGB:
        return PLAYER_ONE_COLOR if self == Player.ONE else PLAYER_TWO_COLOR

    def other(self) -> 'Player':
        """Get the other player."""
        return Player.TWO if self == Player.ONE else Player.ONE

    def __str__(self):
        return f"Player {self.value}"


class MouseButton(Enum):
    """Pointer buttons, numbered like pygame's MOUSEBUTTONDOWN events."""
    LEFT = 1
    MIDDLE = 2
    RIGHT = 3
    WHEEL_UP = 4
    WHEEL_DOWN = 5

    @classmethod
    def from_event(cls, button: int) -> Optional['MouseButton']:
        """Map a raw button number to a MouseButton, None for unknown buttons."""
        try:
            return cls(button)
        except ValueError:
            return None


class Direction(Enum):
    """The four forward directions a winning line can run in."""
    HORIZONTAL = auto()
    VERTICAL = auto()
    DIAGONAL_DOWN_RIGHT = auto()
    DIAGONAL_DOWN_LEFT = auto()


# Direction vectors (dcol, drow) for each direction
DIRECTION_VECTORS = {
    Direction.HORIZONTAL: (1, 0),
    Direction.VERTICAL: (0, 1),
    Direction.DIAGONAL_DOWN_RIGHT: (1, 1),
    Direction.DIAGONAL_DOWN_LEFT: (-1, 1),
}


def is_valid_position(column: int, row: int, cols: int = COLS, rows: int = ROWS) -> bool:
    """Check if (column, row) lies on a board of the given size."""
    return 0 <= column < cols and 0 <= row < rows
