"""Shared fixtures. pygame runs headless for the whole test session."""

import os

os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")
os.environ.setdefault("PYGAME_HIDE_SUPPORT_PROMPT", "1")

import pytest

from connect4_gui.game.layout import BoardLayout
from connect4_gui.game.state import GameState
from connect4_gui.utils import MouseButton

# Column order that fills all 42 cells without anyone getting four in a row.
# Columns 0/2, 1/3 and 4/6 are filled in interleaved pairs, then column 5.
DRAW_SEQUENCE = (
    [0, 2, 2, 0, 0, 2, 2, 0, 0, 2, 2, 0]
    + [1, 3, 3, 1, 1, 3, 3, 1, 1, 3, 3, 1]
    + [4, 6, 6, 4, 4, 6, 6, 4, 4, 6, 6, 4]
    + [5, 5, 5, 5, 5, 5]
)


@pytest.fixture
def layout():
    return BoardLayout()


@pytest.fixture
def state(layout):
    return GameState(layout=layout)


def hover(state, column):
    """Move the pointer over the middle of ``column``."""
    x, y = state.layout.tile_rect(column, 0).center
    state.on_pointer_move(x, y)


def click_column(state, column):
    hover(state, column)
    state.on_click(MouseButton.LEFT)


@pytest.fixture
def started(state):
    state.on_click(MouseButton.LEFT)
    return state
