"""
scene.py - Turns a game snapshot into something drawable

build_scene is pure and knows nothing about pygame, so what the window shows
for each phase can be checked without opening one.
"""

from typing import List, NamedTuple, Optional

from connect4_gui.game.layout import BoardLayout, Rect
from connect4_gui.game.state import GamePhase, GameSnapshot
from connect4_gui.utils import (RGB, Cell, BACKGROUND_COLOR, NOTICE_TEXT_COLOR, ROUND_TEXT_COLOR,
                                TILE_ACTIVE_COLOR, TILE_HOVER_COLOR, TILE_IDLE_COLOR)

STATUS_Y = 660   # Baseline area below the board
ROUND_Y = 40     # Above the board
HINT_Y = 690


class Tile(NamedTuple):
    column: int
    row: int
    rect: Rect
    outline: RGB
    disc: Optional[RGB]   # None for an empty cell
    highlighted: bool     # Part of the winning line


class Label(NamedTuple):
    text: str
    color: RGB
    center_x: int
    y: int


class Scene(NamedTuple):
    background: RGB
    tiles: List[Tile]
    labels: List[Label]


def _outline_color(snapshot: GameSnapshot, column: int) -> RGB:
    hovered = snapshot.hovered_column == column
    if snapshot.phase == GamePhase.ACTIVE:
        return TILE_HOVER_COLOR if hovered else TILE_ACTIVE_COLOR
    if snapshot.phase == GamePhase.FINISHED and hovered:
        return TILE_ACTIVE_COLOR
    return TILE_IDLE_COLOR


def _labels(snapshot: GameSnapshot, center_x: int) -> List[Label]:
    if snapshot.phase == GamePhase.ACTIVE:
        player = snapshot.current_player
        return [
            Label(f"{player}'s turn", player.color, center_x, STATUS_Y),
            Label(f"Turn {snapshot.round}", ROUND_TEXT_COLOR, center_x, ROUND_Y),
        ]

    if snapshot.phase == GamePhase.IDLE:
        return [Label("Click to start", NOTICE_TEXT_COLOR, center_x, STATUS_Y)]

    text = f"{snapshot.winner} won!" if snapshot.winner else "Draw!"
    return [
        Label(text, NOTICE_TEXT_COLOR, center_x, STATUS_Y),
        Label("Click to play again", ROUND_TEXT_COLOR, center_x, HINT_Y),
    ]


def build_scene(snapshot: GameSnapshot, layout: BoardLayout) -> Scene:
    """
    Describe one frame.

    Args:
        snapshot: State to draw
        layout: Board geometry matching the snapshot's grid

    Returns:
        Scene with one Tile per board cell (column-major) and the text labels
    """
    winning = set(snapshot.winning_line)
    rows, cols = snapshot.grid.shape

    tiles = []
    for column in range(cols):
        outline = _outline_color(snapshot, column)
        for row in range(rows):
            owner = Cell(int(snapshot.grid[row, column])).owner
            tiles.append(Tile(
                column=column,
                row=row,
                rect=layout.tile_rect(column, row),
                outline=outline,
                disc=owner.color if owner else None,
                highlighted=(column, row) in winning,
            ))

    return Scene(BACKGROUND_COLOR, tiles, _labels(snapshot, layout.window_width // 2))
