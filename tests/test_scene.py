"""What gets drawn in each phase, checked without pygame."""

from conftest import DRAW_SEQUENCE, click_column, hover
from connect4_gui.interfaces.scene import build_scene
from connect4_gui.utils import (COLS, ROWS, MouseButton, NOTICE_TEXT_COLOR, PLAYER_ONE_COLOR,
                                PLAYER_TWO_COLOR, ROUND_TEXT_COLOR, TILE_ACTIVE_COLOR,
                                TILE_HOVER_COLOR, TILE_IDLE_COLOR)


def scene_for(state):
    return build_scene(state.snapshot(), state.layout)


def texts(scene):
    return [label.text for label in scene.labels]


def tile(scene, column, row):
    return next(t for t in scene.tiles if (t.column, t.row) == (column, row))


def test_one_tile_per_cell(state):
    scene = scene_for(state)
    assert len(scene.tiles) == ROWS * COLS
    assert scene.tiles[0].rect == state.layout.tile_rect(0, 0)


def test_idle(state):
    hover(state, 2)
    scene = scene_for(state)
    assert texts(scene) == ["Click to start"]
    assert scene.labels[0].color == NOTICE_TEXT_COLOR
    assert scene.labels[0].center_x == 640
    assert {t.outline for t in scene.tiles} == {TILE_IDLE_COLOR}
    assert all(t.disc is None for t in scene.tiles)


def test_active_turn_and_round(started):
    click_column(started, 4)
    scene = scene_for(started)
    assert texts(scene) == ["Player 2's turn", "Turn 2"]
    assert scene.labels[0].color == PLAYER_TWO_COLOR
    assert scene.labels[1].color == ROUND_TEXT_COLOR
    assert tile(scene, 4, ROWS - 1).disc == PLAYER_ONE_COLOR


def test_active_hover_highlights_column(started):
    hover(started, 3)
    scene = scene_for(started)
    for t in scene.tiles:
        expected = TILE_HOVER_COLOR if t.column == 3 else TILE_ACTIVE_COLOR
        assert t.outline == expected


def test_winner(started):
    for column in [0, 1, 0, 1, 0, 1, 0]:
        click_column(started, column)
    scene = scene_for(started)
    assert texts(scene) == ["Player 1 won!", "Click to play again"]
    highlighted = sorted((t.column, t.row) for t in scene.tiles if t.highlighted)
    assert highlighted == [(0, 2), (0, 3), (0, 4), (0, 5)]
    assert tile(scene, 1, ROWS - 1).disc == PLAYER_TWO_COLOR


def test_finished_hover_is_visual_only(started):
    for column in [0, 1, 0, 1, 0, 1, 0]:
        click_column(started, column)
    hover(started, 5)
    scene = scene_for(started)
    assert tile(scene, 5, 0).outline == TILE_ACTIVE_COLOR
    assert tile(scene, 4, 0).outline == TILE_IDLE_COLOR


def test_draw_label(started):
    for column in DRAW_SEQUENCE:
        click_column(started, column)
    scene = scene_for(started)
    assert texts(scene)[0] == "Draw!"
    assert not any(t.highlighted for t in scene.tiles)


def test_restart_clears_scene(started):
    for column in [0, 1, 0, 1, 0, 1, 0]:
        click_column(started, column)
    started.on_click(MouseButton.LEFT)
    scene = scene_for(started)
    assert texts(scene) == ["Player 1's turn", "Turn 1"]
    assert all(t.disc is None for t in scene.tiles)
