"""
state.py - Turn and game-phase state machine for Connect Four

GameState owns the board and reacts to the two external stimuli the game has:
pointer movement and pointer clicks. The presentation layer reads it through
snapshot() once per frame and never mutates it directly.
"""

from enum import Enum, auto
from typing import List, NamedTuple, Optional, Union

import numpy as np

from connect4_gui.debug import debug
from connect4_gui.game.board import Board, ColumnFullError
from connect4_gui.game.layout import BoardLayout
from connect4_gui.game.rules import find_winning_line
from connect4_gui.utils import Coord, MouseButton, Player


class GamePhase(Enum):
    """Idle before the first click, Active during play, Finished after a win or draw."""
    IDLE = auto()
    ACTIVE = auto()
    FINISHED = auto()


class GameSnapshot(NamedTuple):
    """Read-only view of the game handed to the presentation layer."""
    grid: np.ndarray
    current_player: Player
    hovered_column: Optional[int]
    phase: GamePhase
    winner: Optional[Player]
    round: int
    winning_line: List[Coord]

    @property
    def is_draw(self) -> bool:
        return self.phase == GamePhase.FINISHED and self.winner is None


class GameState:
    """
    Two-player Connect Four game.

    Transitions:
        IDLE/FINISHED --primary click--> ACTIVE (fresh board, round 1, player one)
        ACTIVE --primary click on a hovered, non-full column--> drop, then
            FINISHED(winner), FINISHED(None) on a full board, or ACTIVE
        ACTIVE --any other click--> unchanged
    """

    def __init__(self, layout: Optional[BoardLayout] = None, board: Optional[Board] = None):
        self.layout = layout or BoardLayout()
        self.board = board or Board(rows=self.layout.rows, cols=self.layout.cols)
        self.current_player = Player.ONE
        self.phase = GamePhase.IDLE
        self.winner: Optional[Player] = None
        self.winning_line: List[Coord] = []
        self.round = 1
        self.hovered_column: Optional[int] = None
        debug.debug("Game created, waiting for first click", "state")

    @property
    def is_active(self) -> bool:
        return self.phase == GamePhase.ACTIVE

    @property
    def is_finished(self) -> bool:
        return self.phase == GamePhase.FINISHED

    def start(self) -> None:
        """Begin a fresh game: empty board, round 1, player one to move."""
        self.board.clear()
        self.current_player = Player.ONE
        self.winner = None
        self.winning_line = []
        self.round = 1
        self.phase = GamePhase.ACTIVE
        debug.info("New game started", "state")

    def on_pointer_move(self, x: float, y: float) -> None:
        """Track the column under the pointer; None when off the board."""
        column = self.layout.column_at(x, y)
        if column != self.hovered_column:
            debug.trace(f"Hovered column {self.hovered_column} -> {column}", "state")
        self.hovered_column = column

    def on_click(self, button: Union[MouseButton, int]) -> None:
        """
        Handle a pointer click.

        Only the primary (left) button does anything. Clicking while idle or
        finished always starts a new game, whatever is hovered.
        """
        if not isinstance(button, MouseButton):
            button = MouseButton.from_event(button)
        if button != MouseButton.LEFT:
            debug.trace(f"Ignoring {button} click", "state")
            return

        if self.phase != GamePhase.ACTIVE:
            self.start()
            return

        if self.hovered_column is None:
            debug.trace("Click outside the board ignored", "state")
            return

        self.play_column(self.hovered_column)

    def play_column(self, column: int) -> bool:
        """
        Drop the current player's mark into ``column`` and advance the game.

        Args:
            column: Board column; must be on the board

        Returns:
            True if a mark was placed, False if the game is not active or the
            column is full

        Raises:
            IndexError: If the column is off the board
        """
        if self.phase != GamePhase.ACTIVE:
            return False

        player = self.current_player
        try:
            row = self.board.drop(column, player.mark)
        except ColumnFullError as e:
            debug.debug(f"{e}, click ignored", "state")
            return False

        debug.debug(f"Round {self.round}: {player} dropped into ({column}, {row})", "state")
        self.round += 1
        self.current_player = player.other()

        result = find_winning_line(self.board)
        if result is not None:
            self.winner, self.winning_line = result
            self.phase = GamePhase.FINISHED
            debug.info(f"{self.winner} wins after {self.round - 1} moves", "state")
            debug.debug("\n" + self.board.render(), "state")
        elif self.board.is_full():
            self.phase = GamePhase.FINISHED
            debug.info("Board is full, game drawn", "state")

        return True

    def snapshot(self) -> GameSnapshot:
        return GameSnapshot(
            grid=self.board.get_state(),
            current_player=self.current_player,
            hovered_column=self.hovered_column,
            phase=self.phase,
            winner=self.winner,
            round=self.round,
            winning_line=list(self.winning_line),
        )
