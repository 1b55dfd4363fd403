"""
connect4_gui.game - Core game mechanics for Connect Four

This package contains the board model, win detection, board geometry
and the turn/phase state machine.
"""

from connect4_gui.game.board import Board, ColumnFullError
from connect4_gui.game.layout import BoardLayout
from connect4_gui.game.rules import find_winning_line, winner, is_draw
from connect4_gui.game.state import GamePhase, GameSnapshot, GameState

__all__ = [
    'Board', 'ColumnFullError', 'BoardLayout',
    'find_winning_line', 'winner', 'is_draw',
    'GamePhase', 'GameSnapshot', 'GameState',
]
