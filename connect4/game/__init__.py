"""
connect4.game - Core game mechanics for Connect Four

This package contains the rule engine: board representation, move
validation and win/draw detection.
"""

from connect4.game.board import Board
from connect4.game.errors import ColumnFull, GameFinished, InvalidColumn, MoveError
from connect4.game.rules import GameState, apply_move, find_winner, initialize

__all__ = [
    'Board', 'GameState', 'initialize', 'apply_move', 'find_winner',
    'MoveError', 'GameFinished', 'InvalidColumn', 'ColumnFull',
]
