"""
utils.py - Constants and enumerations for the Connect Four rule engine

This module provides the fixed board geometry, the tri-state cell/player
enumeration, the game result enumeration and the direction vectors used
by the win scan.
"""

from enum import Enum, auto
from typing import Dict, Tuple

# Board geometry (fixed, not configurable at runtime)
ROWS = 6
COLS = 7
CONNECT_N = 4  # Number of pieces in a row to win

# The first player places its fourth mark on move 7, so no line can exist
# on an earlier move under strict alternation.
WIN_SCAN_MIN_MOVES = 2 * CONNECT_N - 1


class Player(Enum):
    """Enumeration representing players and cell states."""
    EMPTY = 0
    ONE = 1    # First player
    TWO = 2    # Second player

    def other(self) -> 'Player':
        """Get the other player."""
        if self == Player.ONE:
            return Player.TWO
        elif self == Player.TWO:
            return Player.ONE
        return Player.EMPTY

    @property
    def label(self) -> str:
        """Human readable name used in prompts and banners."""
        if self == Player.ONE:
            return "Player One"
        elif self == Player.TWO:
            return "Player Two"
        return "Nobody"

    def __str__(self):
        if self == Player.EMPTY:
            return " "
        elif self == Player.ONE:
            return "X"
        else:
            return "O"


class GameResult(Enum):
    """Enumeration representing the game outcome."""
    IN_PROGRESS = auto()
    PLAYER_ONE_WIN = auto()
    PLAYER_TWO_WIN = auto()
    DRAW = auto()

    def is_game_over(self) -> bool:
        """Check if the game is over."""
        return self != GameResult.IN_PROGRESS


class Direction(Enum):
    """Enumeration representing directions for win checking."""
    HORIZONTAL = auto()
    VERTICAL = auto()
    DIAGONAL_DOWN = auto()  # Top-left to bottom-right
    ANTI_DIAGONAL = auto()  # Top-right to bottom-left


# Direction vectors (row-step, col-step). Each ray is walked forward only.
DIRECTION_VECTORS: Dict[Direction, Tuple[int, int]] = {
    Direction.HORIZONTAL: (0, 1),
    Direction.VERTICAL: (1, 0),
    Direction.DIAGONAL_DOWN: (1, 1),
    Direction.ANTI_DIAGONAL: (1, -1),
}

