"""
errors.py - Move rejection errors raised by the rule engine

Every error here is recoverable: a rejected move never changes the game
state, so callers report the message and ask for another column.
"""

from typing import Optional


class MoveError(ValueError):
    """Base class for a move the rule engine refused to apply."""

    message = "Invalid move"

    def __init__(self, column: Optional[int] = None):
        super().__init__(self.message)
        self.column = column

    def __str__(self) -> str:
        return self.message


class GameFinished(MoveError):
    """A move was attempted after the game was won or drawn."""

    message = "Game is already finished"


class InvalidColumn(MoveError):
    """The column index is outside the board."""

    message = "Invalid column"


class ColumnFull(MoveError):
    """The column has no empty slot left."""

    message = "Column is full"
