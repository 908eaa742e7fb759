"""
rules.py - Game state management for Connect Four

This module provides the GameState owned by a session and the three rule
engine operations:

1. initialize() - a fresh game
2. apply_move() - validate and apply a column choice
3. find_winner() - scan the board for four in a row
"""

from typing import List, Optional, Tuple

from connect4.debug import debug
from connect4.game.board import Board, Coord, column_index
from connect4.game.errors import ColumnFull, GameFinished, MoveError
from connect4.utils import COLS, ROWS, WIN_SCAN_MIN_MOVES, GameResult, Player

MAX_MOVES = ROWS * COLS


class GameState:
    """
    State of a single Connect Four game.

    Only apply_move() mutates a GameState; a restart replaces it with a
    new one from initialize().
    """

    def __init__(self):
        self.board = Board()
        self.move_count = 0
        self.current_player = Player.ONE
        self.finished = False
        self.winner = Player.EMPTY
        self.last_move: Optional[Coord] = None
        self.winning_line: List[Coord] = []

    @property
    def result(self) -> GameResult:
        """The game's position in the IN_PROGRESS -> WON / DRAW state machine."""
        if not self.finished:
            return GameResult.IN_PROGRESS
        if self.winner == Player.ONE:
            return GameResult.PLAYER_ONE_WIN
        if self.winner == Player.TWO:
            return GameResult.PLAYER_TWO_WIN
        return GameResult.DRAW

    @property
    def is_draw(self) -> bool:
        return self.result == GameResult.DRAW

    def copy(self) -> 'GameState':
        new_state = GameState.__new__(GameState)
        new_state.board = self.board.copy()
        new_state.move_count = self.move_count
        new_state.current_player = self.current_player
        new_state.finished = self.finished
        new_state.winner = self.winner
        new_state.last_move = self.last_move
        new_state.winning_line = list(self.winning_line)
        return new_state

    def _fields(self) -> Tuple:
        return (self.move_count, self.current_player, self.finished,
                self.winner, self.last_move, tuple(self.winning_line))

    def __eq__(self, other) -> bool:
        if not isinstance(other, GameState):
            return NotImplemented
        return self.board == other.board and self._fields() == other._fields()

    def __repr__(self) -> str:
        return (f"GameState(move_count={self.move_count}, "
                f"current_player={self.current_player.name}, "
                f"result={self.result.name})")


def initialize() -> GameState:
    """Start a new game: empty board, Player ONE to move."""
    debug.debug("Initializing new game", "rules")
    return GameState()


def _winning_line(state: GameState) -> Optional[Tuple[Player, List[Coord]]]:
    if state.move_count < WIN_SCAN_MIN_MOVES:
        return None
    return state.board.find_winning_line()


def find_winner(state: GameState) -> Player:
    """
    Return the player owning a four-in-a-row on the board, or Player.EMPTY.

    The scan is skipped before move WIN_SCAN_MIN_MOVES, when neither
    player can have placed four marks yet.
    """
    found = _winning_line(state)
    if found is None:
        return Player.EMPTY
    return found[0]


def apply_move(state: GameState, column: int) -> GameState:
    """
    Drop the current player's piece into column.

    The state is updated in place and returned. A rejected move raises
    before anything is changed.

    Args:
        state: The game to play in
        column: Column index, 0-based

    Returns:
        The same GameState

    Raises:
        GameFinished: the game has already been won or drawn
        InvalidColumn: column outside [0, COLS)
        ColumnFull: no empty cell left in the column
    """
    try:
        if state.finished:
            raise GameFinished(column)
        c = column_index(column)
        row = state.board.lowest_empty_row(c)
        if row is None:
            raise ColumnFull(c)
    except MoveError as e:
        debug.debug(f"Rejected move in column {column!r}: {e}", "rules")
        raise

    player = state.current_player
    state.board.drop(c, player)
    state.move_count += 1
    state.last_move = (row, c)
    debug.debug(f"Move {state.move_count}: {player.name} -> column {c}", "rules")

    debug.start_timer("win_check")
    found = _winning_line(state)
    debug.end_timer("win_check", "rules")

    if found is not None:
        state.winner, state.winning_line = found
        state.finished = True
        debug.info(f"{state.winner.name} wins on move {state.move_count}", "rules")
    elif state.move_count == MAX_MOVES:
        state.finished = True
        debug.info("Game ends in a draw", "rules")
    else:
        state.current_player = player.other()

    return state
