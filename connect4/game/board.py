"""
board.py - Board representation for Connect Four

This module implements the Board class, a fixed ROWS x COLS numpy grid of
Player values with gravity drops and the forward-ray win scan.
Row 0 is the top of the board and row ROWS-1 is the bottom.
"""

import operator
from typing import Iterable, List, Optional, Tuple

import numpy as np

from connect4.debug import debug
from connect4.game.errors import ColumnFull, InvalidColumn
from connect4.utils import COLS, CONNECT_N, DIRECTION_VECTORS, ROWS, Player

Coord = Tuple[int, int]


def column_index(column) -> int:
    """
    Normalise a column argument to a plain int.

    Raises:
        InvalidColumn: if the value is not an integer or is out of range
    """
    if isinstance(column, (bool, np.bool_)):
        raise InvalidColumn(column)
    try:
        c = operator.index(column)
    except TypeError:
        raise InvalidColumn(column) from None
    if not (0 <= c < COLS):
        raise InvalidColumn(column)
    return c


class Board:
    """
    Represents a Connect Four game board.

    The board only knows about marks in cells; turn order and game
    completion belong to GameState.
    """

    def __init__(self):
        debug.trace("Initializing new Board", "board")
        self.reset()

    def reset(self):
        """Reset the board to an empty state."""
        self.grid = np.full((ROWS, COLS), Player.EMPTY.value, dtype=np.int8)

    def copy(self) -> 'Board':
        new_board = Board.__new__(Board)
        new_board.grid = self.grid.copy()
        return new_board

    def cell(self, row: int, col: int) -> Player:
        return Player(int(self.grid[row, col]))

    def lowest_empty_row(self, column: int) -> Optional[int]:
        """
        Find the row a piece dropped in this column would land on.

        Returns:
            Row index, or None if the column is full
        """
        c = column_index(column)
        for row in range(ROWS - 1, -1, -1):
            if self.grid[row, c] == Player.EMPTY.value:
                return row
        return None

    def drop(self, column: int, player: Player) -> int:
        """
        Drop a piece for player into column.

        Returns:
            The row the piece landed on

        Raises:
            InvalidColumn: column outside [0, COLS)
            ColumnFull: column has no empty cell
        """
        if player == Player.EMPTY:
            raise ValueError("Cannot drop an empty piece")

        c = column_index(column)
        row = self.lowest_empty_row(c)
        if row is None:
            raise ColumnFull(c)

        debug.trace(f"Placing {player.name} at ({row}, {c})", "board")
        self.grid[row, c] = player.value
        return row

    def valid_moves(self) -> List[int]:
        """Columns that still have room for a piece."""
        return [col for col in range(COLS) if self.grid[0, col] == Player.EMPTY.value]

    def is_full(self) -> bool:
        return bool(np.all(self.grid != Player.EMPTY.value))

    def count(self, player: Player) -> int:
        return int(np.count_nonzero(self.grid == player.value))

    def find_winning_line(self,
                          directions: Optional[Iterable[Tuple[int, int]]] = None
                          ) -> Optional[Tuple[Player, List[Coord]]]:
        """
        Scan the whole board for CONNECT_N identical marks in a line.

        Cells are visited top-to-bottom, left-to-right. From every occupied
        cell a ray is walked forward along each direction while it stays on
        the board and on the same mark, so every line is found from its
        first visited cell.

        Args:
            directions: (row-step, col-step) pairs, DIRECTION_VECTORS by default

        Returns:
            (player, cells of the line) for the first line found, or None
        """
        if directions is None:
            directions = DIRECTION_VECTORS.values()
        directions = list(directions)

        # Plain lists index much faster than numpy scalars
        cells = self.grid.tolist()
        empty = Player.EMPTY.value

        for row in range(ROWS):
            for col in range(COLS):
                mark = cells[row][col]
                if mark == empty:
                    continue
                for dr, dc in directions:
                    line = [(row, col)]
                    r, c = row + dr, col + dc
                    while 0 <= r < ROWS and 0 <= c < COLS and cells[r][c] == mark:
                        line.append((r, c))
                        if len(line) == CONNECT_N:
                            return Player(mark), line
                        r += dr
                        c += dc
        return None

    def __eq__(self, other) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return bool(np.array_equal(self.grid, other.grid))

    def __str__(self) -> str:
        rows = (" ".join(str(Player(v)) if v else "." for v in row) for row in self.grid.tolist())
        return "\n".join(rows)
