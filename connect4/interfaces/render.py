"""
render.py - Text rendering of a Connect Four game for the terminal

Produces the board display printed after every action: a header with the
move count, one line per board row, column numbers and, once the game is
over, a banner naming the winner or announcing a draw.
"""

from typing import Dict

from connect4.game.rules import GameState
from connect4.utils import Player

# ANSI color codes for terminal output
COLORS = {
    "RED": "\033[31m",
    "YELLOW": "\033[33m",
    "BOLD": "\033[1m",
    "RESET": "\033[0m",
}

COLOR_GLYPHS: Dict[Player, str] = {
    Player.ONE: "🔴",
    Player.TWO: "🟡",
    Player.EMPTY: "🔵",
}

PLAIN_GLYPHS: Dict[Player, str] = {
    Player.ONE: "X",
    Player.TWO: "O",
    Player.EMPTY: ".",
}

RULE = "-" * 20


class Renderer:
    """Turns a GameState into the lines shown in the terminal."""

    def __init__(self, use_color: bool = True):
        self.use_color = use_color
        self.glyphs = COLOR_GLYPHS if use_color else PLAIN_GLYPHS

    def paint(self, text: str, color: str) -> str:
        if not self.use_color:
            return text
        return f"{COLORS[color]}{text}{COLORS['RESET']}"

    def _cell(self, state: GameState, row: int, col: int) -> str:
        glyph = self.glyphs[state.board.cell(row, col)]
        if (row, col) in state.winning_line:
            return self.paint(glyph, "BOLD") if self.use_color else glyph.lower()
        return glyph

    def banner(self, state: GameState) -> str:
        if state.winner == Player.EMPTY:
            return self.paint("It's a Draw!", "YELLOW")
        return self.paint(f"{self.glyphs[state.winner]} {state.winner.label} Wins!", "YELLOW")

    def render_game(self, state: GameState) -> str:
        """Render the full board display for state."""
        lines = [
            self.paint(RULE, "YELLOW"),
            self.paint(f"Connect 4  (Move: {state.move_count})", "YELLOW"),
            self.paint(RULE, "YELLOW"),
        ]
        rows, cols = state.board.grid.shape
        for row in range(rows):
            lines.append(" ".join(self._cell(state, row, col) for col in range(cols)))

        # Emoji discs are two columns wide
        sep = "  " if self.use_color else " "
        lines.append(sep.join(str(col + 1) for col in range(cols)))
        lines.append(self.paint(RULE, "YELLOW"))

        if state.finished:
            lines.append(self.banner(state))
            lines.append(self.paint(RULE, "YELLOW"))
        return "\n".join(lines)

    def render_error(self, state: GameState, message: str) -> str:
        """Render the board followed by an error line."""
        return f"{self.render_game(state)}\n{self.paint(f'Error: {message}', 'RED')}"


def render_game(state: GameState, use_color: bool = True) -> str:
    return Renderer(use_color).render_game(state)


def render_error(state: GameState, message: str, use_color: bool = True) -> str:
    return Renderer(use_color).render_error(state, message)
