"""
cli.py - Command-line interface for playing Connect Four

This module provides the terminal session that reads column choices,
hands them to the rule engine, prints the board after every action and
offers a rematch once a game is over.
"""

import argparse
import sys
from typing import Callable, List, Optional

from connect4.debug import DebugLevel, debug
from connect4.game.errors import MoveError
from connect4.game.rules import GameState, apply_move, initialize
from connect4.interfaces.render import Renderer
from connect4.utils import COLS, Player

COLUMN_PROMPT = f"Enter a column number (1..{COLS}): "
REPLAY_PROMPT = "Play again? (y/n) "

NOT_A_NUMBER = "Please enter a number"
OUT_OF_RANGE = "Invalid column number"
INVALID_REPLY = "Invalid input"


class TerminalSession:
    """
    Two players sharing one terminal.

    Input and output are injectable so a session can be driven by a
    script instead of a keyboard.
    """

    def __init__(self,
                 input_func: Optional[Callable[[str], str]] = None,
                 output: Optional[Callable[[str], None]] = None,
                 use_color: bool = True):
        self.input_func = input_func or input
        self.output = output or print
        self.renderer = Renderer(use_color)
        self.state: Optional[GameState] = None
        self.games_played = 0

    def start(self) -> None:
        """Replace the current game with a fresh one and show it."""
        self.state = initialize()
        self.games_played += 1
        debug.info(f"Starting game {self.games_played}", "session")
        self.show_board()

    def show_board(self) -> None:
        self.output(self.renderer.render_game(self.state))

    def show_error(self, message: str) -> None:
        self.output(self.renderer.render_error(self.state, message))

    def read_column(self) -> Optional[int]:
        """
        Prompt for a column and convert it to a 0-based index.

        Returns:
            Column index, or None if the input was rejected (the board and
            error have already been shown)
        """
        raw = self.input_func(COLUMN_PROMPT).strip()
        try:
            number = int(raw)
        except ValueError:
            debug.debug(f"Unparseable column input {raw!r}", "session")
            self.show_error(NOT_A_NUMBER)
            return None

        if not (1 <= number <= COLS):
            debug.debug(f"Column input {number} out of range", "session")
            self.show_error(OUT_OF_RANGE)
            return None

        return number - 1

    def play_turn(self) -> None:
        """Read one column choice and apply it."""
        self.output("\n")
        player = self.state.current_player
        self.output("Player 1" if player == Player.ONE else "Player 2")

        column = self.read_column()
        if column is None:
            return

        try:
            apply_move(self.state, column)
        except MoveError as e:
            self.show_error(str(e))
            return

        self.show_board()

    def ask_play_again(self) -> bool:
        """Keep asking until the answer is y or n."""
        while True:
            reply = self.input_func(REPLAY_PROMPT).strip().lower()
            if reply == "y":
                return True
            if reply == "n":
                return False
            self.output(INVALID_REPLY)

    def play_game(self) -> None:
        while not self.state.finished:
            self.play_turn()
        debug.info(f"Game {self.games_played} finished: {self.state.result.name}", "session")

    def run(self) -> None:
        """Play games until the players decline a rematch or input ends."""
        try:
            self.start()
            while True:
                self.play_game()
                if not self.ask_play_again():
                    break
                self.start()
        except (EOFError, KeyboardInterrupt):
            debug.info("Input closed, ending session", "session")
            self.output("")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description='Connect Four for two players in a terminal')
    parser.add_argument('--debug',
                        action='store_true',
                        help='Enable debug logging')
    parser.add_argument('--debug_level',
                        choices=[level.name.lower() for level in DebugLevel],
                        default='warning',
                        help='Logging level (ignored when --debug is given)')
    parser.add_argument('--log_file',
                        default=None,
                        help='Also write log messages to this file')
    parser.add_argument('--no-color',
                        dest='color',
                        action='store_false',
                        help='Plain ASCII board without ANSI colors or emoji')
    return parser


def configure_debug(args: argparse.Namespace) -> None:
    """Configure the debug manager from parsed arguments."""
    if args.debug:
        debug.configure(level=DebugLevel.DEBUG)
    else:
        debug.set_from_string(args.debug_level)
    if args.log_file:
        debug.configure(log_file=args.log_file)


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for the CLI."""
    args = build_parser().parse_args(argv)
    configure_debug(args)

    session = TerminalSession(use_color=args.color and sys.stdout.isatty())
    session.run()
    return 0


if __name__ == "__main__":
    sys.exit(main())
