import pytest

from connect4.game.rules import apply_move, initialize

# Player ONE and TWO alternate through every column pair so that no row,
# column or diagonal ever holds four of a kind; the board fills on move 42.
DRAW_SEQUENCE = (
    [0, 2, 2, 0, 0, 2, 2, 0, 0, 2, 2, 0]
    + [1, 3, 3, 1, 1, 3, 3, 1, 1, 3, 3, 1]
    + [4, 6, 6, 4, 4, 6, 6, 4, 4, 6, 6, 4]
    + [5] * 6
)


@pytest.fixture
def draw_sequence():
    return list(DRAW_SEQUENCE)


@pytest.fixture
def play():
    """Apply a sequence of 0-based columns to a fresh game."""
    def _play(columns, state=None):
        state = state if state is not None else initialize()
        for column in columns:
            apply_move(state, column)
        return state
    return _play


@pytest.fixture
def scripted_io():
    """Fake input/output pair; input raises EOFError once the script runs out."""
    class ScriptedIO:
        def __init__(self):
            self.lines = []
            self.prompts = []
            self.printed = []

        def feed(self, *lines):
            self.lines.extend(lines)
            return self

        def input(self, prompt):
            self.prompts.append(prompt)
            if not self.lines:
                raise EOFError
            return self.lines.pop(0)

        def output(self, text):
            self.printed.append(text)

        @property
        def text(self):
            return "\n".join(self.printed)

    return ScriptedIO()
