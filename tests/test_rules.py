"""Unit tests for the rule engine: initialize, apply_move, find_winner."""

import pytest

from connect4.game.errors import ColumnFull, GameFinished, InvalidColumn, MoveError
from connect4.game.rules import MAX_MOVES, apply_move, find_winner, initialize
from connect4.utils import COLS, ROWS, GameResult, Player

# Each sequence completes a line on its final move
HORIZONTAL_WIN = [0, 0, 1, 1, 2, 2, 3]
VERTICAL_WIN = [0, 1, 0, 1, 0, 1, 0]
ANTI_DIAGONAL_WIN = [0, 1, 1, 2, 3, 2, 2, 3, 6, 3, 3]
DIAGONAL_WIN = [6 - c for c in ANTI_DIAGONAL_WIN]
PLAYER_TWO_VERTICAL_WIN = [0, 1, 0, 1, 0, 1, 2, 1]


class TestInitialize:
    def test_fresh_state(self):
        state = initialize()
        assert state.move_count == 0
        assert state.current_player == Player.ONE
        assert state.finished is False
        assert state.winner == Player.EMPTY
        assert state.result == GameResult.IN_PROGRESS
        assert not state.result.is_game_over()
        assert state.board.count(Player.EMPTY) == ROWS * COLS
        assert state.last_move is None
        assert state.winning_line == []

    def test_each_call_is_independent(self):
        first = initialize()
        apply_move(first, 0)
        assert initialize().move_count == 0


class TestApplyMove:
    def test_returns_same_state(self):
        state = initialize()
        assert apply_move(state, 3) is state

    def test_places_current_player_mark(self):
        state = apply_move(initialize(), 3)
        assert state.board.cell(ROWS - 1, 3) == Player.ONE
        assert state.last_move == (ROWS - 1, 3)

    def test_players_alternate(self):
        state = initialize()
        expected = Player.ONE
        for column in [3, 3, 4, 2, 6, 0]:
            assert state.current_player == expected
            apply_move(state, column)
            expected = expected.other()
            assert state.current_player == expected

    def test_move_count_increments(self, draw_sequence):
        state = initialize()
        for i, column in enumerate(draw_sequence, start=1):
            apply_move(state, column)
            assert state.move_count == i
        assert state.move_count == MAX_MOVES

    def test_column_seven_is_invalid(self):
        state = initialize()
        with pytest.raises(InvalidColumn) as exc:
            apply_move(state, 7)
        assert str(exc.value) == "Invalid column"
        assert exc.value.column == 7

    @pytest.mark.parametrize("column", [-1, COLS, 42])
    def test_invalid_column_leaves_state_unchanged(self, play, column):
        state = play([3, 4])
        before = state.copy()
        with pytest.raises(InvalidColumn):
            apply_move(state, column)
        assert state == before

    def test_seventh_move_in_column_is_rejected(self, play):
        state = play([2] * ROWS)
        assert state.finished is False
        before = state.copy()
        with pytest.raises(ColumnFull) as exc:
            apply_move(state, 2)
        assert str(exc.value) == "Column is full"
        assert state == before
        assert state.current_player == Player.ONE

    def test_move_after_win_is_rejected(self, play):
        state = play(VERTICAL_WIN)
        before = state.copy()
        for column in range(COLS):
            with pytest.raises(GameFinished) as exc:
                apply_move(state, column)
            assert str(exc.value) == "Game is already finished"
        assert state == before

    def test_finished_checked_before_column(self, play):
        state = play(VERTICAL_WIN)
        with pytest.raises(GameFinished):
            apply_move(state, 99)

    def test_errors_share_base_class(self):
        for error in (GameFinished, InvalidColumn, ColumnFull):
            assert issubclass(error, MoveError)


class TestWinDetection:
    @pytest.mark.parametrize("moves, winner", [
        (HORIZONTAL_WIN, Player.ONE),
        (VERTICAL_WIN, Player.ONE),
        (DIAGONAL_WIN, Player.ONE),
        (ANTI_DIAGONAL_WIN, Player.ONE),
        (PLAYER_TWO_VERTICAL_WIN, Player.TWO),
    ])
    def test_win_on_completing_move_only(self, moves, winner):
        state = initialize()
        for column in moves[:-1]:
            apply_move(state, column)
            assert state.finished is False
            assert state.winner == Player.EMPTY

        mover = state.current_player
        apply_move(state, moves[-1])
        assert state.finished is True
        assert state.winner == winner
        assert find_winner(state) == winner
        # The winner keeps the turn
        assert state.current_player == mover
        assert len(state.winning_line) == 4
        assert state.last_move in state.winning_line

    def test_column_zero_scenario(self, play):
        state = play(VERTICAL_WIN)
        assert state.move_count == 7
        assert state.result == GameResult.PLAYER_ONE_WIN
        assert state.result.is_game_over()
        assert state.winning_line == [(2, 0), (3, 0), (4, 0), (5, 0)]

    def test_player_two_result(self, play):
        assert play(PLAYER_TWO_VERTICAL_WIN).result == GameResult.PLAYER_TWO_WIN

    def test_find_winner_on_open_board(self, play):
        assert find_winner(play([3, 3, 4, 4, 0, 6, 1, 6])) == Player.EMPTY

    def test_find_winner_skips_scan_before_seventh_move(self):
        state = initialize()
        # Placed directly on the board; apply_move can never get here in six moves
        for _ in range(4):
            state.board.drop(0, Player.TWO)
        state.move_count = 6
        assert find_winner(state) == Player.EMPTY
        state.move_count = 7
        assert find_winner(state) == Player.TWO


class TestDraw:
    def test_full_board_without_line(self, draw_sequence):
        state = initialize()
        for column in draw_sequence[:-1]:
            apply_move(state, column)
            assert state.finished is False

        apply_move(state, draw_sequence[-1])
        assert state.finished is True
        assert state.winner == Player.EMPTY
        assert state.result == GameResult.DRAW
        assert state.is_draw
        assert state.board.is_full()
        assert state.winning_line == []

    def test_move_after_draw_is_rejected(self, play, draw_sequence):
        state = play(draw_sequence)
        before = state.copy()
        with pytest.raises(GameFinished):
            apply_move(state, 0)
        assert state == before
