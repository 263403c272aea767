"""Tests for line scanning and one-ply win search."""

from tictacshift.ai.evaluation.win_detector import WinDetector
from tictacshift.models.enums import Player, LineType

X, O = Player.X, Player.O


def empty_board():
    return [[None] * 3 for _ in range(3)]


class TestCheckWin:

    def setup_method(self):
        self.detector = WinDetector()

    def test_empty_board(self):
        assert self.detector.check_win(empty_board()) is None
        assert self.detector.check_winner(empty_board()) is None

    def test_row_win(self):
        board = [
            [None, None, None],
            [O, O, O],
            [X, X, None],
        ]
        win = self.detector.check_win(board)
        assert win.winner == O
        assert win.winning_line.type == LineType.ROW
        assert win.winning_line.index == 1

    def test_rows_scanned_before_columns(self):
        # X completes row 0 and column 0 with the same mark
        board = [
            [X, X, X],
            [X, O, None],
            [X, O, O],
        ]
        win = self.detector.check_win(board)
        assert win.winning_line.type == LineType.ROW

    def test_diagonal_win(self):
        board = [
            [O, X, None],
            [None, O, X],
            [X, None, O],
        ]
        assert self.detector.check_winner(board) == O
        assert self.detector.is_winning_board(board, O)
        assert not self.detector.is_winning_board(board, X)


class TestImmediateWins:

    def setup_method(self):
        self.detector = WinDetector()

    def test_finds_completing_cell(self):
        board = [
            [X, X, None],
            [O, None, None],
            [O, None, None],
        ]
        assert self.detector.find_winning_move(board, X) == (0, 2)
        # O's column is already blocked by X at (0, 0)
        assert self.detector.find_winning_move(board, O) is None

    def test_all_wins_in_row_major_order(self):
        board = [
            [O, None, O],
            [None, None, None],
            [O, None, None],
        ]
        assert self.detector.find_immediate_wins(board, O) == [(0, 1), (1, 0), (1, 1)]
        assert self.detector.find_immediate_wins(board, X) == []

    def test_blocking_moves(self):
        board = [
            [X, None, None],
            [None, X, None],
            [None, None, None],
        ]
        assert self.detector.find_blocking_moves(board, O) == [(2, 2)]

    def test_simulation_does_not_touch_board(self):
        board = [
            [X, X, None],
            [None, None, None],
            [None, None, None],
        ]
        self.detector.find_immediate_wins(board, X)
        assert board[0][2] is None
