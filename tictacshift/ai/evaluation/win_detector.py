"""
Win detection system for shifting tic-tac-toe.
"""
from typing import List, Optional, Tuple
from ...models.enums import Player
from ...models.winning_line import WinResult, WINNING_LINES

Board = List[List[Optional[Player]]]


class WinDetector:
    """
    Detects winning lines and one-move threats on a 3x3 board.

    The detector works on a plain grid of ``Optional[Player]`` so it can
    be fed the visible board of a game as well as simulated boards. Lines
    are always scanned rows first, then columns, then the two diagonals.
    """

    WINNING_LINES = WINNING_LINES

    def check_win(self, board: Board) -> Optional[WinResult]:
        """
        Check if there's a winning line on the board.

        Args:
            board: 3x3 grid of players or None

        Returns:
            WinResult for the first complete line, None otherwise
        """
        for line in self.WINNING_LINES:
            owner = line.owner(board)
            if owner is not None:
                return WinResult(winner=owner, winning_line=line)
        return None

    def check_winner(self, board: Board) -> Optional[Player]:
        """Get the winning player, or None if no line is complete."""
        win = self.check_win(board)
        return win.winner if win else None

    def is_winning_board(self, board: Board, player: Player) -> bool:
        """Check if a specific player holds any complete line."""
        return any(line.owner(board) == player for line in self.WINNING_LINES)

    def find_immediate_wins(self, board: Board, player: Player) -> List[Tuple[int, int]]:
        """
        Find cells that would immediately win the game for the player.

        Every empty cell is tried in row-major order by simulating the
        player's symbol there.

        Args:
            board: Current board
            player: Player to find winning moves for

        Returns:
            List of (row, column) cells, in row-major order
        """
        winning_moves = []
        for row in range(3):
            for col in range(3):
                if board[row][col] is not None:
                    continue

                test_board = [list(cells) for cells in board]
                test_board[row][col] = player
                if self.is_winning_board(test_board, player):
                    winning_moves.append((row, col))
        return winning_moves

    def find_winning_move(self, board: Board, player: Player) -> Optional[Tuple[int, int]]:
        """Get the first cell (row-major) that wins for the player, if any."""
        wins = self.find_immediate_wins(board, player)
        return wins[0] if wins else None

    def find_blocking_moves(self, board: Board, player: Player) -> List[Tuple[int, int]]:
        """
        Find cells that would block the opponent's immediate wins.

        Args:
            board: Current board
            player: Player who needs to block

        Returns:
            List of (row, column) cells
        """
        return self.find_immediate_wins(board, player.opposite())
