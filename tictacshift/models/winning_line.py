"""
Winning line models for shifting tic-tac-toe game.
"""
from dataclasses import dataclass
from typing import List, Optional, Tuple
from .enums import Player, LineType


@dataclass(frozen=True)
class WinningLine:
    """
    Represents one of the eight lines of the 3x3 board.

    Attributes:
        type: Row, column or diagonal
        index: Row or column number; for diagonals 0 is the main diagonal
            and 1 the anti-diagonal
        positions: The three (row, column) cells forming the line
    """
    type: LineType
    index: int
    positions: Tuple[Tuple[int, int], ...]

    def __post_init__(self):
        """Validate line parameters."""
        if len(self.positions) != 3:
            raise ValueError(f"Winning line must have exactly 3 positions, got {len(self.positions)}")

        for row, col in self.positions:
            if not (0 <= row <= 2 and 0 <= col <= 2):
                raise ValueError(f"Line position must be inside the board, got ({row}, {col})")

    @property
    def cells(self) -> List[int]:
        """Flat cell indices (0-8) of the line."""
        return [row * 3 + col for row, col in self.positions]

    def owner(self, board: List[List[Optional[Player]]]) -> Optional[Player]:
        """Return the player holding all three cells of the line, if any."""
        first_row, first_col = self.positions[0]
        player = board[first_row][first_col]
        if player is None:
            return None

        for row, col in self.positions[1:]:
            if board[row][col] != player:
                return None
        return player

    def __str__(self) -> str:
        """String representation of the line."""
        return f"{self.type.value.title()} {self.index}: {list(self.positions)}"


def _build_winning_lines() -> List[WinningLine]:
    lines = []
    for row in range(3):
        lines.append(WinningLine(LineType.ROW, row, tuple((row, col) for col in range(3))))
    for col in range(3):
        lines.append(WinningLine(LineType.COLUMN, col, tuple((row, col) for row in range(3))))
    lines.append(WinningLine(LineType.DIAGONAL, 0, ((0, 0), (1, 1), (2, 2))))
    lines.append(WinningLine(LineType.DIAGONAL, 1, ((0, 2), (1, 1), (2, 0))))
    return lines


# Rows, then columns, then main diagonal, then anti-diagonal
WINNING_LINES: List[WinningLine] = _build_winning_lines()


@dataclass
class WinResult:
    """
    Represents the result of a winning condition check.

    Attributes:
        winner: Player who won
        winning_line: The line that created the win
    """
    winner: Player
    winning_line: WinningLine

    def __str__(self) -> str:
        """String representation of the win result."""
        return f"{self.winner.value} wins with {self.winning_line}"
