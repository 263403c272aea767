"""
Move model for shifting tic-tac-toe game.
"""
from dataclasses import dataclass, field
import time
from .enums import Player


@dataclass(frozen=True)
class Move:
    """
    Represents a placement on the shifting tic-tac-toe board.

    Attributes:
        row: Row of the placed symbol (0-2)
        column: Column of the placed symbol (0-2)
        player: Player making the move
        move_number: 0-based index of the move within the game
        timestamp: Time when the move was made
    """
    row: int
    column: int
    player: Player
    move_number: int
    timestamp: float = field(default_factory=time.time)

    def __post_init__(self):
        """Validate parameters."""
        if not (0 <= self.row <= 2):
            raise ValueError(f"Row must be between 0 and 2, got {self.row}")

        if not (0 <= self.column <= 2):
            raise ValueError(f"Column must be between 0 and 2, got {self.column}")

        if self.move_number < 0:
            raise ValueError(f"Move number must be non-negative, got {self.move_number}")

        if not isinstance(self.player, Player):
            raise ValueError(f"Player must be a Player enum, got {type(self.player)}")

    @property
    def cell(self) -> int:
        """Flat cell index (0-8) of this move."""
        return self.row * 3 + self.column

    def __str__(self) -> str:
        """String representation of the move."""
        return f"#{self.move_number} {self.player.value} -> ({self.row}, {self.column})"
