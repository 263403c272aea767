"""
Game result model for shifting tic-tac-toe.
"""
from dataclasses import dataclass
from typing import Optional
from .enums import Player, GameStatus


@dataclass(frozen=True)
class GameResult:
    """
    Outcome of a game: ongoing, won by a player, or drawn.

    Attributes:
        status: Whether the game is ongoing, won or drawn
        winner: Winning player, only set when status is WIN
    """
    status: GameStatus
    winner: Optional[Player] = None

    def __post_init__(self):
        """Validate that only a win carries a winner."""
        if self.status == GameStatus.WIN and self.winner is None:
            raise ValueError("A win result needs a winner")
        if self.status != GameStatus.WIN and self.winner is not None:
            raise ValueError(f"A {self.status.value} result cannot have a winner")

    @classmethod
    def ongoing(cls) -> 'GameResult':
        return cls(GameStatus.ONGOING)

    @classmethod
    def win(cls, player: Player) -> 'GameResult':
        return cls(GameStatus.WIN, player)

    @classmethod
    def draw(cls) -> 'GameResult':
        return cls(GameStatus.DRAW)

    @property
    def is_ongoing(self) -> bool:
        return self.status == GameStatus.ONGOING

    @property
    def is_win(self) -> bool:
        return self.status == GameStatus.WIN

    @property
    def is_draw(self) -> bool:
        return self.status == GameStatus.DRAW

    def __str__(self) -> str:
        """String representation of the result."""
        if self.is_win:
            return f"{self.winner.value} wins"
        return self.status.value
