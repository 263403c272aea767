"""
Core enums for the shifting tic-tac-toe game.
"""
from enum import Enum


class Player(Enum):
    """Represents the two players in the game."""
    X = 'X'
    O = 'O'

    def opposite(self) -> 'Player':
        """Get the other player."""
        return Player.O if self == Player.X else Player.X


class GameMode(Enum):
    """How a game is being played. Rules are the same in every mode."""
    LOCAL = 'local'
    VS_BOT = 'vs_bot'
    NETWORK = 'network'


class GameStatus(Enum):
    """Represents the current state of the game."""
    ONGOING = 'ongoing'
    WIN = 'win'
    DRAW = 'draw'


class LineType(Enum):
    """Types of winning lines on the 3x3 board."""
    ROW = 'row'
    COLUMN = 'column'
    DIAGONAL = 'diagonal'


class BotStrategy(Enum):
    """Rule of the bot heuristic that produced a move."""
    WIN = 'win'
    BLOCK = 'block'
    CENTER = 'center'
    CORNER = 'corner'
    ANY = 'any'
