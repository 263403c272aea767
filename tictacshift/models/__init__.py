# Data models and enums
from .enums import Player, GameMode, GameStatus, LineType, BotStrategy
from .move import Move
from .result import GameResult
from .winning_line import WinningLine, WinResult, WINNING_LINES

__all__ = [
    'Player', 'GameMode', 'GameStatus', 'LineType', 'BotStrategy',
    'Move', 'GameResult', 'WinningLine', 'WinResult', 'WINNING_LINES',
]
