"""
Rules engine for shifting tic-tac-toe, where the oldest move fades once
six newer moves are on the board.
"""
from .models import Player, GameMode, GameStatus, Move, GameResult, WinningLine
from .game.state import GameState
from .ai.engine import BotEngine, BotDecision, BotDecisionError
from .api import (
    new_game,
    board_state,
    can_place_move,
    place_move,
    will_fade,
    visible_moves,
    make_bot_move,
    reset_game,
    result,
)

__version__ = '1.0.0'

__all__ = [
    'Player', 'GameMode', 'GameStatus', 'Move', 'GameResult', 'WinningLine',
    'GameState', 'BotEngine', 'BotDecision', 'BotDecisionError',
    'new_game', 'board_state', 'can_place_move', 'place_move', 'will_fade',
    'visible_moves', 'make_bot_move', 'reset_game', 'result',
]
