"""
Function-style entry points for driving a game.

UI layers, network relays and bot drivers call these instead of reaching
into GameState directly.
"""
from typing import List, Optional

from .models.enums import Player, GameMode
from .models.move import Move
from .models.result import GameResult
from .game.state import GameState


def new_game(mode: GameMode = GameMode.LOCAL, seed: Optional[int] = None) -> GameState:
    """Create an empty game in the given mode."""
    return GameState(mode=mode, seed=seed)


def board_state(state: GameState) -> List[List[Optional[Player]]]:
    return state.board_state()


def can_place_move(state: GameState, row: int, col: int) -> bool:
    return state.can_place_move(row, col)


def place_move(state: GameState, row: int, col: int) -> bool:
    return state.place_move(row, col)


def will_fade(state: GameState, row: int, col: int) -> bool:
    return state.will_fade(row, col)


def visible_moves(state: GameState) -> List[Move]:
    return state.visible_moves()


def make_bot_move(state: GameState) -> bool:
    """Play the bot's turn; only does anything in vs bot mode."""
    return state.make_bot_move()


def reset_game(state: GameState):
    state.reset_game()


def result(state: GameState) -> GameResult:
    return state.result
