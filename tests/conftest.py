"""Shared fixtures for the shifting tic-tac-toe tests."""

import pytest

from tictacshift.game.state import GameState
from tictacshift.models.enums import GameMode

# X cycles over cells 0, 2, 3, 7 and O over 1, 4, 5, 6. Neither set holds a
# line, and each cell comes back only after it has faded, so the sequence
# can be repeated up to the draw ceiling without a winner.
NO_WIN_CYCLE = [0, 1, 2, 4, 3, 5, 7, 6]


def _play(state, cells):
    for cell in cells:
        row, column = divmod(cell, 3)
        assert state.place_move(row, column), f"move to cell {cell} was rejected"
    return state


@pytest.fixture
def play():
    """Place a list of flat cell indices, failing the test on a rejection."""
    return _play


@pytest.fixture
def no_win_moves():
    """First n cells of a game that never produces a winner."""
    def moves(n):
        return [NO_WIN_CYCLE[i % len(NO_WIN_CYCLE)] for i in range(n)]
    return moves


@pytest.fixture
def game():
    return GameState()


@pytest.fixture
def bot_game():
    return GameState(mode=GameMode.VS_BOT, seed=1234)


def snapshot(state):
    return (
        list(state.moves),
        state.move_counter,
        state.current_player,
        state.result,
    )


@pytest.fixture
def state_snapshot():
    return snapshot
