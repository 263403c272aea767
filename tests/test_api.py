"""Tests for the function-style entry points."""

import tictacshift
from tictacshift import GameMode, GameResult, Player


class TestFacade:

    def test_new_game_modes(self):
        for mode in GameMode:
            state = tictacshift.new_game(mode)
            assert state.mode == mode
            assert tictacshift.result(state) == GameResult.ongoing()

    def test_default_mode_is_local(self):
        assert tictacshift.new_game().mode == GameMode.LOCAL

    def test_win_through_facade(self):
        state = tictacshift.new_game()
        for row, col in [(0, 0), (1, 0), (0, 1), (1, 1), (0, 2)]:
            assert tictacshift.can_place_move(state, row, col)
            assert tictacshift.place_move(state, row, col)
        assert tictacshift.result(state) == GameResult.win(Player.X)
        assert tictacshift.board_state(state)[0] == [Player.X] * 3
        assert len(tictacshift.visible_moves(state)) == 5

    def test_will_fade(self):
        state = tictacshift.new_game()
        for cell in [0, 1, 2, 4, 3, 5]:
            tictacshift.place_move(state, *divmod(cell, 3))
        assert tictacshift.will_fade(state, 0, 0)
        assert not tictacshift.will_fade(state, 2, 2)

    def test_bot_and_reset(self):
        state = tictacshift.new_game(GameMode.VS_BOT, seed=0)
        tictacshift.place_move(state, 0, 0)
        assert tictacshift.make_bot_move(state)
        assert state.move_counter == 2

        tictacshift.reset_game(state)
        assert state.moves == []
        assert state.mode == GameMode.VS_BOT
        assert tictacshift.result(state) == GameResult.ongoing()

    def test_bot_ignored_outside_vs_bot(self):
        state = tictacshift.new_game(GameMode.NETWORK)
        tictacshift.place_move(state, 0, 0)
        assert not tictacshift.make_bot_move(state)
