"""Tests for network payloads and remote move application."""

import json

import pytest

from tictacshift.game.state import GameState
from tictacshift.models.enums import GameMode, Player
from tictacshift.models.result import GameResult
from tictacshift.network.messages import (
    Message,
    MessageError,
    MessageType,
    MovePayload,
    apply_remote_move,
    heartbeat_message,
    move_message,
    sync_message,
    victory_message,
)


@pytest.fixture
def network_game():
    return GameState(mode=GameMode.NETWORK)


class TestBuilders:

    def test_move_message(self, network_game):
        network_game.place_move(2, 1)
        message = move_message(network_game)
        assert message.type == MessageType.MOVE
        assert message.move == MovePayload(cell=7, player=0, turn=1)

    def test_move_message_needs_a_move(self, network_game):
        with pytest.raises(MessageError):
            move_message(network_game)

    def test_sync_message(self, network_game, play):
        play(network_game, [0, 4])
        message = sync_message(network_game)
        assert message.sync.board == [0, -1, -1, -1, 1, -1, -1, -1, -1]
        assert message.sync.turn == 2

    def test_sync_uses_visible_board(self, network_game, play, no_win_moves):
        play(network_game, no_win_moves(7))
        assert sync_message(network_game).sync.board[0] == -1

    def test_victory_message(self, network_game, play):
        play(network_game, [0, 3, 1, 4, 2])
        message = victory_message(network_game)
        assert message.victory.line == [0, 1, 2]
        assert message.victory.winner == 0

    def test_victory_message_needs_a_win(self, network_game):
        with pytest.raises(MessageError):
            victory_message(network_game)

    def test_heartbeat(self):
        message = heartbeat_message()
        assert message.type == MessageType.HEARTBEAT
        assert message.hb.t > 0


class TestCodec:

    def test_json_shape(self, network_game):
        network_game.place_move(1, 1)
        data = json.loads(move_message(network_game).to_json())
        assert data == {'type': 'move', 'move': {'cell': 4, 'player': 0, 'turn': 1}}

    def test_decode(self):
        message = Message.from_json('{"type": "sync", "sync": {"board": [-1, -1, -1, -1, 0, -1, -1, -1, -1], "turn": 1}}')
        assert message.type == MessageType.SYNC
        assert message.payload().board[4] == 0

    @pytest.mark.parametrize("text", [
        'not json',
        '[1, 2]',
        '{"type": "teleport"}',
        '{"type": "move"}',
        '{"type": "move", "move": {"cell": 4}}',
        '{"type": "victory", "victory": {"line": [0, 1, 2], "winner": 0, "extra": 1}}',
    ])
    def test_malformed_messages(self, text):
        with pytest.raises(MessageError):
            Message.from_json(text)

    def test_encoding_without_payload(self):
        with pytest.raises(MessageError):
            Message(type=MessageType.MOVE).to_json()


class TestRemoteMoves:

    def test_remote_move_goes_through_place_move(self, network_game):
        network_game.place_move(0, 0)
        assert apply_remote_move(network_game, MovePayload(cell=4, player=1, turn=2))
        assert network_game.board_state()[1][1] == Player.O
        assert network_game.current_player == Player.X

    def test_received_message_applies(self, network_game):
        sender = GameState(mode=GameMode.NETWORK)
        sender.place_move(2, 2)
        received = Message.from_json(move_message(sender).to_json())
        assert apply_remote_move(network_game, received.move)
        assert network_game.board_state() == sender.board_state()

    def test_wrong_turn_rejected(self, network_game):
        assert not apply_remote_move(network_game, MovePayload(cell=4, player=1, turn=1))
        assert network_game.moves == []

    @pytest.mark.parametrize("cell", [-1, 9, "4"])
    def test_bad_cell_rejected(self, network_game, cell):
        assert not apply_remote_move(network_game, MovePayload(cell=cell, player=0, turn=1))
        assert network_game.moves == []

    def test_unknown_player_rejected(self, network_game):
        assert not apply_remote_move(network_game, MovePayload(cell=4, player=7, turn=1))

    def test_occupied_cell_rejected(self, network_game):
        network_game.place_move(1, 1)
        assert not apply_remote_move(network_game, MovePayload(cell=4, player=1, turn=2))
        assert network_game.move_counter == 1

    def test_finished_game_rejects(self, network_game, play):
        play(network_game, [0, 3, 1, 4, 2])
        assert network_game.result == GameResult.win(Player.X)
        assert not apply_remote_move(network_game, MovePayload(cell=8, player=1, turn=6))
