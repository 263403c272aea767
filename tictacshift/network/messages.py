"""
Messages exchanged between two peers playing a network game.

Transport (framing, discovery, connections) belongs to the host
application. This module only turns game events into JSON payloads and
applies a received move to the local game through the same
``place_move`` path a local tap uses.

Players are encoded 0 = X, 1 = O. Cells are flat indices 0-8
(``row * 3 + column``); board snapshots use -1 for an empty cell.
"""
import json
import logging
import time
from dataclasses import dataclass, asdict
from enum import Enum
from typing import Any, Dict, List, Optional

from ..models.enums import Player
from ..game.state import GameState

logger = logging.getLogger(__name__)

EMPTY_CELL = -1


class MessageError(ValueError):
    """Raised when a payload cannot be built or decoded."""


class MessageType(Enum):
    MOVE = 'move'
    SYNC = 'sync'
    VICTORY = 'victory'
    HEARTBEAT = 'heartbeat'


def player_code(player: Player) -> int:
    return 0 if player == Player.X else 1


def player_from_code(code: int) -> Player:
    if code == 0:
        return Player.X
    if code == 1:
        return Player.O
    raise MessageError(f"Unknown player code: {code}")


@dataclass
class MovePayload:
    cell: int
    player: int
    turn: int


@dataclass
class SyncPayload:
    board: List[int]
    turn: int


@dataclass
class VictoryPayload:
    line: List[int]
    winner: int


@dataclass
class HeartbeatPayload:
    t: int


_PAYLOAD_FIELDS = {
    MessageType.MOVE: ('move', MovePayload),
    MessageType.SYNC: ('sync', SyncPayload),
    MessageType.VICTORY: ('victory', VictoryPayload),
    MessageType.HEARTBEAT: ('hb', HeartbeatPayload),
}


@dataclass
class Message:
    """
    One message on the wire. Exactly the payload matching ``type`` is set.

    Attributes:
        type: Kind of message
        move: Move payload for MOVE messages
        sync: Board snapshot for SYNC messages
        victory: Winning line for VICTORY messages
        hb: Timestamp for HEARTBEAT messages
    """
    type: MessageType
    move: Optional[MovePayload] = None
    sync: Optional[SyncPayload] = None
    victory: Optional[VictoryPayload] = None
    hb: Optional[HeartbeatPayload] = None

    def payload(self):
        """Get the payload matching the message type."""
        key, _ = _PAYLOAD_FIELDS[self.type]
        return getattr(self, key)

    def to_dict(self) -> Dict[str, Any]:
        data: Dict[str, Any] = {'type': self.type.value}
        key, _ = _PAYLOAD_FIELDS[self.type]
        payload = getattr(self, key)
        if payload is None:
            raise MessageError(f"{self.type.value} message has no payload")
        data[key] = asdict(payload)
        return data

    def to_json(self) -> str:
        return json.dumps(self.to_dict())

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'Message':
        """
        Decode a message dictionary.

        Raises:
            MessageError: If the type is unknown or its payload is missing
                or malformed
        """
        if not isinstance(data, dict):
            raise MessageError(f"Message must be an object, got {type(data).__name__}")

        try:
            message_type = MessageType(data.get('type'))
        except ValueError:
            raise MessageError(f"Unknown message type: {data.get('type')!r}")

        key, payload_cls = _PAYLOAD_FIELDS[message_type]
        raw = data.get(key)
        if not isinstance(raw, dict):
            raise MessageError(f"{message_type.value} message is missing its '{key}' payload")

        try:
            payload = payload_cls(**raw)
        except TypeError as e:
            raise MessageError(f"Malformed {message_type.value} payload: {e}")

        return cls(type=message_type, **{key: payload})

    @classmethod
    def from_json(cls, text: str) -> 'Message':
        try:
            data = json.loads(text)
        except json.JSONDecodeError as e:
            raise MessageError(f"Invalid JSON message: {e}")
        return cls.from_dict(data)


def move_message(state: GameState) -> Message:
    """Build the message announcing the last move placed in a game."""
    if not state.moves:
        raise MessageError("No move has been placed yet")

    last = state.moves[-1]
    payload = MovePayload(cell=last.cell, player=player_code(last.player), turn=state.move_counter)
    return Message(type=MessageType.MOVE, move=payload)


def sync_message(state: GameState) -> Message:
    """Build a snapshot of the visible board."""
    flat_board = [
        EMPTY_CELL if player is None else player_code(player)
        for row in state.board_state()
        for player in row
    ]
    return Message(type=MessageType.SYNC, sync=SyncPayload(board=flat_board, turn=state.move_counter))


def victory_message(state: GameState) -> Message:
    """Build the message announcing the winning line of a won game."""
    line = state.winning_line()
    if line is None:
        raise MessageError(f"Game is not won: {state.result}")

    payload = VictoryPayload(line=line.cells, winner=player_code(state.result.winner))
    return Message(type=MessageType.VICTORY, victory=payload)


def heartbeat_message() -> Message:
    return Message(type=MessageType.HEARTBEAT, hb=HeartbeatPayload(t=int(time.time() * 1000)))


def apply_remote_move(state: GameState, payload: MovePayload) -> bool:
    """
    Apply a move received from the remote peer.

    Args:
        state: Local copy of the game
        payload: Decoded move payload

    Returns:
        True if the move was placed, False if it is not the remote
        player's turn, the cell is out of range or the placement is illegal
    """
    if not (isinstance(payload.cell, int) and 0 <= payload.cell <= 8):
        logger.warning("Ignoring remote move to invalid cell %r", payload.cell)
        return False

    try:
        player = player_from_code(payload.player)
    except MessageError as e:
        logger.warning("Ignoring remote move: %s", e)
        return False

    if player != state.current_player:
        logger.warning(
            "Ignoring remote move by %s, it is %s's turn", player.value, state.current_player.value
        )
        return False

    row, column = divmod(payload.cell, 3)
    return state.place_move(row, column)
