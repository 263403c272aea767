from .messages import (
    Message,
    MessageError,
    MessageType,
    MovePayload,
    SyncPayload,
    VictoryPayload,
    HeartbeatPayload,
    apply_remote_move,
)

__all__ = [
    'Message', 'MessageError', 'MessageType', 'MovePayload', 'SyncPayload',
    'VictoryPayload', 'HeartbeatPayload', 'apply_remote_move',
]
