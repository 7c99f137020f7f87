"""Game session state machine."""

from .session import (
    GameSession,
    Progress,
    SessionDelta,
    Snapshot,
    new_session,
    place_move,
    reset_game,
    set_progress,
    undo_move,
)

__all__ = [
    'GameSession',
    'Progress',
    'SessionDelta',
    'Snapshot',
    'new_session',
    'place_move',
    'reset_game',
    'set_progress',
    'undo_move',
]
