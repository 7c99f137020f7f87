"""Cell Extension: board model, scoring engine, game session and AI."""

from .ai import AIEngine, choose_move, get_ai_move, play_ai_turn
from .board import (
    BoardState,
    InvalidCoordinateError,
    OccupiedError,
    OutOfBoundsError,
    PlacementError,
)
from .config import GameSettings, ScoringMechanism
from .game import GameSession, Progress, SessionDelta
from .scoring import calculate_score, calculate_scores

__version__ = "0.1.0"

__all__ = [
    'AIEngine',
    'BoardState',
    'GameSession',
    'GameSettings',
    'InvalidCoordinateError',
    'OccupiedError',
    'OutOfBoundsError',
    'PlacementError',
    'Progress',
    'ScoringMechanism',
    'SessionDelta',
    'calculate_score',
    'calculate_scores',
    'choose_move',
    'get_ai_move',
    'play_ai_turn',
]
