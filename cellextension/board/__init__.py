"""Board model: grid coordinates, immutable board state and components."""

from .board_state import (
    BoardState,
    InvalidCoordinateError,
    OccupiedError,
    OutOfBoundsError,
    PlacementError,
    opponent_of,
)
from .components import connected_components, edge_count, internal_edges
from .position import Position, adjacent_positions, decode, encode, is_valid_position

__all__ = [
    'BoardState',
    'PlacementError',
    'OutOfBoundsError',
    'OccupiedError',
    'InvalidCoordinateError',
    'opponent_of',
    'connected_components',
    'internal_edges',
    'edge_count',
    'Position',
    'adjacent_positions',
    'is_valid_position',
    'encode',
    'decode',
]
