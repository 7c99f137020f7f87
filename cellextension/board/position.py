"""Integer grid coordinates, adjacency and position keys."""

import numbers
import re
from typing import List, Tuple

Position = Tuple[int, int]  # (x, y) grid coordinates

# 4-neighbourhood (von Neumann): right, left, down, up
ORTHOGONAL_OFFSETS: Tuple[Position, ...] = ((1, 0), (-1, 0), (0, 1), (0, -1))
DIAGONAL_OFFSETS: Tuple[Position, ...] = ((-1, -1), (1, -1), (-1, 1), (1, 1))

KEY_SEPARATOR = "-"
# Coordinates may be negative (unfiltered neighbours), so "-1-0" is a valid key
_KEY_PATTERN = re.compile(r"^(-?\d+)-(-?\d+)$")


def is_grid_coordinate(value) -> bool:
    """True for integer coordinates (numpy integers included, bools excluded)."""
    return isinstance(value, numbers.Integral) and not isinstance(value, bool)


def is_valid_position(x: int, y: int, width: int, height: int) -> bool:
    """Check that (x, y) lies within [0, width) x [0, height)."""
    return 0 <= x < width and 0 <= y < height


def adjacent_positions(x: int, y: int) -> List[Position]:
    """The four orthogonal neighbours of (x, y), not filtered by bounds."""
    return [(x + dx, y + dy) for dx, dy in ORTHOGONAL_OFFSETS]


def adjacent_in_bounds(x: int, y: int, width: int, height: int) -> List[Position]:
    """Orthogonal neighbours of (x, y) that lie on the grid."""
    return [
        (ax, ay) for ax, ay in adjacent_positions(x, y)
        if is_valid_position(ax, ay, width, height)
    ]


def neighbors8(x: int, y: int, width: int, height: int) -> List[Position]:
    """Orthogonal and diagonal neighbours of (x, y) that lie on the grid."""
    diagonal = [(x + dx, y + dy) for dx, dy in DIAGONAL_OFFSETS]
    return adjacent_in_bounds(x, y, width, height) + [
        (dx, dy) for dx, dy in diagonal if is_valid_position(dx, dy, width, height)
    ]


def is_adjacent(a: Position, b: Position) -> bool:
    """True iff a and b differ by exactly 1 along exactly one axis."""
    return abs(a[0] - b[0]) + abs(a[1] - b[1]) == 1


def encode(x: int, y: int) -> str:
    """Encode a position as its canonical ``"x-y"`` key."""
    if not (is_grid_coordinate(x) and is_grid_coordinate(y)):
        raise TypeError(f"Grid coordinates must be integers, got ({x!r}, {y!r})")
    return f"{int(x)}{KEY_SEPARATOR}{int(y)}"


def decode(key: str) -> Position:
    """Decode an ``"x-y"`` key back into (x, y). Malformed keys raise ValueError."""
    match = _KEY_PATTERN.match(key)
    if match is None:
        raise ValueError(f"Malformed position key: {key!r}")
    return int(match.group(1)), int(match.group(2))


def edge_key(a: Position, b: Position) -> str:
    """Order-independent key for the edge between two cells."""
    key_a, key_b = encode(*a), encode(*b)
    return f"{key_a}<->{key_b}" if key_a < key_b else f"{key_b}<->{key_a}"
