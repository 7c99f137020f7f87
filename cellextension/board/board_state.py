"""Immutable board snapshot and cell placement."""

from dataclasses import dataclass, field
from typing import FrozenSet, Iterable, List, Optional, Tuple

import numpy as np

from .position import Position, adjacent_in_bounds, is_grid_coordinate, is_valid_position

PLAYERS: Tuple[int, int] = (0, 1)


class PlacementError(ValueError):
    """A cell could not be placed; the board is left unchanged."""

    def __init__(self, message: str, position: Position):
        super().__init__(message)
        self.position = position


class InvalidCoordinateError(PlacementError):
    """Position is not a pair of integer grid coordinates."""


class OutOfBoundsError(PlacementError):
    """Position lies outside the grid."""


class OccupiedError(PlacementError):
    """Position is already claimed by a player."""

    def __init__(self, message: str, position: Position, owner: int):
        super().__init__(message, position)
        self.owner = owner


def opponent_of(player: int) -> int:
    """The other player's index."""
    return 1 - player


def _check_player(player: int) -> None:
    if player not in PLAYERS:
        raise ValueError(f"Player index must be 0 or 1, got {player!r}")


@dataclass(frozen=True)
class BoardState:
    """Which player occupies which cell of a width x height grid.

    ``occupied[p]`` is the frozen set of (x, y) positions owned by player p.
    Instances are never mutated; :func:`place_cell` returns a new board.
    """

    width: int
    height: int
    occupied: Tuple[FrozenSet[Position], FrozenSet[Position]] = field(
        default=(frozenset(), frozenset())
    )

    def __post_init__(self):
        if not isinstance(self.width, int) or not isinstance(self.height, int) \
                or self.width <= 0 or self.height <= 0:
            raise ValueError("Board dimensions must be positive integers")
        if len(self.occupied) != 2:
            raise ValueError("Board must track exactly two players")
        for cells in self.occupied:
            for x, y in cells:
                if not (is_grid_coordinate(x) and is_grid_coordinate(y)):
                    raise ValueError(f"Cell ({x!r}, {y!r}) must have integer coordinates")
        cells0, cells1 = (
            frozenset((int(x), int(y)) for x, y in cells) for cells in self.occupied
        )
        object.__setattr__(self, "occupied", (cells0, cells1))

        overlap = cells0 & cells1
        if overlap:
            raise ValueError(f"Cells claimed by both players: {sorted(overlap)}")
        for x, y in cells0 | cells1:
            if not is_valid_position(x, y, self.width, self.height):
                raise ValueError(
                    f"Cell ({x}, {y}) is outside the {self.width}x{self.height} grid"
                )

    @classmethod
    def empty(cls, width: int, height: int) -> "BoardState":
        """A board with no occupied cells."""
        return cls(width=width, height=height)

    @classmethod
    def from_cells(cls, width: int, height: int,
                   cells0: Iterable[Position] = (),
                   cells1: Iterable[Position] = ()) -> "BoardState":
        """Build a board directly from each player's cells."""
        return cls(width=width, height=height,
                   occupied=(frozenset(cells0), frozenset(cells1)))

    @property
    def total_cells(self) -> int:
        return self.width * self.height

    @property
    def occupied_count(self) -> int:
        return len(self.occupied[0]) + len(self.occupied[1])

    @property
    def occupancy_fraction(self) -> float:
        """Fraction of the grid claimed by either player."""
        return self.occupied_count / self.total_cells

    def is_occupied(self, pos: Position) -> bool:
        return pos in self.occupied[0] or pos in self.occupied[1]

    def is_occupied_by(self, pos: Position, player: int) -> bool:
        _check_player(player)
        return pos in self.occupied[player]

    def owner(self, pos: Position) -> Optional[int]:
        """Player index occupying pos, or None if the cell is free."""
        for player in PLAYERS:
            if pos in self.occupied[player]:
                return player
        return None

    def available_cells(self) -> List[Position]:
        """Unclaimed cells in row-major order (y outer, x inner)."""
        return [
            (x, y)
            for y in range(self.height)
            for x in range(self.width)
            if not self.is_occupied((x, y))
        ]

    def is_game_over(self) -> bool:
        """True once every cell has been claimed."""
        return self.occupied_count == self.total_cells

    def adjacent_player_cells(self, pos: Position, player: int) -> List[Position]:
        """In-bounds orthogonal neighbours of pos owned by player."""
        _check_player(player)
        cells = self.occupied[player]
        return [n for n in adjacent_in_bounds(pos[0], pos[1], self.width, self.height)
                if n in cells]

    def place_cell(self, player: int, pos: Position) -> "BoardState":
        """Return a new board with pos claimed by player.

        Raises:
            OutOfBoundsError: pos is outside the grid
            InvalidCoordinateError: pos has non-integer coordinates
            OccupiedError: pos is already claimed by either player
        """
        _check_player(player)
        x, y = pos
        if not (is_grid_coordinate(x) and is_grid_coordinate(y)):
            raise InvalidCoordinateError(
                f"Position ({x!r}, {y!r}) must have integer grid coordinates", (x, y)
            )
        x, y = int(x), int(y)
        if not is_valid_position(x, y, self.width, self.height):
            raise OutOfBoundsError(
                f"Position ({x}, {y}) is outside the {self.width}x{self.height} grid",
                (x, y),
            )
        current_owner = self.owner((x, y))
        if current_owner is not None:
            raise OccupiedError(
                f"Position ({x}, {y}) is already occupied by player {current_owner}",
                (x, y),
                current_owner,
            )

        occupied = list(self.occupied)
        occupied[player] = occupied[player] | {(x, y)}
        return BoardState(width=self.width, height=self.height,
                          occupied=(occupied[0], occupied[1]))

    def to_array(self) -> np.ndarray:
        """Grid as int8 array indexed [y, x]: 0 empty, 1 player 0, -1 player 1."""
        grid = np.zeros((self.height, self.width), dtype=np.int8)
        for x, y in self.occupied[0]:
            grid[y, x] = 1
        for x, y in self.occupied[1]:
            grid[y, x] = -1
        return grid

    def render(self, symbols: str = ".XO") -> str:
        """Plain-text grid, one row per line."""
        rows = []
        for y in range(self.height):
            row = []
            for x in range(self.width):
                owner = self.owner((x, y))
                row.append(symbols[0] if owner is None else symbols[owner + 1])
            rows.append(" ".join(row))
        return "\n".join(rows)


# Functional aliases matching the engine's operation names

def empty(width: int, height: int) -> BoardState:
    return BoardState.empty(width, height)


def is_occupied(board: BoardState, pos: Position) -> bool:
    return board.is_occupied(pos)


def is_occupied_by(board: BoardState, pos: Position, player: int) -> bool:
    return board.is_occupied_by(pos, player)


def available_cells(board: BoardState) -> List[Position]:
    return board.available_cells()


def place_cell(board: BoardState, player: int, pos: Position) -> BoardState:
    return board.place_cell(player, pos)


def is_game_over(board: BoardState) -> bool:
    return board.is_game_over()
