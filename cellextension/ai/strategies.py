"""Easy-difficulty move strategies: territorial spread and one-ply greedy."""

import logging
import random
from typing import List, Optional, Sequence

from ..board.board_state import BoardState, opponent_of
from ..board.position import Position, neighbors8
from ..scoring.mechanisms import get_scorer

logger = logging.getLogger(__name__)

# Territorial neighbourhood values
EMPTY_NEIGHBOR_VALUE = 3.0
OWN_NEIGHBOR_VALUE = -2.0
OPPONENT_NEIGHBOR_VALUE = -1.0


class AIStrategyFailure(RuntimeError):
    """A strategy could not produce a move."""


def _candidates(board: BoardState, cells: Optional[Sequence[Position]]) -> List[Position]:
    candidates = list(cells) if cells is not None else board.available_cells()
    if not candidates:
        raise AIStrategyFailure("No candidate cells to choose from")
    return candidates


def territorial_value(board: BoardState, cell: Position, player: int) -> float:
    """Sum of 8-neighbourhood values around cell for player (without jitter)."""
    opponent = opponent_of(player)
    value = 0.0
    for neighbor in neighbors8(cell[0], cell[1], board.width, board.height):
        if board.is_occupied_by(neighbor, opponent):
            value += OPPONENT_NEIGHBOR_VALUE
        elif board.is_occupied_by(neighbor, player):
            value += OWN_NEIGHBOR_VALUE
        else:
            value += EMPTY_NEIGHBOR_VALUE
    return value


def territorial_move(board: BoardState, player: int,
                     rng: Optional[random.Random] = None,
                     jitter: float = 0.1,
                     cells: Optional[Sequence[Position]] = None) -> Position:
    """Pick the cell with the most open space around it.

    Own neighbours are penalised harder than opponent ones so early moves
    spread out instead of clustering. A small random jitter breaks ties.
    """
    rng = rng or random.Random()
    best_move = None
    best_value = float("-inf")

    for cell in _candidates(board, cells):
        value = territorial_value(board, cell, player) + rng.random() * jitter
        if value > best_value:
            best_value = value
            best_move = cell

    logger.debug("Territorial move %s (value %.2f)", best_move, best_value)
    return best_move


def greedy_move(board: BoardState, player: int, mechanism,
                rng: Optional[random.Random] = None,
                cells: Optional[Sequence[Position]] = None) -> Position:
    """Pick the cell that raises player's score the most after one placement.

    Ties are broken uniformly at random.
    """
    rng = rng or random.Random()
    scorer = get_scorer(mechanism)
    current_score = scorer(board, player)

    best_moves: List[Position] = []
    best_gain = float("-inf")

    for cell in _candidates(board, cells):
        gain = scorer(board.place_cell(player, cell), player) - current_score
        if gain > best_gain:
            best_gain = gain
            best_moves = [cell]
        elif gain == best_gain:
            best_moves.append(cell)

    move = rng.choice(best_moves)
    logger.debug("Greedy move %s (gain %s, %d tied)", move, best_gain, len(best_moves))
    return move
