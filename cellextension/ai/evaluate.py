"""Heuristic board evaluation used by the minimax search."""

from typing import Optional

from ..board.board_state import BoardState, opponent_of
from ..board.components import connected_components, edge_count
from ..config import ScoringMechanism
from ..scoring.mechanisms import calculate_score

# Multiplication: favour few large own components, fear large opponent ones
AVG_COMPONENT_WEIGHT = 0.5
LARGEST_OPPONENT_COMPONENT_WEIGHT = 0.3

# Connection / extension: internal edge differential
EDGE_DIFF_WEIGHT = 0.4

# Extension: expansion potential over empty cells
OWN_EXPANSION_WEIGHT = 1.0
OPPONENT_EXPANSION_WEIGHT = 0.5
EXPANSION_WEIGHT = 0.25

LATE_GAME_THRESHOLD = 0.7
LATE_GAME_SCALE = 2.0


def expansion_potential(board: BoardState, player: int) -> float:
    """Own minus (weighted) opponent adjacency summed over empty cells."""
    opponent = opponent_of(player)
    own = 0.0
    theirs = 0.0
    for cell in board.available_cells():
        own += OWN_EXPANSION_WEIGHT * len(board.adjacent_player_cells(cell, player))
        theirs += OPPONENT_EXPANSION_WEIGHT * len(board.adjacent_player_cells(cell, opponent))
    return own - theirs


def late_game_factor(progress: float,
                     threshold: float = LATE_GAME_THRESHOLD,
                     scale: float = LATE_GAME_SCALE) -> float:
    """Multiplier emphasising the raw score gap near the end of the game."""
    if progress > threshold:
        return 1 + (progress - threshold) * scale
    return 1.0


def evaluate_board(board: BoardState, player: int, mechanism,
                   progress: Optional[float] = None,
                   late_game_threshold: float = LATE_GAME_THRESHOLD,
                   late_game_scale: float = LATE_GAME_SCALE) -> float:
    """Evaluate board from player's perspective (higher is better).

    Args:
        board: Board to evaluate
        player: Perspective player index
        mechanism: Active scoring mechanism
        progress: Game-progress fraction; defaults to the board's occupancy
        late_game_threshold: Progress above which the evaluation is scaled up
        late_game_scale: Slope of the late-game multiplier

    Returns:
        Score differential plus a mechanism-specific positional adjustment
    """
    mechanism = ScoringMechanism.parse(mechanism)
    opponent = opponent_of(player)

    evaluation = float(
        calculate_score(board, player, mechanism) - calculate_score(board, opponent, mechanism)
    )

    own_components = connected_components(board, player)
    opp_components = connected_components(board, opponent)

    if mechanism is ScoringMechanism.MULTIPLICATION:
        if own_components:
            average = sum(len(c) for c in own_components) / len(own_components)
            evaluation += AVG_COMPONENT_WEIGHT * average
        if opp_components:
            largest = max(len(c) for c in opp_components)
            evaluation -= LARGEST_OPPONENT_COMPONENT_WEIGHT * largest
    else:
        own_edges = sum(edge_count(c) for c in own_components)
        opp_edges = sum(edge_count(c) for c in opp_components)
        evaluation += EDGE_DIFF_WEIGHT * (own_edges - opp_edges)

        if mechanism is ScoringMechanism.EXTENSION:
            evaluation += EXPANSION_WEIGHT * expansion_potential(board, player)

    if progress is None:
        progress = board.occupancy_fraction
    return evaluation * late_game_factor(progress, late_game_threshold, late_game_scale)
