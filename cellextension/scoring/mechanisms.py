"""Scoring mechanisms.

Every mechanism is a pure function of ``connected_components(board, player)``:

- multiplication: product of component sizes
- connection: product of component edge counts (a singleton counts as 1)
- extension: the same edge-count product as connection

A player with no cells scores 0 under every mechanism.
"""

from dataclasses import dataclass
from typing import Callable, Dict, List, Tuple

from ..board.board_state import BoardState
from ..board.components import Component, connected_components, edge_count, internal_edges
from ..board.position import edge_key
from ..config import ScoringMechanism


@dataclass(frozen=True)
class ComponentScore:
    """One component's contribution to a player's score."""

    cells: Component
    size: int
    edges: int
    factor: int  # Multiplicative factor under the active mechanism
    edge_keys: Tuple[str, ...] = ()


def component_weight(component: Component) -> int:
    """Edge count of a component, with an isolated cell weighted 1."""
    return edge_count(component) or 1


def _product(factors: List[int]) -> int:
    if not factors:
        return 0
    result = 1
    for factor in factors:
        result *= factor
    return result


def multiplication_score(board: BoardState, player: int) -> int:
    """Product of component sizes."""
    return _product([len(c) for c in connected_components(board, player)])


def connection_score(board: BoardState, player: int) -> int:
    """Product of component edge counts."""
    return _product([component_weight(c) for c in connected_components(board, player)])


# Counting deduplicated edges and halving the adjacency sum are the same
# quantity, so both mechanisms share one implementation.
extension_score = connection_score


SCORERS: Dict[ScoringMechanism, Callable[[BoardState, int], int]] = {
    ScoringMechanism.MULTIPLICATION: multiplication_score,
    ScoringMechanism.CONNECTION: connection_score,
    ScoringMechanism.EXTENSION: extension_score,
}


def get_scorer(mechanism) -> Callable[[BoardState, int], int]:
    """Scoring function for a mechanism (enum member or name)."""
    return SCORERS[ScoringMechanism.parse(mechanism)]


def calculate_score(board: BoardState, player: int, mechanism) -> int:
    """Score of player on board under mechanism."""
    return get_scorer(mechanism)(board, player)


def calculate_scores(board: BoardState, mechanism) -> Tuple[int, int]:
    """Both players' scores, recomputed from scratch."""
    scorer = get_scorer(mechanism)
    return scorer(board, 0), scorer(board, 1)


def score_breakdown(board: BoardState, player: int, mechanism) -> List[ComponentScore]:
    """Per-component factors whose product is the player's score.

    Used by display layers to annotate components. Components appear in the
    order returned by :func:`connected_components`.
    """
    mechanism = ScoringMechanism.parse(mechanism)
    breakdown = []
    for component in connected_components(board, player):
        edges = sorted(internal_edges(component))
        if mechanism is ScoringMechanism.MULTIPLICATION:
            factor = len(component)
        else:
            factor = component_weight(component)
        breakdown.append(ComponentScore(
            cells=component,
            size=len(component),
            edges=len(edges),
            factor=factor,
            edge_keys=tuple(edge_key(a, b) for a, b in edges),
        ))
    return breakdown
