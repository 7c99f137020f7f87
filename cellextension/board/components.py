"""Connected-component discovery over one player's cells.

Components are always recomputed from ``board.occupied[player]``; nothing
in the engine caches them.
"""

from typing import FrozenSet, List, Set, Tuple

from .board_state import BoardState
from .position import Position, adjacent_positions

Component = FrozenSet[Position]
Edge = Tuple[Position, Position]


def connected_components(board: BoardState, player: int) -> List[Component]:
    """Maximal 4-connected groups of player's cells.

    Depth-first traversal with an explicit stack. Seeds are taken in
    row-major order (y, then x), so the returned list is ordered by each
    component's first cell in that order; callers that break ties on
    components rely on this.
    """
    cells = board.occupied[player]
    if not cells:
        return []

    visited: Set[Position] = set()
    components: List[Component] = []

    for seed in sorted(cells, key=lambda p: (p[1], p[0])):
        if seed in visited:
            continue

        component: Set[Position] = set()
        stack = [seed]
        visited.add(seed)

        while stack:
            current = stack.pop()
            component.add(current)
            for neighbor in adjacent_positions(*current):
                if neighbor in cells and neighbor not in visited:
                    visited.add(neighbor)
                    stack.append(neighbor)

        components.append(frozenset(component))

    return components


def internal_edges(component: Component) -> Set[Edge]:
    """Unordered adjacent pairs inside a component, each counted once."""
    edges: Set[Edge] = set()
    for cell in component:
        for neighbor in adjacent_positions(*cell):
            if neighbor in component:
                edges.add((cell, neighbor) if cell < neighbor else (neighbor, cell))
    return edges


def internal_adjacency_count(component: Component) -> int:
    """Sum over cells of same-component neighbours (every edge seen twice)."""
    return sum(
        1
        for cell in component
        for neighbor in adjacent_positions(*cell)
        if neighbor in component
    )


def edge_count(component: Component) -> int:
    """Number of internal edges: the halved adjacency count."""
    return internal_adjacency_count(component) // 2


def total_edge_count(board: BoardState, player: int) -> int:
    """Internal edges summed over all of player's components."""
    return sum(edge_count(c) for c in connected_components(board, player))
