"""Depth-limited minimax search with alpha-beta pruning."""

import logging
import random
import time
from dataclasses import dataclass, field
from typing import Dict, List, Optional, Sequence

from ..board.board_state import BoardState, opponent_of
from ..board.position import Position
from ..config import ScoringMechanism
from .evaluate import LATE_GAME_SCALE, LATE_GAME_THRESHOLD, evaluate_board
from .strategies import AIStrategyFailure

logger = logging.getLogger(__name__)

DEFAULT_DEPTH = 2
# Root siblings within this margin of the best value count as ties
TIE_EPSILON = 1e-9


@dataclass
class MinimaxResult:
    """Result of a minimax search."""

    best_move: Position
    evaluation: float  # Backed-up value from the AI's perspective
    candidates: List[Position] = field(default_factory=list)  # Moves tied for best
    search_stats: Dict[str, int] = field(default_factory=dict)


class MinimaxSearcher:
    """Alpha-beta minimax over board placements.

    Depth counts every ply including the AI's own root move, so depth 2 is
    one AI move followed by one opponent reply. Leaves are scored with
    :func:`evaluate_board` from the AI's perspective regardless of whose
    turn it is there.
    """

    def __init__(self, mechanism, depth: int = DEFAULT_DEPTH,
                 late_game_threshold: float = LATE_GAME_THRESHOLD,
                 late_game_scale: float = LATE_GAME_SCALE):
        if depth < 1:
            raise ValueError("Minimax depth must be at least 1")
        self.mechanism = ScoringMechanism.parse(mechanism)
        self.depth = depth
        self.late_game_threshold = late_game_threshold
        self.late_game_scale = late_game_scale
        self.nodes_searched = 0
        self.cutoffs = 0
        self.start_time = 0.0

    def _evaluate(self, board: BoardState, ai_player: int) -> float:
        return evaluate_board(
            board, ai_player, self.mechanism,
            late_game_threshold=self.late_game_threshold,
            late_game_scale=self.late_game_scale,
        )

    def _alphabeta(self, board: BoardState, depth: int, alpha: float, beta: float,
                   maximizing: bool, ai_player: int) -> float:
        """Backed-up value of board with the given side to move."""
        self.nodes_searched += 1

        moves = board.available_cells()
        if depth == 0 or not moves:
            return self._evaluate(board, ai_player)

        mover = ai_player if maximizing else opponent_of(ai_player)

        if maximizing:
            best_eval = float("-inf")
            for move in moves:
                value = self._alphabeta(board.place_cell(mover, move), depth - 1,
                                        alpha, beta, False, ai_player)
                best_eval = max(best_eval, value)
                alpha = max(alpha, value)
                if beta <= alpha:
                    self.cutoffs += 1
                    break  # Beta cutoff
            return best_eval

        best_eval = float("inf")
        for move in moves:
            value = self._alphabeta(board.place_cell(mover, move), depth - 1,
                                    alpha, beta, True, ai_player)
            best_eval = min(best_eval, value)
            beta = min(beta, value)
            if beta <= alpha:
                self.cutoffs += 1
                break  # Alpha cutoff
        return best_eval

    def search(self, board: BoardState, ai_player: int,
               cells: Optional[Sequence[Position]] = None,
               rng: Optional[random.Random] = None) -> MinimaxResult:
        """
        Choose the AI's move on board.

        Args:
            board: Position to search from (AI to move)
            ai_player: Index of the maximizing player
            cells: Candidate root moves; defaults to all available cells
            rng: Random source for breaking ties between equal root values

        Returns:
            MinimaxResult with the chosen move and search statistics
        """
        self.nodes_searched = 0
        self.cutoffs = 0
        self.start_time = time.time()
        rng = rng or random.Random()

        moves = list(cells) if cells is not None else board.available_cells()
        if not moves:
            raise AIStrategyFailure("Minimax called on a board with no moves")

        best_value = float("-inf")
        best_moves: List[Position] = []

        for move in moves:
            # Keep alpha just below the best value so tied siblings are not
            # pruned into upper bounds and remain eligible for tie-breaking.
            alpha = best_value - 2 * TIE_EPSILON if best_moves else float("-inf")
            value = self._alphabeta(board.place_cell(ai_player, move), self.depth - 1,
                                    alpha, float("inf"), False, ai_player)
            if value > best_value + TIE_EPSILON:
                best_value = value
                best_moves = [move]
            elif abs(value - best_value) <= TIE_EPSILON:
                best_moves.append(move)

        best_move = rng.choice(best_moves)
        stats = {
            'nodes_searched': self.nodes_searched,
            'cutoffs': self.cutoffs,
            'time_ms': int((time.time() - self.start_time) * 1000),
            'depth': self.depth,
        }
        logger.debug("Minimax chose %s (eval %.3f, %d tied) stats=%s",
                     best_move, best_value, len(best_moves), stats)

        return MinimaxResult(
            best_move=best_move,
            evaluation=best_value,
            candidates=best_moves,
            search_stats=stats,
        )


def minimax_search(board: BoardState, ai_player: int, mechanism,
                   depth: int = DEFAULT_DEPTH,
                   rng: Optional[random.Random] = None) -> MinimaxResult:
    """
    Convenience function for a single minimax search.

    Args:
        board: Position to analyze
        ai_player: Maximizing player index
        mechanism: Active scoring mechanism
        depth: Total plies searched, including the AI's move
        rng: Random source for tie-breaking

    Returns:
        MinimaxResult with the chosen move
    """
    searcher = MinimaxSearcher(mechanism, depth=depth)
    return searcher.search(board, ai_player, rng=rng)
