"""AI move selection combining the territorial, greedy and minimax strategies."""

import logging
import random
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from ..board.board_state import BoardState
from ..board.position import Position, is_valid_position
from ..config import AI_PLAYER, AIConfig, GameSettings, ScoringMechanism, get_ai_config
from ..game.session import GameSession, Progress, SessionDelta
from .evaluate import evaluate_board
from .minimax import MinimaxSearcher
from .strategies import AIStrategyFailure, greedy_move, territorial_move

logger = logging.getLogger(__name__)


@dataclass
class AIMoveResult:
    """Move chosen by the AI and how it was chosen."""

    position: Optional[Position]  # None only when no cells remain
    strategy: str  # 'territorial', 'greedy', 'minimax', 'random_fallback', 'first_available', 'none'
    evaluation: Optional[float] = None
    search_stats: Dict[str, Any] = field(default_factory=dict)


def validated_cells(board: BoardState) -> List[Position]:
    """Available cells re-checked for bounds and occupancy."""
    return [
        cell for cell in board.available_cells()
        if is_valid_position(cell[0], cell[1], board.width, board.height)
        and not board.is_occupied(cell)
    ]


class AIEngine:
    """
    Picks moves for one difficulty and scoring mechanism.

    Strategy selection:
    1. hard: minimax with alpha-beta pruning on every move
    2. easy, occupancy below the territorial threshold: territorial spread
    3. easy, otherwise: one-ply greedy

    Any strategy failure falls back to a random validated cell, then to the
    first available cell. The engine never raises out of :meth:`choose_move`.
    """

    def __init__(self, mechanism, difficulty: str = 'easy',
                 config: Optional[AIConfig] = None,
                 rng: Optional[random.Random] = None):
        self.mechanism = ScoringMechanism.parse(mechanism)
        self.difficulty = difficulty
        self.config = config or get_ai_config(difficulty)
        self.rng = rng or random.Random()

    def choose_move(self, board: BoardState, ai_player: int,
                    progress: Optional[float] = None) -> AIMoveResult:
        """
        Choose a move for ai_player on board.

        Args:
            board: Current board
            ai_player: Index of the player the AI moves for
            progress: Game-progress fraction; defaults to board occupancy.
                Only picks territorial or greedy play on easy difficulty.
                Greedy and minimax evaluations always use the occupancy of
                the board they score.

        Returns:
            AIMoveResult; position is None only if the board is full
        """
        available = board.available_cells()
        if not available:
            logger.debug("AI: no available cells, game should be over")
            return AIMoveResult(position=None, strategy='none')

        if progress is None:
            progress = board.occupancy_fraction

        cells = validated_cells(board)
        result = None
        try:
            if cells:
                result = self._run_strategy(board, ai_player, cells, progress)
                if result.position not in cells:
                    raise AIStrategyFailure(
                        f"{result.strategy} strategy returned invalid move {result.position}"
                    )
        except Exception as e:
            logger.warning("AI (%s) strategy failed: %s. Falling back to random move.",
                           self.difficulty, e)
            result = None

        if result is None and cells:
            result = AIMoveResult(position=self.rng.choice(cells), strategy='random_fallback')
        elif result is None:
            logger.error("AI: all available cells failed validation; taking first available")
            result = AIMoveResult(position=available[0], strategy='first_available')

        logger.debug("AI (%s, player %d) selected %s via %s", self.difficulty, ai_player,
                     result.position, result.strategy)
        return result

    def _run_strategy(self, board: BoardState, ai_player: int,
                      cells: List[Position], progress: float) -> AIMoveResult:
        if self.config.use_minimax:
            searcher = MinimaxSearcher(
                self.mechanism,
                depth=self.config.minimax_depth,
                late_game_threshold=self.config.late_game_threshold,
                late_game_scale=self.config.late_game_scale,
            )
            search = searcher.search(board, ai_player, cells=cells, rng=self.rng)
            return AIMoveResult(
                position=search.best_move,
                strategy='minimax',
                evaluation=search.evaluation,
                search_stats=search.search_stats,
            )

        if progress < self.config.territorial_threshold:
            move = territorial_move(board, ai_player, rng=self.rng,
                                    jitter=self.config.jitter, cells=cells)
            return AIMoveResult(position=move, strategy='territorial')

        move = greedy_move(board, ai_player, self.mechanism, rng=self.rng, cells=cells)
        evaluation = evaluate_board(
            board.place_cell(ai_player, move), ai_player, self.mechanism,
            late_game_threshold=self.config.late_game_threshold,
            late_game_scale=self.config.late_game_scale,
        )
        return AIMoveResult(position=move, strategy='greedy', evaluation=evaluation)


def choose_move(board: BoardState, ai_player: int, mechanism,
                difficulty: str = 'easy', progress: Optional[float] = None,
                rng: Optional[random.Random] = None) -> AIMoveResult:
    """Convenience wrapper building a one-off AIEngine.

    progress only affects strategy selection, see AIEngine.choose_move.
    """
    engine = AIEngine(mechanism, difficulty=difficulty, rng=rng)
    return engine.choose_move(board, ai_player, progress=progress)


def get_ai_move(session: GameSession, settings: GameSettings,
                rng: Optional[random.Random] = None) -> Optional[Position]:
    """
    Move for the player whose turn it is in session.

    The caller decides when it is the AI's turn. Returns None only when no
    cells remain.
    """
    result = choose_move(
        session.board,
        session.current_player,
        session.scoring_mechanism,
        difficulty=settings.ai_difficulty,
        rng=rng,
    )
    return result.position


def play_ai_turn(session: GameSession, settings: GameSettings,
                 rng: Optional[random.Random] = None) -> Optional[SessionDelta]:
    """Mark the session as waiting, compute the AI move and apply it.

    Returns None when the game is already over or no cells remain.
    """
    if session.is_over:
        return None
    session.set_progress(Progress.WAITING)
    move = get_ai_move(session, settings, rng=rng)
    if move is None:
        session.set_progress(Progress.PLAYING)
        return None
    return session.place_move(move)


def undo_ai_turn(session: GameSession, ai_player: int = AI_PLAYER) -> bool:
    """
    Take back the AI reply and the human move before it.

    The snapshot taken before an AI move records ``waiting``, so the
    restored session is moved back to ``playing`` once the human is to
    move again. Returns False when there is nothing to undo.
    """
    if not session.can_undo:
        return False
    session.undo_move()
    if session.current_player == ai_player and session.history_length > 1:
        session.undo_move()
    if session.progress is Progress.WAITING:
        session.set_progress(Progress.PLAYING)
    logger.debug("Undid AI turn; %d moves remain", session.move_count)
    return True
