"""Game session state machine: turns, progress, score history and undo."""

import logging
from dataclasses import dataclass
from enum import Enum
from typing import List, Optional, Tuple

from ..board.board_state import BoardState, PlacementError
from ..board.position import Position
from ..config import GameSettings, ScoringMechanism, default_settings
from ..scoring.mechanisms import calculate_scores

logger = logging.getLogger(__name__)

Scores = Tuple[int, int]


class Progress(str, Enum):
    """Coarse session state."""

    PLAYING = "playing"
    WAITING = "waiting"  # AI turn pending; UI input should be disabled
    OVER = "over"


@dataclass(frozen=True)
class Snapshot:
    """Session state captured immediately before a move, for undo."""

    board: BoardState
    scores: Scores
    current_player: int
    progress: Progress


@dataclass(frozen=True)
class SessionDelta:
    """Outcome of a place_move call."""

    accepted: bool
    position: Position
    player: int
    scores: Scores
    current_player: int
    progress: Progress
    error: Optional[PlacementError] = None
    reason: str = ""


class GameSession:
    """A single game between two players.

    The board is replaced, never mutated. ``history`` always holds at least
    the initial snapshot, and ``scores`` always equals the active scoring
    mechanism applied to ``board``.
    """

    def __init__(self, settings: Optional[GameSettings] = None):
        self._initialize(settings or default_settings())

    def _initialize(self, settings: GameSettings) -> None:
        self.settings = settings
        self.scoring_mechanism: ScoringMechanism = settings.scoring_mechanism
        width, height = settings.grid_shape
        self.board = BoardState.empty(width, height)
        self.scores: Scores = (0, 0)
        self.current_player = settings.first_player_index
        self.progress = Progress.PLAYING
        self.score_history: List[Scores] = [self.scores]
        self.history: List[Snapshot] = [self._snapshot()]

    def _snapshot(self) -> Snapshot:
        return Snapshot(
            board=self.board,
            scores=self.scores,
            current_player=self.current_player,
            progress=self.progress,
        )

    # ------------------------------------------------------------------
    # Transitions
    # ------------------------------------------------------------------

    def place_move(self, pos: Position) -> SessionDelta:
        """Claim pos for the current player and advance the turn.

        A rejected move leaves the session unchanged, except that a pending
        ``waiting`` state falls back to ``playing``.
        """
        player = self.current_player

        if self.progress not in (Progress.PLAYING, Progress.WAITING):
            logger.warning("Rejected move %s: game progress is %s", pos, self.progress.value)
            return self._delta(False, pos, player, reason=f"game is {self.progress.value}")

        try:
            new_board = self.board.place_cell(player, pos)
        except PlacementError as e:
            logger.warning("Rejected move %s for player %d: %s", pos, player, e)
            if self.progress is Progress.WAITING:
                self.progress = Progress.PLAYING
            return self._delta(False, pos, player, error=e, reason=str(e))

        self.history.append(self._snapshot())
        self.board = new_board
        self.scores = calculate_scores(new_board, self.scoring_mechanism)
        self.score_history.append(self.scores)
        self.current_player = 1 - player
        self.progress = Progress.OVER if new_board.is_game_over() else Progress.PLAYING

        logger.debug(
            "Player %d claimed %s; scores=%s next=%d progress=%s",
            player, pos, self.scores, self.current_player, self.progress.value,
        )
        return self._delta(True, tuple(pos), player)

    def undo_move(self) -> bool:
        """Restore the state from before the most recent move.

        Returns False (and changes nothing) when only the initial snapshot
        remains.
        """
        if len(self.history) <= 1:
            return False

        snapshot = self.history.pop()
        self.board = snapshot.board
        self.scores = snapshot.scores
        self.current_player = snapshot.current_player
        self.progress = snapshot.progress
        self.score_history.pop()
        logger.debug("Undid move; %d moves remain", self.move_count)
        return True

    def reset_game(self, settings: Optional[GameSettings] = None) -> None:
        """Discard everything and start a fresh game from settings."""
        self._initialize(settings or self.settings)
        logger.debug("Session reset: %dx%d, %s", self.board.width, self.board.height,
                     self.scoring_mechanism.value)

    def set_progress(self, value) -> bool:
        """Set the progress state; ``over`` cannot be left this way."""
        value = Progress(value)
        if self.progress is Progress.OVER and value is not Progress.OVER:
            logger.debug("Ignored progress change to %s: game is over", value.value)
            return False
        self.progress = value
        return True

    # ------------------------------------------------------------------
    # Read accessors
    # ------------------------------------------------------------------

    @property
    def move_count(self) -> int:
        return len(self.history) - 1

    @property
    def history_length(self) -> int:
        return len(self.history)

    @property
    def is_over(self) -> bool:
        return self.progress is Progress.OVER

    @property
    def can_undo(self) -> bool:
        return len(self.history) > 1 and self.progress in (Progress.PLAYING, Progress.OVER)

    @property
    def winner(self) -> Optional[int]:
        """Index of the higher-scoring player once over; None for a tie or an open game."""
        if not self.is_over or self.scores[0] == self.scores[1]:
            return None
        return 0 if self.scores[0] > self.scores[1] else 1

    def _delta(self, accepted: bool, pos: Position, player: int,
               error: Optional[PlacementError] = None, reason: str = "") -> SessionDelta:
        return SessionDelta(
            accepted=accepted,
            position=pos,
            player=player,
            scores=self.scores,
            current_player=self.current_player,
            progress=self.progress,
            error=error,
            reason=reason,
        )


# Functional entry points for UI layers

def new_session(settings: Optional[GameSettings] = None) -> GameSession:
    return GameSession(settings)


def place_move(session: GameSession, pos: Position) -> SessionDelta:
    return session.place_move(pos)


def undo_move(session: GameSession) -> bool:
    return session.undo_move()


def reset_game(session: GameSession, settings: Optional[GameSettings] = None) -> None:
    session.reset_game(settings)


def set_progress(session: GameSession, value) -> bool:
    return session.set_progress(value)
