"""Centralized configuration for Cell Extension.

This module provides a single source of truth for game settings,
scoring mechanism identifiers and the AI difficulty presets.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, Tuple


# ============================================================================
# Scoring Mechanisms
# ============================================================================

class ScoringMechanism(str, Enum):
    """Rule converting a player's components into a score."""

    MULTIPLICATION = "multiplication"
    CONNECTION = "connection"
    EXTENSION = "extension"

    @classmethod
    def parse(cls, value) -> "ScoringMechanism":
        """Accept an enum member, a plain name or a legacy ``cell-*`` id."""
        if isinstance(value, cls):
            return value
        name = str(value).strip().lower()
        if name.startswith("cell-"):
            name = name[len("cell-"):]
        try:
            return cls(name)
        except ValueError:
            raise ValueError(
                f"Unknown scoring mechanism: {value}. "
                f"Available: {[m.value for m in cls]}"
            ) from None


# ============================================================================
# Game Settings
# ============================================================================

BOARD_SIZES: Tuple[int, ...] = (4, 6, 10, 16)
FIRST_PLAYERS: Tuple[str, ...] = ("human", "ai")
AI_DIFFICULTIES: Tuple[str, ...] = ("easy", "hard")
PLAYER_MODES: Tuple[str, ...] = ("ai", "user")

# Player index the AI controls when player_mode == "ai"
AI_PLAYER = 1
HUMAN_PLAYER = 0


@dataclass
class GameSettings:
    """Settings owned by the UI layer and consumed by the engine."""

    board_size: int = 6
    first_player: str = "human"
    scoring_mechanism: ScoringMechanism = ScoringMechanism.MULTIPLICATION
    ai_difficulty: str = "easy"
    player_mode: str = "ai"

    def __post_init__(self):
        self.scoring_mechanism = ScoringMechanism.parse(self.scoring_mechanism)
        if not isinstance(self.board_size, int) or self.board_size <= 0:
            raise ValueError("board_size must be a positive integer")
        if self.first_player not in FIRST_PLAYERS:
            raise ValueError(
                f"first_player must be one of {list(FIRST_PLAYERS)}, got {self.first_player!r}"
            )
        if self.ai_difficulty not in AI_DIFFICULTIES:
            raise ValueError(
                f"ai_difficulty must be one of {list(AI_DIFFICULTIES)}, got {self.ai_difficulty!r}"
            )
        if self.player_mode not in PLAYER_MODES:
            raise ValueError(
                f"player_mode must be one of {list(PLAYER_MODES)}, got {self.player_mode!r}"
            )

    @property
    def first_player_index(self) -> int:
        """Player index that moves first"""
        return HUMAN_PLAYER if self.first_player == "human" else AI_PLAYER

    @property
    def grid_shape(self) -> Tuple[int, int]:
        """(width, height) of the square board"""
        return self.board_size, self.board_size


# ============================================================================
# AI Configuration
# ============================================================================

@dataclass
class AIConfig:
    """AI move-selection settings by difficulty level"""
    use_minimax: bool
    minimax_depth: int = 2
    territorial_threshold: float = 0.25  # Occupancy below which easy AI spreads out
    jitter: float = 0.1  # Random tie-break noise for the territorial heuristic
    late_game_threshold: float = 0.7
    late_game_scale: float = 2.0
    description: str = ""


# AI presets by difficulty
AI_PRESETS: Dict[str, AIConfig] = {
    "easy": AIConfig(
        use_minimax=False,
        description="Territorial opening, then one-ply greedy scoring",
    ),
    "hard": AIConfig(
        use_minimax=True,
        minimax_depth=2,
        description="Minimax with alpha-beta pruning (AI move + opponent reply)",
    ),
}


@dataclass
class EvaluationConfig:
    """AI-vs-AI evaluation settings"""
    games: int = 20
    board_size: int = 4
    scoring_mechanisms: Tuple[ScoringMechanism, ...] = field(
        default_factory=lambda: tuple(ScoringMechanism)
    )
    seed: int = 0


# ============================================================================
# Helper Functions
# ============================================================================

def get_ai_config(difficulty: str = "easy") -> AIConfig:
    """Get AI configuration by difficulty"""
    if difficulty not in AI_PRESETS:
        raise ValueError(
            f"Unknown difficulty: {difficulty}. "
            f"Available: {list(AI_PRESETS.keys())}"
        )
    return AI_PRESETS[difficulty]


def default_settings() -> GameSettings:
    """Settings used when a session is created without explicit settings"""
    return GameSettings()


def describe_settings(settings: GameSettings) -> str:
    """Human-readable one-line summary of the settings"""
    ai_cfg = AI_PRESETS[settings.ai_difficulty]
    return (
        f"{settings.board_size}x{settings.board_size} board, "
        f"{settings.scoring_mechanism.value} scoring, "
        f"{settings.first_player} moves first, "
        f"mode={settings.player_mode}, "
        f"AI {settings.ai_difficulty} ({ai_cfg.description})"
    )


# ============================================================================
# Exports
# ============================================================================

__all__ = [
    "ScoringMechanism",
    "GameSettings",
    "AIConfig",
    "EvaluationConfig",
    "AI_PRESETS",
    "BOARD_SIZES",
    "FIRST_PLAYERS",
    "AI_DIFFICULTIES",
    "PLAYER_MODES",
    "AI_PLAYER",
    "HUMAN_PLAYER",
    "get_ai_config",
    "default_settings",
    "describe_settings",
]
