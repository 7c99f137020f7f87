"""Settings validation utilities for game and evaluation runs."""

from typing import List

from ..config import (
    AI_DIFFICULTIES,
    BOARD_SIZES,
    FIRST_PLAYERS,
    PLAYER_MODES,
    GameSettings,
)


def validate_settings(settings: GameSettings) -> List[str]:
    """Validate game settings against the supported menu values.

    GameSettings itself only rejects values the engine cannot run with.
    This check is stricter and reports board sizes outside BOARD_SIZES.

    Args:
        settings: Settings to validate

    Returns:
        List of validation error messages (empty if valid)
    """
    errors = []

    if settings.board_size not in BOARD_SIZES:
        errors.append(
            f"❌ Invalid board size: {settings.board_size}\n"
            f"   Must be one of {list(BOARD_SIZES)}\n"
            f"   Recommended: 6 for quick games, 10 for longer ones"
        )

    if settings.first_player not in FIRST_PLAYERS:
        errors.append(
            f"❌ Invalid first player: {settings.first_player}\n"
            f"   Must be one of {list(FIRST_PLAYERS)}"
        )

    if settings.ai_difficulty not in AI_DIFFICULTIES:
        errors.append(
            f"❌ Invalid AI difficulty: {settings.ai_difficulty}\n"
            f"   Must be one of {list(AI_DIFFICULTIES)}"
        )

    if settings.player_mode not in PLAYER_MODES:
        errors.append(
            f"❌ Invalid player mode: {settings.player_mode}\n"
            f"   Must be one of {list(PLAYER_MODES)}"
        )

    # Minimax cost grows with the square of the free cells
    if settings.ai_difficulty == "hard" and settings.board_size > 10:
        errors.append(
            f"❌ Hard AI on a {settings.board_size}x{settings.board_size} board\n"
            f"   Minimax search gets slow above 10x10\n"
            f"   Recommended: easy difficulty or a board of 10 or less"
        )

    return errors


def validate_evaluation_config(games: int, board_size: int) -> List[str]:
    """Validate AI-vs-AI evaluation parameters.

    Args:
        games: Number of games per matchup
        board_size: Board side length

    Returns:
        List of validation error messages (empty if valid)
    """
    errors = []

    if games < 1 or games > 10000:
        errors.append(
            f"❌ Invalid number of games: {games}\n"
            f"   Must be between 1 and 10000\n"
            f"   Recommended: 20-100"
        )

    if board_size < 1 or board_size > 16:
        errors.append(
            f"❌ Invalid evaluation board size: {board_size}\n"
            f"   Must be between 1 and 16\n"
            f"   Recommended: 4 (hard AI is slow on larger boards)"
        )

    return errors


def print_validation_errors(errors: List[str], logger) -> None:
    """Log validation errors.

    Args:
        errors: List of error messages
        logger: Logger instance
    """
    if errors:
        logger.error("Configuration validation failed:")
        logger.error("")
        for error in errors:
            logger.error(error)
        logger.error("")
        logger.error("Please fix the configuration and try again.")
