#!/usr/bin/env python3
"""Play Cell Extension in the terminal.

Enter moves as "x y" (zero-based column and row), "u" to undo and "q" to quit.

Example:
    python scripts/play.py --board-size 6 --scoring connection --difficulty hard
"""

import argparse
import logging
import random
import sys
from pathlib import Path

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from cellextension.ai.engine import play_ai_turn, undo_ai_turn
from cellextension.config import (
    AI_DIFFICULTIES,
    AI_PLAYER,
    BOARD_SIZES,
    FIRST_PLAYERS,
    PLAYER_MODES,
    GameSettings,
    ScoringMechanism,
    describe_settings,
)
from cellextension.game.session import GameSession
from cellextension.utils.validation import print_validation_errors, validate_settings

PLAYER_SYMBOLS = ".XO"


def setup_logging(level: str) -> logging.Logger:
    """Setup logging for the terminal game."""
    logging.basicConfig(
        level=getattr(logging, level.upper()),
        format='%(asctime)s - %(levelname)s - %(message)s',
        datefmt='%Y-%m-%d %H:%M:%S'
    )
    return logging.getLogger(__name__)


def render(session: GameSession) -> str:
    """Board with column/row labels followed by the score line."""
    board = session.board
    width = len(str(board.width - 1))
    header = " " * (width + 1) + " ".join(str(x % 10) for x in range(board.width))
    lines = [header]
    for y, row in enumerate(board.render(PLAYER_SYMBOLS).splitlines()):
        lines.append(f"{y:>{width}} {row}")
    lines.append(
        f"Scores: X={session.scores[0]}  O={session.scores[1]}  "
        f"({session.scoring_mechanism.value})"
    )
    return "\n".join(lines)


def parse_move(text: str):
    """Parse "x y" (comma also accepted); None if malformed."""
    parts = text.replace(",", " ").split()
    if len(parts) != 2:
        return None
    try:
        return int(parts[0]), int(parts[1])
    except ValueError:
        return None


def undo_turn(session: GameSession, vs_ai: bool) -> bool:
    """Undo the last move; against the AI also undo its reply so the human moves next."""
    if vs_ai:
        return undo_ai_turn(session)
    return session.can_undo and session.undo_move()


def announce_result(session: GameSession) -> None:
    winner = session.winner
    if winner is None:
        print("Game over: draw")
    else:
        print(f"Game over: {PLAYER_SYMBOLS[winner + 1]} wins "
              f"{session.scores[winner]} to {session.scores[1 - winner]}")


def main():
    parser = argparse.ArgumentParser(description='Play Cell Extension in the terminal')
    parser.add_argument('--board-size', type=int, choices=list(BOARD_SIZES), default=6,
                        help='Board side length')
    parser.add_argument('--scoring', type=str, default='multiplication',
                        choices=[m.value for m in ScoringMechanism],
                        help='Scoring mechanism')
    parser.add_argument('--difficulty', type=str, choices=list(AI_DIFFICULTIES),
                        default='easy', help='AI difficulty')
    parser.add_argument('--first', type=str, choices=list(FIRST_PLAYERS), default='human',
                        help='Who moves first')
    parser.add_argument('--mode', type=str, choices=list(PLAYER_MODES), default='ai',
                        help='"ai" plays against the computer, "user" is two humans')
    parser.add_argument('--seed', type=int, default=None, help='Random seed for the AI')
    parser.add_argument('--log-level', type=str, default='WARNING',
                        choices=['DEBUG', 'INFO', 'WARNING', 'ERROR'], help='Logging level')

    args = parser.parse_args()
    logger = setup_logging(args.log_level)

    try:
        settings = GameSettings(
            board_size=args.board_size,
            first_player=args.first,
            scoring_mechanism=args.scoring,
            ai_difficulty=args.difficulty,
            player_mode=args.mode,
        )
    except ValueError as e:
        logger.error(f"Invalid settings: {e}")
        return 1

    validation_errors = validate_settings(settings)
    if validation_errors:
        # Only warn: a slow hard AI is still playable
        print_validation_errors(validation_errors, logger)

    logger.info(describe_settings(settings))
    vs_ai = settings.player_mode == 'ai'
    rng = random.Random(args.seed)
    session = GameSession(settings)

    print(describe_settings(settings))
    print('Enter "x y" to claim a cell, "u" to undo, "q" to quit.')

    while True:
        if vs_ai and not session.is_over and session.current_player == AI_PLAYER:
            delta = play_ai_turn(session, settings, rng=rng)
            if delta is not None:
                x, y = delta.position
                print(f"AI claims {x} {y}")
            continue

        print()
        print(render(session))
        if session.is_over:
            announce_result(session)
            answer = input('"u" to undo, anything else to quit: ').strip().lower()
            if answer == 'u' and undo_turn(session, vs_ai):
                continue
            return 0

        symbol = PLAYER_SYMBOLS[session.current_player + 1]
        try:
            text = input(f"{symbol} to move> ").strip().lower()
        except EOFError:
            return 0

        if text == 'q':
            return 0
        if text == 'u':
            if not undo_turn(session, vs_ai):
                print("Nothing to undo")
            continue

        move = parse_move(text)
        if move is None:
            print('Enter a move as "x y"')
            continue

        delta = session.place_move(move)
        if not delta.accepted:
            print(f"Move rejected: {delta.reason}")


if __name__ == '__main__':
    sys.exit(main())
