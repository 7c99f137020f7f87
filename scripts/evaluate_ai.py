#!/usr/bin/env python3
"""Arena for comparing AI difficulties across scoring mechanisms.

Example:
    python scripts/evaluate_ai.py --games 40 --board-size 4 --test hard --baseline easy
"""

import argparse
import logging
import sys
import time
from pathlib import Path

from tqdm.auto import tqdm

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from cellextension.config import AI_DIFFICULTIES, EvaluationConfig, ScoringMechanism
from cellextension.eval.evaluator import Evaluator
from cellextension.utils.validation import print_validation_errors, validate_evaluation_config


def setup_logging(level: str) -> logging.Logger:
    """Setup logging for the arena."""
    logging.basicConfig(
        level=getattr(logging, level.upper()),
        format='%(asctime)s - %(levelname)s - %(message)s',
        datefmt='%Y-%m-%d %H:%M:%S'
    )
    return logging.getLogger(__name__)


def main():
    defaults = EvaluationConfig()
    parser = argparse.ArgumentParser(description='Evaluate Cell Extension AI difficulties')
    parser.add_argument('--games', type=int, default=defaults.games,
                        help='Games per scoring mechanism')
    parser.add_argument('--board-size', type=int, default=defaults.board_size,
                        help='Board side length')
    parser.add_argument('--scoring', type=str, nargs='+',
                        default=[m.value for m in defaults.scoring_mechanisms],
                        choices=[m.value for m in ScoringMechanism],
                        help='Scoring mechanisms to evaluate')
    parser.add_argument('--test', type=str, choices=list(AI_DIFFICULTIES), default='hard',
                        help='Difficulty under test')
    parser.add_argument('--baseline', type=str, choices=list(AI_DIFFICULTIES), default='easy',
                        help='Baseline difficulty')
    parser.add_argument('--seed', type=int, default=defaults.seed, help='Random seed')
    parser.add_argument('--log-level', type=str, default='INFO',
                        choices=['DEBUG', 'INFO', 'WARNING', 'ERROR'], help='Logging level')

    args = parser.parse_args()
    logger = setup_logging(args.log_level)

    validation_errors = validate_evaluation_config(args.games, args.board_size)
    if validation_errors:
        print_validation_errors(validation_errors, logger)
        return 1

    logger.info("=" * 60)
    logger.info(f"AI arena: {args.test} vs {args.baseline}")
    logger.info(f"Board: {args.board_size}x{args.board_size}, {args.games} games per mechanism")
    logger.info("=" * 60)

    summary = {}
    start = time.time()
    for mechanism in tqdm(args.scoring, desc="Mechanisms", unit="mech"):
        evaluator = Evaluator(
            board_size=args.board_size,
            scoring_mechanism=mechanism,
            seed=args.seed,
        )
        results = evaluator.evaluate_strength(args.test, args.baseline, num_games=args.games)
        summary[mechanism] = results
        tqdm.write(
            f"{mechanism:>15}: win rate {results['win_rate']:.1%} "
            f"(W{results['wins']} L{results['losses']} D{results['draws']})"
        )

    elapsed = time.time() - start
    logger.info("=" * 60)
    for mechanism, results in summary.items():
        logger.info(f"{mechanism}: {args.test} won {results['wins']}/{results['total_games']} "
                    f"against {args.baseline} ({results['win_rate']:.1%})")
    logger.info(f"Finished in {elapsed:.1f}s")
    return 0


if __name__ == '__main__':
    sys.exit(main())
