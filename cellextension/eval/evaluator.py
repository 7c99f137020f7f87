import random
from typing import Dict, Optional

from tqdm.auto import tqdm

from ..ai.engine import AIEngine
from ..config import GameSettings, ScoringMechanism
from ..game.session import GameSession


class Evaluator:
    """AI-vs-AI match runner for comparing difficulties"""

    def __init__(self, board_size: int = 4,
                 scoring_mechanism=ScoringMechanism.MULTIPLICATION,
                 seed: Optional[int] = None,
                 disable_tqdm: bool = False):
        self.board_size = board_size
        self.scoring_mechanism = ScoringMechanism.parse(scoring_mechanism)
        self.rng = random.Random(seed)
        self.disable_tqdm = disable_tqdm

    def play_game(self, player0_difficulty: str, player1_difficulty: str) -> Dict:
        """Play a single game; player 0 moves first"""
        session = GameSession(GameSettings(
            board_size=self.board_size,
            scoring_mechanism=self.scoring_mechanism,
        ))
        engines = (
            AIEngine(self.scoring_mechanism, player0_difficulty,
                     rng=random.Random(self.rng.random())),
            AIEngine(self.scoring_mechanism, player1_difficulty,
                     rng=random.Random(self.rng.random())),
        )
        strategies = {}

        while not session.is_over:
            player = session.current_player
            result = engines[player].choose_move(session.board, player)
            strategies[result.strategy] = strategies.get(result.strategy, 0) + 1
            session.place_move(result.position)

        return {
            "winner": session.winner,
            "scores": session.scores,
            "moves": session.move_count,
            "player0": player0_difficulty,
            "player1": player1_difficulty,
            "strategies": strategies,
        }

    def evaluate_strength(
        self, test_difficulty: str, baseline_difficulty: str, num_games: int = 20
    ) -> Dict:
        """Evaluate one difficulty against another, alternating who moves first"""
        results = []
        wins = losses = draws = 0

        game_iter = range(num_games)
        if not self.disable_tqdm:
            game_iter = tqdm(game_iter, desc=f"{test_difficulty} vs {baseline_difficulty}",
                             unit="game", leave=False)

        for game_idx in game_iter:
            if game_idx % 2 == 0:
                result = self.play_game(test_difficulty, baseline_difficulty)
                test_player = 0
            else:
                result = self.play_game(baseline_difficulty, test_difficulty)
                test_player = 1

            if result["winner"] is None:
                draws += 1
            elif result["winner"] == test_player:
                wins += 1
            else:
                losses += 1

            results.append(result)
            if not self.disable_tqdm:
                game_iter.set_postfix(W=wins, L=losses, D=draws)

        win_rate = wins / num_games if num_games else 0.0
        return {
            "win_rate": win_rate,
            "wins": wins,
            "losses": losses,
            "draws": draws,
            "total_games": num_games,
            "results": results,
        }
