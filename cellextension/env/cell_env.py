import random
from typing import Any, Dict, Optional, Tuple

import gymnasium as gym
import numpy as np
from gymnasium import spaces

from ..ai.engine import AIEngine
from ..config import GameSettings, ScoringMechanism
from ..game.session import GameSession


class CellExtensionEnv(gym.Env):
    """Cell Extension environment following Gymnasium interface"""

    metadata = {"render_modes": ["human", "ansi"]}

    def __init__(
        self,
        board_size: int = 6,
        scoring_mechanism=ScoringMechanism.MULTIPLICATION,
        opponent: Optional[str] = None,
        render_mode: Optional[str] = None,
    ):
        super().__init__()
        if not isinstance(board_size, int) or board_size <= 0:
            raise ValueError("board_size must be a positive integer")
        self.board_size = board_size
        self.scoring_mechanism = ScoringMechanism.parse(scoring_mechanism)
        self.opponent = opponent  # AI difficulty that answers every agent move
        self.render_mode = render_mode
        n_cells = board_size * board_size

        # Action space: each cell on the board, action = y * width + x
        self.action_space = spaces.Discrete(n_cells)

        # Observation space: board state + metadata
        self.observation_space = spaces.Dict(
            {
                "board": spaces.Box(
                    low=-1, high=1, shape=(board_size, board_size), dtype=np.int8
                ),
                "current_player": spaces.Discrete(2),
                "scores": spaces.Box(
                    low=0, high=np.inf, shape=(2,), dtype=np.float64
                ),
                "action_mask": spaces.Box(
                    low=0, high=1, shape=(n_cells,), dtype=np.bool_
                ),
            }
        )

        self.session: Optional[GameSession] = None
        self.game_over = False
        self.reset()

    def reset(
        self, seed: Optional[int] = None, options: Optional[Dict] = None
    ) -> Tuple[Dict, Dict]:
        super().reset(seed=seed)

        settings = GameSettings(
            board_size=self.board_size,
            scoring_mechanism=self.scoring_mechanism,
            ai_difficulty=self.opponent or "easy",
        )
        self.session = GameSession(settings)
        self.game_over = False
        self._ai = None
        if self.opponent is not None:
            # Seed the opponent from the env RNG so episodes are reproducible
            rng_seed = int(self.np_random.integers(0, 2**31 - 1))
            self._ai = AIEngine(self.scoring_mechanism, difficulty=self.opponent,
                                rng=random.Random(rng_seed))

        return self._get_observation(), {}

    def step(self, action: int) -> Tuple[Dict, float, bool, bool, Dict]:
        # If game already over, remain terminated and return current observation
        if self.game_over:
            return self._get_observation(), 0.0, True, False, {"game_over": True}

        # Validate action bounds
        if not isinstance(action, (int, np.integer)) or not (
            0 <= int(action) < self.board_size * self.board_size
        ):
            self.game_over = True
            return self._get_observation(), -1.0, True, False, {"invalid_move": True}

        y, x = divmod(int(action), self.board_size)
        mover = self.session.current_player
        delta = self.session.place_move((x, y))

        if not delta.accepted:
            # Invalid move - terminate game
            self.game_over = True
            return self._get_observation(), -1.0, True, False, {"invalid_move": True}

        info: Dict[str, Any] = {"scores": delta.scores}

        if self._ai is not None and not self.session.is_over:
            ai_move = self._ai.choose_move(self.session.board, self.session.current_player)
            self.session.place_move(ai_move.position)
            info["opponent_move"] = ai_move.position
            info["scores"] = self.session.scores

        if self.session.is_over:
            self.game_over = True
            winner = self.session.winner
            info["winner"] = winner
            if winner is None:
                return self._get_observation(), 0.0, True, False, info
            reward = 1.0 if winner == mover else -1.0
            return self._get_observation(), reward, True, False, info

        return self._get_observation(), 0.0, False, False, info

    def _get_observation(self) -> Dict:
        # Convert board to current player's perspective: own cells +1
        board = self.session.board.to_array()
        obs_board = board if self.session.current_player == 0 else -board

        return {
            "board": obs_board,
            "current_player": self.session.current_player,
            "scores": np.array(self.session.scores, dtype=np.float64),
            "action_mask": self._get_action_mask(),
        }

    def _get_action_mask(self) -> np.ndarray:
        """Return mask of legal actions"""
        return self.session.board.to_array().reshape(-1) == 0

    def get_legal_actions(self) -> np.ndarray:
        """Get list of legal action indices"""
        return np.where(self._get_action_mask())[0]

    @property
    def terminated(self) -> bool:
        return self.game_over

    def render(self) -> Optional[str]:
        """Render the board state"""
        board_str = self.session.board.render() + "\n"
        if self.render_mode == "ansi":
            return board_str
        print(board_str)
        return None
