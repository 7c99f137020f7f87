import random

import pytest

from cellextension.ai import engine
from cellextension.ai.engine import (
    AIEngine,
    choose_move,
    get_ai_move,
    play_ai_turn,
    validated_cells,
)
from cellextension.board.board_state import BoardState
from cellextension.config import AIConfig, GameSettings
from cellextension.game.session import GameSession, Progress


class TestStrategySelection:

    def test_easy_opening_is_territorial(self, rng):
        board = BoardState.empty(4, 4)
        result = AIEngine("multiplication", "easy", rng=rng).choose_move(board, 1)
        assert result.strategy == 'territorial'
        assert result.position in board.available_cells()

    def test_easy_later_is_greedy(self, blocking_board, rng):
        result = AIEngine("multiplication", "easy", rng=rng).choose_move(blocking_board, 1)
        assert result.strategy == 'greedy'
        assert result.position == (5, 0)
        assert result.evaluation is not None

    def test_explicit_progress_overrides_occupancy(self, rng):
        board = BoardState.empty(4, 4)
        result = AIEngine("connection", "easy", rng=rng).choose_move(board, 0, progress=0.5)
        assert result.strategy == 'greedy'

    @pytest.mark.parametrize("difficulty", ["easy", "hard"])
    def test_progress_does_not_change_evaluation(self, blocking_board, difficulty):
        default = AIEngine("multiplication", difficulty, rng=random.Random(0)).choose_move(
            blocking_board, 1)
        late = AIEngine("multiplication", difficulty, rng=random.Random(0)).choose_move(
            blocking_board, 1, progress=0.99)
        assert late.strategy == default.strategy
        assert late.position == default.position
        assert late.evaluation == default.evaluation

    def test_hard_uses_minimax(self, blocking_board, rng):
        result = AIEngine("multiplication", "hard", rng=rng).choose_move(blocking_board, 1)
        assert result.strategy == 'minimax'
        assert result.position == (2, 0)
        assert result.search_stats['depth'] == 2

    def test_custom_config(self, blocking_board, rng):
        config = AIConfig(use_minimax=True, minimax_depth=1)
        result = AIEngine("multiplication", config=config, rng=rng).choose_move(blocking_board, 1)
        assert result.strategy == 'minimax'
        assert result.position == (5, 0)

    def test_unknown_difficulty(self):
        with pytest.raises(ValueError):
            AIEngine("multiplication", "impossible")


class TestFallbacks:

    def test_full_board_returns_no_move(self, rng):
        board = BoardState.from_cells(1, 1, cells0=[(0, 0)])
        result = choose_move(board, 1, "multiplication", rng=rng)
        assert result.position is None
        assert result.strategy == 'none'

    def test_strategy_exception_falls_back_to_random(self, monkeypatch, rng):
        def broken(*args, **kwargs):
            raise RuntimeError("boom")

        monkeypatch.setattr(engine, "territorial_move", broken)
        board = BoardState.empty(3, 3)
        result = choose_move(board, 0, "multiplication", rng=rng)
        assert result.strategy == 'random_fallback'
        assert result.position in board.available_cells()

    def test_invalid_strategy_move_falls_back(self, monkeypatch, rng):
        monkeypatch.setattr(engine, "greedy_move", lambda *args, **kwargs: (0, 0))
        board = BoardState.from_cells(3, 1, cells0=[(0, 0)], cells1=[(1, 0)])
        result = choose_move(board, 0, "multiplication", progress=0.9, rng=rng)
        assert result.strategy == 'random_fallback'
        assert result.position == (2, 0)

    def test_first_available_when_validation_fails(self, monkeypatch, rng):
        monkeypatch.setattr(engine, "validated_cells", lambda board: [])
        board = BoardState.from_cells(3, 1, cells0=[(1, 0)])
        result = choose_move(board, 0, "multiplication", rng=rng)
        assert result.strategy == 'first_available'
        assert result.position == (0, 0)

    def test_validated_cells(self):
        board = BoardState.from_cells(2, 2, cells0=[(0, 0)], cells1=[(1, 1)])
        assert validated_cells(board) == [(1, 0), (0, 1)]


class TestSessionIntegration:

    def test_get_ai_move(self, rng):
        settings = GameSettings(board_size=4, ai_difficulty="hard")
        session = GameSession(settings)
        session.place_move((0, 0))
        move = get_ai_move(session, settings, rng=rng)
        assert move in session.board.available_cells()

    def test_get_ai_move_on_finished_game(self, rng):
        settings = GameSettings(board_size=1)
        session = GameSession(settings)
        session.place_move((0, 0))
        assert get_ai_move(session, settings, rng=rng) is None

    def test_play_ai_turn(self, rng):
        settings = GameSettings(board_size=4, first_player="ai")
        session = GameSession(settings)
        delta = play_ai_turn(session, settings, rng=rng)

        assert delta.accepted
        assert delta.player == 1
        assert session.current_player == 0
        assert session.progress is Progress.PLAYING
        assert session.move_count == 1

    def test_play_ai_turn_when_over(self, rng):
        settings = GameSettings(board_size=1)
        session = GameSession(settings)
        session.place_move((0, 0))
        assert play_ai_turn(session, settings, rng=rng) is None
        assert session.progress is Progress.OVER

    def test_seeded_games_are_reproducible(self):
        settings = GameSettings(board_size=4, ai_difficulty="easy")

        def play(seed):
            session = GameSession(settings)
            rng = random.Random(seed)
            while not session.is_over:
                play_ai_turn(session, settings, rng=rng)
            return session.board

        assert play(3) == play(3)
