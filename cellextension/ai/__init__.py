"""AI move selection: territorial, greedy and minimax strategies."""

from .engine import (
    AIEngine,
    AIMoveResult,
    choose_move,
    get_ai_move,
    play_ai_turn,
    undo_ai_turn,
)
from .evaluate import evaluate_board
from .minimax import MinimaxResult, MinimaxSearcher, minimax_search
from .strategies import AIStrategyFailure, greedy_move, territorial_move

__all__ = [
    'AIEngine',
    'AIMoveResult',
    'AIStrategyFailure',
    'MinimaxResult',
    'MinimaxSearcher',
    'choose_move',
    'evaluate_board',
    'get_ai_move',
    'greedy_move',
    'minimax_search',
    'play_ai_turn',
    'territorial_move',
    'undo_ai_turn',
]
