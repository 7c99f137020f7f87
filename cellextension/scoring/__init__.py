"""Scoring engine for the three scoring mechanisms."""

from .mechanisms import (
    ComponentScore,
    calculate_score,
    calculate_scores,
    connection_score,
    extension_score,
    get_scorer,
    multiplication_score,
    score_breakdown,
)

__all__ = [
    'ComponentScore',
    'calculate_score',
    'calculate_scores',
    'connection_score',
    'extension_score',
    'get_scorer',
    'multiplication_score',
    'score_breakdown',
]
