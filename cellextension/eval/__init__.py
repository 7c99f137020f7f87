"""AI-vs-AI evaluation."""

from .evaluator import Evaluator

__all__ = ['Evaluator']
