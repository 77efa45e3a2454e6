"""Heuristic decision making: belief tracking, card scoring, card and color choice."""

from unoheuristic.strategy.belief import BeliefState
from unoheuristic.strategy.decision import DecisionEngine
from unoheuristic.strategy.evaluator import DEFAULT_WEIGHTS, ScoringWeights, score_card

__all__ = [
    "BeliefState",
    "DecisionEngine",
    "DEFAULT_WEIGHTS",
    "ScoringWeights",
    "score_card",
]
