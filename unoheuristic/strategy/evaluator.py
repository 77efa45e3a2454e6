"""Single-card scoring heuristic.

Each term is an additive bonus or penalty. The weights live in
ScoringWeights so heuristic variants are configuration, not new code.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Sequence

from unoheuristic.engine.card import ACTION_RANKS, Card, Color, Rank
from unoheuristic.engine.game_state import MatchSnapshot
from unoheuristic.strategy.belief import BeliefState


@dataclass(frozen=True)
class ScoringWeights:
    """Named weights for score_card."""

    # Wild Draw Four
    draw_four_base: int = 50
    draw_four_per_opponent_card: int = 10
    draw_four_per_opponent_action: int = 20
    draw_four_next_near_win: int = 100
    next_near_win_hand_size: int = 2

    # Own hand almost empty
    near_win_hand_size: int = 3
    near_win_bonus: int = 30
    near_win_per_extra_opponent: int = 5

    # Skip / Reverse / Draw Two
    disruption_base: int = 20
    disruption_per_opponent_card: int = 5

    # Matching the up card
    same_color: int = 15
    same_action_rank: int = 12
    same_number: int = 10
    called_color: int = 12

    # Card tracking
    scarcity_threshold: int = 5
    scarcity_bonus: int = 15
    called_color_penalty: int = 8

    # Late game
    loss_aversion_score: int = 400
    forfeit_cost_multiplier: int = 2


DEFAULT_WEIGHTS = ScoringWeights()


def _score_draw_four(snapshot: MatchSnapshot, belief: BeliefState, w: ScoringWeights) -> int:
    sizes = snapshot.upcoming_hand_sizes
    score = w.draw_four_base
    for seat, size in enumerate(sizes):
        score += w.draw_four_per_opponent_card * size
        score += w.draw_four_per_opponent_action * belief.frequency(seat)
    if sizes[0] <= w.next_near_win_hand_size:
        score += w.draw_four_next_near_win
    return score


def score_card(
    card: Card,
    up_card: Card,
    called_color: Optional[Color],
    snapshot: MatchSnapshot,
    hand: Sequence[Card],
    belief: BeliefState,
    weights: ScoringWeights = DEFAULT_WEIGHTS,
) -> int:
    """Score how desirable it is to play card now. Higher is better.

    Does not check legality and never mutates belief.
    """
    w = weights
    if card.rank == Rank.WILD_DRAW_FOUR:
        return _score_draw_four(snapshot, belief, w)

    sizes = snapshot.upcoming_hand_sizes
    score = 0

    if len(hand) <= w.near_win_hand_size:
        score += w.near_win_bonus
        score -= w.near_win_per_extra_opponent * (len(sizes) - 1)

    if card.rank in ACTION_RANKS:
        score += w.disruption_base
        score += w.disruption_per_opponent_card * sum(sizes)

    if card.color == up_card.color:
        score += w.same_color
    if card.rank == up_card.rank and card.rank != Rank.NUMBER:
        score += w.same_action_rank
    if card.number is not None and card.number == up_card.number:
        score += w.same_number

    if up_card.is_wild and called_color is not None and card.color == called_color:
        score += w.called_color

    if card.color is not None:
        remaining = belief.remaining(card.color)
        score += remaining
        if remaining <= w.scarcity_threshold:
            score += w.scarcity_bonus
            score -= w.called_color_penalty * belief.seats_that_called(card.color)

    if snapshot.upcoming_scores and max(snapshot.upcoming_scores) >= w.loss_aversion_score:
        score -= w.forfeit_cost_multiplier * card.forfeit_cost()

    return score
