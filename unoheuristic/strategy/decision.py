"""Decision engine: pick a card to play and a color to call."""

from __future__ import annotations

from typing import Callable, Optional, Sequence

from unoheuristic.engine.card import Card, Color
from unoheuristic.engine.game_state import MatchSnapshot
from unoheuristic.strategy.belief import BeliefState
from unoheuristic.strategy.evaluator import DEFAULT_WEIGHTS, ScoringWeights, score_card

CanPlay = Callable[[Card, Card, Optional[Color]], bool]

DEFAULT_COLOR = next(iter(Color))


def _can_play_on(card: Card, up_card: Card, called_color: Optional[Color]) -> bool:
    return card.can_play_on(up_card, called_color)


class DecisionEngine:
    """Single-ply heuristic player for one match.

    Holds a BeliefState that is refreshed on every select_card call. Build a
    new engine for every match and never share one between matches.
    """

    def __init__(
        self,
        weights: ScoringWeights = DEFAULT_WEIGHTS,
        can_play: CanPlay = _can_play_on,
    ):
        self.weights = weights
        self.belief = BeliefState()
        self._can_play = can_play

    def select_card(
        self,
        hand: Sequence[Card],
        up_card: Card,
        called_color: Optional[Color],
        snapshot: MatchSnapshot,
    ) -> Optional[int]:
        """Return the index in hand of the card to play, or None if nothing is legal.

        Ties go to the earliest card in hand.
        """
        if not snapshot.upcoming_hand_sizes:
            raise ValueError("Snapshot is missing upcoming hand sizes")
        if not snapshot.upcoming_scores:
            raise ValueError("Snapshot is missing upcoming scores")

        self.belief.refresh(snapshot.played_cards, snapshot.upcoming_called_colors)

        best_index: Optional[int] = None
        best_score = 0
        for i, card in enumerate(hand):
            if not self._can_play(card, up_card, called_color):
                continue
            score = score_card(card, up_card, called_color, snapshot, hand, self.belief, self.weights)
            if best_index is None or score > best_score:
                best_index = i
                best_score = score
        return best_index

    def choose_color(self, hand: Sequence[Card]) -> Color:
        """Color to call after a wild: the one held most, first in Color order on ties."""
        counts = {color: 0 for color in Color}
        for card in hand:
            if card.color is not None:
                counts[card.color] += 1

        chosen = DEFAULT_COLOR
        max_count = 0
        for color, count in counts.items():
            if count > max_count:
                chosen = color
                max_count = count
        return chosen
