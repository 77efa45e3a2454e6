"""Belief state: what the engine thinks is still out there, and how opponents behave."""

from __future__ import annotations

from typing import Dict, List, Optional, Sequence

from unoheuristic.engine.card import Card, Color, Rank
from unoheuristic.engine.deck import COLOR_TOTALS, RANK_TOTALS


class BeliefState:
    """Running estimate of unseen cards and opponent habits for one match.

    Card counts are rebuilt from the full played-card list on every refresh,
    so they never drift. The list is never cut back when the discard pile is
    reshuffled into the draw pile, so in long games a color's count can drop
    below zero: the hoarding term then goes negative and the scarcity bonus
    stays on for the rest of the game.

    Opponent action frequency is a rough proxy: a seat that has a declared
    color is assumed to have just played a wild.
    """

    def __init__(self) -> None:
        self.remaining_by_color: Dict[Color, int] = dict(COLOR_TOTALS)
        self.remaining_by_rank: Dict[Rank, int] = dict(RANK_TOTALS)
        self.last_called_colors: List[Optional[Color]] = []
        self.action_frequency: List[int] = []

    def refresh(
        self,
        played_cards: Sequence[Card],
        called_colors: Optional[Sequence[Optional[Color]]] = None,
    ) -> None:
        """Re-derive card counts and fold in the latest declared colors.

        An empty or missing called_colors means no new information; the
        previous table is kept.
        """
        self.remaining_by_color = dict(COLOR_TOTALS)
        self.remaining_by_rank = dict(RANK_TOTALS)
        for card in played_cards:
            if card.color is not None:
                self.remaining_by_color[card.color] -= 1
            self.remaining_by_rank[card.rank] -= 1

        if not called_colors:
            return
        self.last_called_colors = list(called_colors)
        if len(self.action_frequency) < len(called_colors):
            self.action_frequency.extend([0] * (len(called_colors) - len(self.action_frequency)))
        for seat, color in enumerate(called_colors):
            if color is not None:
                self.action_frequency[seat] += 1

    def remaining(self, color: Optional[Color]) -> int:
        """Estimated unseen cards of a color; 0 for the wild (None) color."""
        if color is None:
            return 0
        return self.remaining_by_color[color]

    def frequency(self, seat: int) -> int:
        if seat < len(self.action_frequency):
            return self.action_frequency[seat]
        return 0

    def seats_that_called(self, color: Color) -> int:
        """How many upcoming seats last declared this color."""
        return sum(1 for called in self.last_called_colors if called == color)
