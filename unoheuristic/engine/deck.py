"""Deck creation, shuffling and full-deck composition."""

import random
from typing import Dict, List

from unoheuristic.engine.card import ACTION_VALUES, NUMBER_VALUES, Card, Color, Rank

CARD_VALUES_STANDARD = NUMBER_VALUES + ACTION_VALUES

# Cards of each color in a full deck: one 0, two of 1-9, two of each action.
COLOR_TOTALS: Dict[Color, int] = {color: 19 for color in Color}

# Starting rank counts for card tracking. NUMBER is the tracker's historical
# figure, not the 76 number cards actually in the deck.
RANK_TOTALS: Dict[Rank, int] = {
    Rank.NUMBER: 36,
    Rank.SKIP: 8,
    Rank.REVERSE: 8,
    Rank.DRAW_TWO: 8,
    Rank.WILD: 4,
    Rank.WILD_DRAW_FOUR: 4,
}


def create_deck(seed: int | None = None) -> List[Card]:
    """Create a standard 108-card UNO deck.

    - 4 colors × (0-9, Skip, Reverse, Draw Two): 76 cards
    - 4 Wild, 4 Wild Draw Four: 8 cards
    - Total: 108 cards
    """
    cards: List[Card] = []

    for color in Color:
        cards.append(Card(color=color, value="0"))
        for value in CARD_VALUES_STANDARD[1:]:
            cards.append(Card(color=color, value=value))
            cards.append(Card(color=color, value=value))

    for _ in range(4):
        cards.append(Card(color=None, value="wild"))
        cards.append(Card(color=None, value="wild_draw_four"))

    rng = random.Random(seed)
    rng.shuffle(cards)
    return cards
