"""Card, Color and Rank types for UNO."""

from dataclasses import dataclass
from enum import Enum
from typing import Optional


class Color(str, Enum):
    """Card colors. Declaration order doubles as the tie-break order."""

    RED = "red"
    BLUE = "blue"
    GREEN = "green"
    YELLOW = "yellow"


class Rank(str, Enum):
    """Card ranks."""

    NUMBER = "number"
    SKIP = "skip"
    REVERSE = "reverse"
    DRAW_TWO = "draw_two"
    WILD = "wild"
    WILD_DRAW_FOUR = "wild_draw_four"


NUMBER_VALUES = ("0", "1", "2", "3", "4", "5", "6", "7", "8", "9")
ACTION_VALUES = ("skip", "reverse", "draw_two")
WILD_VALUES = ("wild", "wild_draw_four")

CARD_VALUES = NUMBER_VALUES + ACTION_VALUES + WILD_VALUES

ACTION_RANKS = (Rank.SKIP, Rank.REVERSE, Rank.DRAW_TWO)
WILD_RANKS = (Rank.WILD, Rank.WILD_DRAW_FOUR)

ACTION_FORFEIT_COST = 20
WILD_FORFEIT_COST = 50


@dataclass(frozen=True)
class Card:
    """A UNO card.

    For number/action cards: color is set, value is "0"-"9", "skip", "reverse", "draw_two".
    For wild cards: color is None, value is "wild" or "wild_draw_four".
    """

    color: Optional[Color]
    value: str

    def __post_init__(self) -> None:
        if self.value not in CARD_VALUES:
            raise ValueError(f"Invalid card value: {self.value}")
        if self.value in WILD_VALUES and self.color is not None:
            raise ValueError("Wild cards must have color=None")
        if self.value not in WILD_VALUES and self.color is None:
            raise ValueError("Non-wild cards must have a color")

    @property
    def rank(self) -> Rank:
        if self.value in NUMBER_VALUES:
            return Rank.NUMBER
        return Rank(self.value)

    @property
    def number(self) -> Optional[int]:
        """Face value for number cards, None for everything else."""
        if self.value in NUMBER_VALUES:
            return int(self.value)
        return None

    @property
    def is_wild(self) -> bool:
        return self.value in WILD_VALUES

    def forfeit_cost(self) -> int:
        """Points this card is worth to the winner if it is still in hand at the end."""
        if self.value in NUMBER_VALUES:
            return int(self.value)
        if self.value in WILD_VALUES:
            return WILD_FORFEIT_COST
        return ACTION_FORFEIT_COST

    def can_play_on(self, up_card: "Card", called_color: Optional[Color]) -> bool:
        """Check if this card can legally go on top of up_card.

        called_color is only consulted when up_card is a wild.
        """
        if self.is_wild:
            return True
        effective = called_color if up_card.is_wild else up_card.color
        if self.color == effective:
            return True
        # Same number or same action rank
        return self.value == up_card.value

    def __str__(self) -> str:
        if self.color is None:
            return self.value
        return f"{self.color.value}_{self.value}"
