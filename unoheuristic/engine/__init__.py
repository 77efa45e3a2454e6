"""Game engine for UNO."""

from unoheuristic.engine.card import Card, Color, Rank
from unoheuristic.engine.deck import COLOR_TOTALS, RANK_TOTALS, create_deck
from unoheuristic.engine.game_state import GameState, MatchSnapshot, PlayerView
from unoheuristic.engine.rules import (
    Action,
    PlayCard,
    DrawCard,
    get_legal_actions,
    apply_action,
    init_game,
)

__all__ = [
    "Card",
    "Color",
    "Rank",
    "COLOR_TOTALS",
    "RANK_TOTALS",
    "create_deck",
    "GameState",
    "MatchSnapshot",
    "PlayerView",
    "Action",
    "PlayCard",
    "DrawCard",
    "get_legal_actions",
    "apply_action",
    "init_game",
]
