"""Shared test helpers."""

from typing import Dict, List, Optional

import pytest

from unoheuristic.engine import Card, Color, GameState


def _make_state(
    hands: Dict[str, List[Card]],
    top: Card,
    current: Optional[str] = None,
    direction: int = 1,
    called: Optional[Color] = None,
    played: Optional[List[Card]] = None,
    draw: Optional[List[Card]] = None,
    called_colors: Optional[Dict[str, Optional[Color]]] = None,
    scores: Optional[Dict[str, int]] = None,
) -> GameState:
    order = tuple(hands)
    return GameState(
        hands={pid: list(cards) for pid, cards in hands.items()},
        discard_pile=[top],
        draw_pile=list(draw or []),
        current_player=current or order[0],
        direction=direction,
        last_played_color=called if top.is_wild else top.color,
        player_order=order,
        played_cards=tuple(played) if played is not None else (top,),
        called_colors={pid: (called_colors or {}).get(pid) for pid in order},
        scores={pid: (scores or {}).get(pid, 0) for pid in order},
    )


@pytest.fixture
def make_state():
    return _make_state
