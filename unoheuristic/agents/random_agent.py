"""Random agent - baseline opponent."""

import random
from typing import Optional

from unoheuristic.engine import Action, PlayerView
from unoheuristic.engine.rules import DrawCard, PlayCard


class RandomAgent:
    """Plays a random legal card, draws only when it has to."""

    def __init__(self, name: str = "random", seed: Optional[int] = None):
        self._name = name
        self._rng = random.Random(seed)

    @property
    def name(self) -> str:
        return self._name

    def start_match(self) -> None:
        pass

    def get_action(
        self,
        player_view: PlayerView,
        legal_actions: list[Action],
        player_id: str,
    ) -> Action | None:
        if not legal_actions:
            return None
        play_actions = [a for a in legal_actions if isinstance(a, PlayCard)]
        if play_actions:
            return self._rng.choice(play_actions)
        return next((a for a in legal_actions if isinstance(a, DrawCard)), legal_actions[0])
