"""Heuristic agent - plays through a DecisionEngine."""

from typing import Optional

from unoheuristic.engine import Action, Color, MatchSnapshot, PlayerView
from unoheuristic.engine.rules import DrawCard, PlayCard
from unoheuristic.strategy import DEFAULT_WEIGHTS, DecisionEngine, ScoringWeights


class HeuristicAgent:
    """Agent that scores every playable card and plays the best one."""

    def __init__(
        self,
        name: str = "heuristic",
        weights: ScoringWeights = DEFAULT_WEIGHTS,
        verbose: bool = False,
    ):
        self._name = name
        self._weights = weights
        self._verbose = verbose
        self._engine = DecisionEngine(weights=weights)

    @property
    def name(self) -> str:
        return self._name

    @property
    def engine(self) -> DecisionEngine:
        return self._engine

    def start_match(self) -> None:
        # Belief state must not leak between games
        self._engine = DecisionEngine(weights=self._weights)

    def get_action(
        self,
        player_view: PlayerView,
        legal_actions: list[Action],
        player_id: str,
    ) -> Action | None:
        if not legal_actions:
            return None
        up_card = player_view.top_discard
        if up_card is None:
            return DrawCard()

        hand = player_view.my_hand
        called: Optional[Color] = player_view.last_played_color if up_card.is_wild else None
        snapshot = MatchSnapshot.from_view(player_view)
        index = self._engine.select_card(hand, up_card, called, snapshot)
        if index is None:
            if self._verbose:
                print(f"[{self.name}] No playable card on {up_card}, drawing")
            return DrawCard()

        card = hand[index]
        color = None
        if card.is_wild:
            color = self._engine.choose_color(hand[:index] + hand[index + 1:])
        if self._verbose:
            extra = f" calling {color.value}" if color else ""
            print(f"[{self.name}] Playing {card} on {up_card}{extra}")

        for action in legal_actions:
            if isinstance(action, PlayCard) and action.card == card and action.chosen_color == color:
                return action
        raise ValueError(f"Chosen card {card} is not among the legal actions")
