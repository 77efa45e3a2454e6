"""Single game runner."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Dict, Optional

from unoheuristic.engine import (
    PlayerView,
    get_legal_actions,
    apply_action,
    init_game,
)
from unoheuristic.engine.rules import DrawCard

if TYPE_CHECKING:
    from unoheuristic.agent.protocol import AgentProtocol


@dataclass
class GameResult:
    """Result of a completed game."""

    winner: Optional[str]
    num_turns: int
    player_ids: tuple[str, ...]
    points: int = 0  # forfeit cost of every card left in the losers' hands


class GameRunner:
    """Runs a single UNO game to completion."""

    def __init__(
        self,
        agents: dict[str, "AgentProtocol"],
        seed: Optional[int] = None,
        max_turns: int = 1000,
        scores: Optional[Dict[str, int]] = None,
    ):
        self._agents = agents
        self._seed = seed
        self._max_turns = max_turns
        self._scores = scores

    def run(self) -> GameResult:
        """Run the game and return the result."""
        player_ids = list(self._agents.keys())
        for agent in self._agents.values():
            agent.start_match()

        state = init_game(player_ids, seed=self._seed, scores=self._scores)
        num_turns = 0

        while state.winner is None and num_turns < self._max_turns:
            pid = state.current_player
            agent = self._agents[pid]
            legal = get_legal_actions(state, pid)
            if not legal:
                break

            player_view = PlayerView.from_state(state, pid)
            action = agent.get_action(player_view, legal, pid)

            if action is None:
                action = next((a for a in legal if isinstance(a, DrawCard)), legal[0])

            state = apply_action(state, pid, action)
            num_turns += 1

        points = 0
        if state.winner is not None:
            points = sum(
                card.forfeit_cost()
                for pid, hand in state.hands.items()
                if pid != state.winner
                for card in hand
            )
        return GameResult(
            winner=state.winner,
            num_turns=num_turns,
            player_ids=tuple(player_ids),
            points=points,
        )
