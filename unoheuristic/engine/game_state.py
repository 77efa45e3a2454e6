"""Game state for UNO."""

from dataclasses import dataclass, field
from typing import Dict, List, Optional

from unoheuristic.engine.card import Card, Color


@dataclass(frozen=True)
class GameState:
    """Immutable UNO game state."""

    hands: Dict[str, List[Card]]  # player_id -> list of cards
    discard_pile: List[Card]  # top is last
    draw_pile: List[Card]
    current_player: str
    direction: int  # 1 = clockwise, -1 = counter-clockwise
    last_played_color: Optional[Color]  # for wild cards
    winner: Optional[str] = None
    player_order: tuple[str, ...] = field(default_factory=tuple)
    history: tuple[str, ...] = field(default_factory=tuple)  # Log of events
    played_cards: tuple[Card, ...] = field(default_factory=tuple)
    called_colors: Dict[str, Optional[Color]] = field(default_factory=dict)
    scores: Dict[str, int] = field(default_factory=dict)  # carried over from earlier games
    seed: Optional[int] = None

    def top_discard(self) -> Optional[Card]:
        """Return the top card on the discard pile."""
        return self.discard_pile[-1] if self.discard_pile else None

    def upcoming_players(self, player_id: str) -> tuple[str, ...]:
        """Other players in turn order, starting with whoever plays after player_id."""
        order = self.player_order
        idx = order.index(player_id)
        return tuple(
            order[(idx + self.direction * k) % len(order)]
            for k in range(1, len(order))
        )


@dataclass
class PlayerView:
    """Filtered game state visible to a single player.

    Contains only that player's hand and public info.
    """

    my_hand: List[Card]
    discard_pile: List[Card]
    top_discard: Optional[Card]
    current_player: str
    direction: int
    last_played_color: Optional[Color]
    winner: Optional[str]
    player_order: tuple[str, ...]
    num_cards_per_player: Dict[str, int]  # player_id -> count
    history: List[str]  # Recent game events
    played_cards: List[Card]
    upcoming_players: tuple[str, ...]
    called_colors: Dict[str, Optional[Color]]
    scores: Dict[str, int]

    @classmethod
    def from_state(cls, state: GameState, player_id: str) -> "PlayerView":
        """Create a player view from full game state, hiding other players' hands."""
        num_cards = {
            pid: len(cards) for pid, cards in state.hands.items()
        }
        return cls(
            my_hand=list(state.hands.get(player_id, [])),
            discard_pile=list(state.discard_pile),
            top_discard=state.top_discard(),
            current_player=state.current_player,
            direction=state.direction,
            last_played_color=state.last_played_color,
            winner=state.winner,
            player_order=state.player_order,
            num_cards_per_player=num_cards,
            history=list(state.history[-10:]),  # Last 10 events
            played_cards=list(state.played_cards),
            upcoming_players=state.upcoming_players(player_id),
            called_colors=dict(state.called_colors),
            scores=dict(state.scores),
        )


@dataclass(frozen=True)
class MatchSnapshot:
    """Public match information handed to a decision engine each turn.

    Per-seat tuples are indexed by turn-order offset from the acting
    player: seat 0 is whoever plays next.
    """

    played_cards: tuple[Card, ...]
    upcoming_hand_sizes: tuple[int, ...]
    upcoming_called_colors: tuple[Optional[Color], ...]
    upcoming_scores: tuple[int, ...]

    @classmethod
    def from_view(cls, view: PlayerView) -> "MatchSnapshot":
        seats = view.upcoming_players
        return cls(
            played_cards=tuple(view.played_cards),
            upcoming_hand_sizes=tuple(view.num_cards_per_player[pid] for pid in seats),
            upcoming_called_colors=tuple(view.called_colors.get(pid) for pid in seats),
            upcoming_scores=tuple(view.scores.get(pid, 0) for pid in seats),
        )
