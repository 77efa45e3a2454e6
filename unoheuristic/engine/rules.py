"""UNO rules: legal actions and state transitions."""

import random
from dataclasses import dataclass, replace
from typing import Dict, List, Optional, Union

from unoheuristic.engine.card import Card, Color
from unoheuristic.engine.game_state import GameState


@dataclass
class PlayCard:
    """Action: play a card. For wilds, chosen_color is required."""

    card: Card
    chosen_color: Optional[Color] = None


@dataclass
class DrawCard:
    """Action: draw a card (when no legal play or player chooses to draw)."""

    pass


Action = Union[PlayCard, DrawCard]

HAND_SIZE = 7


def init_game(
    player_ids: List[str],
    seed: Optional[int] = None,
    scores: Optional[Dict[str, int]] = None,
) -> GameState:
    """Create initial game state: deal 7 cards each, one card on discard."""
    from unoheuristic.engine.deck import create_deck

    if len(player_ids) < 2:
        raise ValueError("UNO needs at least 2 players")

    deck = create_deck(seed=seed)
    hands: dict[str, list[Card]] = {pid: [] for pid in player_ids}
    for _ in range(HAND_SIZE):
        for pid in player_ids:
            hands[pid].append(deck.pop())
    # First card must not be wild; wilds flipped on the way go back under the deck
    wilds = []
    first_card = deck.pop()
    while first_card.is_wild:
        wilds.append(first_card)
        first_card = deck.pop()
    deck[0:0] = wilds
    return GameState(
        hands=hands,
        discard_pile=[first_card],
        draw_pile=deck,
        current_player=player_ids[0],
        direction=1,
        last_played_color=first_card.color,
        player_order=tuple(player_ids),
        played_cards=(first_card,),
        called_colors={pid: None for pid in player_ids},
        scores={pid: (scores or {}).get(pid, 0) for pid in player_ids},
        seed=seed,
    )


def _card_matches(card: Card, state: GameState) -> bool:
    """Check if a card can be played on the current discard pile."""
    top = state.top_discard()
    if top is None:
        return False
    return card.can_play_on(top, state.last_played_color)


def get_legal_actions(state: GameState, player_id: str) -> List[Action]:
    """Return all legal actions for the current player."""
    if state.winner is not None:
        return []
    if state.current_player != player_id:
        return []

    hand = state.hands.get(player_id, [])
    actions: List[Action] = []
    for card in hand:
        if not _card_matches(card, state):
            continue
        if card.is_wild:
            for color in Color:
                actions.append(PlayCard(card=card, chosen_color=color))
        else:
            actions.append(PlayCard(card=card))

    # Can always draw if we have no play or choose to
    actions.append(DrawCard())
    return actions


def _reshuffle_rng(state: GameState) -> random.Random:
    if state.seed is None:
        return random.Random()
    return random.Random(f"{state.seed}:{len(state.played_cards)}")


def _draw(
    draw: List[Card],
    discard: List[Card],
    count: int,
    rng: random.Random,
) -> tuple[List[Card], List[Card], List[Card]]:
    """Take up to count cards, reshuffling the discard pile (except top) when empty.

    Returns (drawn, draw_pile, discard_pile).
    """
    drawn: List[Card] = []
    for _ in range(count):
        if not draw and len(discard) > 1:
            top = discard[-1]
            draw = list(discard[:-1])
            rng.shuffle(draw)
            discard = [top]
        if draw:
            drawn.append(draw.pop())
    return drawn, draw, discard


def _next_index(order: tuple[str, ...], current: str, direction: int, steps: int = 1) -> int:
    return (order.index(current) + direction * steps) % len(order)


def apply_action(state: GameState, player_id: str, action: Action) -> GameState:
    """Apply an action and return the new game state."""
    if state.winner is not None:
        return state
    if state.current_player != player_id:
        raise ValueError(f"Not {player_id}'s turn")

    hands = dict(state.hands)
    order = state.player_order
    direction = state.direction
    history = list(state.history)
    rng = _reshuffle_rng(state)

    if isinstance(action, DrawCard):
        # After draw, turn passes (no "play the drawn card")
        drawn, draw, discard = _draw(list(state.draw_pile), list(state.discard_pile), 1, rng)
        hands[player_id] = hands[player_id] + drawn
        history.append(f"{player_id} drew a card")
        return replace(
            state,
            hands=hands,
            discard_pile=discard,
            draw_pile=draw,
            current_player=order[_next_index(order, player_id, direction)],
            history=tuple(history),
        )

    play = action
    if play.chosen_color is None and play.card.is_wild:
        raise ValueError("Wild card requires chosen_color")
    if not _card_matches(play.card, state):
        raise ValueError(f"Card {play.card} cannot be played on {state.top_discard()}")

    hand = list(hands[player_id])
    try:
        hand.remove(play.card)
    except ValueError:
        raise ValueError(f"Card {play.card} not in hand") from None

    hands[player_id] = hand
    discard = list(state.discard_pile) + [play.card]
    draw = list(state.draw_pile)
    played = state.played_cards + (play.card,)
    called_colors = dict(state.called_colors)
    if play.card.is_wild:
        last_color = play.chosen_color
        called_colors[player_id] = play.chosen_color
    else:
        last_color = play.card.color

    action_desc = f"{player_id} played {play.card}"
    if play.card.is_wild:
        action_desc += f" (chose {play.chosen_color.value})"

    if not hand:
        history.append(f"{player_id} played {play.card} and WON!")
        return replace(
            state,
            hands=hands,
            discard_pile=discard,
            last_played_color=last_color,
            winner=player_id,
            history=tuple(history),
            played_cards=played,
            called_colors=called_colors,
        )

    history.append(action_desc)

    # Handle special cards
    next_idx = _next_index(order, player_id, direction)
    value = play.card.value
    if value == "skip":
        next_idx = _next_index(order, player_id, direction, 2)
    elif value == "reverse":
        direction = -direction
        next_idx = _next_index(order, player_id, direction)
    elif value in ("draw_two", "wild_draw_four"):
        # Next player draws, turn skips to player after
        victim = order[next_idx]
        drawn, draw, discard = _draw(draw, discard, 2 if value == "draw_two" else 4, rng)
        hands[victim] = hands[victim] + drawn
        history.append(f"{victim} drew {len(drawn)} cards (penalty)")
        next_idx = _next_index(order, player_id, direction, 2)

    return replace(
        state,
        hands=hands,
        discard_pile=discard,
        draw_pile=draw,
        current_player=order[next_idx],
        direction=direction,
        last_played_color=last_color,
        history=tuple(history),
        played_cards=played,
        called_colors=called_colors,
    )
