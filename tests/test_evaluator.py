"""Unit tests for card scoring."""

from dataclasses import replace

from unoheuristic.engine import Card, Color, MatchSnapshot
from unoheuristic.strategy import DEFAULT_WEIGHTS, BeliefState, score_card


def snapshot(played=(), sizes=(7, 7, 7), called=None, scores=None) -> MatchSnapshot:
    return MatchSnapshot(
        played_cards=tuple(played),
        upcoming_hand_sizes=tuple(sizes),
        upcoming_called_colors=tuple(called or [None] * len(sizes)),
        upcoming_scores=tuple(scores or [0] * len(sizes)),
    )


def belief_for(snap: MatchSnapshot) -> BeliefState:
    belief = BeliefState()
    belief.refresh(snap.played_cards, snap.upcoming_called_colors)
    return belief


FIVE_CARD_HAND = [Card(Color.YELLOW, str(n)) for n in range(5)]


def test_draw_four_with_next_player_about_to_win() -> None:
    up = Card(Color.RED, "7")
    snap = snapshot(played=[up], sizes=(1, 5, 5))
    score = score_card(Card(None, "wild_draw_four"), up, None, snap, FIVE_CARD_HAND, belief_for(snap))
    assert score == 50 + 10 * 11 + 100


def test_draw_four_counts_opponent_action_frequency() -> None:
    up = Card(Color.RED, "7")
    snap = snapshot(played=[up], sizes=(3, 4), called=[Color.RED, None])
    score = score_card(Card(None, "wild_draw_four"), up, None, snap, FIVE_CARD_HAND, belief_for(snap))
    assert score == 50 + 10 * 7 + 20


def test_draw_four_skips_the_other_terms() -> None:
    up = Card(Color.RED, "7")
    snap = snapshot(played=[up], sizes=(3, 4), scores=[0, 900])
    # Small hand and late game would both move a normal card's score
    score = score_card(Card(None, "wild_draw_four"), up, None, snap, [Card(None, "wild_draw_four")], belief_for(snap))
    assert score == 50 + 10 * 7


def test_near_win_bonus_shrinks_with_more_opponents() -> None:
    up = Card(Color.RED, "7")
    card = Card(Color.BLUE, "7")
    hand = [card, Card(Color.GREEN, "1"), Card(Color.GREEN, "2")]
    snap_two = snapshot(played=[up], sizes=(4, 6))
    snap_three = snapshot(played=[up], sizes=(4, 6, 6))
    two = score_card(card, up, None, snap_two, hand, belief_for(snap_two))
    three = score_card(card, up, None, snap_three, hand, belief_for(snap_three))
    assert two == 25 + 10 + 19
    assert two - three == 5


def test_disruption_value() -> None:
    up = Card(Color.RED, "5")
    snap = snapshot(played=[up], sizes=(4, 6))
    score = score_card(Card(Color.RED, "skip"), up, None, snap, FIVE_CARD_HAND, belief_for(snap))
    # base + per opponent card + same color + red remaining
    assert score == 20 + 5 * 10 + 15 + 18


def test_same_action_rank_bonus() -> None:
    up = Card(Color.RED, "skip")
    snap = snapshot(played=[up], sizes=(4, 6))
    score = score_card(Card(Color.BLUE, "skip"), up, None, snap, FIVE_CARD_HAND, belief_for(snap))
    assert score == 20 + 5 * 10 + 12 + 19


def test_called_color_alignment() -> None:
    up = Card(None, "wild")
    snap = snapshot(played=[up], sizes=(7,))
    belief = belief_for(snap)
    green = score_card(Card(Color.GREEN, "2"), up, Color.GREEN, snap, FIVE_CARD_HAND, belief)
    assert green == 12 + 19


def test_scarce_color_without_declared_penalty() -> None:
    played = [Card(Color.GREEN, "1")] * 17 + [Card(Color.RED, "4")]
    up = Card(Color.RED, "4")
    snap = snapshot(played=played, sizes=(7, 7, 7), called=[None, Color.BLUE, None])
    belief = belief_for(snap)
    assert belief.remaining(Color.GREEN) == 2
    score = score_card(Card(Color.GREEN, "4"), up, None, snap, FIVE_CARD_HAND, belief)
    # same number + hoarding + scarcity
    assert score == 10 + 2 + 15


def test_scarce_color_penalized_when_opponents_called_it() -> None:
    played = [Card(Color.GREEN, "1")] * 17 + [Card(Color.RED, "4")]
    up = Card(Color.RED, "4")
    snap = snapshot(played=played, sizes=(7, 7, 7), called=[Color.GREEN, None, Color.GREEN])
    score = score_card(Card(Color.GREEN, "4"), up, None, snap, FIVE_CARD_HAND, belief_for(snap))
    assert score == 10 + 2 + 15 - 2 * 8


def test_loss_aversion_late_in_scored_match() -> None:
    up = Card(Color.RED, "1")
    card = Card(Color.RED, "9")
    early = snapshot(played=[up], sizes=(7, 7), scores=[100, 399])
    late = snapshot(played=[up], sizes=(7, 7), scores=[100, 450])
    assert score_card(card, up, None, early, FIVE_CARD_HAND, belief_for(early)) == 15 + 18
    assert score_card(card, up, None, late, FIVE_CARD_HAND, belief_for(late)) == 15 + 18 - 18


def test_plain_wild_has_no_color_terms() -> None:
    up = Card(Color.RED, "5")
    snap = snapshot(played=[up])
    assert score_card(Card(None, "wild"), up, None, snap, FIVE_CARD_HAND, belief_for(snap)) == 0


def test_custom_weights() -> None:
    up = Card(Color.RED, "5")
    snap = snapshot(played=[up])
    weights = replace(DEFAULT_WEIGHTS, same_color=100)
    score = score_card(Card(Color.RED, "8"), up, None, snap, FIVE_CARD_HAND, belief_for(snap), weights)
    assert score == 100 + 18


def test_scoring_does_not_mutate_belief() -> None:
    up = Card(Color.RED, "5")
    snap = snapshot(played=[up], called=[Color.RED, None, None])
    belief = belief_for(snap)
    before = (dict(belief.remaining_by_color), list(belief.action_frequency), list(belief.last_called_colors))
    score_card(Card(None, "wild_draw_four"), up, None, snap, FIVE_CARD_HAND, belief)
    score_card(Card(Color.RED, "skip"), up, None, snap, FIVE_CARD_HAND, belief)
    assert before == (dict(belief.remaining_by_color), list(belief.action_frequency), list(belief.last_called_colors))


def test_overdrawn_color_goes_negative_and_stays_scarce() -> None:
    # More reds played than a deck holds: the history spans a reshuffle
    played = [Card(Color.RED, "1")] * 20 + [Card(Color.RED, "4")]
    up = Card(Color.RED, "4")
    snap = snapshot(played=played)
    belief = belief_for(snap)
    assert belief.remaining(Color.RED) == -2
    score = score_card(Card(Color.RED, "6"), up, None, snap, FIVE_CARD_HAND, belief)
    # same color + negative hoarding + scarcity
    assert score == 15 - 2 + 15
