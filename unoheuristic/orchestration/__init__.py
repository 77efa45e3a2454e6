"""Game orchestration."""

from unoheuristic.orchestration.game_runner import GameResult, GameRunner
from unoheuristic.orchestration.roster import load_roster, parse_roster
from unoheuristic.orchestration.tournament import (
    Scoreboard,
    run_series,
    run_tournament,
    simulate_win_rates,
    tally_leaders,
)

__all__ = [
    "GameResult",
    "GameRunner",
    "Scoreboard",
    "load_roster",
    "parse_roster",
    "run_series",
    "run_tournament",
    "simulate_win_rates",
    "tally_leaders",
]
