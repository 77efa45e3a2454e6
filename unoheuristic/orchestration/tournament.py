"""Tournament - run many scored games and aggregate results."""

import random
from collections import defaultdict
from typing import Any, Optional

from unoheuristic.orchestration.game_runner import GameRunner, GameResult


class Scoreboard:
    """Cumulative points per player across a series of games."""

    def __init__(self, player_ids: list[str]):
        self.totals: dict[str, int] = {pid: 0 for pid in player_ids}

    def record(self, result: GameResult) -> None:
        if result.winner is not None:
            self.totals[result.winner] += result.points

    def leader(self) -> Optional[str]:
        """Player with the most points; earliest seat wins ties.

        Before anyone scores this is the first seat. None only for an empty board.
        """
        best = None
        for pid, points in self.totals.items():
            if best is None or points > self.totals[best]:
                best = pid
        return best


def tally_leaders(player_ids: list[str], results: list[GameResult]) -> dict[str, int]:
    """Replay results onto a fresh scoreboard, crediting the leader after every game."""
    board = Scoreboard(player_ids)
    credits: dict[str, int] = {pid: 0 for pid in player_ids}
    for result in results:
        board.record(result)
        credits[board.leader()] += 1
    return credits


def _play_series(agents: dict[str, Any], num_games: int, rng: random.Random):
    player_ids = list(agents.keys())
    board = Scoreboard(player_ids)
    results = []
    for g in range(num_games):
        # Alternate who goes first
        order = player_ids if g % 2 == 0 else list(reversed(player_ids))
        ordered_agents = {pid: agents[pid] for pid in order}
        runner = GameRunner(
            ordered_agents,
            seed=rng.randint(0, 2**31 - 1),
            scores=dict(board.totals),
        )
        result = runner.run()
        board.record(result)
        results.append(result)
    return board, results


def run_series(
    agents: dict[str, Any],
    num_games: int = 20,
    seed: int | None = None,
) -> Scoreboard:
    """Play num_games scored games and return the final scoreboard."""
    board, _ = _play_series(agents, num_games, random.Random(seed))
    return board


def run_tournament(
    agents: dict[str, Any],
    num_games: int = 100,
    seed: int | None = None,
) -> dict[str, int]:
    """Run a scored series between the agents.

    Scores accumulate across games and are visible to every agent, so late
    games are played under the pressure of the running totals.

    Returns:
        Dict mapping player_id to number of games won.
    """
    _, results = _play_series(agents, num_games, random.Random(seed))
    wins: dict[str, int] = defaultdict(int)
    for result in results:
        if result.winner:
            wins[result.winner] += 1
    return dict(wins)


def simulate_win_rates(
    agents: dict[str, Any],
    simulations: int = 100,
    games_per_simulation: int = 20,
    seed: int | None = None,
) -> dict[str, float]:
    """Repeat scored series and return how often each player led the scoreboard.

    After every game the current points leader is credited, so a player who
    wins a cheap game while trailing gets nothing for it. Percentages are
    over all games played.
    """
    rng = random.Random(seed)
    player_ids = list(agents.keys())
    wins: dict[str, int] = {pid: 0 for pid in player_ids}
    for _ in range(simulations):
        _, results = _play_series(agents, games_per_simulation, rng)
        for pid, count in tally_leaders(player_ids, results).items():
            wins[pid] += count
    total = simulations * games_per_simulation
    return {pid: (100.0 * w / total if total else 0.0) for pid, w in wins.items()}
