"""Simulate a game between one heuristic agent and three random agents."""

from unoheuristic.agents import HeuristicAgent, RandomAgent
from unoheuristic.orchestration.game_runner import GameRunner


def main():
    agents = {
        "p1": HeuristicAgent("Heuristic", verbose=True),
        "p2": RandomAgent("Bot2", seed=2),
        "p3": RandomAgent("Bot3", seed=3),
        "p4": RandomAgent("Bot4", seed=4),
    }

    runner = GameRunner(agents, seed=42)
    result = runner.run()

    print(f"Game finished! Winner: {result.winner}")
    print(f"Turns: {result.num_turns}")
    print(f"Points: {result.points}")


if __name__ == "__main__":
    main()
