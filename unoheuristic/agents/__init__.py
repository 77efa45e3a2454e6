"""Built-in agents."""

from unoheuristic.agents.heuristic_agent import HeuristicAgent
from unoheuristic.agents.random_agent import RandomAgent

AGENT_KINDS = ("heuristic", "random")


def make_agent(kind: str, name: str, verbose: bool = False):
    """Build an agent from its kind name ("heuristic" or "random")."""
    kind = kind.strip().lower()
    if kind == "heuristic":
        return HeuristicAgent(name=name, verbose=verbose)
    if kind == "random":
        return RandomAgent(name=name)
    raise ValueError(f"Unknown agent type: {kind}. Use one of: {', '.join(AGENT_KINDS)}")


__all__ = ["HeuristicAgent", "RandomAgent", "AGENT_KINDS", "make_agent"]
