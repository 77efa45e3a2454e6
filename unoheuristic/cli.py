"""CLI entry point."""

from __future__ import annotations

import math
from typing import Optional

import typer

from unoheuristic.config import load_settings

app = typer.Typer(help="UNO with heuristic and random agents")


def _parse_agents(agent_specs: str, verbose: bool = False) -> dict[str, "AgentProtocol"]:
    from unoheuristic.agent.protocol import AgentProtocol
    from unoheuristic.agents import make_agent

    parts = [s.strip().lower() for s in agent_specs.split(",") if s.strip()]
    if len(parts) < 2:
        raise typer.BadParameter("Need at least 2 agents.")
    agents: dict[str, AgentProtocol] = {}
    for i, kind in enumerate(parts):
        pid = f"player_{i}"
        try:
            agents[pid] = make_agent(kind, name=pid, verbose=verbose)
        except ValueError as e:
            raise typer.BadParameter(str(e)) from e
    return agents


def _win_bar(name: str, percentage: float) -> str:
    # One block per started 2%
    blocks = "█" * math.ceil(percentage / 2)
    return f"{name:<15}: {blocks} ({percentage:.1f}%)"


@app.command()
def play(
    agents: str = typer.Option(
        "heuristic,random,random,random",
        "--agents",
        "-a",
        help="Comma-separated agent kinds: heuristic or random",
    ),
    seed: Optional[int] = typer.Option(None, "--seed", "-s", help="Random seed"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Print every heuristic decision"),
) -> None:
    """Run a single UNO game."""
    from unoheuristic.orchestration.game_runner import GameRunner

    agent_map = _parse_agents(agents, verbose=verbose)
    runner = GameRunner(agent_map, seed=seed)
    result = runner.run()
    typer.echo(f"Winner: {result.winner or 'None (draw)'}")
    typer.echo(f"Turns: {result.num_turns}")
    typer.echo(f"Points: {result.points}")


@app.command()
def simulate(
    roster: Optional[str] = typer.Option(None, "--roster", "-r", help="Roster file, one 'name,strategy' per line"),
    simulations: Optional[int] = typer.Option(None, "--simulations", "-n", help="Number of scored series"),
    games: Optional[int] = typer.Option(None, "--games", "-g", help="Games per series"),
    seed: Optional[int] = typer.Option(None, "--seed", "-s", help="Random seed"),
) -> None:
    """Estimate win rates for every player in a roster."""
    from unoheuristic.agents import make_agent
    from unoheuristic.orchestration.roster import load_roster
    from unoheuristic.orchestration.tournament import simulate_win_rates

    try:
        settings = load_settings()
    except ValueError as e:
        raise typer.BadParameter(str(e)) from e

    roster_path = roster or settings.roster_path
    try:
        entries = load_roster(roster_path)
        agent_map = {name: make_agent(kind, name=name) for name, kind in entries}
    except OSError as e:
        raise typer.BadParameter(f"Cannot read roster {roster_path}: {e}") from e
    except ValueError as e:
        raise typer.BadParameter(str(e)) from e
    if len(agent_map) < 2:
        raise typer.BadParameter("Roster needs at least 2 players.")

    rates = simulate_win_rates(
        agent_map,
        simulations=simulations if simulations is not None else settings.simulations,
        games_per_simulation=games if games is not None else settings.games_per_simulation,
        seed=seed if seed is not None else settings.seed,
    )
    typer.echo("--------------------")
    typer.echo("Overall Win Percentages:")
    for name, rate in rates.items():
        typer.echo(_win_bar(name, rate))
    typer.echo("--------------------")


if __name__ == "__main__":
    app()
