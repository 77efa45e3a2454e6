"""Environment-driven defaults for the CLI."""

import os
from dataclasses import dataclass
from typing import Optional

from dotenv import load_dotenv


@dataclass(frozen=True)
class Settings:
    roster_path: str = "players.txt"
    simulations: int = 100
    games_per_simulation: int = 20
    seed: Optional[int] = None


def _int_env(key: str, default: Optional[int]) -> Optional[int]:
    raw = os.environ.get(key)
    if raw is None or raw.strip() == "":
        return default
    try:
        return int(raw)
    except ValueError:
        raise ValueError(f"{key} must be an integer, got {raw!r}") from None


def load_settings() -> Settings:
    """Read UNO_* settings from the environment (and a .env file, if present)."""
    load_dotenv()
    defaults = Settings()
    return Settings(
        roster_path=os.environ.get("UNO_ROSTER", defaults.roster_path),
        simulations=_int_env("UNO_SIMULATIONS", defaults.simulations),
        games_per_simulation=_int_env("UNO_GAMES_PER_SIMULATION", defaults.games_per_simulation),
        seed=_int_env("UNO_SEED", defaults.seed),
    )
