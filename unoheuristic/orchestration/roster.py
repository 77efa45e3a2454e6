"""Player roster files: one "name,strategy" pair per line."""

from pathlib import Path
from typing import List, Tuple


def parse_roster(text: str) -> List[Tuple[str, str]]:
    """Parse roster text into (name, strategy) pairs.

    Blank lines and lines starting with "#" are ignored.
    """
    entries: List[Tuple[str, str]] = []
    seen = set()
    for lineno, raw in enumerate(text.splitlines(), start=1):
        line = raw.strip()
        if not line or line.startswith("#"):
            continue
        parts = [p.strip() for p in line.split(",")]
        if len(parts) != 2 or not all(parts):
            raise ValueError(f"Roster line {lineno}: expected 'name,strategy', got {raw!r}")
        name, strategy = parts
        if name in seen:
            raise ValueError(f"Roster line {lineno}: duplicate player name {name!r}")
        seen.add(name)
        entries.append((name, strategy.lower()))
    return entries


def load_roster(path: str | Path) -> List[Tuple[str, str]]:
    return parse_roster(Path(path).read_text(encoding="utf-8"))
