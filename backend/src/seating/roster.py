from __future__ import annotations

"""
Roster construction for the placement engine.

A roster bundles the people to seat, the two relation maps and the grid
dimensions. Validation here is the caller-side precondition check; the engine
itself assumes a well-formed roster.
"""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, List, Optional
import json

from .vars import DEFAULT_ROWS, DEFAULT_COLS, MAX_ATTEMPTS, RANDOM_SEED

RelationMap = Dict[str, List[str]]  # name -> ordered names, possibly asymmetric


class RosterError(ValueError):
    """Raised when a roster cannot be seated at all (bad shape or duplicate names)."""


@dataclass(frozen=True)
class Person:
    name: str

    def __str__(self) -> str:
        return self.name


@dataclass
class Roster:
    people: List[Person]
    friendships: RelationMap = field(default_factory=dict)
    flagged: RelationMap = field(default_factory=dict)
    rows: int = DEFAULT_ROWS
    cols: int = DEFAULT_COLS
    seed: int | None = RANDOM_SEED
    max_attempts: int = MAX_ATTEMPTS

    @property
    def names(self) -> list[str]:
        return [p.name for p in self.people]


def validate_roster(roster: Roster) -> Roster:
    if roster.rows <= 0 or roster.cols <= 0:
        raise RosterError(f"grid dimensions must be positive, got {roster.rows}x{roster.cols}")
    seen: set[str] = set()
    dupes: list[str] = []
    for name in roster.names:
        if name in seen:
            dupes.append(name)
        seen.add(name)
    if dupes:
        raise RosterError(f"duplicate names in roster: {', '.join(sorted(set(dupes)))}")
    capacity = roster.rows * roster.cols
    if len(roster.people) > capacity:
        raise RosterError(
            f"{len(roster.people)} people do not fit a {roster.rows}x{roster.cols} grid ({capacity} cells)"
        )
    if roster.max_attempts < 1:
        raise RosterError(f"max_attempts must be at least 1, got {roster.max_attempts}")
    return roster


def _relation_map(raw, key: str) -> RelationMap:
    if raw is None:
        return {}
    if not isinstance(raw, dict):
        raise RosterError(f"'{key}' must be an object mapping names to lists of names")
    out: RelationMap = {}
    for name, others in raw.items():
        if not isinstance(others, list) or not all(isinstance(o, str) for o in others):
            raise RosterError(f"'{key}.{name}' must be a list of names")
        out[str(name)] = list(others)
    return out


def _int_field(data: dict, key: str, default, nullable: bool = False):
    value = data.get(key, default)
    if value is None and nullable:
        return None
    if isinstance(value, bool):
        raise RosterError(f"'{key}' must be an integer, got {value!r}")
    try:
        return int(value)
    except (TypeError, ValueError) as exc:
        raise RosterError(f"'{key}' must be an integer, got {value!r}") from exc


def roster_from_dict(data: dict) -> Roster:
    """Build and validate a roster from a decoded JSON object."""
    if not isinstance(data, dict):
        raise RosterError("roster must be a JSON object")
    names = data.get("people")
    if not isinstance(names, list) or not all(isinstance(n, str) for n in names):
        raise RosterError("'people' must be a list of names")
    roster = Roster(
        people=[Person(n) for n in names],
        friendships=_relation_map(data.get("friendships"), "friendships"),
        flagged=_relation_map(data.get("flagged"), "flagged"),
        rows=_int_field(data, "rows", DEFAULT_ROWS),
        cols=_int_field(data, "cols", DEFAULT_COLS),
        seed=_int_field(data, "seed", RANDOM_SEED, nullable=True),
        max_attempts=_int_field(data, "max_attempts", MAX_ATTEMPTS),
    )
    return validate_roster(roster)


def load_roster(path: Path) -> Roster:
    try:
        data = json.loads(Path(path).read_text(encoding="utf-8"))
    except (json.JSONDecodeError, UnicodeDecodeError) as exc:
        raise RosterError(f"{path}: invalid JSON ({exc})") from exc
    return roster_from_dict(data)


def demo_roster(seed: Optional[int] = RANDOM_SEED) -> Roster:
    """Eight pupils on a 3x3 grid with a handful of friendships and flagged pairs."""
    names = ["Alice", "Bob", "Charlie", "Dave", "Eve", "Frank", "Grace", "Henry"]
    return Roster(
        people=[Person(n) for n in names],
        friendships={
            "Alice": ["Bob", "Charlie"],
            "Bob": ["Alice", "Dave"],
            "Charlie": ["Alice", "Eve"],
            "Dave": ["Bob"],
        },
        flagged={
            "Alice": ["Eve"],
            "Bob": ["Frank"],
            "Eve": ["Alice", "Grace"],
            "Grace": ["Henry"],
        },
        rows=3,
        cols=3,
        seed=seed,
    )
