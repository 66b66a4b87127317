from __future__ import annotations

"""
Post-hoc audit of a finished seating grid.

Flagged adjacency is counted per direction: if A flags B and B flags A and they
sit together, that is two violations. Friend separation is informational only.
"""

from dataclasses import dataclass, field
from typing import Callable, List, Optional, Sequence

from .grid import SeatGrid, is_adjacent
from .roster import Person, RelationMap


@dataclass(frozen=True)
class ViolationReport:
    flagged_violations: int
    friend_violations: int
    flagged_pairs: List[tuple[str, str]] = field(default_factory=list)
    separated: List[str] = field(default_factory=list)

    @property
    def is_clean(self) -> bool:
        return self.flagged_violations == 0 and self.friend_violations == 0


def flagged_adjacencies(grid: SeatGrid, flagged: RelationMap) -> List[tuple[str, str]]:
    """(current, neighbour) for each occupied seat whose neighbour is on the occupant's flagged list."""
    pairs: List[tuple[str, str]] = []
    for rc, current in grid.occupied():
        own = flagged.get(current.name)
        if not own:
            continue
        for _, neighbour in grid.occupied_neighbours(rc):
            if neighbour.name in own:
                pairs.append((current.name, neighbour.name))
    return pairs


def separated_from_friends(grid: SeatGrid, people: Sequence[Person], friendships: RelationMap) -> List[str]:
    """Names with a non-empty friend list and no friend in an adjacent seat."""
    separated: List[str] = []
    for person in people:
        friends = friendships.get(person.name)
        if not friends:
            continue
        pos = grid.find(person.name)
        has_nearby_friend = False
        if pos is not None:
            for friend in friends:
                friend_pos = grid.find(friend)
                if friend_pos is not None and is_adjacent(pos, friend_pos):
                    has_nearby_friend = True
                    break
        if not has_nearby_friend:
            separated.append(person.name)
    return separated


def audit_arrangement(
    grid: SeatGrid,
    people: Sequence[Person],
    friendships: RelationMap,
    flagged: RelationMap,
    *,
    log_fn: Optional[Callable[[str], None]] = None,
) -> ViolationReport:
    pairs = flagged_adjacencies(grid, flagged)
    separated = separated_from_friends(grid, people, friendships)
    if log_fn is not None:
        for a, b in pairs:
            log_fn(f"VIOLATION: {a} should not be near {b}")
        log_fn(f"Total flagged violations: {len(pairs)}")
        log_fn(f"Total friend separation violations: {len(separated)}")
    return ViolationReport(
        flagged_violations=len(pairs),
        friend_violations=len(separated),
        flagged_pairs=pairs,
        separated=separated,
    )
