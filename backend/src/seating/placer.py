from __future__ import annotations

"""
Greedy seat placement for one shuffled ordering.

Most constrained people go first (friends + flagged partners), everyone else
follows in shuffled order. Each person is seated next to an already seated
friend when possible, otherwise in the first conflict-free seat in row-major
order.
"""

from typing import Dict, List, Optional, Sequence

from .grid import Cell, SeatGrid
from .roster import Person, RelationMap
from .vars import CHECK_OCCUPANT_FLAGS


class PlacementExhausted(Exception):
    """No seat satisfies the flagged constraint for this person; the attempt is dead."""

    def __init__(self, name: str) -> None:
        super().__init__(f"no conflict-free seat left for {name}")
        self.name = name


def constraint_weights(people: Sequence[Person], friendships: RelationMap, flagged: RelationMap) -> Dict[Person, int]:
    weights: Dict[Person, int] = {}
    for person in people:
        weights[person] = len(friendships.get(person.name, [])) + len(flagged.get(person.name, []))
    return weights


def placement_order(people: Sequence[Person], friendships: RelationMap, flagged: RelationMap) -> List[Person]:
    """Weighted phase (descending, stable on shuffled order) then the weight-0 remainder."""
    weights = constraint_weights(people, friendships, flagged)
    weighted = sorted((p for p in people if weights[p] > 0), key=lambda p: weights[p], reverse=True)
    placed = set(weighted)
    remainder = [p for p in people if p not in placed]
    return weighted + remainder


def has_flagged_conflict(
    grid: SeatGrid,
    person: Person,
    rc: Cell,
    flagged: RelationMap,
    check_occupant_flags: bool = CHECK_OCCUPANT_FLAGS,
) -> bool:
    """
    True if seating `person` at `rc` puts them next to someone on their flagged list.

    With check_occupant_flags, a neighbour who has flagged `person` also counts.
    """
    own = flagged.get(person.name, [])
    if not own and not check_occupant_flags:
        return False
    for _, occupant in grid.occupied_neighbours(rc):
        if occupant.name in own:
            return True
        if check_occupant_flags and person.name in flagged.get(occupant.name, []):
            return True
    return False


def _friend_adjacent_seat(
    grid: SeatGrid,
    person: Person,
    friendships: RelationMap,
    flagged: RelationMap,
    check_occupant_flags: bool,
) -> Optional[Cell]:
    for friend in friendships.get(person.name, []):
        friend_rc = grid.find(friend)
        if friend_rc is None:
            continue
        for nb in grid.neighbours(friend_rc):
            if grid.is_empty(nb) and not has_flagged_conflict(grid, person, nb, flagged, check_occupant_flags):
                return nb
    return None


def find_seat(
    grid: SeatGrid,
    person: Person,
    friendships: RelationMap,
    flagged: RelationMap,
    check_occupant_flags: bool = CHECK_OCCUPANT_FLAGS,
) -> Optional[Cell]:
    rc = _friend_adjacent_seat(grid, person, friendships, flagged, check_occupant_flags)
    if rc is not None:
        return rc
    for rc in grid.scan():
        if grid.is_empty(rc) and not has_flagged_conflict(grid, person, rc, flagged, check_occupant_flags):
            return rc
    return None


def seat_person(
    grid: SeatGrid,
    person: Person,
    friendships: RelationMap,
    flagged: RelationMap,
    check_occupant_flags: bool = CHECK_OCCUPANT_FLAGS,
) -> Cell:
    rc = find_seat(grid, person, friendships, flagged, check_occupant_flags)
    if rc is None:
        raise PlacementExhausted(person.name)
    grid.place(rc, person)
    return rc


def place_all(
    grid: SeatGrid,
    people: Sequence[Person],
    friendships: RelationMap,
    flagged: RelationMap,
    check_occupant_flags: bool = CHECK_OCCUPANT_FLAGS,
) -> Dict[str, Cell]:
    """Seat everyone on an empty grid; raises PlacementExhausted on the first person with no seat."""
    seats: Dict[str, Cell] = {}
    for person in placement_order(people, friendships, flagged):
        seats[person.name] = seat_person(grid, person, friendships, flagged, check_occupant_flags)
    return seats
