from __future__ import annotations
from typing import Iterator, Optional

import numpy as np

from .roster import Person

Cell = tuple[int, int]  # (r, c)

# up, down, left, right; order matters for friend-adjacent seat search
DIRS: tuple[Cell, ...] = ((-1, 0), (1, 0), (0, -1), (0, 1))


def is_adjacent(a: Cell, b: Cell) -> bool:
    return abs(a[0] - b[0]) + abs(a[1] - b[1]) == 1


class SeatGrid:
    """rows x cols seats, each empty (None) or holding one Person."""

    def __init__(self, rows: int, cols: int) -> None:
        self.rows = rows
        self.cols = cols
        self.cells = np.empty((rows, cols), dtype=object)

    def reset(self) -> None:
        self.cells = np.empty((self.rows, self.cols), dtype=object)

    def in_bounds(self, r: int, c: int) -> bool:
        return 0 <= r < self.rows and 0 <= c < self.cols

    def get(self, rc: Cell) -> Optional[Person]:
        return self.cells[rc]

    def is_empty(self, rc: Cell) -> bool:
        return self.cells[rc] is None

    def place(self, rc: Cell, person: Person) -> None:
        if self.cells[rc] is not None:
            raise ValueError(f"seat {rc} already taken by {self.cells[rc].name}")
        self.cells[rc] = person

    def neighbours(self, rc: Cell) -> Iterator[Cell]:
        """In-bounds orthogonal neighbours in up, down, left, right order."""
        r, c = rc
        for dr, dc in DIRS:
            nr, nc = r + dr, c + dc
            if self.in_bounds(nr, nc):
                yield (nr, nc)

    def occupied_neighbours(self, rc: Cell) -> Iterator[tuple[Cell, Person]]:
        for nb in self.neighbours(rc):
            occupant = self.cells[nb]
            if occupant is not None:
                yield nb, occupant

    def scan(self) -> Iterator[Cell]:
        """Row-major walk over every seat."""
        for r in range(self.rows):
            for c in range(self.cols):
                yield (r, c)

    def occupied(self) -> Iterator[tuple[Cell, Person]]:
        for rc in self.scan():
            person = self.cells[rc]
            if person is not None:
                yield rc, person

    def find(self, name: str) -> Optional[Cell]:
        """Seat of the person called `name`, or None if not seated (or unknown)."""
        for rc, person in self.occupied():
            if person.name == name:
                return rc
        return None

    def occupancy_mask(self) -> np.ndarray:
        mask = np.zeros((self.rows, self.cols), dtype=np.uint8)
        for (r, c), _ in self.occupied():
            mask[r, c] = 1
        return mask

    def empty_count(self) -> int:
        return int(self.rows * self.cols - self.occupancy_mask().sum())

    def copy(self) -> "SeatGrid":
        dup = SeatGrid(self.rows, self.cols)
        dup.cells = self.cells.copy()
        return dup
