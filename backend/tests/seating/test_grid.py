import pytest
import numpy as np

from backend.src.seating.grid import SeatGrid, DIRS, is_adjacent
from backend.src.seating.roster import Person


def test_neighbours_order_and_bounds():
    """Neighbours come back up, down, left, right and never leave the grid."""
    print("\n" + "=" * 60)
    print("INPUT")
    print("=" * 60)
    print("3x3 grid, centre / corner / edge seats")

    grid = SeatGrid(3, 3)
    test_cases = [
        ((1, 1), [(0, 1), (2, 1), (1, 0), (1, 2)]),
        ((0, 0), [(1, 0), (0, 1)]),
        ((2, 2), [(1, 2), (2, 1)]),
        ((0, 1), [(1, 1), (0, 0), (0, 2)]),
    ]

    print("\n" + "=" * 60)
    print("OUTPUT")
    print("=" * 60)
    failures = []
    for rc, expected in test_cases:
        result = list(grid.neighbours(rc))
        print(f"  {rc} -> {result}")
        if result != expected:
            failures.append(f"{rc}: expected {expected}, got {result}")

    print("\n" + "=" * 60)
    print("VERIFICATION")
    print("=" * 60)
    if failures:
        pytest.fail(f"Test had {len(failures)} failure(s): {'; '.join(failures)}")
    print("  ✓ Neighbour order correct")


def test_dirs_are_orthogonal_unit_steps():
    assert DIRS == ((-1, 0), (1, 0), (0, -1), (0, 1))


def test_place_find_and_reset():
    grid = SeatGrid(2, 3)
    alice, bob = Person("Alice"), Person("Bob")
    grid.place((0, 2), alice)
    grid.place((1, 0), bob)

    assert grid.find("Alice") == (0, 2)
    assert grid.find("Bob") == (1, 0)
    assert grid.find("Nobody") is None
    assert grid.get((0, 2)) is alice
    assert grid.is_empty((0, 0))
    assert grid.empty_count() == 4
    assert np.array_equal(grid.occupancy_mask(), np.array([[0, 0, 1], [1, 0, 0]], dtype=np.uint8))

    with pytest.raises(ValueError):
        grid.place((0, 2), bob)

    grid.reset()
    assert grid.empty_count() == 6
    assert list(grid.occupied()) == []


def test_scan_is_row_major():
    grid = SeatGrid(2, 2)
    assert list(grid.scan()) == [(0, 0), (0, 1), (1, 0), (1, 1)]


def test_occupied_neighbours_skip_empty_seats():
    grid = SeatGrid(3, 3)
    grid.place((0, 1), Person("Up"))
    grid.place((1, 2), Person("Right"))
    grid.place((0, 0), Person("Diagonal"))
    names = [p.name for _, p in grid.occupied_neighbours((1, 1))]
    assert names == ["Up", "Right"]


def test_copy_is_independent():
    grid = SeatGrid(1, 2)
    grid.place((0, 0), Person("A"))
    dup = grid.copy()
    dup.place((0, 1), Person("B"))
    assert grid.is_empty((0, 1))
    assert dup.find("A") == (0, 0)


def test_is_adjacent():
    assert is_adjacent((0, 0), (0, 1))
    assert is_adjacent((2, 1), (1, 1))
    assert not is_adjacent((0, 0), (1, 1))
    assert not is_adjacent((0, 0), (0, 2))
    assert not is_adjacent((1, 1), (1, 1))
