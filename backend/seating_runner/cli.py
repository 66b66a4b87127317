#!/usr/bin/env python3
"""
Terminal runner for the seating planner.

Loads a roster (JSON file or the built-in demo class), runs the placement
engine, then prints the grid and the violation audit. Optionally saves a PNG
of the final grid.
"""

from __future__ import annotations

import argparse
import sys
from pathlib import Path
from typing import List, Optional, Sequence

from backend.src.seating.auditor import audit_arrangement
from backend.src.seating.engine import SeatingEngine
from backend.src.seating.grid import Cell
from backend.src.seating.render import format_grid, save_grid_image
from backend.src.seating.roster import RosterError, demo_roster, load_roster, validate_roster

FAILURE_HINT = "Unable to find a valid arrangement after multiple attempts. Try relaxing some constraints."


def parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Seat people on a grid around friend and flagged pairs.")
    parser.add_argument("--roster", type=Path, default=None, help="JSON roster file (default: built-in demo class)")
    parser.add_argument("--rows", type=int, default=None, help="Grid rows (overrides roster)")
    parser.add_argument("--cols", type=int, default=None, help="Grid columns (overrides roster)")
    parser.add_argument("--seed", type=int, default=None, help="Random seed for a reproducible run")
    parser.add_argument("--max-attempts", type=int, default=None, help="Attempt budget (overrides roster)")
    parser.add_argument(
        "--one-sided-flags",
        action="store_true",
        help="Only check the seated person's own flagged list when placing",
    )
    parser.add_argument("--image", type=Path, default=None, help="Save the final grid as a PNG")
    parser.add_argument("--quiet", action="store_true", help="Suppress engine progress messages")
    return parser.parse_args(argv)


def _violation_cells(grid, pairs) -> List[Cell]:
    cells: List[Cell] = []
    for a, b in pairs:
        for name in (a, b):
            rc = grid.find(name)
            if rc is not None and rc not in cells:
                cells.append(rc)
    return cells


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = parse_args(argv)
    try:
        roster = load_roster(args.roster) if args.roster else demo_roster()
        if args.rows is not None:
            roster.rows = args.rows
        if args.cols is not None:
            roster.cols = args.cols
        if args.seed is not None:
            roster.seed = args.seed
        if args.max_attempts is not None:
            roster.max_attempts = args.max_attempts
        validate_roster(roster)
    except (RosterError, OSError) as exc:
        print(f"Invalid roster: {exc}", file=sys.stderr)
        return 2

    print("Generating seating arrangement...")
    engine = SeatingEngine.from_roster(
        roster,
        check_occupant_flags=not args.one_sided_flags,
        log_fn=None if args.quiet else print,
    )
    result = engine.generate()
    if not result.success:
        print(FAILURE_HINT)
        return 1

    print()
    print(format_grid(result.grid))
    print()
    report = audit_arrangement(result.grid, roster.people, roster.friendships, roster.flagged, log_fn=print)
    if args.image:
        path = save_grid_image(result.grid, args.image, highlight=_violation_cells(result.grid, report.flagged_pairs))
        print(f"Saved grid image to {path}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
