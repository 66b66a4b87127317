from __future__ import annotations
from dataclasses import dataclass, field
from typing import Callable, Dict, List, Optional, Sequence
import random

from .grid import Cell, SeatGrid
from .placer import PlacementExhausted, place_all
from .roster import Person, RelationMap, Roster
from .vars import CHECK_OCCUPANT_FLAGS, MAX_ATTEMPTS, RANDOM_SEED

LogFn = Callable[[str], None]

# Upper bound (exclusive) for the post-success diagnostic draw
DIAGNOSTIC_DRAW_LIMIT = 2**31 - 1


class AttemptsExhausted(RuntimeError):
    def __init__(self, attempts: int) -> None:
        super().__init__(f"no valid arrangement after {attempts} attempts")
        self.attempts = attempts


@dataclass
class PlacementConfig:
    max_attempts: int = MAX_ATTEMPTS
    random_seed: int | None = RANDOM_SEED
    check_occupant_flags: bool = CHECK_OCCUPANT_FLAGS
    report_diagnostic_draw: bool = True


@dataclass
class ArrangementResult:
    success: bool
    attempt: int | None  # 1-based index of the winning attempt
    attempts_made: int
    grid: SeatGrid
    order: List[Person] = field(default_factory=list)
    seats: Dict[str, Cell] = field(default_factory=dict)
    seed: int | None = None
    diagnostic_draw: int | None = None  # drawn after success; not the seed of this arrangement


def shuffle_people(people: List[Person], rng: random.Random) -> None:
    """In-place uniform shuffle driven by the engine's rng."""
    rng.shuffle(people)


class SeatingEngine:
    """
    Bounded-retry greedy seating.

    Each attempt reshuffles a working copy of the people, clears the grid and
    runs the greedy placer. One rng drives the whole run, so attempts see
    different shuffles while a fixed seed still reproduces the full run.
    """

    def __init__(
        self,
        rows: int,
        cols: int,
        people: Sequence[Person],
        friendships: RelationMap,
        flagged: RelationMap,
        cfg: PlacementConfig = PlacementConfig(),
        *,
        log_fn: Optional[LogFn] = print,
    ) -> None:
        if cfg.max_attempts < 1:
            raise ValueError(f"max_attempts must be at least 1, got {cfg.max_attempts}")
        self.rows = rows
        self.cols = cols
        self.people: List[Person] = list(people)
        self.friendships = friendships
        self.flagged = flagged
        self.cfg = cfg
        self.log_fn = log_fn
        self.rng = random.Random(cfg.random_seed)
        self.grid = SeatGrid(rows, cols)

    @classmethod
    def from_roster(
        cls,
        roster: Roster,
        *,
        check_occupant_flags: bool = CHECK_OCCUPANT_FLAGS,
        log_fn: Optional[LogFn] = print,
    ) -> "SeatingEngine":
        cfg = PlacementConfig(
            max_attempts=roster.max_attempts,
            random_seed=roster.seed,
            check_occupant_flags=check_occupant_flags,
        )
        return cls(roster.rows, roster.cols, roster.people, roster.friendships, roster.flagged, cfg, log_fn=log_fn)

    def _log(self, msg: str) -> None:
        if self.log_fn is not None:
            self.log_fn(msg)

    def try_attempt(self) -> Optional[Dict[str, Cell]]:
        """One shuffle-and-place cycle; returns name -> seat, or None if someone could not be seated."""
        shuffle_people(self.people, self.rng)
        self.grid.reset()
        try:
            return place_all(
                self.grid,
                self.people,
                self.friendships,
                self.flagged,
                check_occupant_flags=self.cfg.check_occupant_flags,
            )
        except PlacementExhausted:
            return None

    def generate(self) -> ArrangementResult:
        for attempt in range(1, self.cfg.max_attempts + 1):
            seats = self.try_attempt()
            if seats is None:
                continue
            self._log(f"Found valid arrangement on attempt {attempt}")
            if self.cfg.random_seed is not None:
                self._log(f"Input seed: {self.cfg.random_seed}")
            draw = None
            if self.cfg.report_diagnostic_draw:
                draw = self.rng.randrange(DIAGNOSTIC_DRAW_LIMIT)
                self._log(f"Random draw after success (diagnostic only, not a reproducible seed): {draw}")
            return ArrangementResult(
                success=True,
                attempt=attempt,
                attempts_made=attempt,
                grid=self.grid.copy(),
                order=list(self.people),
                seats=seats,
                seed=self.cfg.random_seed,
                diagnostic_draw=draw,
            )
        self._log(f"No valid arrangement after {self.cfg.max_attempts} attempts")
        self.grid.reset()
        return ArrangementResult(
            success=False,
            attempt=None,
            attempts_made=self.cfg.max_attempts,
            grid=self.grid.copy(),
            seed=self.cfg.random_seed,
        )

    def require_arrangement(self) -> ArrangementResult:
        result = self.generate()
        if not result.success:
            raise AttemptsExhausted(result.attempts_made)
        return result
