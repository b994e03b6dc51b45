# MIT License (see LICENSE)
"""
The timeline: the history of a simulation run.

The Timeline owns the append-only list of snapshots and the sticky collision
flag. It drives the simulation one whole second at a time:
    1. Build the frame for the next time index (positions + footprints).
    2. Append the frame's snapshot to the history.
    3. Run the collision detector on the frame's footprints.

States:
    FRESH    - no snapshots yet; the first advance() creates t = 0.
    RUNNING  - at least one snapshot, no collision.
    COLLIDED - terminal; every further advance() is a precondition
               violation.

Invariant: the snapshot at list position k has time index k. Stepping
preserves it by construction; restore() checks it for persisted data.
"""
from __future__ import annotations
import logging
from enum import Enum
from typing import Iterable

from ..errors import Collision, InvalidInputError, TimelineCollidedError
from ..profiler import Profiler
from ..units import DEFAULT_SCALE, RasterScale
from ..universe import Universe
from ..util import require_int
from .collision import CollisionDetector
from .snapshot import Snapshot, SnapshotBuilder

logger = logging.getLogger(__name__)


class TimelineState(str, Enum):
    FRESH = "fresh"
    RUNNING = "running"
    COLLIDED = "collided"


class Timeline:
    """
    Append-only snapshot history of one simulation run.

    Example:
        timeline = Timeline(universe)
        try:
            timeline.advance(42)
        except Collision:
            # timeline.collided is now True and stays so
            ...
        for snapshot in timeline.snapshots:
            print(snapshot.time, snapshot.suns)
    """

    def __init__(
        self,
        universe: Universe,
        scale: RasterScale = DEFAULT_SCALE,
        profiler: Profiler | None = None,
    ) -> None:
        """
        Args:
            universe: Initial configuration of the bodies. The timeline keeps
                      a frozen copy; later changes to the caller's universe
                      do not reach it.
            scale: Grid resolution used to rasterize bodies.
            profiler: Optional Profiler for per-phase timings.
        """
        self.universe = universe.frozen()
        self.scale = scale
        self.profiler = profiler or Profiler.disabled()
        self._builder = SnapshotBuilder(self.universe, scale, self.profiler)
        self._detector = CollisionDetector(self.profiler)
        self._snapshots: list[Snapshot] = []
        self._collided = False

    @classmethod
    def restore(
        cls,
        universe: Universe,
        snapshots: Iterable[Snapshot],
        collided: bool = False,
        scale: RasterScale = DEFAULT_SCALE,
        profiler: Profiler | None = None,
    ) -> Timeline:
        """
        Rebuild a timeline from persisted snapshots.

        Args:
            universe: The universe the snapshots were recorded for.
            snapshots: History in order; position k must hold time index k.
            collided: The persisted collision flag.

        Raises:
            InvalidInputError: If the time indices are not the contiguous run
                               0..N-1, a snapshot's body ids do not match
                               the universe, or a collided timeline has no
                               snapshots.
        """
        timeline = cls(universe, scale=scale, profiler=profiler)
        sun_ids = timeline.universe.sun_ids
        moon_ids = timeline.universe.moon_ids
        for snapshot in snapshots:
            expected = len(timeline._snapshots)
            if snapshot.time != expected:
                raise InvalidInputError(
                    f"The time {snapshot.time} of the state does not have the expected value of {expected}."
                )
            if tuple(s.id for s in snapshot.suns) != sun_ids or tuple(m.id for m in snapshot.moons) != moon_ids:
                raise InvalidInputError(f"The bodies of state {snapshot.time} do not match the universe.")
            timeline._snapshots.append(snapshot)

        if collided and not timeline._snapshots:
            raise InvalidInputError("A collided timeline must contain at least one state.")
        timeline._collided = bool(collided)
        logger.info("Restored timeline with %d states (collided=%s)", len(timeline), timeline._collided)
        return timeline

    # ------------------------------------------------------------------
    # Read access
    # ------------------------------------------------------------------

    @property
    def snapshots(self) -> tuple[Snapshot, ...]:
        """The history, ordered by time index."""
        return tuple(self._snapshots)

    @property
    def collided(self) -> bool:
        """The sticky collision flag."""
        return self._collided

    @property
    def state(self) -> TimelineState:
        if self._collided:
            return TimelineState.COLLIDED
        if not self._snapshots:
            return TimelineState.FRESH
        return TimelineState.RUNNING

    @property
    def time(self) -> int | None:
        """Time index of the latest snapshot, None when fresh."""
        return self._snapshots[-1].time if self._snapshots else None

    @property
    def builder(self) -> SnapshotBuilder:
        return self._builder

    @property
    def detector(self) -> CollisionDetector:
        return self._detector

    def __len__(self) -> int:
        return len(self._snapshots)

    def __getitem__(self, index: int) -> Snapshot:
        return self._snapshots[index]

    # ------------------------------------------------------------------
    # Stepping
    # ------------------------------------------------------------------

    def advance(self, seconds: int) -> None:
        """
        Run the simulation for a number of seconds, one step per second.

        The very first call also creates the snapshot for t = 0, so a fresh
        timeline holds seconds + 1 snapshots afterwards.

        Args:
            seconds: Non-negative number of additional steps.

        Raises:
            InvalidInputError: If seconds is negative or not an integer.
            TimelineCollidedError: If the timeline already had a collision.
            Collision: When two bodies overlap. The snapshot of that step is
                       kept and no further steps are run.
        """
        seconds = require_int(seconds, "seconds", minimum=0)
        if self._collided:
            raise TimelineCollidedError(
                f"The timeline collided at t={self.time}; it cannot be advanced."
            )

        logger.info("Advancing %d seconds from t=%s", seconds, self.time)
        if not self._snapshots:
            self._step()
        for _ in range(seconds):
            self._step()

    def _step(self) -> None:
        """Append the next snapshot and test it for collisions."""
        time = len(self._snapshots)
        frame = self._builder.build(time)
        self._snapshots.append(frame.snapshot)
        self.profiler.count("steps")
        logger.debug("Appended state t=%d", time)

        try:
            self._detector.check(frame)
        except Collision:
            self._collided = True
            raise
        finally:
            self._builder.cache.evict_before(time)
