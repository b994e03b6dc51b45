# MIT License (see LICENSE)
"""
Per-step collision detection on rasterized footprints.

Every unordered pair of moving bodies is tested exactly once:
  1. Each sun against the suns after it, then against every moon.
  2. Each moon against the moons after it.

For S suns and M moons that is C(S, 2) + S*M + C(M, 2) tests, the minimum
that covers every pair and never tests a body against itself. Each test is
a linear merge over two sorted footprints (grid.point.intersects).

Planets are immobile ground and are not part of the schedule.

The first overlap raises Collision immediately; no further pairs are tested.
"""
from __future__ import annotations
import logging
from typing import Iterator, Sequence

from ..errors import Collision
from ..grid.point import Footprint, intersects
from ..profiler import Profiler
from .snapshot import Frame

logger = logging.getLogger(__name__)

# ("sun" | "moon", index) pairs identifying one side of a test.
Side = tuple[str, int]


def pair_count(suns: int, moons: int) -> int:
    """Number of tests pair_schedule() yields for the given body counts."""
    return suns * (suns - 1) // 2 + suns * moons + moons * (moons - 1) // 2


def pair_schedule(suns: int, moons: int) -> Iterator[tuple[Side, Side]]:
    """
    Yield the body pairs to test, in detection order.

    Args:
        suns: Number of suns.
        moons: Number of moons.

    Yields:
        ((kind, index), (kind, index)) tuples.
    """
    for i in range(suns):
        for j in range(i + 1, suns):
            yield ("sun", i), ("sun", j)
        for k in range(moons):
            yield ("sun", i), ("moon", k)
    for i in range(moons):
        for j in range(i + 1, moons):
            yield ("moon", i), ("moon", j)


class CollisionDetector:
    """
    Runs the pair schedule over a frame's footprints.

    Attributes:
        tests_performed: Total footprint tests run by this detector.
    """

    def __init__(self, profiler: Profiler | None = None) -> None:
        self.profiler = profiler or Profiler.disabled()
        self.tests_performed = 0

    def check(self, frame: Frame) -> int:
        """
        Test all footprints of a frame against each other.

        Args:
            frame: The step to test.

        Returns:
            The number of tests performed (only when there is no collision).

        Raises:
            Collision: On the first pair of overlapping footprints.
        """
        groups: dict[str, Sequence[tuple[str, Footprint]]] = {
            "sun": frame.sun_footprints,
            "moon": frame.moon_footprints,
        }
        tests = 0
        with self.profiler.section("collisions"):
            for (kind_a, a), (kind_b, b) in pair_schedule(len(frame.sun_footprints), len(frame.moon_footprints)):
                id_a, fp_a = groups[kind_a][a]
                id_b, fp_b = groups[kind_b][b]
                tests += 1
                if intersects(fp_a, fp_b):
                    self._record(tests)
                    logger.warning(
                        "Collision at t=%d between %s '%s' and %s '%s'",
                        frame.time, kind_a, id_a, kind_b, id_b,
                    )
                    raise Collision(
                        f"{kind_a} '{id_a}' and {kind_b} '{id_b}' collided at t={frame.time}"
                    )
        self._record(tests)
        return tests

    def _record(self, tests: int) -> None:
        self.tests_performed += tests
        self.profiler.count("pair_tests", tests)
