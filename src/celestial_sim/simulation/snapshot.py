# MIT License (see LICENSE)
"""
Snapshots of the universe at one time index.

A Snapshot is the persisted record of a step: the continuous position of
every sun and moon at time t. It is created once by SnapshotBuilder.build()
and never mutated afterwards.

Footprints are only needed while the step's collision test runs. The
builder hands them out next to the snapshot in a Frame and keeps them in a
FootprintCache keyed by (kind, body id, time); the timeline evicts entries
of elapsed steps.

Rasterization of a body:
    centre    = scale.raster_point(position)
    r         = scale.raster(radius)
    footprint = sphere(r, centre, sorted) if r > 0 else (centre,)
"""
from __future__ import annotations
import logging
from dataclasses import dataclass, field
from typing import Iterable

import numpy as np

from ..bodies import BodyKind, MovingBody
from ..errors import InvalidInputError
from ..grid.point import Footprint
from ..grid.sphere import sphere
from ..profiler import Profiler
from ..units import DEFAULT_SCALE, RasterScale
from ..universe import Universe
from ..util import require_int, vec3

logger = logging.getLogger(__name__)


@dataclass(frozen=True, eq=False)
class BodyState:
    """
    Position of one body at one time index.

    Attributes:
        id: The body's id.
        position: Centre of the body [x, y, z] in metres (read-only array).
    """
    id: str
    position: np.ndarray

    def __post_init__(self) -> None:
        object.__setattr__(self, "position", vec3(self.position, f"position of '{self.id}'"))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, BodyState):
            return NotImplemented
        return self.id == other.id and bool(np.array_equal(self.position, other.position))

    def __hash__(self) -> int:
        return hash((self.id, self.position.tobytes()))


@dataclass(frozen=True, eq=False)
class Snapshot:
    """
    Immutable record of all moving bodies at one time index.

    Two snapshots compare equal iff their time indices are equal.

    Attributes:
        time: Non-negative whole-second time index.
        suns: Sun states in universe order.
        moons: Moon states in universe order.
    """
    time: int
    suns: tuple[BodyState, ...] = ()
    moons: tuple[BodyState, ...] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "time", require_int(self.time, "time", minimum=0))
        object.__setattr__(self, "suns", tuple(self.suns))
        object.__setattr__(self, "moons", tuple(self.moons))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Snapshot):
            return NotImplemented
        return self.time == other.time

    def __hash__(self) -> int:
        return hash(self.time)

    def sun(self, body_id: str) -> BodyState:
        """State of the sun with the given id."""
        return _state(self.suns, body_id, "sun", self.time)

    def moon(self, body_id: str) -> BodyState:
        """State of the moon with the given id."""
        return _state(self.moons, body_id, "moon", self.time)


def _state(states: Iterable[BodyState], body_id: str, kind: str, time: int) -> BodyState:
    for s in states:
        if s.id == body_id:
            return s
    raise KeyError(f"No {kind} '{body_id}' in snapshot {time}")


@dataclass(frozen=True)
class Frame:
    """
    A snapshot together with its transient footprints.

    Attributes:
        snapshot: The immutable record for this step.
        sun_footprints: Footprint per sun, in universe order.
        moon_footprints: Footprint per moon, in universe order.
    """
    snapshot: Snapshot
    sun_footprints: tuple[tuple[str, Footprint], ...]
    moon_footprints: tuple[tuple[str, Footprint], ...]

    @property
    def time(self) -> int:
        return self.snapshot.time


def body_footprint(radius: float, position, scale: RasterScale = DEFAULT_SCALE) -> Footprint:
    """
    Rasterize a spherical body into a sorted footprint.

    Args:
        radius: Body radius in metres.
        position: Centre of the body in metres.
        scale: Conversion between metres and grid units.

    Returns:
        The sphere shell around the rasterized centre. A body whose radius
        rasterizes to 0 occupies its centre point only.
    """
    centre = scale.raster_point(position)
    r = scale.raster(radius)
    if r < 0:
        raise InvalidInputError(f"Body radius must be non-negative, got {radius}")
    if r == 0:
        return (centre,)
    return sphere(r, centre=centre, sorted_output=True)


CacheKey = tuple[BodyKind, str, int]


@dataclass
class FootprintCache:
    """
    Footprints keyed by (kind, body id, time index).

    Footprints are only needed for the step being tested, so entries older
    than the current step are dropped with evict_before().

    build() rasterizes every body once per step, so stepping alone only
    records misses. Hits come from calling SnapshotBuilder.footprint() again
    for a step that is still cached, e.g. to inspect the latest step after
    a collision.
    """
    entries: dict[CacheKey, Footprint] = field(default_factory=dict)
    hits: int = 0
    misses: int = 0

    def get(self, key: CacheKey) -> Footprint | None:
        footprint = self.entries.get(key)
        if footprint is None:
            self.misses += 1
        else:
            self.hits += 1
        return footprint

    def put(self, key: CacheKey, footprint: Footprint) -> None:
        self.entries[key] = footprint

    def evict_before(self, time: int) -> int:
        """Drop every entry with a time index below time; return the count."""
        stale = [k for k in self.entries if k[2] < time]
        for k in stale:
            del self.entries[k]
        if stale:
            logger.debug("Evicted %d cached footprints before t=%d", len(stale), time)
        return len(stale)

    def clear(self) -> None:
        self.entries.clear()

    def __len__(self) -> int:
        return len(self.entries)


class SnapshotBuilder:
    """
    Produces snapshots and footprints for a universe.

    Example:
        builder = SnapshotBuilder(universe)
        frame = builder.build(0)
        frame.snapshot.suns  # positions at t=0
    """

    def __init__(
        self,
        universe: Universe,
        scale: RasterScale = DEFAULT_SCALE,
        profiler: Profiler | None = None,
    ) -> None:
        """
        Args:
            universe: The bodies to place.
            scale: Conversion used to rasterize positions and radii.
            profiler: Optional profiler receiving "positions" and
                      "rasterize" timings.
        """
        self.universe = universe
        self.scale = scale
        self.profiler = profiler
        self.cache = FootprintCache()

    def footprint(self, body: MovingBody, time: int, position=None) -> Footprint:
        """Footprint of a sun or moon at a time index, served from the cache."""
        key = (body.kind, body.id, time)
        cached = self.cache.get(key)
        if cached is not None:
            return cached
        if position is None:
            position = body.position(time)
        result = body_footprint(body.radius, position, self.scale)
        self.cache.put(key, result)
        return result

    def build(self, time: int) -> Frame:
        """
        Create the snapshot and footprints for a time index.

        Args:
            time: Non-negative time index.

        Returns:
            The frame for this step. Planets are not part of it.
        """
        time = require_int(time, "time", minimum=0)
        prof = self.profiler or Profiler.disabled()

        with prof.section("positions"):
            suns = tuple(BodyState(s.id, s.position(time)) for s in self.universe.suns)
            moons = tuple(BodyState(m.id, m.position(time)) for m in self.universe.moons)

        with prof.section("rasterize"):
            sun_fp = tuple(
                (body.id, self.footprint(body, time, state.position))
                for body, state in zip(self.universe.suns, suns)
            )
            moon_fp = tuple(
                (body.id, self.footprint(body, time, state.position))
                for body, state in zip(self.universe.moons, moons)
            )

        return Frame(Snapshot(time, suns, moons), sun_fp, moon_fp)
