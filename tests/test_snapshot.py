import numpy as np
import pytest
from celestial_sim.bodies import BodyKind, Moon, Planet, Sun
from celestial_sim.errors import InvalidInputError
from celestial_sim.geometry import Orbit, Polar, degrees
from celestial_sim.grid import GridPoint, is_footprint, sphere
from celestial_sim.profiler import Profiler
from celestial_sim.simulation import BodyState, FootprintCache, Snapshot, SnapshotBuilder, body_footprint
from celestial_sim.units import RasterScale
from celestial_sim.universe import Universe


def _universe():
    u = Universe()
    u.add(Sun("sun", orbit=Orbit(Polar(0.1, 0.0, degrees(90)), period_theta=4), radius=0.003))
    u.add(Moon("moon", origin=(0.0, 0.0, 0.5), radius=0.0))
    u.add(Planet("ground", origin=(-1.0, -1.0, 0.0), length=2.0, width=2.0))
    return u


def test_snapshot_equality_is_by_time():
    a = Snapshot(3, (BodyState("s", (0.0, 0.0, 0.0)),))
    b = Snapshot(3, (BodyState("s", (1.0, 0.0, 0.0)),))
    assert a == b
    assert hash(a) == hash(b)
    assert a != Snapshot(4)


def test_snapshot_validation():
    with pytest.raises(InvalidInputError):
        Snapshot(-1)
    with pytest.raises(InvalidInputError):
        BodyState("s", (0.0, float("nan"), 0.0))


def test_body_footprint():
    scale = RasterScale()
    fp = body_footprint(0.002, (0.01, 0.0, 0.0), scale)
    assert is_footprint(fp)
    assert set(fp) == {p + GridPoint(10, 0, 0) for p in sphere(2)}
    # A radius below half a grid unit occupies the centre point only.
    assert body_footprint(0.0001, (0.0, 0.02, 0.0), scale) == (GridPoint(0, 20, 0),)


def test_build_frame():
    prof = Profiler()
    builder = SnapshotBuilder(_universe(), profiler=prof)
    frame = builder.build(1)

    assert frame.time == 1
    assert [s.id for s in frame.snapshot.suns] == ["sun"]
    assert [m.id for m in frame.snapshot.moons] == ["moon"]
    assert np.allclose(frame.snapshot.sun("sun").position, [0.0, 0.1, 0.0], atol=1e-12)
    assert np.allclose(frame.snapshot.moon("moon").position, [0.0, 0.0, 0.5])
    with pytest.raises(KeyError):
        frame.snapshot.sun("ground")

    (sun_id, sun_fp), = frame.sun_footprints
    assert sun_id == "sun"
    assert set(sun_fp) == {p + GridPoint(0, 100, 0) for p in sphere(3)}
    assert frame.moon_footprints == (("moon", (GridPoint(0, 0, 500),)),)
    assert {"positions", "rasterize"} <= set(prof.stats.summary())


def test_footprints_are_cached():
    u = _universe()
    builder = SnapshotBuilder(u)
    first = builder.footprint(u.suns[0], 2)
    second = builder.footprint(u.suns[0], 2)
    assert first is second
    assert builder.cache.hits == 1 and builder.cache.misses == 1
    assert (BodyKind.SUN, "sun", 2) in builder.cache.entries


def test_cache_eviction():
    cache = FootprintCache()
    for t in range(4):
        cache.put((BodyKind.MOON, "m", t), ())
    assert cache.evict_before(2) == 2
    assert sorted(k[2] for k in cache.entries) == [2, 3]
    assert cache.get((BodyKind.MOON, "m", 0)) is None
    cache.clear()
    assert len(cache) == 0
