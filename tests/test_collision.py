import pytest
from celestial_sim.errors import Collision
from celestial_sim.grid import GridPoint, sphere
from celestial_sim.profiler import Profiler
from celestial_sim.simulation import CollisionDetector, Frame, Snapshot, pair_count, pair_schedule


def _fp(x, y=0, z=0, r=2):
    return sphere(r, centre=GridPoint(x, y, z), sorted_output=True)


def _frame(suns, moons=()):
    """Frame with footprints only; the detector does not look at positions."""
    return Frame(
        Snapshot(0),
        tuple((f"sun{i}", fp) for i, fp in enumerate(suns)),
        tuple((f"moon{i}", fp) for i, fp in enumerate(moons)),
    )


def test_schedule_order():
    assert list(pair_schedule(2, 2)) == [
        (("sun", 0), ("sun", 1)),
        (("sun", 0), ("moon", 0)),
        (("sun", 0), ("moon", 1)),
        (("sun", 1), ("moon", 0)),
        (("sun", 1), ("moon", 1)),
        (("moon", 0), ("moon", 1)),
    ]


@pytest.mark.parametrize("suns,moons", [(0, 0), (1, 0), (0, 1), (2, 0), (3, 4), (5, 1), (0, 6)])
def test_schedule_is_minimal(suns, moons):
    """Every unordered pair exactly once, never a body against itself."""
    pairs = list(pair_schedule(suns, moons))
    n = suns + moons
    assert len(pairs) == pair_count(suns, moons) == n * (n - 1) // 2
    keys = [frozenset(p) for p in pairs]
    assert len(set(keys)) == len(keys)
    assert all(a != b for a, b in pairs)


def test_no_collision_counts_tests():
    prof = Profiler()
    detector = CollisionDetector(prof)
    frame = _frame([_fp(0), _fp(100)], [_fp(200), _fp(300)])
    assert detector.check(frame) == 6
    assert detector.check(frame) == 6
    assert detector.tests_performed == 12
    assert prof.stats.counters["pair_tests"] == 12
    assert prof.stats.summary()["collisions"]["n"] == 2


def test_collision_stops_at_first_overlap():
    """sun0 and sun1 overlap, so the first test raises and no more are run."""
    detector = CollisionDetector()
    frame = _frame([_fp(0), _fp(1), _fp(2)], [_fp(1)])
    with pytest.raises(Collision, match="sun0"):
        detector.check(frame)
    assert detector.tests_performed == 1


def test_moon_against_moon():
    detector = CollisionDetector()
    frame = _frame([_fp(-100)], [_fp(50), _fp(100), _fp(102)])
    with pytest.raises(Collision, match="moon1"):
        detector.check(frame)
    assert detector.tests_performed == pair_count(1, 3)


def test_touching_shells_collide():
    """Shells of radius 2 whose centres are 4 apart share their equator tip."""
    detector = CollisionDetector()
    with pytest.raises(Collision):
        detector.check(_frame([_fp(0), _fp(4)]))
    assert detector.check(_frame([_fp(0), _fp(5)])) == 1
