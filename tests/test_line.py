import itertools

import pytest
from celestial_sim.errors import InvalidInputError
from celestial_sim.grid import GridPoint, line, is_footprint


def _endpoints():
    """Deltas covering every sign combination and driving axis."""
    base = GridPoint(2, -3, 5)
    for dx, dy, dz in itertools.product((-7, -2, 0, 3, 6), (-5, 0, 1, 4), (-4, 0, 2, 7)):
        yield base, GridPoint(base.x + dx, base.y + dy, base.z + dz)


def test_known_example():
    expected = (
        GridPoint(0, 0, 0),
        GridPoint(1, 0, 0),
        GridPoint(2, 0, 0),
        GridPoint(3, 1, 1),
        GridPoint(4, 1, 1),
    )
    assert line((0, 0, 0), (4, 1, 1)) == expected
    assert line((4, 1, 1), (0, 0, 0)) == expected[::-1]


def test_single_point():
    a = GridPoint(7, -1, 3)
    assert line(a, a) == (a,)


def test_reverse_symmetry():
    """line(a, b) reversed equals line(b, a) for every sign combination."""
    for a, b in _endpoints():
        assert line(a, b)[::-1] == line(b, a), (a, b)


def test_walk_properties():
    """Endpoints included, max-delta + 1 points, unit steps, no duplicates."""
    for a, b in _endpoints():
        pts = line(a, b)
        steps = max(abs(b.x - a.x), abs(b.y - a.y), abs(b.z - a.z))
        assert len(pts) == steps + 1
        assert pts[0] == a and pts[-1] == b
        assert len(set(pts)) == len(pts)
        for p, q in zip(pts, pts[1:]):
            assert max(abs(q.x - p.x), abs(q.y - p.y), abs(q.z - p.z)) == 1


def test_axis_aligned():
    assert line((0, 0, 0), (0, 0, 3)) == tuple(GridPoint(0, 0, z) for z in range(4))
    assert line((0, 2, 0), (0, -1, 0)) == tuple(GridPoint(0, y, 0) for y in (2, 1, 0, -1))


def test_sorted_output():
    pts = line((5, 3, 0), (-2, -1, 4), sorted_output=True)
    assert is_footprint(pts)
    assert set(pts) == set(line((5, 3, 0), (-2, -1, 4)))


def test_rejects_invalid_endpoints():
    with pytest.raises(InvalidInputError):
        line((0.5, 0, 0), (1, 1, 1))
    with pytest.raises(InvalidInputError):
        line((0, 0), (1, 1, 1))
