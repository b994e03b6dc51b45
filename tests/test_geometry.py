import math

import numpy as np
import pytest
from celestial_sim.errors import InvalidInputError
from celestial_sim.geometry import Orbit, Polar, cartesian_to_polar, degrees, rotation_angle


def test_degrees():
    assert degrees(180) == pytest.approx(math.pi)
    assert degrees(90) == pytest.approx(math.pi / 2)
    assert degrees(0) == 0.0


def test_polar_to_cartesian_axes():
    assert np.allclose(Polar(2.0, 0.0, degrees(90)).to_cartesian(), [2.0, 0.0, 0.0])
    assert np.allclose(Polar(2.0, degrees(90), degrees(90)).to_cartesian(), [0.0, 2.0, 0.0])
    assert np.allclose(Polar(2.0).to_cartesian(), [0.0, 0.0, 2.0])


def test_cartesian_to_polar_round_trip():
    for p in ([1.0, 2.0, 3.0], [-0.5, 0.25, -4.0], [0.0, -3.0, 0.0]):
        polar = cartesian_to_polar(p)
        assert polar.r == pytest.approx(np.linalg.norm(p))
        assert np.allclose(polar.to_cartesian(), p)


def test_cartesian_to_polar_origin():
    assert cartesian_to_polar((0.0, 0.0, 0.0)) == Polar(0.0, 0.0, 0.0)


def test_polar_validation():
    with pytest.raises(InvalidInputError):
        Polar(-1.0)
    with pytest.raises(InvalidInputError):
        Polar(1.0, float("nan"))
    with pytest.raises(InvalidInputError):
        Polar(float("inf"))


def test_rotation_angle():
    assert rotation_angle(3, 0) == 0.0
    assert rotation_angle(1, 4) == pytest.approx(math.pi / 2)
    # More than one revolution is fine.
    assert rotation_angle(6, 4) == pytest.approx(3 * math.pi)


def test_orbit_quarter_turns():
    """A period of 4 seconds moves the body a quarter turn per second."""
    orbit = Orbit(Polar(0.1, 0.0, degrees(90)), period_theta=4)
    expected = [[0.1, 0, 0], [0, 0.1, 0], [-0.1, 0, 0], [0, -0.1, 0], [0.1, 0, 0]]
    for t, e in enumerate(expected):
        assert np.allclose(orbit.position(t), e, atol=1e-12)


def test_orbit_without_rotation_is_static():
    orbit = Orbit(Polar(0.5, degrees(30), degrees(60)))
    assert np.allclose(orbit.position(0), orbit.position(1000))


def test_orbit_validation():
    with pytest.raises(InvalidInputError):
        Orbit(Polar(1.0), period_theta=-1)
    with pytest.raises(InvalidInputError):
        Orbit(Polar(1.0), period_phi=1.5)
    with pytest.raises(InvalidInputError):
        Orbit(Polar(1.0)).position(-1)
