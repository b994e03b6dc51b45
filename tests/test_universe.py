import numpy as np
import pytest
from celestial_sim.bodies import BodyKind, Moon, Planet, Sun
from celestial_sim.errors import InvalidInputError
from celestial_sim.geometry import Orbit, Polar, degrees
from celestial_sim.universe import Universe


def test_body_positions():
    orbit = Orbit(Polar(1.0, 0.0, degrees(90)), period_theta=4)
    sun = Sun("s", origin=(1.0, 2.0, 3.0), orbit=orbit, radius=0.1, energy_output=5.0)
    assert np.allclose(sun.position(0), [2.0, 2.0, 3.0])
    assert np.allclose(sun.position(1), [1.0, 3.0, 3.0])
    assert sun.kind is BodyKind.SUN

    planet = Planet("p", origin=(0.5, 0.5, 0.0), length=2.0, width=1.0)
    assert np.allclose(planet.position(100), [0.5, 0.5, 0.0])


def test_origin_is_read_only():
    moon = Moon("m", origin=[0.0, 0.0, 0.0])
    with pytest.raises(ValueError):
        moon.origin[0] = 1.0


def test_body_validation():
    with pytest.raises(InvalidInputError):
        Sun("s", radius=-1.0)
    with pytest.raises(InvalidInputError):
        Moon("", radius=1.0)
    with pytest.raises(InvalidInputError):
        Moon("m", origin=(0.0, 0.0))
    with pytest.raises(InvalidInputError):
        Planet("p", length=-1.0)


def test_add_keeps_insertion_order():
    u = Universe()
    u.add(Sun("b"))
    u.add(Sun("a"))
    u.add(Moon("a"))
    u.add(Planet("ground"))
    assert u.sun_ids == ("b", "a")
    assert u.moon_ids == ("a",)
    assert len(u) == 4
    assert u.planet("ground").id == "ground"


def test_duplicate_ids_rejected_per_kind():
    u = Universe()
    u.add(Sun("x"))
    with pytest.raises(InvalidInputError):
        u.add(Sun("x"))
    # Same id on another kind is allowed.
    u.add(Moon("x"))
    with pytest.raises(InvalidInputError):
        Universe(moons=[Moon("y"), Moon("y")])


def test_lookup_missing():
    u = Universe(suns=[Sun("s")])
    assert u.sun("s").id == "s"
    with pytest.raises(KeyError):
        u.moon("s")


def test_frozen_copy():
    u = Universe(suns=[Sun("s")], planets=[Planet("p")])
    frozen = u.frozen()
    assert frozen.locked and not u.locked
    assert frozen.suns == (u.suns[0],)
    assert frozen.frozen() is frozen
    with pytest.raises(InvalidInputError):
        frozen.add(Moon("m"))
    # The original stays editable and the copy does not follow it.
    u.add(Moon("m"))
    assert frozen.moon_ids == ()
