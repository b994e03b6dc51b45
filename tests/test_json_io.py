import json

import numpy as np
import pytest
from celestial_sim.bodies import Moon, Planet, Sun
from celestial_sim.errors import Collision, InvalidInputError
from celestial_sim.geometry import Orbit, Polar, degrees
from celestial_sim.io import (
    body_from_json, body_to_json, load_timeline, load_timeline_raw, save_timeline,
    timeline_from_json, timeline_to_json, universe_from_json, universe_to_json,
)
from celestial_sim.simulation import Timeline
from celestial_sim.universe import Universe


def _universe():
    u = Universe()
    u.add(Sun("sun1", origin=(0.0, 0.0, 0.0),
              orbit=Orbit(Polar(0.1, 0.0, degrees(90)), period_theta=4), radius=0.001, energy_output=2.5))
    u.add(Sun("sun2", orbit=Orbit(Polar(0.1, degrees(90), degrees(90))), radius=0.001))
    u.add(Moon("moon", origin=(1.0, 1.0, 1.0),
               orbit=Orbit(Polar(0.2, 0.0, degrees(45)), period_theta=8, period_phi=16), radius=0.002))
    u.add(Planet("ground", origin=(-1.0, -1.0, -1.0), length=2.0, width=3.0))
    return u


def test_body_round_trip():
    u = _universe()
    sun = body_from_json(body_to_json(u.suns[0]), "sun")
    assert isinstance(sun, Sun)
    assert sun.id == "sun1" and sun.energy_output == 2.5
    assert sun.orbit == u.suns[0].orbit

    planet = body_from_json(body_to_json(u.planets[0]), "planet")
    assert isinstance(planet, Planet)
    assert (planet.length, planet.width) == (2.0, 3.0)
    assert np.allclose(planet.origin, [-1.0, -1.0, -1.0])


def test_universe_document_shape():
    data = universe_to_json(_universe())
    assert data["version"] == 1
    assert [s["id"] for s in data["suns"]] == ["sun1", "sun2"]
    assert all(s["version"] == 1 and s["orbit"]["rotation"]["version"] == 1 for s in data["suns"])
    assert "energy_output" not in data["moons"][0]
    assert universe_from_json(data).moon_ids == ("moon",)


def test_save_and_load_keeps_history(tmp_path):
    """Snapshots and the collided flag survive a trip through a file."""
    timeline = Timeline(_universe())
    with pytest.raises(Collision):
        timeline.advance(10)
    path = tmp_path / "run.json"
    save_timeline(timeline, str(path))

    loaded = load_timeline(str(path))
    assert loaded.collided
    assert len(loaded) == len(timeline) == 2
    for a, b in zip(loaded.snapshots, timeline.snapshots):
        assert a.time == b.time
        assert a.suns == b.suns and a.moons == b.moons
    assert load_timeline_raw(str(path)) == timeline_to_json(timeline)


def test_loaded_timeline_continues(tmp_path):
    u = Universe(moons=[Moon("m", orbit=Orbit(Polar(0.1, 0.0, degrees(90)), period_theta=10), radius=0.001)])
    timeline = Timeline(u)
    timeline.advance(3)
    path = tmp_path / "run.json"
    save_timeline(timeline, str(path))

    loaded = load_timeline(str(path))
    loaded.advance(2)
    assert loaded.time == 5


def _document():
    timeline = Timeline(Universe(suns=[Sun("s", radius=0.001)]))
    timeline.advance(2)
    return timeline_to_json(timeline)


def test_gap_in_history_rejected():
    data = _document()
    del data["states"][1]
    with pytest.raises(InvalidInputError):
        timeline_from_json(data)


def test_wrong_version_rejected():
    data = _document()
    data["states"][0]["suns"][0]["version"] = 2
    with pytest.raises(InvalidInputError):
        timeline_from_json(data)

    data = _document()
    del data["universe"]["version"]
    with pytest.raises(InvalidInputError):
        timeline_from_json(data)


def test_missing_fields_rejected():
    data = _document()
    del data["universe"]["suns"][0]["radius"]
    with pytest.raises(InvalidInputError):
        timeline_from_json(data)

    data = _document()
    data["collided"] = "yes"
    with pytest.raises(InvalidInputError):
        timeline_from_json(data)

    with pytest.raises(InvalidInputError):
        timeline_from_json([])


def test_duplicate_ids_rejected():
    data = _document()
    data["universe"]["suns"].append(dict(data["universe"]["suns"][0]))
    with pytest.raises(InvalidInputError):
        timeline_from_json(data)


def test_file_errors(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_timeline(str(tmp_path / "missing.json"))
    bad = tmp_path / "bad.json"
    bad.write_text("{not json", encoding="utf-8")
    with pytest.raises(json.JSONDecodeError):
        load_timeline(str(bad))


@pytest.mark.parametrize("path,value", [
    (("states",), 5),
    (("states",), {"0": {}}),
    (("universe", "suns"), None),
    (("universe", "planets"), "ground"),
    (("states", 0, "suns"), 3),
    (("states", 0, "moons"), {"version": 1}),
])
def test_malformed_containers_rejected(path, value):
    """Containers of the wrong type are invalid input, not a TypeError."""
    data = _document()
    target = data
    for key in path[:-1]:
        target = target[key]
    target[path[-1]] = value
    with pytest.raises(InvalidInputError):
        timeline_from_json(data)


def test_non_utf8_file_rejected(tmp_path):
    bad = tmp_path / "bad.json"
    bad.write_bytes(b"\xff\xfe{")
    with pytest.raises(InvalidInputError):
        load_timeline(str(bad))
