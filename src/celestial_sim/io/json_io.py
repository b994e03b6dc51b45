# MIT License (see LICENSE)
"""
JSON serialization and deserialization of simulation runs.

A saved run holds the universe (the initial configuration) and the timeline
(the recorded positions). Footprints are never stored; they are recomputed
from positions when needed.

JSON Schema Overview:
---------------------
{
  "version": 1,
  "universe": {
    "version": 1,
    "suns": [
      {
        "version": 1,
        "id": string,
        "origin": [x, y, z],             # metres
        "orbit": {
          "version": 1,
          "rotation": {"version": 1, "r": float, "theta": float, "phi": float},
          "period_theta": int,           # seconds, 0 = no rotation
          "period_phi": int
        },
        "radius": float,                 # metres
        "energy_output": float           # joules per second
      }
    ],
    "moons": [ ... as suns, without energy_output ... ],
    "planets": [
      {"version": 1, "id": string, "origin": [x, y, z],
       "length": float, "width": float}
    ]
  },
  "collided": bool,
  "states": [
    {
      "version": 1,
      "time": int,                       # must equal the list index
      "suns":  [{"version": 1, "id": string, "position": [x, y, z]}],
      "moons": [{"version": 1, "id": string, "position": [x, y, z]}]
    }
  ]
}

Every record carries "version": 1; loading any other version fails.
"""
from __future__ import annotations
import json
import logging
from typing import Any

import numpy as np

from ..bodies import Body, Moon, Planet, Sun
from ..constants import FORMAT_VERSION
from ..errors import InvalidInputError
from ..geometry.coordinates import Polar
from ..geometry.orbit import Orbit
from ..profiler import Profiler
from ..simulation.snapshot import BodyState, Snapshot
from ..simulation.timeline import Timeline
from ..units import DEFAULT_SCALE, RasterScale
from ..universe import Universe

logger = logging.getLogger(__name__)


def _check_version(d: Any, what: str) -> dict[str, Any]:
    """Require a dict tagged with the supported format version."""
    if not isinstance(d, dict):
        raise InvalidInputError(f"Failed to load a {what} object, expected a mapping.")
    version = d.get("version")
    if version != FORMAT_VERSION:
        raise InvalidInputError(f"Failed to load a {what} object, version {version!r} is not supported.")
    return d


def _field(d: dict[str, Any], key: str, what: str) -> Any:
    try:
        return d[key]
    except KeyError:
        raise InvalidInputError(f"The {what} definition is missing required '{key}' field.") from None


def _items(d: dict[str, Any], key: str, what: str) -> list[Any]:
    """Optional list field; absent means empty, anything but a list is rejected."""
    value = d.get(key, [])
    if not isinstance(value, list):
        raise InvalidInputError(f"The '{key}' field of the {what} must be a list, got {type(value).__name__}.")
    return value


# =============================================================================
# Geometry
# =============================================================================

def orbit_to_json(orbit: Orbit) -> dict[str, Any]:
    """Serialize an Orbit."""
    return {
        "version": FORMAT_VERSION,
        "rotation": {
            "version": FORMAT_VERSION,
            "r": orbit.rotation.r,
            "theta": orbit.rotation.theta,
            "phi": orbit.rotation.phi,
        },
        "period_theta": orbit.period_theta,
        "period_phi": orbit.period_phi,
    }


def orbit_from_json(d: Any) -> Orbit:
    """Parse an Orbit definition."""
    d = _check_version(d, "orbit")
    rot = _check_version(_field(d, "rotation", "orbit"), "polar")
    return Orbit(
        rotation=Polar(
            r=_field(rot, "r", "polar"),
            theta=rot.get("theta", 0.0),
            phi=rot.get("phi", 0.0),
        ),
        period_theta=d.get("period_theta", 0),
        period_phi=d.get("period_phi", 0),
    )


# =============================================================================
# Bodies and universe
# =============================================================================

def body_to_json(body: Body) -> dict[str, Any]:
    """Serialize a Sun, Moon or Planet."""
    result: dict[str, Any] = {
        "version": FORMAT_VERSION,
        "id": body.id,
        "origin": _to_list(body.origin),
    }
    if isinstance(body, Planet):
        result["length"] = body.length
        result["width"] = body.width
        return result

    result["orbit"] = orbit_to_json(body.orbit)
    result["radius"] = body.radius
    if isinstance(body, Sun):
        result["energy_output"] = body.energy_output
    return result


def body_from_json(d: Any, kind: str) -> Body:
    """
    Parse a single body definition.

    Args:
        d: Dictionary with the body's fields.
        kind: "sun", "moon" or "planet".

    Returns:
        The constructed body.

    Raises:
        InvalidInputError: On a wrong version, a missing field or an
                           invalid value.
    """
    d = _check_version(d, kind)
    body_id = _field(d, "id", kind)
    origin = d.get("origin", [0.0, 0.0, 0.0])

    if kind == "planet":
        return Planet(
            id=body_id,
            origin=origin,
            length=d.get("length", 0.0),
            width=d.get("width", 0.0),
        )

    orbit = orbit_from_json(_field(d, "orbit", kind))
    radius = _field(d, "radius", kind)
    if kind == "sun":
        return Sun(id=body_id, origin=origin, orbit=orbit, radius=radius,
                   energy_output=d.get("energy_output", 0.0))
    if kind == "moon":
        return Moon(id=body_id, origin=origin, orbit=orbit, radius=radius)
    raise InvalidInputError(f"Unknown body kind: '{kind}'")


def universe_to_json(universe: Universe) -> dict[str, Any]:
    """Serialize a Universe."""
    return {
        "version": FORMAT_VERSION,
        "suns": [body_to_json(s) for s in universe.suns],
        "moons": [body_to_json(m) for m in universe.moons],
        "planets": [body_to_json(p) for p in universe.planets],
    }


def universe_from_json(d: Any) -> Universe:
    """Parse a Universe; duplicate ids within a kind are rejected."""
    d = _check_version(d, "universe")
    universe = Universe()
    for key, kind in (("suns", "sun"), ("moons", "moon"), ("planets", "planet")):
        for body_data in _items(d, key, "universe"):
            universe.add(body_from_json(body_data, kind))
    return universe


# =============================================================================
# States and timeline
# =============================================================================

def snapshot_to_json(snapshot: Snapshot) -> dict[str, Any]:
    """Serialize a Snapshot (positions only)."""
    return {
        "version": FORMAT_VERSION,
        "time": snapshot.time,
        "suns": [_state_to_json(s) for s in snapshot.suns],
        "moons": [_state_to_json(m) for m in snapshot.moons],
    }


def snapshot_from_json(d: Any) -> Snapshot:
    """Parse a Snapshot."""
    d = _check_version(d, "simulator state")
    return Snapshot(
        time=_field(d, "time", "state"),
        suns=tuple(_state_from_json(s, "sun") for s in _items(d, "suns", "state")),
        moons=tuple(_state_from_json(m, "moon") for m in _items(d, "moons", "state")),
    )


def _state_to_json(state: BodyState) -> dict[str, Any]:
    return {"version": FORMAT_VERSION, "id": state.id, "position": _to_list(state.position)}


def _state_from_json(d: Any, kind: str) -> BodyState:
    d = _check_version(d, f"simulator {kind}")
    return BodyState(id=_field(d, "id", kind), position=_field(d, "position", kind))


def timeline_to_json(timeline: Timeline) -> dict[str, Any]:
    """
    Serialize a complete run.

    Captured state includes:
    - The universe (initial configuration)
    - The collision flag
    - Every recorded snapshot
    """
    return {
        "version": FORMAT_VERSION,
        "universe": universe_to_json(timeline.universe),
        "collided": timeline.collided,
        "states": [snapshot_to_json(s) for s in timeline.snapshots],
    }


def timeline_from_json(
    d: Any,
    scale: RasterScale = DEFAULT_SCALE,
    profiler: Profiler | None = None,
) -> Timeline:
    """
    Rebuild a run from its serialized form.

    Raises:
        InvalidInputError: On a wrong version, malformed data, or states
                           whose time indices are not 0..N-1 in order.
    """
    d = _check_version(d, "simulator")
    universe = universe_from_json(_field(d, "universe", "simulator"))
    snapshots = [snapshot_from_json(s) for s in _items(d, "states", "simulator")]
    collided = d.get("collided", False)
    if not isinstance(collided, bool):
        raise InvalidInputError(f"'collided' must be a boolean, got {collided!r}")
    return Timeline.restore(universe, snapshots, collided=collided, scale=scale, profiler=profiler)


def load_timeline_raw(path: str) -> dict[str, Any]:
    """
    Load the raw JSON data of a saved run without object construction.

    Raises:
        OSError: If the file cannot be read.
        json.JSONDecodeError: If the file is not valid JSON.
        InvalidInputError: If the file is not UTF-8 text.
    """
    with open(path, "r", encoding="utf-8") as f:
        try:
            return json.load(f)
        except UnicodeDecodeError as e:
            raise InvalidInputError(f"The file '{path}' is not UTF-8 encoded: {e}") from e


def load_timeline(
    path: str,
    scale: RasterScale = DEFAULT_SCALE,
    profiler: Profiler | None = None,
) -> Timeline:
    """
    Load a saved run from a JSON file.

    Raises:
        OSError: If the file cannot be read (FileNotFoundError when it
                 does not exist).
        json.JSONDecodeError: If the file is not valid JSON.
        InvalidInputError: If the file is not UTF-8 text or the content
                           is not a valid run.
    """
    timeline = timeline_from_json(load_timeline_raw(path), scale=scale, profiler=profiler)
    logger.info("Loaded %d states from %s", len(timeline), path)
    return timeline


def save_timeline(timeline: Timeline, path: str, indent: int = 2) -> None:
    """Save a run to a JSON file on disk."""
    data = timeline_to_json(timeline)
    with open(path, "w", encoding="utf-8") as f:
        json.dump(data, f, indent=indent)
    logger.info("Saved %d states to %s", len(timeline), path)


def _to_list(arr: Any) -> list[float]:
    """Helper: Convert numpy array or tuple to a clean list of floats."""
    if isinstance(arr, np.ndarray):
        return arr.tolist()
    return [float(v) for v in arr]
