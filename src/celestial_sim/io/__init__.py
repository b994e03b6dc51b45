# MIT License (see LICENSE)
"""
Input/Output utilities for simulation runs.

This subpackage provides:
    - JSON serialization: Save and load universes and timelines.
    - Validation on load: versions, required fields, contiguous history.

Typical usage:
    from celestial_sim.io import load_timeline, save_timeline

    timeline = load_timeline("run.json")
    timeline.advance(10)
    save_timeline(timeline, "run.json")
"""
from .json_io import (
    load_timeline,
    load_timeline_raw,
    save_timeline,
    timeline_to_json,
    timeline_from_json,
    universe_to_json,
    universe_from_json,
    snapshot_to_json,
    snapshot_from_json,
    body_to_json,
    body_from_json,
)

__all__ = [
    # Loading
    "load_timeline",
    "load_timeline_raw",
    # Saving
    "save_timeline",
    # Serialization
    "timeline_to_json",
    "timeline_from_json",
    "universe_to_json",
    "universe_from_json",
    "snapshot_to_json",
    "snapshot_from_json",
    "body_to_json",
    "body_from_json",
]
