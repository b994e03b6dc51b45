# MIT License (see LICENSE)
"""
Step-driven simulation of a universe.

This subpackage provides:
    - SnapshotBuilder / Snapshot / Frame: per-step positions and footprints.
    - CollisionDetector / pair_schedule: minimal pairwise overlap testing.
    - Timeline: the append-only history and advance() entry point.

Typical usage:
    from celestial_sim.simulation import Timeline

    timeline = Timeline(universe)
    timeline.advance(42)
"""
from .snapshot import BodyState, Snapshot, Frame, FootprintCache, SnapshotBuilder, body_footprint
from .collision import CollisionDetector, pair_schedule, pair_count
from .timeline import Timeline, TimelineState

__all__ = [
    # Snapshots
    "BodyState",
    "Snapshot",
    "Frame",
    "FootprintCache",
    "SnapshotBuilder",
    "body_footprint",
    # Collision detection
    "CollisionDetector",
    "pair_schedule",
    "pair_count",
    # Timeline
    "Timeline",
    "TimelineState",
]
