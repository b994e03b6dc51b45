# MIT License (see LICENSE)
"""
celestial_sim - A step-driven celestial body simulator on a discrete grid.

This package places suns, moons and planets on closed-form orbits, records
their positions once per simulated second, and detects collisions by
rasterizing every moving body into an integer 3D grid.

Main entry points:
    - Universe: The initial configuration of all bodies.
    - Sun, Moon, Planet: Body definitions.
    - Orbit, Polar: Closed-form circular motion.
    - Timeline: The append-only history and advance() entry point.

Submodules:
    - grid: Grid points, footprints, line/circle/sphere rasterizers.
    - geometry: Coordinate conversions and orbits.
    - simulation: Snapshot builder, collision detector and timeline.
    - io: JSON serialization/deserialization.

Example:
    from celestial_sim import Universe, Sun, Orbit, Polar, Timeline, Collision

    universe = Universe()
    universe.add(Sun("sun1", orbit=Orbit(Polar(0.1), period_theta=40), radius=0.01))
    timeline = Timeline(universe)
    try:
        timeline.advance(42)
    except Collision:
        pass
"""
from .bodies import BodyKind, Moon, Planet, Sun
from .errors import Collision, InvalidInputError, TimelineCollidedError
from .geometry import Orbit, Polar, cartesian_to_polar, degrees
from .grid import GridPoint, circle, intersection, intersects, line, sphere
from .profiler import Profiler
from .simulation import Snapshot, Timeline
from .units import RasterScale, raster
from .universe import Universe

__all__ = [
    # Bodies
    "Universe",
    "Sun",
    "Moon",
    "Planet",
    "BodyKind",
    # Geometry
    "Orbit",
    "Polar",
    "cartesian_to_polar",
    "degrees",
    "RasterScale",
    "raster",
    # Grid
    "GridPoint",
    "line",
    "circle",
    "sphere",
    "intersects",
    "intersection",
    # Simulation
    "Timeline",
    "Snapshot",
    "Profiler",
    # Errors
    "Collision",
    "InvalidInputError",
    "TimelineCollidedError",
]
