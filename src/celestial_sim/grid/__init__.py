# MIT License (see LICENSE)
"""
Discrete grid and rasterization subsystem.

This subpackage provides:
    - GridPoint / Footprint: exact integer points and sorted point sets.
    - intersects / intersection: linear merge tests on footprints.
    - line, circle, sphere: rasterizers for continuous primitives.
    - circle_raw, sphere_raw: duplicate-keeping variants used as test oracles.

Typical usage:
    from celestial_sim.grid import GridPoint, sphere, intersects

    a = sphere(3, centre=GridPoint(0, 0, 0), sorted_output=True)
    b = sphere(3, centre=GridPoint(5, 0, 0), sorted_output=True)
    if intersects(a, b):
        # the shells touch
"""
from .point import (
    GridPoint,
    Footprint,
    ORIGIN,
    as_point,
    translate,
    normalize,
    unique,
    is_footprint,
    intersects,
    intersection,
)
from .line import line
from .circle import circle, circle_raw
from .sphere import sphere, sphere_raw

__all__ = [
    # Points
    "GridPoint",
    "Footprint",
    "ORIGIN",
    "as_point",
    "translate",
    "normalize",
    "unique",
    "is_footprint",
    # Footprint tests
    "intersects",
    "intersection",
    # Rasterizers
    "line",
    "circle",
    "circle_raw",
    "sphere",
    "sphere_raw",
]
