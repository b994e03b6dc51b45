# MIT License (see LICENSE)
"""
Continuous geometry used to place bodies in space.

This subpackage provides:
    - Polar / cartesian_to_polar / degrees: coordinate conversions.
    - Orbit: closed-form rotation of a polar offset over time.

Typical usage:
    from celestial_sim.geometry import Orbit, Polar, degrees

    orbit = Orbit(Polar(0.1, 0.0, degrees(90)), period_theta=40)
    offset = orbit.position(10)
"""
from .coordinates import Polar, cartesian_to_polar, degrees
from .orbit import Orbit, rotation_angle

__all__ = [
    "Polar",
    "cartesian_to_polar",
    "degrees",
    "Orbit",
    "rotation_angle",
]
