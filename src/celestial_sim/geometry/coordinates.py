# MIT License (see LICENSE)
"""
Continuous coordinate systems.

Cartesian points are float64 numpy arrays of shape (3,), in metres.
Polar (spherical) coordinates use the physics convention:
  - r:     distance from the origin
  - theta: azimuth in the x-y plane, measured from +x towards +y
  - phi:   inclination, measured from +z

Conversion:
  x = r cos(theta) sin(phi)
  y = r sin(theta) sin(phi)
  z = r cos(phi)

Reference: https://en.wikipedia.org/wiki/Spherical_coordinate_system
"""
from __future__ import annotations
import math
from dataclasses import dataclass

import numpy as np

from ..errors import InvalidInputError
from ..util import norm, require_finite, vec3


def degrees(value: float) -> float:
    """Convert an angle in degrees to radians."""
    return math.radians(require_finite(value, "angle"))


@dataclass(frozen=True)
class Polar:
    """
    A point in spherical coordinates.

    Attributes:
        r: Radial distance in metres, non-negative.
        theta: Azimuth angle in radians.
        phi: Inclination angle in radians.
    """
    r: float
    theta: float = 0.0
    phi: float = 0.0

    def __post_init__(self) -> None:
        """Validate and normalise the fields to floats."""
        r = require_finite(self.r, "r")
        if r < 0:
            raise InvalidInputError(f"Polar radius must be non-negative, got {r}")
        object.__setattr__(self, "r", r)
        object.__setattr__(self, "theta", require_finite(self.theta, "theta"))
        object.__setattr__(self, "phi", require_finite(self.phi, "phi"))

    def rotated(self, d_theta: float = 0.0, d_phi: float = 0.0) -> Polar:
        """Return a copy with the angles advanced by the given amounts."""
        return Polar(self.r, self.theta + d_theta, self.phi + d_phi)

    def to_cartesian(self) -> np.ndarray:
        """Convert to a cartesian point."""
        s = math.sin(self.phi)
        return vec3((
            self.r * math.cos(self.theta) * s,
            self.r * math.sin(self.theta) * s,
            self.r * math.cos(self.phi),
        ))


def cartesian_to_polar(point) -> Polar:
    """
    Convert a cartesian point to spherical coordinates.

    The origin has no defined direction and maps to Polar(0, 0, 0).
    """
    p = vec3(point)
    length = norm(p)
    if length == 0.0:
        return Polar(0.0, 0.0, 0.0)
    # Clamp against rounding pushing |z / r| marginally above 1.
    cos_phi = min(1.0, max(-1.0, float(p[2]) / length))
    return Polar(length, math.atan2(float(p[1]), float(p[0])), math.acos(cos_phi))
