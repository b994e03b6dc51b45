# MIT License (see LICENSE)
"""
Closed-form circular orbits.

An orbit is a polar offset from the body's origin that rotates at a constant
rate in two planes. The position at a whole-second time index t is

    theta(t) = theta0 + 2π t / period_theta
    phi(t)   = phi0   + 2π t / period_phi

converted to cartesian coordinates. A period of 0 means the orbit does not
rotate in that plane. There is no integration: every time index is
evaluated independently, so positions never accumulate drift.
"""
from __future__ import annotations
import math
from dataclasses import dataclass, field

import numpy as np

from .coordinates import Polar
from ..errors import InvalidInputError
from ..util import require_int


def rotation_angle(time: int, period: int) -> float:
    """
    Angle swept after time seconds for a given rotation period.

    The quotient time / period may exceed 1 when several revolutions have
    passed; that does not affect the trigonometry downstream.
    """
    if period == 0:
        return 0.0
    return 2.0 * math.pi * (time / period)


@dataclass(frozen=True)
class Orbit:
    """
    A circular orbit around an origin.

    Attributes:
        rotation: Position relative to the origin at time 0.
        period_theta: Seconds per revolution in the theta (x-y) plane,
                      0 for no rotation.
        period_phi: Seconds per revolution in the phi plane, 0 for no
                    rotation.
    """
    rotation: Polar = field(default_factory=lambda: Polar(0.0))
    period_theta: int = 0
    period_phi: int = 0

    def __post_init__(self) -> None:
        """Reject negative or non-integral periods."""
        object.__setattr__(self, "period_theta", require_int(self.period_theta, "period_theta", minimum=0))
        object.__setattr__(self, "period_phi", require_int(self.period_phi, "period_phi", minimum=0))
        if not isinstance(self.rotation, Polar):
            raise InvalidInputError(f"Orbit rotation must be Polar, got {type(self.rotation).__name__}")

    def position(self, time: int) -> np.ndarray:
        """
        Offset from the origin at a time index.

        Args:
            time: Non-negative whole-second time index.

        Returns:
            Cartesian offset in metres.
        """
        time = require_int(time, "time", minimum=0)
        current = self.rotation.rotated(
            rotation_angle(time, self.period_theta),
            rotation_angle(time, self.period_phi),
        )
        return current.to_cartesian()
