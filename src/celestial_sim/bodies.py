# MIT License (see LICENSE)
"""
Celestial body definitions.

Three kinds of bodies populate a universe:
- Sun:    orbits its origin, has a radius and an energy output.
- Moon:   orbits its origin, has a radius.
- Planet: immobile rectangular ground with a length (x) and width (y).

Bodies are value-like frozen dataclasses. Their position at a time index is
computed in closed form from origin + orbit; nothing about a body changes
while the simulation runs. Grid footprints are not stored on the bodies, the
snapshot builder computes and caches them.
"""
from __future__ import annotations
from dataclasses import dataclass, field
from enum import Enum

import numpy as np

from .errors import InvalidInputError
from .geometry.orbit import Orbit
from .util import require_finite, require_int, vec3


class BodyKind(str, Enum):
    """The kind of a body; ids are unique per kind."""
    SUN = "sun"
    MOON = "moon"
    PLANET = "planet"


def _check_id(value: str) -> str:
    if not isinstance(value, str) or not value:
        raise InvalidInputError(f"Body id must be a non-empty string, got {value!r}")
    return value


def _check_radius(value: float) -> float:
    radius = require_finite(value, "radius")
    if radius < 0:
        raise InvalidInputError(f"Body radius must be non-negative, got {radius}")
    return radius


@dataclass(frozen=True, eq=False)
class Sun:
    """
    A sun orbiting around its origin.

    Attributes:
        id: Name of the sun, unique among the suns of a universe.
        origin: Centre of the orbit [x, y, z] in metres.
        orbit: The orbit relative to origin.
        radius: Radius of the sun in metres.
        energy_output: Energy emitted per second in joules.
    """
    id: str
    origin: np.ndarray | tuple[float, float, float] = (0.0, 0.0, 0.0)
    orbit: Orbit = field(default_factory=Orbit)
    radius: float = 0.0
    energy_output: float = 0.0

    kind = BodyKind.SUN

    def __post_init__(self) -> None:
        """Validate fields and freeze the origin as a read-only array."""
        object.__setattr__(self, "id", _check_id(self.id))
        object.__setattr__(self, "origin", vec3(self.origin, "origin"))
        object.__setattr__(self, "radius", _check_radius(self.radius))
        object.__setattr__(self, "energy_output", require_finite(self.energy_output, "energy_output"))

    def position(self, time: int) -> np.ndarray:
        """Centre of the sun at a time index."""
        return vec3(self.origin + self.orbit.position(time))


@dataclass(frozen=True, eq=False)
class Moon:
    """
    A moon orbiting around its origin.

    Attributes:
        id: Name of the moon, unique among the moons of a universe.
        origin: Centre of the orbit [x, y, z] in metres.
        orbit: The orbit relative to origin.
        radius: Radius of the moon in metres.
    """
    id: str
    origin: np.ndarray | tuple[float, float, float] = (0.0, 0.0, 0.0)
    orbit: Orbit = field(default_factory=Orbit)
    radius: float = 0.0

    kind = BodyKind.MOON

    def __post_init__(self) -> None:
        """Validate fields and freeze the origin as a read-only array."""
        object.__setattr__(self, "id", _check_id(self.id))
        object.__setattr__(self, "origin", vec3(self.origin, "origin"))
        object.__setattr__(self, "radius", _check_radius(self.radius))

    def position(self, time: int) -> np.ndarray:
        """Centre of the moon at a time index."""
        return vec3(self.origin + self.orbit.position(time))


@dataclass(frozen=True, eq=False)
class Planet:
    """
    An immobile planet.

    Planets are the static ground of the universe. They never move, so they
    take no part in the per-step collision test.

    Attributes:
        id: Name of the planet, unique among the planets of a universe.
        origin: Corner of the planet [x, y, z] in metres.
        length: Extent in the x-direction in metres.
        width: Extent in the y-direction in metres.
    """
    id: str
    origin: np.ndarray | tuple[float, float, float] = (0.0, 0.0, 0.0)
    length: float = 0.0
    width: float = 0.0

    kind = BodyKind.PLANET

    def __post_init__(self) -> None:
        """Validate fields and freeze the origin as a read-only array."""
        object.__setattr__(self, "id", _check_id(self.id))
        object.__setattr__(self, "origin", vec3(self.origin, "origin"))
        for name in ("length", "width"):
            value = require_finite(getattr(self, name), name)
            if value < 0:
                raise InvalidInputError(f"Planet {name} must be non-negative, got {value}")
            object.__setattr__(self, name, value)

    def position(self, time: int) -> np.ndarray:
        """The planet's origin; planets do not move."""
        require_int(time, "time", minimum=0)
        return self.origin


# Bodies that move and therefore get rasterized every step.
MovingBody = Sun | Moon
Body = Sun | Moon | Planet
