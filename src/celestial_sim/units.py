# MIT License (see LICENSE)
"""
Conversion from continuous lengths to grid units.

The collision grid has a single fixed resolution. raster() maps a length in
metres to the nearest grid unit, rounding halves upwards:

    raster(x) = floor(x * units_per_metre + 0.5)

The mapping is linear up to rounding and monotonic: x1 < x2 implies
raster(x1) <= raster(x2). Positions are rasterized per axis, so the centre
of a body lands on the grid point nearest to its continuous position.
"""
from __future__ import annotations
import math
from dataclasses import dataclass

from .constants import DEFAULT_UNITS_PER_METRE
from .errors import InvalidInputError
from .grid.point import GridPoint
from .util import require_finite, vec3


@dataclass(frozen=True)
class RasterScale:
    """
    Linear scale between metres and grid units.

    Attributes:
        units_per_metre: Grid units per metre (default: 1000, i.e. 1 mm
                         per grid unit).
    """
    units_per_metre: float = DEFAULT_UNITS_PER_METRE

    def __post_init__(self) -> None:
        """Validate the scale factor."""
        scale = require_finite(self.units_per_metre, "units_per_metre")
        if scale <= 0:
            raise InvalidInputError(f"units_per_metre must be positive, got {scale}")
        object.__setattr__(self, "units_per_metre", scale)

    def raster(self, length: float) -> int:
        """Convert a length in metres to whole grid units."""
        value = require_finite(length, "length")
        return int(math.floor(value * self.units_per_metre + 0.5))

    def raster_point(self, point) -> GridPoint:
        """Convert a cartesian point in metres to the nearest grid point."""
        p = vec3(point)
        return GridPoint(self.raster(p[0]), self.raster(p[1]), self.raster(p[2]))

    def length(self, units: int) -> float:
        """Convert grid units back to metres (the centre of the unit)."""
        return units / self.units_per_metre


DEFAULT_SCALE = RasterScale()


def raster(length: float) -> int:
    """Convert a length in metres to grid units using the default scale."""
    return DEFAULT_SCALE.raster(length)
