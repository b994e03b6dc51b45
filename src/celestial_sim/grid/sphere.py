# MIT License (see LICENSE)
"""
Rasterization of sphere shells in the 3D grid.

The shell is assembled from horizontal circle layers. A second midpoint
sweep, this time in the (r, z) half-plane, walks one octant of the sphere's
cross-section and for every step (r, z) emits:
  - the circle of radius r at heights +z and -z (the flanks), and
  - the circle of radius z at heights +r and -r (the caps).

The caps are what closes the shell near the poles, where a single circle per
height would leave holes. The z == 0 layer is its own mirror and is emitted
once; on the diagonal r == z the cap layer equals the flank layer and is
skipped. The result passes a final dedup step, so the unique-points property
does not rely on distinct-radius circles never sharing a point.
"""
from __future__ import annotations
from typing import Sequence

from .circle import circle_points
from .point import GridPoint, as_point, translate, unique
from ..errors import InvalidInputError
from ..util import require_int


def _check_radius(radius: int) -> int:
    radius = require_int(radius, "radius")
    if radius < 0:
        raise InvalidInputError(f"Sphere radius must be non-negative, got {radius}")
    return radius


def _layer_raw(result: list[GridPoint], radius: int, z: int) -> None:
    """Append the circle at +z and its mirror at -z, even when z == 0."""
    for p in circle_points(radius, z):
        result.append(p)
        result.append(GridPoint(p.x, p.y, -p.z))


def _layer(result: list[GridPoint], radius: int, z: int) -> None:
    """Append the circle at +z and, unless it is the equator, at -z."""
    data = circle_points(radius, z)
    if z == 0:
        result.extend(data)
        return
    for p in data:
        result.append(p)
        result.append(GridPoint(p.x, p.y, -p.z))


def sphere_raw(radius: int) -> list[GridPoint]:
    """
    Calculate all points forming a sphere shell around the origin.

    This version does not remove duplicate points: the equator and the
    diagonal layer are emitted twice. Intended as a base for testing sphere().
    """
    radius = _check_radius(radius)
    result: list[GridPoint] = []
    if radius == 0:
        return result

    r = radius
    z = 0
    correction = 1 - r
    while r >= z:
        _layer_raw(result, r, z)
        _layer_raw(result, z, r)

        z += 1
        if correction < 0:
            correction += 2 * z + 1
        else:
            r -= 1
            correction += 2 * (z - r + 1)

    return result


def sphere(
    radius: int,
    centre: GridPoint | Sequence[int] | None = None,
    sorted_output: bool = False,
) -> tuple[GridPoint, ...]:
    """
    Calculate all points forming a sphere shell, without duplicates.

    Args:
        radius: The radius of the sphere in grid units. A radius of 0 yields
                no points.
        centre: The centre of the sphere; defaults to the origin.
        sorted_output: Sort the result ascending, making it a footprint
                       suitable for intersects().

    Returns:
        The points that form the shell.

    Raises:
        InvalidInputError: If radius is negative or not an integer.
    """
    radius = _check_radius(radius)
    result: list[GridPoint] = []
    if radius > 0:
        r = radius
        z = 0
        correction = 1 - r
        while r >= z:
            _layer(result, r, z)
            if r != z:
                _layer(result, z, r)

            z += 1
            if correction < 0:
                correction += 2 * z + 1
            else:
                r -= 1
                correction += 2 * (z - r + 1)

    if sorted_output:
        points: tuple[GridPoint, ...] = tuple(sorted(set(result)))
    else:
        points = unique(result)

    if centre is None:
        return points
    return translate(points, as_point(centre))
