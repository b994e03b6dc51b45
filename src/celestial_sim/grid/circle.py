# MIT License (see LICENSE)
"""
Rasterization of circles in the x-y plane of the grid.

Uses the midpoint (Bresenham) circle algorithm. The sweep walks one octant,
from (r, 0) towards the diagonal, and mirrors every step into the other
seven octants:

    (x, y) (x, -y) (-x, y) (-x, -y) (y, x) (y, -x) (-y, x) (-y, -x)

The decision variable starts at 1 - r; while it is negative the next point
stays on the same column, otherwise x moves one unit inwards.

On the octant boundaries (y == 0 and y == x) half of those eight mirrors
coincide. circle_raw() emits all eight regardless and is kept as a reference
for the tests; circle() emits only the distinct four there.

Reference: https://en.wikipedia.org/wiki/Midpoint_circle_algorithm
"""
from __future__ import annotations
from typing import Iterator, Sequence

from .point import GridPoint, as_point, translate
from ..errors import InvalidInputError
from ..util import require_int


def _octant(radius: int) -> Iterator[tuple[int, int]]:
    """Yield the (x, y) pairs of the first octant sweep, x >= y."""
    x = radius
    y = 0
    correction = 1 - x
    while x >= y:
        yield x, y
        y += 1
        if correction < 0:
            correction += 2 * y + 1
        else:
            x -= 1
            correction += 2 * (y - x + 1)


def _check_radius(radius: int) -> int:
    radius = require_int(radius, "radius")
    if radius < 0:
        raise InvalidInputError(f"Circle radius must be non-negative, got {radius}")
    return radius


def circle_raw(radius: int, z: int = 0) -> list[GridPoint]:
    """
    Calculate all points forming a circle around the origin, with duplicates.

    Mainly intended as a base for testing circle().

    Args:
        radius: The radius of the circle.
        z: Height of the plane the circle lies in.

    Returns:
        The points that form the circle; points on the octant boundaries
        appear more than once.
    """
    radius = _check_radius(radius)
    result: list[GridPoint] = []
    if radius == 0:
        return result

    for x, y in _octant(radius):
        result.append(GridPoint(x, y, z))
        result.append(GridPoint(x, -y, z))
        result.append(GridPoint(-x, y, z))
        result.append(GridPoint(-x, -y, z))

        result.append(GridPoint(y, x, z))
        result.append(GridPoint(y, -x, z))
        result.append(GridPoint(-y, x, z))
        result.append(GridPoint(-y, -x, z))

    return result


def circle_points(radius: int, z: int = 0) -> list[GridPoint]:
    """
    Duplicate-free circle points around (0, 0, z), in generation order.

    Shared by circle() and the sphere layers, which need the unsorted list.
    """
    radius = _check_radius(radius)
    result: list[GridPoint] = []
    if radius == 0:
        return result

    for x, y in _octant(radius):
        if y == 0:
            result.append(GridPoint(x, y, z))
            result.append(GridPoint(-x, y, z))
            result.append(GridPoint(y, x, z))
            result.append(GridPoint(y, -x, z))
        elif y == x:
            result.append(GridPoint(x, y, z))
            result.append(GridPoint(x, -y, z))
            result.append(GridPoint(-x, y, z))
            result.append(GridPoint(-x, -y, z))
        else:
            result.append(GridPoint(x, y, z))
            result.append(GridPoint(x, -y, z))
            result.append(GridPoint(-x, y, z))
            result.append(GridPoint(-x, -y, z))

            result.append(GridPoint(y, x, z))
            result.append(GridPoint(y, -x, z))
            result.append(GridPoint(-y, x, z))
            result.append(GridPoint(-y, -x, z))

    return result


def circle(
    radius: int,
    centre: GridPoint | Sequence[int] | None = None,
    sorted_output: bool = False,
) -> tuple[GridPoint, ...]:
    """
    Calculate all points forming a circle, without duplicates.

    Args:
        radius: The radius of the circle in grid units. A radius of 0 yields
                no points.
        centre: The centre of the circle; defaults to the origin. The circle
                lies in the plane z == centre.z.
        sorted_output: Sort the result ascending. intersects() and
                       intersection() require sorted input.

    Returns:
        The points that form the circle.

    Raises:
        InvalidInputError: If radius is negative or not an integer.
    """
    result = circle_points(radius)
    if sorted_output:
        result.sort()
    if centre is None:
        return tuple(result)
    return translate(result, as_point(centre))
