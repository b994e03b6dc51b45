# MIT License (see LICENSE)
"""
Rasterization of straight lines in the 3D grid.

The walk is the 3D generalisation of Bresenham's line algorithm:
  - The axis with the largest absolute delta (the driving axis) advances one
    unit every step, so the line has max(|dx|, |dy|, |dz|) + 1 points.
  - Each other axis keeps an error term, starting at steps // 2. Every step
    the axis' delta is subtracted; when the term drops below zero the axis
    moves one unit and the term is topped up by steps.

Tie-breaking in the error terms depends on the walking direction, so a naive
walk from b to a is not the mirror image of the walk from a to b. line()
always walks from the lexicographically smaller endpoint and reverses the
result when needed, which makes line(a, b) == line(b, a)[::-1] hold for
every sign combination of the deltas.

Reference: https://en.wikipedia.org/wiki/Bresenham%27s_line_algorithm
"""
from __future__ import annotations
from typing import Sequence

from .point import GridPoint, as_point


def _walk(begin: GridPoint, end: GridPoint) -> list[GridPoint]:
    """Incremental walk from begin to end, both inclusive."""
    dx, dy, dz = end.x - begin.x, end.y - begin.y, end.z - begin.z
    sx = 1 if dx >= 0 else -1
    sy = 1 if dy >= 0 else -1
    sz = 1 if dz >= 0 else -1
    ax, ay, az = abs(dx), abs(dy), abs(dz)

    steps = max(ax, ay, az)
    cx = cy = cz = steps // 2
    x, y, z = begin.x, begin.y, begin.z

    out: list[GridPoint] = []
    for _ in range(steps + 1):
        out.append(GridPoint(x, y, z))

        # The driving axis has delta == steps and therefore moves every step.
        cx -= ax
        if cx < 0:
            cx += steps
            x += sx
        cy -= ay
        if cy < 0:
            cy += steps
            y += sy
        cz -= az
        if cz < 0:
            cz += steps
            z += sz

    return out


def line(
    begin: GridPoint | Sequence[int],
    end: GridPoint | Sequence[int],
    sorted_output: bool = False,
) -> tuple[GridPoint, ...]:
    """
    Calculate all grid points forming the line [begin, end].

    Args:
        begin: The point marking the beginning of the line.
        end: The point marking the end of the line.
        sorted_output: Return the points ascending instead of in walking
                       order, making the result a footprint suitable for
                       intersects().

    Returns:
        The points of the line; in walking order the first element is begin
        and the last is end. A line never contains duplicates.

    Raises:
        InvalidInputError: If an endpoint is not an integer grid point.
    """
    begin = as_point(begin)
    end = as_point(end)

    if end < begin:
        points = _walk(end, begin)
        points.reverse()
    else:
        points = _walk(begin, end)

    if sorted_output:
        points.sort()
    return tuple(points)
