# MIT License (see LICENSE)
"""
Discrete grid points and footprints.

The collision grid is a dimensionless integer 3D space. A body occupies a
finite set of grid points, its *footprint*, stored as an ascending-sorted,
duplicate-free tuple. Sortedness is what makes the overlap test linear:
intersects() and intersection() walk both footprints once, merge-style,
instead of comparing every pair.

Key concepts:
- GridPoint: exact integer (x, y, z) with lexicographic ordering.
- Footprint: tuple[GridPoint, ...], sorted ascending without duplicates.
- Translating a footprint by a constant offset preserves its ordering.
"""
from __future__ import annotations
from dataclasses import dataclass
from typing import Iterable, Sequence

from ..errors import InvalidInputError
from ..util import require_int


@dataclass(frozen=True, order=True)
class GridPoint:
    """
    A cartesian 3D point in the grid.

    The axes match the continuous cartesian axes of the geometry module.
    Ordering is lexicographic: x first, then y, then z.

    Attributes:
        x: The x-coordinate.
        y: The y-coordinate.
        z: The z-coordinate.
    """
    x: int
    y: int
    z: int

    def __post_init__(self) -> None:
        """Reject non-integral coordinates."""
        object.__setattr__(self, "x", require_int(self.x, "x"))
        object.__setattr__(self, "y", require_int(self.y, "y"))
        object.__setattr__(self, "z", require_int(self.z, "z"))

    def __add__(self, other: GridPoint) -> GridPoint:
        if not isinstance(other, GridPoint):
            return NotImplemented
        return GridPoint(self.x + other.x, self.y + other.y, self.z + other.z)

    def __iter__(self):
        yield self.x
        yield self.y
        yield self.z

    def __repr__(self) -> str:
        return f"GridPoint({self.x}, {self.y}, {self.z})"


Footprint = tuple[GridPoint, ...]
"""Ascending-sorted, duplicate-free tuple of grid points a body occupies."""

ORIGIN = GridPoint(0, 0, 0)


def as_point(value: GridPoint | Sequence[int]) -> GridPoint:
    """Accept a GridPoint or any (x, y, z) integer sequence."""
    if isinstance(value, GridPoint):
        return value
    try:
        x, y, z = value
    except (TypeError, ValueError) as exc:
        raise InvalidInputError(f"Expected an (x, y, z) grid point, got {value!r}") from exc
    return GridPoint(x, y, z)


def translate(points: Iterable[GridPoint], offset: GridPoint) -> tuple[GridPoint, ...]:
    """
    Shift every point by offset.

    Adding the same offset to every element does not change their relative
    order, so a sorted input stays sorted.
    """
    if offset == ORIGIN:
        return tuple(points)
    return tuple(p + offset for p in points)


def normalize(points: Iterable[GridPoint]) -> Footprint:
    """Sort points ascending and drop duplicates (the explicit dedup pass)."""
    return tuple(sorted(set(points)))


def unique(points: Iterable[GridPoint]) -> tuple[GridPoint, ...]:
    """Drop duplicates while keeping the first occurrence order."""
    return tuple(dict.fromkeys(points))


def is_footprint(points: Sequence[GridPoint]) -> bool:
    """Whether points is strictly ascending, i.e. sorted and duplicate-free."""
    return all(a < b for a, b in zip(points, points[1:]))


def intersects(lhs: Sequence[GridPoint], rhs: Sequence[GridPoint]) -> bool:
    """
    Test whether two footprints have any point in common.

    Linear merge scan: both inputs must be sorted ascending without
    duplicates (see is_footprint). Runs in O(len(lhs) + len(rhs)).

    Args:
        lhs: The left hand side footprint.
        rhs: The right hand side footprint.

    Returns:
        True if at least one point is present in both.
    """
    i, j = 0, 0
    n, m = len(lhs), len(rhs)
    if n == 0 or m == 0:
        return False
    # Disjoint bounding ranges can be rejected without scanning.
    if lhs[-1] < rhs[0] or rhs[-1] < lhs[0]:
        return False
    while i < n and j < m:
        a, b = lhs[i], rhs[j]
        if a < b:
            i += 1
        elif b < a:
            j += 1
        else:
            return True
    return False


def intersection(lhs: Sequence[GridPoint], rhs: Sequence[GridPoint]) -> Footprint:
    """
    Return the points present in both footprints, ascending.

    Same preconditions as intersects(). Intended for diagnostics and tests;
    the collision detector only needs the boolean answer.
    """
    i, j = 0, 0
    n, m = len(lhs), len(rhs)
    out: list[GridPoint] = []
    while i < n and j < m:
        a, b = lhs[i], rhs[j]
        if a < b:
            i += 1
        elif b < a:
            j += 1
        else:
            out.append(a)
            i += 1
            j += 1
    return tuple(out)
