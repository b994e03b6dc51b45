# MIT License (see LICENSE)
"""
Exception types raised by the simulator.

There are two families:
- InvalidInputError: a precondition violation (bad geometry, negative
  radius, corrupt persisted history, ...). The operation that detects it is
  aborted and nothing is retried.
- Collision: the expected terminal outcome of Timeline.advance(). It is not
  an error condition; callers are expected to handle it explicitly.
"""
from __future__ import annotations


class InvalidInputError(ValueError):
    """A caller supplied input that violates a documented precondition."""


class TimelineCollidedError(InvalidInputError):
    """Raised when advancing a timeline that already had a collision."""


class Collision(Exception):
    """
    Two (or more) celestial bodies occupy overlapping grid points.

    The snapshot in which the overlap was found has already been appended
    to the timeline when this is raised.
    """
