# MIT License (see LICENSE)
"""
Utility functions for vector math and input validation.

Continuous positions are 3D vectors represented as numpy arrays of shape (3,).
The helpers here keep conversion and finiteness checks in one place so the
geometry and rasterization layers agree on what valid input looks like.
"""
from __future__ import annotations
import math
from numbers import Integral

import numpy as np

from .errors import InvalidInputError


def f64(x) -> np.ndarray:
    """
    Convert any array-like to a float64 numpy array.

    Used throughout the codebase to allow tuple/list inputs for origins and
    positions.
    """
    return np.array(x, dtype=np.float64)


def vec3(x, name: str = "point") -> np.ndarray:
    """
    Convert an array-like to a finite, read-only float64 vector of shape (3,).

    Raises:
        InvalidInputError: If the value is not three finite numbers.
    """
    try:
        v = f64(x)
    except (TypeError, ValueError) as exc:
        raise InvalidInputError(f"{name} must be a 3D point, got {x!r}") from exc
    if v.shape != (3,):
        raise InvalidInputError(f"{name} must have shape (3,), got {v.shape}")
    if not np.all(np.isfinite(v)):
        raise InvalidInputError(f"{name} must be finite, got {v.tolist()}")
    v.setflags(write=False)
    return v


def norm(v: np.ndarray) -> float:
    """Magnitude (length) of a 3D vector."""
    return float(np.sqrt(np.dot(v, v)))


def require_finite(value: float, name: str) -> float:
    """Return value as float, rejecting NaN and infinities."""
    try:
        f = float(value)
    except (TypeError, ValueError) as exc:
        raise InvalidInputError(f"{name} must be a number, got {value!r}") from exc
    if not math.isfinite(f):
        raise InvalidInputError(f"{name} must be finite, got {value!r}")
    return f


def require_int(value, name: str, minimum: int | None = None) -> int:
    """
    Return value as a plain int.

    Booleans and floats are rejected even when they hold an integral value;
    grid coordinates, radii and time indices are exact integers.
    """
    if isinstance(value, bool) or not isinstance(value, Integral):
        raise InvalidInputError(f"{name} must be an integer, got {value!r}")
    value = int(value)
    if minimum is not None and value < minimum:
        raise InvalidInputError(f"{name} must be >= {minimum}, got {value}")
    return value
