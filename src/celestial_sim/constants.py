# MIT License (see LICENSE)
"""
Constants shared by the simulation layers.

Lengths are in metres, times in whole seconds (one simulation step is one
second), energies in joules.
"""
from __future__ import annotations

# Resolution of the collision grid: one grid unit is one millimetre.
DEFAULT_UNITS_PER_METRE: float = 1000.0

# Version tag written to, and required from, every persisted record.
FORMAT_VERSION: int = 1
