# MIT License (see LICENSE)
"""
Lightweight instrumentation for the simulation step loop.

Records wall-clock timings of named sections (positions, rasterize,
collisions) and integer counters (steps, pair tests) without external
dependencies. A disabled profiler accepts the same calls and records
nothing, so instrumented code does not need to branch.

Example:
    profiler = Profiler()
    timeline = Timeline(universe, profiler=profiler)
    timeline.advance(100)
    print(profiler.stats.summary())
"""
from __future__ import annotations
import time
from contextlib import contextmanager
from dataclasses import dataclass, field
from typing import Iterator


@dataclass
class ProfileStats:
    """
    Accumulates timing samples and counters.

    Attributes:
        samples: Seconds per recorded section call, by section name.
        counters: Running totals, by counter name.
    """
    samples: dict[str, list[float]] = field(default_factory=dict)
    counters: dict[str, int] = field(default_factory=dict)

    def add(self, name: str, dt: float) -> None:
        """Record a timing sample (in seconds) for a named section."""
        self.samples.setdefault(name, []).append(dt)

    def count(self, name: str, amount: int = 1) -> None:
        """Increase a named counter."""
        self.counters[name] = self.counters.get(name, 0) + amount

    def summary(self) -> dict[str, dict[str, float]]:
        """
        Compute summary statistics for all recorded sections.

        Returns:
            Dict mapping section name to stats dict with keys:
            - 'n': sample count
            - 'total_ms': summed time in milliseconds
            - 'mean_ms': average time in milliseconds
            - 'max_ms': maximum time in milliseconds
        """
        out = {}
        for name, times in self.samples.items():
            n = len(times)
            total = sum(times)
            out[name] = {
                "n": n,
                "total_ms": 1e3 * total,
                "mean_ms": 1e3 * (total / n),
                "max_ms": 1e3 * max(times),
            }
        return out


class Profiler:
    """Context-manager based profiler for timing code sections."""

    def __init__(self, enabled: bool = True) -> None:
        self.enabled = enabled
        self.stats = ProfileStats()

    @classmethod
    def disabled(cls) -> Profiler:
        """A profiler that records nothing."""
        return _DISABLED

    @contextmanager
    def section(self, name: str) -> Iterator[None]:
        """Time the enclosed block under name."""
        if not self.enabled:
            yield
            return
        t0 = time.perf_counter()
        try:
            yield
        finally:
            self.stats.add(name, time.perf_counter() - t0)

    def count(self, name: str, amount: int = 1) -> None:
        if self.enabled:
            self.stats.count(name, amount)


_DISABLED = Profiler(enabled=False)
