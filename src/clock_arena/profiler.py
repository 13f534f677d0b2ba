# MIT License (see LICENSE)
"""
Lightweight timing of arena frame phases.

Arena.step() reports the time spent computing hand angles, clamping the
actor to the boundary and running the collision test, when a Profiler is
attached. No external dependencies.

Example:
    profiler = Profiler()
    arena = Arena(profiler=profiler)
    for _ in range(600):
        arena.step(dt=1/60)
    print(profiler.stats.summary())
"""
from __future__ import annotations
import time
from contextlib import contextmanager
from dataclasses import dataclass, field
from typing import Iterator


@dataclass
class ProfileStats:
    """Timing samples (seconds) keyed by section name."""
    samples: dict[str, list[float]] = field(default_factory=dict)

    def add(self, name: str, dt: float) -> None:
        self.samples.setdefault(name, []).append(dt)

    def total(self, name: str) -> float:
        return sum(self.samples.get(name, ()))

    def summary(self) -> dict[str, dict[str, float]]:
        """
        Per-section statistics.

        Returns:
            Dict mapping section name to:
            - 'n': sample count
            - 'mean_us': average time in microseconds
            - 'max_us': worst sample in microseconds
            - 'total_ms': sum of all samples in milliseconds
        """
        out = {}
        for name, times in self.samples.items():
            n = len(times)
            out[name] = {
                "n": n,
                "mean_us": 1e6 * (sum(times) / n),
                "max_us": 1e6 * max(times),
                "total_ms": 1e3 * sum(times),
            }
        return out


class Profiler:
    """Context-manager based section timer."""

    def __init__(self) -> None:
        self.stats = ProfileStats()

    @contextmanager
    def section(self, name: str) -> Iterator[None]:
        t0 = time.perf_counter()
        try:
            yield
        finally:
            self.stats.add(name, time.perf_counter() - t0)

    def reset(self) -> None:
        self.stats = ProfileStats()
