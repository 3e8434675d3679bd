# MIT License (see LICENSE)
"""
Simple profiling utilities for the simulation step.

Measures the force and integration phases of Simulation.step() without
external dependencies.

Example:
    profiler = Profiler()
    sim = Simulation(DEFAULT_SCENE, profiler=profiler)
    sim.step()
    print(profiler.stats.summary())
"""
from __future__ import annotations
import time
from contextlib import contextmanager
from dataclasses import dataclass, field


@dataclass
class ProfileStats:
    """Timing samples (seconds) per named section."""
    samples: dict[str, list[float]] = field(default_factory=dict)

    def add(self, name: str, dt: float) -> None:
        self.samples.setdefault(name, []).append(dt)

    def summary(self) -> dict[str, dict[str, float]]:
        """
        Per-section statistics: 'n' (sample count), 'mean_ms', 'max_ms' and
        'total_ms'.
        """
        out = {}
        for name, times in self.samples.items():
            total = sum(times)
            out[name] = {
                "n": len(times),
                "mean_ms": 1e3 * total / len(times),
                "max_ms": 1e3 * max(times),
                "total_ms": 1e3 * total,
            }
        return out


class Profiler:
    """Context-manager based section timer."""

    def __init__(self) -> None:
        self.stats = ProfileStats()

    @contextmanager
    def section(self, name: str):
        t0 = time.perf_counter()
        try:
            yield
        finally:
            self.stats.add(name, time.perf_counter() - t0)
