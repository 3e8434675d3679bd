# MIT License (see LICENSE)
"""
Renderer adapters for the charge simulation.

This module provides an abstract base class for drawing particles and a few
concrete implementations. The simulation core has no rendering dependency;
a windowed host plugs its own 3D backend in by subclassing RendererAdapter.
"""
from __future__ import annotations
from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, TextIO
import sys

from ..types import Particle, ParticleKind

if TYPE_CHECKING:
    from ..simulation import Simulation


# RGB colour per kind, components in [0, 1].
KIND_COLORS: dict[ParticleKind, tuple[float, float, float]] = {
    ParticleKind.ELECTRON: (0.99, 0.98, 0.0),
    ParticleKind.PROTON: (0.9, 0.16, 0.22),
    ParticleKind.NEUTRON: (0.51, 0.51, 0.51),
}


class RendererAdapter(ABC):
    """
    Abstract base class for renderer implementations.

    Usage:
        renderer = MyRenderer()
        renderer.begin_frame(sim.tick)
        for particle in sim.particles:
            renderer.draw_particle(particle)
        renderer.end_frame()

    Or use the convenience method:
        renderer.render_simulation(sim)
    """

    @abstractmethod
    def begin_frame(self, tick: int) -> None:
        """Begin a new frame. ``tick`` is the number of completed steps."""
        ...

    @abstractmethod
    def draw_particle(self, particle: Particle) -> None:
        """Draw a single particle (and its trail, if the backend wants to)."""
        ...

    @abstractmethod
    def end_frame(self) -> None:
        ...

    def render_simulation(self, simulation: "Simulation") -> None:
        self.begin_frame(simulation.tick)
        for particle in simulation.particles:
            self.draw_particle(particle)
        self.end_frame()


class DebugRenderer(RendererAdapter):
    """
    Text renderer writing one line per particle.

    Output:
        === Tick 3 ===
        [1] electron @ (199.99, 0.00, 0.00) v=(-0.00, 0.00, 0.00)
        [2] proton @ (99.99, 0.00, 0.00) v=(-0.00, 0.00, 0.00)
    """

    def __init__(self, output: TextIO | None = None, verbose: bool = True):
        self.output = output or sys.stdout
        self.verbose = verbose

    def begin_frame(self, tick: int) -> None:
        self.output.write(f"=== Tick {tick} ===\n")

    def draw_particle(self, particle: Particle) -> None:
        x, y, z = particle.position
        line = f"[{particle.id}] {particle.kind.value} @ ({x:.2f}, {y:.2f}, {z:.2f})"
        if self.verbose:
            vx, vy, vz = particle.velocity
            line += f" v=({vx:.2f}, {vy:.2f}, {vz:.2f})"
        self.output.write(line + "\n")

    def end_frame(self) -> None:
        self.output.write("\n")
        self.output.flush()


class NullRenderer(RendererAdapter):
    """No-op renderer, for headless runs and benchmarks."""

    def begin_frame(self, tick: int) -> None:
        pass

    def draw_particle(self, particle: Particle) -> None:
        pass

    def end_frame(self) -> None:
        pass


class BufferedRenderer(RendererAdapter):
    """
    Renderer that records every frame as plain data.

    Example:
        renderer = BufferedRenderer()
        for _ in range(100):
            sim.step()
            renderer.render_simulation(sim)

        for frame in renderer.frames:
            print(frame["tick"], len(frame["particles"]))
    """

    def __init__(self, include_trails: bool = False):
        self.include_trails = include_trails
        self.frames: list[dict] = []
        self._current_frame: dict | None = None

    def begin_frame(self, tick: int) -> None:
        self._current_frame = {"tick": tick, "particles": []}

    def draw_particle(self, particle: Particle) -> None:
        if self._current_frame is None:
            return
        record = {
            "id": particle.id,
            "kind": particle.kind.value,
            "color": KIND_COLORS[particle.kind],
            "position": particle.position.tolist(),
        }
        if self.include_trails and particle.trail is not None:
            record["trail"] = particle.trail.points().tolist()
        self._current_frame["particles"].append(record)

    def end_frame(self) -> None:
        if self._current_frame is not None:
            self.frames.append(self._current_frame)
            self._current_frame = None

    def clear(self) -> None:
        self.frames.clear()
