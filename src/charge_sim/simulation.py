# MIT License (see LICENSE)
"""
The simulation container and its tick.

The Simulation class owns every particle and advances them together:
- Particles are created from an initial list or inserted at runtime.
- Each step() reads a snapshot of the whole system, computes every
  particle's acceleration from it, and only then commits the new state.
  Results therefore never depend on iteration order.

Structure:
    - Host creates a Simulation with an initial particle list.
    - Host calls insert() on discrete input events.
    - Host calls step() once per frame and reads positions() to draw.
"""
from __future__ import annotations
import logging
from contextlib import nullcontext
from dataclasses import InitVar, dataclass, field
from typing import Iterable, Union

import numpy as np

from .config import ParticleSpec, SimulationConfig
from .core.forces import net_acceleration
from .core.integrators import euler_step
from .errors import InsufficientParticlesError
from .profiler import Profiler
from .types import Particle, ParticleKind
from .util import f32, random_vector

logger = logging.getLogger(__name__)

# Accepted forms of an initial-list entry.
InitialEntry = Union[ParticleSpec, ParticleKind, tuple]


@dataclass
class Simulation:
    """
    N-body world of charged particles.

    Attributes:
        initial: Ordered initial particles. Each entry is a ParticleSpec, a
                 ``(kind, position_or_None)`` tuple, or a bare ParticleKind.
        config: Spawn bounds, trail settings and seed.
        rng: Random source for positions. Defaults to
             ``np.random.default_rng(config.seed)``.
        profiler: Optional Profiler; step() records "forces" and "integrate".
        particles: Owned particles in insertion order.
        tick: Number of completed steps.
    """
    initial: InitVar[Iterable[InitialEntry]] = ()
    config: SimulationConfig = field(default_factory=SimulationConfig)
    rng: np.random.Generator | None = None
    profiler: Profiler | None = None

    # Internal state
    particles: list[Particle] = field(default_factory=list, init=False)
    tick: int = field(default=0, init=False)

    def __post_init__(self, initial: Iterable[InitialEntry]) -> None:
        if self.rng is None:
            self.rng = np.random.default_rng(self.config.seed)
        self._next_id = 1
        for entry in initial:
            kind, position = _unpack(entry)
            self.insert(kind, position)
        logger.info(
            "Simulation created with %d particles (trail=%s)",
            len(self.particles),
            self.config.enable_trail,
        )

    def insert(self, kind: ParticleKind, position=None) -> Particle:
        """
        Add a new particle at rest.

        Args:
            kind: Particle species.
            position: Explicit [x, y, z], or None for a random position in
                      ``config.spawn_bounds``.

        Returns:
            The inserted particle, with its id assigned.
        """
        if position is None:
            lo, hi = self.config.spawn_bounds
            position = random_vector(self.rng, lo, hi)
        capacity = self.config.trail_capacity if self.config.enable_trail else None
        particle = Particle.create(kind, position, trail_capacity=capacity)
        return self.add_particle(particle)

    def add_particle(self, particle: Particle) -> Particle:
        """
        Take ownership of an already built particle, assigning its id.

        A trail is attached when trails are enabled and the particle has none.
        """
        particle.id = self._next_id
        self._next_id += 1
        if self.config.enable_trail and particle.trail is None:
            particle.create_trail(self.config.trail_capacity)
        self.particles.append(particle)
        logger.debug(
            "Inserted %s #%d at %s", particle.kind.value, particle.id, particle.position.tolist()
        )
        return particle

    def _section(self, name: str):
        if self.profiler is None:
            return nullcontext()
        return self.profiler.section(name)

    def _accelerations(self) -> list[np.ndarray]:
        """Accelerations of every particle, computed from one start-of-tick snapshot."""
        snapshot = [p.copy(include_trail=False) for p in self.particles]
        return [net_acceleration(p, snapshot) for p in snapshot]

    def step(self) -> None:
        """
        Advance every particle by exactly one tick.

        An empty simulation still counts the tick.

        Raises:
            InsufficientParticlesError: If exactly one particle exists. The
                state is left untouched.
        """
        if len(self.particles) == 1:
            raise InsufficientParticlesError(1)

        with self._section("forces"):
            accelerations = self._accelerations()

        with self._section("integrate"):
            for particle, acc in zip(self.particles, accelerations):
                euler_step(particle, acc)

        self.tick += 1
        logger.debug("Tick %d: advanced %d particles", self.tick, len(self.particles))

    # ------------------------------------------------------------------
    # Read accessors for the host
    # ------------------------------------------------------------------

    def __len__(self) -> int:
        return len(self.particles)

    def positions(self) -> np.ndarray:
        """Current positions, float32 array of shape (N, 3)."""
        if not self.particles:
            return np.zeros((0, 3), dtype=np.float32)
        return np.stack([p.position for p in self.particles]).astype(np.float32)

    def kinds(self) -> list[ParticleKind]:
        return [p.kind for p in self.particles]

    def trails(self) -> list[np.ndarray]:
        """Trail points (oldest to newest) of each particle that has a trail."""
        return [p.trail.points() for p in self.particles if p.trail is not None]


def _unpack(entry: InitialEntry) -> tuple[ParticleKind, np.ndarray | None]:
    if isinstance(entry, ParticleSpec):
        kind, position = entry.kind, entry.position
    elif isinstance(entry, ParticleKind):
        kind, position = entry, None
    else:
        kind, position = entry
    return kind, None if position is None else f32(position)
