# MIT License (see LICENSE)
"""
Core type definitions for the charge simulation.

Defines the fundamental data structures:
- ParticleKind: electron, proton or neutron.
- Trail: bounded history of recent positions, used only for drawing.
- Particle: the simulated point charge with its kinematic state.

The equations of motion are the explicit Euler update with an implicit
timestep of one tick:
  v ← v + a
  x ← x + v
"""
from __future__ import annotations
from dataclasses import dataclass, field
from enum import Enum

import numpy as np

from .util import f32, zeros3


class ParticleKind(Enum):
    """The three particle species. Determines charge and mass."""
    ELECTRON = "electron"
    PROTON = "proton"
    NEUTRON = "neutron"

    @property
    def charge(self) -> float:
        from .core.forces import get_charge
        return get_charge(self)

    @property
    def mass(self) -> float:
        from .core.forces import get_mass
        return get_mass(self)

    @classmethod
    def parse(cls, name: str) -> "ParticleKind":
        """Look up a kind by its case-insensitive name, e.g. ``"Proton"``."""
        try:
            return cls(name.strip().lower())
        except ValueError:
            valid = ", ".join(k.value for k in cls)
            raise ValueError(f"Unknown particle kind {name!r} (expected one of: {valid})") from None


# =============================================================================
# Trail
# =============================================================================

class Trail:
    """
    Fixed-capacity ring buffer of past positions.

    Writes go to a rotating cursor so pushing never allocates. The buffer
    starts filled with the particle's initial position, so ``points()``
    always returns exactly ``capacity`` rows.

    Attributes:
        capacity: Number of positions retained.
    """

    def __init__(self, capacity: int, start) -> None:
        if capacity < 1:
            raise ValueError(f"Trail capacity must be >= 1, got {capacity}")
        self.capacity = int(capacity)
        self._buf = np.tile(f32(start), (self.capacity, 1))
        self._cursor = 0

    def push(self, position) -> None:
        """Record a position, overwriting the oldest entry."""
        self._buf[self._cursor] = position
        self._cursor = (self._cursor + 1) % self.capacity

    @property
    def latest(self) -> np.ndarray:
        return self._buf[(self._cursor - 1) % self.capacity].copy()

    def points(self) -> np.ndarray:
        """Positions ordered oldest to newest, shape (capacity, 3)."""
        return np.roll(self._buf, -self._cursor, axis=0)

    def copy(self) -> "Trail":
        other = Trail.__new__(Trail)
        other.capacity = self.capacity
        other._buf = self._buf.copy()
        other._cursor = self._cursor
        return other

    def __len__(self) -> int:
        return self.capacity


# =============================================================================
# Particle
# =============================================================================

@dataclass(eq=False)
class Particle:
    """
    A point charge with kinematic state.

    Attributes:
        kind: Particle species. Fixed at construction.
        position: Position [x, y, z].
        velocity: Velocity per tick [vx, vy, vz].
        acceleration: Acceleration applied during the last step.
        trail: Optional history of recent positions.
        id: Stable identity assigned by Simulation.insert() (-1 when unowned).
        mass: Derived from ``kind``; fixed at construction.
        origin: The particle this one was copied from, if any.

    Note:
        Particles compare by identity, never by value. Two particles that
        happen to share every field are still distinct bodies.
    """
    kind: ParticleKind
    position: np.ndarray | tuple[float, float, float] = (0.0, 0.0, 0.0)
    velocity: np.ndarray | tuple[float, float, float] = (0.0, 0.0, 0.0)
    acceleration: np.ndarray | tuple[float, float, float] = (0.0, 0.0, 0.0)
    trail: Trail | None = None
    id: int = -1
    mass: np.float32 = field(init=False)
    # Particle this one was copied from (None for originals).
    origin: "Particle | None" = field(default=None, init=False, repr=False)

    _FIXED = ("kind", "mass")

    def __post_init__(self) -> None:
        if not isinstance(self.kind, ParticleKind):
            raise TypeError(f"kind must be a ParticleKind, got {type(self.kind).__name__}")
        self.mass = np.float32(self.kind.mass)
        self.position = f32(self.position)
        self.velocity = f32(self.velocity)
        self.acceleration = f32(self.acceleration)

    def __setattr__(self, name, value) -> None:
        if name in self._FIXED and name in self.__dict__:
            raise AttributeError(f"Particle.{name} is fixed at construction")
        object.__setattr__(self, name, value)

    @classmethod
    def create(cls, kind: ParticleKind, position, trail_capacity: int | None = None) -> "Particle":
        """New particle at rest; attaches a trail when ``trail_capacity`` is given."""
        pos = f32(position)
        trail = Trail(trail_capacity, pos) if trail_capacity else None
        return cls(kind=kind, position=pos, velocity=zeros3(), acceleration=zeros3(), trail=trail)

    def create_trail(self, capacity: int) -> Trail:
        """Attach a fresh trail filled with the current position."""
        self.trail = Trail(capacity, self.position)
        return self.trail

    @property
    def charge(self) -> float:
        return self.kind.charge

    def copy(self, include_trail: bool = True) -> "Particle":
        """Independent value copy that keeps the same id and remembers its origin."""
        clone = Particle(
            kind=self.kind,
            position=self.position.copy(),
            velocity=self.velocity.copy(),
            acceleration=self.acceleration.copy(),
            trail=self.trail.copy() if (include_trail and self.trail is not None) else None,
            id=self.id,
        )
        clone.origin = self.root
        return clone

    @property
    def root(self) -> "Particle":
        """The original particle behind any chain of copies."""
        return self if self.origin is None else self.origin

    def same_as(self, other: "Particle") -> bool:
        """True when ``other`` is this particle (or a snapshot copy of it)."""
        if other.root is self.root:
            return True
        return self.id >= 0 and other.id == self.id
