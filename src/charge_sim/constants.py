# MIT License (see LICENSE)
"""
Physical constants used by the charge simulation.

These are toy magnitudes, not SI-accurate values. The masses in particular
are chosen so that the classic two-body demo (an electron and a proton a
hundred units apart) stays visible on screen for a while before the
particles fly apart.
"""
from __future__ import annotations

# Coulomb's constant, rounded: k ≈ 9 × 10⁹ N·m²/C²
K_COULOMB: float = 9e9

# Magnitude of the elementary charge in Coulombs.
ELEMENTARY_CHARGE: float = 1.6e-19

# Toy masses in kg. The electron is deliberately heavier than the nucleons.
ELECTRON_MASS: float = 9.1e-27
NUCLEON_MASS: float = 1.6e-27

# Half-open interval [lo, hi) for randomly placed particles, per axis.
DEFAULT_SPAWN_BOUNDS: tuple[float, float] = (-10.0, 10.0)

# Number of past positions kept per particle when trails are enabled.
DEFAULT_TRAIL_CAPACITY: int = 50
