# MIT License (see LICENSE)
"""
Force model for the charge simulation.

Maps particle kinds to their physical constants and computes the
electrostatic acceleration between point charges.

The force law is a simplified, axis-separable Coulomb-style interaction
(see maths below), not real electrostatics:

    a_axis = k * q_self * q_other / (|Δ_axis| * m_self)     if Δ_axis != 0
    a_axis = 0                                               otherwise

Each axis is treated independently, the separation enters linearly rather
than squared, and the denominator is unsigned, so the direction of the
acceleration comes only from the sign of the charge product. Changing any of
this changes the visible dynamics of the simulation.

Key concepts:
- All arithmetic is single precision (float32).
- net_acceleration is O(N) per particle, O(N²) for a full step.
"""
from __future__ import annotations
from collections.abc import Iterable

import numpy as np

from ..constants import K_COULOMB, ELEMENTARY_CHARGE, ELECTRON_MASS, NUCLEON_MASS
from ..errors import InsufficientParticlesError
from ..types import Particle, ParticleKind

_K = np.float32(K_COULOMB)

_CHARGES = {
    ParticleKind.ELECTRON: -ELEMENTARY_CHARGE,
    ParticleKind.PROTON: ELEMENTARY_CHARGE,
    ParticleKind.NEUTRON: 0.0,
}

_MASSES = {
    ParticleKind.ELECTRON: ELECTRON_MASS,
    ParticleKind.PROTON: NUCLEON_MASS,
    ParticleKind.NEUTRON: NUCLEON_MASS,
}


def get_charge(kind: ParticleKind) -> float:
    """Signed charge of a particle kind in Coulombs."""
    try:
        return _CHARGES[kind]
    except KeyError:
        raise TypeError(f"Not a ParticleKind: {kind!r}") from None


def get_mass(kind: ParticleKind) -> float:
    """Mass of a particle kind in kg."""
    try:
        return _MASSES[kind]
    except KeyError:
        raise TypeError(f"Not a ParticleKind: {kind!r}") from None


def pairwise_acceleration(particle: Particle, other: Particle) -> np.ndarray:
    """
    Acceleration of ``particle`` caused by ``other``.

    Args:
        particle: The body being accelerated.
        other: The body exerting the force.

    Returns:
        float32 vector [ax, ay, az]. Axes on which the two positions coincide
        exactly contribute zero.
    """
    # k * q1 * q2 evaluated left to right keeps the float32 product above
    # the denormal range.
    strength = _K * np.float32(get_charge(particle.kind)) * np.float32(get_charge(other.kind))
    separation = np.abs(other.position - particle.position)
    acc = np.zeros(3, dtype=np.float32)
    nonzero = separation != 0
    acc[nonzero] = strength / (separation[nonzero] * particle.mass)
    return acc


def net_acceleration(particle: Particle, others: Iterable[Particle]) -> np.ndarray:
    """
    Sum of pairwise accelerations on ``particle`` from every other particle.

    ``others`` may include ``particle`` itself (or a snapshot copy of it);
    it is skipped by identity, never by value.

    Raises:
        InsufficientParticlesError: If no other particle is left to interact with.
    """
    total = np.zeros(3, dtype=np.float32)
    seen = 0
    interacting = 0
    for other in others:
        seen += 1
        if particle.same_as(other):
            continue
        total += pairwise_acceleration(particle, other)
        interacting += 1
    if interacting == 0:
        raise InsufficientParticlesError(seen)
    return total
