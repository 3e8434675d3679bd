# MIT License (see LICENSE)
"""
Diagnostic quantities of a particle system.

Useful when debugging the integrator. The toy force law is not momentum
conserving in general (the acceleration on each body is divided by its own
mass only), so these are for inspection rather than assertions about
conservation.
"""
from __future__ import annotations
from collections.abc import Iterable

import numpy as np

from ..types import Particle


def kinetic_energy(particles: Iterable[Particle]) -> float:
    """
    Total kinetic energy, T = Σ 0.5 * m * v².
    """
    ke = 0.0
    for p in particles:
        v_sq = float(np.dot(p.velocity, p.velocity))
        ke += 0.5 * float(p.mass) * v_sq
    return ke


def linear_momentum(particles: Iterable[Particle]) -> np.ndarray:
    """
    Total linear momentum P = Σ m * v as a float64 vector [Px, Py, Pz].
    """
    p_total = np.zeros(3, dtype=np.float64)
    for p in particles:
        p_total += float(p.mass) * p.velocity.astype(np.float64)
    return p_total


def total_charge(particles: Iterable[Particle]) -> float:
    """Net charge of the system in Coulombs."""
    return sum(p.charge for p in particles)
