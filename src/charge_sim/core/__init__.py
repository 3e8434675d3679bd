# MIT License (see LICENSE)
"""
Core physics of the charge simulation.

This subpackage provides:
    - Force model: charge/mass lookup and pairwise Coulomb-style acceleration.
    - Integrator: explicit Euler tick.
    - Invariants: energy, momentum and charge diagnostics.

Typical usage:
    from charge_sim.core import net_acceleration, euler_step

    acc = net_acceleration(particle, snapshot)
    euler_step(particle, acc)
"""
from .forces import (
    get_charge,
    get_mass,
    pairwise_acceleration,
    net_acceleration,
)
from .integrators import euler_step
from .invariants import kinetic_energy, linear_momentum, total_charge

__all__ = [
    # Force model
    "get_charge",
    "get_mass",
    "pairwise_acceleration",
    "net_acceleration",
    # Integrator
    "euler_step",
    # Diagnostics
    "kinetic_energy",
    "linear_momentum",
    "total_charge",
]
