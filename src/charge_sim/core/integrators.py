# MIT License (see LICENSE)
"""
Time stepping for particle kinematics.

The simulation advances in whole ticks with no delta-time scaling; render
frame time never enters the physics. Explicit Euler with dt = 1:
    v(t+1) = v(t) + a(t)
    x(t+1) = x(t) + v(t+1)

Note that the position update uses the freshly updated velocity
(semi-implicit ordering), matching the order the tick is committed in.

Reference:
    https://en.wikipedia.org/wiki/Euler_method
"""
from __future__ import annotations

import numpy as np

from ..types import Particle


def euler_step(particle: Particle, acceleration: np.ndarray) -> None:
    """
    Commit one tick for ``particle`` given its precomputed acceleration.

    Args:
        particle: Particle to advance (modified in-place).
        acceleration: Acceleration for this tick, computed from the
            start-of-tick state of the whole system.
    """
    particle.acceleration = np.array(acceleration, dtype=np.float32)
    particle.velocity = particle.velocity + particle.acceleration
    particle.position = particle.position + particle.velocity
    if particle.trail is not None:
        particle.trail.push(particle.position)
