# MIT License (see LICENSE)
"""
Exception types raised by the simulation core.
"""
from __future__ import annotations


class ChargeSimError(Exception):
    """Base class for errors raised by charge_sim."""


class InsufficientParticlesError(ChargeSimError, ValueError):
    """
    Raised when a net acceleration is requested but no other particle exists.

    A lone particle has nothing to interact with, so its net force is not
    defined by the pairwise sum. Callers must add a second particle first.
    """

    def __init__(self, count: int):
        self.count = count
        super().__init__(
            f"net acceleration needs at least 2 distinct particles, got {count}"
        )
