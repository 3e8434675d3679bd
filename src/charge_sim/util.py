# MIT License (see LICENSE)
"""
Utility functions for 3D vectors and random placement.

All kinematic state is single precision: vectors are numpy float32 arrays of
shape (3,).
"""
from __future__ import annotations

import numpy as np


def f32(x) -> np.ndarray:
    """
    Convert any array-like to a float32 numpy array.

    Allows tuple/list inputs for positions and velocities while keeping the
    simulation in single precision.
    """
    return np.array(x, dtype=np.float32)


def zeros3() -> np.ndarray:
    """A fresh float32 zero vector."""
    return np.zeros(3, dtype=np.float32)


def random_coordinate(rng: np.random.Generator, lo: float, hi: float) -> np.float32:
    """
    Draw one coordinate uniformly from [lo, hi).

    A draw of exactly zero is replaced by ``lo``, so no particle is ever
    spawned on a coordinate plane through the origin.
    """
    value = np.float32(rng.uniform(lo, hi))
    if value >= hi:
        # float32 rounding can land on hi itself
        value = np.nextafter(np.float32(hi), np.float32(lo))
    if value == 0.0:
        return np.float32(lo)
    return value


def random_vector(rng: np.random.Generator, lo: float, hi: float) -> np.ndarray:
    """Random position with each axis drawn independently by random_coordinate."""
    return np.array(
        [random_coordinate(rng, lo, hi) for _ in range(3)], dtype=np.float32
    )
