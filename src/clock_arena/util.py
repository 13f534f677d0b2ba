# MIT License (see LICENSE)
"""
Small vector helpers shared by the geometry modules.

Points live in the horizontal plane of the clock face and are stored as
numpy float64 arrays of shape (2,) holding (x, z). The arena center is the
origin, +z points at 12 o'clock and +x at 3 o'clock.
"""
from __future__ import annotations

import numpy as np


def f64(x) -> np.ndarray:
    """
    Convert any array-like to a float64 numpy array.

    Lets callers pass plain tuples/lists for points while the geometry
    code always works on arrays.
    """
    return np.array(x, dtype=np.float64)


def norm2(v: np.ndarray) -> float:
    """Squared magnitude of a 2D vector."""
    return float(v[0] * v[0] + v[1] * v[1])


def norm(v: np.ndarray) -> float:
    """Magnitude (length) of a 2D vector."""
    return float(np.sqrt(norm2(v)))


def direction(angle: float) -> np.ndarray:
    """
    Unit vector for a dial angle.

    Angle 0 is 12 o'clock (+z) and angles grow clockwise (toward +x), so
    the vector is (sin a, cos a) rather than the usual (cos a, sin a).
    """
    return np.array([np.sin(angle), np.cos(angle)], dtype=np.float64)
