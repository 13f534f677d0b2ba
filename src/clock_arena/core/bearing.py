# MIT License (see LICENSE)
"""
Bearing of a point on the clock face.

Gives "where on the dial" a position lies, in the same convention as the
hand angles so the two can be compared directly.
"""
from __future__ import annotations
import math

import numpy as np

from .angles import TWO_PI


def angular_position(x: float, z: float) -> float:
    """
    Bearing of (x, z) from the arena center, clockwise from 12 o'clock.

    NOTE: this is atan2(x, z), with x first. 12 o'clock is +z and clockwise
    is toward +x, so the arguments are swapped relative to the textbook
    atan2(y, x). Swapping them back rotates and mirrors every bearing.

    The origin has no direction; it is defined to have bearing 0.

    Returns:
        Angle in radians in [0, 2π).
    """
    if x == 0 and z == 0:
        return 0.0
    angle = math.atan2(x, z)
    if angle < 0:
        angle += TWO_PI
    if angle >= TWO_PI:
        angle = 0.0
    return angle


def bearing_of(point: np.ndarray | tuple[float, float]) -> float:
    """angular_position() for a point given as [x, z]."""
    return angular_position(float(point[0]), float(point[1]))
