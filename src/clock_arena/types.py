# MIT License (see LICENSE)
"""
Core value types for the clock arena.

Defines the plain data handled by the geometry code:
- HandAngles: the three hand angles derived from a wall-clock time.
- HandSegment: the rotating collision line of the second hand.
- Actor: the circular walker sharing the face with the hands.

All angles follow the dial convention: radians, 0 at 12 o'clock (+z),
increasing clockwise (toward +x).
"""
from __future__ import annotations
from dataclasses import dataclass

import numpy as np

from .constants import ACTOR_COLLISION_RADIUS
from .util import f64, direction


@dataclass(frozen=True)
class HandAngles:
    """
    Angles of the three clock hands at one instant.

    Attributes:
        hour: Hour hand angle in radians (smooth across the hour).
        minute: Minute hand angle in radians (smooth across the minute).
        second: Second hand angle in radians (smooth sub-second sweep).
    """
    hour: float
    minute: float
    second: float


@dataclass(frozen=True)
class HandSegment:
    """
    The second hand as a line segment anchored on the arena center.

    The segment runs along the hand direction from `start` to `end` units
    away from the pivot. It is rebuilt every frame from the current angle.

    Attributes:
        angle: Hand angle in radians.
        start: Distance from the center where the segment begins.
        end: Distance from the center where the segment ends.
    """
    angle: float
    start: float
    end: float

    def endpoints(self) -> tuple[np.ndarray, np.ndarray]:
        """Return (start_point, end_point) in arena coordinates."""
        d = direction(self.angle)
        return d * self.start, d * self.end

    @property
    def length(self) -> float:
        """Length of the collision segment."""
        return abs(self.end - self.start)


@dataclass
class Actor:
    """
    A circular actor walking on the clock face.

    Attributes:
        position: Center [x, z] in world units.
        heading: Facing direction in radians (0 faces +z).
        radius: Collision radius used against the second hand.
    """
    position: np.ndarray | tuple[float, float] = (0.0, 0.0)
    heading: float = 0.0
    radius: float = ACTOR_COLLISION_RADIUS

    def __post_init__(self) -> None:
        """Store the position as a float64 array."""
        self.position = f64(self.position)

    @property
    def x(self) -> float:
        """World x coordinate."""
        return float(self.position[0])

    @property
    def z(self) -> float:
        """World z coordinate (toward 12 o'clock)."""
        return float(self.position[1])
