# MIT License (see LICENSE)
"""
Containment of the actor inside the circular arena.

Moves that would leave the playable disc (radius minus margin) are not
rejected. The desired point is pulled back radially onto the boundary
circle, which keeps the tangential part of the move so the actor slides
along the rim instead of stopping dead.
"""
from __future__ import annotations

import numpy as np

from ..constants import CLOCK_RADIUS, BOUNDARY_MARGIN
from ..util import f64, norm


def boundary_radius(radius: float = CLOCK_RADIUS, margin: float = BOUNDARY_MARGIN) -> float:
    """Radius of the playable disc."""
    return radius - margin


def distance_from_center(point: np.ndarray | tuple[float, float]) -> float:
    """Euclidean distance of `point` from the pivot of the hands."""
    return norm(f64(point))


def is_inside(
    point: np.ndarray | tuple[float, float],
    radius: float = CLOCK_RADIUS,
    margin: float = BOUNDARY_MARGIN,
) -> bool:
    """True if `point` is within radius - margin of the center (boundary included)."""
    return norm(f64(point)) <= boundary_radius(radius, margin)


def clamp_to_circle(
    current: np.ndarray | tuple[float, float],
    desired: np.ndarray | tuple[float, float],
    radius: float = CLOCK_RADIUS,
    margin: float = BOUNDARY_MARGIN,
) -> np.ndarray:
    """
    Correct an attempted move so it stays inside the arena.

    Args:
        current: Position before the move.
        desired: Position the actor is trying to reach.
        radius: Arena radius.
        margin: Safety margin kept from the rim.

    Returns:
        `desired` if it is inside; otherwise `desired` scaled onto the
        boundary circle along its own bearing. If `desired` is exactly the
        center (no direction to scale along) `current` is returned.
    """
    p = f64(desired)
    if is_inside(p, radius, margin):
        return p

    d = norm(p)
    if d == 0.0:
        return f64(current)

    return p * (boundary_radius(radius, margin) / d)
