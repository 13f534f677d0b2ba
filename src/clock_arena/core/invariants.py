# MIT License (see LICENSE)
"""
Checks for properties that must hold throughout a session.

Used by tests and benchmarks to verify the collision state machine and the
arena containment after arbitrary sequences of frames:
- A collision state is never pending in both directions, and a timer is
  only non-zero while its pending flag is set.
- Every applied actor position lies inside the playable disc.
"""
from __future__ import annotations
from typing import Iterable

import numpy as np

from ..collision.state import CollisionStateManager
from ..util import f64, norm

# Positions clamped onto the boundary may land a rounding error outside it.
CONTAINMENT_TOL: float = 1e-9


def state_is_consistent(manager: CollisionStateManager) -> bool:
    """
    True if the manager's flags and timers describe a reachable state.

    Pending timers must be zero unless their flag is set, and a pending
    sub-state must sit inside its parent (block while unblocked, unblock
    while blocked).
    """
    if manager.pending_block and manager.pending_unblock:
        return False
    if not manager.pending_block and manager.pending_block_time != 0.0:
        return False
    if not manager.pending_unblock and manager.pending_unblock_time != 0.0:
        return False
    # Pending sub-states only exist inside their parent state.
    if manager.pending_block and manager.is_blocked:
        return False
    if manager.pending_unblock and not manager.is_blocked:
        return False
    return True


def all_contained(
    points: Iterable[np.ndarray | tuple[float, float]],
    radius: float,
    margin: float,
) -> bool:
    """True if every point is within radius - margin (plus rounding slack)."""
    limit = radius - margin + CONTAINMENT_TOL
    return all(norm(f64(p)) <= limit for p in points)
