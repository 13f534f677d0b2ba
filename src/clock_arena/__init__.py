# MIT License (see LICENSE)
"""
clock_arena - Clock-face geometry and second-hand collision for a walking actor.

This package turns wall-clock time into hand angles, detects when the
sweeping second hand touches a circular actor, debounces that contact into
a stable blocked/unblocked signal, and keeps the actor inside the round
clock face by sliding it along the rim.

Main entry points:
    - Arena: Per-session frame driver tying everything together.
    - ArenaConfig: All tunable distances and durations.
    - CollisionStateManager: The debounced blocked/unblocked state machine.
    - Actor, HandAngles, HandSegment: Value types.

Submodules:
    - core: Hand angles, bearings and actor movement.
    - collision: Hand distance, contact test, debounce and containment.
    - io: JSON config files and state snapshots.

Example:
    from clock_arena import Arena

    arena = Arena()
    frame = arena.step(dt=1/60, desired=(0.5, 4.6))
    if frame.is_blocked:
        print("holding the second hand at", frame.blocked_at_angle)
"""
from .arena import Arena, ArenaFrame
from .config import ArenaConfig
from .types import Actor, HandAngles, HandSegment
from .collision.state import CollisionStateManager, CollisionPhase, TickResult

__all__ = [
    # Session
    "Arena",
    "ArenaFrame",
    "ArenaConfig",
    # Types
    "Actor",
    "HandAngles",
    "HandSegment",
    # Collision state
    "CollisionStateManager",
    "CollisionPhase",
    "TickResult",
]
