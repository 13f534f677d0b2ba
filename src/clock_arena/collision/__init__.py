# MIT License (see LICENSE)
"""
Collision detection against the second hand and arena containment.

This subpackage provides:
    - Segment: Distance from a point to the rotating hand segment.
    - Predicate: Per-frame contact test with optional hysteresis.
    - State: Debounced blocked/unblocked state machine.
    - Boundary: Inside-the-disc test and slide-along-edge clamping.

Typical usage:
    from clock_arena.collision import CollisionStateManager, check_hand_collision

    manager = CollisionStateManager()
    touching = check_hand_collision(angle, actor.position, config, manager.is_blocked)
    result = manager.tick(touching, angle, dt)
"""
from .segment import closest_point_on_hand, distance_to_hand
from .predicate import raw_collision, collision_with_hysteresis, check_hand_collision
from .state import CollisionStateManager, CollisionPhase, TickResult
from .boundary import boundary_radius, distance_from_center, is_inside, clamp_to_circle

__all__ = [
    # Segment
    "closest_point_on_hand",
    "distance_to_hand",
    # Predicate
    "raw_collision",
    "collision_with_hysteresis",
    "check_hand_collision",
    # State
    "CollisionStateManager",
    "CollisionPhase",
    "TickResult",
    # Boundary
    "boundary_radius",
    "distance_from_center",
    "is_inside",
    "clamp_to_circle",
]
