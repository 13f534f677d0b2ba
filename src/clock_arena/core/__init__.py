# MIT License (see LICENSE)
"""
Clock math and actor kinematics.

This subpackage provides:
    - Angles: Wall-clock time to hand angles, angle normalization.
    - Bearing: Dial bearing of a position on the face.
    - Movement: Tank-style and birds-eye movement integration.

Typical usage:
    from clock_arena.core import hand_angles, angular_position

    angles = hand_angles()
    facing_hand = abs(angles.second - angular_position(x, z)) < 0.1
"""
from .angles import (
    degrees_to_radians,
    hour_angle,
    minute_angle,
    second_angle,
    normalize_angle,
    hand_angles,
)
from .bearing import angular_position, bearing_of
from .movement import (
    MoveInput,
    movement_from_input,
    advance,
    normalize_movement,
    birds_eye_advance,
    is_moving,
    is_moving_birds_eye,
)

__all__ = [
    # Angles
    "degrees_to_radians",
    "hour_angle",
    "minute_angle",
    "second_angle",
    "normalize_angle",
    "hand_angles",
    # Bearing
    "angular_position",
    "bearing_of",
    # Movement
    "MoveInput",
    "movement_from_input",
    "advance",
    "normalize_movement",
    "birds_eye_advance",
    "is_moving",
    "is_moving_birds_eye",
]
