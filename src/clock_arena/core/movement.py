# MIT License (see LICENSE)
"""
Actor movement integration from directional input.

Two control schemes are supported:
- Tank style (third-person camera): left/right turn the actor in place,
  forward/backward walk along the current heading.
- Birds-eye (overhead camera): keys map to absolute directions on the
  face and the actor turns to face where it walks.

Headings follow the scene convention: heading 0 faces +z and positive
headings turn left. Movement here is unconstrained; pass the result through
collision.boundary.clamp_to_circle before applying it.
"""
from __future__ import annotations
from dataclasses import dataclass

import numpy as np

from ..constants import WALK_SPEED, TURN_SPEED, BIRDS_EYE_SPEED


@dataclass(frozen=True)
class MoveInput:
    """Snapshot of the four directional controls for one frame."""
    forward: bool = False
    backward: bool = False
    left: bool = False
    right: bool = False


def movement_from_input(keys: MoveInput) -> tuple[int, int]:
    """
    Reduce directional input to (forward, turn) axes in {-1, 0, 1}.

    Opposite keys held together cancel out.
    """
    forward = 0
    turn = 0
    if keys.forward and not keys.backward:
        forward = 1
    elif keys.backward and not keys.forward:
        forward = -1
    if keys.left and not keys.right:
        turn = 1
    elif keys.right and not keys.left:
        turn = -1
    return forward, turn


def is_moving(keys: MoveInput) -> bool:
    """True if the tank-style controls produce any walk or turn."""
    forward, turn = movement_from_input(keys)
    return forward != 0 or turn != 0


def advance(
    x: float,
    z: float,
    heading: float,
    forward: float,
    turn: float,
    dt: float,
    walk_speed: float = WALK_SPEED,
    turn_speed: float = TURN_SPEED,
) -> tuple[float, float, float]:
    """
    Tank-style step: turn first, then walk along the new heading.

    Args:
        x, z: Current position.
        heading: Current heading in radians.
        forward: Walk axis in [-1, 1].
        turn: Turn axis in [-1, 1] (positive turns left).
        dt: Time step in seconds.

    Returns:
        (x, z, heading) after the step.
    """
    new_heading = heading + turn * turn_speed * dt
    step = forward * walk_speed * dt
    return (
        x + float(np.sin(new_heading)) * step,
        z + float(np.cos(new_heading)) * step,
        new_heading,
    )


def normalize_movement(x: float, z: float) -> tuple[float, float]:
    """Scale a movement vector down to unit length if it is longer than 1."""
    magnitude = float(np.hypot(x, z))
    if magnitude <= 1:
        return x, z
    return x / magnitude, z / magnitude


def is_moving_birds_eye(keys: MoveInput) -> bool:
    """True if any directional key is held (opposites still count as moving)."""
    return keys.forward or keys.backward or keys.left or keys.right


def birds_eye_advance(
    x: float,
    z: float,
    keys: MoveInput,
    dt: float,
    speed: float = BIRDS_EYE_SPEED,
) -> tuple[float, float, float]:
    """
    Absolute-direction step for the overhead camera.

    Forward moves toward 12 o'clock (+z). The overhead camera mirrors the
    x axis, so "left" on screen is +x in the world. Diagonals are normalized
    so they are no faster than cardinal moves.

    Returns:
        (x, z, heading) where heading faces the direction of travel, or 0
        when no key is held.
    """
    dx = 0.0
    dz = 0.0
    if keys.forward:
        dz += 1.0
    if keys.backward:
        dz -= 1.0
    if keys.left:
        dx += 1.0
    if keys.right:
        dx -= 1.0

    dx, dz = normalize_movement(dx, dz)
    dx *= speed * dt
    dz *= speed * dt

    heading = 0.0
    if dx != 0 or dz != 0:
        heading = float(np.arctan2(-dx, dz))

    return x + dx, z + dz, heading
