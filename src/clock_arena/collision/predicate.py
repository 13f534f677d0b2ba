# MIT License (see LICENSE)
"""
Per-frame "is the hand touching the actor" test.

The hand touches the actor when the distance from the actor center to the
hand segment is within actor radius + hand half-width. Once blocked, the
release threshold is widened by a hysteresis buffer so sub-pixel jitter at
the contact distance cannot make the signal flicker.
"""
from __future__ import annotations

import numpy as np

from ..config import ArenaConfig
from .segment import distance_to_hand


def raw_collision(distance: float, actor_radius: float, hand_half_width: float) -> bool:
    """True if the two shapes overlap or touch at this distance."""
    return distance <= actor_radius + hand_half_width


def collision_with_hysteresis(
    distance: float,
    actor_radius: float,
    hand_half_width: float,
    hysteresis_buffer: float,
    was_already_blocked: bool,
) -> bool:
    """
    Contact test whose threshold grows by `hysteresis_buffer` while blocked.

    Breaking contact therefore needs strictly more separation than making
    contact did (for any positive buffer).
    """
    threshold = actor_radius + hand_half_width
    if was_already_blocked:
        threshold += hysteresis_buffer
    return distance <= threshold


def check_hand_collision(
    angle: float,
    point: np.ndarray | tuple[float, float],
    config: ArenaConfig | None = None,
    was_blocked: bool = False,
) -> bool:
    """
    Test the second hand at `angle` against an actor at `point`.

    Uses the hand segment, actor radius, half-width and hysteresis buffer
    from `config` (defaults when omitted).
    """
    cfg = config if config is not None else ArenaConfig()
    distance = distance_to_hand(point, angle, cfg.hand_start, cfg.hand_end)
    return collision_with_hysteresis(
        distance,
        cfg.actor_radius,
        cfg.hand_half_width,
        cfg.hysteresis_buffer,
        was_blocked,
    )
