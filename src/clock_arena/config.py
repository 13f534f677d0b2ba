# MIT License (see LICENSE)
"""
Tunable parameters for an arena session.

ArenaConfig groups every value the geometry and debounce code depends on,
so nothing downstream hardcodes a literal. Instances are immutable; use
replace() to derive a variant.
"""
from __future__ import annotations
from dataclasses import dataclass, fields, replace as _dc_replace
from typing import Any

from . import constants as C


@dataclass(frozen=True)
class ArenaConfig:
    """
    Configuration surface of the arena.

    Attributes:
        arena_radius: Radius of the clock face.
        boundary_margin: Distance kept between the actor and the rim.
        actor_radius: Collision radius of the actor.
        hand_half_width: Half-width of the second hand for collision.
        hand_start: Distance from the pivot where the hand segment starts.
        hand_end: Distance from the pivot where the hand segment ends.
        hysteresis_buffer: Extra separation needed to leave the blocked state.
        block_debounce: Seconds of continuous contact before blocking (0 = instant).
        unblock_debounce: Seconds of continuous separation before unblocking.
        max_frame_delta: Upper bound applied to each frame delta.
        hold_duration: Seconds of continuous blocking that complete a hold.
        walk_speed: Forward speed for tank-style movement.
        turn_speed: Turn rate for tank-style movement.
        birds_eye_speed: Speed for absolute-direction movement.

    Raises:
        ValueError: On construction if any value is out of range.
    """
    arena_radius: float = C.CLOCK_RADIUS
    boundary_margin: float = C.BOUNDARY_MARGIN
    actor_radius: float = C.ACTOR_COLLISION_RADIUS
    hand_half_width: float = C.HAND_HALF_WIDTH
    hand_start: float = C.HAND_START_RADIUS
    hand_end: float = C.HAND_END_RADIUS
    hysteresis_buffer: float = C.COLLISION_HYSTERESIS
    block_debounce: float = C.BLOCK_DEBOUNCE_TIME
    unblock_debounce: float = C.UNBLOCK_DEBOUNCE_TIME
    max_frame_delta: float = C.MAX_FRAME_DELTA
    hold_duration: float = C.HOLD_DURATION
    walk_speed: float = C.WALK_SPEED
    turn_speed: float = C.TURN_SPEED
    birds_eye_speed: float = C.BIRDS_EYE_SPEED

    def __post_init__(self) -> None:
        if self.arena_radius <= 0:
            raise ValueError(f"arena_radius must be positive, got {self.arena_radius}")
        if not 0 <= self.boundary_margin < self.arena_radius:
            raise ValueError(
                f"boundary_margin must be in [0, arena_radius), got {self.boundary_margin}"
            )
        for name in ("actor_radius", "hand_half_width", "hysteresis_buffer",
                     "hand_start", "block_debounce", "unblock_debounce",
                     "walk_speed", "turn_speed", "birds_eye_speed"):
            value = getattr(self, name)
            if value < 0:
                raise ValueError(f"{name} must be non-negative, got {value}")
        if self.hand_end < self.hand_start:
            raise ValueError(
                f"hand_end ({self.hand_end}) must be >= hand_start ({self.hand_start})"
            )
        if self.max_frame_delta <= 0:
            raise ValueError(f"max_frame_delta must be positive, got {self.max_frame_delta}")
        if self.hold_duration <= 0:
            raise ValueError(f"hold_duration must be positive, got {self.hold_duration}")

    @property
    def contact_threshold(self) -> float:
        """Distance at or below which the hand touches the actor."""
        return self.actor_radius + self.hand_half_width

    @property
    def release_threshold(self) -> float:
        """Distance the actor must exceed to stop touching once blocked."""
        return self.contact_threshold + self.hysteresis_buffer

    @property
    def effective_radius(self) -> float:
        """Radius of the playable disc (arena radius minus margin)."""
        return self.arena_radius - self.boundary_margin

    def replace(self, **changes: Any) -> "ArenaConfig":
        """Return a validated copy with the given fields changed."""
        return _dc_replace(self, **changes)

    @classmethod
    def field_names(cls) -> tuple[str, ...]:
        """Names of all config fields, in declaration order (the JSON keys)."""
        return tuple(f.name for f in fields(cls))
