# MIT License (see LICENSE)
"""
Default tuning values for the clock arena.

Distances are in world units (the clock face has radius 5), durations in
seconds. These are only defaults: every value can be overridden through
ArenaConfig (see config.py) so callers never need to edit this file.
"""
from __future__ import annotations

# Clock face geometry
CLOCK_RADIUS: float = 5.0

# Safety margin kept between the actor and the rim of the face.
BOUNDARY_MARGIN: float = 0.1

# Collision footprint of the actor (generous, wider than the visual shell).
ACTOR_COLLISION_RADIUS: float = 0.4

# Half-width of the second hand for collision, wider than the drawn hand.
HAND_HALF_WIDTH: float = 0.15

# Extra separation required to break contact once blocked.
COLLISION_HYSTERESIS: float = 0.15

# Collision segment of the second hand, measured from the pivot.
# The end reaches almost to the rim so actors standing at the edge are caught.
HAND_START_RADIUS: float = 0.3
HAND_END_RADIUS: float = CLOCK_RADIUS * 0.95

# Debounce windows. Zero block debounce means instant blocking.
BLOCK_DEBOUNCE_TIME: float = 0.0
UNBLOCK_DEBOUNCE_TIME: float = 0.03  # ~2 frames at 60 Hz

# Frame deltas above this are clamped to avoid huge jumps after a stall.
MAX_FRAME_DELTA: float = 0.1

# Continuous hold of the second hand that completes a blocking episode.
HOLD_DURATION: float = 33.0

# Actor movement
WALK_SPEED: float = 0.8        # units/s
TURN_SPEED: float = 2.0        # rad/s
BIRDS_EYE_SPEED: float = 0.8   # units/s
