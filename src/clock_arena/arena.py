# MIT License (see LICENSE)
"""
Per-session frame driver for an actor on the clock face.

The Arena ties the pieces together once per frame:
    1. Clamp the frame delta.
    2. Read the hand angles for the given wall-clock moment.
    3. Clamp the proposed actor position to the playable disc.
    4. Test the second hand against the actor (hysteresis-aware) and
       debounce the result through the CollisionStateManager. While
       blocked the hand is held: the test uses the angle where it was
       caught, not the live one, so the actor releases it by walking away.
    5. Track how long the hand has been held. When the hold reaches
       config.hold_duration the block is released and the hand passes
       through the actor until they separate.

Structure:
    - User creates an Arena (optionally with an ArenaConfig and Profiler).
    - Each frame the user proposes a position and calls step().
    - The returned ArenaFrame carries everything a renderer needs.
"""
from __future__ import annotations
import logging
from contextlib import nullcontext
from dataclasses import dataclass, field
from datetime import datetime

import numpy as np

from .config import ArenaConfig
from .types import Actor, HandAngles
from .util import f64
from .profiler import Profiler
from .core.angles import hand_angles
from .core.movement import MoveInput, advance, birds_eye_advance, movement_from_input
from .collision.boundary import clamp_to_circle
from .collision.predicate import check_hand_collision
from .collision.state import CollisionStateManager, DEBOUNCE_EPS

logger = logging.getLogger(__name__)

# Start at 12 o'clock, past the tip of the drawn hand, facing the center.
DEFAULT_START = (0.0, 4.6)
DEFAULT_HEADING = float(np.pi)


@dataclass(frozen=True)
class ArenaFrame:
    """
    Result of one Arena.step().

    Attributes:
        time: Session time after the step in seconds.
        dt: Frame delta actually used (after clamping).
        angles: Live hand angles for the frame's moment.
        display_second: Second hand angle to draw; frozen at the blocked
                        angle while blocked, live otherwise.
        is_blocked: Debounced blocked state.
        blocked_at_angle: Angle where the current block began (only
                          meaningful while is_blocked).
        just_blocked: A block began this frame.
        just_unblocked: The block ended this frame through separation.
        hold_completed: The hold reached hold_duration this frame.
        hold_time: Seconds the current block has lasted.
        position: Actor position after containment.
    """
    time: float
    dt: float
    angles: HandAngles
    display_second: float
    is_blocked: bool
    blocked_at_angle: float
    just_blocked: bool
    just_unblocked: bool
    hold_completed: bool
    hold_time: float
    position: np.ndarray


@dataclass
class Arena:
    """
    One actor on one clock face.

    Attributes:
        config: Tunable parameters.
        actor: The tracked actor. Defaults to the 12 o'clock start spot; its
               radius is set from config.actor_radius.
        dt: Default frame delta used when step() is called without one.
        profiler: Optional Profiler timing the angles/boundary/collision phases.
        manager: Collision state machine; built from config when omitted.
                 A supplied manager must use the configured debounce times.
    """
    config: ArenaConfig = field(default_factory=ArenaConfig)
    actor: Actor | None = None
    dt: float = 1 / 60
    profiler: Profiler | None = None
    manager: CollisionStateManager | None = None

    # Runtime state
    time: float = 0.0
    hold_time: float = 0.0
    passing_through: bool = False

    def __post_init__(self) -> None:
        cfg = self.config
        if self.actor is None:
            self.actor = Actor(position=DEFAULT_START, heading=DEFAULT_HEADING)
        # The configured collision radius applies to supplied actors too.
        self.actor.radius = cfg.actor_radius
        if self.manager is None:
            self.manager = CollisionStateManager.from_config(cfg)
        elif (self.manager.block_debounce, self.manager.unblock_debounce) != (
            cfg.block_debounce, cfg.unblock_debounce
        ):
            raise ValueError(
                "manager debounce times "
                f"({self.manager.block_debounce}, {self.manager.unblock_debounce}) "
                f"do not match config ({cfg.block_debounce}, {cfg.unblock_debounce})"
            )
        self.actor.position = clamp_to_circle(
            self.actor.position,
            self.actor.position,
            self.config.arena_radius,
            self.config.boundary_margin,
        )

    @property
    def is_blocked(self) -> bool:
        return self.manager.is_blocked

    def propose_move(self, keys: MoveInput, dt: float, birds_eye: bool = False) -> np.ndarray:
        """
        Turn directional input into a desired position for step().

        Updates the actor heading; the position itself only changes when
        the returned point is passed to step().
        """
        cfg = self.config
        x, z = self.actor.x, self.actor.z
        if birds_eye:
            nx, nz, heading = birds_eye_advance(x, z, keys, dt, cfg.birds_eye_speed)
            if nx == x and nz == z:
                heading = self.actor.heading
        else:
            forward, turn = movement_from_input(keys)
            nx, nz, heading = advance(
                x, z, self.actor.heading, forward, turn, dt, cfg.walk_speed, cfg.turn_speed
            )
        self.actor.heading = heading
        return f64((nx, nz))

    def step(
        self,
        dt: float | None = None,
        moment: datetime | None = None,
        desired: np.ndarray | tuple[float, float] | None = None,
    ) -> ArenaFrame:
        """
        Advance the session by one frame.

        Args:
            dt: Frame delta in seconds; defaults to self.dt and is capped at
                config.max_frame_delta.
            moment: Wall-clock time driving the hands; now() when omitted.
            desired: Position the actor tries to move to; None keeps it still.

        Returns:
            ArenaFrame describing the frame.

        Raises:
            ValueError: If dt is negative.
        """
        cfg = self.config
        h = self.dt if dt is None else dt
        if h < 0:
            raise ValueError(f"dt must be non-negative, got {h}")
        if h > cfg.max_frame_delta:
            logger.debug("frame delta %.4f clamped to %.4f", h, cfg.max_frame_delta)
            h = cfg.max_frame_delta

        with self._section("angles"):
            angles = hand_angles(moment)

        if desired is not None:
            with self._section("boundary"):
                self.actor.position = clamp_to_circle(
                    self.actor.position, desired, cfg.arena_radius, cfg.boundary_margin
                )

        with self._section("collision"):
            result, hold_completed = self._update_collision(angles.second, h)

        self.time += h
        m = self.manager
        return ArenaFrame(
            time=self.time,
            dt=h,
            angles=angles,
            display_second=m.blocked_at_angle if m.is_blocked else angles.second,
            is_blocked=m.is_blocked,
            blocked_at_angle=m.blocked_at_angle,
            just_blocked=result.just_blocked,
            just_unblocked=result.just_unblocked,
            hold_completed=hold_completed,
            hold_time=self.hold_time,
            position=self.actor.position.copy(),
        )

    def _update_collision(self, angle: float, dt: float):
        cfg = self.config
        m = self.manager

        # A held hand stays where it was caught until released.
        held_angle = m.blocked_at_angle if m.is_blocked else angle
        touching = self._touching(held_angle, m.is_blocked)
        if self.passing_through:
            # The hand keeps passing through until it has fully left the actor.
            if not self._touching(angle, False):
                self.passing_through = False
            touching = False

        result = m.tick(touching, held_angle, dt)

        hold_completed = False
        if result.just_blocked:
            self.hold_time = 0.0
        elif result.is_blocked:
            self.hold_time += dt
            if self.hold_time + DEBOUNCE_EPS >= cfg.hold_duration:
                logger.info(
                    "hand held for %.2f s at %.4f rad, releasing",
                    self.hold_time, m.blocked_at_angle,
                )
                m.force_unblock()
                self.passing_through = True
                self.hold_time = 0.0
                hold_completed = True
        else:
            self.hold_time = 0.0
        return result, hold_completed

    def _touching(self, angle: float, was_blocked: bool) -> bool:
        return check_hand_collision(angle, self.actor.position, self.config, was_blocked)

    def teleport(self, point: np.ndarray | tuple[float, float]) -> None:
        """Move the actor directly (still kept inside the disc); collision state is untouched."""
        self.actor.position = clamp_to_circle(
            self.actor.position, point, self.config.arena_radius, self.config.boundary_margin
        )

    def reset(self) -> None:
        """Release any block and clear the hold timer."""
        self.manager.force_unblock()
        self.hold_time = 0.0
        self.passing_through = False

    def _section(self, name: str):
        if self.profiler is None:
            return nullcontext()
        return self.profiler.section(name)

