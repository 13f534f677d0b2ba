# MIT License (see LICENSE)
"""
Debounced blocked/unblocked state for an actor against the second hand.

The per-frame contact test is noisy near the contact distance. This module
turns it into a stable signal using two independent debounce windows:

    UNBLOCKED --contact held for block_debounce--> BLOCKED
    BLOCKED   --separation held for unblock_debounce--> UNBLOCKED

While a window is filling the manager is in a pending sub-state
(PENDING_BLOCK / PENDING_UNBLOCK). Any frame that breaks the condition
resets the pending timer to zero, so progress never carries across gaps.
The hand angle at the moment of blocking is recorded and stays frozen for
the whole episode.

Hysteresis is not applied here: the caller passes a contact flag computed
with the widened release threshold while blocked (see predicate.py).

Each tracked actor owns its own manager; instances share no state.
"""
from __future__ import annotations
import logging
from dataclasses import dataclass
from enum import Enum

from ..config import ArenaConfig
from ..constants import BLOCK_DEBOUNCE_TIME, UNBLOCK_DEBOUNCE_TIME

logger = logging.getLogger(__name__)

# Slack on the debounce comparison so that summing many small deltas reaches
# the same threshold as one large delta (10 * 0.01 != 0.1 in binary).
DEBOUNCE_EPS: float = 1e-9


class CollisionPhase(Enum):
    UNBLOCKED = "unblocked"
    PENDING_BLOCK = "pending_block"
    BLOCKED = "blocked"
    PENDING_UNBLOCK = "pending_unblock"


@dataclass(frozen=True)
class TickResult:
    """
    Outcome of one tick.

    Attributes:
        is_blocked: Stable debounced state after the tick.
        just_blocked: True only on the tick that entered BLOCKED.
        just_unblocked: True only on the tick that left BLOCKED through
                        the unblock debounce (not through force_unblock).
    """
    is_blocked: bool
    just_blocked: bool = False
    just_unblocked: bool = False


class CollisionStateManager:
    """
    Explicit state machine debouncing the raw contact signal.

    Attributes:
        block_debounce: Seconds contact must hold before blocking (0 = instant).
        unblock_debounce: Seconds separation must hold before unblocking.
        is_blocked: Stable output.
        blocked_at_angle: Hand angle recorded when the current block began.
        pending_block / pending_block_time: Progress toward blocking.
        pending_unblock / pending_unblock_time: Progress toward unblocking.
    """

    def __init__(
        self,
        block_debounce: float = BLOCK_DEBOUNCE_TIME,
        unblock_debounce: float = UNBLOCK_DEBOUNCE_TIME,
    ) -> None:
        if block_debounce < 0:
            raise ValueError(f"block_debounce must be non-negative, got {block_debounce}")
        if unblock_debounce < 0:
            raise ValueError(f"unblock_debounce must be non-negative, got {unblock_debounce}")
        self.block_debounce = block_debounce
        self.unblock_debounce = unblock_debounce

        self.is_blocked = False
        self.blocked_at_angle = 0.0
        self.pending_block = False
        self.pending_block_time = 0.0
        self.pending_unblock = False
        self.pending_unblock_time = 0.0

    @classmethod
    def from_config(cls, config: ArenaConfig) -> "CollisionStateManager":
        """Build a manager with the debounce windows of an ArenaConfig."""
        return cls(config.block_debounce, config.unblock_debounce)

    @property
    def phase(self) -> CollisionPhase:
        """Current state including the pending sub-states."""
        if self.is_blocked:
            return CollisionPhase.PENDING_UNBLOCK if self.pending_unblock else CollisionPhase.BLOCKED
        return CollisionPhase.PENDING_BLOCK if self.pending_block else CollisionPhase.UNBLOCKED

    def tick(self, raw_collision: bool, current_angle: float, dt: float) -> TickResult:
        """
        Advance the state machine by one frame.

        Args:
            raw_collision: Contact flag for this frame. While blocked it must
                           already use the hysteresis-widened threshold.
            current_angle: Current second hand angle in radians, recorded
                           on the transition to blocked.
            dt: Frame duration in seconds.

        Returns:
            TickResult with the stable state and transition edges.

        Raises:
            ValueError: If dt is negative.
        """
        if dt < 0:
            raise ValueError(f"dt must be non-negative, got {dt}")

        if not self.is_blocked:
            if not raw_collision:
                self._clear_pending()
                return TickResult(is_blocked=False)

            if not self.pending_block:
                self.pending_block = True
                self.pending_block_time = 0.0
            self.pending_block_time += dt

            if self.pending_block_time + DEBOUNCE_EPS >= self.block_debounce:
                self.is_blocked = True
                self.blocked_at_angle = current_angle
                self._clear_pending()
                logger.debug("blocked at angle %.4f rad", current_angle)
                return TickResult(is_blocked=True, just_blocked=True)
            return TickResult(is_blocked=False)

        if raw_collision:
            self._clear_pending()
            return TickResult(is_blocked=True)

        if not self.pending_unblock:
            self.pending_unblock = True
            self.pending_unblock_time = 0.0
        self.pending_unblock_time += dt

        if self.pending_unblock_time + DEBOUNCE_EPS >= self.unblock_debounce:
            self.is_blocked = False
            self._clear_pending()
            logger.debug("unblocked (held since %.4f rad)", self.blocked_at_angle)
            return TickResult(is_blocked=False, just_unblocked=True)
        return TickResult(is_blocked=True)

    def force_unblock(self) -> None:
        """Drop to UNBLOCKED immediately, bypassing both debounce windows."""
        if self.is_blocked:
            logger.debug("force unblock (held since %.4f rad)", self.blocked_at_angle)
        self.is_blocked = False
        self._clear_pending()

    def _clear_pending(self) -> None:
        self.pending_block = False
        self.pending_block_time = 0.0
        self.pending_unblock = False
        self.pending_unblock_time = 0.0
