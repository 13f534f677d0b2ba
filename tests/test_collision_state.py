import math

import numpy as np
import pytest
from clock_arena.config import ArenaConfig
from clock_arena.collision.predicate import check_hand_collision, raw_collision
from clock_arena.collision.segment import distance_to_hand
from clock_arena.collision.state import CollisionStateManager, CollisionPhase
from clock_arena.core.invariants import state_is_consistent

DT = 1 / 60


def test_starts_unblocked():
    m = CollisionStateManager()
    assert not m.is_blocked
    assert m.phase is CollisionPhase.UNBLOCKED
    assert state_is_consistent(m)


def test_instant_block_records_angle():
    m = CollisionStateManager(block_debounce=0.0, unblock_debounce=0.03)
    r = m.tick(True, 1.2, DT)
    assert r.is_blocked and r.just_blocked and not r.just_unblocked
    assert m.blocked_at_angle == 1.2
    assert m.phase is CollisionPhase.BLOCKED


def test_blocked_angle_frozen_for_episode():
    m = CollisionStateManager()
    m.tick(True, 1.2, DT)
    for angle in (1.3, 1.4, 1.5):
        r = m.tick(True, angle, DT)
        assert r.is_blocked and not r.just_blocked
    assert m.blocked_at_angle == 1.2


def test_unblock_after_debounce():
    m = CollisionStateManager(block_debounce=0.0, unblock_debounce=0.03)
    m.tick(True, 0.5, DT)

    r = m.tick(False, 0.5, DT)
    assert r.is_blocked, "one frame of separation is not enough"
    assert m.phase is CollisionPhase.PENDING_UNBLOCK

    r = m.tick(False, 0.5, DT)
    assert not r.is_blocked
    assert r.just_unblocked
    assert m.phase is CollisionPhase.UNBLOCKED
    assert m.pending_unblock_time == 0.0


def test_unblock_requires_continuous_separation():
    m = CollisionStateManager(block_debounce=0.0, unblock_debounce=0.03)
    m.tick(True, 0.5, DT)
    m.tick(False, 0.5, DT)
    m.tick(True, 0.5, DT)  # contact again: progress discarded
    assert m.pending_unblock_time == 0.0
    r = m.tick(False, 0.5, DT)
    assert r.is_blocked


def test_block_requires_continuous_contact():
    m = CollisionStateManager(block_debounce=0.1, unblock_debounce=0.03)
    for _ in range(5):
        m.tick(True, 0.0, 0.01)
    assert m.phase is CollisionPhase.PENDING_BLOCK
    m.tick(False, 0.0, 0.01)
    assert m.pending_block_time == 0.0
    assert not m.pending_block
    for _ in range(5):
        m.tick(True, 0.0, 0.01)
    assert not m.is_blocked
    assert m.pending_block_time == pytest.approx(0.05)


def test_small_ticks_match_one_large_tick():
    """Ten ticks of 0.01 s block exactly like one tick of 0.1 s."""
    fine = CollisionStateManager(block_debounce=0.1)
    ticks = 0
    while not fine.is_blocked:
        fine.tick(True, 0.0, 0.01)
        ticks += 1
    assert ticks == 10

    coarse = CollisionStateManager(block_debounce=0.1)
    assert coarse.tick(True, 0.0, 0.1).is_blocked


@pytest.mark.parametrize("n", [1, 2, 3, 5, 10, 20, 50, 100])
def test_transition_time_independent_of_tick_count(n):
    T = 0.2
    threshold = 0.1
    dt = T / n
    m = CollisionStateManager(block_debounce=threshold)
    transition_tick = None
    for i in range(n):
        if m.tick(True, 0.0, dt).just_blocked:
            transition_tick = i + 1
    assert m.is_blocked
    expected = math.ceil(threshold / dt - 1e-9)
    assert abs(transition_tick - expected) <= 1
    # The block lands within one tick of the threshold time
    assert transition_tick * dt == pytest.approx(threshold, abs=dt + 1e-12)


def test_zero_block_debounce_blocks_on_first_contact():
    m = CollisionStateManager(block_debounce=0.0)
    assert m.tick(True, 2.0, 0.0).is_blocked


def test_force_unblock_clears_everything():
    m = CollisionStateManager(block_debounce=0.05, unblock_debounce=0.03)
    for _ in range(10):
        m.tick(True, 0.7, 0.01)
    assert m.is_blocked
    m.tick(False, 0.7, 0.01)
    assert m.pending_unblock

    m.force_unblock()
    assert not m.is_blocked
    assert not m.pending_block and not m.pending_unblock
    assert m.pending_block_time == 0.0 and m.pending_unblock_time == 0.0

    # Contact still present: must go through the block debounce again
    r = m.tick(True, 0.9, 0.01)
    assert not r.is_blocked
    assert m.phase is CollisionPhase.PENDING_BLOCK


def test_force_unblock_with_instant_block_reblocks_next_tick():
    m = CollisionStateManager(block_debounce=0.0)
    m.tick(True, 0.7, DT)
    m.force_unblock()
    assert not m.is_blocked
    r = m.tick(True, 0.9, DT)
    assert r.is_blocked and r.just_blocked
    assert m.blocked_at_angle == 0.9


def test_force_unblock_is_not_reported_as_unblock_edge():
    m = CollisionStateManager()
    m.tick(True, 0.0, DT)
    m.force_unblock()
    r = m.tick(False, 0.0, DT)
    assert not r.just_unblocked


def test_hysteresis_holds_block_between_thresholds():
    """
    Sweep the hand toward a stationary actor until it blocks, then hover at
    a distance between the entry and exit thresholds: the block must hold.
    """
    cfg = ArenaConfig()
    m = CollisionStateManager.from_config(cfg)
    actor = (0.0, 3.0)
    touch = cfg.contact_threshold
    release = cfg.release_threshold

    # Sweep from 10 o'clock-ish toward 12 o'clock
    blocked_at = None
    for a in np.linspace(-0.6, 0.0, 61):
        hit = check_hand_collision(a, actor, cfg, m.is_blocked)
        if m.tick(hit, a, DT).just_blocked:
            blocked_at = a
            break
    assert blocked_at is not None
    assert distance_to_hand(actor, blocked_at, cfg.hand_start, cfg.hand_end) <= touch

    # Hover between the thresholds
    a_mid = -math.asin(0.5 * (touch + release) / 3.0)
    d_mid = distance_to_hand(actor, a_mid, cfg.hand_start, cfg.hand_end)
    assert touch < d_mid < release
    assert not raw_collision(d_mid, cfg.actor_radius, cfg.hand_half_width)
    for _ in range(120):
        hit = check_hand_collision(a_mid, actor, cfg, m.is_blocked)
        assert m.tick(hit, a_mid, DT).is_blocked

    # Beyond the exit threshold: unblocks only after the unblock debounce
    a_far = -math.asin((release + 0.05) / 3.0)
    frames = 0
    while m.is_blocked:
        hit = check_hand_collision(a_far, actor, cfg, m.is_blocked)
        m.tick(hit, a_far, DT)
        frames += 1
        assert frames < 100
    assert frames * DT >= cfg.unblock_debounce - 1e-9
    assert (frames - 1) * DT < cfg.unblock_debounce


def test_state_stays_consistent_under_random_input():
    rng = np.random.default_rng(2024)
    m = CollisionStateManager(block_debounce=0.05, unblock_debounce=0.03)
    for _ in range(2000):
        if rng.random() < 0.01:
            m.force_unblock()
        m.tick(bool(rng.random() < 0.6), float(rng.uniform(0, 2 * np.pi)), float(rng.uniform(0, 0.04)))
        assert state_is_consistent(m)


def test_rejects_negative_values():
    with pytest.raises(ValueError):
        CollisionStateManager(block_debounce=-0.1)
    with pytest.raises(ValueError):
        CollisionStateManager(unblock_debounce=-0.1)
    m = CollisionStateManager()
    with pytest.raises(ValueError):
        m.tick(True, 0.0, -DT)


def test_from_config():
    cfg = ArenaConfig(block_debounce=0.2, unblock_debounce=0.05)
    m = CollisionStateManager.from_config(cfg)
    assert m.block_debounce == 0.2
    assert m.unblock_debounce == 0.05


def test_independent_instances():
    a = CollisionStateManager()
    b = CollisionStateManager()
    a.tick(True, 1.0, DT)
    assert a.is_blocked
    assert not b.is_blocked
