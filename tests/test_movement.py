import numpy as np
import pytest
from clock_arena.constants import WALK_SPEED, TURN_SPEED, BIRDS_EYE_SPEED
from clock_arena.core.movement import (
    MoveInput,
    movement_from_input,
    advance,
    normalize_movement,
    birds_eye_advance,
    is_moving,
    is_moving_birds_eye,
)


def test_movement_axes():
    assert movement_from_input(MoveInput()) == (0, 0)
    assert movement_from_input(MoveInput(forward=True)) == (1, 0)
    assert movement_from_input(MoveInput(backward=True)) == (-1, 0)
    assert movement_from_input(MoveInput(left=True)) == (0, 1)
    assert movement_from_input(MoveInput(right=True)) == (0, -1)


def test_conflicting_keys_cancel():
    keys = MoveInput(forward=True, backward=True, left=True, right=True)
    assert movement_from_input(keys) == (0, 0)
    assert not is_moving(keys)
    # Birds-eye still counts any key as movement intent
    assert is_moving_birds_eye(keys)


def test_advance_forward_along_heading():
    x, z, heading = advance(0.0, 0.0, 0.0, 1, 0, 1.0)
    assert (x, z, heading) == pytest.approx((0.0, WALK_SPEED, 0.0))

    x, z, _ = advance(0.0, 0.0, np.pi / 2, 1, 0, 1.0)
    assert (x, z) == pytest.approx((WALK_SPEED, 0.0), abs=1e-12)


def test_advance_turns_before_moving():
    x, z, heading = advance(0.0, 0.0, 0.0, 0, 1, 0.5)
    assert heading == pytest.approx(TURN_SPEED * 0.5)
    assert (x, z) == (0.0, 0.0)

    x, z, heading = advance(0.0, 0.0, 0.0, 1, -1, 0.25)
    assert heading == pytest.approx(-0.5)
    assert x == pytest.approx(np.sin(-0.5) * WALK_SPEED * 0.25)
    assert z == pytest.approx(np.cos(-0.5) * WALK_SPEED * 0.25)


def test_normalize_movement():
    assert normalize_movement(3.0, 4.0) == pytest.approx((0.6, 0.8))
    assert normalize_movement(0.3, 0.4) == (0.3, 0.4)
    assert normalize_movement(0.0, 0.0) == (0.0, 0.0)


def test_birds_eye_cardinals():
    dt = 0.5
    x, z, heading = birds_eye_advance(0.0, 0.0, MoveInput(forward=True), dt)
    assert (x, z, heading) == pytest.approx((0.0, BIRDS_EYE_SPEED * dt, 0.0))

    # Camera mirrors x: "left" moves toward +x
    x, z, heading = birds_eye_advance(0.0, 0.0, MoveInput(left=True), dt)
    assert (x, z) == pytest.approx((BIRDS_EYE_SPEED * dt, 0.0))
    assert heading == pytest.approx(-np.pi / 2)


def test_birds_eye_diagonal_not_faster():
    dt = 1.0
    x, z, _ = birds_eye_advance(1.0, 1.0, MoveInput(forward=True, right=True), dt)
    assert np.hypot(x - 1.0, z - 1.0) == pytest.approx(BIRDS_EYE_SPEED * dt)


def test_birds_eye_idle():
    assert birds_eye_advance(1.0, 2.0, MoveInput(), 0.1) == (1.0, 2.0, 0.0)
    assert not is_moving_birds_eye(MoveInput())
