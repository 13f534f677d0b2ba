import numpy as np
import pytest
from clock_arena.core.angles import TWO_PI, normalize_angle
from clock_arena.core.bearing import angular_position, bearing_of


def test_cardinal_directions():
    """12, 3, 6 and 9 o'clock map to 0, π/2, π and 3π/2."""
    assert angular_position(0, 1) == 0
    assert angular_position(1, 0) == pytest.approx(np.pi / 2)
    assert angular_position(0, -1) == pytest.approx(np.pi)
    assert angular_position(-1, 0) == pytest.approx(3 * np.pi / 2)


def test_origin_has_bearing_zero():
    assert angular_position(0, 0) == 0.0
    assert angular_position(0.0, -0.0) == 0.0
    assert angular_position(-0.0, 0.0) == 0.0


def test_result_in_range():
    angle = angular_position(-1, -1)
    assert 0 <= angle < TWO_PI
    assert angle == pytest.approx(5 * np.pi / 4)


def test_bearing_matches_hand_convention():
    """A point along the hand direction has the hand's (normalized) angle."""
    for a in np.linspace(-3 * np.pi, 3 * np.pi, 37):
        x, z = 2.0 * np.sin(a), 2.0 * np.cos(a)
        b = angular_position(x, z)
        expected = normalize_angle(a)
        # Compare on the circle so 0 and 2π-ε count as equal
        diff = abs((b - expected + np.pi) % TWO_PI - np.pi)
        assert diff < 1e-9, f"angle {a}: bearing {b} vs {expected}"


def test_bearing_of_accepts_points():
    assert bearing_of((1.0, 0.0)) == pytest.approx(np.pi / 2)
    assert bearing_of(np.array([0.0, -3.0])) == pytest.approx(np.pi)
