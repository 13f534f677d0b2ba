# MIT License (see LICENSE)
"""
Wall-clock time to hand angle conversion.

All angles are radians measured clockwise from 12 o'clock:
    hour:   30° per hour   + 0.5° per minute
    minute:  6° per minute + 0.1° per second
    second:  6° per second + 0.006° per millisecond

Every hand moves smoothly between ticks; nothing here is stepped. The
functions are total: out-of-range fields (minute=75) are not rejected and
simply give a proportionally larger angle. Use normalize_angle() before
comparing angles across cycles.
"""
from __future__ import annotations
import math
from datetime import datetime

import numpy as np

from ..types import HandAngles

TWO_PI: float = 2.0 * np.pi


def degrees_to_radians(degrees: float) -> float:
    """Convert degrees to radians. Accepts negatives and values beyond 360."""
    return degrees * np.pi / 180


def hour_angle(hours: float, minutes: float) -> float:
    """
    Angle of the hour hand.

    Args:
        hours: Hour in 24-hour form; reduced modulo 12 so 0:00 and 12:00 are both 0.
        minutes: Minutes past the hour, interpolating the hand across the hour.
    """
    h = hours % 12
    return degrees_to_radians(h * 30 + minutes * 0.5)


def minute_angle(minutes: float, seconds: float) -> float:
    """Angle of the minute hand, smooth across the minute via seconds."""
    return degrees_to_radians(minutes * 6 + seconds * 0.1)


def second_angle(seconds: float, milliseconds: float) -> float:
    """
    Angle of the second hand with a smooth sub-second sweep.

    second_angle(59, 999) is 359.994° and stays below a full turn; the wrap
    back to 0 only happens when the caller's seconds field rolls over.
    """
    return degrees_to_radians(seconds * 6 + milliseconds * 0.006)


def normalize_angle(angle: float) -> float:
    """
    Reduce an angle to [0, 2π).

    Negative inputs are brought up by adding 2π. A result that rounds to
    exactly 2π (tiny negative inputs) is folded back to 0.
    """
    a = math.fmod(angle, TWO_PI)
    if a < 0:
        a += TWO_PI
    if a >= TWO_PI:
        a = 0.0
    return a


def hand_angles(moment: datetime | None = None) -> HandAngles:
    """
    Compute all three hand angles for a wall-clock moment.

    Args:
        moment: Time to read. Defaults to the current local time. Only the
                hour/minute/second/microsecond fields are used, so naive and
                aware datetimes both work (in their own zone).

    Returns:
        HandAngles with hour, minute and second in radians.
    """
    if moment is None:
        moment = datetime.now()
    millis = moment.microsecond / 1000.0
    return HandAngles(
        hour=hour_angle(moment.hour, moment.minute),
        minute=minute_angle(moment.minute, moment.second),
        second=second_angle(moment.second, millis),
    )
