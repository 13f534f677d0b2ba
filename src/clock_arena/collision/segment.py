# MIT License (see LICENSE)
"""
Distance from a point to the rotating second hand.

The hand is modelled as a segment along its direction vector, starting
`start` units from the pivot and ending `end` units out. Distance is the
standard point-to-segment projection with the parameter clamped to [0, 1].
"""
from __future__ import annotations

import numpy as np

from ..types import HandSegment
from ..util import f64, norm, norm2


def closest_point_on_hand(
    point: np.ndarray | tuple[float, float],
    angle: float,
    start: float,
    end: float,
) -> np.ndarray:
    """
    Closest point to `point` on the hand segment at `angle`.

    Projects the point onto the line through the segment endpoints and
    clamps the projection parameter t to [0, 1] so the result stays on the
    finite segment.

    Args:
        point: Target position [x, z].
        angle: Hand angle in radians (clockwise from 12 o'clock).
        start: Distance from the pivot where the segment starts.
        end: Distance from the pivot where the segment ends.

    Returns:
        The closest point as a float64 array [x, z]. For a zero-length
        segment (start == end) this is the single collapsed point.
    """
    p = f64(point)
    a, b = HandSegment(angle, start, end).endpoints()
    seg = b - a

    seg_len_sq = norm2(seg)
    if seg_len_sq == 0.0:
        return a

    t = float(np.dot(p - a, seg)) / seg_len_sq
    t = max(0.0, min(1.0, t))
    return a + t * seg


def distance_to_hand(
    point: np.ndarray | tuple[float, float],
    angle: float,
    start: float,
    end: float,
) -> float:
    """
    Minimum Euclidean distance from `point` to the hand segment.

    Degenerate segments fall back to point-to-point distance.
    """
    p = f64(point)
    return norm(p - closest_point_on_hand(p, angle, start, end))
