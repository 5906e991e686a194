"""
Geometry helpers for 2D pose landmarks.

All functions work on normalized image coordinates (y grows downwards) and
return degrees.
"""

import numpy as np
from typing import NamedTuple

from .landmarks import Point2D


class Midpoint(NamedTuple):
    x: float
    y: float


def midpoint(left: Point2D, right: Point2D) -> Midpoint:
    """Mean of a left/right landmark pair."""
    return Midpoint((left.x + right.x) / 2, (left.y + right.y) / 2)


def joint_angle(a: Point2D, b: Point2D, c: Point2D) -> float:
    """
    Interior angle at vertex b formed by rays b->a and b->c.

    Always in [0, 180] and independent of point order or winding, so
    joint_angle(a, b, c) == joint_angle(c, b, a).
    """
    radians = np.arctan2(c.y - b.y, c.x - b.x) - np.arctan2(a.y - b.y, a.x - b.x)
    angle = abs(np.degrees(radians))
    if angle > 180.0:
        angle = 360.0 - angle
    return float(angle)


def trunk_tilt(shoulder_mid: Point2D, hip_mid: Point2D) -> float:
    """
    Tilt of the shoulder->hip segment from vertical.

    arctan2(dx, dy) rather than arctan2(dy, dx) so that a hip straight below
    the shoulders reads 0. Leaning left or right gives the same magnitude.
    """
    dx = hip_mid.x - shoulder_mid.x
    dy = hip_mid.y - shoulder_mid.y
    return float(abs(np.degrees(np.arctan2(dx, dy))))
