"""Degree/radian helpers shared by every calculation module."""

from __future__ import annotations

import math

DEG2RAD = math.pi / 180.0
RAD2DEG = 180.0 / math.pi


def normalize_degrees(angle_deg: float) -> float:
    """Return the angle reduced into [0, 360)."""

    result = angle_deg % 360.0
    # A tiny negative angle rounds up to exactly 360.0.
    if result >= 360.0:
        result = 0.0
    return result


def deg_to_rad(angle_deg: float) -> float:
    return angle_deg * DEG2RAD


def rad_to_deg(angle_rad: float) -> float:
    return angle_rad * RAD2DEG
