"""
Vector helpers for arena mechanics

Vectors are plain (x, y) float tuples in screen coordinates (y grows downward).
"""

from __future__ import annotations
import math
from typing import Tuple

Vec2 = Tuple[float, float]

ZERO: Vec2 = (0.0, 0.0)


def clamp(x: float, lo: float, hi: float) -> float:
    """Clamp value between low and high bounds"""
    return lo if x < lo else hi if x > hi else x


def add(a: Vec2, b: Vec2) -> Vec2:
    return a[0] + b[0], a[1] + b[1]


def scale(v: Vec2, k: float) -> Vec2:
    return v[0] * k, v[1] * k


def subtract(a: Vec2, b: Vec2) -> Vec2:
    """Vector pointing from a to b (b - a)"""
    return b[0] - a[0], b[1] - a[1]


def normalize(v: Vec2) -> Vec2:
    """Normalize a vector to unit length; degenerate input gives the zero vector"""
    length = math.hypot(v[0], v[1])
    if length == 0.0 or not math.isfinite(length):
        return ZERO
    return v[0] / length, v[1] / length


def inverse(v: Vec2) -> Vec2:
    return -v[0], -v[1]


def magnitude(a: Vec2, b: Vec2) -> float:
    """Distance between two points"""
    return math.hypot(a[0] - b[0], a[1] - b[1])


def angle(a: Vec2, b: Vec2) -> float:
    """
    Signed angle from a to b, negated and wrapped into [0, 360) degrees.

    Only used to orient tails.
    """
    dot = a[0] * b[0] + a[1] * b[1]
    cross = a[0] * b[1] - a[1] * b[0]

    theta = -math.atan2(cross, dot)
    if theta < 0:
        theta += 2 * math.pi

    return math.degrees(theta) % 360.0


def circles_collide(a: Vec2, ra: float, b: Vec2, rb: float) -> bool:
    """Check if two circles overlap (touching edges do not count)"""
    dx = a[0] - b[0]
    dy = a[1] - b[1]
    rr = ra + rb
    return (dx * dx + dy * dy) < (rr * rr)
