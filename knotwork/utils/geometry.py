"""
This module provides:
    - polar_angle
    - polar_sort_key
    - rotate_by
    - from_polar
"""

import math

from knotwork.models.vector import Vec2


# ----------------------------------------------------------------------
#  POLAR ANGLE AROUND A CENTRE
# ----------------------------------------------------------------------

def polar_angle(center: Vec2, point: Vec2) -> float:
    """
    Angle (radians, atan2 convention) of the ray center → point.
    """
    return (point - center).angle()


def polar_sort_key(center: Vec2, point: Vec2):
    """
    Sort key ordering points by ascending polar angle around `center`,
    with the point's own (x, y) order as the tie-break.
    """
    return (polar_angle(center, point), point)


# ----------------------------------------------------------------------
#  ROTATIONS
# ----------------------------------------------------------------------

def from_polar(angle: float, length: float = 1.0) -> Vec2:
    return Vec2(math.cos(angle), math.sin(angle)) * length


def rotate_by(v: Vec2, radians: float) -> Vec2:
    """
    Rotate a vector by `radians`, keeping its length.

    Computed as angle + offset → polar, which matches how the crossing
    tangents are laid out around a stroke normal.
    """
    return from_polar(v.angle() + radians, v.length())
