"""
hit_geometry.py
---------------
Closed-form proximity tests used by hit-testing, attacks and interactions.

Rectangular shapes are anchored bottom-center: (x, y) is the midpoint of
the bottom edge, the box spans width/2 to each side and height upward.
"""

import math


def is_finite_point(x: float, y: float) -> bool:
    return math.isfinite(x) and math.isfinite(y)


def center_distance(ax: float, ay: float, bx: float, by: float) -> float:
    return math.hypot(ax - bx, ay - by)


def point_in_circle(px: float, py: float, cx: float, cy: float, radius: float) -> bool:
    """Strict containment: a point on the rim is a miss."""
    return center_distance(px, py, cx, cy) < radius


def point_in_anchor_rect(px: float, py: float, x: float, y: float,
                         width: float, height: float) -> bool:
    """Inclusive containment in a bottom-center anchored box."""
    half_w = width / 2
    return (x - half_w <= px <= x + half_w) and (y - height <= py <= y)


def distance_to_anchor_rect(px: float, py: float, x: float, y: float,
                            width: float, height: float) -> float:
    """
    Distance from a point to the closest point of a bottom-center box.

    Returns 0.0 when the point lies inside the box.
    """
    half_w = width / 2
    closest_x = min(max(px, x - half_w), x + half_w)
    closest_y = min(max(py, y - height), y)
    return math.hypot(px - closest_x, py - closest_y)


def within_box(ax: float, ay: float, bx: float, by: float,
               half_width: float, half_height: float) -> bool:
    """Absolute-distance box test between two anchor points."""
    return abs(ax - bx) < half_width and abs(ay - by) < half_height
