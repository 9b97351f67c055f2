"""Convex hull of planar points by the QuickHull method."""

from __future__ import annotations

import math
from collections.abc import Iterable, Sequence

Point = tuple[float, float]


def _as_point(p: Sequence[float]) -> Point:
    return (float(p[0]), float(p[1]))


def _cross(origin: Point, a: Point, b: Point) -> float:
    """Z component of (a - origin) x (b - origin)."""
    return (a[0] - origin[0]) * (b[1] - origin[1]) - (a[1] - origin[1]) * (b[0] - origin[0])


def _clamped_angle(u: Point, v: Point) -> float:
    # The dot product is clamped to [-1, 1] without normalising the vectors first.
    dot = u[0] * v[0] + u[1] * v[1]
    return math.acos(max(-1.0, min(1.0, dot)))


def _divide(points: Iterable[Point], low: Point, high: Point) -> tuple[list[Point], list[Point]]:
    """Split points into those strictly left and strictly right of the line low -> high."""
    left: list[Point] = []
    right: list[Point] = []
    for p in points:
        side = _cross(low, high, p)
        if side > 0:
            left.append(p)
        elif side < 0:
            right.append(p)
    return left, right


def _hull_side(points: list[Point], low: Point, high: Point) -> list[Point]:
    """Hull points lying strictly left of low -> high, ordered from low to high."""
    if len(points) <= 1:
        return list(points)

    pivot = (high[0] - low[0], high[1] - low[1])
    far = points[0]
    max_area = 0.0
    max_angle = 0.0
    for p in points:
        area = _cross(low, high, p) / 2.0
        if area > max_area:
            max_area = area
            far = p
        elif area == max_area:
            angle = _clamped_angle(pivot, (p[0] - low[0], p[1] - low[1]))
            if angle > max_angle:
                max_angle = angle
                far = p

    outer_low, rest = _divide(points, low, far)
    outer_high, _ = _divide(rest, far, high)

    return _hull_side(outer_low, low, far) + [far] + _hull_side(outer_high, far, high)


def compute_hull(points: Iterable[Sequence[float]]) -> list[Point]:
    """Return the convex hull vertices in clockwise order, starting at the leftmost point.

    Inputs of two points or fewer are returned as they are.
    """
    pts = [_as_point(p) for p in points]
    if len(pts) <= 2:
        return pts

    low = high = pts[0]
    for p in pts[1:]:
        if p[0] < low[0]:
            low = p
        if p[0] > high[0]:
            high = p

    upper, lower = _divide(pts, low, high)
    return [low] + _hull_side(upper, low, high) + [high] + _hull_side(lower, high, low)