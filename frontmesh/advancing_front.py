"""Triangulation of planar point sets by an advancing front."""

from __future__ import annotations

import math
from collections import deque
from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from typing import Optional

from frontmesh.quickhull import compute_hull

Point = tuple[float, float]
Triangle = tuple[Point, Point, Point]


@dataclass(eq=False)
class Edge:
    """A segment of the front; equality ignores direction."""

    point1: Point
    point2: Point
    in_frontier: bool = False

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Edge):
            return NotImplemented
        return (self.point1, self.point2) in (
            (other.point1, other.point2),
            (other.point2, other.point1),
        )


def _cross(origin: Point, a: Point, b: Point) -> float:
    return (a[0] - origin[0]) * (b[1] - origin[1]) - (a[1] - origin[1]) * (b[0] - origin[0])


def _clamped_angle(u: Point, v: Point) -> float:
    # The dot product is clamped to [-1, 1] without normalising the vectors first.
    dot = u[0] * v[0] + u[1] * v[1]
    return math.acos(max(-1.0, min(1.0, dot)))


def segments_intersect(e1: Edge, e2: Edge) -> bool:
    """True when the two edges cross at a point interior to both."""
    return (
        _cross(e1.point1, e1.point2, e2.point1) * _cross(e1.point1, e1.point2, e2.point2) < 0
        and _cross(e2.point1, e2.point2, e1.point1) * _cross(e2.point1, e2.point2, e1.point2) < 0
    )


def _initial_frontier(points: list[Point]) -> list[Edge]:
    hull = compute_hull(points)
    # Reverse the clockwise hull so that the interior lies left of every edge.
    previous = hull[-1:] + hull[:-1]
    return [Edge(a, b, True) for a, b in reversed(list(zip(hull, previous)))]


def _find_candidate(edge: Edge, edges: list[Edge], points: list[Point]) -> Optional[Point]:
    candidate: Optional[Point] = None
    max_angle = -math.inf
    min_area = math.inf
    p1, p2 = edge.point1, edge.point2

    for point in points:
        side = _cross(p1, p2, point)
        if side <= 0:
            continue
        side1 = Edge(p1, point)
        side2 = Edge(p2, point)
        if any(segments_intersect(e, side1) or segments_intersect(e, side2) for e in edges):
            continue

        angle = _clamped_angle(
            (p1[0] - point[0], p1[1] - point[1]),
            (p2[0] - point[0], p2[1] - point[1]),
        )
        if angle > max_angle:
            max_angle = angle
            candidate = point
        elif angle == max_angle:
            area = side / 2.0
            if area < min_area:
                min_area = area
                candidate = point

    return candidate


def _find_edge(point1: Point, point2: Point, frontier: list[Edge]) -> Optional[Edge]:
    probe = Edge(point1, point2)
    return next((e for e in frontier if e == probe), None)


def compute_triangulation(points: Iterable[Sequence[float]]) -> list[Triangle]:
    """Triangulate the points, returning triangles as counter-clockwise vertex triples."""
    pts = [(float(p[0]), float(p[1])) for p in points]
    triangles: list[Triangle] = []
    frontier = _initial_frontier(pts)
    queue = deque(frontier)

    while queue:
        edge = queue.popleft()
        if not edge.in_frontier:
            continue

        candidate = _find_candidate(edge, frontier, pts)
        if candidate is None:
            continue

        triangles.append((edge.point1, edge.point2, candidate))
        edge.in_frontier = False

        for a, b in ((edge.point1, candidate), (candidate, edge.point2)):
            existing = _find_edge(a, b, frontier)
            if existing is None:
                new_edge = Edge(a, b, True)
                frontier.append(new_edge)
                queue.append(new_edge)
            else:
                existing.in_frontier = False

    return triangles