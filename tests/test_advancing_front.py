import itertools
import random

import pytest

from frontmesh.advancing_front import Edge, compute_triangulation, segments_intersect


def _signed_area(a, b, c):
    return ((b[0] - a[0]) * (c[1] - a[1]) - (b[1] - a[1]) * (c[0] - a[0])) / 2.0


def _cloud(seed, count=20):
    rng = random.Random(seed)
    return [(rng.uniform(0.0, 100.0), rng.uniform(0.0, 100.0)) for _ in range(count)]


def test_edge_equality_ignores_direction():
    assert Edge((0.0, 0.0), (1.0, 2.0)) == Edge((1.0, 2.0), (0.0, 0.0), True)
    assert Edge((0.0, 0.0), (1.0, 2.0)) == Edge((0.0, 0.0), (1.0, 2.0))
    assert not Edge((0.0, 0.0), (1.0, 2.0)) == Edge((0.0, 0.0), (2.0, 1.0))


def test_crossing_segments_intersect():
    assert segments_intersect(Edge((0, 0), (2, 2)), Edge((0, 2), (2, 0)))


@pytest.mark.parametrize(
    "e1, e2",
    [
        (Edge((0, 0), (1, 0)), Edge((1, 0), (1, 1))),
        (Edge((0, 0), (2, 0)), Edge((0, 1), (2, 1))),
        (Edge((0, 0), (2, 0)), Edge((1, 0), (1, 3))),
        (Edge((0, 0), (1, 1)), Edge((3, 0), (4, 5))),
        (Edge((0, 0), (2, 0)), Edge((1, 0), (3, 0))),
    ],
)
def test_touching_or_disjoint_segments_do_not_intersect(e1, e2):
    assert not segments_intersect(e1, e2)
    assert not segments_intersect(e2, e1)


def test_single_triangle():
    result = compute_triangulation([(0, 0), (1, 0), (0, 1)])
    assert result == [((1.0, 0.0), (0.0, 1.0), (0.0, 0.0))]


def test_square_splits_into_two_triangles_covering_it():
    result = compute_triangulation([(0, 0), (1, 0), (1, 1), (0, 1)])
    assert len(result) == 2
    assert sum(_signed_area(*t) for t in result) == pytest.approx(1.0)


@pytest.mark.parametrize(
    "points",
    [[], [(0, 0)], [(0, 0), (1, 1)], [(0, 0), (1, 1), (2, 2), (3, 3)]],
)
def test_degenerate_inputs_give_no_triangles(points):
    assert compute_triangulation(points) == []


@pytest.mark.parametrize("seed", range(4))
def test_triangles_use_input_points_and_are_counter_clockwise(seed):
    points = _cloud(seed)
    triangles = compute_triangulation(points)
    assert triangles
    for tri in triangles:
        assert set(tri) <= set(points)
        assert len(set(tri)) == 3
        assert _signed_area(*tri) > 0


@pytest.mark.parametrize("seed", range(4))
def test_triangle_edges_never_cross(seed):
    triangles = compute_triangulation(_cloud(seed))
    edges = [Edge(a, b) for tri in triangles for a, b in ((tri[0], tri[1]), (tri[1], tri[2]), (tri[2], tri[0]))]
    for e1, e2 in itertools.combinations(edges, 2):
        assert not segments_intersect(e1, e2)


@pytest.mark.parametrize("seed", range(4))
def test_every_hull_point_is_used(seed):
    points = _cloud(seed)
    triangles = compute_triangulation(points)
    used = {p for tri in triangles for p in tri}
    leftmost = min(points, key=lambda p: p[0])
    rightmost = max(points, key=lambda p: p[0])
    assert leftmost in used
    assert rightmost in used