"""Tests for the Graham scan convex hull."""
import numpy as np
import pytest

from flatgeom.core.convex_hull import convex_hull, convex_hull_array
from flatgeom.core.geometry import points_in_convex_polygon, polygon_signed_area
from flatgeom.core.points import Point, compare_yx


def _random_points(n, seed=0):
    rng = np.random.default_rng(seed)
    return [tuple(p) for p in rng.uniform(-10.0, 10.0, size=(n, 2))]


def test_square_with_center_point():
    pts = [(0.0, 0.0), (4.0, 0.0), (4.0, 4.0), (0.0, 4.0), (2.0, 2.0)]
    hull = convex_hull(pts)
    assert hull == [(0.0, 0.0), (4.0, 0.0), (4.0, 4.0), (0.0, 4.0)]


def test_hull_returns_caller_objects():
    pts = [Point(0, 0), Point(4, 0), Point(4, 4), Point(0, 4), Point(1, 2)]
    hull = convex_hull(pts)
    assert len(hull) == 4
    for h in hull:
        assert any(h is p for p in pts)


def test_input_is_not_modified():
    pts = [(3.0, 1.0), (0.0, 0.0), (2.0, 5.0), (1.0, 1.0), (4.0, 3.0)]
    before = list(pts)
    convex_hull(pts)
    assert pts == before


@pytest.mark.parametrize("pts", [
    [],
    [(1.0, 2.0)],
    [(1.0, 2.0), (3.0, 4.0)],
    [(5.0, 5.0), (0.0, 0.0), (1.0, 1.0)],  # colinear, returned as-is
])
def test_small_inputs_returned_unchanged(pts):
    hull = convex_hull(pts)
    assert hull == pts
    assert hull is not pts


def test_starts_at_lowest_point_and_is_ccw():
    pts = _random_points(200, seed=1)
    hull = convex_hull(pts)
    lowest = min(pts, key=lambda p: (p[1], p[0]))
    assert hull[0] == lowest
    assert all(compare_yx(hull[0], h) <= 0 for h in hull)
    assert polygon_signed_area(hull) > 0.0
    # no repeated closing vertex
    assert hull[0] != hull[-1]


def test_hull_contains_all_points():
    pts = _random_points(300, seed=2)
    hull = convex_hull(pts)
    inside = points_in_convex_polygon(np.asarray(pts), np.asarray(hull), tol=1e-9)
    assert inside.all()


def test_hull_vertices_match_qhull():
    scipy_spatial = pytest.importorskip('scipy.spatial')
    pts = _random_points(250, seed=3)
    arr = np.asarray(pts)
    expected = {tuple(arr[i]) for i in scipy_spatial.ConvexHull(arr).vertices}
    assert set(convex_hull(pts)) == expected


def test_hull_is_idempotent():
    pts = _random_points(100, seed=4)
    hull = convex_hull(pts)
    assert convex_hull(hull) == hull


def test_colinear_points_collapse_to_extremes():
    pts = [(0.0, 0.0), (1.0, 1.0), (2.0, 2.0), (3.0, 3.0)]
    assert convex_hull(pts) == [(0.0, 0.0), (3.0, 3.0)]


def test_colinear_points_on_edge_keep_farthest():
    pts = [(0.0, 0.0), (2.0, 0.0), (4.0, 0.0), (4.0, 4.0), (0.0, 4.0)]
    assert convex_hull(pts) == [(0.0, 0.0), (4.0, 0.0), (4.0, 4.0), (0.0, 4.0)]


def test_duplicate_points():
    pts = [(0.0, 0.0), (0.0, 0.0), (1.0, 0.0), (1.0, 0.0), (1.0, 1.0), (0.0, 1.0)]
    hull = convex_hull(pts)
    assert len(hull) == 4
    assert set(hull) == {(0.0, 0.0), (1.0, 0.0), (1.0, 1.0), (0.0, 1.0)}


def test_convex_hull_array():
    arr = np.array([[0, 0], [2, 0], [1, 1], [2, 2], [0, 2]], dtype=float)
    hull = convex_hull_array(arr)
    assert hull.shape == (4, 2)
    assert hull.dtype == np.float64
    assert np.array_equal(hull, np.array([[0, 0], [2, 0], [2, 2], [0, 2]], dtype=float))


def test_convex_hull_array_empty():
    assert convex_hull_array(np.empty((0, 2))).shape == (0, 2)
