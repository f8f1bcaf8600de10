"""Tests for the minimum-area oriented bounding box."""
import math

import numpy as np
import pytest

from flatgeom.core.affine import rotation, translation
from flatgeom.core.config import BoundingBoxConfig
from flatgeom.core.geometry import points_in_convex_polygon, polygon_signed_area
from flatgeom.core.oriented_bbox import (
    alignment_transform,
    inverse_alignment_transform,
    minimum_oriented_bounding_box,
    minimum_oriented_bounding_box_area,
)
from flatgeom.core.points import Point, as_array, compute_bounds


def _rotated_rectangle(width, height, angle, offset=(0.0, 0.0), n_interior=50, seed=0):
    rng = np.random.default_rng(seed)
    corners = np.array([[0, 0], [width, 0], [width, height], [0, height]], dtype=float)
    interior = rng.uniform([0.1, 0.1], [width - 0.1, height - 0.1], size=(n_interior, 2))
    at = translation(*offset)
    at.concatenate(rotation(angle))
    return at.apply(corners), at.apply(np.vstack([corners, interior]))


def test_axis_aligned_rectangle_is_exact():
    pts = [(0.0, 0.0), (4.0, 0.0), (4.0, 2.0), (0.0, 2.0), (1.0, 1.0)]
    box = minimum_oriented_bounding_box(pts)
    assert [p.as_tuple() for p in box] == [(0.0, 0.0), (4.0, 0.0), (4.0, 2.0), (0.0, 2.0)]
    assert minimum_oriented_bounding_box_area(pts) == 8.0


@pytest.mark.parametrize("angle", [math.radians(30.0), math.radians(-65.0), 1.0])
def test_recovers_rotated_rectangle(angle):
    corners, pts = _rotated_rectangle(4.0, 2.0, angle, offset=(3.0, -1.0))
    box = as_array(minimum_oriented_bounding_box(pts))
    assert minimum_oriented_bounding_box_area(pts) == pytest.approx(8.0, abs=1e-9)
    for c in corners:
        assert np.min(np.hypot(*(box - c).T)) < 1e-9


def test_box_contains_points_and_is_ccw():
    rng = np.random.default_rng(7)
    pts = rng.normal(size=(400, 2)) * [3.0, 1.0]
    box = as_array(minimum_oriented_bounding_box(pts))
    assert polygon_signed_area(box) > 0.0
    assert points_in_convex_polygon(pts, box, tol=1e-9).all()


def test_area_not_larger_than_axis_aligned_box():
    rng = np.random.default_rng(11)
    for _ in range(5):
        pts = rng.uniform(-5.0, 5.0, size=(60, 2))
        aabb = compute_bounds(pts)
        assert minimum_oriented_bounding_box_area(pts) <= aabb.area + 1e-9


def test_box_area_matches_corner_area():
    rng = np.random.default_rng(5)
    pts = rng.uniform(0.0, 10.0, size=(80, 2))
    box = as_array(minimum_oriented_bounding_box(pts))
    assert polygon_signed_area(box) == pytest.approx(minimum_oriented_bounding_box_area(pts), rel=1e-9)


def test_transform_scopes_agree():
    rng = np.random.default_rng(3)
    pts = rng.uniform(-1.0, 1.0, size=(150, 2))
    hull_scope = minimum_oriented_bounding_box(pts, BoundingBoxConfig(transform_scope='hull'))
    all_scope = minimum_oriented_bounding_box(pts, BoundingBoxConfig(transform_scope='all'))
    assert np.allclose(as_array(hull_scope), as_array(all_scope), atol=1e-12)


def test_single_point_gives_degenerate_box():
    box = minimum_oriented_bounding_box([(2.0, 3.0)])
    assert [p.as_tuple() for p in box] == [(2.0, 3.0)] * 4


def _assert_box_spans(box, ends):
    ends = np.asarray(ends, dtype=float)
    # every corner sits on one of the extreme points, and both are used
    d = np.hypot(box[:, None, 0] - ends[None, :, 0], box[:, None, 1] - ends[None, :, 1])
    assert (d.min(axis=1) < 1e-9).all()
    assert (d.min(axis=0) < 1e-9).all()


def test_two_points_give_zero_height_box():
    pts = [(0.0, 0.0), (3.0, 4.0)]
    box = as_array(minimum_oriented_bounding_box(pts))
    assert minimum_oriented_bounding_box_area(pts) == pytest.approx(0.0, abs=1e-9)
    _assert_box_spans(box, pts)


def test_colinear_points():
    pts = [(0.0, 0.0), (1.0, 1.0), (2.0, 2.0), (5.0, 5.0), (3.0, 3.0)]
    box = as_array(minimum_oriented_bounding_box(pts))
    assert minimum_oriented_bounding_box_area(pts) == pytest.approx(0.0, abs=1e-9)
    _assert_box_spans(box, [(0.0, 0.0), (5.0, 5.0)])


def test_empty_input_raises():
    with pytest.raises(ValueError):
        minimum_oriented_bounding_box([])
    with pytest.raises(ValueError):
        minimum_oriented_bounding_box_area(np.empty((0, 2)))


def test_alignment_transform_round_trip():
    p0 = Point(1.0, 2.0)
    p1 = Point(4.0, 6.0)
    at = alignment_transform(p0, p1)
    a0 = at.transform_point(p0)
    a1 = at.transform_point(p1)
    assert a0.x == pytest.approx(0.0, abs=1e-12) and a0.y == pytest.approx(0.0, abs=1e-12)
    assert a1.x == pytest.approx(5.0) and a1.y == pytest.approx(0.0, abs=1e-12)
    back = inverse_alignment_transform(p0, p1).transform_point(a1)
    assert back.x == pytest.approx(4.0) and back.y == pytest.approx(6.0)


def test_unknown_transform_scope_rejected():
    with pytest.raises(ValueError):
        BoundingBoxConfig(transform_scope='everything')
