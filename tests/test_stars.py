"""Tests for star outlines."""
import math

import pytest

from flatgeom.core.paths import Path, SegmentType, compute_points, compute_signed_area
from flatgeom.core.stars import create_star_shape


def _radii(path, cx=0.0, cy=0.0):
    return [math.hypot(p.x - cx, p.y - cy) for p in compute_points(path)]


def test_sharp_star_alternates_tips_and_corners():
    star = create_star_shape(1.0, -2.0, 1.0, 2.0, 5)
    assert isinstance(star, Path)
    types = [s.type for s in star]
    assert types[0] is SegmentType.MOVE_TO and types[-1] is SegmentType.CLOSE
    assert len(star) == 1 + 4 * 5 + 1
    pts = compute_points(star)
    # corners sit at odd indices, edge midpoints in between
    corners = pts[1::2]
    assert len(corners) == 10
    for i, p in enumerate(corners):
        r = 2.0 if i % 2 == 0 else 1.0
        assert math.hypot(p.x - 1.0, p.y + 2.0) == pytest.approx(r)
    assert corners[0].x == pytest.approx(3.0) and corners[0].y == pytest.approx(-2.0)


def test_sharp_star_area_is_counter_clockwise():
    n, inner, outer = 5, 1.0, 2.0
    star = create_star_shape(0.0, 0.0, inner, outer, n)
    expected = n * inner * outer * math.sin(math.pi / n)
    assert compute_signed_area(star) == pytest.approx(expected)


def test_start_angle_places_first_tip():
    star = create_star_shape(0.0, 0.0, 0.5, 3.0, 4, start_angle=math.pi / 2)
    tip = compute_points(star)[1]
    assert tip.x == pytest.approx(0.0, abs=1e-12)
    assert tip.y == pytest.approx(3.0)


def test_rounded_tips_stay_inside_outer_radius():
    sharp = create_star_shape(0.0, 0.0, 1.0, 2.0, 5)
    half = create_star_shape(0.0, 0.0, 1.0, 2.0, 5, outer_roundness=0.5, curve_segments=8)
    full = create_star_shape(0.0, 0.0, 1.0, 2.0, 5, outer_roundness=1.0, curve_segments=8)
    assert len(full) == 1 + 5 * 8 + 5 * 2 + 1
    assert len(half) == 1 + 5 * (8 + 2) + 5 * 2 + 1
    assert max(_radii(full)) < 2.0
    assert compute_signed_area(sharp) > compute_signed_area(half) > compute_signed_area(full) > 0.0


def test_rounded_inner_corners_keep_tips():
    star = create_star_shape(0.0, 0.0, 1.0, 2.0, 5, inner_roundness=1.0, curve_segments=4)
    radii = _radii(star)
    assert max(radii) == pytest.approx(2.0)
    # curves bulge away from the sharp inner corners
    assert min(radii) > 1.0


def test_two_rays_is_the_minimum():
    assert len(create_star_shape(0.0, 0.0, 1.0, 2.0, 2)) == 10
    with pytest.raises(ValueError, match="at least 2"):
        create_star_shape(0.0, 0.0, 1.0, 2.0, 1)
    with pytest.raises(ValueError):
        create_star_shape(0.0, 0.0, 1.0, 2.0, 0)


def test_curve_segments_validated():
    with pytest.raises(ValueError):
        create_star_shape(0.0, 0.0, 1.0, 2.0, 5, outer_roundness=1.0, curve_segments=0)
