"""Tests for line and segment intersection."""
import pytest

from flatgeom.core.intersections import (
    Intersection,
    intersect_lines,
    intersect_lines_xy,
    intersect_segments,
    line_intersection,
    segment_intersection,
)
from flatgeom.core.lines import Line
from flatgeom.core.points import Point


def test_unit_square_diagonals():
    rel = Point()
    ab = Point()
    assert intersect_segments(Line(0, 0, 1, 1), Line(0, 1, 1, 0), rel, ab)
    assert rel.as_tuple() == (0.5, 0.5)
    assert ab.as_tuple() == (0.5, 0.5)


def test_relative_locations_are_start_based():
    rel = Point()
    ab = Point()
    assert intersect_lines(Line(0, 0, 4, 0), Line(1, -1, 1, 3), rel, ab)
    assert rel.as_tuple() == (0.25, 0.25)
    assert ab.as_tuple() == (1.0, 0.0)


def test_accepts_point_pairs_and_flat_sequences():
    hit = line_intersection(((0.0, 0.0), (2.0, 2.0)), (0.0, 2.0, 2.0, 0.0))
    assert isinstance(hit, Intersection)
    assert hit.absolute.x == pytest.approx(1.0)
    assert hit.absolute.y == pytest.approx(1.0)


def test_parallel_lines_do_not_intersect():
    assert not intersect_lines(Line(0, 0, 1, 0), Line(0, 1, 1, 1))
    assert line_intersection(Line(0, 0, 1, 1), Line(1, 0, 2, 1)) is None


def test_coincident_lines_do_not_intersect():
    assert not intersect_lines(Line(0, 0, 2, 0), Line(1, 0, 3, 0))
    assert not intersect_segments(Line(0, 0, 2, 0), Line(1, 0, 3, 0))


def test_slots_untouched_when_parallel():
    rel = Point(7.0, 7.0)
    ab = Point(8.0, 8.0)
    assert not intersect_lines(Line(0, 0, 1, 0), Line(0, 1, 1, 1), rel, ab)
    assert rel.as_tuple() == (7.0, 7.0)
    assert ab.as_tuple() == (8.0, 8.0)


def test_segments_out_of_range_rejected():
    s0 = Line(0, 0, 1, 0)
    s1 = Line(2, -1, 2, 1)
    assert intersect_lines(s0, s1)
    rel = Point()
    ab = Point()
    assert not intersect_segments(s0, s1, rel, ab)
    # slots keep the supporting-line solution
    assert rel.as_tuple() == (2.0, 0.5)
    assert ab.as_tuple() == (2.0, 0.0)
    assert segment_intersection(s0, s1) is None


def test_touching_endpoints_count():
    rel = Point()
    ab = Point()
    assert intersect_segments(Line(0, 0, 1, 0), Line(1, 0, 1, 1), rel, ab)
    assert rel.as_tuple() == (1.0, 0.0)
    assert ab.as_tuple() == (1.0, 0.0)


def test_segment_intersection_allocating_variant():
    hit = segment_intersection(Line(0, 0, 1, 1), Line(0, 1, 1, 0))
    assert hit is not None
    assert hit.relative.as_tuple() == (0.5, 0.5)
    assert hit.absolute.as_tuple() == (0.5, 0.5)


def test_zero_length_line_never_intersects():
    assert not intersect_lines(Line(1, 1, 1, 1), Line(0, 0, 2, 2))
    assert not intersect_lines_xy(0, 0, 1, 0, 3, 3, 3, 3)


def test_without_slots_only_reports():
    assert intersect_lines_xy(0, 0, 1, 0, 0, -1, 0, 1)


def test_nearly_parallel_below_tolerance():
    # direction difference far below the shared epsilon
    assert not intersect_lines(Line(0, 0, 1, 0), Line(0, 1, 1, 1 + 1e-12))
