"""Intersections of infinite lines and of finite line segments.

Both tests solve the 2x2 system in a frame centered on each segment's
midpoint (after the Wild Magic ``IntrSegment2Segment2`` formulation) and
then shift the result to start/end-relative parameters, so relative
location 0.0 is a segment's start point and 1.0 its end point.

Results are reported through optional :class:`Point` slots that are mutated
in place: ``relative_location`` receives (t0, t1), the parameters on line 0
and line 1, and ``absolute_location`` the intersection point. Parallel lines,
coincident lines included, never intersect.
"""
from __future__ import annotations

import math
from typing import NamedTuple, Optional

from .constants import EPS_GEOM
from .geometry import dot_perp
from .lines import line_coords
from .points import Point

__all__ = [
    'Intersection',
    'intersect_lines', 'intersect_lines_xy',
    'intersect_segments', 'intersect_segments_xy',
    'line_intersection', 'segment_intersection',
]


class Intersection(NamedTuple):
    relative: Point
    absolute: Point


def intersect_lines_xy(s0x0, s0y0, s0x1, s0y1, s1x0, s1y0, s1x1, s1y1,
                       relative_location: Optional[Point] = None,
                       absolute_location: Optional[Point] = None) -> bool:
    """Intersect the infinite lines through the two given segments."""
    dx0 = s0x1 - s0x0
    dy0 = s0y1 - s0y0
    dx1 = s1x1 - s1x0
    dy1 = s1y1 - s1y0

    len0 = math.sqrt(dx0 * dx0 + dy0 * dy0)
    len1 = math.sqrt(dx1 * dx1 + dy1 * dy1)
    # A zero-length line has no direction; treat it like the parallel case
    if len0 == 0.0 or len1 == 0.0:
        return False
    inv_len0 = 1.0 / len0
    inv_len1 = 1.0 / len1

    dir0x = dx0 * inv_len0
    dir0y = dy0 * inv_len0
    dir1x = dx1 * inv_len1
    dir1y = dy1 * inv_len1

    dot = dot_perp(dir0x, dir0y, dir1x, dir1y)
    if not abs(dot) > EPS_GEOM:
        return False
    if relative_location is None and absolute_location is None:
        return True

    c0x = s0x0 + dx0 * 0.5
    c0y = s0y0 + dy0 * 0.5
    c1x = s1x0 + dx1 * 0.5
    c1y = s1y0 + dy1 * 0.5

    cdx = c1x - c0x
    cdy = c1y - c0y

    dot0 = dot_perp(cdx, cdy, dir0x, dir0y)
    dot1 = dot_perp(cdx, cdy, dir1x, dir1y)
    inv_dot = 1.0 / dot
    s0 = dot1 * inv_dot
    s1 = dot0 * inv_dot
    if relative_location is not None:
        relative_location.set_location(s0 * inv_len0 + 0.5, s1 * inv_len1 + 0.5)
    if absolute_location is not None:
        absolute_location.set_location(c0x + s0 * dir0x, c0y + s0 * dir0y)
    return True


def intersect_segments_xy(s0x0, s0y0, s0x1, s0y1, s1x0, s1y0, s1x1, s1y1,
                          relative_location: Optional[Point] = None,
                          absolute_location: Optional[Point] = None) -> bool:
    """Intersect two finite segments; both relative locations must lie in [0, 1].

    The slots are filled from the infinite-line solution before the range
    check, so on a False result caused by the range check they still hold
    the location where the supporting lines cross.
    """
    if relative_location is None:
        relative_location = Point()
    if not intersect_lines_xy(s0x0, s0y0, s0x1, s0y1, s1x0, s1y0, s1x1, s1y1,
                              relative_location, absolute_location):
        return False
    return (0.0 <= relative_location.x <= 1.0
            and 0.0 <= relative_location.y <= 1.0)


def intersect_lines(line0, line1,
                    relative_location: Optional[Point] = None,
                    absolute_location: Optional[Point] = None) -> bool:
    """Whether the infinite lines through ``line0`` and ``line1`` intersect.

    Parameters
    ----------
    line0, line1 : Line, pair of point-likes, or (x1, y1, x2, y2)
    relative_location : Point, optional
        Receives (t0, t1), the relative locations on line0 and line1.
    absolute_location : Point, optional
        Receives the intersection point.

    Returns
    -------
    bool
        False when the lines are parallel within ``EPS_GEOM``.
    """
    return intersect_lines_xy(*line_coords(line0), *line_coords(line1),
                              relative_location, absolute_location)


def intersect_segments(seg0, seg1,
                       relative_location: Optional[Point] = None,
                       absolute_location: Optional[Point] = None) -> bool:
    """Whether the finite segments ``seg0`` and ``seg1`` intersect (endpoints included)."""
    return intersect_segments_xy(*line_coords(seg0), *line_coords(seg1),
                                 relative_location, absolute_location)


def line_intersection(line0, line1) -> Optional[Intersection]:
    """Allocating variant of :func:`intersect_lines`; None when parallel."""
    rel = Point()
    ab = Point()
    if intersect_lines(line0, line1, rel, ab):
        return Intersection(rel, ab)
    return None


def segment_intersection(seg0, seg1) -> Optional[Intersection]:
    """Allocating variant of :func:`intersect_segments`; None when they do not meet."""
    rel = Point()
    ab = Point()
    if intersect_segments(seg0, seg1, rel, ab):
        return Intersection(rel, ab)
    return None
