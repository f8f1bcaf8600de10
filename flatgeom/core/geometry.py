"""Scalar geometry primitives shared by the kernel modules.

Orientation tests, angles and polygon measures operate on plain floats or
(N,2) arrays so that the point, line and hull modules can build on them
without importing each other.
"""
from __future__ import annotations
import math
import numpy as np

__all__ = [
    'dot_perp', 'relative_ccw', 'angle_to_x', 'normalize_angle',
    'pt_line_dist_sq', 'polygon_signed_area', 'points_in_convex_polygon'
]

_TWO_PI = 2.0 * math.pi


def dot_perp(x0, y0, x1, y1):
    """Perpendicular dot product, the z-component of (x0,y0,0) x (x1,y1,0)."""
    return x0*y1 - y0*x1


def relative_ccw(x1, y1, x2, y2, px, py):
    """Position of (px,py) relative to the directed line (x1,y1)->(x2,y2).

    Returns 1, -1 or 0. In a y-up frame 1 means the point lies clockwise
    of the line (the turn p2 -> p1 -> p bends left), -1 counter-clockwise. Colinear points are
    classified by projection: -1 behind (x1,y1), 1 beyond (x2,y2), and 0
    when they lie on the closed segment.
    """
    x2 -= x1
    y2 -= y1
    px -= x1
    py -= y1
    ccw = px * y2 - py * x2
    if ccw == 0.0:
        ccw = px * x2 + py * y2
        if ccw > 0.0:
            px -= x2
            py -= y2
            ccw = px * x2 + py * y2
            if ccw < 0.0:
                ccw = 0.0
    if ccw < 0.0:
        return -1
    if ccw > 0.0:
        return 1
    return 0


def angle_to_x(x0, y0, x1, y1):
    """Angle in radians of the line (x0,y0)->(x1,y1) to the positive x-axis, in [-pi, pi]."""
    return math.atan2(y1 - y0, x1 - x0)


def normalize_angle(angle):
    """Wrap an angle in radians into [0, 2*pi)."""
    a = math.fmod(angle, _TWO_PI)
    if a < 0.0:
        a += _TWO_PI
    # fmod of a tiny negative angle can round up to exactly 2*pi
    if a >= _TWO_PI:
        a = 0.0
    return a


def pt_line_dist_sq(x1, y1, x2, y2, px, py):
    """Squared distance from (px,py) to the infinite line through (x1,y1),(x2,y2)."""
    x2 -= x1
    y2 -= y1
    px -= x1
    py -= y1
    dot = px * x2 + py * y2
    len_sq = x2 * x2 + y2 * y2
    proj_sq = (dot * dot / len_sq) if len_sq > 0.0 else 0.0
    dist_sq = px * px + py * py - proj_sq
    return dist_sq if dist_sq > 0.0 else 0.0


def polygon_signed_area(poly):
    """Shoelace signed area of a closed polygon given as an (N,2) array-like.

    Positive for counter-clockwise vertex order (y-up). Fewer than three
    vertices give 0.0.
    """
    pts = np.asarray(poly, dtype=np.float64).reshape(-1, 2)
    if pts.shape[0] < 3:
        return 0.0
    x = pts[:, 0]; y = pts[:, 1]
    return 0.5 * float(np.dot(x, np.roll(y, -1)) - np.dot(y, np.roll(x, -1)))


def points_in_convex_polygon(points, polygon, tol=0.0):
    """Vectorized inside-or-on-boundary test against a CCW convex polygon.

    points : (M,2) array-like
    polygon : (N,2) array-like, counter-clockwise, N >= 3
    tol : orientation slack; a point passes when every edge orientation is >= -tol

    Returns boolean array (M,).
    """
    pts = np.asarray(points, dtype=np.float64).reshape(-1, 2)
    poly = np.asarray(polygon, dtype=np.float64).reshape(-1, 2)
    a = poly
    b = np.roll(poly, -1, axis=0)
    # (N,M) orientation of each point against each directed edge
    o = ((b[:, 0, None] - a[:, 0, None]) * (pts[None, :, 1] - a[:, 1, None])
         - (b[:, 1, None] - a[:, 1, None]) * (pts[None, :, 0] - a[:, 0, None]))
    return np.all(o >= -tol, axis=0)
