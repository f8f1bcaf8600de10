"""Orthogonal projection of a point onto an infinite line."""
from __future__ import annotations

from typing import Optional

from .points import Point, xy

__all__ = ['relative_projection_location', 'drop_perpendicular']


def relative_projection_location(p0, p1, p) -> float:
    """Parameter t of the projection of ``p`` on the line p0-p1 (0 at p0, 1 at p1).

    Returns 0.0 when p0 and p1 coincide.
    """
    x0, y0 = xy(p0)
    x1, y1 = xy(p1)
    px, py = xy(p)
    dx = x1 - x0
    dy = y1 - y0
    len_sq = dx * dx + dy * dy
    if len_sq == 0.0:
        return 0.0
    return ((px - x0) * dx + (py - y0) * dy) / len_sq


def drop_perpendicular(p0, p1, p, dst: Optional[Point] = None) -> Point:
    """Foot of the perpendicular from ``p`` onto the line p0-p1."""
    x0, y0 = xy(p0)
    x1, y1 = xy(p1)
    t = relative_projection_location(p0, p1, p)
    out = Point() if dst is None else dst
    return out.set_location(x0 + t * (x1 - x0), y0 + t * (y1 - y0))
