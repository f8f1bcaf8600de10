"""Convex hull of a planar point set (Graham scan).

The hull is returned as the caller's own point objects, counter-clockwise
(y-up), starting at the colexicographic minimum and without a repeated
closing point. Inputs of three points or fewer are returned unchanged, even
when they are colinear or coincide.
"""
from __future__ import annotations

from functools import cmp_to_key
from typing import List, Sequence

import numpy as np

from .constants import EPS_GEOM
from .geometry import angle_to_x, normalize_angle, relative_ccw
from .logging_utils import get_logger
from .points import as_array, compare_yx, xy

logger = get_logger('flatgeom.hull')

__all__ = ['convex_hull', 'convex_hull_array']


def convex_hull(points: Sequence) -> list:
    """Compute the convex hull vertices of ``points``.

    Parameters
    ----------
    points : sequence of point-likes
        Unordered input; it is not modified.

    Returns
    -------
    list
        Hull vertices in counter-clockwise order starting at the point with
        minimum y (then minimum x). For ``len(points) <= 3`` a new list with
        the input points in their original order.

    Notes
    -----
    The scan keeps a point when the turn is a left turn *or* degenerate
    (orientation >= 0), which tolerates nearly colinear and duplicated
    points but means fully degenerate inputs are handled best-effort rather
    than reduced to a guaranteed minimal vertex set.
    """
    pts = list(points)
    if len(pts) <= 3:
        return pts

    reference = min(pts, key=cmp_to_key(compare_yx))
    rx, ry = xy(reference)

    def angle_of(p) -> float:
        px, py = xy(p)
        return normalize_angle(angle_to_x(rx, ry, px, py))

    # Pair every point with its angle once instead of recomputing in the comparator
    keyed = [(angle_of(p), p) for p in pts]

    def compare(k0, k1) -> int:
        a0, p0 = k0
        a1, p1 = k1
        if abs(a0 - a1) > EPS_GEOM:
            return -1 if a0 < a1 else 1
        return compare_yx(p0, p1)

    keyed.sort(key=cmp_to_key(compare))
    unique = _collapse_equal_angles(keyed, rx, ry)
    hull = _scan(unique)
    logger.debug("convex hull: %d input points, %d after angle collapse, %d hull vertices",
                 len(pts), len(unique), len(hull))
    return hull


def _collapse_equal_angles(keyed, rx: float, ry: float) -> list:
    """Keep only the farthest point of each run of equal angles (within EPS_GEOM).

    ``keyed`` is the angle-sorted list of (angle, point) pairs whose first
    entry is the reference point itself.
    """
    def dist_sq(p) -> float:
        px, py = xy(p)
        dx = px - rx
        dy = py - ry
        return dx * dx + dy * dy

    result = [keyed[0][1]]
    previous_angle = 2.0 * np.pi
    previous_dist_sq = np.finfo(np.float64).max
    for angle, p in keyed[1:]:
        d = dist_sq(p)
        if abs(angle - previous_angle) > EPS_GEOM:
            result.append(p)
        elif d > previous_dist_sq:
            result[-1] = p
        previous_angle = angle
        previous_dist_sq = d
    return result


def _scan(points: List) -> list:
    """Graham scan over angle-sorted points with unique angles."""
    stack = [points[0], points[1]]
    i = 2
    n = len(points)
    while i < n:
        p = points[i]
        # only the reference point left, and it is always a hull vertex
        if len(stack) < 2:
            stack.append(p)
            i += 1
            continue
        x0, y0 = xy(stack[-1])
        x1, y1 = xy(stack[-2])
        x, y = xy(p)
        if relative_ccw(x0, y0, x1, y1, x, y) >= 0:
            stack.append(p)
            i += 1
        else:
            # retry the same point against the new top two
            stack.pop()
    return stack


def convex_hull_array(points) -> np.ndarray:
    """Convex hull of an (N,2) array-like, returned as a float64 (H,2) array."""
    arr = as_array(points)
    rows = [arr[i] for i in range(arr.shape[0])]
    hull = convex_hull(rows)
    if not hull:
        return np.empty((0, 2), dtype=np.float64)
    return np.vstack(hull).astype(np.float64, copy=False)
