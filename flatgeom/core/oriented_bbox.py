"""Minimum-area oriented bounding box of a planar point set.

One side of a minimum-area enclosing rectangle is colinear with an edge of
the convex hull, so every hull edge is tried as alignment direction: the
points are moved into the frame where the edge starts at the origin and
runs along +x, and the axis-aligned bounds in that frame are measured. The
winning frame's bounds are mapped back with the exact inverse of the
alignment (a translation composed with a pure rotation) instead of a
generic matrix inverse.
"""
from __future__ import annotations

import math
from typing import List, Optional, Sequence, Tuple

import numpy as np

from .affine import AffineTransform, rotation, translation
from .config import BoundingBoxConfig
from .convex_hull import convex_hull
from .geometry import angle_to_x
from .logging_utils import get_logger
from .points import Point, as_array, from_array, xy

logger = get_logger('flatgeom.obb')

__all__ = [
    'minimum_oriented_bounding_box',
    'minimum_oriented_bounding_box_area',
    'alignment_transform',
    'inverse_alignment_transform',
]


def alignment_transform(p0, p1) -> AffineTransform:
    """Transform moving p0 to the origin and turning the direction p0->p1 onto +x."""
    x0, y0 = xy(p0)
    x1, y1 = xy(p1)
    angle = angle_to_x(x0, y0, x1, y1)
    at = rotation(-angle)
    at.concatenate(translation(-x0, -y0))
    return at


def inverse_alignment_transform(p0, p1) -> AffineTransform:
    """Exact inverse of :func:`alignment_transform`: rotate back, then move the origin to p0."""
    x0, y0 = xy(p0)
    x1, y1 = xy(p1)
    angle = angle_to_x(x0, y0, x1, y1)
    at = translation(x0, y0)
    at.concatenate(rotation(angle))
    return at


def _aligned_bounds(at: AffineTransform, pts: np.ndarray) -> Tuple[float, float, float, float]:
    t = at.apply(pts)
    mn = t.min(axis=0)
    mx = t.max(axis=0)
    return float(mn[0]), float(mn[1]), float(mx[0]), float(mx[1])


def _alignment_edge_index(hull: np.ndarray, candidates: np.ndarray) -> Tuple[int, float]:
    """Index i of the hull edge (i, i+1) whose alignment gives the smallest bounds area."""
    h = hull.shape[0]
    min_area = math.inf
    min_index = 0
    for i in range(h):
        p0 = hull[i]
        p1 = hull[(i + 1) % h]
        at = alignment_transform(p0, p1)
        min_x, min_y, max_x, max_y = _aligned_bounds(at, candidates)
        area = (max_x - min_x) * (max_y - min_y)
        if area < min_area:
            min_area = area
            min_index = i
    return min_index, min_area


def _minimum_box(points: Sequence, config: Optional[BoundingBoxConfig]):
    cfg = config if config is not None else BoundingBoxConfig()
    pts = as_array(points)
    if pts.shape[0] == 0:
        raise ValueError("cannot compute an oriented bounding box of an empty point set")
    hull = as_array(convex_hull([pts[i] for i in range(pts.shape[0])]))
    candidates = hull if cfg.transform_scope == 'hull' else pts
    index, area = _alignment_edge_index(hull, candidates)
    p0 = hull[index]
    p1 = hull[(index + 1) % hull.shape[0]]
    logger.debug("oriented bbox: %d points, hull size %d, scope=%s, edge %d, area %.6g",
                 pts.shape[0], hull.shape[0], cfg.transform_scope, index, area)
    return pts, p0, p1


def minimum_oriented_bounding_box(points: Sequence,
                                  config: Optional[BoundingBoxConfig] = None) -> List[Point]:
    """Corners of the minimum-area rectangle of any orientation containing ``points``.

    Parameters
    ----------
    points : sequence of point-likes or (N,2) array
    config : BoundingBoxConfig, optional
        Selects which points each candidate edge is evaluated on.

    Returns
    -------
    list of Point
        Four corners in the original space. In the frame aligned with the
        chosen hull edge they are (min x, min y), (max x, min y),
        (max x, max y), (min x, max y).

    Raises
    ------
    ValueError
        If ``points`` is empty.

    Degenerate input is accepted: a single point gives four identical
    corners and colinear points a zero-height box.
    """
    pts, p0, p1 = _minimum_box(points, config)
    min_x, min_y, max_x, max_y = _aligned_bounds(alignment_transform(p0, p1), pts)
    aligned = np.array([
        [min_x, min_y],
        [max_x, min_y],
        [max_x, max_y],
        [min_x, max_y],
    ], dtype=np.float64)
    return from_array(inverse_alignment_transform(p0, p1).apply(aligned))


def minimum_oriented_bounding_box_area(points: Sequence,
                                       config: Optional[BoundingBoxConfig] = None) -> float:
    pts, p0, p1 = _minimum_box(points, config)
    min_x, min_y, max_x, max_y = _aligned_bounds(alignment_transform(p0, p1), pts)
    return (max_x - min_x) * (max_y - min_y)
