"""Point type, point arithmetic and point comparators.

Kernel functions accept any "point-like" value: a :class:`Point`, any object
exposing ``x``/``y`` attributes, or a length-2 indexable such as a tuple or a
numpy row. Functions producing a point take an optional ``dst`` slot which is
mutated and returned when given, so hot loops can avoid allocation.
"""
from __future__ import annotations

import math
from dataclasses import dataclass
from functools import cmp_to_key
from typing import Iterable, List, Optional, Sequence, Tuple

import numpy as np

from .geometry import angle_to_x, normalize_angle, pt_line_dist_sq

__all__ = [
    'Point', 'xy', 'as_array', 'from_array',
    'add', 'sub', 'scale', 'add_scaled', 'interpolate',
    'compare_yx', 'compare_xy', 'by_angle_comparator', 'by_distance_comparator',
    'by_distance_to_line_comparator', 'sort_points',
    'compute_bounds', 'compute_center_of_gravity', 'transform', 'inverse_transform',
]


@dataclass
class Point:
    """Mutable 2D point with double precision coordinates."""
    x: float = 0.0
    y: float = 0.0

    def __post_init__(self):
        self.x = float(self.x)
        self.y = float(self.y)

    def set_location(self, x: float, y: float) -> 'Point':
        self.x = float(x)
        self.y = float(y)
        return self

    def distance_sq(self, other) -> float:
        ox, oy = xy(other)
        dx = self.x - ox
        dy = self.y - oy
        return dx * dx + dy * dy

    def distance(self, other) -> float:
        return math.sqrt(self.distance_sq(other))

    def copy(self) -> 'Point':
        return Point(self.x, self.y)

    def as_tuple(self) -> Tuple[float, float]:
        return (self.x, self.y)

    def __iter__(self):
        yield self.x
        yield self.y

    def __len__(self) -> int:
        return 2

    def __getitem__(self, index: int) -> float:
        return (self.x, self.y)[index]


def xy(p) -> Tuple[float, float]:
    """Return the coordinates of a point-like value as a float pair."""
    if isinstance(p, Point):
        return p.x, p.y
    if hasattr(p, 'x') and hasattr(p, 'y'):
        return float(p.x), float(p.y)
    return float(p[0]), float(p[1])


def as_array(points) -> np.ndarray:
    """Stack point-likes into a float64 (N,2) array (arrays pass through as a copy-free view when possible)."""
    if isinstance(points, np.ndarray):
        return np.asarray(points, dtype=np.float64).reshape(-1, 2)
    coords = [xy(p) for p in points]
    if not coords:
        return np.empty((0, 2), dtype=np.float64)
    return np.asarray(coords, dtype=np.float64)


def from_array(arr) -> List[Point]:
    a = np.asarray(arr, dtype=np.float64).reshape(-1, 2)
    return [Point(float(r[0]), float(r[1])) for r in a]


def _slot(dst: Optional[Point]) -> Point:
    return Point() if dst is None else dst


def add(p0, p1, dst: Optional[Point] = None) -> Point:
    x0, y0 = xy(p0); x1, y1 = xy(p1)
    return _slot(dst).set_location(x0 + x1, y0 + y1)


def sub(p0, p1, dst: Optional[Point] = None) -> Point:
    x0, y0 = xy(p0); x1, y1 = xy(p1)
    return _slot(dst).set_location(x0 - x1, y0 - y1)


def scale(p, factor: float, dst: Optional[Point] = None) -> Point:
    x, y = xy(p)
    return _slot(dst).set_location(x * factor, y * factor)


def add_scaled(p0, factor: float, p1, dst: Optional[Point] = None) -> Point:
    """Compute p0 + factor * p1."""
    x0, y0 = xy(p0); x1, y1 = xy(p1)
    return _slot(dst).set_location(x0 + factor * x1, y0 + factor * y1)


def interpolate(p0, p1, alpha: float, dst: Optional[Point] = None) -> Point:
    """Linear interpolation; alpha=0 gives p0 and alpha=1 gives p1."""
    x0, y0 = xy(p0); x1, y1 = xy(p1)
    return _slot(dst).set_location(x0 + alpha * (x1 - x0), y0 + alpha * (y1 - y0))


def _compare(a: float, b: float) -> int:
    return (a > b) - (a < b)


def compare_yx(p0, p1) -> int:
    """Colexicographic order: by y, then by x."""
    x0, y0 = xy(p0); x1, y1 = xy(p1)
    c = _compare(y0, y1)
    if c != 0:
        return c
    return _compare(x0, x1)


def compare_xy(p0, p1) -> int:
    """Lexicographic order: by x, then by y."""
    x0, y0 = xy(p0); x1, y1 = xy(p1)
    c = _compare(x0, x1)
    if c != 0:
        return c
    return _compare(y0, y1)


def by_angle_comparator(center):
    """Comparator ordering points by the angle of center->p to the x-axis, in [0, 2*pi)."""
    cx, cy = xy(center)

    def compare(p0, p1) -> int:
        x0, y0 = xy(p0); x1, y1 = xy(p1)
        a0 = normalize_angle(angle_to_x(cx, cy, x0, y0))
        a1 = normalize_angle(angle_to_x(cx, cy, x1, y1))
        return _compare(a0, a1)
    return compare


def by_distance_comparator(reference):
    """Comparator ordering points by squared distance to a reference point."""
    rx, ry = xy(reference)

    def compare(p0, p1) -> int:
        x0, y0 = xy(p0); x1, y1 = xy(p1)
        d0 = (x0 - rx) ** 2 + (y0 - ry) ** 2
        d1 = (x1 - rx) ** 2 + (y1 - ry) ** 2
        return _compare(d0, d1)
    return compare


def by_distance_to_line_comparator(p0, p1):
    """Comparator ordering points by squared distance to the infinite line p0-p1."""
    lx0, ly0 = xy(p0); lx1, ly1 = xy(p1)

    def compare(a, b) -> int:
        ax, ay = xy(a); bx, by = xy(b)
        da = pt_line_dist_sq(lx0, ly0, lx1, ly1, ax, ay)
        db = pt_line_dist_sq(lx0, ly0, lx1, ly1, bx, by)
        return _compare(da, db)
    return compare


def compute_bounds(points: Iterable):
    """Axis-aligned bounding rectangle of the given (non-empty) points."""
    # local import avoids a points <-> rectangles cycle
    from .rectangles import Rectangle
    arr = as_array(points)
    if arr.shape[0] == 0:
        raise ValueError("cannot compute the bounds of an empty point set")
    mn = arr.min(axis=0)
    mx = arr.max(axis=0)
    return Rectangle(float(mn[0]), float(mn[1]), float(mx[0] - mn[0]), float(mx[1] - mn[1]))


def compute_center_of_gravity(points: Iterable) -> Optional[Point]:
    arr = as_array(points)
    if arr.shape[0] == 0:
        return None
    c = arr.mean(axis=0)
    return Point(float(c[0]), float(c[1]))


def transform(at, points: Iterable) -> List[Point]:
    """Apply an AffineTransform to every point, returning new Points."""
    return from_array(at.apply(as_array(points)))


def inverse_transform(at, p, dst: Optional[Point] = None) -> Point:
    """Map p through the inverse of ``at``; raises ValueError when ``at`` is singular."""
    from .affine import invert
    return invert(at).transform_point(p, dst)


def sort_points(points: Sequence, comparator) -> list:
    """Return a new list sorted with a cmp-style comparator."""
    return sorted(points, key=cmp_to_key(comparator))
