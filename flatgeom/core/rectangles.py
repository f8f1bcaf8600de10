"""Axis-aligned rectangles.

Rectangles are stored as origin plus extent, matching what
:func:`flatgeom.core.points.compute_bounds` produces. Corner indices wrap
modulo 4 and run min/min, max/min, max/max, min/max.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, List, Optional

from .points import Point, xy

__all__ = [
    'Rectangle', 'union', 'translate', 'scale', 'move_center_to', 'compute_bounds',
]


@dataclass
class Rectangle:
    x: float = 0.0
    y: float = 0.0
    width: float = 0.0
    height: float = 0.0

    def set_rect(self, x: float, y: float, width: float, height: float) -> 'Rectangle':
        self.x = float(x)
        self.y = float(y)
        self.width = float(width)
        self.height = float(height)
        return self

    @property
    def min_x(self) -> float:
        return self.x

    @property
    def min_y(self) -> float:
        return self.y

    @property
    def max_x(self) -> float:
        return self.x + self.width

    @property
    def max_y(self) -> float:
        return self.y + self.height

    @property
    def area(self) -> float:
        return self.width * self.height

    def center(self, dst: Optional[Point] = None) -> Point:
        if dst is None:
            dst = Point()
        return dst.set_location(self.x + 0.5 * self.width, self.y + 0.5 * self.height)

    def corner(self, index: int, dst: Optional[Point] = None) -> Point:
        if dst is None:
            dst = Point()
        i = index % 4
        if i == 0:
            return dst.set_location(self.min_x, self.min_y)
        if i == 1:
            return dst.set_location(self.max_x, self.min_y)
        if i == 2:
            return dst.set_location(self.max_x, self.max_y)
        return dst.set_location(self.min_x, self.max_y)

    def corners(self) -> List[Point]:
        return [self.corner(i) for i in range(4)]

    def contains(self, p, tol: float = 0.0) -> bool:
        px, py = xy(p)
        return (self.min_x - tol <= px <= self.max_x + tol
                and self.min_y - tol <= py <= self.max_y + tol)


def _slot(dst: Optional[Rectangle]) -> Rectangle:
    return Rectangle() if dst is None else dst


def union(rectangles: Iterable[Rectangle], dst: Optional[Rectangle] = None) -> Rectangle:
    """Smallest rectangle containing all given rectangles (an empty input leaves ``dst`` unchanged)."""
    result = _slot(dst)
    first = True
    for r in rectangles:
        if first:
            result.set_rect(r.x, r.y, r.width, r.height)
            first = False
            continue
        min_x = min(result.min_x, r.min_x)
        min_y = min(result.min_y, r.min_y)
        max_x = max(result.max_x, r.max_x)
        max_y = max(result.max_y, r.max_y)
        result.set_rect(min_x, min_y, max_x - min_x, max_y - min_y)
    return result


def translate(r: Rectangle, dx: float, dy: float, dst: Optional[Rectangle] = None) -> Rectangle:
    return _slot(dst).set_rect(r.x + dx, r.y + dy, r.width, r.height)


def scale(r: Rectangle, factor: float, dst: Optional[Rectangle] = None) -> Rectangle:
    """Scale the extent of ``r`` about its center."""
    cx = r.x + 0.5 * r.width
    cy = r.y + 0.5 * r.height
    w = r.width * factor
    h = r.height * factor
    return _slot(dst).set_rect(cx - 0.5 * w, cy - 0.5 * h, w, h)


def move_center_to(r: Rectangle, center, dst: Optional[Rectangle] = None) -> Rectangle:
    cx, cy = xy(center)
    return _slot(dst).set_rect(cx - 0.5 * r.width, cy - 0.5 * r.height, r.width, r.height)


def compute_bounds(at, r: Rectangle, dst: Optional[Rectangle] = None) -> Rectangle:
    """Bounds of ``r`` after mapping its four corners through the transform ``at``."""
    xs = []
    ys = []
    for i in range(4):
        c = r.corner(i)
        tx, ty = at.transform_xy(c.x, c.y)
        xs.append(tx)
        ys.append(ty)
    min_x = min(xs); min_y = min(ys)
    return _slot(dst).set_rect(min_x, min_y, max(xs) - min_x, max(ys) - min_y)
