"""Line segments and line helpers.

A :class:`Line` is a directed pair of endpoints. Functions that take a line
also accept a pair of point-likes ``(p0, p1)`` or a flat ``(x1, y1, x2, y2)``
sequence; see :func:`line_coords`.
"""
from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Optional, Tuple

from .geometry import angle_to_x as _angle_to_x_xy
from .geometry import normalize_angle, relative_ccw, pt_line_dist_sq
from .points import Point, xy

__all__ = [
    'Line', 'line_coords', 'length', 'length_sq', 'angle_to_x', 'angle',
    'normalize_angle', 'relative_ccw', 'pt_line_dist_sq',
    'transform', 'scale', 'normalize', 'scale_to_length', 'rotate', 'format_line',
]


@dataclass
class Line:
    x1: float = 0.0
    y1: float = 0.0
    x2: float = 0.0
    y2: float = 0.0

    @classmethod
    def from_points(cls, p0, p1) -> 'Line':
        x1, y1 = xy(p0)
        x2, y2 = xy(p1)
        return cls(x1, y1, x2, y2)

    @property
    def p1(self) -> Point:
        return Point(self.x1, self.y1)

    @property
    def p2(self) -> Point:
        return Point(self.x2, self.y2)

    def set_line(self, x1: float, y1: float, x2: float, y2: float) -> 'Line':
        self.x1 = float(x1); self.y1 = float(y1)
        self.x2 = float(x2); self.y2 = float(y2)
        return self

    def as_tuple(self) -> Tuple[float, float, float, float]:
        return (self.x1, self.y1, self.x2, self.y2)


def line_coords(line) -> Tuple[float, float, float, float]:
    """Return (x1, y1, x2, y2) for a Line, a pair of point-likes or a 4-sequence."""
    if isinstance(line, Line):
        return line.x1, line.y1, line.x2, line.y2
    if len(line) == 4:
        x1, y1, x2, y2 = line
        return float(x1), float(y1), float(x2), float(y2)
    p0, p1 = line
    x1, y1 = xy(p0)
    x2, y2 = xy(p1)
    return x1, y1, x2, y2


def _slot(dst: Optional[Line]) -> Line:
    return Line() if dst is None else dst


def length_sq(line) -> float:
    x1, y1, x2, y2 = line_coords(line)
    dx = x2 - x1
    dy = y2 - y1
    return dx * dx + dy * dy


def length(line) -> float:
    return math.sqrt(length_sq(line))


def angle_to_x(p0, p1=None) -> float:
    """Angle of a line (or of p0->p1) to the positive x-axis, in [-pi, pi]."""
    if p1 is None:
        x1, y1, x2, y2 = line_coords(p0)
    else:
        x1, y1 = xy(p0)
        x2, y2 = xy(p1)
    return _angle_to_x_xy(x1, y1, x2, y2)


def angle(line0, line1) -> float:
    """Signed angle from line0 to line1 (difference of their angles to the x-axis)."""
    return angle_to_x(line1) - angle_to_x(line0)


def transform(at, line, dst: Optional[Line] = None) -> Line:
    x1, y1, x2, y2 = line_coords(line)
    tx1, ty1 = at.transform_xy(x1, y1)
    tx2, ty2 = at.transform_xy(x2, y2)
    return _slot(dst).set_line(tx1, ty1, tx2, ty2)


def scale(factor: float, line, dst: Optional[Line] = None) -> Line:
    """Keep the start point and scale the direction vector by ``factor``."""
    x1, y1, x2, y2 = line_coords(line)
    return _slot(dst).set_line(x1, y1, x1 + (x2 - x1) * factor, y1 + (y2 - y1) * factor)


def normalize(line, dst: Optional[Line] = None) -> Line:
    return scale(1.0 / length(line), line, dst)


def scale_to_length(new_length: float, line, dst: Optional[Line] = None) -> Line:
    return scale(new_length / length(line), line, dst)


def rotate(angle_rad: float, line, dst: Optional[Line] = None) -> Line:
    """Rotate the line about its start point."""
    x1, y1, x2, y2 = line_coords(line)
    dx = x2 - x1
    dy = y2 - y1
    sa = math.sin(angle_rad)
    ca = math.cos(angle_rad)
    nx = ca * dx - sa * dy
    ny = sa * dx + ca * dy
    return _slot(dst).set_line(x1, y1, x1 + nx, y1 + ny)


def format_line(line, fmt: str = '%f') -> str:
    x1, y1, x2, y2 = line_coords(line)
    return '(' + fmt % x1 + ',' + fmt % y1 + ')-(' + fmt % x2 + ',' + fmt % y2 + ')'
