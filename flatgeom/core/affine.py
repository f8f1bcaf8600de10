"""2D affine transforms.

An :class:`AffineTransform` holds the six coefficients of

    x' = m00*x + m01*y + m02
    y' = m10*x + m11*y + m12

(scaleX, shearX, translateX / shearY, scaleY, translateY). Composition
follows the usual matrix convention: ``a.concatenate(b)`` makes ``a`` apply
``b`` first. Mutating methods return ``self`` so calls can be chained.
"""
from __future__ import annotations

import math
import sys
from dataclasses import dataclass
from typing import Optional, Tuple

import numpy as np

from .points import Point, xy

__all__ = [
    'AffineTransform', 'identity', 'translation', 'rotation', 'scaling',
    'unit_square_to', 'invert', 'compute_x', 'compute_y',
    'compute_distance_x', 'compute_distance_y',
]


@dataclass
class AffineTransform:
    m00: float = 1.0
    m10: float = 0.0
    m01: float = 0.0
    m11: float = 1.0
    m02: float = 0.0
    m12: float = 0.0

    # Named accessors for the coefficient roles
    @property
    def scale_x(self) -> float:
        return self.m00

    @property
    def shear_y(self) -> float:
        return self.m10

    @property
    def shear_x(self) -> float:
        return self.m01

    @property
    def scale_y(self) -> float:
        return self.m11

    @property
    def translate_x(self) -> float:
        return self.m02

    @property
    def translate_y(self) -> float:
        return self.m12

    @property
    def determinant(self) -> float:
        return self.m00 * self.m11 - self.m01 * self.m10

    def set_transform(self, m00, m10, m01, m11, m02, m12) -> 'AffineTransform':
        self.m00 = float(m00); self.m10 = float(m10)
        self.m01 = float(m01); self.m11 = float(m11)
        self.m02 = float(m02); self.m12 = float(m12)
        return self

    def set_from(self, other: 'AffineTransform') -> 'AffineTransform':
        return self.set_transform(other.m00, other.m10, other.m01, other.m11, other.m02, other.m12)

    def copy(self) -> 'AffineTransform':
        return AffineTransform(self.m00, self.m10, self.m01, self.m11, self.m02, self.m12)

    def concatenate(self, other: 'AffineTransform') -> 'AffineTransform':
        """self = self x other, so that ``other`` is applied first."""
        a00, a01, a02 = self.m00, self.m01, self.m02
        a10, a11, a12 = self.m10, self.m11, self.m12
        b00, b01, b02 = other.m00, other.m01, other.m02
        b10, b11, b12 = other.m10, other.m11, other.m12
        return self.set_transform(
            a00 * b00 + a01 * b10,
            a10 * b00 + a11 * b10,
            a00 * b01 + a01 * b11,
            a10 * b01 + a11 * b11,
            a00 * b02 + a01 * b12 + a02,
            a10 * b02 + a11 * b12 + a12,
        )

    def pre_concatenate(self, other: 'AffineTransform') -> 'AffineTransform':
        """self = other x self, so that ``other`` is applied last."""
        result = other.copy().concatenate(self)
        return self.set_from(result)

    def translate(self, tx: float, ty: float) -> 'AffineTransform':
        return self.concatenate(translation(tx, ty))

    def rotate(self, angle: float) -> 'AffineTransform':
        return self.concatenate(rotation(angle))

    def scale(self, sx: float, sy: float) -> 'AffineTransform':
        return self.concatenate(scaling(sx, sy))

    def transform_xy(self, x: float, y: float) -> Tuple[float, float]:
        return (self.m00 * x + self.m01 * y + self.m02,
                self.m10 * x + self.m11 * y + self.m12)

    def transform_point(self, p, dst: Optional[Point] = None) -> Point:
        x, y = xy(p)
        tx, ty = self.transform_xy(x, y)
        if dst is None:
            return Point(tx, ty)
        return dst.set_location(tx, ty)

    def apply(self, points) -> np.ndarray:
        """Transform an (N,2) array-like, returning a new float64 (N,2) array."""
        pts = np.asarray(points, dtype=np.float64).reshape(-1, 2)
        x = pts[:, 0]
        y = pts[:, 1]
        out = np.empty_like(pts)
        # Same operation order as transform_xy so both paths round identically
        out[:, 0] = self.m00 * x + self.m01 * y + self.m02
        out[:, 1] = self.m10 * x + self.m11 * y + self.m12
        return out

    def as_matrix(self) -> np.ndarray:
        return np.array([
            [self.m00, self.m01, self.m02],
            [self.m10, self.m11, self.m12],
            [0.0, 0.0, 1.0],
        ], dtype=np.float64)

    def is_identity(self) -> bool:
        return (self.m00 == 1.0 and self.m11 == 1.0 and self.m10 == 0.0
                and self.m01 == 0.0 and self.m02 == 0.0 and self.m12 == 0.0)


def identity() -> AffineTransform:
    return AffineTransform()


def translation(tx: float, ty: float) -> AffineTransform:
    return AffineTransform(1.0, 0.0, 0.0, 1.0, float(tx), float(ty))


def rotation(angle: float) -> AffineTransform:
    """Counter-clockwise rotation (y-up) about the origin by ``angle`` radians."""
    sin = math.sin(angle)
    cos = math.cos(angle)
    # Quadrant angles get exact coefficients instead of cos(pi/2) ~ 6e-17
    if sin == 1.0 or sin == -1.0:
        cos = 0.0
    elif cos == 1.0 or cos == -1.0:
        sin = 0.0
    return AffineTransform(cos, sin, -sin, cos, 0.0, 0.0)


def scaling(sx: float, sy: float) -> AffineTransform:
    return AffineTransform(float(sx), 0.0, 0.0, float(sy), 0.0, 0.0)


def unit_square_to(rect, dst: Optional[AffineTransform] = None) -> AffineTransform:
    """Transform mapping the unit square onto ``rect`` (anything with min_x/min_y/max_x/max_y)."""
    result = translation(rect.min_x, rect.min_y)
    result.scale(rect.max_x - rect.min_x, rect.max_y - rect.min_y)
    if dst is None:
        return result
    return dst.set_from(result)


def invert(at: AffineTransform, dst: Optional[AffineTransform] = None) -> AffineTransform:
    """Return the inverse of ``at`` (stored in ``dst`` when given).

    Raises
    ------
    ValueError
        If the determinant is zero or not finite.
    """
    det = at.determinant
    if not math.isfinite(det) or abs(det) < sys.float_info.min:
        raise ValueError(f"Non-invertible transform (determinant={det!r})")
    m00, m01, m02 = at.m00, at.m01, at.m02
    m10, m11, m12 = at.m10, at.m11, at.m12
    result = dst if dst is not None else AffineTransform()
    return result.set_transform(
        m11 / det,
        -m10 / det,
        -m01 / det,
        m00 / det,
        (m01 * m12 - m11 * m02) / det,
        (m10 * m02 - m00 * m12) / det,
    )


def compute_x(at: AffineTransform, x: float, y: float) -> float:
    return at.m00 * x + at.m01 * y + at.m02


def compute_y(at: AffineTransform, x: float, y: float) -> float:
    return at.m10 * x + at.m11 * y + at.m12


def compute_distance_x(at: AffineTransform, distance_x: float) -> float:
    """Distance between two points that were ``distance_x`` apart along x, after the transform."""
    return math.hypot(at.m00 * distance_x, at.m10 * distance_x)


def compute_distance_y(at: AffineTransform, distance_y: float) -> float:
    """Distance between two points that were ``distance_y`` apart along y, after the transform."""
    return math.hypot(at.m01 * distance_y, at.m11 * distance_y)
