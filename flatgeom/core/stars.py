"""Star outlines as flattened paths."""
from __future__ import annotations

import math
from typing import List, Tuple

from .constants import EPS_GEOM
from .paths import Path

__all__ = ['MIN_RAYS', 'create_star_shape']

MIN_RAYS = 2


def _mid(p, q) -> Tuple[float, float]:
    return 0.5 * (p[0] + q[0]), 0.5 * (p[1] + q[1])


def _lerp(p, q, alpha) -> Tuple[float, float]:
    return p[0] + alpha * (q[0] - p[0]), p[1] + alpha * (q[1] - p[1])


def _flat_quad_to(path: Path, start, control, end, segments: int) -> None:
    """Append the quadratic Bezier start-control-end as ``segments`` lines."""
    for k in range(1, segments + 1):
        t = k / segments
        u = 1.0 - t
        path.line_to(u * u * start[0] + 2.0 * u * t * control[0] + t * t * end[0],
                     u * u * start[1] + 2.0 * u * t * control[1] + t * t * end[1])


def create_star_shape(center_x: float, center_y: float, inner_radius: float, outer_radius: float,
                      num_rays: int, start_angle: float = 0.0, inner_roundness: float = 0.0,
                      outer_roundness: float = 0.0, curve_segments: int = 8) -> Path:
    """Closed star outline around (center_x, center_y).

    The outline alternates between ``num_rays`` outer tips at
    ``outer_radius`` and as many inner corners at ``inner_radius``, the
    first outer tip at ``start_angle`` radians, angles increasing
    counter-clockwise (y-up). The path starts at the midpoint between the
    last inner corner and the first tip.

    ``inner_roundness`` and ``outer_roundness`` in [0, 1] round the inner
    corners and outer tips: 0 keeps a sharp corner, 1 replaces it by a
    quadratic curve between the midpoints of its two edges. Curves are
    flattened into ``curve_segments`` lines each.

    Raises
    ------
    ValueError
        If ``num_rays`` is less than 2 or ``curve_segments`` is less than 1.
    """
    if num_rays < MIN_RAYS:
        raise ValueError(f"The number of rays must be at least {MIN_RAYS}, but is {num_rays}")
    if curve_segments < 1:
        raise ValueError(f"curve_segments must be at least 1, got {curve_segments}")

    n = 2 * num_rays
    corners: List[Tuple[float, float]] = []
    for i in range(n):
        angle = start_angle + i * math.pi / num_rays
        radius = outer_radius if i % 2 == 0 else inner_radius
        corners.append((center_x + radius * math.cos(angle), center_y + radius * math.sin(angle)))

    path = Path()
    for i, corner in enumerate(corners):
        prev_mid = _mid(corners[i - 1], corner)
        next_mid = _mid(corner, corners[(i + 1) % n])
        if i == 0:
            path.move_to(*prev_mid)
        roundness = outer_roundness if i % 2 == 0 else inner_roundness

        if abs(roundness) < EPS_GEOM:
            path.line_to(*corner).line_to(*next_mid)
        elif abs(roundness - 1.0) < EPS_GEOM:
            _flat_quad_to(path, prev_mid, corner, next_mid, curve_segments)
        else:
            # straight run up to the curve, curve around the corner, straight run on
            enter = _lerp(prev_mid, corner, 1.0 - roundness)
            leave = _lerp(corner, next_mid, roundness)
            path.line_to(*enter)
            _flat_quad_to(path, enter, corner, leave, curve_segments)
            path.line_to(*next_mid)
    return path.close_path()
