"""Configuration objects for the flatgeom kernel builders."""
from __future__ import annotations

import math
from dataclasses import dataclass

TRANSFORM_SCOPES = ('hull', 'all')


@dataclass
class BoundingBoxConfig:
    """Options for the minimum oriented bounding box search.

    - transform_scope: 'hull' evaluates each candidate edge on the hull
      vertices only (O(h^2)); 'all' re-transforms the complete input for
      every candidate (O(h*n)). The final box is always measured on the
      complete input.
    """
    transform_scope: str = 'hull'

    def __post_init__(self):
        if self.transform_scope not in TRANSFORM_SCOPES:
            raise ValueError(
                f"transform_scope must be one of {TRANSFORM_SCOPES}, got {self.transform_scope!r}")


@dataclass
class ResampleConfig:
    """Options for delta resampling of flattened paths.

    max_delta is the largest allowed distance between consecutive output
    points.
    """
    max_delta: float = 1.0

    def __post_init__(self):
        if not (math.isfinite(self.max_delta) and self.max_delta > 0.0):
            raise ValueError(f"max_delta must be a positive finite number, got {self.max_delta!r}")


__all__ = [
    'BoundingBoxConfig', 'ResampleConfig', 'TRANSFORM_SCOPES',
]
