"""Central numerical tolerance for the geometry kernel.

Every predicate in the kernel (parallel lines, equal hull angles, zero-length
segments, resampling step termination) compares against the same constant so
that the predicates stay mutually consistent. Reference it from here instead
of scattering literals.
"""
from __future__ import annotations

import numpy as np

# The tolerance is the single-precision literal 1e-8 widened to double,
# i.e. 9.99999993922529e-09 rather than exactly 1e-8.
EPS_GEOM: float = float(np.float32(1e-8))

__all__ = [
    'EPS_GEOM',
]
