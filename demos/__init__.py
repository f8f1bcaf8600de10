"""Demos for the flatgeom kernel.

Each module exposes a run_* function callable from Python and a module-level
__main__ guard so it can be executed via:

    python -m demos.hull_obb_demo
    python -m demos.delta_resample_demo
"""
from .hull_obb_demo import run_hull_obb_demo
from .delta_resample_demo import run_delta_resample_demo

__all__ = ['run_hull_obb_demo', 'run_delta_resample_demo']
