#!/usr/bin/env python3
"""
Delta resampling of a flattened path with several sub-paths.

Builds a closed star polygon and an open zig-zag polyline, resamples them
so that consecutive points are at most --max-delta apart, logs the step
statistics and saves a plot of the result over the original.

Usage examples:
    python3 demos/delta_resample_demo.py --max-delta 0.4 --out resampled.png
"""
from __future__ import annotations

import argparse
import logging
import math

import numpy as np

from flatgeom.core.config import ResampleConfig
from flatgeom.core.delta_path import delta_resample
from flatgeom.core.logging_utils import configure_logging, get_logger
from flatgeom.core.paths import Path, SegmentType, compute_length
from flatgeom.core.stars import create_star_shape
from flatgeom.core.visualization import plot_resampled_path

log = get_logger('flatgeom.demo.delta')


def build_demo_path(spikes: int = 5) -> Path:
    """A closed star followed by an open zig-zag."""
    path = create_star_shape(0.0, 0.0, 1.2, 3.0, spikes)
    path.move_to(5.0, -2.0)
    for k in range(1, 6):
        path.line_to(5.0 + 0.8 * k, -2.0 + (1.5 if k % 2 else 0.0))
    return path


def step_lengths(segments) -> np.ndarray:
    steps = []
    prev = None
    for seg in segments:
        if seg.type is not SegmentType.MOVE_TO:
            steps.append(math.hypot(seg.x - prev[0], seg.y - prev[1]))
        prev = (seg.x, seg.y)
    return np.asarray(steps, dtype=float)


def run_delta_resample_demo(max_delta: float = 0.5, spikes: int = 5, out: str = 'resampled.png'):
    cfg = ResampleConfig(max_delta=max_delta)
    path = build_demo_path(spikes)
    resampled = list(delta_resample(path, config=cfg))
    steps = step_lengths(resampled)
    log.info('input segments=%d output segments=%d length=%.4f',
             len(path), len(resampled), compute_length(path))
    if steps.size:
        log.info('step length min=%.4f mean=%.4f max=%.4f (max_delta=%.4f)',
                 steps.min(), steps.mean(), steps.max(), cfg.max_delta)
    plot_resampled_path(resampled, outname=out, original=path)
    return resampled


def main(argv=None):
    parser = argparse.ArgumentParser(description='Delta resampling demo')
    parser.add_argument('--max-delta', type=float, default=0.5, help='Maximum distance between consecutive points')
    parser.add_argument('--spikes', type=int, default=5, help='Number of star spikes')
    parser.add_argument('--out', type=str, default='resampled.png', help='Output image path')
    parser.add_argument('--verbose', action='store_true', help='Log resampling plans at DEBUG level')
    args = parser.parse_args(argv)

    configure_logging(level=logging.DEBUG if args.verbose else logging.INFO)
    run_delta_resample_demo(args.max_delta, args.spikes, args.out)


if __name__ == '__main__':
    main()
