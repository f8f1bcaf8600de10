"""Visualization helpers for hulls, bounding boxes and resampled paths.

Used by the demo scripts; the kernel never imports this module.
"""
from __future__ import annotations

import os as _os
import matplotlib as _mpl
# Ensure a non-interactive backend in headless environments before importing pyplot
if not _os.environ.get('MPLBACKEND'):
    _mpl.use('Agg')
import numpy as np
import matplotlib.pyplot as plt

from .convex_hull import convex_hull_array
from .logging_utils import get_logger
from .oriented_bbox import minimum_oriented_bounding_box
from .paths import SegmentType, compute_sub_paths, iter_segments
from .points import as_array

logger = get_logger('flatgeom.viz')


def _closed(arr: np.ndarray) -> np.ndarray:
    if arr.shape[0] == 0:
        return arr
    return np.vstack([arr, arr[:1]])


def plot_hull_and_box(points, outname="hull_obb.png", show_points: bool = True):
    """Plot a point set with its convex hull and minimum oriented bounding box.

    Args:
        points: point-likes or an (N,2) array
        outname: output image path
        show_points: if True, scatter the input points
    """
    pts = as_array(points)
    plt.figure(figsize=(6, 6))
    if pts.shape[0] == 0:
        plt.title('empty point set')
        plt.savefig(outname, dpi=150)
        plt.close()
        return
    hull = convex_hull_array(pts)
    box = as_array(minimum_oriented_bounding_box(pts))
    if show_points:
        # scale markers down for dense point sets
        npts = max(1, pts.shape[0])
        s = max(0.6, min(12.0, 200.0 / float(npts)))
        plt.scatter(pts[:, 0], pts[:, 1], s=s, color='black')
    ring = _closed(hull)
    plt.plot(ring[:, 0], ring[:, 1], color=(0.2, 0.6, 0.8), linewidth=1.4, label=f'hull (h={hull.shape[0]})')
    ring = _closed(box)
    plt.plot(ring[:, 0], ring[:, 1], color=(0.85, 0.2, 0.2), linewidth=1.4, label='oriented bbox')
    plt.legend(loc='upper right', fontsize=8, frameon=True)
    plt.gca().set_aspect('equal')
    plt.title(outname)
    plt.savefig(outname, dpi=150)
    plt.close()
    logger.info('Wrote %s', outname)


def plot_resampled_path(segments, outname="resampled.png", original=None):
    """Plot a flattened path as sub-path polylines with its vertices marked.

    Args:
        segments: path iterator, Path or iterable of PathSegment
        outname: output image path
        original: optional second path drawn underneath in grey
    """
    segs = list(iter_segments(segments))
    plt.figure(figsize=(6, 6))
    if original is not None:
        for region in compute_sub_paths(original):
            arr = as_array(region)
            plt.plot(arr[:, 0], arr[:, 1], color=(0.6, 0.6, 0.6), linewidth=2.5)
    palette = [(0.85, 0.2, 0.2), (0.2, 0.6, 0.8), (0.2, 0.8, 0.3), (0.75, 0.5, 0.2), (0.6, 0.2, 0.7)]
    for i, region in enumerate(compute_sub_paths(segs)):
        col = palette[i % len(palette)]
        arr = as_array(region)
        plt.plot(arr[:, 0], arr[:, 1], color=col, linewidth=1.0, marker='o', markersize=2.5)
    closes = [s for s in segs if s.type is SegmentType.CLOSE]
    if closes:
        plt.scatter([s.x for s in closes], [s.y for s in closes], s=30, facecolors='none', edgecolors='k')
    plt.gca().set_aspect('equal')
    plt.title(outname)
    plt.savefig(outname, dpi=150)
    plt.close()
    logger.info('Wrote %s (%d segments)', outname, len(segs))


__all__ = ['plot_hull_and_box', 'plot_resampled_path']
