"""Public package API for the flatgeom 2D geometry kernel.

This facade provides a flat import surface on top of the internal
implementation package ``flatgeom.core``.

Example
-------
    from flatgeom import convex_hull, minimum_oriented_bounding_box, delta_resample

The deeper modules (``flatgeom.core.*``) are considered internal and may
change; rely on this layer for public symbols. Plotting helpers live in
``flatgeom.core.visualization`` and are not imported here so that the kernel
never pulls in matplotlib.
"""
from importlib import import_module as _imp
import logging as _logging

try:  # Python 3.8+ runtime version export
    from importlib.metadata import version as _pkg_version, PackageNotFoundError as _NotFound
    __version__ = _pkg_version("flatgeom")  # populated when installed
except _NotFound:  # pragma: no cover - source checkout
    __version__ = "0.0.0+dev"

_logging.getLogger(__name__).addHandler(_logging.NullHandler())

_const = _imp('flatgeom.core.constants')
_geom = _imp('flatgeom.core.geometry')
_points = _imp('flatgeom.core.points')
_lines = _imp('flatgeom.core.lines')
_affine = _imp('flatgeom.core.affine')
_rects = _imp('flatgeom.core.rectangles')
_inter = _imp('flatgeom.core.intersections')
_hull = _imp('flatgeom.core.convex_hull')
_obb = _imp('flatgeom.core.oriented_bbox')
_paths = _imp('flatgeom.core.paths')
_delta = _imp('flatgeom.core.delta_path')
_proj = _imp('flatgeom.core.projections')
_stars = _imp('flatgeom.core.stars')
_arrows = _imp('flatgeom.core.arrows')
_config = _imp('flatgeom.core.config')
_log = _imp('flatgeom.core.logging_utils')

# Tolerance
EPS_GEOM = _const.EPS_GEOM

# Value types
Point = _points.Point
Line = _lines.Line
AffineTransform = _affine.AffineTransform
Rectangle = _rects.Rectangle

# Kernel
convex_hull = _hull.convex_hull
convex_hull_array = _hull.convex_hull_array
minimum_oriented_bounding_box = _obb.minimum_oriented_bounding_box
minimum_oriented_bounding_box_area = _obb.minimum_oriented_bounding_box_area
intersect_lines = _inter.intersect_lines
intersect_segments = _inter.intersect_segments
line_intersection = _inter.line_intersection
segment_intersection = _inter.segment_intersection
Intersection = _inter.Intersection
DeltaPathIterator = _delta.DeltaPathIterator
delta_resample = _delta.delta_resample

# Paths
SegmentType = _paths.SegmentType
PathSegment = _paths.PathSegment
PathIterator = _paths.PathIterator
Path = _paths.Path
WindingRule = _paths.WindingRule
path_from_points = _paths.path_from_points
interpolate = _paths.interpolate

# Shape builders
create_star_shape = _stars.create_star_shape
ArrowCreator = _arrows.ArrowCreator

# Support
relative_ccw = _geom.relative_ccw
drop_perpendicular = _proj.drop_perpendicular
relative_projection_location = _proj.relative_projection_location

# Configuration and logging
BoundingBoxConfig = _config.BoundingBoxConfig
ResampleConfig = _config.ResampleConfig
configure_logging = _log.configure_logging
get_logger = _log.get_logger

# Namespace submodules for exploratory users
constants = _const
geometry = _geom
points = _points
lines = _lines
affine = _affine
rectangles = _rects
intersections = _inter
paths = _paths
projections = _proj
stars = _stars
arrows = _arrows

__all__ = [
    '__version__',
    # tolerance
    'EPS_GEOM',
    # value types
    'Point', 'Line', 'AffineTransform', 'Rectangle',
    # kernel
    'convex_hull', 'convex_hull_array',
    'minimum_oriented_bounding_box', 'minimum_oriented_bounding_box_area',
    'intersect_lines', 'intersect_segments', 'line_intersection', 'segment_intersection', 'Intersection',
    'DeltaPathIterator', 'delta_resample',
    # paths
    'SegmentType', 'WindingRule', 'PathSegment', 'PathIterator', 'Path', 'path_from_points', 'interpolate',
    # shape builders
    'create_star_shape', 'ArrowCreator',
    # support
    'relative_ccw', 'drop_perpendicular', 'relative_projection_location',
    # configuration / logging
    'BoundingBoxConfig', 'ResampleConfig', 'configure_logging', 'get_logger',
    # submodules / namespaces
    'constants', 'geometry', 'points', 'lines', 'affine', 'rectangles', 'intersections', 'paths', 'projections',
    'stars', 'arrows',
]
