"""Flattened paths: segment model, path iterators and path measures.

A flattened path is a sequence of :class:`PathSegment` values of type
MOVE_TO, LINE_TO or CLOSE describing one or more polylines ("sub-paths").
CLOSE carries the coordinates of the sub-path's start point, so every
segment states where the pen ends up.

Path iterators follow a pull protocol driven entirely by the caller:
``is_done()``, ``current_segment()`` and ``advance()``, plus the
``winding_rule`` that decides which regions the path encloses. Every
iterator is also a Python iterable that drains it. Consumers in this module
accept a path iterator, a :class:`Path`, or any iterable of segments.
"""
from __future__ import annotations

import enum
import math
from typing import Iterable, Iterator, List, NamedTuple, Optional

from .geometry import polygon_signed_area
from .lines import Line
from .points import Point, xy

__all__ = [
    'SegmentType', 'WindingRule', 'PathSegment', 'PathIterator', 'SegmentIterator', 'Path',
    'FLAT_TYPES', 'check_flat', 'path_iterator', 'iter_segments', 'path_from_points',
    'compute_points', 'compute_line_segments', 'compute_sub_paths',
    'compute_signed_area', 'compute_length', 'interpolate',
]


class WindingRule(enum.Enum):
    EVEN_ODD = 'even_odd'
    NON_ZERO = 'non_zero'


class SegmentType(enum.Enum):
    MOVE_TO = 'move_to'
    LINE_TO = 'line_to'
    CLOSE = 'close'
    # Curved types only exist so that flattened-path consumers can reject them
    QUAD_TO = 'quad_to'
    CUBIC_TO = 'cubic_to'


FLAT_TYPES = (SegmentType.MOVE_TO, SegmentType.LINE_TO, SegmentType.CLOSE)


class PathSegment(NamedTuple):
    type: SegmentType
    x: float = 0.0
    y: float = 0.0


def _coerce(segment) -> PathSegment:
    if isinstance(segment, PathSegment):
        return segment
    seg_type, x, y = segment
    return PathSegment(SegmentType(seg_type), float(x), float(y))


def check_flat(segment: PathSegment) -> PathSegment:
    """Return ``segment`` unchanged, or raise ValueError for a curved segment."""
    if segment.type not in FLAT_TYPES:
        raise ValueError(f"invalid segment type in flattened path: {segment.type}")
    return segment


class PathIterator:
    """Base class for pull-style segment producers."""

    @property
    def winding_rule(self) -> WindingRule:
        return WindingRule.NON_ZERO

    def is_done(self) -> bool:
        raise NotImplementedError

    def current_segment(self) -> PathSegment:
        raise NotImplementedError

    def advance(self) -> None:
        raise NotImplementedError

    def __iter__(self) -> Iterator[PathSegment]:
        while not self.is_done():
            yield self.current_segment()
            self.advance()


class SegmentIterator(PathIterator):
    """Path iterator over any iterable of segments, pulled lazily one ahead."""

    def __init__(self, segments: Iterable, winding_rule: WindingRule = WindingRule.NON_ZERO):
        self._it = iter(segments)
        self._winding_rule = WindingRule(winding_rule)
        self._current: Optional[PathSegment] = None
        self._done = False
        self.advance()

    @property
    def winding_rule(self) -> WindingRule:
        return self._winding_rule

    def is_done(self) -> bool:
        return self._done

    def current_segment(self) -> PathSegment:
        if self._done:
            raise IndexError("path iterator is exhausted")
        return self._current

    def advance(self) -> None:
        if self._done:
            return
        try:
            self._current = _coerce(next(self._it))
        except StopIteration:
            self._current = None
            self._done = True


class Path:
    """Append-only flattened path builder."""

    def __init__(self, winding_rule: WindingRule = WindingRule.NON_ZERO):
        self._segments: List[PathSegment] = []
        self._move: Optional[Point] = None
        self.winding_rule = WindingRule(winding_rule)

    def move_to(self, x: float, y: float) -> 'Path':
        self._segments.append(PathSegment(SegmentType.MOVE_TO, float(x), float(y)))
        self._move = Point(x, y)
        return self

    def line_to(self, x: float, y: float) -> 'Path':
        if self._move is None:
            raise ValueError("line_to requires a preceding move_to")
        self._segments.append(PathSegment(SegmentType.LINE_TO, float(x), float(y)))
        return self

    def close_path(self) -> 'Path':
        if self._move is None:
            raise ValueError("close_path requires a preceding move_to")
        self._segments.append(PathSegment(SegmentType.CLOSE, self._move.x, self._move.y))
        return self

    @property
    def segments(self) -> List[PathSegment]:
        return list(self._segments)

    def path_iterator(self) -> SegmentIterator:
        return SegmentIterator(self._segments, self.winding_rule)

    def __iter__(self) -> Iterator[PathSegment]:
        return iter(list(self._segments))

    def __len__(self) -> int:
        return len(self._segments)


def path_iterator(producer) -> PathIterator:
    """Adapt a Path, a path iterator or an iterable of segments to a PathIterator."""
    if isinstance(producer, PathIterator):
        return producer
    if isinstance(producer, Path):
        return producer.path_iterator()
    return SegmentIterator(producer)


def iter_segments(producer) -> Iterator[PathSegment]:
    """Yield the flat segments of ``producer``, rejecting curved ones."""
    for segment in path_iterator(producer):
        yield check_flat(segment)


def path_from_points(points: Iterable, close: bool = False) -> Path:
    """Polyline through ``points`` (closed when ``close`` and non-empty)."""
    path = Path()
    has_points = False
    for p in points:
        x, y = xy(p)
        if has_points:
            path.line_to(x, y)
        else:
            path.move_to(x, y)
            has_points = True
    if close and has_points:
        path.close_path()
    return path


def compute_points(producer, store_on_close: bool = False) -> List[Point]:
    """Points visited by the path; CLOSE adds the start point again when ``store_on_close``."""
    result: List[Point] = []
    for seg in iter_segments(producer):
        if seg.type is SegmentType.CLOSE:
            if store_on_close:
                result.append(Point(seg.x, seg.y))
        else:
            result.append(Point(seg.x, seg.y))
    return result


def compute_line_segments(producer) -> List[Line]:
    """Line segments of the path, including the closing line of closed sub-paths."""
    result: List[Line] = []
    px = py = 0.0
    fx = fy = 0.0
    for seg in iter_segments(producer):
        if seg.type is SegmentType.MOVE_TO:
            px, py = seg.x, seg.y
            fx, fy = seg.x, seg.y
        elif seg.type is SegmentType.CLOSE:
            result.append(Line(px, py, fx, fy))
            px, py = fx, fy
        else:
            result.append(Line(px, py, seg.x, seg.y))
            px, py = seg.x, seg.y
    return result


def compute_sub_paths(producer) -> List[List[Point]]:
    """Split the path into point lists at every MOVE_TO and after every CLOSE."""
    regions: List[List[Point]] = []
    current: List[Point] = []
    start = Point()
    for seg in iter_segments(producer):
        if seg.type is SegmentType.MOVE_TO:
            if current:
                regions.append(current)
            start = Point(seg.x, seg.y)
            current = [start.copy()]
        elif seg.type is SegmentType.CLOSE:
            if current:
                regions.append(current)
            current = []
        else:
            # drawing on after a CLOSE continues from the sub-path start
            if not current:
                current = [start.copy()]
            current.append(Point(seg.x, seg.y))
    if current:
        regions.append(current)
    return regions


def compute_signed_area(producer) -> float:
    """Sum of the shoelace areas of the sub-paths (each implicitly closed).

    Counter-clockwise regions (y-up) count positive, clockwise ones negative.
    """
    area = 0.0
    for region in compute_sub_paths(producer):
        area += polygon_signed_area([p.as_tuple() for p in region])
    return area


def compute_length(producer) -> float:
    """Total length of all line segments of the path, closing segments included."""
    total = 0.0
    for line in compute_line_segments(producer):
        total += math.hypot(line.x2 - line.x1, line.y2 - line.y1)
    return total


def interpolate(producer0, producer1, alpha: float) -> Path:
    """New path whose points lie at ``alpha`` between matching points of two paths.

    Both paths must have the same segment types in the same order. ``alpha``
    0 reproduces the first path, 1 the second; other values extrapolate
    linearly. The result takes the winding rule of the first path.

    Raises
    ------
    ValueError
        If one path has more segments than the other, if the segment types
        differ at some position, or if a segment is curved.
    """
    it0 = path_iterator(producer0)
    it1 = path_iterator(producer1)
    result = Path(it0.winding_rule)
    index = 0
    while not it0.is_done():
        if it1.is_done():
            raise ValueError(f"second path ended after {index} segment(s), first path continues")
        seg0 = check_flat(it0.current_segment())
        seg1 = check_flat(it1.current_segment())
        if seg0.type is not seg1.type:
            raise ValueError(
                f"incompatible segments at index {index}: {seg0.type.value} vs. {seg1.type.value}")
        if seg0.type is SegmentType.CLOSE:
            result.close_path()
        else:
            x = seg0.x + (seg1.x - seg0.x) * alpha
            y = seg0.y + (seg1.y - seg0.y) * alpha
            if seg0.type is SegmentType.MOVE_TO:
                result.move_to(x, y)
            else:
                result.line_to(x, y)
        it0.advance()
        it1.advance()
        index += 1
    if not it1.is_done():
        raise ValueError(f"first path ended after {index} segment(s), second path continues")
    return result
