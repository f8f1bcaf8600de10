"""Arrow outlines as flattened paths.

An :class:`ArrowCreator` holds the head settings and turns a line from a
start point to a tip into a closed arrow outline, a head-only outline or a
set of open strokes. Head length and head width are either absolute or a
fraction of the arrow length clamped to an absolute range.

Example
-------
    creator = create().set_relative_head_length(0.25, 2.0, 10.0)
    outline = creator.build_shape(((0, 0), (40, 0)), shaft_width=1.5)
"""
from __future__ import annotations

import math
from typing import Tuple

from .constants import EPS_GEOM
from .lines import line_coords
from .paths import Path

__all__ = ['ArrowCreator', 'create']


def _check_range(minimum: float, maximum: float) -> None:
    if minimum > maximum:
        raise ValueError(f"minimum {minimum!r} exceeds maximum {maximum!r}")


class ArrowCreator:
    """Builder for arrow paths.

    Defaults: head length 0.2 and head width 0.15 of the arrow length, head
    base at 0.15 of the head length measured from the head tips towards
    the tip. The setters return the creator so calls can be chained.
    """

    def __init__(self):
        self.set_relative_head_length(0.2)
        self.set_relative_head_width(0.15)
        self.set_head_base_position(0.15)

    def set_absolute_head_length(self, head_length: float) -> 'ArrowCreator':
        self._head_length = float(head_length)
        self._min_head_length = self._max_head_length = self._head_length
        self._relative_head_length = False
        return self

    def set_relative_head_length(self, head_length: float, min_absolute: float = 0.0,
                                 max_absolute: float = math.inf) -> 'ArrowCreator':
        _check_range(min_absolute, max_absolute)
        self._head_length = float(head_length)
        self._min_head_length = float(min_absolute)
        self._max_head_length = float(max_absolute)
        self._relative_head_length = True
        return self

    def set_absolute_head_width(self, head_width: float) -> 'ArrowCreator':
        self._head_width = float(head_width)
        self._min_head_width = self._max_head_width = self._head_width
        self._relative_head_width = False
        return self

    def set_relative_head_width(self, head_width: float, min_absolute: float = 0.0,
                                max_absolute: float = math.inf) -> 'ArrowCreator':
        _check_range(min_absolute, max_absolute)
        self._head_width = float(head_width)
        self._min_head_width = float(min_absolute)
        self._max_head_width = float(max_absolute)
        self._relative_head_width = True
        return self

    def set_head_base_position(self, head_base_position: float) -> 'ArrowCreator':
        """Where the shaft meets the head: 0 at the head tips, 1 at the arrow tip."""
        self._head_base_position = float(head_base_position)
        return self

    def head_length(self, arrow_length: float) -> float:
        value = self._head_length * arrow_length if self._relative_head_length else self._head_length
        return min(self._max_head_length, max(self._min_head_length, value))

    def head_width(self, arrow_length: float) -> float:
        value = self._head_width * arrow_length if self._relative_head_width else self._head_width
        return min(self._max_head_width, max(self._min_head_width, value))

    def _frame(self, line) -> Tuple[float, float, float, float, float, float, float]:
        # start, tip, unit direction and arrow length
        x0, y0, x1, y1 = line_coords(line)
        length = math.hypot(x1 - x0, y1 - y0)
        if length <= EPS_GEOM:
            raise ValueError("arrow start and tip coincide")
        return x0, y0, x1, y1, (x1 - x0) / length, (y1 - y0) / length, length

    def _head_tips(self, x1, y1, dx, dy, length):
        head_length = self.head_length(length)
        half_width = 0.5 * self.head_width(length)
        tx = x1 - head_length * dx
        ty = y1 - head_length * dy
        # (dy, -dx) is the right-hand normal of the arrow direction
        return (tx + half_width * dy, ty - half_width * dx), (tx - half_width * dy, ty + half_width * dx)

    def _outline(self, line, shaft_width: float, include_shaft: bool) -> Path:
        x0, y0, x1, y1, dx, dy, length = self._frame(line)
        tip_l, tip_r = self._head_tips(x1, y1, dx, dy, length)
        base_offset = self.head_length(length) * (1.0 - self._head_base_position)
        bx = x1 - base_offset * dx
        by = y1 - base_offset * dy
        ox = 0.5 * shaft_width * dy
        oy = -0.5 * shaft_width * dx

        path = Path()
        if include_shaft:
            path.move_to(x0 + ox, y0 + oy).line_to(bx + ox, by + oy)
        else:
            path.move_to(bx + ox, by + oy)
        path.line_to(*tip_l).line_to(x1, y1).line_to(*tip_r).line_to(bx - ox, by - oy)
        if include_shaft:
            path.line_to(x0 - ox, y0 - oy)
        return path.close_path()

    def build_shape(self, line, shaft_width: float) -> Path:
        """Closed outline of shaft and head for ``line`` (a Line, two points or four coordinates)."""
        return self._outline(line, shaft_width, True)

    def build_head_shape(self, line, shaft_width: float) -> Path:
        """Closed outline of the head only; ``shaft_width`` sets the width of its base."""
        return self._outline(line, shaft_width, False)

    def build_lines(self, line) -> Path:
        """Three open strokes: the shaft and one from each head tip to the tip."""
        x0, y0, x1, y1, dx, dy, length = self._frame(line)
        tip_l, tip_r = self._head_tips(x1, y1, dx, dy, length)
        path = Path().move_to(x0, y0).line_to(x1, y1)
        path.move_to(*tip_l).line_to(x1, y1)
        path.move_to(*tip_r).line_to(x1, y1)
        return path


def create() -> ArrowCreator:
    """New :class:`ArrowCreator` with the default head settings."""
    return ArrowCreator()
