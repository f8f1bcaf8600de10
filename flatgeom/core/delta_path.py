"""Delta resampling of flattened paths.

:class:`DeltaPathIterator` wraps a flattened path iterator and re-emits it
so that no two consecutive points are farther apart than ``max_delta``.
MOVE_TO segments pass through unchanged; every LINE_TO, and the virtual
line that a CLOSE draws back to the sub-path start, is cut into
``ceil(length / max_delta)`` equal steps. Intermediate points are
interpolated on the original segment and the final step repeats the exact
original end point, so segment boundaries never drift.

The iterator is a small state machine advanced only by the caller::

    AWAITING_DELEGATE_SEGMENT --MOVE_TO--> AWAITING_DELEGATE_SEGMENT
    AWAITING_DELEGATE_SEGMENT --LINE_TO/CLOSE--> STEPPING_SEGMENT
    STEPPING_SEGMENT --last step--> AWAITING_DELEGATE_SEGMENT
    AWAITING_DELEGATE_SEGMENT --delegate exhausted--> DONE
"""
from __future__ import annotations

import enum
import math
from typing import Optional

from .config import ResampleConfig
from .constants import EPS_GEOM
from .logging_utils import get_logger
from .paths import PathIterator, PathSegment, SegmentType, WindingRule, check_flat, path_iterator

logger = get_logger('flatgeom.delta')

__all__ = ['ResampleState', 'DeltaPathIterator', 'delta_resample']


class ResampleState(enum.Enum):
    AWAITING_DELEGATE_SEGMENT = 'awaiting_delegate_segment'
    STEPPING_SEGMENT = 'stepping_segment'
    DONE = 'done'


class DeltaPathIterator(PathIterator):
    """Path iterator bounding the distance between consecutive points.

    Parameters
    ----------
    delegate : PathIterator, Path or iterable of PathSegment
        A flattened path: MOVE_TO, LINE_TO and CLOSE segments only.
    max_delta : float
        Maximum distance between two consecutive output points.

    Raises
    ------
    ValueError
        If ``max_delta`` is not a positive finite number, or (while
        iterating) if the delegate yields a curved segment or a segment so
        long relative to ``max_delta`` that its step count overflows.

    The winding rule of the delegate is passed through unchanged.
    """

    def __init__(self, delegate, max_delta: float):
        if not (math.isfinite(max_delta) and max_delta > 0.0):
            raise ValueError(f"max_delta must be a positive finite number, got {max_delta!r}")
        self._delegate = path_iterator(delegate)
        self._max_delta = float(max_delta)
        self._state = ResampleState.AWAITING_DELEGATE_SEGMENT
        self._current: Optional[PathSegment] = None

        # Last MOVE_TO of the delegate, the target of a CLOSE
        self._move_x = 0.0
        self._move_y = 0.0
        # Segment being stepped: from (prev) towards (next)
        self._prev_x = 0.0
        self._prev_y = 0.0
        self._next_x = 0.0
        self._next_y = 0.0
        self._dx = 0.0
        self._dy = 0.0
        self._length = 0.0
        self._step = 0.0
        self._steps = 1
        self._step_index = 0
        self._close_at_end = False

        self.advance()

    @property
    def max_delta(self) -> float:
        return self._max_delta

    @property
    def state(self) -> ResampleState:
        return self._state

    @property
    def winding_rule(self) -> WindingRule:
        return self._delegate.winding_rule

    def is_done(self) -> bool:
        return self._state is ResampleState.DONE

    def current_segment(self) -> PathSegment:
        if self._current is None:
            raise IndexError("delta path iterator is exhausted")
        return self._current

    def advance(self) -> None:
        if self._state is ResampleState.DONE:
            return
        if self._state is ResampleState.AWAITING_DELEGATE_SEGMENT:
            if not self._pull_delegate_segment():
                return
        self._take_step()

    def _pull_delegate_segment(self) -> bool:
        """Consume one delegate segment; True when it starts a segment to step along."""
        if self._delegate.is_done():
            self._state = ResampleState.DONE
            self._current = None
            return False
        seg = check_flat(self._delegate.current_segment())
        self._delegate.advance()

        if seg.type is SegmentType.MOVE_TO:
            self._current = PathSegment(SegmentType.MOVE_TO, seg.x, seg.y)
            self._prev_x = self._next_x = self._move_x = seg.x
            self._prev_y = self._next_y = self._move_y = seg.y
            return False

        self._prev_x = self._next_x
        self._prev_y = self._next_y
        if seg.type is SegmentType.CLOSE:
            self._next_x = self._move_x
            self._next_y = self._move_y
            self._close_at_end = True
        else:
            self._next_x = seg.x
            self._next_y = seg.y
            self._close_at_end = False

        self._dx = self._next_x - self._prev_x
        self._dy = self._next_y - self._prev_y
        self._length = math.hypot(self._dx, self._dy)
        self._step = self._max_delta
        self._steps = 1
        if self._length > EPS_GEOM:
            ratio = self._length / self._max_delta
            if not math.isfinite(ratio):
                raise ValueError(
                    f"segment of length {self._length:.6g} cannot be split into steps of "
                    f"at most {self._max_delta:.6g}: step count overflows")
            self._steps = int(math.ceil(ratio))
            self._step = self._length / self._steps
        self._step_index = 0
        self._state = ResampleState.STEPPING_SEGMENT
        logger.debug("resampling %s of length %.6g in %d step(s) of %.6g",
                     seg.type.value, self._length, self._steps, self._step)
        return True

    def _take_step(self) -> None:
        self._step_index += 1
        position = self._step_index * self._step
        if self._step_index >= self._steps or position >= self._length - EPS_GEOM:
            end_type = SegmentType.CLOSE if self._close_at_end else SegmentType.LINE_TO
            self._current = PathSegment(end_type, self._next_x, self._next_y)
            self._state = ResampleState.AWAITING_DELEGATE_SEGMENT
            return
        relative = position / self._length
        self._current = PathSegment(
            SegmentType.LINE_TO,
            self._prev_x + relative * self._dx,
            self._prev_y + relative * self._dy,
        )


def delta_resample(producer, max_delta: Optional[float] = None,
                   config: Optional[ResampleConfig] = None) -> DeltaPathIterator:
    """Wrap a flattened path so that consecutive points are at most ``max_delta`` apart.

    ``max_delta`` overrides ``config.max_delta`` when both are given; one of
    them is required.
    """
    if max_delta is None:
        if config is None:
            raise ValueError("delta_resample needs max_delta or a ResampleConfig")
        max_delta = config.max_delta
    return DeltaPathIterator(producer, max_delta)
