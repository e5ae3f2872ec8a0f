"""Partitioning the circle across an ordered list of segments."""
from __future__ import annotations

import logging
from typing import Iterable, Iterator, Sequence

from rota_wheel.angles import FULL_CIRCLE
from rota_wheel.errors import ConfigurationError, OutOfRangeError
from rota_wheel.segments import Segment, SegmentData, make_segment

_logger = logging.getLogger(__name__)


def partition(segments: Sequence[Segment]) -> None:
    """Assign ``start_angle``/``end_angle`` to every segment in order.

    Explicit sizes are kept exactly and the remaining arc is shared evenly
    by the auto-sized segments. When nothing remains (or nothing is
    auto-sized) the explicit sizes are laid out as given and auto segments
    collapse to zero; the total is not forced to 360.
    """
    arc_used = 0.0
    num_set = 0
    for segment in segments:
        if segment.size is not None:
            arc_used += segment.size
            num_set += 1

    arc_left = FULL_CIRCLE - arc_used
    num_auto = len(segments) - num_set
    fills = arc_left > 0 and num_auto > 0
    arc_each = arc_left / num_auto if fills else 0.0

    current = 0.0
    for segment in segments:
        segment.start_angle = current
        current += segment.size if segment.size is not None else arc_each
        segment.end_angle = current

    if fills:
        # Float accumulation can leave the last edge a hair short of 360.
        if segments[-1].size is None:
            segments[-1].end_angle = FULL_CIRCLE
    elif segments and current != FULL_CIRCLE:
        _logger.debug("segment sizes total %s degrees, not %s", current, FULL_CIRCLE)


def _check_position(position: object) -> int:
    if isinstance(position, bool) or not isinstance(position, int):
        raise ConfigurationError(f"segment position must be an int, got {position!r}")
    return position


class SegmentLayout:
    """Ordered segments, re-partitioned after every structural change.

    Positions are 1-based like segment numbers; iteration and indexing are
    0-based like any list.
    """

    def __init__(self, segments: Iterable[Segment] = ()) -> None:
        self._segments: list[Segment] = []
        for segment in segments:
            self._check_new(segment)
            self._segments.append(segment)
        partition(self._segments)

    def _check_new(self, segment: Segment) -> None:
        # Angles live on the segment object, so one object can hold one slot.
        if any(existing is segment for existing in self._segments):
            raise ConfigurationError("segment is already part of this wheel")

    def __len__(self) -> int:
        return len(self._segments)

    def __iter__(self) -> Iterator[Segment]:
        return iter(self._segments)

    def __getitem__(self, index: int) -> Segment:
        return self._segments[index]

    def segment(self, position: int) -> Segment:
        position = _check_position(position)
        if not 1 <= position <= len(self._segments):
            raise OutOfRangeError(position, len(self._segments))
        return self._segments[position - 1]

    def update(self) -> None:
        """Re-run the partition pass, e.g. after editing a segment's size."""
        partition(self._segments)

    def insert(self, data: SegmentData = None, position: int | None = None) -> Segment:
        """Insert a segment at 1-based ``position``; ``None`` or out of range appends."""
        segment = make_segment(data)
        self._check_new(segment)
        end = len(self._segments) + 1
        if position is None:
            position = end
        position = _check_position(position)
        if position < 1 or position > end:
            position = end
        self._segments.insert(position - 1, segment)
        partition(self._segments)
        return segment

    def delete(self, position: int) -> Segment:
        """Remove the segment at 1-based ``position`` and return it."""
        position = _check_position(position)
        if not 1 <= position <= len(self._segments):
            raise OutOfRangeError(position, len(self._segments))
        segment = self._segments.pop(position - 1)
        partition(self._segments)
        return segment

    def indicated_index(self, angle: float) -> int | None:
        """0-based index of the first segment containing ``angle``, if any.

        Bounds are inclusive, so an angle on a shared edge resolves to the
        earlier segment.
        """
        for index, segment in enumerate(self._segments):
            if segment.contains(angle):
                return index
        return None
