"""Parallel timelines: children overlaid at fixed offsets."""

from datetime import timedelta

from timeweave.scheduler.parallel import ParallelScheduler
from timeweave.schema.event import OffsetTimeline
from timeweave.timeline.base import Timeline
from timeweave.units import as_seconds


class ParallelTimeline(Timeline):
    """Children that each start a fixed offset after the parallel itself.

    Children may overlap. The duration grows to cover the latest-ending child
    and never shrinks.
    """

    scheduler_class = ParallelScheduler

    def __init__(self):
        super().__init__(0)

    @property
    def entries(self) -> tuple[OffsetTimeline, ...]:
        """The children paired with their ``after`` offsets."""
        return tuple(self._timelines)

    @property
    def children(self) -> tuple[Timeline, ...]:
        return tuple(entry.timeline for entry in self._timelines)

    def append(self, timeline: Timeline, after: float | timedelta = 0) -> "ParallelTimeline":
        """Add a child starting ``after`` seconds into this timeline."""
        return self.extend(timeline, after=after)

    def extend(self, *timelines: Timeline, after: float | timedelta = 0) -> "ParallelTimeline":
        """Add several children, all starting ``after`` seconds in.

        Raises:
            DurationExceeded: If the longer duration no longer fits a serial
                timeline that holds this one; nothing is changed
        """
        after = as_seconds(after)
        if after < 0:
            raise ValueError(f"Offset must be non-negative, got {after}")
        for timeline in timelines:
            self._check_timeline(timeline)
        entries = [OffsetTimeline(timeline, after) for timeline in timelines]
        duration = max([self._duration] + [entry.offset + entry.duration for entry in entries])
        self._grow(duration)
        self._timelines.extend(entries)
        for timeline in timelines:
            self._adopt(timeline)
        return self

    def _grow(self, duration: float) -> None:
        if duration == self._duration:
            return
        for parent in self._containers():
            parent._check_resize(self, duration)
        for parent in self._containers():
            parent._resize(self, duration)
        self._duration = duration

    def _duration_with(self, child: Timeline, duration: float) -> float:
        ends = [
            entry.offset + (duration if entry.timeline is child else entry.duration)
            for entry in self._timelines
        ]
        return max([self._duration] + ends)

    def _check_resize(self, child: Timeline, duration: float) -> None:
        grown = self._duration_with(child, duration)
        if grown != self._duration:
            for parent in self._containers():
                parent._check_resize(self, grown)

    def _resize(self, child: Timeline, duration: float) -> None:
        self._grow(self._duration_with(child, duration))

    def __repr__(self) -> str:
        return f"ParallelTimeline(duration={self.duration}, children={len(self)})"
