"""Serial timelines: children placed one after another with random gaps."""

import math
from datetime import timedelta

from timeweave.errors import DurationExceeded
from timeweave.scheduler.serial import SerialScheduler
from timeweave.timeline.base import Timeline


class SerialTimeline(Timeline):
    """A fixed-length window whose children occur in insertion order.

    The children never overlap. Where exactly each one lands is only decided
    at scheduling time, by spreading the unused part of the duration randomly
    between them.
    """

    scheduler_class = SerialScheduler

    def __init__(self, duration: float | timedelta):
        super().__init__(duration)
        self._total_child_duration: float = 0

    @property
    def total_child_duration(self) -> float:
        return self._total_child_duration

    @property
    def unused_duration(self) -> float:
        return max(0.0, self.duration - self._total_child_duration)

    def append(self, timeline: Timeline) -> "SerialTimeline":
        """Append a child.

        Raises:
            DurationExceeded: If the children would no longer fit; the
                timeline is left unchanged
        """
        return self.extend(timeline)

    def extend(self, *timelines: Timeline) -> "SerialTimeline":
        """Append several children, all or none."""
        for timeline in timelines:
            self._check_timeline(timeline)
        required = self._total_child_duration + sum(t.duration for t in timelines)
        self._check_fits(required)
        self._timelines.extend(timelines)
        for timeline in timelines:
            self._adopt(timeline)
        self._total_child_duration = required
        return self

    def _check_fits(self, required: float) -> None:
        if required > self.duration and not math.isclose(required, self.duration):
            raise DurationExceeded(required, self.duration)

    def _growth(self, child: Timeline, duration: float) -> float:
        placements = sum(1 for timeline in self._timelines if timeline is child)
        return placements * (duration - child.duration)

    def _check_resize(self, child: Timeline, duration: float) -> None:
        self._check_fits(self._total_child_duration + self._growth(child, duration))

    def _resize(self, child: Timeline, duration: float) -> None:
        self._total_child_duration += self._growth(child, duration)

    def __add__(self, other: "SerialTimeline") -> "SerialTimeline":
        if not isinstance(other, SerialTimeline):
            return NotImplemented
        return type(self)(self.duration + other.duration).extend(
            *self._timelines, *other._timelines
        )

    def __mul__(self, factor: int) -> "SerialTimeline":
        if not isinstance(factor, int):
            return NotImplemented
        return type(self)(self.duration * factor).extend(*(self._timelines * factor))

    def __pow__(self, factor: int) -> "SerialTimeline":
        """Schedule this timeline against itself ``factor`` times in parallel."""
        if not isinstance(factor, int):
            return NotImplemented
        from timeweave.timeline.parallel import ParallelTimeline

        parallel = ParallelTimeline().extend(*([self] * factor))
        return type(self)(self.duration).append(parallel)

    def __repr__(self) -> str:
        return f"SerialTimeline(duration={self.duration}, children={len(self)})"
