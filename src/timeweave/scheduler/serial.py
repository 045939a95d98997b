"""Scheduler for serial timelines."""

from typing import Iterator

from timeweave.distribution import Distribution
from timeweave.merge import LazyMerge
from timeweave.scheduler.base import Scheduler
from timeweave.schema.event import ScheduledEvent


class SerialScheduler(Scheduler):
    """Distributes the children over the window and merges their streams.

    All children share one scope pushed on top of the parent scope.
    """

    def __init__(self, timeline, starting_offset, scope, options):
        super().__init__(timeline, starting_offset, scope.push(), options)

    def __iter__(self) -> Iterator[ScheduledEvent]:
        distribution = Distribution(self.timeline, self.starting_offset, self.options)
        streams = (
            entry.timeline.scheduler(entry.offset, self.scope, self.options)
            for entry in distribution
        )
        yield from LazyMerge(streams)
