"""Scheduler for parallel timelines."""

from typing import Iterator

from timeweave.merge import LazyMerge
from timeweave.scheduler.base import Scheduler
from timeweave.schema.event import ScheduledEvent


class ParallelScheduler(Scheduler):
    """Starts each child at its (stretched) offset and interleaves the streams.

    Sibling branches share one pushed scope, so a branch sees bindings made by
    the others as soon as the events that make them have been evaluated.
    """

    def __init__(self, timeline, starting_offset, scope, options):
        super().__init__(timeline, starting_offset, scope.push(), options)

    def __iter__(self) -> Iterator[ScheduledEvent]:
        streams = (
            entry.scheduler(self.starting_offset, self.scope, self.options)
            for entry in self.timeline.entries
        )
        yield from LazyMerge(streams)
