"""Scheduler for single moments."""

from typing import Iterator

from timeweave.scheduler.base import Scheduler
from timeweave.schema.event import ScheduledEvent


class MomentScheduler(Scheduler):
    """Yields exactly one event, at the starting offset, in the given scope.

    Cram replication happens in the parent serial's distribution, so each
    crammed copy gets a scheduler of its own.
    """

    def __iter__(self) -> Iterator[ScheduledEvent]:
        yield ScheduledEvent(self.starting_offset, self.timeline, self.scope)
