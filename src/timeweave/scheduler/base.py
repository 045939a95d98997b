"""Abstract base class for schedulers.

A scheduler expands one timeline, starting at a given offset and within a
given scope, into a lazy stream of ScheduledEvent in offset order.
"""

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Iterator

from timeweave.schema.event import ScheduledEvent
from timeweave.schema.options import ScheduleOptions
from timeweave.scope import Scope

if TYPE_CHECKING:
    from timeweave.timeline.base import Timeline


class Scheduler(ABC):
    """Expands a timeline into scheduled events.

    Iterating a scheduler never fails: the timeline it expands was validated
    while it was built.
    """

    def __init__(
        self,
        timeline: "Timeline",
        starting_offset: float,
        scope: Scope,
        options: ScheduleOptions,
    ):
        self.timeline = timeline
        self.starting_offset = starting_offset
        self.scope = scope
        self.options = options

    @abstractmethod
    def __iter__(self) -> Iterator[ScheduledEvent]:
        """Yield the timeline's events in non-decreasing offset order."""
        pass
