"""Records produced while scheduling a timeline."""

from dataclasses import dataclass, field
from datetime import datetime
from typing import TYPE_CHECKING

from freezegun import freeze_time

from timeweave.scope import Scope
from timeweave.units import as_datetime

if TYPE_CHECKING:
    from timeweave.timeline.base import Timeline
    from timeweave.timeline.moment import Moment
    from timeweave.scheduler.base import Scheduler
    from timeweave.schema.options import ScheduleOptions


@dataclass(frozen=True, eq=False)
class OffsetTimeline:
    """A timeline paired with the offset it starts at.

    Inside a parallel timeline the offset is relative to the parallel's own
    start; the distribution of a serial timeline yields absolute offsets.
    """
    timeline: "Timeline"
    offset: float = 0

    @property
    def duration(self) -> float:
        return self.timeline.duration

    def scheduler(
        self,
        starting_offset: float,
        scope: Scope,
        options: "ScheduleOptions",
    ) -> "Scheduler":
        """Schedule the timeline ``offset`` (stretched) after ``starting_offset``."""
        return self.timeline.scheduler(
            starting_offset + options.stretch * self.offset, scope, options
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, OffsetTimeline):
            return NotImplemented
        return self.offset == other.offset and self.timeline is other.timeline

    def __hash__(self) -> int:
        return hash((id(self.timeline), self.offset))

    def __lt__(self, other: "OffsetTimeline") -> bool:
        return self.offset < other.offset


@dataclass(frozen=True, eq=False)
class ScheduledEvent:
    """A moment bound to an absolute simulated time and the scope it runs in.

    Created lazily by a scheduler and consumed once by a runner.
    """
    offset: float
    moment: "Moment"
    scope: Scope = field(repr=False)

    @property
    def at(self) -> datetime:
        """The offset as an aware UTC datetime."""
        return as_datetime(self.offset)

    def evaluate(self, pin_clock: bool = True) -> None:
        """Invoke the moment's callback with this event's scope.

        Args:
            pin_clock: Freeze the process clock at ``offset`` for the duration
                of the call
        """
        if not pin_clock:
            self.moment.callback(self.scope)
            return
        with freeze_time(self.at):
            self.moment.callback(self.scope)

    def __lt__(self, other: "ScheduledEvent") -> bool:
        return self.offset < other.offset
