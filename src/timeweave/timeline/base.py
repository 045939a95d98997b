"""Abstract base class for timelines.

A timeline is pure data: a duration plus an ordered list of children. Time
is only attached when the timeline is scheduled, which produces a fresh, lazy
stream of events every time it is called.
"""

from abc import ABC
from datetime import datetime, timedelta
from typing import TYPE_CHECKING, Any, ClassVar, Iterator

from timeweave.schema.event import ScheduledEvent
from timeweave.schema.options import ScheduleOptions
from timeweave.scope import Scope
from timeweave.units import as_seconds, as_timestamp

if TYPE_CHECKING:
    from timeweave.scheduler.base import Scheduler


class Timeline(ABC):
    """Base class for Moment, SerialTimeline and ParallelTimeline.

    Subclasses name the scheduler that expands them through
    ``scheduler_class``.
    """

    scheduler_class: ClassVar[type["Scheduler"]]

    def __init__(self, duration: float | timedelta = 0):
        duration = as_seconds(duration)
        if duration < 0:
            raise ValueError(f"Duration must be non-negative, got {duration}")
        self._duration = duration
        self._timelines: list[Any] = []
        self._parents: list["Timeline"] = []

    @property
    def duration(self) -> float:
        return self._duration

    @property
    def children(self) -> tuple["Timeline", ...]:
        """The child timelines in insertion order."""
        return tuple(self._timelines)

    def __iter__(self) -> Iterator["Timeline"]:
        return iter(self.children)

    def __len__(self) -> int:
        return len(self._timelines)

    def crammed(self, factor: int) -> list["Timeline"]:
        """Return the instances this timeline expands to under ``cram``.

        Only moments are replicated; composite timelines are placed once.
        """
        return [self]

    def scheduler(
        self,
        starting_offset: float,
        scope: Scope,
        options: ScheduleOptions | None = None,
    ) -> "Scheduler":
        """Create the scheduler that expands this timeline from ``starting_offset``."""
        return self.scheduler_class(
            self, starting_offset, scope, options or ScheduleOptions()
        )

    def schedule(
        self,
        starting_offset: float | datetime,
        scope: Scope | None = None,
        options: ScheduleOptions | None = None,
        **option_kwargs: Any,
    ) -> Iterator[ScheduledEvent]:
        """Schedule this timeline, returning a lazy, time-ordered event stream.

        Args:
            starting_offset: POSIX timestamp (or datetime) the timeline starts at
            scope: Root scope for the run. A new empty scope is used if omitted.
            options: Scheduling options
            **option_kwargs: Fields of ScheduleOptions, when ``options`` is omitted

        Returns:
            Iterator of ScheduledEvent in non-decreasing offset order
        """
        if options is not None and option_kwargs:
            raise TypeError("Pass either options or option keyword arguments, not both")
        if options is None:
            options = ScheduleOptions(**option_kwargs)
        if scope is None:
            scope = Scope()
        return iter(self.scheduler(as_timestamp(starting_offset), scope, options))

    def _adopt(self, timeline: "Timeline") -> None:
        timeline._parents.append(self)

    def _containers(self) -> list["Timeline"]:
        """Composites holding this timeline, each listed once."""
        return list({id(parent): parent for parent in self._parents}.values())

    def _check_resize(self, child: "Timeline", duration: float) -> None:
        """Raise if ``child`` cannot grow to ``duration`` inside this timeline.

        Only composites whose size depends on their children override this
        and ``_resize``.
        """

    def _resize(self, child: "Timeline", duration: float) -> None:
        """Account for ``child`` now lasting ``duration`` seconds."""

    @staticmethod
    def _check_timeline(timeline: object) -> None:
        if not isinstance(timeline, Timeline):
            raise TypeError(f"Expected a Timeline, got {type(timeline).__name__}")
