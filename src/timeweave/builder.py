"""Builders for describing timelines declaratively.

Each build function receives the builder for the timeline being defined::

    def article(b):
        b.please(create_article)
        b.repeat(times=3, over=timedelta(hours=5), build=lambda c: c.please(comment))

    week = over(timedelta(weeks=1), lambda b: b.repeat(
        times=5, over=timedelta(days=5), build=article
    ))
"""

from datetime import timedelta
from typing import Any, Callable

from timeweave.scope import Scope
from timeweave.timeline.base import Timeline
from timeweave.timeline.moment import Moment
from timeweave.timeline.parallel import ParallelTimeline
from timeweave.timeline.serial import SerialTimeline

Duration = float | timedelta


class SerialBuilder:
    """Adds children to a serial timeline."""

    def __init__(self, timeline: SerialTimeline):
        self.timeline = timeline

    def please(self, callback: Callable[[Scope], Any]) -> Moment:
        """Add a moment. Usable as a decorator."""
        moment = Moment(callback)
        self.timeline.append(moment)
        return moment

    def over(
        self,
        duration: Duration,
        build: Callable[["SerialBuilder"], Any] | None = None,
    ) -> SerialTimeline:
        """Add a child serial timeline of ``duration``."""
        serial = over(duration, build)
        self.timeline.append(serial)
        return serial

    def repeat(
        self,
        times: int,
        over: Duration,
        build: Callable[["SerialBuilder"], Any],
    ) -> SerialTimeline:
        """Add a serial timeline of duration ``over`` in which ``build`` runs ``times`` times."""
        def repeated(builder: SerialBuilder) -> None:
            for _ in range(times):
                build(builder)
        return self.over(over, repeated)

    def simultaneously(
        self,
        build: Callable[["ParallelBuilder"], Any],
    ) -> ParallelTimeline:
        """Add a parallel timeline."""
        builder = ParallelBuilder(ParallelTimeline())
        build(builder)
        self.timeline.append(builder.timeline)
        return builder.timeline

    def use(self, *timelines: Timeline) -> SerialTimeline:
        """Add prebuilt timelines."""
        return self.timeline.extend(*timelines)


class ParallelBuilder:
    """Adds branches to a parallel timeline."""

    def __init__(self, timeline: ParallelTimeline):
        self.timeline = timeline

    def over(
        self,
        duration: Duration,
        build: Callable[[SerialBuilder], Any] | None = None,
        after: Duration = 0,
    ) -> "ParallelBuilder":
        """Add a serial branch of ``duration`` starting ``after`` in."""
        self.timeline.append(over(duration, build), after=after)
        return self

    def also(
        self,
        build: Callable[[SerialBuilder], Any] | None = None,
        over: Duration | None = None,
        after: Duration = 0,
    ) -> "ParallelBuilder":
        """Add another branch, as long as the parallel so far unless ``over`` is given."""
        if over is None:
            over = self.timeline.duration
        return self.over(over, build, after=after)

    def repeat(
        self,
        times: int,
        over: Duration,
        build: Callable[[SerialBuilder], Any] | None = None,
        after: Duration = 0,
    ) -> "ParallelBuilder":
        """Add ``times`` identical branches."""
        for _ in range(times):
            self.over(over, build, after=after)
        return self

    def use(self, *timelines: Timeline, after: Duration = 0) -> "ParallelBuilder":
        """Add prebuilt timelines as branches."""
        self.timeline.extend(*timelines, after=after)
        return self


def over(
    duration: Duration,
    build: Callable[[SerialBuilder], Any] | None = None,
) -> SerialTimeline:
    """Build a serial timeline of ``duration``."""
    timeline = SerialTimeline(duration)
    if build is not None:
        build(SerialBuilder(timeline))
    return timeline
