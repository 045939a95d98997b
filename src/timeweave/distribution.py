"""Random, order-preserving placement of the children of a serial timeline.

One raw offset is drawn per child instance, uniformly from
``[0, unused_duration)``, and the draws are sorted. The i-th instance then
starts at::

    start + stretch * (duration of the instances before it + raw_i)

Because the raw offsets ascend while the consumed duration only grows, each
instance starts no earlier than the previous one ends.
"""

from typing import TYPE_CHECKING, Iterator

from timeweave.schema.event import OffsetTimeline
from timeweave.schema.options import ScheduleOptions

if TYPE_CHECKING:
    from timeweave.timeline.serial import SerialTimeline


class Distribution:
    """Offsets for the children of a serial timeline, expanded by ``cram``.

    The random draws are made once, on construction, from the generator
    shared through ``options``.
    """

    def __init__(
        self,
        timeline: "SerialTimeline",
        starting_offset: float,
        options: ScheduleOptions | None = None,
    ):
        self.options = options or ScheduleOptions()
        self.starting_offset = starting_offset
        self.interval = timeline.unused_duration
        self.timelines = [
            instance
            for child in timeline
            for instance in child.crammed(self.cram)
        ]
        self._raw_offsets = sorted(self._draw() for _ in self.timelines)

    @property
    def cram(self) -> int:
        return self.options.cram

    @property
    def stretch(self) -> float:
        return self.options.stretch

    @property
    def count(self) -> int:
        return len(self.timelines)

    def _draw(self) -> float:
        if self.interval <= 0:
            return 0
        return self.options.rng.random() * self.interval

    def __iter__(self) -> Iterator[OffsetTimeline]:
        consumed = 0
        for timeline, raw_offset in zip(self.timelines, self._raw_offsets):
            yield OffsetTimeline(
                timeline,
                self.starting_offset + self.stretch * (consumed + raw_offset),
            )
            consumed += timeline.duration

    def __len__(self) -> int:
        return self.count
