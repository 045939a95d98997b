"""Schema models for scheduled events and scheduling options."""

from timeweave.schema.event import OffsetTimeline, ScheduledEvent
from timeweave.schema.options import RunOptions, ScheduleOptions

__all__ = [
    "OffsetTimeline",
    "ScheduledEvent",
    "RunOptions",
    "ScheduleOptions",
]
