"""Timeline model: moments, serial and parallel composition."""

from timeweave.timeline.base import Timeline
from timeweave.timeline.moment import Moment
from timeweave.timeline.serial import SerialTimeline
from timeweave.timeline.parallel import ParallelTimeline

__all__ = [
    "Timeline",
    "Moment",
    "SerialTimeline",
    "ParallelTimeline",
]
