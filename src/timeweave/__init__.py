"""timeweave: lazily scheduled events over nested, randomised timelines."""

__version__ = "0.1.0"

from timeweave.errors import TimeweaveError, DurationExceeded, UndefinedVariable
from timeweave.scope import Scope
from timeweave.schema import OffsetTimeline, ScheduledEvent, RunOptions, ScheduleOptions
from timeweave.timeline import Timeline, Moment, SerialTimeline, ParallelTimeline
from timeweave.distribution import Distribution
from timeweave.merge import LazyMerge
from timeweave.progress import ProgressCounter, ProgressLogger, ProgressBar, ProgressDecorator
from timeweave.runner import Runner, run, simulate
from timeweave.builder import SerialBuilder, ParallelBuilder, over

__all__ = [
    "TimeweaveError",
    "DurationExceeded",
    "UndefinedVariable",
    "Scope",
    "OffsetTimeline",
    "ScheduledEvent",
    "RunOptions",
    "ScheduleOptions",
    "Timeline",
    "Moment",
    "SerialTimeline",
    "ParallelTimeline",
    "Distribution",
    "LazyMerge",
    "ProgressCounter",
    "ProgressLogger",
    "ProgressBar",
    "ProgressDecorator",
    "Runner",
    "run",
    "simulate",
    "SerialBuilder",
    "ParallelBuilder",
    "over",
]
