"""Schedulers that expand timelines into time-ordered event streams."""

from timeweave.scheduler.base import Scheduler
from timeweave.scheduler.moment import MomentScheduler
from timeweave.scheduler.serial import SerialScheduler
from timeweave.scheduler.parallel import ParallelScheduler

__all__ = [
    "Scheduler",
    "MomentScheduler",
    "SerialScheduler",
    "ParallelScheduler",
]
