"""Evaluation of scheduled event streams.

The runner walks a stream in order and evaluates each event. Outside live
mode the clock is frozen at each event's offset while its callback runs, so
anything the callback timestamps carries the simulated time. In live mode the
runner sleeps until an event is due and then evaluates it against the real
clock; events that are already due are evaluated with the clock frozen.
"""

import os
import sys
import time
from datetime import datetime
from typing import Any, Callable, Iterable

import structlog

from timeweave.config import settings
from timeweave.progress import ProgressDecorator, ProgressObserver
from timeweave.schema.event import ScheduledEvent
from timeweave.schema.options import RunOptions, ScheduleOptions
from timeweave.scope import Scope
from timeweave.timeline.base import Timeline
from timeweave.units import as_timestamp

logger = structlog.get_logger()


def daemonize() -> None:
    """Detach the current process from its terminal.

    Double fork with a new session in between; the original process and the
    intermediate child exit, and the daemon's standard streams point at
    /dev/null.
    """
    if os.fork() > 0:
        os._exit(0)
    os.setsid()
    if os.fork() > 0:
        os._exit(0)

    sys.stdout.flush()
    sys.stderr.flush()
    with open(os.devnull, "rb") as devnull_in, open(os.devnull, "ab") as devnull_out:
        os.dup2(devnull_in.fileno(), sys.stdin.fileno())
        os.dup2(devnull_out.fileno(), sys.stdout.fileno())
        os.dup2(devnull_out.fileno(), sys.stderr.fileno())


class Runner:
    """Evaluates a stream of scheduled events one at a time.

    Args:
        stream: Events in non-decreasing offset order
        options: Run options; keyword arguments build one when omitted
        observer: Optional progress observer notified once per event
    """

    def __init__(
        self,
        stream: Iterable[ScheduledEvent],
        options: RunOptions | None = None,
        observer: ProgressObserver | None = None,
        **option_kwargs: Any,
    ):
        if options is not None and option_kwargs:
            raise TypeError("Pass either options or option keyword arguments, not both")
        self.options = options or RunOptions(**option_kwargs)
        self.stream = stream
        self.observer = observer

    @property
    def live(self) -> bool:
        return self.options.live

    @property
    def daemonize(self) -> bool:
        return self.options.daemonize

    def call(self) -> int:
        """Evaluate every event in the stream.

        Returns:
            Number of events evaluated

        Raises:
            Whatever an event's callback raises, unchanged.
        """
        if self.daemonize:
            daemonize()

        stream = self.stream
        if self.observer is not None:
            stream = ProgressDecorator(stream, self.observer)

        logger.debug("run_started", live=self.live, daemonize=self.daemonize)
        count = 0
        for event in stream:
            try:
                self._evaluate(event)
            except Exception:
                logger.error("run_aborted", offset=event.offset, evaluated=count)
                raise
            count += 1
        logger.debug("run_finished", evaluated=count)
        return count

    def _evaluate(self, event: ScheduledEvent) -> None:
        if self.live:
            nap_time = event.offset - time.time()
            if nap_time > 0:
                logger.debug("event_sleep", offset=event.offset, seconds=nap_time)
                time.sleep(nap_time)
                event.evaluate(pin_clock=False)
                return
        event.evaluate(pin_clock=True)


def run(
    stream: Iterable[ScheduledEvent],
    live: bool = False,
    daemonize: bool = False,
    observer: ProgressObserver | None = None,
) -> int:
    """Evaluate a scheduled stream. See Runner."""
    runner = Runner(stream, RunOptions(live=live, daemonize=daemonize), observer=observer)
    return runner.call()


def simulate(
    timeline: Timeline,
    starting: float | datetime | None = None,
    ending: float | datetime | None = None,
    scope: Scope | None = None,
    progress_factory: Callable[..., ProgressObserver] | None = None,
    live: bool = False,
    daemonize: bool = False,
    **schedule_options: Any,
) -> int:
    """Schedule a timeline and run it.

    Args:
        timeline: The timeline to run
        starting: When the timeline starts
        ending: When the timeline ends, as an alternative to ``starting``
        scope: Root scope handed to the timeline
        progress_factory: Builds the progress observer for the run
        live: Sleep until each event is due
        daemonize: Detach from the terminal first
        **schedule_options: Fields of ScheduleOptions (cram, stretch, scale, seed)

    Returns:
        Number of events evaluated
    """
    if (starting is None) == (ending is None):
        raise TypeError("Exactly one of starting or ending is required")

    schedule_options.setdefault("seed", settings.DEFAULT_SEED)
    options = ScheduleOptions(**schedule_options)
    if starting is None:
        starting = as_timestamp(ending) - timeline.duration * options.stretch

    stream = timeline.schedule(starting, scope, options)
    observer = progress_factory() if progress_factory is not None else None
    return run(stream, live=live, daemonize=daemonize, observer=observer)
