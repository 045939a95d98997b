"""Zero-duration leaf timelines."""

from typing import Any, Callable

from timeweave.scheduler.moment import MomentScheduler
from timeweave.scope import Scope
from timeweave.timeline.base import Timeline


class Moment(Timeline):
    """A single callback evaluated at one instant.

    The callback receives the Scope live at its point in the tree and its
    return value is ignored.
    """

    scheduler_class = MomentScheduler

    def __init__(self, callback: Callable[[Scope], Any]):
        if not callable(callback):
            raise TypeError(f"Moment callback must be callable, got {type(callback).__name__}")
        self.callback = callback
        super().__init__(0)

    def crammed(self, factor: int) -> list[Timeline]:
        return [self] * factor

    def __repr__(self) -> str:
        name = getattr(self.callback, "__qualname__", repr(self.callback))
        return f"Moment({name})"
