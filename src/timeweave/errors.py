"""Exceptions raised by timeweave.

Every error the package raises on its own account derives from
``TimeweaveError``. Errors raised by user callbacks are never wrapped.
"""


class TimeweaveError(Exception):
    """Base class for timeweave errors."""


class DurationExceeded(TimeweaveError):
    """A child does not fit in the duration of the timeline it was added to."""

    def __init__(self, required: float, available: float):
        self.required = required
        self.available = available
        super().__init__(f"{required} > {available}")


class UndefinedVariable(TimeweaveError, KeyError):
    """A scope variable was read without being set anywhere in the chain."""

    def __init__(self, name: str):
        self.name = name
        super().__init__(name)

    def __str__(self) -> str:
        return f"undefined scope variable: {self.name!r}"
