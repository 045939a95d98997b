"""Progress observers for runs over scheduled event streams.

An observer is told the expected total up front (when it is known), is
incremented once per evaluated event and is finished when the stream ends or
is abandoned.
"""

from typing import Any, Callable, Iterable, Iterator, Protocol, TypeVar

import structlog
from tqdm import tqdm

logger = structlog.get_logger()

T = TypeVar("T")


class ProgressObserver(Protocol):
    def start(self, total: int | None) -> None: ...

    def increment(self, change: int) -> Any: ...

    def finish(self) -> None: ...


class ProgressCounter:
    """Counts progress towards an optional total.

    Subclasses react to increments through ``on_increment``.
    """

    UNKNOWN = "-"

    def __init__(self, total: int | None = None, prefix: str | None = None):
        self.total = total
        self.current = 0
        self._prefix = prefix

    @classmethod
    def factory(cls, *args: Any, **kwargs: Any) -> Callable[..., "ProgressCounter"]:
        """Return a callable building counters with ``args`` bound.

        The callable takes the per-run ``total`` and ``prefix``.
        """
        def build(total: int | None = None, prefix: str | None = None) -> "ProgressCounter":
            return cls(*args, total=total, prefix=prefix, **kwargs)
        return build

    @property
    def prefix(self) -> str:
        if self._prefix is None:
            self._prefix = f"{type(self).__name__}{{{id(self)}}} : Progress Made :"
        return self._prefix

    def start(self, total: int | None) -> None:
        if total is not None:
            self.total = total

    def increment(self, change: int) -> "ProgressCounter":
        self.current += change
        self.on_increment(change)
        return self

    def on_increment(self, change: int) -> None:
        pass

    def finish(self) -> None:
        pass

    def __str__(self) -> str:
        total = self.UNKNOWN if self.total is None else self.total
        return f"{self.prefix} {self.current} / {total}"


class ProgressLogger(ProgressCounter):
    """Logs the running count on every increment."""

    def __init__(self, log: Any = None, total: int | None = None, prefix: str | None = None):
        super().__init__(total=total, prefix=prefix)
        self._log = log or logger

    def on_increment(self, change: int) -> None:
        self._log.info(str(self))


class ProgressBar(ProgressCounter):
    """Drives a tqdm progress bar."""

    def __init__(self, total: int | None = None, prefix: str | None = None, **tqdm_kwargs: Any):
        super().__init__(total=total, prefix=prefix)
        self.bar = tqdm(total=total, desc=prefix, unit="event", **tqdm_kwargs)

    def start(self, total: int | None) -> None:
        super().start(total)
        if total is not None:
            self.bar.total = total
            self.bar.refresh()

    def on_increment(self, change: int) -> None:
        self.bar.update(change)

    def finish(self) -> None:
        self.bar.close()


class ProgressDecorator(Iterable[T]):
    """Wraps a stream and reports each item consumed from it to an observer.

    An item counts as consumed once the consumer asks for the next one, so an
    item whose processing raises is not counted.
    """

    def __init__(self, stream: Iterable[T], observer: ProgressObserver):
        self._stream = stream
        self.observer = observer

    def __len__(self) -> int:
        return len(self._stream)  # type: ignore[arg-type]

    def __iter__(self) -> Iterator[T]:
        try:
            total = len(self._stream)  # type: ignore[arg-type]
        except TypeError:
            total = None
        self.observer.start(total)
        try:
            for item in self._stream:
                yield item
                self.observer.increment(1)
        finally:
            self.observer.finish()
