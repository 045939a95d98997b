"""Lazy k-way merge of individually sorted streams."""

import heapq
from operator import attrgetter
from typing import Any, Callable, Generic, Iterable, Iterator, TypeVar

T = TypeVar("T")


class LazyMerge(Generic[T]):
    """Merge sorted sources into one sorted stream without materialising them.

    The heap holds at most one pending item per source that is not yet
    exhausted, so memory is bounded by the number of sources rather than by
    the number of items. Items with equal keys come out in source order.

    Args:
        sources: Iterables, each already sorted by ``key``
        key: Sort key; defaults to the ``offset`` attribute
    """

    def __init__(
        self,
        sources: Iterable[Iterable[T]],
        key: Callable[[T], Any] = attrgetter("offset"),
    ):
        self._sources = sources
        self._key = key
        self._heap: list[tuple[Any, int, T, Iterator[T]]] = []

    @property
    def pending(self) -> int:
        """Number of items pulled from sources but not yet yielded."""
        return len(self._heap)

    def _pull(self, index: int, source: Iterator[T]) -> tuple[Any, int, T, Iterator[T]] | None:
        for item in source:
            return (self._key(item), index, item, source)
        return None

    def __iter__(self) -> Iterator[T]:
        heap = self._heap
        for index, source in enumerate(self._sources):
            entry = self._pull(index, iter(source))
            if entry is not None:
                heap.append(entry)
        heapq.heapify(heap)

        while heap:
            _, index, item, source = heap[0]
            yield item
            entry = self._pull(index, source)
            if entry is None:
                heapq.heappop(heap)
            else:
                heapq.heapreplace(heap, entry)
