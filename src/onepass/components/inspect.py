"""
This module provides the `inspect` and `enumerate_` components.

Neither changes which items reach the wrapped collector or how it signals;
`inspect` only observes each item and `enumerate_` pairs each item with its
position.
"""
from __future__ import annotations

from typing import Any, Callable

from typeguard import typechecked

from ..core.collector import Collector, RefCollector
from ..core.signal import Signal


class Inspect(Collector):
    """Calls `func` on each item, then delegates it unchanged."""

    def __init__(self, collector: Collector, func: Callable[[Any], Any]):
        self._collector = collector
        self._func = func

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._collector!r})"

    def break_hint(self) -> Signal:
        return self._collector.break_hint()

    def _accept(self, item: Any) -> Signal:
        self._func(item)
        return self._collector.accept(item)

    def _finish(self) -> Any:
        return self._collector.finish()


class RefInspect(Inspect, RefCollector):
    def _accept_ref(self, item: Any) -> Signal:
        self._func(item)
        return self._collector.accept_ref(item)


class Enumerate(Collector):
    """Delegates ``(index, item)`` pairs, counting from `start`."""

    def __init__(self, collector: Collector, start: int = 0):
        self._collector = collector
        self._index = start

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._collector!r}, index={self._index})"

    def break_hint(self) -> Signal:
        return self._collector.break_hint()

    def _next_index(self) -> int:
        index = self._index
        self._index += 1
        return index

    def _accept(self, item: Any) -> Signal:
        return self._collector.accept((self._next_index(), item))

    def _finish(self) -> Any:
        return self._collector.finish()


class RefEnumerate(Enumerate, RefCollector):
    # The pair holds a borrowed item, so it is only lent on.
    def _accept_ref(self, item: Any) -> Signal:
        return self._collector.accept_ref((self._next_index(), item))


@typechecked
def inspect(collector: Collector, func: Callable[[Any], Any]) -> Inspect:
    """
    Calls ``func(item)`` on every item before `collector` receives it.

    `func` must only read the item; its return value is ignored. Useful for
    debugging a composition without changing its result.

    Example:
        .. code-block:: python

            drive([1, 2], sum_().inspect(print))  # prints 1 and 2, returns 3
    """
    if isinstance(collector, RefCollector):
        return RefInspect(collector, func)
    return Inspect(collector, func)


@typechecked
def enumerate_(collector: Collector, start: int = 0) -> Enumerate:
    """
    Feeds `collector` with ``(index, item)`` pairs.

    Indices count the items this collector is given, starting at `start`.
    The result is a `RefCollector` whenever `collector` is one.

    Example:
        .. code-block:: python

            drive("ab", to_list().enumerate())  # [(0, "a"), (1, "b")]
    """
    if isinstance(collector, RefCollector):
        return RefEnumerate(collector, start)
    return Enumerate(collector, start)
