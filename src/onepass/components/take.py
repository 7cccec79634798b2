"""
This module provides the `take` and `take_while` components, which make a
collector short-circuit.
"""
from __future__ import annotations

from typing import Any, Callable

from typeguard import typechecked

from ..core.collector import Collector, RefCollector
from ..core.signal import Signal


class Take(Collector):
    """Accepts at most `n` items, signalling STOP on the n-th one."""

    def __init__(self, collector: Collector, n: int):
        self._collector = collector
        self._remaining = n

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._collector!r}, remaining={self._remaining})"

    def break_hint(self) -> Signal:
        if self._remaining == 0:
            return Signal.STOP
        return self._collector.break_hint()

    def _deliver(self, accept: Callable[[Any], Signal], item: Any) -> Signal:
        if self._remaining == 0:
            return Signal.STOP
        self._remaining -= 1
        signal = accept(item)
        if self._remaining == 0:
            return Signal.STOP
        return signal

    def _accept(self, item: Any) -> Signal:
        return self._deliver(self._collector.accept, item)

    def _finish(self) -> Any:
        return self._collector.finish()


class RefTake(Take, RefCollector):
    def _accept_ref(self, item: Any) -> Signal:
        return self._deliver(self._collector.accept_ref, item)


class TakeWhile(Collector):
    """Forwards items while `pred` holds; the first failing item stops it."""

    def __init__(self, collector: Collector, pred: Callable[[Any], bool]):
        self._collector = collector
        self._pred = pred
        self._done = False

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._collector!r})"

    def break_hint(self) -> Signal:
        if self._done:
            return Signal.STOP
        return self._collector.break_hint()

    def _deliver(self, accept: Callable[[Any], Signal], item: Any) -> Signal:
        if self._done:
            return Signal.STOP
        if not self._pred(item):
            self._done = True
            return Signal.STOP
        return accept(item)

    def _accept(self, item: Any) -> Signal:
        return self._deliver(self._collector.accept, item)

    def _finish(self) -> Any:
        return self._collector.finish()


class RefTakeWhile(TakeWhile, RefCollector):
    def _accept_ref(self, item: Any) -> Signal:
        return self._deliver(self._collector.accept_ref, item)


@typechecked
def take(collector: Collector, n: int) -> Take:
    """
    Limits `collector` to its first `n` items.

    ``take(c, 0)`` reports STOP before seeing anything, so a driver never
    pulls an item for it.

    Raises:
        ValueError: If `n` is negative.
    """
    if n < 0:
        raise ValueError(f"take() needs a non-negative count, got {n}")
    if isinstance(collector, RefCollector):
        return RefTake(collector, n)
    return Take(collector, n)


@typechecked
def take_while(collector: Collector, pred: Callable[[Any], bool]) -> TakeWhile:
    """
    Feeds `collector` for as long as `pred(item)` is true.

    The first item for which `pred` is false is not forwarded.
    """
    if isinstance(collector, RefCollector):
        return RefTakeWhile(collector, pred)
    return TakeWhile(collector, pred)
