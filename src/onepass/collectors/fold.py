"""
Folding leaf collectors: `fold`, `fold_ref`, `try_fold`, `try_fold_ref` and
`reduce_`.
"""
from __future__ import annotations

from typing import Any, Callable

from typeguard import typechecked

from ..core.collector import Collector, RefCollector
from ..core.signal import Signal


class Fold(Collector):
    """Threads an accumulator through ``func(acc, item)``."""

    def __init__(self, init: Any, func: Callable[[Any, Any], Any]):
        self._acc = init
        self._func = func

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._acc!r})"

    def _accept(self, item: Any) -> Signal:
        self._acc = self._func(self._acc, item)
        return Signal.CONTINUE

    def _finish(self) -> Any:
        return self._acc


class FoldRef(Fold, RefCollector):
    """A `Fold` whose function only reads the item."""

    def _accept_ref(self, item: Any) -> Signal:
        self._acc = self._func(self._acc, item)
        return Signal.CONTINUE


class TryFold(Collector):
    """Threads an accumulator through `func` until `func` answers `Signal.STOP`.

    The item that produced STOP leaves the accumulator as it was.
    """

    def __init__(self, init: Any, func: Callable[[Any, Any], Any]):
        self._acc = init
        self._func = func
        self._done = False

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._acc!r})"

    def break_hint(self) -> Signal:
        return Signal.stop_if(self._done)

    def _step(self, item: Any) -> Signal:
        if self._done:
            return Signal.STOP
        result = self._func(self._acc, item)
        if result is Signal.STOP:
            self._done = True
            return Signal.STOP
        self._acc = result
        return Signal.CONTINUE

    def _accept(self, item: Any) -> Signal:
        return self._step(item)

    def _finish(self) -> Any:
        return self._acc


class TryFoldRef(TryFold, RefCollector):
    def _accept_ref(self, item: Any) -> Signal:
        return self._step(item)


class Reduce(Collector):
    def __init__(self, func: Callable[[Any, Any], Any]):
        self._func = func
        self._acc: Any = None
        self._empty = True

    def __repr__(self) -> str:
        return f"Reduce({self._acc!r})"

    def _accept(self, item: Any) -> Signal:
        if self._empty:
            self._acc = item
            self._empty = False
        else:
            self._acc = self._func(self._acc, item)
        return Signal.CONTINUE

    def _finish(self) -> Any:
        return self._acc


@typechecked
def fold(init: Any, func: Callable[[Any, Any], Any]) -> Fold:
    """
    Folds the stream into a single value.

    `func` receives the accumulator and the owned item and returns the new
    accumulator.
    """
    return Fold(init, func)


@typechecked
def fold_ref(init: Any, func: Callable[[Any, Any], Any]) -> FoldRef:
    """
    Like `fold`, but `func` only reads the item, making the collector
    reference-capable.
    """
    return FoldRef(init, func)


@typechecked
def reduce_(func: Callable[[Any, Any], Any]) -> Reduce:
    """
    Reduces the stream with `func`, using the first item as the start value.

    An empty stream yields ``None``.
    """
    return Reduce(func)


@typechecked
def try_fold(init: Any, func: Callable[[Any, Any], Any]) -> TryFold:
    """
    Folds the stream for as long as `func` lets it.

    `func` receives the accumulator and the owned item and returns either
    the new accumulator or `Signal.STOP`. STOP ends the fold: the
    accumulator keeps its last value and no further item is looked at.

    Example:
        .. code-block:: python

            def add_below_100(total, n):
                return total + n if total + n < 100 else Signal.STOP

            drive([60, 30, 20, 5], try_fold(0, add_below_100))  # 90
    """
    return TryFold(init, func)


@typechecked
def try_fold_ref(init: Any, func: Callable[[Any, Any], Any]) -> TryFoldRef:
    """Like `try_fold`, but `func` only reads the item."""
    return TryFoldRef(init, func)
