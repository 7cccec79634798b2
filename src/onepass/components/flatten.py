"""
This module provides the batch components: `flatten`, `flat_map` and
`unbatching`.

Each outer item expands into zero or more inner items for the wrapped
collector. When the wrapped collector stops partway through a batch, the
rest of that batch is never pulled.
"""
from __future__ import annotations

from typing import Any, Callable, Iterable

from typeguard import typechecked

from ..core.collector import Collector, RefCollector
from ..core.signal import Signal


class Flatten(Collector):
    """Feeds the elements of each iterable item to the wrapped collector."""

    def __init__(self, collector: Collector):
        self._collector = collector

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._collector!r})"

    def break_hint(self) -> Signal:
        return self._collector.break_hint()

    def _accept(self, item: Iterable[Any]) -> Signal:
        return self._collector.collect_many(item)

    def _finish(self) -> Any:
        return self._collector.finish()


class RefFlatten(Flatten, RefCollector):
    """Lends the elements of each borrowed batch on by reference."""

    def _accept_ref(self, item: Iterable[Any]) -> Signal:
        if self._collector.break_hint().is_stop:
            return Signal.STOP
        for element in item:
            if self._collector.accept_ref(element).is_stop:
                return Signal.STOP
        return Signal.CONTINUE


class FlatMap(Flatten):
    """Feeds the elements of ``func(item)`` to the wrapped collector."""

    def __init__(self, collector: Collector, func: Callable[[Any], Iterable[Any]]):
        super().__init__(collector)
        self._func = func

    def _accept(self, item: Any) -> Signal:
        if self._collector.break_hint().is_stop:
            return Signal.STOP
        return self._collector.collect_many(self._func(item))


class Unbatching(Collector):
    """Hands each item to ``func(collector, item)``, which feeds `collector` itself."""

    def __init__(self, collector: Collector, func: Callable[[Collector, Any], Signal]):
        self._collector = collector
        self._func = func

    def __repr__(self) -> str:
        return f"Unbatching({self._collector!r})"

    def _accept(self, item: Any) -> Signal:
        return self._func(self._collector, item)

    def _finish(self) -> Any:
        return self._collector.finish()


@typechecked
def flatten(collector: Collector) -> Flatten:
    """
    Treats every item as a batch and feeds its elements one by one.

    Example:
        .. code-block:: python

            drive([[1, 2], [], [3]], to_list().flatten())  # [1, 2, 3]

    The result is a `RefCollector` whenever `collector` is one; borrowed
    batches then have their elements lent on by reference.
    """
    if isinstance(collector, RefCollector):
        return RefFlatten(collector)
    return Flatten(collector)


@typechecked
def flat_map(collector: Collector, func: Callable[[Any], Iterable[Any]]) -> FlatMap:
    """
    Expands every item into ``func(item)`` and feeds the elements one by one.

    `func` is not called once `collector` has stopped.

    Example:
        .. code-block:: python

            drive(["a b", "c"], count().flat_map(str.split))  # 3
    """
    return FlatMap(collector, func)


@typechecked
def unbatching(collector: Collector, func: Callable[[Collector, Any], Signal]) -> Unbatching:
    """
    Lets `func` decide how each item is fed to `collector`.

    `func` receives the wrapped collector and the item. It may call
    ``accept`` any number of times and must return the resulting `Signal`.
    It is the most general batch adaptor: `flatten` and `flat_map` are
    special cases of it.

    Example:
        .. code-block:: python

            def runs(inner, pair):
                value, times = pair
                return inner.collect_many([value] * times)

            drive([("a", 2), ("b", 1)], concat_str().unbatching(runs))  # "aab"
    """
    return Unbatching(collector, func)
