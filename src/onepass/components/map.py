"""
This module provides the transformation components: `map_`, `map_ref`,
`funnel` and `map_output`.

They are pure adapters: apart from the wrapped collector and the function
they hold no state, and they leave the wrapped collector's signalling
untouched.
"""
from __future__ import annotations

from typing import Any, Callable

from typeguard import typechecked

from ..core.collector import Collector, RefCollector
from ..core.errors import NotRefCollectorError
from ..core.signal import Signal


class Map(Collector):
    """Transforms each owned item with `func` before delegating."""

    def __init__(self, collector: Collector, func: Callable[[Any], Any]):
        self._collector = collector
        self._func = func

    def __repr__(self) -> str:
        name = getattr(self._func, "__name__", "func")
        return f"{type(self).__name__}({self._collector!r}, {name})"

    def break_hint(self) -> Signal:
        return self._collector.break_hint()

    def _accept(self, item: Any) -> Signal:
        return self._collector.accept(self._func(item))

    def _finish(self) -> Any:
        return self._collector.finish()


class MapRef(Map, RefCollector):
    """Derives a value from each borrowed item and delegates it by value.

    `func` may read the item but must not keep it; what it returns belongs
    to the wrapped collector.
    """

    def _accept_ref(self, item: Any) -> Signal:
        return self._collector.accept(self._func(item))


class Funnel(Map, RefCollector):
    """Projects each borrowed item onto a part of it and lends that part on."""

    def _accept(self, item: Any) -> Signal:
        return self._collector.accept_ref(self._func(item))

    def _accept_ref(self, item: Any) -> Signal:
        return self._collector.accept_ref(self._func(item))


class MapOutput(Collector):
    """Applies `func` to the wrapped collector's output on `finish`."""

    def __init__(self, collector: Collector, func: Callable[[Any], Any]):
        self._collector = collector
        self._func = func

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._collector!r})"

    def break_hint(self) -> Signal:
        return self._collector.break_hint()

    def _accept(self, item: Any) -> Signal:
        return self._collector.accept(item)

    def _finish(self) -> Any:
        return self._func(self._collector.finish())


class RefMapOutput(MapOutput, RefCollector):
    def _accept_ref(self, item: Any) -> Signal:
        return self._collector.accept_ref(item)


@typechecked
def map_(collector: Collector, func: Callable[[Any], Any]) -> Map:
    """
    Feeds `collector` with ``func(item)`` instead of ``item``.

    `func` takes the item by value; the result is a plain `Collector`.
    """
    return Map(collector, func)


@typechecked
def map_ref(collector: Collector, func: Callable[[Any], Any]) -> MapRef:
    """
    Feeds `collector` with a value derived from each borrowed item.

    Because `func` only reads the item, the result is a `RefCollector` and
    the original item stays available for a sibling branch.

    Example:
        .. code-block:: python

            lengths = sum_().map_ref(len)
            drive(["ab", "c"], lengths.then(to_list()))  # (3, ["ab", "c"])
    """
    return MapRef(collector, func)


@typechecked
def funnel(collector: Collector, func: Callable[[Any], Any]) -> Funnel:
    """
    Lends ``func(item)``, a part of each borrowed item, to `collector`.

    Raises:
        NotRefCollectorError: If `collector` cannot accept items by reference.
    """
    if not isinstance(collector, RefCollector):
        raise NotRefCollectorError("funnel", collector, "use .map_ref() to pass a derived value instead")
    return Funnel(collector, func)


@typechecked
def map_output(collector: Collector, func: Callable[[Any], Any]) -> MapOutput:
    """
    Transforms the final output of `collector` with `func`.

    The result is a `RefCollector` whenever `collector` is one.
    """
    if isinstance(collector, RefCollector):
        return RefMapOutput(collector, func)
    return MapOutput(collector, func)
