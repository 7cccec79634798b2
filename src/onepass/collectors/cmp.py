"""
Comparison leaf collectors: `max_`, `min_` and `min_max`.

They keep the winning item itself, so they take items by value. Wrap them
with `.cloning()` to use them where a reference-capable branch is needed.
"""
from __future__ import annotations

from abc import abstractmethod
from typing import Any, Callable, Optional, Tuple

from typeguard import typechecked

from ..core.collector import Collector
from ..core.signal import Signal


class _Extremum(Collector):
    def __init__(self, key: Optional[Callable[[Any], Any]] = None):
        self._key = key
        self._best: Any = None
        self._best_key: Any = None
        self._empty = True

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._best!r})"

    @abstractmethod
    def _beats(self, candidate: Any, current: Any) -> bool:
        ...

    def _accept(self, item: Any) -> Signal:
        item_key = self._key(item) if self._key else item
        if self._empty or self._beats(item_key, self._best_key):
            self._best = item
            self._best_key = item_key
            self._empty = False
        return Signal.CONTINUE

    def _finish(self) -> Any:
        return self._best


class Max(_Extremum):
    # Strict comparison keeps the first of equal maxima.
    def _beats(self, candidate: Any, current: Any) -> bool:
        return candidate > current


class Min(_Extremum):
    def _beats(self, candidate: Any, current: Any) -> bool:
        return candidate < current


class MinMax(Collector):
    """Tracks the smallest and the largest item in one pass.

    Ties go to the first of equal minima and the last of equal maxima, so a
    stream of equal items yields its first and its last item.
    """

    def __init__(self, key: Optional[Callable[[Any], Any]] = None):
        self._key = key
        self._min: Any = None
        self._max: Any = None
        self._min_key: Any = None
        self._max_key: Any = None
        self._empty = True

    def __repr__(self) -> str:
        return f"MinMax({self._min!r}, {self._max!r})"

    def _accept(self, item: Any) -> Signal:
        item_key = self._key(item) if self._key else item
        if self._empty:
            self._min = self._max = item
            self._min_key = self._max_key = item_key
            self._empty = False
        elif item_key < self._min_key:
            self._min, self._min_key = item, item_key
        elif not item_key < self._max_key:
            self._max, self._max_key = item, item_key
        return Signal.CONTINUE

    def _finish(self) -> Optional[Tuple[Any, Any]]:
        if self._empty:
            return None
        return (self._min, self._max)


@typechecked
def max_(key: Optional[Callable[[Any], Any]] = None) -> Max:
    """
    Keeps the largest item, or ``None`` for an empty stream.

    Args:
        key: An optional function computing the value to compare by.
    """
    return Max(key)


@typechecked
def min_(key: Optional[Callable[[Any], Any]] = None) -> Min:
    """Keeps the smallest item, or ``None`` for an empty stream."""
    return Min(key)


@typechecked
def min_max(key: Optional[Callable[[Any], Any]] = None) -> MinMax:
    """
    Keeps the pair ``(smallest, largest)``, or ``None`` for an empty stream.

    A single item is both the minimum and the maximum. Unlike `max_`, the
    last of several equal maxima wins.

    Example:
        .. code-block:: python

            drive([3, 1, 4, 1, 5], min_max())  # (1, 5)
    """
    return MinMax(key)
