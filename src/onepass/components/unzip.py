"""
This module provides the `unzip` component, which splits a stream of pairs
between two collectors.
"""
from __future__ import annotations

from typing import Any, Tuple

from typeguard import typechecked

from ..core.collector import Collector, RefCollector
from ..core.signal import Signal
from .fuse import fuse_all


class Unzip(Collector):
    def __init__(self, left: Collector, right: Collector):
        self._left, self._right = fuse_all("unzip", left, right)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(left={self._left!r}, right={self._right!r})"

    def break_hint(self) -> Signal:
        return Signal.all_stop((self._left.break_hint(), self._right.break_hint()))

    def _accept(self, item: Any) -> Signal:
        a, b = item
        return Signal.all_stop((self._left.accept(a), self._right.accept(b)))

    def _finish(self) -> Tuple[Any, Any]:
        return (self._left.finish(), self._right.finish())


class RefUnzip(Unzip, RefCollector):
    def _accept_ref(self, item: Any) -> Signal:
        a, b = item
        return Signal.all_stop((self._left.accept_ref(a), self._right.accept_ref(b)))


@typechecked
def unzip(left: Collector, right: Collector) -> Unzip:
    """
    Sends the first element of each pair to `left` and the second to `right`.

    Example:
        .. code-block:: python

            drive([(1, "a"), (2, "b")], sum_().unzip(concat_str()))  # (3, "ab")
    """
    if isinstance(left, RefCollector) and isinstance(right, RefCollector):
        return RefUnzip(left, right)
    return Unzip(left, right)
