"""
This module provides the `chain` component: sequential hand-off.

Items go to the first collector until it signals STOP; every later item goes
to the second collector only. The two collectors therefore split the stream
at the point where the first one stopped.
"""
from __future__ import annotations

from typing import Any, Tuple

from typeguard import typechecked

from ..core.collector import Collector, RefCollector
from ..core.signal import Signal
from .fuse import fuse_all


class Chain(Collector):
    def __init__(self, first: Collector, second: Collector):
        self._first, self._second = fuse_all("chain", first, second)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(first={self._first!r}, second={self._second!r})"

    def break_hint(self) -> Signal:
        # The composite is done only once the second collector is.
        return Signal.all_stop((self._first.break_hint(), self._second.break_hint()))

    def _deliver(self, item: Any, accept_first, accept_second) -> Signal:
        if self._first.break_hint().is_stop:
            return accept_second(item)
        if accept_first(item).is_continue:
            return Signal.CONTINUE
        # The first collector just stopped; this item is not handed over.
        return self._second.break_hint()

    def _accept(self, item: Any) -> Signal:
        return self._deliver(item, self._first.accept, self._second.accept)

    def _finish(self) -> Tuple[Any, Any]:
        return (self._first.finish(), self._second.finish())


class RefChain(Chain, RefCollector):
    def _accept_ref(self, item: Any) -> Signal:
        return self._deliver(item, self._first.accept_ref, self._second.accept_ref)


@typechecked
def chain(first: Collector, second: Collector) -> Chain:
    """
    Lets `second` take over the stream once `first` is done.

    Example:
        .. code-block:: python

            # the first two items, and everything after them
            drive([1, 2, 3, 4], to_list().take(2).chain(to_list()))
            # ([1, 2], [3, 4])

    Returns:
        A collector whose output is ``(first_output, second_output)``. It is
        a `RefCollector` when both branches are.
    """
    if isinstance(first, RefCollector) and isinstance(second, RefCollector):
        return RefChain(first, second)
    return Chain(first, second)
