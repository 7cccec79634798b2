"""
Search leaf collectors: `find`, `any_`, `all_` and `last`.

`find`, `any_` and `all_` signal STOP as soon as their answer is known, which
lets the driver stop pulling from the producer.
"""
from __future__ import annotations

from typing import Any, Callable

from typeguard import typechecked

from ..core.collector import Collector, RefCollector
from ..core.signal import Signal


class Find(Collector):
    def __init__(self, pred: Callable[[Any], bool]):
        self._pred = pred
        self._found: Any = None
        self._done = False

    def __repr__(self) -> str:
        return f"Find(found={self._found!r})"

    def break_hint(self) -> Signal:
        return Signal.stop_if(self._done)

    def _accept(self, item: Any) -> Signal:
        if self._done:
            return Signal.STOP
        if self._pred(item):
            self._found = item
            self._done = True
            return Signal.STOP
        return Signal.CONTINUE

    def _finish(self) -> Any:
        return self._found


class Any_(RefCollector):
    def __init__(self, pred: Callable[[Any], bool]):
        self._pred = pred
        self._result = False

    def __repr__(self) -> str:
        return f"Any_({self._result})"

    def break_hint(self) -> Signal:
        return Signal.stop_if(self._result)

    def _accept_ref(self, item: Any) -> Signal:
        if not self._result and self._pred(item):
            self._result = True
        return Signal.stop_if(self._result)

    def _finish(self) -> bool:
        return self._result


class All_(RefCollector):
    def __init__(self, pred: Callable[[Any], bool]):
        self._pred = pred
        self._result = True

    def __repr__(self) -> str:
        return f"All_({self._result})"

    def break_hint(self) -> Signal:
        return Signal.stop_if(not self._result)

    def _accept_ref(self, item: Any) -> Signal:
        if self._result and not self._pred(item):
            self._result = False
        return Signal.stop_if(not self._result)

    def _finish(self) -> bool:
        return self._result


class Last(Collector):
    def __init__(self):
        self._last: Any = None

    def __repr__(self) -> str:
        return f"Last({self._last!r})"

    def _accept(self, item: Any) -> Signal:
        self._last = item
        return Signal.CONTINUE

    def _finish(self) -> Any:
        return self._last


@typechecked
def find(pred: Callable[[Any], bool]) -> Find:
    """Keeps the first item matching `pred` (``None`` if none does) and stops there."""
    return Find(pred)


@typechecked
def any_(pred: Callable[[Any], bool]) -> Any_:
    """True if any item matches `pred`; stops at the first match."""
    return Any_(pred)


@typechecked
def all_(pred: Callable[[Any], bool]) -> All_:
    """True if every item matches `pred`; stops at the first mismatch."""
    return All_(pred)


def last() -> Last:
    """Keeps the most recent item, or ``None`` for an empty stream."""
    return Last()
