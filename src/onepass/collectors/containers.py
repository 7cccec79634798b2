"""
Container-building leaf collectors: `to_list`, `to_set`, `concat_str` and
`sink`.
"""
from __future__ import annotations

from typing import Any, List, Optional, Set

from typeguard import typechecked

from ..core.collector import Collector, RefCollector
from ..core.signal import Signal


class ToList(Collector):
    def __init__(self, initial: Optional[List[Any]] = None):
        self._items: List[Any] = initial if initial is not None else []

    def __repr__(self) -> str:
        return f"ToList(len={len(self._items)})"

    def _accept(self, item: Any) -> Signal:
        self._items.append(item)
        return Signal.CONTINUE

    def _finish(self) -> List[Any]:
        return self._items


class ToSet(Collector):
    def __init__(self):
        self._items: Set[Any] = set()

    def __repr__(self) -> str:
        return f"ToSet(len={len(self._items)})"

    def _accept(self, item: Any) -> Signal:
        self._items.add(item)
        return Signal.CONTINUE

    def _finish(self) -> Set[Any]:
        return self._items


class ConcatStr(RefCollector):
    def __init__(self, sep: str = ""):
        self._sep = sep
        self._parts: List[str] = []

    def __repr__(self) -> str:
        return f"ConcatStr(parts={len(self._parts)})"

    def _accept_ref(self, item: Any) -> Signal:
        # Strings are immutable, keeping one does not keep the borrow.
        self._parts.append(str(item))
        return Signal.CONTINUE

    def _finish(self) -> str:
        return self._sep.join(self._parts)


class Sink(RefCollector):
    def __repr__(self) -> str:
        return "Sink()"

    def _accept_ref(self, item: Any) -> Signal:
        return Signal.CONTINUE

    def _finish(self) -> None:
        return None


@typechecked
def to_list(initial: Optional[List[Any]] = None) -> ToList:
    """
    Collects the items into a list.

    Args:
        initial: An existing list to append to. A new list is used if omitted.
    """
    return ToList(initial)


def to_set() -> ToSet:
    return ToSet()


@typechecked
def concat_str(sep: str = "") -> ConcatStr:
    """Joins the string form of each item with `sep`."""
    return ConcatStr(sep)


def sink() -> Sink:
    """Consumes every item and discards it."""
    return Sink()
