"""
Numeric leaf collectors: `count`, `sum_` and `product`.

All three only read each item, so they are reference-capable.
"""
from __future__ import annotations

from typing import Any

from typeguard import typechecked

from ..core.collector import RefCollector
from ..core.signal import Signal


class Count(RefCollector):
    def __init__(self):
        self._count = 0

    def __repr__(self) -> str:
        return f"Count({self._count})"

    def _accept_ref(self, item: Any) -> Signal:
        self._count += 1
        return Signal.CONTINUE

    def _finish(self) -> int:
        return self._count


class Sum(RefCollector):
    def __init__(self, start: Any = 0):
        self._total = start

    def __repr__(self) -> str:
        return f"Sum({self._total!r})"

    def _accept_ref(self, item: Any) -> Signal:
        self._total = self._total + item
        return Signal.CONTINUE

    def _finish(self) -> Any:
        return self._total


class Product(RefCollector):
    def __init__(self, start: Any = 1):
        self._total = start

    def __repr__(self) -> str:
        return f"Product({self._total!r})"

    def _accept_ref(self, item: Any) -> Signal:
        self._total = self._total * item
        return Signal.CONTINUE

    def _finish(self) -> Any:
        return self._total


def count() -> Count:
    """Counts the items it is given."""
    return Count()


@typechecked
def sum_(start: Any = 0) -> Sum:
    """Adds up the items, starting from `start`."""
    return Sum(start)


@typechecked
def product(start: Any = 1) -> Product:
    """Multiplies the items, starting from `start`."""
    return Product(start)
