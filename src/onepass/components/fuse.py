"""
This module provides the `fuse` component, which guarantees that a collector
is never offered another item once it has signalled STOP.

Every combinator wraps its children in a `Fuse`, so a stopped branch keeps
its state intact however long its siblings keep consuming.
"""
from __future__ import annotations

from typing import Any, List

from typeguard import typechecked

from ..core.collector import Collector, RefCollector
from ..core.errors import AliasedCollectorError
from ..core.signal import Signal


class Fuse(Collector):
    """Remembers that the wrapped collector stopped and answers STOP for it.

    A collector that is already done when it is wrapped counts as stopped
    from the start.
    """

    def __init__(self, collector: Collector):
        self._collector = collector
        self._stopped = collector.break_hint().is_stop

    def __repr__(self) -> str:
        return f"Fuse({self._collector!r})"

    @property
    def stopped(self) -> bool:
        """True once the wrapped collector has signalled STOP."""
        return self._stopped

    def break_hint(self) -> Signal:
        if self._stopped:
            return Signal.STOP
        return self._collector.break_hint()

    def _accept(self, item: Any) -> Signal:
        if self._stopped:
            return Signal.STOP
        if self._collector.accept(item).is_stop:
            self._stopped = True
            return Signal.STOP
        return Signal.CONTINUE

    def _finish(self) -> Any:
        return self._collector.finish()


class RefFuse(Fuse, RefCollector):
    def _accept_ref(self, item: Any) -> Signal:
        if self._stopped:
            return Signal.STOP
        if self._collector.accept_ref(item).is_stop:
            self._stopped = True
            return Signal.STOP
        return Signal.CONTINUE


@typechecked
def fuse(collector: Collector) -> Fuse:
    """
    Wraps `collector` so that it is never called again after signalling STOP.

    The result is a `RefCollector` whenever `collector` is one.
    """
    if isinstance(collector, Fuse):
        return collector
    if isinstance(collector, RefCollector):
        return RefFuse(collector)
    return Fuse(collector)


def ensure_distinct(combinator: str, collectors: List[Collector]) -> None:
    """Rejects a collector instance that appears more than once among `collectors`."""
    seen = set()
    for collector in collectors:
        if id(collector) in seen:
            raise AliasedCollectorError(combinator, collector)
        seen.add(id(collector))


def fuse_all(combinator: str, *collectors: Collector) -> List[Fuse]:
    """Fuses the children of `combinator`, each of which must be its own instance."""
    ensure_distinct(combinator, list(collectors))
    return [fuse(c) for c in collectors]
