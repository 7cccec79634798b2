"""
This module provides the `cloning` component, which lets a collector that
stores its items take part in reference-based composition.
"""
from __future__ import annotations

import copy
from typing import Any, Callable

from typeguard import typechecked

from ..core.collector import Collector, RefCollector
from ..core.signal import Signal


class Cloning(RefCollector):
    """Stores a duplicate of every borrowed item; owned items pass straight through."""

    def __init__(self, collector: Collector, clone: Callable[[Any], Any]):
        self._collector = collector
        self._clone = clone

    def __repr__(self) -> str:
        return f"Cloning({self._collector!r})"

    def break_hint(self) -> Signal:
        return self._collector.break_hint()

    def _accept(self, item: Any) -> Signal:
        return self._collector.accept(item)

    def _accept_ref(self, item: Any) -> Signal:
        return self._collector.accept(self._clone(item))

    def _finish(self) -> Any:
        return self._collector.finish()


@typechecked
def cloning(collector: Collector, clone: Callable[[Any], Any] = copy.deepcopy) -> Cloning:
    """
    Turns `collector` into a `RefCollector` by duplicating borrowed items.

    Args:
        collector: Any collector, typically a container builder.
        clone: The duplication function. Defaults to `copy.deepcopy`; pass
            `copy.copy` for a shallow copy.
    """
    return Cloning(collector, clone)
