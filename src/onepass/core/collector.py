"""
This module defines the `Collector` and `RefCollector` contracts.

A `Collector` is an accumulator fed one item at a time. Every call to
`accept` returns a `Signal` telling the caller whether the collector wants
more items, and `finish` consumes the collector and returns its result.

A `RefCollector` can additionally consume an item *by reference* through
`accept_ref`: it reads the item (or copies it) but never keeps it, so the
same item can continue on to another collector afterwards.

Both classes carry the fluent combinator methods (`then`, `chain`, `tee`,
`map`, ...) that build new collectors out of existing ones.
"""
from __future__ import annotations

import copy
from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Any, Callable, Iterable, Optional

from .errors import CollectorConsumedError
from .signal import Signal

if TYPE_CHECKING:
    from ..config import Config
    from .hooks import Hooks


class Collector(ABC):
    """An accumulator that takes ownership of every item it is given.

    Subclasses implement `_accept` and `_finish`. The public `accept` and
    `finish` methods add the lifecycle guard: once a collector has been
    finished, any further call raises `CollectorConsumedError`.
    """

    _consumed = False

    # --- Contract ---

    def accept(self, item: Any) -> Signal:
        """Consumes `item` and reports whether more items are wanted."""
        if self._consumed:
            raise CollectorConsumedError(self, "accept")
        return self._accept(item)

    def finish(self) -> Any:
        """Consumes the collector and returns the aggregate.

        Valid whether the last signal was CONTINUE (stream exhausted) or
        STOP (short-circuited), but only once.
        """
        if self._consumed:
            raise CollectorConsumedError(self, "finish")
        self._consumed = True
        return self._finish()

    def break_hint(self) -> Signal:
        """Reports STOP if this collector would not accept any further item.

        The answer is a hint: CONTINUE never guarantees the next accept call
        will return CONTINUE.
        """
        return Signal.CONTINUE

    @property
    def consumed(self) -> bool:
        return self._consumed

    @abstractmethod
    def _accept(self, item: Any) -> Signal:
        ...

    @abstractmethod
    def _finish(self) -> Any:
        ...

    # --- Driving ---

    def collect_many(self, items: Iterable[Any]) -> Signal:
        """Feeds `items` in order until they run out or the collector stops.

        No item is pulled from `items` after the collector signals STOP.
        """
        if self.break_hint().is_stop:
            return Signal.STOP
        for item in items:
            if self.accept(item).is_stop:
                return Signal.STOP
        return Signal.CONTINUE

    def collect_then_finish(
        self,
        items: Iterable[Any],
        *,
        name: Optional[str] = None,
        hooks: Optional["Hooks"] = None,
        config: Optional["Config"] = None,
    ) -> Any:
        """Drives `items` into this collector, then finishes it."""
        from .driver import Driver

        return Driver(self, name=name, hooks=hooks, config=config).run(items)

    # --- Composition ---

    def fuse(self) -> "Collector":
        from ..components.fuse import fuse

        return fuse(self)

    def then(self, other: "Collector") -> "Collector":
        """Shows every item to this collector by reference, then to `other`.

        Requires this collector to be a `RefCollector`.
        """
        from ..components.then import then

        return then(self, other)

    def chain(self, other: "Collector") -> "Collector":
        """Hands the stream over to `other` once this collector stops."""
        from ..components.chain import chain

        return chain(self, other)

    def tee(self, *others: "Collector") -> "Collector":
        """Feeds every item to this collector and to each of `others`."""
        from ..components.tee import tee

        return tee(self, *others)

    def tee_clone(
        self, *others: "Collector", clone: Callable[[Any], Any] = copy.deepcopy
    ) -> "RefCollector":
        """Like `tee`, but gives every branch but the last its own duplicate."""
        from ..components.tee import tee_clone

        return tee_clone(self, *others, clone=clone)

    def tee_funnel(self, other: "Collector") -> "Collector":
        """Keeps a copy of every item here while `other` takes the original."""
        from ..components.tee import tee_funnel

        return tee_funnel(self, other)

    def map(self, func: Callable[[Any], Any]) -> "Collector":
        from ..components.map import map_

        return map_(self, func)

    def map_ref(self, func: Callable[[Any], Any]) -> "RefCollector":
        from ..components.map import map_ref

        return map_ref(self, func)

    def funnel(self, func: Callable[[Any], Any]) -> "RefCollector":
        """Passes a borrowed part of each item on by reference.

        Requires this collector to be a `RefCollector`.
        """
        from ..components.map import funnel

        return funnel(self, func)

    def map_output(self, func: Callable[[Any], Any]) -> "Collector":
        from ..components.map import map_output

        return map_output(self, func)

    def take(self, n: int) -> "Collector":
        from ..components.take import take

        return take(self, n)

    def take_while(self, pred: Callable[[Any], bool]) -> "Collector":
        from ..components.take import take_while

        return take_while(self, pred)

    def cloning(self, clone: Callable[[Any], Any] = copy.deepcopy) -> "RefCollector":
        from ..components.cloning import cloning

        return cloning(self, clone=clone)

    def unzip(self, other: "Collector") -> "Collector":
        from ..components.unzip import unzip

        return unzip(self, other)

    def inspect(self, func: Callable[[Any], Any]) -> "Collector":
        from ..components.inspect import inspect

        return inspect(self, func)

    def enumerate(self, start: int = 0) -> "Collector":
        from ..components.inspect import enumerate_

        return enumerate_(self, start)

    def flatten(self) -> "Collector":
        """Feeds the elements of each iterable item one by one."""
        from ..components.flatten import flatten

        return flatten(self)

    def flat_map(self, func: Callable[[Any], Iterable[Any]]) -> "Collector":
        from ..components.flatten import flat_map

        return flat_map(self, func)

    def unbatching(self, func: Callable[["Collector", Any], Signal]) -> "Collector":
        from ..components.flatten import unbatching

        return unbatching(self, func)


class RefCollector(Collector):
    """A collector that can also consume an item by reference.

    `accept_ref` must not keep the item past the call. Whether a collector
    is fed through `accept` or `accept_ref` for its whole lifetime, its
    output must be the same: by default `_accept` simply delegates to
    `_accept_ref`.
    """

    def accept_ref(self, item: Any) -> Signal:
        """Reads `item` without taking ownership of it."""
        if self._consumed:
            raise CollectorConsumedError(self, "accept_ref")
        return self._accept_ref(item)

    def _accept(self, item: Any) -> Signal:
        return self._accept_ref(item)

    @abstractmethod
    def _accept_ref(self, item: Any) -> Signal:
        ...
