"""
This module provides the fan-out components: `tee`, `tee_clone` and
`tee_funnel`.

All three feed the same logical item to several branches within one accept
call and return a tuple of the branch outputs, in declaration order. The
composite signals STOP only once every branch has stopped; a stopped branch
is never offered another item.
"""
from __future__ import annotations

import copy
from typing import Any, Callable, List, Sequence, Tuple

from typeguard import typechecked

from ..core.collector import Collector, RefCollector
from ..core.errors import NotRefCollectorError
from ..core.signal import Signal
from .cloning import cloning
from .fuse import Fuse, ensure_distinct, fuse_all
from .then import RefThen, Then


class Tee(Collector):
    """Zero-copy fan-out.

    Reference-capable branches read each item first, in declaration order;
    the single owning branch receives it by value last.
    """

    def __init__(self, branches: Sequence[Collector], owner: int):
        self._branches: List[Fuse] = fuse_all("tee", *branches)
        self._owner = self._branches[owner]
        self._borrowers = [b for i, b in enumerate(self._branches) if i != owner]

    def __repr__(self) -> str:
        inner = ", ".join(repr(b) for b in self._branches)
        return f"{type(self).__name__}({inner})"

    def break_hint(self) -> Signal:
        return Signal.all_stop([b.break_hint() for b in self._branches])

    def _accept(self, item: Any) -> Signal:
        signals = [b.accept_ref(item) for b in self._borrowers]
        signals.append(self._owner.accept(item))
        return Signal.all_stop(signals)

    def _finish(self) -> Tuple[Any, ...]:
        return tuple(b.finish() for b in self._branches)


class RefTee(Tee, RefCollector):
    def _accept_ref(self, item: Any) -> Signal:
        return Signal.all_stop([b.accept_ref(item) for b in self._branches])


class TeeClone(RefCollector):
    """Fan-out by explicit duplication.

    Every branch but the last gets its own copy of the item; the last one
    gets the original. Given a borrowed item, every branch gets a copy.
    """

    def __init__(self, branches: Sequence[Collector], clone: Callable[[Any], Any]):
        self._branches: List[Fuse] = fuse_all("tee_clone", *branches)
        self._clone = clone

    def __repr__(self) -> str:
        inner = ", ".join(repr(b) for b in self._branches)
        return f"TeeClone({inner})"

    def break_hint(self) -> Signal:
        return Signal.all_stop([b.break_hint() for b in self._branches])

    def _offer_copy(self, branch: Fuse, item: Any) -> Signal:
        # No point duplicating an item nobody will look at.
        if branch.stopped:
            return Signal.STOP
        return branch.accept(self._clone(item))

    def _accept(self, item: Any) -> Signal:
        *rest, last = self._branches
        signals = [self._offer_copy(b, item) for b in rest]
        signals.append(last.accept(item))
        return Signal.all_stop(signals)

    def _accept_ref(self, item: Any) -> Signal:
        return Signal.all_stop([self._offer_copy(b, item) for b in self._branches])

    def _finish(self) -> Tuple[Any, ...]:
        return tuple(b.finish() for b in self._branches)


class TeeFunnel(Then):
    """Keeps (a copy of) every item in the first branch, passes the original on."""


class RefTeeFunnel(TeeFunnel, RefThen):
    pass


@typechecked
def tee(first: Collector, *others: Collector) -> Tee:
    """
    Feeds every item to `first` and to each of `others`, without copying.

    At most one branch may be a plain `Collector`: it takes the item by
    value after every other branch has read it by reference. When all
    branches are `RefCollector`s the last one takes the item by value, and
    the composite is itself a `RefCollector`.

    Example:
        .. code-block:: python

            drive([1, 3, 2], sum_().tee(max_()))  # (6, 3)

    Raises:
        NotRefCollectorError: If more than one branch needs ownership.
        AliasedCollectorError: If the same collector is given twice.
        ValueError: If no other branch is given.
    """
    branches = [first, *others]
    if len(branches) < 2:
        raise ValueError("tee needs at least two branches")
    ensure_distinct("tee", branches)

    owners = [i for i, b in enumerate(branches) if not isinstance(b, RefCollector)]
    if len(owners) > 1:
        raise NotRefCollectorError(
            "tee",
            branches[owners[1]],
            "only one branch may take ownership of the item; "
            "use .tee_clone() to duplicate it instead",
        )
    if owners:
        return Tee(branches, owners[0])
    return RefTee(branches, len(branches) - 1)


@typechecked
def tee_clone(
    first: Collector, *others: Collector, clone: Callable[[Any], Any] = copy.deepcopy
) -> TeeClone:
    """
    Feeds every item to `first` and to each of `others`, duplicating it.

    Use this when several branches need to keep items of their own, which
    `tee` cannot arrange without copying.

    Args:
        first: The first branch.
        *others: The remaining branches; the last one receives the original.
        clone: The duplication function. Defaults to `copy.deepcopy`.
    """
    branches = [first, *others]
    if len(branches) < 2:
        raise ValueError("tee_clone needs at least two branches")
    return TeeClone(branches, clone)


@typechecked
def tee_funnel(first: Collector, other: Collector) -> TeeFunnel:
    """
    Keeps the raw items in `first` while `other` derives something from them.

    `first` reads each item by reference. If it is not a `RefCollector`
    (a container builder such as `to_list()` usually is not), it is wrapped
    with `cloning()` so that it stores a copy. `other` then takes the
    original item by value.

    Example:
        .. code-block:: python

            drive([[1], [2, 3]], to_list().tee_funnel(fold(0, lambda n, xs: n + len(xs))))
            # ([[1], [2, 3]], 3)
    """
    ensure_distinct("tee_funnel", [first, other])
    if not isinstance(first, RefCollector):
        first = cloning(first)
    if isinstance(other, RefCollector):
        return RefTeeFunnel(first, other)
    return TeeFunnel(first, other)
