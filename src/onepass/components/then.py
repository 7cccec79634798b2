"""
This module provides the `then` component: sequential pass-through.

The left branch looks at each item by reference first, and the right branch
then takes the very same item by value. Because the left branch never claims
ownership, the right branch sees every item regardless of whether the left
one has stopped.
"""
from __future__ import annotations

from typing import Any, Tuple

from typeguard import typechecked

from ..core.collector import Collector, RefCollector
from ..core.errors import NotRefCollectorError
from ..core.signal import Signal
from .fuse import fuse_all


class Then(Collector):
    """Feeds `left` by reference, then `right` by value.

    Output is the pair ``(left_output, right_output)``. STOP is reported
    only once both branches have stopped.
    """

    def __init__(self, left: RefCollector, right: Collector):
        self._left, self._right = fuse_all("then", left, right)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(left={self._left!r}, right={self._right!r})"

    def break_hint(self) -> Signal:
        return Signal.all_stop((self._left.break_hint(), self._right.break_hint()))

    def _accept(self, item: Any) -> Signal:
        left = self._left.accept_ref(item)
        right = self._right.accept(item)
        return Signal.all_stop((left, right))

    def _finish(self) -> Tuple[Any, Any]:
        return (self._left.finish(), self._right.finish())


class RefThen(Then, RefCollector):
    """A `Then` whose right branch is reference-capable too."""

    def _accept_ref(self, item: Any) -> Signal:
        left = self._left.accept_ref(item)
        right = self._right.accept_ref(item)
        return Signal.all_stop((left, right))


@typechecked
def then(left: Collector, right: Collector) -> Then:
    """
    Composes `left` and `right` so that both see the whole stream.

    Example:
        .. code-block:: python

            # length of the stream and the items themselves, in one pass
            drive(["a", "bb"], count().then(to_list()))  # (2, ["a", "bb"])

    Args:
        left: A `RefCollector`; it is offered each item first, by reference.
        right: Any collector; it receives each item by value afterwards.

    Raises:
        NotRefCollectorError: If `left` cannot accept items by reference.
    """
    if not isinstance(left, RefCollector):
        raise NotRefCollectorError(
            "then",
            left,
            "wrap the left branch with .cloning(), or use .tee_funnel() instead",
        )
    if isinstance(right, RefCollector):
        return RefThen(left, right)
    return Then(left, right)
