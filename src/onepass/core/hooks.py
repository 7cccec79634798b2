from __future__ import annotations
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Callable, Optional

if TYPE_CHECKING:
    from .driver import Driver
    from .signal import Signal

@dataclass
class Hooks:
    """
    A collection of hook functions to monitor and trace a driver run.

    Attributes:
        before_item: Called after an item is pulled from the producer and
                     before it is handed to the root collector.
        after_item: Called with the item and the signal the root collector
                    returned for it.
        on_stop: Called once when the root collector signals STOP, with the
                 number of items pulled so far. Not called when the producer
                 is simply exhausted.
        on_finish: Called with the root collector's output after `finish()`.
    """
    before_item: Optional[Callable[["Driver", Any], None]] = None
    after_item: Optional[Callable[["Driver", Any, "Signal"], None]] = None
    on_stop: Optional[Callable[["Driver", int], None]] = None
    on_finish: Optional[Callable[["Driver", Any], None]] = None
