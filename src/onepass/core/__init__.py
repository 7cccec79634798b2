# onepass.core
# This package contains the collector contracts, the control signal and the
# driver that feeds a producer into a collector tree.

from .signal import Signal
from .collector import Collector, RefCollector
from .driver import Driver, drive
from .errors import (
    OnepassError,
    AliasedCollectorError,
    CollectorConsumedError,
    NotRefCollectorError,
)
from .hooks import Hooks

__all__ = [
    "Signal",
    "Collector",
    "RefCollector",
    "Driver",
    "drive",
    "OnepassError",
    "CollectorConsumedError",
    "NotRefCollectorError",
    "AliasedCollectorError",
    "Hooks",
]
