from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .collector import Collector


class OnepassError(Exception):
    """Base class for all exceptions raised by the onepass package."""

    pass


class CollectorConsumedError(OnepassError, RuntimeError):
    """Raised when a collector is used after `finish()` has consumed it."""

    def __init__(self, collector: "Collector", operation: str):
        self.collector = collector
        self.operation = operation
        super().__init__(
            f"Cannot call '{operation}' on {type(collector).__name__}: "
            f"the collector has already been finished"
        )


class NotRefCollectorError(OnepassError, TypeError):
    """Raised when a combinator needs a reference-capable branch but got a plain Collector."""

    def __init__(self, combinator: str, collector: "Collector", hint: str = ""):
        self.combinator = combinator
        self.collector = collector
        message = (
            f"'{combinator}' requires a RefCollector, "
            f"got {type(collector).__name__}"
        )
        if hint:
            message = f"{message}\n  - {hint}"
        super().__init__(message)


class AliasedCollectorError(OnepassError, ValueError):
    """Raised when one collector instance is given to a combinator twice."""

    def __init__(self, combinator: str, collector: "Collector"):
        self.combinator = combinator
        self.collector = collector
        super().__init__(
            f"'{combinator}' was given the same {type(collector).__name__} "
            f"instance more than once; every branch needs its own collector"
        )
