"""
The control signal returned by every accumulation step.
"""
from __future__ import annotations

import enum
from typing import Iterable


class Signal(enum.Enum):
    """Whether a collector wants more items.

    ``CONTINUE`` means "keep feeding me"; ``STOP`` means "I am done, do not
    call me again until you finish me". A signal is an ordinary return value
    so that combinators can observe and aggregate the signals of their
    children.
    """

    CONTINUE = "continue"
    STOP = "stop"

    @property
    def is_stop(self) -> bool:
        return self is Signal.STOP

    @property
    def is_continue(self) -> bool:
        return self is Signal.CONTINUE

    @classmethod
    def stop_if(cls, condition: bool) -> "Signal":
        return cls.STOP if condition else cls.CONTINUE

    @classmethod
    def all_stop(cls, signals: Iterable["Signal"]) -> "Signal":
        """STOP only when every signal is STOP."""
        return cls.stop_if(all(s is cls.STOP for s in signals))
