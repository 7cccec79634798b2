"""
The driver feeds a producer's items into a root collector.

It pulls items one at a time, in production order, and stops pulling as soon
as the root collector signals STOP. It then finishes the collector and
returns its output. An infinite producer only ends through a STOP somewhere
in the collector tree.
"""
from __future__ import annotations

import time
from typing import Any, Iterable, Optional

from typeguard import typechecked

from ..config import Config
from .collector import Collector
from .errors import CollectorConsumedError
from .hooks import Hooks
from .log import get_logger


class Driver:
    """Runs one producer through one root collector.

    A driver is single-use, like the collector it drives: once `run` has
    finished the collector, running again raises `CollectorConsumedError`.

    Attributes:
        collector: The root collector.
        name: The name used for the driver's logger.
        hooks: Optional callbacks invoked around each item.
        metrics: Counters for the run ('items_in', 'stopped_early',
            'time_total').
    """

    def __init__(
        self,
        collector: Collector,
        *,
        name: Optional[str] = None,
        hooks: Optional[Hooks] = None,
        config: Optional[Config] = None,
    ):
        self.collector = collector
        self.config = config or Config()
        settings = self.config.driver_settings()
        self.name = name or settings.name or type(collector).__name__
        self.hooks = hooks or Hooks()
        self.logger = get_logger(f"onepass.driver.{self.name}")
        self._log_items = settings.log_items
        self.metrics: dict[str, Any] = {
            "items_in": 0, "stopped_early": False, "time_total": 0.0,
        }

    def __repr__(self) -> str:
        return f"Driver(name='{self.name}', collector={self.collector!r})"

    def run(self, producer: Iterable[Any]) -> Any:
        """Feeds `producer` into the collector, then finishes it.

        Args:
            producer: Any iterable. It is iterated at most once, and no item
                is pulled after the collector signals STOP.

        Returns:
            The collector's output.
        """
        collector = self.collector
        if collector.consumed:
            raise CollectorConsumedError(collector, "run")

        self.logger.info("stream_started", collector=repr(collector))
        items_in = 0
        stopped = False
        stream_start_time = time.perf_counter()

        try:
            if collector.break_hint().is_stop:
                stopped = True
            else:
                for item in producer:
                    items_in += 1
                    self.metrics["items_in"] += 1

                    if self.hooks.before_item:
                        self.hooks.before_item(self, item)

                    signal = collector.accept(item)

                    if self._log_items:
                        self.logger.debug(
                            "item_collected", item_in=items_in, signal=signal.value
                        )
                    if self.hooks.after_item:
                        self.hooks.after_item(self, item, signal)

                    if signal.is_stop:
                        stopped = True
                        break
        finally:
            total_duration = time.perf_counter() - stream_start_time
            self.metrics["time_total"] += total_duration
            self.metrics["stopped_early"] = stopped
            self.logger.info(
                "stream_finished",
                items_in=items_in,
                stopped_early=stopped,
                duration=round(total_duration, 4),
            )

        if stopped:
            self.logger.debug("collector_stopped", items_in=items_in)
            if self.hooks.on_stop:
                self.hooks.on_stop(self, items_in)

        output = collector.finish()
        if self.hooks.on_finish:
            self.hooks.on_finish(self, output)
        return output


@typechecked
def drive(
    producer: Iterable[Any],
    collector: Collector,
    *,
    name: Optional[str] = None,
    hooks: Optional[Hooks] = None,
    config: Optional[Config] = None,
) -> Any:
    """Feeds `producer` into `collector` in one pass and returns its output.

    Example:
        .. code-block:: python

            from onepass import drive, sum_, max_

            drive([1, 3, 2], sum_().tee(max_()))  # (6, 3)

    Args:
        producer: The items to consume, finite or infinite.
        collector: The root collector, possibly a tree of combinators.
        name: A name for the run's logger. Defaults to the `driver.name`
            config key, then to the collector's class name.
        hooks: Optional callbacks invoked around each item.
        config: Configuration, see `onepass.config.load_config`.
    """
    return Driver(collector, name=name, hooks=hooks, config=config).run(producer)
