from .core.signal import Signal
from .core.collector import Collector, RefCollector
from .core.driver import Driver, drive
from .core.errors import (
    OnepassError,
    AliasedCollectorError,
    CollectorConsumedError,
    NotRefCollectorError,
)
from .core.hooks import Hooks
from .config import Config, load_config

from .components.chain import chain
from .components.cloning import cloning
from .components.flatten import flat_map, flatten, unbatching
from .components.fuse import fuse
from .components.inspect import enumerate_, inspect
from .components.map import funnel, map_, map_output, map_ref
from .components.take import take, take_while
from .components.tee import tee, tee_clone, tee_funnel
from .components.then import then
from .components.unzip import unzip

from .collectors.cmp import max_, min_, min_max
from .collectors.containers import concat_str, sink, to_list, to_set
from .collectors.find import all_, any_, find, last
from .collectors.fold import fold, fold_ref, reduce_, try_fold, try_fold_ref
from .collectors.num import count, product, sum_

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
    "Config",
    "load_config",
    "chain",
    "cloning",
    "flat_map",
    "flatten",
    "unbatching",
    "fuse",
    "enumerate_",
    "inspect",
    "funnel",
    "map_",
    "map_output",
    "map_ref",
    "take",
    "take_while",
    "tee",
    "tee_clone",
    "tee_funnel",
    "then",
    "unzip",
    "max_",
    "min_",
    "min_max",
    "concat_str",
    "sink",
    "to_list",
    "to_set",
    "all_",
    "any_",
    "find",
    "last",
    "fold",
    "fold_ref",
    "reduce_",
    "try_fold",
    "try_fold_ref",
    "count",
    "product",
    "sum_",
]
