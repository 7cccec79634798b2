# onepass.collectors
# Leaf accumulators: collectors with no child collectors.

from .cmp import max_, min_, min_max
from .containers import concat_str, sink, to_list, to_set
from .find import all_, any_, find, last
from .fold import fold, fold_ref, reduce_, try_fold, try_fold_ref
from .num import count, product, sum_

__all__ = [
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
