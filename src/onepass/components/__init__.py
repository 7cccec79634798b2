# onepass.components
# Combinator nodes: collectors built out of other collectors.

from .chain import Chain, chain
from .cloning import Cloning, cloning
from .flatten import FlatMap, Flatten, Unbatching, flat_map, flatten, unbatching
from .fuse import Fuse, fuse
from .inspect import Enumerate, Inspect, enumerate_, inspect
from .map import Funnel, Map, MapOutput, MapRef, funnel, map_, map_output, map_ref
from .take import Take, TakeWhile, take, take_while
from .tee import Tee, TeeClone, TeeFunnel, tee, tee_clone, tee_funnel
from .then import Then, then
from .unzip import Unzip, unzip

__all__ = [
    "Chain",
    "chain",
    "Cloning",
    "cloning",
    "FlatMap",
    "Flatten",
    "Unbatching",
    "flat_map",
    "flatten",
    "unbatching",
    "Fuse",
    "fuse",
    "Enumerate",
    "Inspect",
    "enumerate_",
    "inspect",
    "Funnel",
    "Map",
    "MapOutput",
    "MapRef",
    "funnel",
    "map_",
    "map_output",
    "map_ref",
    "Take",
    "TakeWhile",
    "take",
    "take_while",
    "Tee",
    "TeeClone",
    "TeeFunnel",
    "tee",
    "tee_clone",
    "tee_funnel",
    "Then",
    "then",
    "Unzip",
    "unzip",
]
