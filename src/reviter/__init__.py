from ._core import Config, get_config
from ._make import ReversibleIterable, iterate_it, make_it, over_none
from ._objects import Entry, over_entries, over_keys
from ._rev_iter import ARRAY_LIKE_METHODS, RevIter, with_array_methods
from ._reverse import is_reversible, over_array, reverse_array, reverse_it
from ._termination import (
    every,
    first,
    for_each,
    is_empty,
    last,
    reduce_it,
    some,
)
from ._thru import (
    SKIP,
    NextArgs,
    NextIterate,
    NextSkip,
    Pass,
    next_args,
    next_iterate,
    pass_if,
    thru_it,
)
from ._transform import filter_it, flat_map_it, map_it

__all__ = [
    "ARRAY_LIKE_METHODS",
    "SKIP",
    "Config",
    "Entry",
    "NextArgs",
    "NextIterate",
    "NextSkip",
    "Pass",
    "RevIter",
    "ReversibleIterable",
    "every",
    "filter_it",
    "first",
    "flat_map_it",
    "for_each",
    "get_config",
    "is_empty",
    "is_reversible",
    "iterate_it",
    "last",
    "make_it",
    "map_it",
    "next_args",
    "next_iterate",
    "over_array",
    "over_entries",
    "over_keys",
    "over_none",
    "pass_if",
    "reduce_it",
    "reverse_array",
    "reverse_it",
    "some",
    "thru_it",
    "with_array_methods",
]
