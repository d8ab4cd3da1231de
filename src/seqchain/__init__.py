from ._core import Config, Pipeable, get_config, set_config
from ._funcs import (
    chain,
    chain2,
    combine,
    combine2,
    filter2,
    filter_,
    filter_map,
    filter_map2,
    flatten,
    items,
    items_err,
    map2,
    map_,
    repeat,
    skip,
    skip2,
    skip_while,
    skip_while2,
    sorted2,
    take,
    take2,
    take_while,
    take_while2,
    try_values,
    uniq,
    uniq2,
    values,
    values_err,
)
from ._pairs import Pairs
from ._results import Err, Ok, Result, ResultUnwrapError
from ._seq import Seq
from ._types import Consumer, Item, PairConsumer

__all__ = [
    "Config",
    "Consumer",
    "Err",
    "Item",
    "Ok",
    "PairConsumer",
    "Pairs",
    "Pipeable",
    "Result",
    "ResultUnwrapError",
    "Seq",
    "chain",
    "chain2",
    "combine",
    "combine2",
    "filter2",
    "filter_",
    "filter_map",
    "filter_map2",
    "flatten",
    "get_config",
    "items",
    "items_err",
    "map2",
    "map_",
    "repeat",
    "set_config",
    "skip",
    "skip2",
    "skip_while",
    "skip_while2",
    "sorted2",
    "take",
    "take2",
    "take_while",
    "take_while2",
    "try_values",
    "uniq",
    "uniq2",
    "values",
    "values_err",
]
