from __future__ import annotations

from collections.abc import Callable
from typing import NamedTuple, Protocol

# callbacks

type Consumer[T] = Callable[[T], bool]
"""Receives one element, returns `False` to stop the iteration."""
type PairConsumer[K, V] = Callable[[K, V], bool]
"""Receives one key-value pair, returns `False` to stop the iteration."""
type Predicate[T] = Callable[[T], bool]
type PairPredicate[K, V] = Callable[[K, V], bool]

# Iterations result types


class Item[K, V](NamedTuple):
    """Represents a key-value pair yielded by `Pairs`."""

    key: K
    """The key of the item."""
    value: V
    """The value associated with the key."""

    def __repr__(self) -> str:
        return f"({self.key!r}, {self.value!r})"


# typeshed protocols


class SupportsDunderLT[T](Protocol):
    def __lt__(self, other: T, /) -> bool: ...


class SupportsDunderGT[T](Protocol):
    def __gt__(self, other: T, /) -> bool: ...


type SupportsRichComparison[T] = SupportsDunderLT[T] | SupportsDunderGT[T]
