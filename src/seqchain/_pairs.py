from __future__ import annotations

import itertools
from collections.abc import Callable, Iterable, Iterator, Mapping
from functools import partial
from operator import itemgetter
from typing import TYPE_CHECKING, Any, Concatenate

import cytoolz as cz

from ._core import Pipeable, can_preview, check_count, get_config, logger
from ._seq import Seq
from ._types import Item

if TYPE_CHECKING:
    from ._types import PairConsumer, PairPredicate, SupportsRichComparison

type IntoPairs[K, V] = Mapping[K, V] | Iterable[tuple[K, V]]


def _as_items[K, V](data: IntoPairs[K, V]) -> Iterator[Item[K, V]]:
    if isinstance(data, Mapping):
        return map(Item._make, data.items())
    return map(Item._make, data)


def _empty() -> Iterator[Any]:
    return iter(())


class Pairs[K, V](Pipeable, Iterable[Item[K, V]]):
    """A restartable, lazy sequence of key-value pairs.

    The pair counterpart of `Seq`: each element is an `Item(key, value)` named tuple,
    and every predicate or function receives the key and the value as two separate arguments.

    Keys are not required to be unique: a `Pairs` yields every pair it is given, duplicates included.
    Only `collect()` folds them into a `dict`, the last value winning.

    Args:
        data (IntoPairs[K, V]): A `Mapping`, or any iterable of `(key, value)` tuples. Defaults to an empty tuple.

    Example:
    ```python
    >>> import seqchain as sc
    >>> roles = sc.Pairs({"alice": "admin", "bob": "user"})
    >>> roles.filter(lambda name, role: role == "admin").collect()
    {'alice': 'admin'}
    >>> roles.chain([("alice", "user")]).collect()
    {'alice': 'user', 'bob': 'user'}

    ```
    """

    __slots__ = ("_factory", "_preview")

    _factory: Callable[[], Iterator[Item[K, V]]]
    _preview: bool

    def __init__(self, data: IntoPairs[K, V] = ()) -> None:
        if isinstance(data, Pairs):
            self._factory = data._factory
            self._preview = data._preview
        else:
            self._factory = partial(_as_items, data)
            self._preview = can_preview(data)

    def __iter__(self) -> Iterator[Item[K, V]]:
        return self._factory()

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({get_config().iter_repr(self)})"

    def __call__(self, consume: PairConsumer[K, V]) -> None:
        """Feed each pair to **consume** until it returns a falsy value.

        Args:
            consume (PairConsumer[K, V]): Callback receiving each key and value, returning `True` to continue.

        Example:
        ```python
        >>> import seqchain as sc
        >>> sc.Pairs([("a", 1), ("b", 2), ("c", 3)])(lambda k, v: print(k, v) or v < 2)
        a 1
        b 2

        ```
        """
        for key, value in self:
            if not consume(key, value):
                return

    @staticmethod
    def _new[KN, VN](
        factory: Callable[[], Iterator[Item[KN, VN]]], *, preview: bool
    ) -> Pairs[KN, VN]:
        pairs: Pairs[KN, VN] = Pairs()
        pairs._factory = factory
        pairs._preview = preview
        return pairs

    @staticmethod
    def from_fn[KN, VN](factory: Callable[[], IntoPairs[KN, VN]]) -> Pairs[KN, VN]:
        """Create a `Pairs` calling **factory** at the start of every iteration.

        Args:
            factory (Callable[[], IntoPairs[KN, VN]]): Zero-argument function returning a `Mapping` or `(key, value)` tuples.

        Returns:
            Pairs[KN, VN]: A new `Pairs` over the pairs returned by **factory**.
        """
        return Pairs._new(lambda: _as_items(factory()), preview=False)

    @staticmethod
    def sorted_[KS: SupportsRichComparison[Any], VS](
        data: Mapping[KS, VS],
    ) -> Pairs[KS, VS]:
        """Create a `Pairs` over **data**, in ascending key order.

        Each iteration collects and sorts all the keys before yielding the first pair,
        so it observes the current content of **data**.

        Args:
            data (Mapping[KS, VS]): Mapping with orderable keys.

        Returns:
            Pairs[KS, VS]: The pairs of **data**, sorted by key.

        Example:
        ```python
        >>> import seqchain as sc
        >>> sc.Pairs.sorted_({"charlie": 3, "alice": 1, "bob": 2})
        Pairs(('alice', 1), ('bob', 2), ('charlie', 3))

        ```
        """

        def _sorted() -> Iterator[Item[KS, VS]]:
            keys = sorted(data)
            logger.debug("sorted %d keys", len(keys))
            return (Item(key, data[key]) for key in keys)

        return Pairs._new(_sorted, preview=True)

    def _lazy[**P, KU, VU](
        self,
        factory: Callable[Concatenate[Iterable[Item[K, V]], P], Iterator[Item[KU, VU]]],
        *args: P.args,
        **kwargs: P.kwargs,
    ) -> Pairs[KU, VU]:
        return Pairs._new(
            lambda: factory(self, *args, **kwargs), preview=self._preview
        )

    def collect(self) -> dict[K, V]:
        """Iterate the pairs and collect them into a `dict`.

        When a key appears several times, the last value wins.

        Returns:
            dict[K, V]: The collected pairs.
        """
        # `dict(self)` would take `keys()` for the mapping protocol.
        return dict(iter(self))

    def keys(self) -> Seq[K]:
        """Return a `Seq` of the keys, duplicates included.

        Example:
        ```python
        >>> import seqchain as sc
        >>> sc.Pairs([("a", 1), ("a", 2)]).keys().collect()
        ['a', 'a']

        ```
        """
        return Seq(self).map(itemgetter(0))

    def values(self) -> Seq[V]:
        """Return a `Seq` of the values."""
        return Seq(self).map(itemgetter(1))

    def chain(self, *others: IntoPairs[K, V]) -> Pairs[K, V]:
        """Yield the pairs of `Self`, then the pairs of each of **others**, in order.

        Duplicated keys are all yielded, in input order.

        Args:
            *others (IntoPairs[K, V]): Sources to append.

        Returns:
            Pairs[K, V]: The concatenation of all the sources.

        Example:
        ```python
        >>> import seqchain as sc
        >>> sc.Pairs({"alice": "admin", "bob": "admin"}).chain({"bob": "user"})
        Pairs(('alice', 'admin'), ('bob', 'admin'), ('bob', 'user'))

        ```
        """
        sources = (self, *map(Pairs, others))
        return Pairs._new(
            lambda: cz.itertoolz.concat(sources),
            preview=all(map(can_preview, sources)),
        )

    def filter(self, predicate: PairPredicate[K, V]) -> Pairs[K, V]:
        """Yield only the pairs for which **predicate** is true, preserving their order.

        Args:
            predicate (PairPredicate[K, V]): Function of the key and the value deciding whether to keep the pair.

        Returns:
            Pairs[K, V]: The kept pairs.
        """

        def _keep(item: Item[K, V]) -> bool:
            return predicate(*item)

        return self._lazy(partial(filter, _keep))

    def map[R](self, func: Callable[[K, V], R]) -> Pairs[K, R]:
        """Replace each value by **func** applied to the key and the value.

        Keys are passed through unchanged.

        Args:
            func (Callable[[K, V], R]): Function computing the new value.

        Returns:
            Pairs[K, R]: The pairs with transformed values.

        Example:
        ```python
        >>> import seqchain as sc
        >>> sc.Pairs({"one": 1, "two": 2}).map(lambda k, v: f"{k}={v}").collect()
        {'one': 'one=1', 'two': 'two=2'}

        ```
        """

        def _map(data: Iterable[Item[K, V]]) -> Iterator[Item[K, R]]:
            for key, value in data:
                yield Item(key, func(key, value))

        return self._lazy(_map)

    def filter_map[R](self, func: Callable[[K, V], tuple[R, bool]]) -> Pairs[K, R]:
        """Filter and map the values in a single pass.

        **func** returns a `(value, keep)` tuple: the pair is yielded, with its new value, only when `keep` is true.

        Args:
            func (Callable[[K, V], tuple[R, bool]]): Function of the key and the value.

        Returns:
            Pairs[K, R]: The kept pairs, with transformed values.

        Example:
        ```python
        >>> import seqchain as sc
        >>> stock = sc.Pairs({"apple": 3, "pear": 0, "plum": 5})
        >>> stock.filter_map(lambda fruit, n: (n * 10, n > 0)).collect()
        {'apple': 30, 'plum': 50}

        ```
        """

        def _filter_map(data: Iterable[Item[K, V]]) -> Iterator[Item[K, R]]:
            for key, value in data:
                new_value, keep = func(key, value)
                if keep:
                    yield Item(key, new_value)

        return self._lazy(_filter_map)

    def uniq(self) -> Pairs[K, V]:
        """Yield only the first pair of each distinct key.

        The value kept for a duplicated key is the one of its first occurrence,
        whereas `collect()` on the same pairs keeps the last one.

        Returns:
            Pairs[K, V]: The pairs with distinct keys, in first-seen order.

        Example:
        ```python
        >>> import seqchain as sc
        >>> roles = sc.Pairs({"alice": "admin", "bob": "user"}).chain({"alice": "user"})
        >>> roles.uniq().collect()
        {'alice': 'admin', 'bob': 'user'}
        >>> roles.collect()
        {'alice': 'user', 'bob': 'user'}

        ```
        """
        return self._lazy(partial(cz.itertoolz.unique, key=itemgetter(0)))

    def skip(self, n: int) -> Pairs[K, V]:
        """Drop the first **n** pairs, then yield the rest.

        Skipping zero pairs returns `Self` unchanged.

        Raises:
            ValueError: If **n** is negative.
        """
        check_count(n)
        if n == 0:
            return self
        return self._lazy(partial(cz.itertoolz.drop, n))

    def skip_while(self, predicate: PairPredicate[K, V] | None) -> Pairs[K, V]:
        """Drop pairs while **predicate** is true, then yield every remaining pair.

        A `None` predicate drops nothing and returns `Self` unchanged.

        Args:
            predicate (PairPredicate[K, V] | None): Function of the key and the value.

        Returns:
            Pairs[K, V]: The pairs from the first one failing **predicate** onwards.
        """
        if predicate is None:
            return self

        def _drop(item: Item[K, V]) -> bool:
            return predicate(*item)

        return self._lazy(partial(itertools.dropwhile, _drop))

    def take(self, n: int) -> Pairs[K, V]:
        """Yield at most the first **n** pairs.

        Taking zero pairs never iterates `Self`.

        Raises:
            ValueError: If **n** is negative.

        Example:
        ```python
        >>> import seqchain as sc
        >>> sc.Pairs.sorted_({"c": 3, "a": 1, "b": 2}).take(2)
        Pairs(('a', 1), ('b', 2))

        ```
        """
        check_count(n)
        if n == 0:
            return Pairs._new(_empty, preview=True)
        return self._lazy(partial(cz.itertoolz.take, n))

    def take_while(self, predicate: PairPredicate[K, V] | None) -> Pairs[K, V]:
        """Yield pairs while **predicate** is true.

        A `None` predicate yields nothing, unlike `skip_while()`.

        Args:
            predicate (PairPredicate[K, V] | None): Function of the key and the value.

        Returns:
            Pairs[K, V]: The leading pairs satisfying **predicate**.
        """
        if predicate is None:
            return Pairs._new(_empty, preview=True)

        def _take(item: Item[K, V]) -> bool:
            return predicate(*item)

        return self._lazy(partial(itertools.takewhile, _take))
