"""Free-function forms of the combinators.

Each function accepts any iterable (or, for the pair forms, any `Mapping` or iterable of `(key, value)` tuples),
wraps it in a `Seq` or `Pairs` if needed, and returns a new producer.

The pair forms carry a `2` suffix.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable, Mapping
from typing import TYPE_CHECKING, Any

from ._core import logger
from ._pairs import Pairs
from ._results import Err, Ok, Result
from ._seq import Seq

if TYPE_CHECKING:
    from ._pairs import IntoPairs
    from ._types import PairPredicate, Predicate, SupportsRichComparison


# adapters


def values[T](data: Iterable[T]) -> Seq[T]:
    """Return a `Seq` over **data**."""
    return Seq(data)


def items[K, V](data: IntoPairs[K, V]) -> Pairs[K, V]:
    """Return a `Pairs` over **data**, in its own iteration order."""
    return Pairs(data)


def sorted2[K: SupportsRichComparison[Any], V](data: Mapping[K, V]) -> Pairs[K, V]:
    """Return a `Pairs` over **data** in ascending key order.

    See `Pairs.sorted_()` for details.

    Example:
    ```python
    >>> import seqchain as sc
    >>> sc.sorted2({3: "c", 1: "a", 2: "b"}).values().collect()
    ['a', 'b', 'c']

    ```
    """
    return Pairs.sorted_(data)


def repeat[T](value: T) -> Seq[T]:
    """Return an infinite `Seq` of **value**. See `Seq.repeat()`."""
    return Seq.repeat(value)


# single values


def chain[T](*seqs: Iterable[T]) -> Seq[T]:
    """Concatenate **seqs**, in argument order.

    With no arguments, the result is empty.

    Example:
    ```python
    >>> import seqchain as sc
    >>> sc.chain([1, 2], (3,), range(4, 6)).collect()
    [1, 2, 3, 4, 5]
    >>> sc.chain().collect()
    []

    ```
    """
    return Seq().chain(*seqs)


def combine[T](*seqs: Iterable[T]) -> Seq[T]:
    """Merge **seqs** into a single `Seq`: the values of the first one, then of the second one, and so on."""
    return chain(*seqs)


def filter_[T](seq: Iterable[T], predicate: Predicate[T]) -> Seq[T]:
    return Seq(seq).filter(predicate)


def filter_map[T, R](seq: Iterable[T], func: Callable[[T], tuple[R, bool]]) -> Seq[R]:
    return Seq(seq).filter_map(func)


def map_[T, R](seq: Iterable[T], func: Callable[[T], R]) -> Seq[R]:
    return Seq(seq).map(func)


def flatten[T](seq: Iterable[Iterable[T]]) -> Seq[T]:
    return Seq(seq).flatten()


def uniq[T](seq: Iterable[T]) -> Seq[T]:
    return Seq(seq).uniq()


def skip[T](seq: Iterable[T], n: int) -> Seq[T]:
    """Drop the first **n** values of **seq**.

    Skipping zero values of a `Seq` returns that very `Seq`.
    """
    return Seq(seq).skip(n) if n else _same(seq)


def skip_while[T](seq: Iterable[T], predicate: Predicate[T] | None) -> Seq[T]:
    """Drop values of **seq** while **predicate** is true. A `None` predicate drops nothing."""
    return Seq(seq).skip_while(predicate) if predicate is not None else _same(seq)


def take[T](seq: Iterable[T], n: int) -> Seq[T]:
    return Seq(seq).take(n)


def take_while[T](seq: Iterable[T], predicate: Predicate[T] | None) -> Seq[T]:
    """Yield values of **seq** while **predicate** is true. A `None` predicate yields nothing."""
    return Seq(seq).take_while(predicate)


def _same[T](seq: Iterable[T]) -> Seq[T]:
    return seq if isinstance(seq, Seq) else Seq(seq)


# pairs


def chain2[K, V](*seqs: IntoPairs[K, V]) -> Pairs[K, V]:
    """Concatenate the pairs of **seqs**, in argument order.

    Every pair is yielded, even when a key appears in several sources.
    Collecting the result into a `dict` keeps the value of the last occurrence.

    Example:
    ```python
    >>> import seqchain as sc
    >>> roles = sc.chain2({"alice": "admin", "bob": "admin"}, {"bob": "user", "charlie": "manager"})
    >>> roles.keys().collect()
    ['alice', 'bob', 'bob', 'charlie']
    >>> roles.collect()
    {'alice': 'admin', 'bob': 'user', 'charlie': 'manager'}

    ```
    """
    return Pairs().chain(*seqs)


def combine2[K, V](*seqs: IntoPairs[K, V]) -> Pairs[K, V]:
    """Merge the pairs of **seqs** into a single `Pairs`.

    Later sources overwrite earlier ones only once collected into a `dict`.
    """
    return chain2(*seqs)


def filter2[K, V](seq: IntoPairs[K, V], predicate: PairPredicate[K, V]) -> Pairs[K, V]:
    return Pairs(seq).filter(predicate)


def filter_map2[K, V, R](
    seq: IntoPairs[K, V], func: Callable[[K, V], tuple[R, bool]]
) -> Pairs[K, R]:
    return Pairs(seq).filter_map(func)


def map2[K, V, R](seq: IntoPairs[K, V], func: Callable[[K, V], R]) -> Pairs[K, R]:
    return Pairs(seq).map(func)


def uniq2[K, V](seq: IntoPairs[K, V]) -> Pairs[K, V]:
    """Keep the first pair of each distinct key of **seq**."""
    return Pairs(seq).uniq()


def skip2[K, V](seq: IntoPairs[K, V], n: int) -> Pairs[K, V]:
    return Pairs(seq).skip(n) if n else _same2(seq)


def skip_while2[K, V](
    seq: IntoPairs[K, V], predicate: PairPredicate[K, V] | None
) -> Pairs[K, V]:
    return Pairs(seq).skip_while(predicate) if predicate is not None else _same2(seq)


def take2[K, V](seq: IntoPairs[K, V], n: int) -> Pairs[K, V]:
    return Pairs(seq).take(n)


def take_while2[K, V](
    seq: IntoPairs[K, V], predicate: PairPredicate[K, V] | None
) -> Pairs[K, V]:
    return Pairs(seq).take_while(predicate)


def _same2[K, V](seq: IntoPairs[K, V]) -> Pairs[K, V]:
    return seq if isinstance(seq, Pairs) else Pairs(seq)


# errors


def values_err[T, E](
    data: Iterable[T] | None, err: E | None
) -> tuple[Seq[T], None] | tuple[None, E]:
    """Turn the `(data, error)` result of a fallible call into a `(Seq, error)` pair.

    The error, if any, is returned unchanged and **data** is ignored.

    This spares an intermediate variable for the raw container.

    Args:
        data (Iterable[T] | None): The values returned by the fallible call.
        err (E | None): The error returned by the fallible call, or `None` on success.

    Returns:
        tuple[Seq[T], None] | tuple[None, E]: `(Seq(data), None)` on success, `(None, err)` otherwise.

    Example:
    ```python
    >>> import seqchain as sc
    >>> def fetch_fruits() -> tuple[list[str], Exception | None]:
    ...     return ["apple", "banana", "cherry"], None
    >>> fruits, err = sc.values_err(*fetch_fruits())
    >>> fruits.map(str.title).collect()
    ['Apple', 'Banana', 'Cherry']
    >>> def fetch_broken() -> tuple[list[str] | None, Exception | None]:
    ...     return None, ValueError("something went wrong")
    >>> sc.values_err(*fetch_broken())
    (None, ValueError('something went wrong'))

    ```
    """
    if err is not None:
        logger.debug("lifting error %r", err)
        return None, err
    return Seq(() if data is None else data), None


def items_err[K, V, E](
    data: IntoPairs[K, V] | None, err: E | None
) -> tuple[Pairs[K, V], None] | tuple[None, E]:
    """Same as `values_err()`, for a `Mapping` or `(key, value)` tuples, returning a `Pairs`."""
    if err is not None:
        logger.debug("lifting error %r", err)
        return None, err
    return Pairs(() if data is None else data), None


def try_values[T, E](data: Iterable[T] | None, err: E | None) -> Result[Seq[T], E]:
    """Same as `values_err()`, expressed as a `Result`.

    Returns:
        Result[Seq[T], E]: `Ok(Seq(data))` on success, `Err(err)` otherwise.

    Example:
    ```python
    >>> import seqchain as sc
    >>> sc.try_values([1, 2], None).unwrap().collect()
    [1, 2]
    >>> sc.try_values(None, "timeout")
    Err(error='timeout')

    ```
    """
    seq, error = values_err(data, err)
    if seq is None:
        return Err(error)
    return Ok(seq)
