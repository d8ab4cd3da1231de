from __future__ import annotations

import itertools
from collections.abc import Callable, Iterable, Iterator
from functools import partial
from typing import TYPE_CHECKING, Concatenate

import cytoolz as cz
import more_itertools as mit

from ._core import Pipeable, can_preview, check_count, get_config
from ._types import Item

if TYPE_CHECKING:
    from ._pairs import Pairs
    from ._types import Consumer, Predicate


class Seq[T](Pipeable, Iterable[T]):
    """A restartable, lazy sequence of values.

    A `Seq` never stores elements: it keeps a factory that builds a fresh iterator each time the `Seq` is iterated.

    All methods return a new `Seq` wrapping this one, and nothing is computed until the `Seq` is iterated,
    either with a `for` loop, with `collect()`, or by calling it with a consumer callback.

    - Built from a re-iterable container (list, tuple, range, set, another `Seq`...), a `Seq` can be iterated any number of times,
    each iteration yielding the full sequence independently.
    - Built from a one-shot `Iterator` (generator, file, cursor...), it is exhausted after the first iteration.
    Use `Seq.from_fn()` with a function creating the iterator to get a restartable `Seq` instead.

    `repr()` previews the first values of a `Seq` built from containers only:
    a `Seq` over an `Iterator` or a `from_fn()` factory is shown as `Seq(...)`, and left untouched.

    Args:
        data (Iterable[T]): The source of the values. Defaults to an empty tuple.

    Example:
    ```python
    >>> import seqchain as sc
    >>> evens = sc.Seq(range(10)).filter(lambda x: x % 2 == 0)
    >>> evens.collect()
    [0, 2, 4, 6, 8]
    >>> evens.map(lambda x: x * 10).take(2).collect()
    [0, 20]

    ```
    """

    __slots__ = ("_factory", "_preview")

    _factory: Callable[[], Iterator[T]]
    _preview: bool

    def __init__(self, data: Iterable[T] = ()) -> None:
        if isinstance(data, Seq):
            self._factory = data._factory
            self._preview = data._preview
        else:
            self._factory = partial(iter, data)
            self._preview = can_preview(data)

    def __iter__(self) -> Iterator[T]:
        return self._factory()

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({get_config().iter_repr(self)})"

    def __call__(self, consume: Consumer[T]) -> None:
        """Feed each value to **consume** until it returns a falsy value.

        Once **consume** asks to stop, no further value is pulled from upstream.

        Args:
            consume (Consumer[T]): Callback receiving each value, returning `True` to continue.

        Example:
        ```python
        >>> import seqchain as sc
        >>> def until_three(x: int) -> bool:
        ...     print(x)
        ...     return x < 3
        >>> sc.Seq([1, 2, 3, 4, 5])(until_three)
        1
        2
        3

        ```
        """
        for item in self:
            if not consume(item):
                return

    @staticmethod
    def _new[U](factory: Callable[[], Iterator[U]], *, preview: bool) -> Seq[U]:
        seq: Seq[U] = Seq()
        seq._factory = factory
        seq._preview = preview
        return seq

    @staticmethod
    def from_fn[U](factory: Callable[[], Iterable[U]]) -> Seq[U]:
        """Create a `Seq` calling **factory** at the start of every iteration.

        This is the way to get a restartable `Seq` over a generator function, a database cursor, etc.

        Args:
            factory (Callable[[], Iterable[U]]): Zero-argument function returning the values.

        Returns:
            Seq[U]: A new `Seq` over the values returned by **factory**.

        Example:
        ```python
        >>> import seqchain as sc
        >>> def squares():
        ...     yield from (x * x for x in range(4))
        >>> seq = sc.Seq.from_fn(squares)
        >>> seq.collect()
        [0, 1, 4, 9]
        >>> seq.collect()
        [0, 1, 4, 9]

        ```
        """
        return Seq._new(lambda: iter(factory()), preview=False)

    @staticmethod
    def repeat[U](value: U) -> Seq[U]:
        """Create an infinite `Seq` yielding **value** over and over.

        **Warning** ⚠️
            This creates an infinite sequence.
            Be sure to use `Seq.take()`, `Seq.take_while()` or a consumer that stops.

        Args:
            value (U): The value to repeat.

        Returns:
            Seq[U]: An infinite `Seq`.

        Example:
        ```python
        >>> import seqchain as sc
        >>> sc.Seq.repeat("a").take(3).collect()
        ['a', 'a', 'a']

        ```
        """
        return Seq._new(partial(itertools.repeat, value), preview=True)

    def _lazy[**P, U](
        self,
        factory: Callable[Concatenate[Iterable[T], P], Iterable[U]],
        *args: P.args,
        **kwargs: P.kwargs,
    ) -> Seq[U]:
        return Seq._new(
            lambda: iter(factory(self, *args, **kwargs)), preview=self._preview
        )

    def collect(self) -> list[T]:
        """Iterate the `Seq` and collect the values into a `list`.

        Returns:
            list[T]: The values, in order.
        """
        return list(self)

    def enumerate(self, start: int = 0) -> Pairs[int, T]:
        """Pair each value with its index.

        Args:
            start (int): Index of the first value. Defaults to 0.

        Returns:
            Pairs[int, T]: Pairs of `(index, value)`.

        Example:
        ```python
        >>> import seqchain as sc
        >>> sc.Seq(["a", "b"]).enumerate(1)
        Pairs((1, 'a'), (2, 'b'))

        ```
        """
        from ._pairs import Pairs

        return Pairs._new(
            lambda: map(Item._make, enumerate(self, start)), preview=self._preview
        )

    def chain(self, *others: Iterable[T]) -> Seq[T]:
        """Yield the values of `Self`, then the values of each of **others**, in order.

        The iteration stops as soon as the consumer stops; the remaining sources are then never iterated.

        Args:
            *others (Iterable[T]): Sources to append.

        Returns:
            Seq[T]: The concatenation of all the sources.

        Example:
        ```python
        >>> import seqchain as sc
        >>> sc.Seq(["alice", "bob"]).chain(["charlie"], ("dave",)).collect()
        ['alice', 'bob', 'charlie', 'dave']

        ```
        """
        sources = (self, *others)
        return Seq._new(
            lambda: cz.itertoolz.concat(sources),
            preview=all(map(can_preview, sources)),
        )

    def filter(self, predicate: Predicate[T]) -> Seq[T]:
        """Yield only the values for which **predicate** is true, preserving their order.

        Args:
            predicate (Predicate[T]): Function deciding whether to keep a value.

        Returns:
            Seq[T]: The kept values.

        Example:
        ```python
        >>> import seqchain as sc
        >>> sc.Seq([1, 2, 3, 4, 5]).filter(lambda x: x % 2 == 1).collect()
        [1, 3, 5]

        ```
        """
        return self._lazy(partial(filter, predicate))

    def map[R](self, func: Callable[[T], R]) -> Seq[R]:
        """Yield **func** applied to each value.

        Args:
            func (Callable[[T], R]): Function to apply to each value.

        Returns:
            Seq[R]: The transformed values.

        Example:
        ```python
        >>> import seqchain as sc
        >>> sc.Seq(["a", "b"]).map(str.upper).collect()
        ['A', 'B']

        ```
        """
        return self._lazy(partial(map, func))

    def filter_map[R](self, func: Callable[[T], tuple[R, bool]]) -> Seq[R]:
        """Filter and map the values in a single pass.

        **func** returns a `(value, keep)` tuple: the new value is yielded only when `keep` is true.

        Args:
            func (Callable[[T], tuple[R, bool]]): Function returning the transformed value and whether to keep it.

        Returns:
            Seq[R]: The kept, transformed values.

        Example:
        ```python
        >>> import seqchain as sc
        >>> sc.Seq(range(1, 7)).filter_map(lambda n: (n * 2, n % 2 == 1)).collect()
        [2, 6, 10]

        ```
        """

        def _filter_map(data: Iterable[T]) -> Iterator[R]:
            for item in data:
                value, keep = func(item)
                if keep:
                    yield value

        return self._lazy(_filter_map)

    def flatten[U](self: Seq[Iterable[U]]) -> Seq[U]:
        """Yield every value of every inner iterable, in order.

        The inner iterables may be one-shot, so `repr()` never previews the result.

        Returns:
            Seq[U]: The flattened values.

        Example:
        ```python
        >>> import seqchain as sc
        >>> sc.Seq([[1, 2], [], [3, 4], [5]]).flatten().collect()
        [1, 2, 3, 4, 5]

        ```
        """
        return Seq._new(lambda: cz.itertoolz.concat(self), preview=False)

    def uniq(self) -> Seq[T]:
        """Yield only the first occurrence of each distinct value.

        The values already seen are remembered for the duration of one iteration,
        so memory grows with the number of distinct values.

        Unhashable values are accepted, at the cost of a linear lookup.

        Returns:
            Seq[T]: The distinct values, in first-seen order.

        Example:
        ```python
        >>> import seqchain as sc
        >>> sc.Seq([1, 2, 2, 3, 1, 4, 3, 5]).uniq().collect()
        [1, 2, 3, 4, 5]

        ```
        """
        return self._lazy(mit.unique_everseen)

    def skip(self, n: int) -> Seq[T]:
        """Drop the first **n** values, then yield the rest.

        Skipping zero values returns `Self` unchanged.

        Args:
            n (int): Number of values to drop.

        Returns:
            Seq[T]: The remaining values.

        Raises:
            ValueError: If **n** is negative.

        Example:
        ```python
        >>> import seqchain as sc
        >>> sc.Seq(range(1, 11)).skip(3).collect()
        [4, 5, 6, 7, 8, 9, 10]

        ```
        """
        check_count(n)
        if n == 0:
            return self
        return self._lazy(partial(cz.itertoolz.drop, n))

    def skip_while(self, predicate: Predicate[T] | None) -> Seq[T]:
        """Drop values while **predicate** is true, then yield every remaining value.

        **predicate** is never called again after it first returns false.

        A `None` predicate drops nothing and returns `Self` unchanged.

        Args:
            predicate (Predicate[T] | None): Function deciding whether to keep dropping.

        Returns:
            Seq[T]: The values from the first one failing **predicate** onwards.

        Example:
        ```python
        >>> import seqchain as sc
        >>> sc.Seq([1, 2, 5, 1, 2]).skip_while(lambda x: x < 3).collect()
        [5, 1, 2]

        ```
        """
        if predicate is None:
            return self
        return self._lazy(partial(itertools.dropwhile, predicate))

    def take(self, n: int) -> Seq[T]:
        """Yield at most the first **n** values.

        Once **n** values are yielded, nothing more is pulled from upstream.

        Taking zero values never iterates `Self`.

        Args:
            n (int): Maximum number of values to yield.

        Returns:
            Seq[T]: The first **n** values.

        Raises:
            ValueError: If **n** is negative.

        Example:
        ```python
        >>> import seqchain as sc
        >>> sc.Seq(range(10)).take(3).collect()
        [0, 1, 2]

        ```
        """
        check_count(n)
        if n == 0:
            return Seq()
        return self._lazy(partial(cz.itertoolz.take, n))

    def take_while(self, predicate: Predicate[T] | None) -> Seq[T]:
        """Yield values while **predicate** is true.

        The first value failing **predicate** is not yielded, and nothing is pulled from upstream after it.

        A `None` predicate yields nothing.
        Note that this is the opposite of `skip_while()`, which yields everything for a `None` predicate.

        Args:
            predicate (Predicate[T] | None): Function deciding whether to keep going.

        Returns:
            Seq[T]: The leading values satisfying **predicate**.

        Example:
        ```python
        >>> import seqchain as sc
        >>> sc.Seq([1, 2, 5, 1, 2]).take_while(lambda x: x < 3).collect()
        [1, 2]
        >>> sc.Seq([1, 2]).take_while(None).collect()
        []

        ```
        """
        if predicate is None:
            return Seq()
        return self._lazy(partial(itertools.takewhile, predicate))
