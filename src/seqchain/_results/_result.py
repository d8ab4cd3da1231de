from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Callable
from dataclasses import dataclass
from typing import Never, TypeIs, cast


class ResultUnwrapError(RuntimeError): ...


class Result[T, E](ABC):
    """Outcome of a fallible operation: either `Ok(value)` or `Err(error)`.

    Used by `try_values()` to lift a `(data, error)` pair into a single value.

    Example:
    ```python
    >>> import seqchain as sc
    >>> sc.Ok(3).map(lambda x: x + 1)
    Ok(value=4)
    >>> sc.Err("boom").map(lambda x: x + 1)
    Err(error='boom')

    ```
    """

    __slots__ = ()

    @abstractmethod
    def is_ok(self) -> TypeIs[Ok[T, E]]:  # type: ignore[misc]
        """Returns True if the result is Ok."""
        ...

    @abstractmethod
    def is_err(self) -> TypeIs[Err[T, E]]:  # type: ignore[misc]
        """Returns True if the result is Err."""
        ...

    @abstractmethod
    def unwrap(self) -> T:
        """Returns the contained Ok value, or raises ResultUnwrapError if the result is Err."""
        ...

    @abstractmethod
    def unwrap_err(self) -> E:
        """Returns the contained Err value, or raises ResultUnwrapError if the result is Ok."""
        ...

    def expect(self, msg: str) -> T:
        """Returns the contained Ok value, or raises ResultUnwrapError with a custom message if the result is Err.

        Args:
            msg (str): The message to display if the result is Err.

        Returns:
            T: The contained Ok value.

        Raises:
            ResultUnwrapError: If the result is Err, with the provided message and error.
        """
        if self.is_ok():
            return self.unwrap()
        raise ResultUnwrapError(f"{msg}: {self.unwrap_err()}")

    def unwrap_or(self, default: T) -> T:
        """Returns the contained Ok value or a provided default."""
        return self.unwrap() if self.is_ok() else default

    def unwrap_or_else(self, f: Callable[[E], T]) -> T:
        """Returns the contained Ok value or computes it from the error with **f**."""
        return self.unwrap() if self.is_ok() else f(self.unwrap_err())

    def map[U](self, f: Callable[[T], U]) -> Result[U, E]:
        """Maps a Result[T, E] to Result[U, E] by applying **f** to a contained Ok value, leaving Err untouched.

        Args:
            f (Callable[[T], U]): Callable to apply to the Ok value.

        Returns:
            Result[U, E]: Ok(f(value)) if Ok, otherwise Err(error).
        """
        if self.is_ok():
            return Ok(f(self.unwrap()))
        return cast(Result[U, E], self)

    def map_err[F](self, f: Callable[[E], F]) -> Result[T, F]:
        """Maps a Result[T, E] to Result[T, F] by applying **f** to a contained Err value, leaving Ok untouched."""
        if self.is_err():
            return Err(f(self.unwrap_err()))
        return cast(Result[T, F], self)

    def and_then[U](self, f: Callable[[T], Result[U, E]]) -> Result[U, E]:
        """Calls **f** with the Ok value, otherwise returns Err unchanged."""
        if self.is_ok():
            return f(self.unwrap())
        return cast(Result[U, E], self)

    def map_or_else[U](self, ok: Callable[[T], U], err: Callable[[E], U]) -> U:
        """Calls **ok** with the value if Ok, or **err** with the error if Err.

        Args:
            ok (Callable[[T], U]): Callable to handle the Ok value.
            err (Callable[[E], U]): Callable to handle the Err value.

        Returns:
            U: The result of the called function.

        Example:
        ```python
        >>> import seqchain as sc
        >>> def fetch() -> tuple[list[str], Exception | None]:
        ...     return ["apple", "banana"], None
        >>> sc.try_values(*fetch()).map_or_else(lambda s: s.collect(), str)
        ['apple', 'banana']

        ```
        """
        match self.is_ok():
            case True:
                return ok(self.unwrap())
            case False:
                return err(self.unwrap_err())


@dataclass(slots=True)
class Ok[T, E](Result[T, E]):
    """Represents a successful value."""

    value: T

    def is_ok(self) -> TypeIs[Ok[T, E]]:  # type: ignore[misc]
        return True

    def is_err(self) -> TypeIs[Err[T, E]]:  # type: ignore[misc]
        return False

    def unwrap(self) -> T:
        return self.value

    def unwrap_err(self) -> Never:
        raise ResultUnwrapError("called `unwrap_err` on Ok")


@dataclass(slots=True)
class Err[T, E](Result[T, E]):
    """Represents an error value."""

    error: E

    def is_ok(self) -> TypeIs[Ok[T, E]]:  # type: ignore[misc]
        return False

    def is_err(self) -> TypeIs[Err[T, E]]:  # type: ignore[misc]
        return True

    def unwrap(self) -> Never:
        raise ResultUnwrapError(f"called `unwrap` on Err: {self.error!r}")

    def unwrap_err(self) -> E:
        return self.error
