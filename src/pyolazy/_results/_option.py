from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any, Never, TypeIs


class OptionUnwrapError(RuntimeError): ...


class Option[T](ABC):
    """A value that may be absent.

    Used wherever an `Enumerable` needs to tell "no value" apart from a value that happens to be `None`:
    results of `reduce`, `max`, `min`, `find`, and the optional **seed** of `reduce`.
    """

    __slots__ = ()

    @staticmethod
    def from_[U](value: U | None) -> Option[U]:
        """Wrap **value** in `Some`, or return `NONE` if it is `None`.

        Args:
            value (U | None): The value to wrap.

        Returns:
            Option[U]: `Some(value)` or `NONE`.

        Example:
        ```python
        >>> import pyolazy as pl
        >>> pl.Option.from_(2)
        Some(2)
        >>> pl.Option.from_(None)
        NONE

        ```
        """
        return NONE if value is None else Some(value)

    @abstractmethod
    def is_some(self) -> TypeIs[Some[T]]:  # type: ignore[misc]
        """Returns `True` if the option is a `Some` value."""
        ...

    @abstractmethod
    def is_none(self) -> TypeIs[NoneOption]:  # type: ignore[misc]
        """Returns `True` if the option is the `NONE` value."""
        ...

    @abstractmethod
    def unwrap(self) -> T:
        """Returns the contained `Some` value.

        Returns:
            T: The contained value.

        Raises:
            OptionUnwrapError: If the option is `NONE`.

        Example:
        ```python
        >>> import pyolazy as pl
        >>> pl.Some("car").unwrap()
        'car'
        >>> pl.NONE.unwrap()
        Traceback (most recent call last):
            ...
        pyolazy._results._option.OptionUnwrapError: called `unwrap` on a `None`

        ```
        """
        ...

    def expect(self, msg: str) -> T:
        """Returns the contained `Some` value, or raises with **msg** if the value is `NONE`.

        Args:
            msg (str): The message to include in the exception.

        Returns:
            T: The contained value.

        Raises:
            OptionUnwrapError: If the option is `NONE`.
        """
        if self.is_some():
            return self.unwrap()
        msg = f"{msg} (called `expect` on a `None`)"
        raise OptionUnwrapError(msg)

    def unwrap_or(self, default: T) -> T:
        """Returns the contained `Some` value or a provided **default**.

        Example:
        ```python
        >>> import pyolazy as pl
        >>> pl.Range(0).max().unwrap_or(-1)
        -1

        ```
        """
        return self.unwrap() if self.is_some() else default

    def unwrap_or_else(self, f: Callable[[], T]) -> T:
        """Returns the contained `Some` value or computes it from **f**."""
        return self.unwrap() if self.is_some() else f()

    def map[U](self, f: Callable[[T], U]) -> Option[U]:
        """Maps an `Option[T]` to `Option[U]` by applying **f** to a contained value, leaving `NONE` untouched.

        Example:
        ```python
        >>> import pyolazy as pl
        >>> pl.Some("Hello, World!").map(len)
        Some(13)
        >>> pl.NONE.map(len)
        NONE

        ```
        """
        if self.is_some():
            return Some(f(self.unwrap()))
        return NONE


@dataclass(slots=True, frozen=True)
class Some[T](Option[T]):
    """Option variant representing the presence of a value.

    `Some(None)` is a present value, distinct from `NONE`.

    Args:
        value (T): The contained value.
    """

    value: T

    def __repr__(self) -> str:
        return f"Some({self.value!r})"

    def is_some(self) -> TypeIs[Some[T]]:  # type: ignore[misc]
        return True

    def is_none(self) -> TypeIs[NoneOption]:  # type: ignore[misc]
        return False

    def unwrap(self) -> T:
        return self.value


@dataclass(slots=True, frozen=True)
class NoneOption(Option[Any]):
    """Option variant representing the absence of a value."""

    def __repr__(self) -> str:
        return "NONE"

    def is_some(self) -> TypeIs[Some[Any]]:  # type: ignore[misc]
        return False

    def is_none(self) -> TypeIs[NoneOption]:  # type: ignore[misc]
        return True

    def unwrap(self) -> Never:
        raise OptionUnwrapError("called `unwrap` on a `None`")


NONE: Option[Any] = NoneOption()
"""Singleton instance representing the absence of a value."""
