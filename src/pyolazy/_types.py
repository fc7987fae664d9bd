from __future__ import annotations

from collections.abc import Callable, Iterable, Iterator
from typing import NamedTuple, Protocol

type IteratorFactory[T] = Callable[[], Iterator[T]]
"""A zero-argument callable returning a brand-new `Iterator` on each call, like a generator function."""
type IntoEnumerator[T] = Iterable[T] | IteratorFactory[T]
"""Anything accepted by `Enumerator` and `Enumerable.zip()`."""


class Indexed[T](NamedTuple):
    """Represents an element with its position in a drive.

    See `Enumerable.with_index()` for details.
    """

    value: T
    """The element."""
    idx: int
    """The position of the element, starting at 0."""

    def __repr__(self) -> str:
        return f"({self.value.__repr__()}, {self.idx})"


# typeshed protocols


class SupportsClose(Protocol):
    def close(self) -> object: ...


class SupportsDunderLT[T](Protocol):
    def __lt__(self, other: T, /) -> bool: ...


class SupportsDunderGT[T](Protocol):
    def __gt__(self, other: T, /) -> bool: ...


type SupportsRichComparison[T] = SupportsDunderLT[T] | SupportsDunderGT[T]
