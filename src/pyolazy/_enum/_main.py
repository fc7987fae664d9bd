from __future__ import annotations

from abc import abstractmethod
from collections.abc import Iterator
from functools import partial
from typing import TYPE_CHECKING

from .._core import get_config
from ._eager import BaseEager
from ._lazy import BaseLazy
from ._process import into_factory

if TYPE_CHECKING:
    from .._types import IntoEnumerator, IteratorFactory


class Enumerable[T](BaseEager[T], BaseLazy[T]):
    """Base trait for re-iterable, lazily evaluated sequences.

    Subclasses only implement `__iter__`, which must return a **fresh** `Iterator` on each call (a generator method does).

    In exchange they get every terminal operation (`reduce`, `collect`, `find`, ...) and every lazy combinator
    (`map`, `filter`, `take`, ...), the latter returning `Enumerator` instances that can be chained indefinitely.

    Enumerables are never mutated by these operations: each one drives its own iteration process,
    so the same instance can be consumed any number of times.

    Example:
    ```python
    >>> import pyolazy as pl
    >>> class Letters(pl.Enumerable[str]):
    ...     def __iter__(self):
    ...         yield "a"
    ...         yield "b"
    ...         yield "c"
    >>>
    >>> letters = Letters()
    >>> letters.map(lambda v, _: v.upper()).collect()
    ['A', 'B', 'C']
    >>> letters.length()
    3

    ```
    """

    __slots__ = ()

    @abstractmethod
    def __iter__(self) -> Iterator[T]:
        """Return a brand-new `Iterator` over the elements."""
        ...


def _producer_name(source: object) -> str:
    match source:
        case partial():
            return _producer_name(source.func).lstrip("_")
        case _ if hasattr(source, "__qualname__"):
            return source.__qualname__  # type: ignore[attr-defined]
        case _:
            return type(source).__name__


class Enumerator[T](Enumerable[T]):
    """A lazy `Enumerable` wrapping a producer of fresh iterators.

    This is the type returned by every combinator, and the way to turn any producer into an `Enumerable`.

    - To wrap a generator function (or any zero-argument callable returning an `Iterator`), pass it directly.
    - To wrap a re-iterable value (a `list`, a `str`, a `range`, another `Enumerable`...), pass it directly too.

    Each `iter()` call asks the producer for a new `Iterator`, so drives are independent and may be interleaved.

    Note:
        Wrapping a one-shot `Iterator` is accepted, but it can only be driven once.

    Args:
        data (IntoEnumerator[T]): The producer to wrap.

    Raises:
        NotEnumerableError: When driven, if **data** is neither iterable nor callable, or if the callable does not return an `Iterator`.

    Example:
    ```python
    >>> import pyolazy as pl
    >>> def words():
    ...     yield "hello"
    ...     yield "world"
    >>>
    >>> e = pl.Enumerator(words)
    >>> e
    Enumerator(words)
    >>> e.collect() == e.collect() == ["hello", "world"]
    True

    ```
    """

    _factory: IteratorFactory[T]
    _source: object

    __slots__ = ("_factory", "_source")

    def __init__(self, data: IntoEnumerator[T]) -> None:
        self._factory = into_factory(data)
        self._source = data

    def __iter__(self) -> Iterator[T]:
        return self._factory()

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({get_config().truncate(_producer_name(self._source))})"
