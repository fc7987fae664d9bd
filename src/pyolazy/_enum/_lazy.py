from __future__ import annotations

from collections.abc import Callable, Iterable, Iterator
from functools import partial
from typing import TYPE_CHECKING, Any, Concatenate

from .._core import Pipeable
from .._types import Indexed
from ._process import drive, into_factory, is_container, releasing

if TYPE_CHECKING:
    from .._types import IntoEnumerator, IteratorFactory
    from ._main import Enumerator


def _map[T, R](source: Iterable[T], func: Callable[[T, int], R]) -> Iterator[R]:
    with drive(source) as process:
        for idx, value in enumerate(process):
            yield func(value, idx)


def _filter[T](source: Iterable[T], predicate: Callable[[T, int], bool]) -> Iterator[T]:
    with drive(source) as process:
        for idx, value in enumerate(process):
            if predicate(value, idx):
                yield value


def _with_index[T](source: Iterable[T]) -> Iterator[Indexed[T]]:
    with drive(source) as process:
        for idx, value in enumerate(process):
            yield Indexed(value, idx)


def _zip[T, U](source: Iterable[T], other: IteratorFactory[U]) -> Iterator[tuple[T, U]]:
    with drive(source) as process, releasing(other()) as other_process:
        # `other` is pulled first, so its exhaustion never forces an element out of `source`
        for other_value, value in zip(other_process, process):
            yield value, other_value


def _take[T](source: Iterable[T], n: float) -> Iterator[T]:
    if n <= 0:
        return
    with drive(source) as process:
        for count, value in enumerate(process, 1):
            if count >= n:
                break
            yield value
        else:
            return
    # released before the n-th element is handed out
    yield value


def _drop[T](source: Iterable[T], n: float) -> Iterator[T]:
    with drive(source) as process:
        for idx, value in enumerate(process):
            if idx >= n:
                yield value


def _flatten(source: Iterable[Any]) -> Iterator[Any]:
    from ._main import Enumerator

    with drive(source) as process:
        for value in process:
            if is_container(value):
                yield from Enumerator(value).flatten()
            else:
                yield value


class BaseLazy[T](Pipeable, Iterable[T]):
    """Lazy combinators of an `Enumerable`.

    Each method returns a new `Enumerator` and does not drive `self`.

    Every drive of the returned `Enumerator` drives `self` again from the beginning, and releasing it releases `self`'s process too.
    """

    __slots__ = ()

    def _lazy[**P, U](
        self,
        factory: Callable[Concatenate[Iterable[T], P], Iterator[U]],
        *args: P.args,
        **kwargs: P.kwargs,
    ) -> Enumerator[U]:
        from ._main import Enumerator

        return Enumerator(partial(factory, self, *args, **kwargs))

    def map[R](self, func: Callable[[T, int], R]) -> Enumerator[R]:
        """Transform each element with `func(element, position)`.

        Args:
            func (Callable[[T, int], R]): Function to apply to each element and its position.

        Returns:
            Enumerator[R]: An `Enumerator` of transformed elements.

        Example:
        ```python
        >>> import pyolazy as pl
        >>> pl.Enumerator("abc").map(lambda v, _: v + v).collect()
        ['aa', 'bb', 'cc']
        >>> pl.Enumerator("abc").map(lambda v, idx: f"{idx}:{v}").collect()
        ['0:a', '1:b', '2:c']

        ```
        """
        return self._lazy(_map, func)

    def filter(self, predicate: Callable[[T, int], bool]) -> Enumerator[T]:
        """Keep the elements for which `predicate(element, position)` holds.

        The position given to **predicate** is the one in `self`, not in the filtered output.

        Args:
            predicate (Callable[[T, int], bool]): Function to evaluate each element.

        Returns:
            Enumerator[T]: An `Enumerator` of the selected elements, in order.

        Example:
        ```python
        >>> import pyolazy as pl
        >>> pl.Enumerator("abc").filter(lambda v, _: v in "bc").collect()
        ['b', 'c']
        >>> pl.Enumerator("abcd").filter(lambda _, idx: idx % 2 == 0).collect()
        ['a', 'c']

        ```
        """
        return self._lazy(_filter, predicate)

    def with_index(self) -> Enumerator[Indexed[T]]:
        """Pair each element with its position.

        Returns:
            Enumerator[Indexed[T]]: An `Enumerator` of `Indexed(value, idx)` named tuples.

        Example:
        ```python
        >>> import pyolazy as pl
        >>> pl.Enumerator("ab").with_index().collect()
        [('a', 0), ('b', 1)]

        ```
        """
        return self._lazy(_with_index)

    def zip[U](self, other: IntoEnumerator[U]) -> Enumerator[tuple[T, U]]:
        """Pair the elements of `self` with the elements of **other**.

        Stops as soon as either side runs out. Both iteration processes are released when pairing stops.

        **other** is pulled before `self` on each step: when **other** is the shorter side, no extra element of `self` is requested,
        but when `self` is the shorter side, **other** is asked for one element past the last pair.

        Args:
            other (IntoEnumerator[U]): A re-iterable value, or a zero-argument callable returning a fresh `Iterator`.

        Returns:
            Enumerator[tuple[T, U]]: An `Enumerator` of `(element, other_element)` tuples.

        Raises:
            NotEnumerableError: When the result is driven, if **other** is neither iterable nor callable.

        Example:
        ```python
        >>> import pyolazy as pl
        >>> pl.Enumerator("abcde").zip([0, 1]).collect()
        [('a', 0), ('b', 1)]
        >>> pl.Range(3).zip(lambda: iter("xyz")).collect()
        [(0, 'x'), (1, 'y'), (2, 'z')]

        ```
        """
        return self._lazy(_zip, into_factory(other))

    def take(self, n: float) -> Enumerator[T]:
        """Yield at most the first **n** elements.

        The element after the n-th is never requested, and `self`'s process is released as soon as the bound is reached.

        Args:
            n (float): Maximum number of elements. `math.inf` means unbounded, `0` yields nothing without driving `self`.

        Returns:
            Enumerator[T]: An `Enumerator` of the first **n** elements.

        Example:
        ```python
        >>> import math
        >>> import pyolazy as pl
        >>> pl.Range(math.inf).take(3).collect()
        [0, 1, 2]
        >>> pl.Enumerator("abc").take(math.inf).collect()
        ['a', 'b', 'c']
        >>> pl.Enumerator("abc").take(0).collect()
        []

        ```
        """
        return self._lazy(_take, n)

    def drop(self, n: float) -> Enumerator[T]:
        """Skip the first **n** elements and yield the rest.

        Args:
            n (float): Number of elements to skip. If greater than the number of elements, nothing is yielded.

        Returns:
            Enumerator[T]: An `Enumerator` of the elements from position **n** onward.

        Example:
        ```python
        >>> import pyolazy as pl
        >>> pl.Enumerator("abc").drop(1).collect()
        ['b', 'c']
        >>> pl.Enumerator("abc").drop(5).collect()
        []

        ```
        """
        return self._lazy(_drop, n)

    def flatten(self) -> Enumerator[Any]:
        """Recursively flatten nested iterables, depth-first.

        Text (`str`, `bytes`, `bytearray`) and non-iterable values are yielded as-is, anything else iterable is recursed into.

        Returns:
            Enumerator[Any]: An `Enumerator` of the scalar leaves, in production order.

        Example:
        ```python
        >>> import pyolazy as pl
        >>> pl.Enumerator(["a", ["b", [], ["c", "d"], ("e",)], None]).flatten().collect()
        ['a', 'b', 'c', 'd', 'e', None]

        ```
        """
        return self._lazy(_flatten)
