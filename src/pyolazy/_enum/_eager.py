from __future__ import annotations

from collections.abc import Callable, Iterable
from typing import TYPE_CHECKING, Any, overload

import cytoolz as cz
import more_itertools as mit

from .._core import Pipeable
from .._results import NONE, Option, Some
from ._process import drive

if TYPE_CHECKING:
    from .._types import SupportsRichComparison


def _max[T](acc: T, value: T, _idx: int) -> T:
    return value if value > acc else acc  # type: ignore[operator]


def _min[T](acc: T, value: T, _idx: int) -> T:
    return value if value < acc else acc  # type: ignore[operator]


class BaseEager[T](Pipeable, Iterable[T]):
    """Terminal operations of an `Enumerable`.

    Each method drives exactly one fresh iteration process and releases it before returning, whether it ran to exhaustion,
    stopped early, or failed.
    """

    __slots__ = ()

    def __contains__(self, value: object) -> bool:
        return self.includes(value)

    @overload
    def reduce(self, func: Callable[[T, T, int], T]) -> Option[T]: ...
    @overload
    def reduce[U](self, func: Callable[[U, T, int], U], seed: Option[U]) -> Option[U]: ...
    def reduce[U](
        self, func: Callable[[Any, T, int], Any], seed: Option[U] = NONE
    ) -> Option[Any]:
        """Fold the elements into a single value, from left to right.

        **func** is called as `func(accumulator, element, position)`.

        - If **seed** is `Some(x)`, `x` is the initial accumulator and every element is folded, starting at position 0.
        - If **seed** is omitted (or `NONE`), the first element is the initial accumulator and folding starts at position 1.

        `Some(None)` is a valid explicit seed, distinct from omitting it.

        Args:
            func (Callable[[U, T, int], U]): Function combining the accumulator with an element and its position.
            seed (Option[U]): Optional initial accumulator.

        Returns:
            Option[U]: The final accumulator, or `NONE` if the `Enumerable` is empty and no **seed** was given.

        Raises:
            TypeError: If **seed** is not an `Option`.

        Example:
        ```python
        >>> import pyolazy as pl
        >>> pl.Range(1, 5).reduce(lambda acc, v, _: acc + v)
        Some(10)
        >>> pl.Range(1, 5).reduce(lambda acc, v, _: acc + v, pl.Some(100))
        Some(110)
        >>> pl.Range(0).reduce(lambda acc, v, _: acc + v)
        NONE
        >>> pl.Range(0).reduce(lambda acc, v, _: acc + v, pl.Some(None))
        Some(None)

        ```
        """
        if not isinstance(seed, Option):
            msg = f"seed must be an Option (Some(value) or NONE), got {type(seed).__name__!r}"
            raise TypeError(msg)
        with drive(self) as process:
            indexed = enumerate(process)
            if seed.is_some():
                acc = seed.unwrap()
            else:
                first = next(indexed, None)
                if first is None:
                    return NONE
                acc = first[1]
            for idx, value in indexed:
                acc = func(acc, value, idx)
        return Some(acc)

    def collect(self) -> list[T]:
        """Materialize every element, in production order, into a new `list`.

        Returns:
            list[T]: A freshly allocated list.

        Example:
        ```python
        >>> import pyolazy as pl
        >>> pl.Enumerator("abc").collect()
        ['a', 'b', 'c']

        ```
        """
        with drive(self) as process:
            return list(process)

    def length(self) -> int:
        """Count the produced elements.

        Like the builtin `len()` function, but drives the `Enumerable` to count.

        Example:
        ```python
        >>> import pyolazy as pl
        >>> pl.Range(5).length()
        5
        >>> pl.Range(5, 0).length()
        0

        ```
        """
        with drive(self) as process:
            return cz.itertoolz.count(process)

    def max[U: SupportsRichComparison[Any]](self: BaseEager[U]) -> Option[U]:
        """Return the maximum element, or `NONE` if the `Enumerable` is empty.

        The elements must support comparison operations. If several elements are tied, the first one is returned.

        Example:
        ```python
        >>> import pyolazy as pl
        >>> pl.Enumerator([3, 7, 2]).max()
        Some(7)

        ```
        """
        return self.reduce(_max)

    def min[U: SupportsRichComparison[Any]](self: BaseEager[U]) -> Option[U]:
        """Return the minimum element, or `NONE` if the `Enumerable` is empty.

        The elements must support comparison operations. If several elements are tied, the first one is returned.

        Example:
        ```python
        >>> import pyolazy as pl
        >>> pl.Enumerator([3, 7, 2]).min()
        Some(2)
        >>> pl.Enumerator([]).min()
        NONE

        ```
        """
        return self.reduce(_min)

    def find(self, predicate: Callable[[T, int], bool]) -> Option[T]:
        """Search for the first element satisfying **predicate**.

        **predicate** is called as `predicate(element, position)`. The drive stops as soon as it holds.

        Args:
            predicate (Callable[[T, int], bool]): Function to evaluate each element.

        Returns:
            Option[T]: `Some(element)` if found, `NONE` otherwise.

        Example:
        ```python
        >>> import pyolazy as pl
        >>> pl.Range(10).find(lambda v, _: v > 5)
        Some(6)
        >>> pl.Range(10).find(lambda v, _: v > 9).unwrap_or("missing")
        'missing'

        ```
        """
        with drive(self) as process:
            for idx, value in enumerate(process):
                if predicate(value, idx):
                    return Some(value)
        return NONE

    def index_of(self, value: object) -> int:
        """Return the position of the first element equal to **value**, or -1.

        Stops at the first match.

        Example:
        ```python
        >>> import pyolazy as pl
        >>> pl.Enumerator("abcb").index_of("b")
        1
        >>> pl.Enumerator("abcb").index_of("z")
        -1

        ```
        """
        with drive(self) as process:
            return mit.first(mit.locate(process, lambda v: v == value), -1)

    def last_index_of(self, value: object) -> int:
        """Return the position of the last element equal to **value**, or -1.

        This always drives the whole `Enumerable`.

        Example:
        ```python
        >>> import pyolazy as pl
        >>> pl.Enumerator("abcb").last_index_of("b")
        3

        ```
        """
        with drive(self) as process:
            return mit.last(mit.locate(process, lambda v: v == value), -1)

    def includes(self, value: object) -> bool:
        """Check whether any element equals **value**, stopping at the first match.

        `value in enumerable` is equivalent.

        Example:
        ```python
        >>> import pyolazy as pl
        >>> pl.Range(0, 10, 3).includes(9)
        True
        >>> 10 in pl.Range(0, 10, 3)
        False

        ```
        """
        return self.index_of(value) != -1

    def any(self, predicate: Callable[[T, int], bool]) -> bool:
        """Check whether any element satisfies `predicate(element, position)`.

        Stops right after the first passing element. An empty `Enumerable` returns `False`.

        Example:
        ```python
        >>> import pyolazy as pl
        >>> pl.Enumerator([1, 3, 4]).any(lambda v, _: v % 2 == 0)
        True
        >>> pl.Enumerator([]).any(lambda v, _: True)
        False

        ```
        """
        with drive(self) as process:
            return any(predicate(value, idx) for idx, value in enumerate(process))

    def every(self, predicate: Callable[[T, int], bool]) -> bool:
        """Check whether every element satisfies `predicate(element, position)`.

        Stops right after the first failing element. An empty `Enumerable` returns `True`.

        Example:
        ```python
        >>> import pyolazy as pl
        >>> pl.Enumerator([2, 4, 6]).every(lambda v, _: v % 2 == 0)
        True
        >>> pl.Enumerator([]).every(lambda v, _: False)
        True

        ```
        """
        with drive(self) as process:
            return all(predicate(value, idx) for idx, value in enumerate(process))
