from __future__ import annotations

import itertools
from collections.abc import Iterator
from dataclasses import dataclass
from typing import overload

from ._enum import Enumerable

type Number = int | float


@dataclass(slots=True, frozen=True, init=False)
class Range(Enumerable[Number]):
    """An immutable arithmetic progression, like the builtin `range`, but as an `Enumerable`.

    Accepts `Range(stop)`, `Range(start, stop)` or `Range(start, stop, step)`, with `start` defaulting to 0 and `step` to 1.

    - A positive **step** counts up while the value is lower than **stop**.
    - A negative **step** counts down while the value is greater than **stop**.
    - A **step** of 0 is empty.

    Floats are accepted, and `math.inf` as **stop** gives an infinite `Enumerable`.

    Raises:
        TypeError: If called with no argument or more than three.

    Example:
    ```python
    >>> import pyolazy as pl
    >>> pl.Range(5).collect()
    [0, 1, 2, 3, 4]
    >>> pl.Range(5, 0, -1).collect()
    [5, 4, 3, 2, 1]
    >>> pl.Range(0, 1, 0.25).collect()
    [0, 0.25, 0.5, 0.75]
    >>> pl.Range(0, 5, 0).collect()
    []

    ```
    """

    start: Number
    stop: Number
    step: Number

    @overload
    def __init__(self, stop: Number, /) -> None: ...
    @overload
    def __init__(self, start: Number, stop: Number, /) -> None: ...
    @overload
    def __init__(self, start: Number, stop: Number, step: Number, /) -> None: ...
    def __init__(self, *args: Number) -> None:
        match args:
            case (stop,):
                start, step = 0, 1
            case (start, stop):
                step = 1
            case (start, stop, step):
                pass
            case _:
                msg = f"Range expected 1 to 3 arguments, got {len(args)}"
                raise TypeError(msg)
        object.__setattr__(self, "start", start)
        object.__setattr__(self, "stop", stop)
        object.__setattr__(self, "step", step)

    def __iter__(self) -> Iterator[Number]:
        stop = self.stop
        match self.step:
            case 0:
                return iter(())
            case step if step > 0:
                return itertools.takewhile(
                    lambda v: v < stop, itertools.count(self.start, step)
                )
            case step:
                return itertools.takewhile(
                    lambda v: v > stop, itertools.count(self.start, step)
                )
