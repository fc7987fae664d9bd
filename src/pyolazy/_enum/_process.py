"""Primitive iteration-process protocol.

An iteration process is a plain `Iterator`. When it also exposes `close()` (generators do), that method is the early-release primitive,
and every helper here makes sure it runs once the process is abandoned.
"""

from __future__ import annotations

import inspect
from collections.abc import Iterable, Iterator
from contextlib import contextmanager
from types import GeneratorType
from typing import TYPE_CHECKING, Any, TypeIs

from .._core import NotEnumerableError, get_config, logger
from .._types import SupportsClose

if TYPE_CHECKING:
    from .._types import IntoEnumerator, IteratorFactory

_ATOMS = (str, bytes, bytearray)


def _supports_close(value: object) -> TypeIs[SupportsClose]:
    return callable(getattr(value, "close", None))


def _finished(process: object) -> bool:
    return (
        isinstance(process, GeneratorType)
        and inspect.getgeneratorstate(process) == inspect.GEN_CLOSED
    )


def _describe(value: object) -> str:
    return getattr(value, "__qualname__", type(value).__qualname__)


def _not_enumerable(value: object) -> IteratorFactory[Any]:
    def _raise() -> Iterator[Any]:
        msg = (
            f"{type(value).__name__!r} object is not enumerable: expected an Iterable "
            "or a zero-argument callable returning an Iterator"
        )
        logger.debug(msg)
        raise NotEnumerableError(msg)

    return _raise


def _checked[T](factory: IteratorFactory[T]) -> IteratorFactory[T]:
    def _call() -> Iterator[T]:
        process = factory()
        if not isinstance(process, Iterator):
            msg = (
                f"iterator factory {_describe(factory)!r} returned "
                f"{type(process).__name__!r}, not an Iterator"
            )
            logger.debug(msg)
            raise NotEnumerableError(msg)
        return process

    return _call


def into_factory[T](data: IntoEnumerator[T]) -> IteratorFactory[T]:
    """Convert **data** into a zero-argument factory of fresh iterators.

    Iterables are checked first, so a callable which is also iterable is iterated, not called.

    Invalid values are not rejected here: the returned factory raises `NotEnumerableError` when first invoked.

    Args:
        data (IntoEnumerator[T]): A re-iterable value, or a zero-argument callable returning an `Iterator`.

    Returns:
        IteratorFactory[T]: The factory.
    """
    match data:
        case Iterable():
            return data.__iter__
        case _ if callable(data):
            return _checked(data)
        case _:
            return _not_enumerable(data)


def is_container(value: object) -> bool:
    """Check whether **value** should be recursed into by `Enumerable.flatten()`.

    Text (`str`, `bytes`, `bytearray`) is atomic, and so is anything that is not iterable.

    Example:
    ```python
    >>> from decimal import Decimal
    >>> from pyolazy._enum._process import is_container
    >>> is_container([1, 2]), is_container(range(3))
    (True, True)
    >>> is_container("abc"), is_container(None), is_container(10**40), is_container(Decimal("1.5"))
    (False, False, False, False)

    ```
    """
    return isinstance(value, Iterable) and not isinstance(value, _ATOMS)


def release(process: Iterator[Any]) -> None:
    """Invoke the early-release primitive of **process**, if it has one.

    Only releases of a process that may still hold resources are traced: an exhausted generator is closed silently.
    """
    if _supports_close(process):
        if get_config().trace_drives and not _finished(process):
            logger.debug("releasing %s", _describe(process))
        process.close()


@contextmanager
def releasing[T](process: Iterator[T]) -> Iterator[Iterator[T]]:
    """Context manager guaranteeing `release()` of **process** on every exit path.

    Releasing an exhausted generator is a no-op, so this is used for natural exhaustion as well.
    """
    try:
        yield process
    finally:
        release(process)


@contextmanager
def drive[T](source: Iterable[T]) -> Iterator[Iterator[T]]:
    """Open a fresh iteration process over **source**, released on exit.

    Example:
    ```python
    >>> import pyolazy as pl
    >>> from pyolazy._enum._process import drive
    >>> with drive(pl.Range(3)) as process:
    ...     next(process)
    0

    ```
    """
    process = iter(source)
    if get_config().trace_drives:
        logger.debug("driving %s", _describe(source))
    with releasing(process):
        yield process
