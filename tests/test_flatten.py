"""Tests for `Enumerable.flatten()`."""

import enum
from collections.abc import Iterator
from decimal import Decimal
from fractions import Fraction

import pyolazy as pl
from tests._producers import Spy, TrackedSource


class Color(enum.Enum):
    RED = 1


class Token:
    """An opaque, non-iterable value."""


def _nested(spy: Spy) -> pl.Enumerator[object]:
    """Build `['a', ['b', [], ['c', 'd', 'e'], ['f'], ['g']]]` out of generator functions."""

    def _gen(*values: object):
        def _factory() -> Iterator[object]:
            yield from values

        return pl.Enumerator(_factory)

    def _root() -> Iterator[object]:
        spy()
        yield "a"
        yield _gen("b", _gen(), _gen("c", "d", "e"), _gen("f"), _gen("g"))

    return pl.Enumerator(_root)


def test_flatten_is_lazy() -> None:
    """Test flatten does not drive the source until driven itself."""
    spy = Spy()
    flat = _nested(spy).flatten()
    assert isinstance(flat, pl.Enumerator)
    assert not spy.called


def test_flatten_cannot_exhaust_source() -> None:
    """Test flatten can be driven repeatedly."""
    spy = Spy()
    flat = _nested(spy).flatten()
    assert flat.collect() == flat.collect()
    assert flat.collect() != []
    assert spy.calls == 3


def test_flatten_depth_first() -> None:
    """Test flatten iterates recursively through each element."""
    assert _nested(Spy()).flatten().collect() == ["a", "b", "c", "d", "e", "f", "g"]


def test_flatten_builtin_containers() -> None:
    """Test flatten recurses into lists, tuples, ranges and generators."""
    data = [1, (2, [3, range(4, 6)]), [], iter([6, [7]])]
    assert pl.Enumerator(data).flatten().collect() == [1, 2, 3, 4, 5, 6, 7]


def test_flatten_keeps_text_atomic() -> None:
    """Test strings and bytes are yielded whole, not split into characters."""
    data = ["ab", [b"cd", ["ef", bytearray(b"g")]]]
    assert pl.Enumerator(data).flatten().collect() == ["ab", b"cd", "ef", bytearray(b"g")]


def test_flatten_scalars() -> None:
    """Test None, booleans and numbers are yielded as-is."""
    data = [None, [True, [1, 2.5, 3j]]]
    assert pl.Enumerator(data).flatten().collect() == [None, True, 1, 2.5, 3j]


def test_flatten_exotic_atoms() -> None:
    """Test atomic values outside of text, booleans and numbers are not iterated.

    A classification on coarse type names would try to iterate those, and fail.
    """
    token = Token()
    data = [10**40, [Decimal("1.5"), Fraction(1, 3)], [Color.RED, [token]]]
    assert pl.Enumerator(data).flatten().collect() == [
        10**40,
        Decimal("1.5"),
        Fraction(1, 3),
        Color.RED,
        token,
    ]


def test_flatten_releases_nested_processes() -> None:
    """Test stopping early releases both the outer and the nested processes."""
    inner = TrackedSource("xyz")
    outer = TrackedSource(["a", inner, "b"])
    assert outer.flatten().take(2).collect() == ["a", "x"]
    assert inner.last.closed == 1
    assert outer.last.closed == 1
