"""Tests for the terminal operations of `Enumerable`."""

from collections.abc import Iterator

import pytest

import pyolazy as pl
from tests._producers import Spy, TrackedSource


def _empty() -> Iterator[str]:
    yield from ()


def test_collect() -> None:
    """Test collect materializes every element in order."""
    assert pl.Enumerator(_empty).collect() == []
    assert pl.Enumerator("abc").collect() == ["a", "b", "c"]


def test_collect_returns_fresh_list() -> None:
    """Test each collect allocates a new list."""
    e = pl.Enumerator([1, 2])
    first = e.collect()
    first.append(3)
    assert e.collect() == [1, 2]


def test_length() -> None:
    """Test length counts the elements."""
    assert pl.Enumerator(_empty).length() == 0
    assert pl.Enumerator("abc").length() == 3


def test_max_min() -> None:
    """Test max and min over numbers."""
    e = pl.Enumerator([3, -1, 7, 2])
    assert e.max() == pl.Some(7)
    assert e.min() == pl.Some(-1)


def test_max_min_empty() -> None:
    """Test max and min of an empty Enumerable are NONE."""
    assert pl.Enumerator([]).max().is_none()
    assert pl.Enumerator([]).min().is_none()


def test_max_incomparable_elements() -> None:
    """Test max propagates the comparison error of incomparable elements."""
    with pytest.raises(TypeError):
        pl.Enumerator([1, "a"]).max()


class TestReduce:
    """Tests for `Enumerable.reduce()`."""

    def test_reduce_without_seed(self) -> None:
        """Test the first element is the initial accumulator."""
        assert pl.Range(1, 5).reduce(lambda acc, v, _: acc * v) == pl.Some(24)

    def test_reduce_with_seed(self) -> None:
        """Test an explicit seed is the initial accumulator."""
        assert pl.Range(1, 5).reduce(lambda acc, v, _: acc * v, pl.Some(10)) == pl.Some(240)

    def test_reduce_empty_without_seed(self) -> None:
        """Test an empty Enumerable without seed gives NONE, without calling func."""
        calls = Spy()

        def _func(acc: str, _value: str, _idx: int) -> str:
            calls()
            return acc

        assert pl.Enumerator(_empty).reduce(_func) is pl.NONE
        assert not calls.called

    def test_reduce_empty_with_none_seed(self) -> None:
        """Test `Some(None)` is an explicit seed, distinct from an omitted one."""
        assert pl.Enumerator(_empty).reduce(lambda acc, v, _: v, pl.Some(None)) == pl.Some(None)

    def test_reduce_single_element_without_seed(self) -> None:
        """Test a single element is returned as-is, without calling func."""
        assert pl.Enumerator(["x"]).reduce(lambda acc, v, _: acc + v) == pl.Some("x")

    def test_reduce_positions(self) -> None:
        """Test seedless and seeded folds only differ by the positions received."""
        unseeded: list[int] = []
        seeded: list[int] = []

        def _record(positions: list[int]):
            def _merge(acc: dict[str, int], value: str, idx: int) -> dict[str, int]:
                positions.append(idx)
                return {**acc, value: idx}

            return _merge

        letters = list("abcde")
        without_seed = pl.Enumerator([{}, *letters]).reduce(_record(unseeded))
        with_seed = pl.Enumerator(letters).reduce(_record(seeded), pl.Some({}))

        assert unseeded == [1, 2, 3, 4, 5]
        assert seeded == [0, 1, 2, 3, 4]
        assert without_seed.unwrap() == {"a": 1, "b": 2, "c": 3, "d": 4, "e": 5}
        assert with_seed.unwrap() == {"a": 0, "b": 1, "c": 2, "d": 3, "e": 4}

    def test_reduce_rejects_raw_seed(self) -> None:
        """Test a seed not wrapped in an Option is rejected."""
        with pytest.raises(TypeError, match="seed must be an Option"):
            pl.Range(3).reduce(lambda acc, v, _: acc + v, 0)  # type: ignore[arg-type]

    def test_reduce_releases_on_error(self) -> None:
        """Test a failing func still releases the process."""
        source = TrackedSource([1, 2, 3])
        with pytest.raises(ZeroDivisionError):
            source.reduce(lambda acc, v, _: acc / 0)
        assert source.last.closed == 1


class TestSearch:
    """Tests for `find`, `index_of`, `last_index_of` and `includes`."""

    def test_find(self) -> None:
        """Test find returns the first match."""
        e = pl.Enumerator("abcb")
        assert e.find(lambda v, _: v == "b") == pl.Some("b")
        assert e.find(lambda _, idx: idx == 2) == pl.Some("c")
        assert e.find(lambda v, _: v == "z") is pl.NONE

    def test_find_none_element(self) -> None:
        """Test a matching `None` element is found, not reported missing."""
        assert pl.Enumerator([1, None]).find(lambda v, _: v is None) == pl.Some(None)

    def test_find_stops_and_releases(self) -> None:
        """Test find stops at the match and releases the process."""
        source = TrackedSource("abcde")
        source.find(lambda v, _: v == "b")
        assert source.last.requests == 2
        assert source.last.closed == 1

    def test_index_of(self) -> None:
        """Test index_of returns the first position or -1."""
        e = pl.Enumerator("abcb")
        assert e.index_of("b") == 1
        assert e.index_of("z") == -1
        assert pl.Enumerator(_empty).index_of("a") == -1

    def test_index_of_stops_and_releases(self) -> None:
        """Test index_of stops at the first match and releases the process."""
        source = TrackedSource("abcde")
        assert source.index_of("c") == 2
        assert source.last.requests == 3
        assert source.last.closed == 1

    def test_last_index_of(self) -> None:
        """Test last_index_of scans everything and returns the last position."""
        source = TrackedSource("abcbd")
        assert source.last_index_of("b") == 3
        assert source.last.requests == 6
        assert source.last_index_of("z") == -1

    def test_includes(self) -> None:
        """Test includes and the `in` operator."""
        source = TrackedSource("abc")
        assert source.includes("a")
        assert source.processes[-1].requests == 1
        assert "c" in source
        assert "z" not in source


class TestPredicates:
    """Tests for `any` and `every`."""

    def test_every_empty(self) -> None:
        """Test every is vacuously true."""
        assert pl.Enumerator(_empty).every(lambda *_: False)

    def test_every_fails(self) -> None:
        """Test every is false when one element fails."""
        assert not pl.Enumerator("abc").every(lambda v, _: v != "c")
        assert pl.Enumerator("abc").every(lambda _, idx: idx < 3)

    def test_every_stops_after_first_failure(self) -> None:
        """Test every stops right after the first failing element."""
        forced = Spy()

        def _abc() -> Iterator[str]:
            yield "a"
            forced()
            yield "b"
            yield "c"

        assert not pl.Enumerator(_abc).every(lambda v, _: v == "z")
        assert not forced.called

    def test_any_empty(self) -> None:
        """Test any is false on an empty Enumerable."""
        assert not pl.Enumerator(_empty).any(lambda *_: True)

    def test_any_passes(self) -> None:
        """Test any is true when one element passes."""
        assert pl.Enumerator("abc").any(lambda v, _: v == "c")
        assert not pl.Enumerator("abc").any(lambda v, _: v == "z")

    def test_any_stops_after_first_pass(self) -> None:
        """Test any stops right after the first passing element."""
        forced = Spy()

        def _abc() -> Iterator[str]:
            yield "a"
            forced()
            yield "b"
            yield "c"

        assert pl.Enumerator(_abc).any(lambda v, _: v == "a")
        assert not forced.called

    def test_any_every_release(self) -> None:
        """Test any and every release the process when stopping early."""
        source = TrackedSource("abc")
        source.any(lambda v, _: v == "a")
        assert source.last.closed == 1
        source.every(lambda v, _: v == "z")
        assert source.last.closed == 1
        assert len(source.processes) == 2
