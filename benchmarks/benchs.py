"""Benchmarks comparing pyolazy pipelines to their builtin equivalents."""

import functools
import itertools

import pyolazy as pl

from ._registery import bench


def _square(x: int, _idx: int = 0) -> int:
    return x * x


def _is_even(x: int, _idx: int = 0) -> bool:
    return x % 2 == 0


class Map:
    """Transform every element."""

    @bench
    @staticmethod
    def enumerator(data: list[int]) -> object:
        return pl.Enumerator(data).map(_square).collect()

    @bench
    @staticmethod
    def builtin(data: list[int]) -> object:
        return list(map(_square, data))


class Filter:
    """Select half of the elements."""

    @bench
    @staticmethod
    def enumerator(data: list[int]) -> object:
        return pl.Enumerator(data).filter(_is_even).collect()

    @bench
    @staticmethod
    def builtin(data: list[int]) -> object:
        return list(filter(_is_even, data))


class Take:
    """Bounded prefix of an infinite producer."""

    @bench
    @staticmethod
    def enumerator(data: list[int]) -> object:
        return pl.Range(float("inf")).take(len(data)).collect()

    @bench
    @staticmethod
    def builtin(data: list[int]) -> object:
        return list(itertools.islice(itertools.count(), len(data)))


class Reduce:
    """Fold without seed."""

    @bench
    @staticmethod
    def enumerator(data: list[int]) -> object:
        return pl.Enumerator(data).reduce(lambda acc, v, _: acc + v).unwrap()

    @bench
    @staticmethod
    def builtin(data: list[int]) -> object:
        return functools.reduce(lambda acc, v: acc + v, data)


class Flatten:
    """Flatten one level of nesting."""

    @bench
    @staticmethod
    def enumerator(data: list[int]) -> object:
        return pl.Enumerator([data, data]).flatten().collect()

    @bench
    @staticmethod
    def builtin(data: list[int]) -> object:
        return list(itertools.chain.from_iterable([data, data]))
