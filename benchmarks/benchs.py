"""Benchmarks for seqchain package - benchs.py."""

import itertools

import more_itertools as mit

import seqchain as sc

from ._registery import bench


def _is_even(x: int) -> bool:
    return x % 2 == 0


def _square(x: int) -> int:
    return x * x


class Pipeline:
    """Filter, map and take, against the builtin equivalent."""

    @bench()
    @staticmethod
    def seqchain(data: list[int]) -> object:
        return sc.Seq(data).filter(_is_even).map(_square).take(100).collect()

    @bench()
    @staticmethod
    def builtin(data: list[int]) -> object:
        return list(itertools.islice(map(_square, filter(_is_even, data)), 100))


class Uniq:
    """Deduplication of a sequence with many repeats."""

    @bench(gen=lambda data: data.map(lambda x: x % 50).collect())
    @staticmethod
    def seqchain(data: list[int]) -> object:
        return sc.uniq(data).collect()

    @bench(gen=lambda data: data.map(lambda x: x % 50).collect())
    @staticmethod
    def builtin(data: list[int]) -> object:
        return list(dict.fromkeys(data))

    @bench(gen=lambda data: data.map(lambda x: x % 50).collect())
    @staticmethod
    def more_itertools(data: list[int]) -> object:
        return list(mit.unique_everseen(data))


class Sorted:
    """Sorted traversal of a dict."""

    @bench(gen=lambda data: data.enumerate().map(lambda k, v: -v).collect())
    @staticmethod
    def seqchain(data: dict[int, int]) -> object:
        return sc.sorted2(data).collect()

    @bench(gen=lambda data: data.enumerate().map(lambda k, v: -v).collect())
    @staticmethod
    def builtin(data: dict[int, int]) -> object:
        return {k: data[k] for k in sorted(data)}


class Drive:
    """Push-style drive with an early stop."""

    @bench()
    @staticmethod
    def seqchain(data: list[int]) -> object:
        seen: list[int] = []
        sc.Seq(data)(lambda x: seen.append(x) or len(seen) < 200)
        return seen

    @bench()
    @staticmethod
    def builtin(data: list[int]) -> object:
        seen: list[int] = []
        for x in data:
            seen.append(x)
            if len(seen) >= 200:
                break
        return seen
