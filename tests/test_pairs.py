"""Tests for key-value `Pairs` combinators."""

from collections.abc import Iterator

import pytest

import seqchain as sc


def _counting(data: list[tuple[str, int]], pulled: list[str]) -> sc.Pairs[str, int]:
    def _gen() -> Iterator[tuple[str, int]]:
        for key, value in data:
            pulled.append(key)
            yield key, value

    return sc.Pairs.from_fn(_gen)


DATA = [("a", 1), ("b", 2), ("c", 3), ("d", 4)]


def test_from_mapping_and_tuples() -> None:
    assert list(sc.Pairs({"x": 1, "y": 2})) == [("x", 1), ("y", 2)]
    assert list(sc.Pairs([("x", 1), ("x", 2)])) == [("x", 1), ("x", 2)]


def test_items_are_named() -> None:
    item = next(iter(sc.Pairs({"x": 1})))
    assert item.key == "x"
    assert item.value == 1
    assert repr(item) == "('x', 1)"


def test_chain_keeps_duplicates() -> None:
    roles = sc.Pairs({"alice": "admin", "bob": "admin"}).chain(
        {"bob": "user", "charlie": "manager"}
    )
    assert list(roles) == [
        ("alice", "admin"),
        ("bob", "admin"),
        ("bob", "user"),
        ("charlie", "manager"),
    ]
    assert roles.collect() == {"alice": "admin", "bob": "user", "charlie": "manager"}


def test_chain_stops_early() -> None:
    pulled: list[str] = []
    later = _counting([("z", 26)], pulled)
    assert sc.chain2(DATA, later).take(2).collect() == {"a": 1, "b": 2}
    assert pulled == []


def test_filter() -> None:
    result = sc.Pairs(DATA).filter(lambda k, v: k != "b" and v < 4)
    assert list(result) == [("a", 1), ("c", 3)]


def test_map_keeps_keys() -> None:
    result = sc.Pairs(DATA).map(lambda k, v: k * v)
    assert list(result) == [("a", "a"), ("b", "bb"), ("c", "ccc"), ("d", "dddd")]


def test_filter_map() -> None:
    result = sc.Pairs(DATA).filter_map(lambda k, v: (f"{k}{v}", v % 2 == 0))
    assert result.collect() == {"b": "b2", "d": "d4"}


def test_uniq_keeps_first_value() -> None:
    roles = sc.chain2(
        {"alice": "admin", "bob": "user"},
        {"alice": "user", "charlie": "user"},
    )
    assert roles.uniq().collect() == {"alice": "admin", "bob": "user", "charlie": "user"}
    assert roles.collect()["alice"] == "user"


def test_skip() -> None:
    pairs = sc.Pairs(DATA)
    assert pairs.skip(0) is pairs
    assert pairs.skip(2).collect() == {"c": 3, "d": 4}
    assert pairs.skip(9).collect() == {}
    with pytest.raises(ValueError, match="non-negative"):
        pairs.skip(-1)


def test_skip_while() -> None:
    calls: list[str] = []

    def _low(key: str, value: int) -> bool:
        calls.append(key)
        return value < 2

    assert list(sc.Pairs(DATA).skip_while(_low)) == [("b", 2), ("c", 3), ("d", 4)]
    assert calls == ["a", "b"]


def test_skip_while_none() -> None:
    pairs = sc.Pairs(DATA)
    assert pairs.skip_while(None) is pairs


def test_take() -> None:
    pulled: list[str] = []
    pairs = _counting(DATA, pulled)
    assert pairs.take(2).collect() == {"a": 1, "b": 2}
    assert pulled == ["a", "b"]
    pulled.clear()
    assert pairs.take(0).collect() == {}
    assert pulled == []
    with pytest.raises(ValueError, match="non-negative"):
        pairs.take(-1)


def test_take_while() -> None:
    pulled: list[str] = []
    pairs = _counting(DATA, pulled)
    assert pairs.take_while(lambda _, v: v < 3).collect() == {"a": 1, "b": 2}
    assert pulled == ["a", "b", "c"]
    pulled.clear()
    assert pairs.take_while(None).collect() == {}
    assert pulled == []


def test_push_drive() -> None:
    pulled: list[str] = []
    seen: list[tuple[str, int]] = []

    def _consume(key: str, value: int) -> bool:
        seen.append((key, value))
        return value < 2

    _counting(DATA, pulled)(_consume)
    assert seen == [("a", 1), ("b", 2)]
    assert pulled == ["a", "b"]


def test_keys_and_values() -> None:
    pairs = sc.Pairs([("a", 1), ("a", 2)])
    assert pairs.keys().collect() == ["a", "a"]
    assert pairs.values().collect() == [1, 2]


class TestSorted:
    def test_ascending(self) -> None:
        pairs = sc.sorted2({"charlie": 3, "alice": 1, "bob": 2})
        assert list(pairs) == [("alice", 1), ("bob", 2), ("charlie", 3)]

    def test_keys_strictly_ascending(self) -> None:
        data = {k: str(k) for k in (9, -3, 4, 0, 12, 7)}
        keys = sc.Pairs.sorted_(data).keys().collect()
        assert all(a < b for a, b in zip(keys, keys[1:], strict=False))

    def test_each_iteration_sees_current_content(self) -> None:
        data = {"b": 2}
        pairs = sc.sorted2(data)
        assert pairs.collect() == {"b": 2}
        data["a"] = 1
        assert list(pairs) == [("a", 1), ("b", 2)]

    def test_empty(self) -> None:
        assert sc.sorted2({}).collect() == {}


def test_restartable() -> None:
    pairs = (
        sc.Pairs(DATA)
        .chain({"a": 10})
        .uniq()
        .map(lambda k, v: v * 100)
        .filter(lambda k, v: k != "c")
    )
    assert pairs.collect() == {"a": 100, "b": 200, "d": 400}
    assert pairs.collect() == {"a": 100, "b": 200, "d": 400}


def test_free_functions() -> None:
    assert sc.filter2(DATA, lambda _, v: v > 3).collect() == {"d": 4}
    assert sc.map2(DATA, lambda k, _: k.upper()).values().collect() == ["A", "B", "C", "D"]
    assert sc.filter_map2(DATA, lambda _, v: (v, v == 1)).collect() == {"a": 1}
    assert sc.uniq2([("a", 1), ("a", 2)]).collect() == {"a": 1}
    assert sc.skip2(DATA, 3).collect() == {"d": 4}
    assert sc.skip_while2(DATA, lambda _, v: v < 4).collect() == {"d": 4}
    assert sc.take2(DATA, 1).collect() == {"a": 1}
    assert sc.take_while2(DATA, lambda _, v: v < 2).collect() == {"a": 1}
    assert sc.combine2({"a": 1}, {"a": 2}).collect() == {"a": 2}
    assert sc.items({"a": 1}).collect() == {"a": 1}
