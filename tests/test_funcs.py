"""Tests for the free-function forms and the error lifting helpers."""

import logging

import pytest

import seqchain as sc


def test_adapters() -> None:
    assert sc.values((1, 2)).collect() == [1, 2]
    assert sc.values(sc.values([1])).collect() == [1]


def test_single_value_functions() -> None:
    data = list(range(1, 11))
    assert sc.filter_(data, lambda x: x > 8).collect() == [9, 10]
    assert sc.map_(data, lambda x: -x).take(2).collect() == [-1, -2]
    assert sc.filter_map(data, lambda x: (x, x == 5)).collect() == [5]
    assert sc.flatten([[1], [2, 3]]).collect() == [1, 2, 3]
    assert sc.uniq([2, 2, 1]).collect() == [2, 1]
    assert sc.skip(data, 8).collect() == [9, 10]
    assert sc.skip_while(data, lambda x: x < 9).collect() == [9, 10]
    assert sc.take(data, 2).collect() == [1, 2]
    assert sc.take_while(data, lambda x: x < 3).collect() == [1, 2]


def test_identities() -> None:
    seq = sc.Seq([1, 2, 3])
    assert sc.skip(seq, 0) is seq
    assert sc.skip_while(seq, None) is seq
    assert sc.take_while(seq, None).collect() == []
    pairs = sc.Pairs({"a": 1})
    assert sc.skip2(pairs, 0) is pairs
    assert sc.skip_while2(pairs, None) is pairs
    assert sc.take_while2(pairs, None).collect() == {}


def test_skip_zero_wraps_plain_iterables() -> None:
    assert sc.skip([1, 2], 0).collect() == [1, 2]
    assert sc.skip2({"a": 1}, 0).collect() == {"a": 1}


def test_negative_counts() -> None:
    with pytest.raises(ValueError, match="non-negative"):
        sc.skip([1], -1)
    with pytest.raises(ValueError, match="non-negative"):
        sc.take2({"a": 1}, -1)


class TestValuesErr:
    def test_ok(self) -> None:
        seq, err = sc.values_err(["apple", "banana", "cherry"], None)
        assert err is None
        assert seq is not None
        assert seq.collect() == ["apple", "banana", "cherry"]

    def test_error_passes_through_unchanged(self) -> None:
        error = RuntimeError("something went wrong")
        seq, err = sc.values_err(None, error)
        assert seq is None
        assert err is error

    def test_error_wins_over_data(self) -> None:
        error = OSError("partial read")
        seq, err = sc.values_err([1, 2], error)
        assert seq is None
        assert err is error

    def test_none_data_without_error(self) -> None:
        seq, err = sc.values_err(None, None)
        assert err is None
        assert seq is not None
        assert seq.collect() == []

    def test_items_err(self) -> None:
        pairs, err = sc.items_err({"a": 1}, None)
        assert err is None
        assert pairs is not None
        assert pairs.collect() == {"a": 1}
        error = KeyError("a")
        assert sc.items_err(None, error) == (None, error)

    def test_error_is_logged(self, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level(logging.DEBUG, logger="seqchain"):
            sc.values_err(None, ValueError("boom"))
        assert "boom" in caplog.text


class TestTryValues:
    def test_ok(self) -> None:
        result = sc.try_values([1, 2, 3], None)
        assert result.is_ok()
        assert result.unwrap().filter(lambda x: x > 1).collect() == [2, 3]

    def test_err(self) -> None:
        error = TimeoutError("slow")
        result = sc.try_values(None, error)
        assert result.is_err()
        assert result.unwrap_err() is error
