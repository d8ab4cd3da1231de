"""Tests for `Result`, `Ok` and `Err`."""

import pytest

import seqchain as sc


def test_ok_accessors() -> None:
    result: sc.Result[int, str] = sc.Ok(42)
    assert result.is_ok()
    assert not result.is_err()
    assert result.unwrap() == 42
    assert result.expect("never") == 42
    assert result.unwrap_or(0) == 42
    with pytest.raises(sc.ResultUnwrapError, match="unwrap_err"):
        result.unwrap_err()


def test_err_accessors() -> None:
    result: sc.Result[int, str] = sc.Err("boom")
    assert result.is_err()
    assert result.unwrap_err() == "boom"
    assert result.unwrap_or(0) == 0
    assert result.unwrap_or_else(len) == 4
    with pytest.raises(sc.ResultUnwrapError, match="boom"):
        result.unwrap()
    with pytest.raises(sc.ResultUnwrapError, match="loading: boom"):
        result.expect("loading")


def test_combinators() -> None:
    assert sc.Ok(2).map(lambda x: x * 3) == sc.Ok(6)
    assert sc.Err("e").map(lambda x: x * 3) == sc.Err("e")
    assert sc.Err("e").map_err(str.upper) == sc.Err("E")
    assert sc.Ok(1).map_err(str.upper) == sc.Ok(1)
    assert sc.Ok(1).and_then(lambda x: sc.Err(f"bad {x}")) == sc.Err("bad 1")
    assert sc.Ok(1).map_or_else(str, len) == "1"
    assert sc.Err("abc").map_or_else(str, len) == 3


def test_unwrap_error_is_runtime_error() -> None:
    assert issubclass(sc.ResultUnwrapError, RuntimeError)
