"""Tests for slot usage in seqchain classes."""

import seqchain as sc


def _check_slots(obj: object) -> bool:
    try:
        _x = obj.__dict__
        return False  # noqa: TRY300
    except AttributeError:
        return True


def test_slots() -> None:  # noqa: D103
    assert _check_slots(sc.Seq(()))
    assert _check_slots(sc.Seq.repeat(1).take(1))
    assert _check_slots(sc.Pairs({}))
    assert _check_slots(sc.sorted2({"a": 1}))
    assert _check_slots(sc.Ok[int, object](42))
    assert _check_slots(sc.Err[int, object](42))
    assert _check_slots(sc.Config())
