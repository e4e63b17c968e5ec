"""Exhaustive agreement harness."""

import pytest

from bigi.radix import Radix
from bigi.selfcheck import (
    CheckResult,
    check_binary,
    check_division,
    check_roundtrip,
    check_shift,
    check_unary,
    run_all,
    span_range,
)


def test_span_range():
    assert span_range(Radix(5), 1) == (-17, 16)
    assert span_range(Radix(2), 2) == (-9, 8)
    with pytest.raises(ValueError):
        span_range(Radix(5), 0)


def test_check_result_keeps_first_failure():
    result = CheckResult("x")
    assert result.ok
    result.fail("first")
    result.fail("second")
    assert not result.ok
    assert result.failures == 2
    assert result.first_failure == "first"


@pytest.mark.parametrize("width", [2, 3, 4, 5])
def test_run_all_span1(width: int):
    results = run_all(Radix(width), 1)
    names = [r.name for r in results]
    assert names == [
        "roundtrip",
        "abs", "neg", "not", "is_zero", "nonneg",
        "add", "sub", "mul", "and", "or", "xor", "eq", "lt", "gt",
        "shl", "shr",
        "quo", "rem",
    ]
    for result in results:
        assert result.ok, f"{result.name}: {result.first_failure}"


@pytest.mark.parametrize("width", [2, 3])
def test_span2(width: int):
    r = Radix(width)
    lo, hi = span_range(r, 2)
    results = [check_roundtrip(r, 2)]
    results.extend(check_unary(r, 2))
    results.extend(check_binary(r, 2))
    results.extend(check_shift(r, 2))
    results.extend(check_division(r, 2))
    for result in results:
        assert result.ok, f"{result.name}: {result.first_failure}"
    assert results[0].tested == hi - lo + 1
    assert results[-1].tested == (hi - lo + 1) * (r.half - 1) * 2
