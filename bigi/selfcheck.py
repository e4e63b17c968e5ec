"""Exhaustive agreement checks against Python's own integers.

Every check sweeps an operand range one past each end of the values that fit
in `span` limbs, runs the Bigi operation, and compares the resulting limbs
with `bigi_from_integer` of the Python result. Comparing limbs, not values,
also catches results that are correct but not normalized.
"""

from __future__ import annotations

import operator
from dataclasses import dataclass
from typing import Callable

from .arith import bigi_abs, bigi_add, bigi_mul, bigi_neg, bigi_quo, bigi_rem, bigi_sub
from .bitwise import bigi_and, bigi_not, bigi_or, bigi_shift, bigi_xor
from .compare import bigi_eq, bigi_gt, bigi_is_zero, bigi_lt, bigi_nonneg
from .convert import bigi_from_integer, bigi_to_float
from .core import Bigi
from .errors import BigiError
from .radix import Radix

MAX_SHIFT: int = 15


@dataclass
class CheckResult:
    name: str
    tested: int = 0
    failures: int = 0
    first_failure: str = ""

    @property
    def ok(self) -> bool:
        return self.failures == 0

    def fail(self, detail: str) -> None:
        self.failures += 1
        if self.failures == 1:
            self.first_failure = detail


def span_range(radix: Radix, span: int) -> tuple[int, int]:
    """Inclusive range one past each end of the `span`-limb values."""
    if span < 1:
        raise ValueError(f"span must be at least 1, got {span}")
    half: int = (radix.base**span) // 2
    return (-half - 1, half)


def trunc_divmod(a: int, b: int) -> tuple[int, int]:
    """Reference division rounding toward zero."""
    q: int = abs(a) // abs(b)
    if (a < 0) != (b < 0):
        q = -q
    return (q, a - q * b)


UNARY_OPS: dict[str, tuple[Callable[[Bigi], object], Callable[[int], object]]] = {
    "abs": (bigi_abs, abs),
    "neg": (bigi_neg, operator.neg),
    "not": (bigi_not, operator.invert),
    "is_zero": (bigi_is_zero, lambda a: a == 0),
    "nonneg": (bigi_nonneg, lambda a: a >= 0),
}

BINARY_OPS: dict[str, tuple[Callable[[Bigi, Bigi], object], Callable[[int, int], object]]] = {
    "add": (bigi_add, operator.add),
    "sub": (bigi_sub, operator.sub),
    "mul": (bigi_mul, operator.mul),
    "and": (bigi_and, operator.and_),
    "or": (bigi_or, operator.or_),
    "xor": (bigi_xor, operator.xor),
    "eq": (bigi_eq, operator.eq),
    "lt": (bigi_lt, operator.lt),
    "gt": (bigi_gt, operator.gt),
}


def _agrees(got: object, expected: object, radix: Radix) -> bool:
    if isinstance(expected, bool):
        return got is expected
    return got == bigi_from_integer(expected, radix)


def _describe(got: object) -> str:
    if isinstance(got, Bigi):
        return str(list(got.limbs))
    return repr(got)


def check_roundtrip(radix: Radix, span: int = 1) -> CheckResult:
    result = CheckResult("roundtrip")
    lo, hi = span_range(radix, span)
    for a in range(lo, hi + 1):
        result.tested += 1
        try:
            back = bigi_to_float(bigi_from_integer(a, radix))
        except BigiError as e:
            result.fail(f"roundtrip {a}: {e.msg}")
            continue
        if back != a:
            result.fail(f"roundtrip {a}: got {back}")
    return result


def check_unary(radix: Radix, span: int = 1) -> list[CheckResult]:
    lo, hi = span_range(radix, span)
    results: list[CheckResult] = []
    for name, (fn, ref) in UNARY_OPS.items():
        result = CheckResult(name)
        for a in range(lo, hi + 1):
            result.tested += 1
            got = fn(bigi_from_integer(a, radix))
            expected = ref(a)
            if not _agrees(got, expected, radix):
                result.fail(f"{name}({a}): got {_describe(got)}, expected {expected}")
        results.append(result)
    return results


def check_binary(radix: Radix, span: int = 1) -> list[CheckResult]:
    lo, hi = span_range(radix, span)
    values: list[tuple[int, Bigi]] = [(a, bigi_from_integer(a, radix)) for a in range(lo, hi + 1)]
    results: list[CheckResult] = []
    for name, (fn, ref) in BINARY_OPS.items():
        result = CheckResult(name)
        for a, ba in values:
            for b, bb in values:
                result.tested += 1
                got = fn(ba, bb)
                expected = ref(a, b)
                if not _agrees(got, expected, radix):
                    result.fail(
                        f"{name}({a}, {b}): got {_describe(got)}, expected {expected}"
                    )
        results.append(result)
    return results


def check_shift(radix: Radix, span: int = 1) -> list[CheckResult]:
    lo, hi = span_range(radix, span)
    left = CheckResult("shl")
    right = CheckResult("shr")
    for a in range(lo, hi + 1):
        ba = bigi_from_integer(a, radix)
        for n in range(MAX_SHIFT + 1):
            left.tested += 1
            got = bigi_shift(ba, n)
            if not _agrees(got, a << n, radix):
                left.fail(f"{a} << {n}: got {_describe(got)}, expected {a << n}")
            right.tested += 1
            got = bigi_shift(ba, -n)
            if not _agrees(got, a >> n, radix):
                right.fail(f"{a} >> {n}: got {_describe(got)}, expected {a >> n}")
    return [left, right]


def check_division(radix: Radix, span: int = 1) -> list[CheckResult]:
    lo, hi = span_range(radix, span)
    quo = CheckResult("quo")
    rem = CheckResult("rem")
    for a in range(lo, hi + 1):
        ba = bigi_from_integer(a, radix)
        for b in range(1 - radix.half, radix.half):
            if b == 0:
                continue
            bb = bigi_from_integer(b, radix)
            q, r = trunc_divmod(a, b)
            quo.tested += 1
            got = bigi_quo(ba, bb)
            if not _agrees(got, q, radix):
                quo.fail(f"quo({a}, {b}): got {_describe(got)}, expected {q}")
            rem.tested += 1
            got = bigi_rem(ba, bb)
            if not _agrees(got, r, radix):
                rem.fail(f"rem({a}, {b}): got {_describe(got)}, expected {r}")
    return [quo, rem]


def run_all(radix: Radix, span: int = 1) -> list[CheckResult]:
    results: list[CheckResult] = [check_roundtrip(radix, span)]
    results.extend(check_unary(radix, span))
    results.extend(check_binary(radix, span))
    results.extend(check_shift(radix, span))
    results.extend(check_division(radix, span))
    return results
