"""Bitwise operators and shifts against Python's two's-complement semantics."""

import operator

import pytest

from bigi.bitwise import bigi_and, bigi_not, bigi_or, bigi_shift, bigi_xor
from bigi.convert import bigi_from_integer, bigi_to_int
from bigi.radix import Radix

ROUNDS = 3_000

BINARY_OPS = {
    "and": (bigi_and, operator.and_),
    "or": (bigi_or, operator.or_),
    "xor": (bigi_xor, operator.xor),
}


@pytest.mark.parametrize("op", BINARY_OPS)
def test_binary(op: str, gen, radix):
    fn, ref = BINARY_OPS[op]
    fails = 0
    first_failure = ""
    for _ in range(ROUNDS):
        a = gen()
        b = gen()
        got = fn(bigi_from_integer(a, radix), bigi_from_integer(b, radix))
        expected = bigi_from_integer(ref(a, b), radix)
        if got != expected:
            fails += 1
            if fails == 1:
                first_failure = f"{op}({a}, {b}): got {got!r}, expected {expected!r}"
    assert fails == 0, f"{fails}/{ROUNDS} failures. First: {first_failure}"


def test_not(gen, radix):
    fails = 0
    first_failure = ""
    for _ in range(ROUNDS):
        a = gen()
        got = bigi_not(bigi_from_integer(a, radix))
        if got != bigi_from_integer(~a, radix):
            fails += 1
            if fails == 1:
                first_failure = f"not({a}): got {got!r}, expected {~a}"
    assert fails == 0, f"{fails}/{ROUNDS} failures. First: {first_failure}"


@pytest.mark.parametrize(
    "a,b",
    [(-1, 0), (-1, 1 << 40), (-(1 << 40), 255), (12345, -12346), (-16, 15), (-17, -16)],
)
def test_sign_extension_examples(a: int, b: int):
    r = Radix(5)
    ba = bigi_from_integer(a, r)
    bb = bigi_from_integer(b, r)
    assert bigi_to_int(bigi_and(ba, bb)) == a & b
    assert bigi_to_int(bigi_or(ba, bb)) == a | b
    assert bigi_to_int(bigi_xor(ba, bb)) == a ^ b


# ---------------------------------------------------------------------------
# Shifts
# ---------------------------------------------------------------------------


@pytest.mark.parametrize("direction", ["left", "right"])
def test_small_shifts(direction: str, gen, radix):
    fails = 0
    first_failure = ""
    for _ in range(ROUNDS // 4):
        a = gen()
        ba = bigi_from_integer(a, radix)
        for n in range(16):
            if direction == "left":
                got = bigi_shift(ba, n)
                expected = a << n
            else:
                got = bigi_shift(ba, -n)
                expected = a >> n
            if got != bigi_from_integer(expected, radix):
                fails += 1
                if fails == 1:
                    first_failure = f"shift({a}, {n}, {direction}): got {got!r}, expected {expected}"
    assert fails == 0, f"{fails}/{ROUNDS // 4} values failed. First: {first_failure}"


def test_large_shifts(gen, rng, radix):
    fails = 0
    first_failure = ""
    for _ in range(ROUNDS):
        a = gen()
        n = rng.randint(-200, 200)
        got = bigi_shift(bigi_from_integer(a, radix), n)
        expected = a << n if n >= 0 else a >> -n
        if got != bigi_from_integer(expected, radix):
            fails += 1
            if fails == 1:
                first_failure = f"shift({a}, {n}): got {got!r}, expected {expected}"
    assert fails == 0, f"{fails}/{ROUNDS} failures. First: {first_failure}"


@pytest.mark.parametrize("width", [2, 5, 14])
def test_whole_limb_shifts(width: int):
    r = Radix(width)
    for a in [0, 1, -1, 12345, -12345, r.half, -r.half]:
        x = bigi_from_integer(a, r)
        for k in range(-4, 5):
            n = k * width
            expected = a << n if n >= 0 else a >> -n
            assert bigi_to_int(bigi_shift(x, n)) == expected, (a, n)


@pytest.mark.parametrize("a,expected", [(12345, 0), (-12345, -1), (0, 0), (-1, -1)])
def test_shift_out_everything(a: int, expected: int):
    r = Radix(5)
    x = bigi_shift(bigi_from_integer(a, r), -1000)
    assert x.limbs == ((0,) if expected == 0 else (r.mask,))
    assert bigi_to_int(x) == expected
