"""Negation, addition, multiplication and single-limb division."""

from __future__ import annotations

from .compare import bigi_is_zero, bigi_nonneg
from .core import Bigi, from_normalized, from_unnormalized, same_radix, top_ext
from .errors import DivisionByZeroError, UnsupportedDivisorError


# ---------------------------------------------------------------------------
# Negation and addition
# ---------------------------------------------------------------------------


def bigi_neg(x: Bigi) -> Bigi:
    """Two's complement negation."""
    radix = x.radix
    limbs: tuple[int, ...] = x.limbs
    len_x: int = len(limbs)
    out: list[int] = [0] * (len_x + 1)
    carry: int = 1
    for i in range(len_x):
        s: int = radix.mask - limbs[i] + carry
        out[i] = s & radix.mask
        carry = s >> radix.width
    # extra limb covers -(-base**k / 2), which has no k-limb positive form
    out[len_x] = (radix.mask - top_ext(x) + carry) & radix.mask
    return from_unnormalized(out, radix)


def bigi_abs(x: Bigi) -> Bigi:
    if bigi_nonneg(x):
        return x
    return bigi_neg(x)


def bigi_add(a: Bigi, b: Bigi) -> Bigi:
    radix = same_radix(a, b)
    if len(a.limbs) < len(b.limbs):
        a, b = b, a
    limbs_a: tuple[int, ...] = a.limbs
    limbs_b: tuple[int, ...] = b.limbs
    len_a: int = len(limbs_a)
    len_b: int = len(limbs_b)
    out: list[int] = [0] * (len_a + 1)
    carry: int = 0
    i: int = 0
    while i < len_b:
        s: int = limbs_a[i] + limbs_b[i] + carry
        out[i] = s & radix.mask
        carry = s >> radix.width
        i += 1
    ext_b: int = top_ext(b)
    while i < len_a:
        s = limbs_a[i] + ext_b + carry
        out[i] = s & radix.mask
        carry = s >> radix.width
        i += 1
    out[i] = (top_ext(a) + ext_b + carry) & radix.mask
    return from_unnormalized(out, radix)


def bigi_sub(a: Bigi, b: Bigi) -> Bigi:
    return bigi_add(a, bigi_neg(b))


# ---------------------------------------------------------------------------
# Multiplication
# ---------------------------------------------------------------------------


def bigi_mul(a: Bigi, b: Bigi) -> Bigi:
    """Schoolbook multiplication on magnitudes, sign applied afterwards."""
    radix = same_radix(a, b)
    neg: bool = False
    if not bigi_nonneg(a):
        neg = not neg
        a = bigi_neg(a)
    if not bigi_nonneg(b):
        neg = not neg
        b = bigi_neg(b)
    limbs_a: tuple[int, ...] = a.limbs
    limbs_b: tuple[int, ...] = b.limbs
    len_b: int = len(limbs_b)
    out: list[int] = [0] * (len(limbs_a) + len_b + 1)
    for i, mult in enumerate(limbs_a):
        carry: int = 0
        k: int = i
        for j in range(len_b):
            p: int = mult * limbs_b[j] + out[k] + carry
            out[k] = p & radix.mask
            carry = p >> radix.width
            k += 1
        out[k] = carry
    product = from_unnormalized(out, radix)
    if neg:
        return bigi_neg(product)
    return product


# ---------------------------------------------------------------------------
# Division
# ---------------------------------------------------------------------------


def nonneg_quorem(a: Bigi, b: Bigi) -> tuple[Bigi, Bigi]:
    """Quotient and remainder of two nonnegative Bigis.

    Only single-limb divisors are supported.
    """
    radix = a.radix
    if bigi_is_zero(b):
        raise DivisionByZeroError("division by zero")
    if len(b.limbs) > 1:
        raise UnsupportedDivisorError(
            f"divisor {b!r} needs {len(b.limbs)} limbs; only single-limb divisors are supported"
        )
    d: int = b.limbs[0]
    limbs_a: tuple[int, ...] = a.limbs
    quo: list[int] = [0] * len(limbs_a)
    n: int = 0
    i: int = len(limbs_a) - 1
    while i >= 0:
        n = (n << radix.width) + limbs_a[i]
        q: int = n // d
        quo[i] = q
        n -= q * d
        i -= 1
    # n < d < base/2, so the remainder is a normalized single limb
    return (from_unnormalized(quo, radix), from_normalized([n], radix))


def bigi_divmod(a: Bigi, b: Bigi) -> tuple[Bigi, Bigi]:
    """Truncating division: quotient rounds toward zero, remainder takes a's sign."""
    same_radix(a, b)
    quo, rem = nonneg_quorem(bigi_abs(a), bigi_abs(b))
    nonneg_a: bool = bigi_nonneg(a)
    if nonneg_a != bigi_nonneg(b):
        quo = bigi_neg(quo)
    if not nonneg_a:
        rem = bigi_neg(rem)
    return (quo, rem)


def bigi_quo(a: Bigi, b: Bigi) -> Bigi:
    return bigi_divmod(a, b)[0]


def bigi_rem(a: Bigi, b: Bigi) -> Bigi:
    return bigi_divmod(a, b)[1]
