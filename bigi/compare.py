"""Sign tests and ordering."""

from __future__ import annotations

from .core import Bigi, same_radix


def bigi_nonneg(x: Bigi) -> bool:
    return x.limbs[-1] < x.radix.half


def bigi_is_zero(x: Bigi) -> bool:
    return len(x.limbs) == 1 and x.limbs[0] == 0


def bigi_compare(a: Bigi, b: Bigi) -> int:
    """Return -1, 0 or 1 as a is less than, equal to or greater than b."""
    same_radix(a, b)
    nonneg_a: bool = bigi_nonneg(a)
    if nonneg_a != bigi_nonneg(b):
        return 1 if nonneg_a else -1
    len_a: int = len(a.limbs)
    len_b: int = len(b.limbs)
    if len_a != len_b:
        result: int = -1 if len_a < len_b else 1
        if not nonneg_a:
            result = -result
        return result
    i: int = len_a - 1
    while i >= 0:
        limb_a: int = a.limbs[i]
        limb_b: int = b.limbs[i]
        if limb_a < limb_b:
            return -1
        if limb_a > limb_b:
            return 1
        i -= 1
    return 0


def bigi_eq(a: Bigi, b: Bigi) -> bool:
    # normalized forms are unique, so limb equality is value equality
    same_radix(a, b)
    return a.limbs == b.limbs


def bigi_lt(a: Bigi, b: Bigi) -> bool:
    return bigi_compare(a, b) < 0


def bigi_le(a: Bigi, b: Bigi) -> bool:
    return bigi_compare(a, b) <= 0


def bigi_gt(a: Bigi, b: Bigi) -> bool:
    return bigi_compare(a, b) > 0


def bigi_ge(a: Bigi, b: Bigi) -> bool:
    return bigi_compare(a, b) >= 0
