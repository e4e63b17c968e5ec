"""Bitwise operators and arithmetic shift."""

from __future__ import annotations

import operator
from typing import Callable

from .core import Bigi, from_normalized, from_unnormalized, same_radix, top_ext


def bigi_not(x: Bigi) -> Bigi:
    radix = x.radix
    out: list[int] = [radix.mask ^ limb for limb in x.limbs]
    out.append(radix.mask ^ top_ext(x))
    return from_unnormalized(out, radix)


def _bitwise(a: Bigi, b: Bigi, op: Callable[[int, int], int]) -> Bigi:
    """Apply op limb-wise, sign-extending the shorter operand."""
    radix = same_radix(a, b)
    if len(a.limbs) < len(b.limbs):
        a, b = b, a
    limbs_a: tuple[int, ...] = a.limbs
    limbs_b: tuple[int, ...] = b.limbs
    len_b: int = len(limbs_b)
    out: list[int] = [0] * (len(limbs_a) + 1)
    ext_b: int = top_ext(b)
    for i, limb in enumerate(limbs_a):
        out[i] = op(limb, limbs_b[i] if i < len_b else ext_b)
    out[-1] = op(top_ext(a), ext_b)
    return from_unnormalized(out, radix)


def bigi_and(a: Bigi, b: Bigi) -> Bigi:
    return _bitwise(a, b, operator.and_)


def bigi_or(a: Bigi, b: Bigi) -> Bigi:
    return _bitwise(a, b, operator.or_)


def bigi_xor(a: Bigi, b: Bigi) -> Bigi:
    return _bitwise(a, b, operator.xor)


def bigi_shift(x: Bigi, shift: int) -> Bigi:
    """Shift left by `shift` bits; negative shifts right, preserving sign."""
    radix = x.radix
    width: int = radix.width
    bit_shift: int = shift % width
    limb_shift: int = shift // width
    limbs: tuple[int, ...] = x.limbs
    len_x: int = len(limbs)
    length: int = len_x + limb_shift + (0 if bit_shift == 0 else 1)
    if length <= 0:
        return from_normalized([top_ext(x)], radix)
    if bit_shift == 0:
        if limb_shift >= 0:
            return from_unnormalized([0] * limb_shift + list(limbs), radix)
        return from_unnormalized(limbs[-limb_shift:], radix)
    out: list[int] = [0] * length
    i: int = 0
    j: int = -limb_shift
    reg: int = 0
    if j > 0:
        reg = limbs[j - 1] << bit_shift
    else:
        i = limb_shift
        j = 0
    while j < len_x:
        reg = (reg >> width) | (limbs[j] << bit_shift)
        out[i] = reg & radix.mask
        i += 1
        j += 1
    reg = (reg >> width) | (top_ext(x) << bit_shift)
    out[i] = reg & radix.mask
    return from_unnormalized(out, radix)
