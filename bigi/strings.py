"""Radix formatting."""

from __future__ import annotations

from .arith import bigi_neg, nonneg_quorem
from .compare import bigi_is_zero, bigi_nonneg
from .core import Bigi, from_normalized

DIGITS: str = "0123456789abcdefghijklmnopqrstuvwxyz"


def bigi_to_string(x: Bigi, radix: int = 10) -> str:
    """Format x in the given radix (2 to 36), lowercase digits."""
    if isinstance(radix, bool) or not isinstance(radix, int) or radix < 2 or radix > 36:
        raise ValueError(f"radix must be an integer between 2 and 36, got {radix!r}")
    # the radix is used as a single-limb divisor
    if radix >= x.radix.half:
        raise ValueError(f"radix {radix} is too large for limb width {x.radix.width}")
    if bigi_is_zero(x):
        return "0"
    sign: str = ""
    if not bigi_nonneg(x):
        sign = "-"
        x = bigi_neg(x)
    divisor = from_normalized([radix], x.radix)
    digits: list[str] = []
    while not bigi_is_zero(x):
        x, rem = nonneg_quorem(x, divisor)
        digits.append(DIGITS[rem.limbs[0]])
    digits.reverse()
    return sign + "".join(digits)
