"""Conversions between host numbers and Bigi."""

from __future__ import annotations

import math

from .core import Bigi, from_normalized
from .errors import ConstructionError, PrecisionLossError
from .radix import DEFAULT_RADIX, Radix


def bigi_from_integer(n: int | float, radix: Radix = DEFAULT_RADIX) -> Bigi:
    """Construct a normalized Bigi from an integer value."""
    if isinstance(n, float):
        if not math.isfinite(n) or math.floor(n) != n:
            raise ConstructionError(f"bigi_from_integer needs an integer value, got {n!r}")
        n = int(n)
    elif isinstance(n, bool) or not isinstance(n, int):
        raise ConstructionError(f"bigi_from_integer needs a number, got {type(n).__name__}")
    base: int = radix.base
    limbs: list[int] = []
    if n < 0:
        while n < -radix.half:
            limbs.append(n % base)
            n = n // base
    else:
        while n >= radix.half:
            limbs.append(n % base)
            n = n // base
    limbs.append(n % base)
    return from_normalized(limbs, radix)


def bigi_to_float(x: Bigi) -> float:
    """Convert to a host float.

    Raises PrecisionLossError when significant bits would be lost; callers
    use that to test whether a value is exactly representable.
    """
    base: int = x.radix.base
    limbs: tuple[int, ...] = x.limbs
    i: int = len(limbs) - 1
    n: float = 0.0 if limbs[i] < x.radix.half else -1.0
    while i >= 0:
        d: int = limbs[i]
        acc: float = n * base + d
        if not math.isfinite(acc) or math.floor(acc / base) != n or acc % base != d:
            raise PrecisionLossError(f"{x!r} has no exact float representation")
        n = acc
        i -= 1
    return n


def bigi_fits_float(x: Bigi) -> bool:
    try:
        bigi_to_float(x)
    except PrecisionLossError:
        return False
    return True


def bigi_to_int(x: Bigi) -> int:
    """Convert to an exact Python int."""
    limbs: tuple[int, ...] = x.limbs
    i: int = len(limbs) - 1
    n: int = 0 if limbs[i] < x.radix.half else -1
    while i >= 0:
        n = (n << x.radix.width) + limbs[i]
        i -= 1
    return n
