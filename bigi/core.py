"""Bigi representation and normalization.

Bigi integers are sequences of limbs, each a W-bit unsigned number. The
encoding is little-endian two's complement: limb 0 is the least significant,
and the sign is the top bit of the last limb. Sequences are kept minimal, so
each value has exactly one representation.

With W = 2, the numbers -10 to 10 are:

    -10 -> [2, 1, 3]      1 -> [1]
     -9 -> [3, 1, 3]      2 -> [2, 0]
     -8 -> [0, 2]         3 -> [3, 0]
     -7 -> [1, 2]         4 -> [0, 1]
     -6 -> [2, 2]         5 -> [1, 1]
     -5 -> [3, 2]         6 -> [2, 1]
     -4 -> [0, 3]         7 -> [3, 1]
     -3 -> [1, 3]         8 -> [0, 2, 0]
     -2 -> [2]            9 -> [1, 2, 0]
     -1 -> [3]           10 -> [2, 2, 0]
      0 -> [0]
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence

from .errors import ConstructionError
from .radix import DEFAULT_RADIX, Radix


@dataclass(frozen=True, eq=False)
class Bigi:
    """Immutable arbitrary-precision integer.

    The constructor trusts `limbs` to be normalized; use `bigi_from_limbs`
    to validate and normalize an arbitrary sequence.
    """

    limbs: tuple[int, ...]
    radix: Radix

    def __eq__(self, other: object) -> bool:
        return (
            isinstance(other, Bigi)
            and self.radix == other.radix
            and self.limbs == other.limbs
        )

    def __hash__(self) -> int:
        return hash(("bigi", self.radix.width, self.limbs))

    def __str__(self) -> str:
        from .convert import bigi_to_int
        from .strings import bigi_to_string

        # widths with base/2 <= 10 cannot divide by ten in one limb
        if self.radix.half <= 10:
            return str(bigi_to_int(self))
        return bigi_to_string(self)

    def __repr__(self) -> str:
        return f"Bigi({list(self.limbs)!r}, width={self.radix.width})"


def normalize_limbs(limbs: Sequence[int], radix: Radix) -> tuple[int, ...]:
    """Strip redundant top limbs, keeping at least one."""
    n: int = len(limbs)
    last: int = limbs[n - 1]
    if last < radix.half:
        while n >= 2 and last == 0 and limbs[n - 2] < radix.half:
            n -= 1
            last = limbs[n - 1]
    else:
        while n >= 2 and last == radix.mask and limbs[n - 2] >= radix.half:
            n -= 1
            last = limbs[n - 1]
    return tuple(limbs[:n])


def from_normalized(limbs: Sequence[int], radix: Radix) -> Bigi:
    """Wrap a limb sequence already known to be normalized."""
    return Bigi(tuple(limbs), radix)


def from_unnormalized(limbs: Sequence[int], radix: Radix) -> Bigi:
    return Bigi(normalize_limbs(limbs, radix), radix)


def bigi_from_limbs(limbs: Sequence[int], radix: Radix = DEFAULT_RADIX) -> Bigi:
    """Build a Bigi from an explicit, possibly unnormalized, limb sequence."""
    if len(limbs) == 0:
        raise ConstructionError("limb sequence must not be empty")
    for limb in limbs:
        if isinstance(limb, bool) or not isinstance(limb, int):
            raise ConstructionError(f"limb must be an integer, got {limb!r}")
        if limb < 0 or limb >= radix.base:
            raise ConstructionError(
                f"limb {limb} out of range for width {radix.width}"
            )
    return from_unnormalized(limbs, radix)


def top_ext(x: Bigi) -> int:
    """Sign-extension limb of a normalized Bigi."""
    return x.radix.ext(x.limbs[-1])


def same_radix(a: Bigi, b: Bigi) -> Radix:
    if a.radix != b.radix:
        raise ValueError(
            f"cannot combine width {a.radix.width} with width {b.radix.width}"
        )
    return a.radix
