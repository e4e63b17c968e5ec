"""Bigi: arbitrary-precision two's-complement integers. Public API."""

from __future__ import annotations

from .arith import (
    bigi_abs,
    bigi_add,
    bigi_divmod,
    bigi_mul,
    bigi_neg,
    bigi_quo,
    bigi_rem,
    bigi_sub,
)
from .bitwise import bigi_and, bigi_not, bigi_or, bigi_shift, bigi_xor
from .compare import (
    bigi_compare,
    bigi_eq,
    bigi_ge,
    bigi_gt,
    bigi_is_zero,
    bigi_le,
    bigi_lt,
    bigi_nonneg,
)
from .convert import bigi_fits_float, bigi_from_integer, bigi_to_float, bigi_to_int
from .core import Bigi, bigi_from_limbs, normalize_limbs
from .errors import (
    BigiError,
    ConstructionError,
    DivisionByZeroError,
    PrecisionLossError,
    UnsupportedDivisorError,
)
from .radix import DEBUG_WIDTH, DEFAULT_RADIX, DEFAULT_WIDTH, MAX_WIDTH, MIN_WIDTH, Radix
from .strings import bigi_to_string

__all__ = [
    "Bigi",
    "BigiError",
    "ConstructionError",
    "DEBUG_WIDTH",
    "DEFAULT_RADIX",
    "DEFAULT_WIDTH",
    "DivisionByZeroError",
    "MAX_WIDTH",
    "MIN_WIDTH",
    "PrecisionLossError",
    "Radix",
    "UnsupportedDivisorError",
    "bigi_abs",
    "bigi_add",
    "bigi_and",
    "bigi_compare",
    "bigi_divmod",
    "bigi_eq",
    "bigi_fits_float",
    "bigi_from_integer",
    "bigi_from_limbs",
    "bigi_ge",
    "bigi_gt",
    "bigi_is_zero",
    "bigi_le",
    "bigi_lt",
    "bigi_mul",
    "bigi_neg",
    "bigi_nonneg",
    "bigi_not",
    "bigi_or",
    "bigi_quo",
    "bigi_rem",
    "bigi_shift",
    "bigi_sub",
    "bigi_to_float",
    "bigi_to_int",
    "bigi_to_string",
    "bigi_xor",
    "normalize_limbs",
]
