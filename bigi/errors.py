"""Bigi diagnostics."""

from __future__ import annotations


class BigiError(Exception):
    """Base error for Bigi construction and arithmetic."""

    def __init__(self, msg: str):
        super().__init__(msg)
        self.msg = msg


class ConstructionError(BigiError):
    """Input cannot be turned into a Bigi (non-finite, non-integral, bad limbs)."""


class PrecisionLossError(BigiError):
    """Value has no exact host float representation."""


class UnsupportedDivisorError(BigiError):
    """Divisor needs more than one limb."""


class DivisionByZeroError(BigiError, ZeroDivisionError):
    """Divisor is zero."""
