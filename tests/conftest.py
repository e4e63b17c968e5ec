"""Pytest configuration for the Bigi test suite."""

import random

import pytest

from bigi.radix import Radix

SEED = 0xB161

# Widths exercised by the randomized sweeps: the narrowest allowed, the
# self-check debug width, the default, and the widest.
WIDTHS = [2, 5, 14, 30]

MAX_BITS = 64


def weighted_int(rng: random.Random, radix: Radix) -> int:
    """Generate an integer weighted toward limb-boundary cases."""
    r: int = rng.randint(0, 99)
    if r < 30:
        # 30%: within a few of +-base**k / 2, where sign limbs appear or vanish
        k = rng.randint(1, max(1, MAX_BITS // radix.width))
        edge = (radix.base**k) // 2
        return rng.choice([edge, -edge]) + rng.randint(-2, 1)
    if r < 45:
        # 15%: single-limb magnitudes
        return rng.randint(-radix.base, radix.base)
    if r < 55:
        # 10%: small specials
        return rng.choice([0, 1, -1, 2, -2, radix.mask, -radix.mask, radix.half, -radix.half])
    # 45%: fully random up to MAX_BITS
    n = rng.getrandbits(rng.randint(1, MAX_BITS))
    if rng.randint(0, 1) == 1:
        n = -n
    return n


@pytest.fixture
def rng() -> random.Random:
    return random.Random(SEED)


@pytest.fixture(params=WIDTHS, ids=lambda w: f"w{w}")
def radix(request) -> Radix:
    return Radix(request.param)


@pytest.fixture
def gen(rng: random.Random, radix: Radix):
    """Draw weighted integers for the current width."""
    return lambda: weighted_int(rng, radix)
