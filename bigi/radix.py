"""Limb-width configuration."""

from __future__ import annotations

from dataclasses import dataclass, field

MIN_WIDTH: int = 2
MAX_WIDTH: int = 30

DEFAULT_WIDTH: int = 14
DEBUG_WIDTH: int = 5


@dataclass(frozen=True)
class Radix:
    """Width W of a limb and the constants derived from it."""

    width: int
    base: int = field(init=False, repr=False)
    half: int = field(init=False, repr=False)
    mask: int = field(init=False, repr=False)

    def __post_init__(self) -> None:
        if isinstance(self.width, bool) or not isinstance(self.width, int):
            raise ValueError("limb width must be an integer")
        if self.width < MIN_WIDTH or self.width > MAX_WIDTH:
            raise ValueError(
                f"limb width must be between {MIN_WIDTH} and {MAX_WIDTH}, got {self.width}"
            )
        base: int = 1 << self.width
        object.__setattr__(self, "base", base)
        object.__setattr__(self, "half", base >> 1)
        object.__setattr__(self, "mask", base - 1)

    def ext(self, top: int) -> int:
        """Sign-extension limb implied by a top limb."""
        if top < self.half:
            return 0
        return self.mask


DEFAULT_RADIX: Radix = Radix(DEFAULT_WIDTH)
