"""Linear congruential pseudo-random numbers."""

from __future__ import annotations

import secrets
from collections.abc import Iterator

LCG_A = 1103515245
LCG_C = 12345
LCG_M = 2147483648

_INT_MIN = -2147483648


def _to_int32(number: int) -> int:
    number &= 0xFFFFFFFF
    return number - (1 << 32) if number & 0x80000000 else number


def rand_lcg(x: int) -> int:
    """One LCG step in 32-bit signed arithmetic, folded to a non-negative value."""
    value = _to_int32(LCG_A * x + LCG_C)
    if value == _INT_MIN:
        return 0
    return abs(value)


class Random:
    """A seeded generator producing values in ``[0, 2**31)``."""

    def __init__(self, seed: int | None = None) -> None:
        if seed is None:
            seed = secrets.randbits(31) + 1
        self._state = _to_int32(seed)

    def rand(self) -> int:
        """Advance the generator and return the new value."""
        self._state = rand_lcg(self._state)
        return self._state

    def __iter__(self) -> Iterator[int]:
        while True:
            yield self.rand()