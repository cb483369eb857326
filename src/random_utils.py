"""
Deterministic random stream for wallpaper generation.
48-bit linear congruential generator, bit-compatible with java.util.Random so a seed
gives the same sequence on every platform (and the same sequence the launcher used).
"""
from typing import MutableSequence, TypeVar

T = TypeVar("T")

_MULTIPLIER = 0x5DEECE66D
_ADDEND = 0xB
_MASK = (1 << 48) - 1
_FLOAT_UNIT = 1.0 / (1 << 24)
_DOUBLE_UNIT = 1.0 / (1 << 53)


def _to_int32(value: int) -> int:
    value &= 0xFFFFFFFF
    return value - (1 << 32) if value & 0x80000000 else value


class RandomStream:
    """
    Seedable stream of ints, floats and booleans.
    One instance per generation; thread it explicitly through every drawing call.
    """

    def __init__(self, seed: int) -> None:
        self.seed = seed
        self._state = (seed ^ _MULTIPLIER) & _MASK

    def _next(self, bits: int) -> int:
        self._state = (self._state * _MULTIPLIER + _ADDEND) & _MASK
        return _to_int32(self._state >> (48 - bits))

    def next_int(self, bound: int | None = None) -> int:
        """Signed 32-bit int, or an int in [0, bound) when bound is given."""
        if bound is None:
            return self._next(32)
        if bound <= 0:
            raise ValueError(f"bound must be positive, got {bound}")
        if bound & (bound - 1) == 0:
            # Power of two: take the high bits
            return (bound * self._next(31)) >> 31
        while True:
            u = self._next(31)
            r = u % bound
            # Reject the tail that would bias the modulo (int32 overflow check)
            if _to_int32(u - r + bound - 1) >= 0:
                return r

    def next_float(self) -> float:
        """Float in [0, 1) with 24 bits of precision."""
        return self._next(24) * _FLOAT_UNIT

    def next_double(self) -> float:
        """Float in [0, 1) with 53 bits of precision."""
        return ((self._next(26) << 27) + self._next(27)) * _DOUBLE_UNIT

    def next_bool(self) -> bool:
        return self._next(1) != 0

    def uniform(self, base: float, span: float) -> float:
        """base + next_float() * span; the shape of every extent in the patterns."""
        return base + self.next_float() * span

    def shuffle(self, items: MutableSequence[T]) -> None:
        """In-place Fisher-Yates shuffle, last index first."""
        for i in range(len(items) - 1, 0, -1):
            j = self.next_int(i + 1)
            items[i], items[j] = items[j], items[i]
