"""A reproducible pseudo-random generator for test generators.

The generator is a 48-bit linear congruential generator, so a given seed
yields the same values on every platform.  Integer requests below 2**31 use
31-bit draws; larger requests and inclusive ranges use 63-bit draws.
"""

from __future__ import annotations

import math
from typing import Iterable, MutableSequence, Sequence, TypeVar

from contestkit.pattern import Pattern

T = TypeVar("T")

INT_MAX = 2**31 - 1
LLONG_MAX = 2**63 - 1

_MULTIPLIER = 0x5DEECE66D
_ADDEND = 0xB
_MASK = (1 << 48) - 1
_U64 = (1 << 64) - 1
_INITIAL_SEED = 3905348978240129619
_WEIGHT_LIMIT = 25


def _as_unsigned_char_code(byte: int) -> int:
    """Value of a signed byte widened to a 32-bit unsigned integer."""
    return byte if byte < 128 else byte - 256 + (1 << 32)


class Random:
    """Deterministic random source with uniform and weighted draws."""

    def __init__(self, version: int = 1) -> None:
        if version not in (0, 1):
            raise ValueError("Random generator version is expected to be 0 or 1.")
        self.version = version
        self._seed = _INITIAL_SEED

    def set_seed(self, seed: int) -> None:
        """Seed the generator from an integer."""
        self._seed = (seed ^ _MULTIPLIER) & _MASK

    def set_seed_from_args(self, args: Iterable[str]) -> None:
        """Seed the generator from command-line arguments (program name excluded)."""
        seed = _INITIAL_SEED
        for arg in args:
            for byte in arg.encode("utf-8"):
                seed = (seed * _MULTIPLIER + _as_unsigned_char_code(byte) + _ADDEND) & _U64
            seed = (seed + _MULTIPLIER // _ADDEND) & _U64
        self._seed = seed & _MASK

    def _next_bits(self, bits: int) -> int:
        if bits <= 48:
            self._seed = (self._seed * _MULTIPLIER + _ADDEND) & _MASK
            return self._seed >> (48 - bits)
        if bits > 63:
            raise ValueError("Random._next_bits: bits must be less than 64")
        lower = 31 if self.version == 0 else 32
        high = self._next_bits(31) << 32
        return high ^ self._next_bits(lower)

    def _next_small(self, n: int) -> int:
        if n & -n == n:
            return (n * self._next_bits(31)) >> 31
        limit = INT_MAX // n * n
        while True:
            bits = self._next_bits(31)
            if bits < limit:
                return bits % n

    def _next_large(self, n: int) -> int:
        if n <= 0:
            raise ValueError("Random.next: n must be positive")
        if n > LLONG_MAX:
            raise ValueError("Random.next: n must not exceed 2**63 - 1")
        limit = LLONG_MAX // n * n
        while True:
            bits = self._next_bits(63)
            if bits < limit:
                return bits % n

    def next_int(self, n: int) -> int:
        """Uniform integer in ``[0, n - 1]``."""
        if n <= 0:
            raise ValueError("Random.next_int: n must be positive")
        if n <= INT_MAX:
            return self._next_small(n)
        return self._next_large(n)

    def next_range(self, low: int, high: int) -> int:
        """Uniform integer in ``[low, high]``."""
        if low > high:
            raise ValueError("Random.next_range: low can't exceed high")
        return self._next_large(high - low + 1) + low

    def next_float(self) -> float:
        """Uniform real in ``[0, 1)`` with 53 random bits."""
        return ((self._next_bits(26) << 27) + self._next_bits(27)) / float(1 << 53)

    def next_float_range(self, low: float, high: float) -> float:
        """Uniform real in ``[low, high)``."""
        return (high - low) * self.next_float() + low

    def next_pattern(self, ptrn: str) -> str:
        """Random string matching the pattern ``ptrn``."""
        return Pattern(ptrn).next(self)

    def any(self, items: Sequence[T]) -> T:
        """Uniformly chosen element of a non-empty sequence."""
        seq = items if isinstance(items, Sequence) else list(items)
        if not seq:
            raise ValueError("Random.any: the sequence must not be empty")
        return seq[self._next_large(len(seq))]

    def _wnext_small(self, n: int, weight: int) -> int:
        if abs(weight) < _WEIGHT_LIMIT:
            result = self._next_small(n)
            for _ in range(weight):
                result = max(result, self._next_small(n))
            for _ in range(-weight):
                result = min(result, self._next_small(n))
            return result
        if weight > 0:
            p = math.pow(self.next_float(), 1.0 / (weight + 1))
        else:
            p = 1 - math.pow(self.next_float(), 1.0 / (-weight + 1))
        return int(n * p)

    def _wnext_large(self, n: int, weight: int) -> int:
        if n <= 0:
            raise ValueError("Random.wnext: n must be positive")
        if abs(weight) < _WEIGHT_LIMIT:
            result = self._next_large(n)
            for _ in range(weight):
                result = max(result, self._next_large(n))
            for _ in range(-weight):
                result = min(result, self._next_large(n))
            return result
        if weight > 0:
            p = math.pow(self.next_float(), 1.0 / (weight + 1))
        else:
            p = math.pow(self.next_float(), -weight + 1)
        return min(max(int(float(n) * p), 0), n - 1)

    def wnext(self, n: int, weight: int = 0) -> int:
        """Weighted integer in ``[0, n - 1]``.

        A weight ``w > 0`` gives the maximum of ``w + 1`` draws, ``w < 0`` the
        minimum of ``-w + 1`` draws; large weights use a closed form.
        """
        if n <= 0:
            raise ValueError("Random.wnext: n must be positive")
        if n <= INT_MAX:
            return self._wnext_small(n, weight)
        return self._wnext_large(n, weight)

    def wnext_range(self, low: int, high: int, weight: int = 0) -> int:
        """Weighted integer in ``[low, high]``."""
        if low > high:
            raise ValueError("Random.wnext_range: low can't exceed high")
        return self.wnext(high - low + 1, weight) + low

    def wnext_float(self, n: float = 1.0, weight: int = 0) -> float:
        """Weighted real in ``[0, n)``."""
        if n <= 0:
            raise ValueError("Random.wnext_float: n must be positive")
        if abs(weight) < _WEIGHT_LIMIT:
            result = self.next_float()
            for _ in range(weight):
                result = max(result, self.next_float())
            for _ in range(-weight):
                result = min(result, self.next_float())
            return n * result
        if weight > 0:
            p = math.pow(self.next_float(), 1.0 / (weight + 1))
        else:
            p = math.pow(self.next_float(), -weight + 1)
        return n * p

    def wany(self, items: Sequence[T], weight: int) -> T:
        """Element of a non-empty sequence chosen with a weighted index."""
        seq = items if isinstance(items, Sequence) else list(items)
        if not seq:
            raise ValueError("Random.wany: the sequence must not be empty")
        return seq[self._wnext_large(len(seq), weight)]

    def shuffle(self, items: MutableSequence[T]) -> None:
        """Shuffle ``items`` in place, reproducibly for a given seed."""
        for i in range(1, len(items)):
            j = self.next_int(i + 1)
            items[i], items[j] = items[j], items[i]