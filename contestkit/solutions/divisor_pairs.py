"""Sums of divisor-count products over all splittings of n into two parts.

For every n the value is the sum of d(k) * d(n - k) for 0 < k < n, where d is
the number of divisors.  Queries ask for the first position of the maximum in
a range of n.
"""

from __future__ import annotations

import sys
from typing import Sequence

import numpy as np

_DIRECT_LIMIT = 4096


def divisor_counts(limit: int) -> np.ndarray:
    """Number of divisors of every integer below ``limit`` (index 0 holds 0)."""
    if limit < 0:
        raise ValueError("limit must be non-negative")
    counts = np.zeros(limit, dtype=np.int64)
    for i in range(1, limit):
        counts[i::i] += 1
    return counts


def pair_sums(limit: int) -> np.ndarray:
    """Self-convolution of the divisor counts, truncated to ``limit`` entries."""
    counts = divisor_counts(limit)
    if limit == 0:
        return counts
    if limit <= _DIRECT_LIMIT:
        return np.convolve(counts, counts)[:limit].astype(np.int64)
    size = 1
    while size < 2 * limit - 1:
        size <<= 1
    spectrum = np.fft.rfft(counts.astype(np.float64), size)
    product = np.fft.irfft(spectrum * spectrum, size)[:limit]
    return np.rint(product).astype(np.int64)


def best_in_range(sums: Sequence[int], left: int, right: int) -> tuple[int, int]:
    """First index of the maximum of ``sums[left..right]`` and that maximum."""
    if left < 0 or right < left or right >= len(sums):
        raise ValueError(f"invalid range [{left}, {right}]")
    window = np.asarray(sums[left : right + 1])
    pos = int(np.argmax(window)) + left
    return pos, int(sums[pos])


def main(argv: Sequence[str] | None = None) -> int:
    """Answer range queries read from standard input."""
    tokens = sys.stdin.read().split()
    q = int(tokens[0])
    queries = [(int(tokens[1 + 2 * i]), int(tokens[2 + 2 * i])) for i in range(q)]
    limit = max((r for _, r in queries), default=0) + 1
    sums = pair_sums(limit)
    out = []
    for left, right in queries:
        pos, value = best_in_range(sums, left, right)
        out.append(f"{pos} {value}")
    if out:
        sys.stdout.write("\n".join(out) + "\n")
    return 0


if __name__ == "__main__":
    sys.exit(main())