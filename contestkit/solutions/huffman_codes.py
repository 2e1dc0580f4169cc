"""Expected code length of an optimal prefix code for repeated symbols.

Each of ``n`` positions independently holds one of four symbols with
probabilities ``a, b, c, d``.  Equal-probability words are grouped with their
multiplicities so the Huffman merge runs on groups rather than single words.
"""

from __future__ import annotations

import heapq
import sys
from math import comb
from typing import Sequence


def expected_length(n: int, a: float, b: float, c: float, d: float) -> float:
    """Expected length of a Huffman code over all words of length ``n``."""
    if n < 0:
        raise ValueError("n must be non-negative")
    heap: list[tuple[float, int]] = []
    for i in range(n + 1):
        for j in range(n - i + 1):
            for k in range(n - i - j + 1):
                prob = a**i * b**j * c**k * d ** (n - i - j - k)
                count = comb(n, i) * comb(n - i, j) * comb(n - i - j, k)
                heap.append((prob, count))
    heapq.heapify(heap)

    total = 0.0
    while True:
        prob, count = heapq.heappop(heap)
        if count > 1:
            pairs = count // 2
            total += pairs * 2 * prob
            heapq.heappush(heap, (prob * 2, pairs))
            if count % 2:
                heapq.heappush(heap, (prob, 1))
        else:
            if not heap:
                break
            other_prob, other_count = heapq.heappop(heap)
            merged = prob + other_prob
            total += merged
            heapq.heappush(heap, (merged, 1))
            if other_count > 1:
                heapq.heappush(heap, (other_prob, other_count - 1))
    return total


def main(argv: Sequence[str] | None = None) -> int:
    """Read ``n a b c d`` from standard input and print the expected length."""
    tokens = sys.stdin.read().split()
    n = int(tokens[0])
    a, b, c, d = map(float, tokens[1:5])
    sys.stdout.write(f"{expected_length(n, a, b, c, d):.10f}\n")
    return 0


if __name__ == "__main__":
    sys.exit(main())