"""Optimal folding of a rectangle: the final area and the fold positions.

For a ``w`` by ``h`` sheet folded ``n`` times the area after each optimal fold
follows a quadratic recurrence; the fold lengths are products of the ratios
chosen at every step.
"""

from __future__ import annotations

import math
import sys
from itertools import accumulate
from typing import Sequence


def _log(x: float) -> float:
    if x > 0:
        return math.log(x)
    if x == 0:
        return -math.inf
    return math.nan


def solve(w: int, h: int, n: int) -> tuple[float, list[float]]:
    """Final area and the first ``min(n, 10)`` fold lengths."""
    if w <= 0:
        raise ValueError("w must be positive")
    if n < 0:
        raise ValueError("n must be non-negative")
    p = h / w
    c = ((p + 1) * 0.5) ** 2
    a0 = ((p - 1) * 0.5) ** 2 - p * p * 0.5
    b = (p * p - 1) * 0.5

    area = c
    ratios = []
    for _ in range(n):
        a = a0 + area
        r = -b / (2 * a)
        ratios.append(r)
        area = c + r * (b + r * a)

    suffix = list(accumulate(_log(r) for r in reversed(ratios)))[::-1]
    log_w = _log(w)
    lengths = []
    for s in suffix[: min(n, 10)]:
        total = log_w + s
        lengths.append(math.nan if math.isnan(total) else math.exp(total))
    return area * w * w, lengths


def main(argv: Sequence[str] | None = None) -> int:
    """Read ``w h n`` from standard input and print the area and fold lengths."""
    w, h, n = map(int, sys.stdin.read().split()[:3])
    area, lengths = solve(w, h, n)
    lines = [f"{area:.10f}", *(f"{x:.10f}" for x in lengths)]
    sys.stdout.write("\n".join(lines) + "\n")
    return 0


if __name__ == "__main__":
    sys.exit(main())