"""Deepest nesting of quotation marks that a row of character counts allows.

The input lists the lengths of consecutive runs; boundaries between runs
restrict where nested quotation marks may be placed.  The deepest nesting
``k`` that fits is searched from the largest possible value downwards.
"""

from __future__ import annotations

import sys
from itertools import accumulate
from typing import Sequence


def _fits(k: int, m: int, boundaries: list[int]) -> bool:
    width = 2 * k + 1
    dp = [[False] * width for _ in range(m + 1)]
    dp[k][(k - 1) * 2] = True
    for i in range(k, m - k + 1):
        row = dp[i]
        following = dp[i + 1]
        following[1] = following[1] or row[0]
        following[0] = following[0] or row[1] or row[2]
        for j in range(2, k + 1):
            if boundaries[i + j] != boundaries[i + 1]:
                break
            target = dp[i + j]
            target[(j - 1) * 2] = target[(j - 1) * 2] or row[j * 2] or row[j * 2 - 1]
            target[j * 2 - 1] = target[j * 2 - 1] or row[j * 2 - 3]
    if k > 1 and dp[m - k][(k - 1) * 2 - 1]:
        return True
    return k == 1 and m == 2


def max_depth(counts: Sequence[int]) -> int | None:
    """The deepest possible nesting, or ``None`` when there is none."""
    runs = list(counts)
    if not runs:
        raise ValueError("at least one count is required")
    if any(c < 0 for c in runs):
        raise ValueError("counts must be non-negative")
    limit = min(runs[0], runs[-1])
    prefix = list(accumulate(runs))
    m = prefix[-1]
    marks = [0] * (m + 2)
    for p in prefix:
        marks[p + 1] += 1
    boundaries = list(accumulate(marks))
    for k in range(limit, 0, -1):
        if _fits(k, m, boundaries):
            return k
    return None


def main(argv: Sequence[str] | None = None) -> int:
    """Read ``n`` and the counts from standard input; print the answer."""
    tokens = sys.stdin.read().split()
    n = int(tokens[0])
    depth = max_depth([int(t) for t in tokens[1 : 1 + n]])
    sys.stdout.write("no quotation\n" if depth is None else f"{depth}\n")
    return 0


if __name__ == "__main__":
    sys.exit(main())