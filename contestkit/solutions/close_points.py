"""A large set of points whose pairwise distances stay within a limit.

Random restarts of a greedy selection are run until a time budget is spent;
the largest set found is kept.
"""

from __future__ import annotations

import random
import sys
import time
from typing import Iterable, Sequence


def largest_close_set(
    points: Iterable[tuple[int, int]],
    d: int,
    time_budget: float | None = None,
    rng: random.Random | None = None,
) -> list[int]:
    """1-based indices of points all within distance ``d`` of each other.

    The default budget is 15 ms of processor time per point; at least one
    greedy pass is always made.
    """
    pts = list(points)
    n = len(pts)
    if n == 0:
        return []
    rng = rng or random.Random()
    budget = 0.015 * n if time_budget is None else time_budget
    limit = d * d
    dist2 = [[(xi - xj) ** 2 + (yi - yj) ** 2 for xj, yj in pts] for xi, yi in pts]

    order = list(range(n))
    best: list[int] = []
    start = time.process_time()
    while True:
        rng.shuffle(order)
        current: list[int] = []
        for i in order:
            row = dist2[i]
            if all(row[j] <= limit for j in current):
                current.append(i)
        if len(current) > len(best):
            best = current
        if len(best) == n or time.process_time() - start > budget:
            break
    return [i + 1 for i in best]


def main(argv: Sequence[str] | None = None) -> int:
    """Read ``n d`` and the points from standard input; print the chosen set."""
    tokens = list(map(int, sys.stdin.read().split()))
    n, d = tokens[0], tokens[1]
    points = [(tokens[2 + 2 * i], tokens[3 + 2 * i]) for i in range(n)]
    chosen = largest_close_set(points, d)
    sys.stdout.write(f"{len(chosen)}\n{' '.join(map(str, chosen))}\n")
    return 0


if __name__ == "__main__":
    sys.exit(main())