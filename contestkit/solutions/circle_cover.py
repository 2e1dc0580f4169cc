"""Fewest arcs that cover a circle of ``n`` positions.

Arcs are given as ``(l, r)`` and wrap around when ``l > r``.  The circle is
unrolled twice and binary lifting finds, for every start, how many greedy
jumps are needed to get all the way round.
"""

from __future__ import annotations

import sys
from typing import Iterable, Sequence

import numpy as np


def min_cover(n: int, intervals: Iterable[tuple[int, int]]) -> int | None:
    """Least number of arcs covering positions ``1..n``, or ``None``."""
    if n <= 0:
        raise ValueError("n must be positive")
    pairs = np.array(list(intervals), dtype=np.int64).reshape(-1, 2)
    ls, rs = pairs[:, 0], pairs[:, 1]
    if ((ls < 1) | (ls > n) | (rs < 1) | (rs > n)).any():
        raise ValueError(f"arc ends must lie in 1..{n}")

    end = 2 * n + 1
    reach = np.arange(end + 1, dtype=np.int64)
    straight = ls <= rs
    wrapped = ~straight
    np.maximum.at(reach, ls[straight], rs[straight] + 1)
    np.maximum.at(reach, ls[straight] + n, rs[straight] + n + 1)
    if wrapped.any():
        np.maximum.at(reach, np.array([1]), np.array([rs[wrapped].max() + 1]))
        np.maximum.at(reach, ls[wrapped], rs[wrapped] + n + 1)
        np.maximum.at(reach, ls[wrapped] + n, np.full(int(wrapped.sum()), end))
    reach = np.maximum.accumulate(reach)

    levels = [reach]
    for _ in range(1, max(1, end.bit_length())):
        prev = levels[-1]
        levels.append(prev[prev])

    starts = np.arange(1, n + 1, dtype=np.int64)
    targets = starts + n
    x = starts.copy()
    jumps = np.zeros(n, dtype=np.int64)
    for level in reversed(range(len(levels))):
        nxt = levels[level][x]
        move = nxt < targets
        jumps[move] += 1 << level
        x = np.where(move, nxt, x)

    done = reach[x] >= targets
    if not done.any():
        return None
    return int(jumps[done].min()) + 1


def main(argv: Sequence[str] | None = None) -> int:
    """Read ``n k`` and the arcs from standard input; print the answer."""
    tokens = list(map(int, sys.stdin.read().split()))
    n, k = tokens[0], tokens[1]
    arcs = [(tokens[2 + 2 * i], tokens[3 + 2 * i]) for i in range(k)]
    answer = min_cover(n, arcs)
    sys.stdout.write("impossible\n" if answer is None else f"{answer}\n")
    return 0


if __name__ == "__main__":
    sys.exit(main())