"""Splitting branches into groups to minimise communication cost.

Every branch's weight is its distance to the headquarters plus the distance
back.  Branches are split into ``s`` groups; a group of ``k`` branches costs
the sum of their weights times ``k - 1``.
"""

from __future__ import annotations

import heapq
import sys
from itertools import accumulate
from typing import Iterable, Sequence

INF = 1 << 60


def _distances(n: int, start: int, adj: list[list[tuple[int, int]]]) -> list[int]:
    dist = [-1] * (n + 1)
    dist[start] = 0
    heap = [(0, start)]
    while heap:
        d, u = heapq.heappop(heap)
        if d != dist[u]:
            continue
        for v, w in adj[u]:
            nd = d + w
            if dist[v] == -1 or dist[v] > nd:
                dist[v] = nd
                heapq.heappush(heap, (nd, v))
    return dist


def min_cost(n: int, b: int, s: int, roads: Iterable[tuple[int, int, int]]) -> int:
    """Minimal total cost of splitting branches 1..b into ``s`` groups.

    Node ``b + 1`` is the headquarters; roads are directed ``(u, v, w)``.
    Returns ``INF`` when no split into ``s`` groups exists.
    """
    if not 1 <= b + 1 <= n:
        raise ValueError("headquarters node out of range")
    forward: list[list[tuple[int, int]]] = [[] for _ in range(n + 1)]
    backward: list[list[tuple[int, int]]] = [[] for _ in range(n + 1)]
    for u, v, w in roads:
        forward[u].append((v, w))
        backward[v].append((u, w))

    hq = b + 1
    there = _distances(n, hq, forward)
    back = _distances(n, hq, backward)
    if any(there[i] < 0 or back[i] < 0 for i in range(1, b + 1)):
        raise ValueError("some branch cannot reach the headquarters")

    vals = sorted(there[i] + back[i] for i in range(1, b + 1))
    prefix = [0, *accumulate(vals)]

    prev = [0] + [INF] * b
    for j in range(1, s + 1):
        cur = [0] * (b + 1)
        for i in range(1, b + 1):
            best = INF
            for k in range(1, i // j + 1):
                cost = prev[i - k] + (prefix[i] - prefix[i - k]) * (k - 1)
                if cost < best:
                    best = cost
            cur[i] = best
        prev = cur
    return prev[b]


def main(argv: Sequence[str] | None = None) -> int:
    """Read the road network from standard input and print the minimal cost."""
    tokens = list(map(int, sys.stdin.read().split()))
    n, b, s, r = tokens[:4]
    roads = [tuple(tokens[4 + 3 * i : 7 + 3 * i]) for i in range(r)]
    sys.stdout.write(f"{min_cost(n, b, s, roads)}\n")
    return 0


if __name__ == "__main__":
    sys.exit(main())