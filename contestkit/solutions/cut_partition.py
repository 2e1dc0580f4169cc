"""Possible equal part counts when cutting edges of a graph.

Edges that always have to be cut together form equivalence classes; these are
found by hashing each cycle space element with random labels.  The answer is
every divisor of the gcd of the class sizes.
"""

from __future__ import annotations

import random
import sys
from collections import Counter
from functools import reduce
from math import gcd
from typing import Iterable, Sequence


def _label(rng: random.Random) -> int:
    while True:
        value = rng.getrandbits(64)
        if value:
            return value


def partition_sizes(
    n: int, edges: Iterable[tuple[int, int]], rng: random.Random | None = None
) -> list[int]:
    """Divisors of the gcd of edge class sizes for a graph on vertices 1..n."""
    rng = rng or random.Random()
    adj: list[list[int]] = [[] for _ in range(n + 1)]
    for u, v in edges:
        if not (1 <= u <= n and 1 <= v <= n):
            raise ValueError(f"edge ({u}, {v}) out of range 1..{n}")
        adj[u].append(v)
        adj[v].append(u)

    parent = [0] * (n + 1)
    hashes = [0] * (n + 1)
    counts: Counter[int] = Counter()
    seen: set[tuple[int, int]] = set()

    for root in range(1, n + 1):
        if parent[root]:
            continue
        parent[root] = -1
        stack = [(root, iter(adj[root]))]
        while stack:
            u, neighbours = stack[-1]
            for v in neighbours:
                if v == parent[u]:
                    continue
                if parent[v] == 0:
                    parent[v] = u
                    stack.append((v, iter(adj[v])))
                    break
                key = (min(u, v), max(u, v))
                if key not in seen:
                    seen.add(key)
                    x = _label(rng)
                    hashes[u] ^= x
                    hashes[v] ^= x
                    counts[x] += 1
            else:
                stack.pop()
                if stack:
                    hashes[stack[-1][0]] ^= hashes[u]

    counts.update(h for h in hashes[1:] if h)
    total = reduce(gcd, counts.values(), 0)
    return [i for i in range(1, total + 1) if total % i == 0]


def main(argv: Sequence[str] | None = None) -> int:
    """Read a graph from standard input and print the possible part counts."""
    tokens = sys.stdin.read().split()
    n, m = int(tokens[0]), int(tokens[1])
    edges = [(int(tokens[2 + 2 * i]), int(tokens[3 + 2 * i])) for i in range(m)]
    sizes = partition_sizes(n, edges)
    if sizes:
        sys.stdout.write(" ".join(map(str, sizes)) + "\n")
    return 0


if __name__ == "__main__":
    sys.exit(main())