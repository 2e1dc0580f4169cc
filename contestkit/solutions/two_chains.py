"""Splitting strings into two subsequence chains ending in a goal string.

Every string must appear in exactly one of two chains in which each string
is a subsequence of the next, and both chains' last strings must be
subsequences of the goal.
"""

from __future__ import annotations

import sys
from typing import Sequence


def is_subsequence(a: str, b: str) -> bool:
    """Whether ``a`` is a subsequence of ``b``."""
    if not a:
        return True
    i = 0
    for c in b:
        if a[i] == c:
            i += 1
            if i == len(a):
                return True
    return False


def split_chains(goal: str, strings: Sequence[str]) -> tuple[list[str], list[str]] | None:
    """Two chains covering ``strings``, or ``None`` when no split exists."""
    s = ["", *sorted(strings, key=len)]
    last = [0] * len(s)
    x = y = 0
    head = tail = -1

    for i in range(1, len(s)):
        if head == -1:
            if is_subsequence(s[x], s[i]):
                if is_subsequence(s[y], s[i]):
                    head = tail = i
                else:
                    last[i] = x
                    x = i
            elif is_subsequence(s[y], s[i]):
                last[i] = y
                y = i
            else:
                return None
        elif is_subsequence(s[tail], s[i]):
            last[i] = tail
            tail = i
        else:
            if not is_subsequence(s[x], s[i]):
                x, y = y, x
            if not is_subsequence(s[x], s[i]):
                return None
            last[i] = x
            last[head] = y
            x, y = i, tail
            head = -1

    if head != -1:
        last[head] = x
        x = tail

    if not is_subsequence(s[x], goal) or not is_subsequence(s[y], goal):
        return None

    def trace(node: int) -> list[str]:
        chain = []
        while node:
            chain.append(s[node])
            node = last[node]
        chain.reverse()
        return chain

    return trace(x), trace(y)


def main(argv: Sequence[str] | None = None) -> int:
    """Read ``n``, the goal and ``n`` strings from standard input; print the chains."""
    tokens = sys.stdin.read().split()
    n, goal = int(tokens[0]), tokens[1]
    result = split_chains(goal, tokens[2 : 2 + n])
    if result is None:
        sys.stdout.write("impossible\n")
        return 0
    first, second = result
    lines = [f"{len(first)} {len(second)}", *first, *second]
    sys.stdout.write("\n".join(lines) + "\n")
    return 0


if __name__ == "__main__":
    sys.exit(main())