"""A small regex-like pattern language used for validation and generation.

Supported syntax: literal characters, character sets ``[a-z]`` and negated
sets ``[^0-9]``, counts ``?``, ``*``, ``+``, ``{n}`` and ``{n,m}``, grouping
with parentheses and alternation with ``|``.  A backslash escapes the next
character and unescaped spaces are ignored.

Matching is greedy: ``[0-9]?1`` does not match ``"1"``.  Patterns holding
``*`` or ``+`` cannot be used for generation.
"""

from __future__ import annotations

import re
from typing import Protocol

INT_MAX = 2**31 - 1

_INT_PREFIX = re.compile(r"\s*([+-]?\d+)")


class PatternError(ValueError):
    """Raised for an illegal pattern or an impossible generation request."""


class _IntSource(Protocol):
    def next_int(self, n: int) -> int: ...


def _illegal(s: str) -> PatternError:
    return PatternError(f'pattern: Illegal pattern (or part) "{s}"')


def _signed(c: str) -> int:
    """Ordering key of a character as a signed byte would sort."""
    code = ord(c)
    return code - 256 if 128 <= code < 256 else code


def _is_command_char(s: str, pos: int, value: str) -> bool:
    """Whether ``s[pos]`` is ``value`` and not escaped by a backslash."""
    if pos >= len(s):
        return False
    slashes = 0
    before = pos - 1
    while before >= 0 and s[before] == "\\":
        before -= 1
        slashes += 1
    return slashes % 2 == 0 and s[pos] == value


def _get_char(s: str, pos: int) -> tuple[str, int]:
    """Read one (possibly escaped) character; return it and the new position."""
    pos += 2 if pos < len(s) and s[pos] == "\\" else 1
    return (s[pos - 1] if pos - 1 < len(s) else "\0"), pos


def _scan_counts(s: str, pos: int) -> tuple[int, int, int]:
    """Read an optional repetition suffix; return (low, high, new position)."""
    if pos >= len(s):
        return 1, 1, pos

    if _is_command_char(s, pos, "{"):
        parts: list[str] = []
        part = ""
        pos += 1
        while pos < len(s) and not _is_command_char(s, pos, "}"):
            if _is_command_char(s, pos, ","):
                parts.append(part)
                part = ""
                pos += 1
            else:
                c, pos = _get_char(s, pos)
                part += c
        if part:
            parts.append(part)
        if not _is_command_char(s, pos, "}"):
            raise _illegal(s)
        pos += 1
        if not 1 <= len(parts) <= 2:
            raise _illegal(s)

        numbers = []
        for item in parts:
            found = _INT_PREFIX.match(item)
            if not item or found is None:
                raise _illegal(s)
            numbers.append(int(found.group(1)))

        low, high = (numbers[0], numbers[0]) if len(numbers) == 1 else numbers
        if low > high:
            raise _illegal(s)
        return low, high, pos

    if _is_command_char(s, pos, "?"):
        return 0, 1, pos + 1
    if _is_command_char(s, pos, "*"):
        return 0, INT_MAX, pos + 1
    if _is_command_char(s, pos, "+"):
        return 1, INT_MAX, pos + 1
    return 1, 1, pos


def _scan_char_set(s: str, pos: int) -> tuple[list[str], int]:
    """Read a single character or a bracketed set; return the sorted characters."""
    if pos >= len(s):
        raise _illegal(s)

    if not _is_command_char(s, pos, "["):
        c, pos = _get_char(s, pos)
        return [c], pos

    result: list[str] = []
    pos += 1
    negative = _is_command_char(s, pos, "^")
    prev = "\0"

    while pos < len(s) and not _is_command_char(s, pos, "]"):
        if _is_command_char(s, pos, "-") and prev != "\0":
            pos += 1
            if pos + 1 == len(s) or _is_command_char(s, pos, "]"):
                result.append(prev)
                prev = "-"
                continue
            nxt, pos = _get_char(s, pos)
            if _signed(prev) > _signed(nxt):
                raise _illegal(s)
            result.extend(chr(code) for code in range(ord(prev), ord(nxt) + 1))
            prev = "\0"
        else:
            if prev != "\0":
                result.append(prev)
            prev, pos = _get_char(s, pos)

    if prev != "\0":
        result.append(prev)

    if not _is_command_char(s, pos, "]"):
        raise _illegal(s)
    pos += 1

    if negative:
        excluded = set(result)
        result = [chr(code) for code in range(255) if chr(code) not in excluded]

    result.sort(key=_signed)
    return result, pos


class Pattern:
    """A compiled pattern that can match strings and generate random ones."""

    def __init__(self, source: str) -> None:
        self._src = source
        self._chars: list[str] = []
        self._charset: frozenset[str] = frozenset()
        self._children: list[Pattern] = []
        self._from = 0
        self._to = 0

        s = "".join(
            c for i, c in enumerate(source) if not _is_command_char(source, i, " ")
        )

        opened = 0
        first_close = -1
        seps: list[int] = []
        for i in range(len(s)):
            if _is_command_char(s, i, "("):
                opened += 1
                continue
            if _is_command_char(s, i, ")"):
                opened -= 1
                if opened == 0 and first_close == -1:
                    first_close = i
                continue
            if opened < 0:
                raise _illegal(s)
            if _is_command_char(s, i, "|") and opened == 0:
                seps.append(i)

        if opened != 0:
            raise _illegal(s)

        if (
            not seps
            and first_close + 1 == len(s)
            and _is_command_char(s, 0, "(")
            and _is_command_char(s, len(s) - 1, ")")
        ):
            self._children.append(Pattern(s[1:-1]))
        elif seps:
            last = 0
            for sep in [*seps, len(s)]:
                self._children.append(Pattern(s[last:sep]))
                last = sep + 1
        else:
            self._chars, pos = _scan_char_set(s, 0)
            self._charset = frozenset(self._chars)
            self._from, self._to, pos = _scan_counts(s, pos)
            if pos < len(s):
                self._children.append(Pattern(s[pos:]))

    def src(self) -> str:
        """The source text the pattern was built from."""
        return self._src

    def matches(self, s: str) -> bool:
        """Whether the whole of ``s`` matches the pattern."""
        return self._matches_at(s, 0)

    def _matches_at(self, s: str, pos: int) -> bool:
        if self._to > 0:
            size = 0
            while pos + size < len(s) and s[pos + size] in self._charset:
                size += 1
            if size < self._from:
                return False
            pos += min(size, self._to)

        if self._children:
            return any(child._matches_at(s, pos) for child in self._children)
        return pos == len(s)

    def next(self, rnd: _IntSource) -> str:
        """Generate a random string matching the pattern using ``rnd.next_int``."""
        if self._to == INT_MAX:
            raise PatternError(
                "pattern.next: can't process character '*' for generation"
            )

        result = []
        if self._to > 0:
            count = rnd.next_int(self._to - self._from + 1) + self._from
            result.extend(
                self._chars[rnd.next_int(len(self._chars))] for _ in range(count)
            )

        if self._children:
            child = self._children[rnd.next_int(len(self._children))]
            result.append(child.next(rnd))

        return "".join(result)

    def __repr__(self) -> str:
        return f"Pattern({self._src!r})"