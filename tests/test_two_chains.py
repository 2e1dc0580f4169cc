import io
from collections import Counter

import pytest

from contestkit.solutions import two_chains
from contestkit.solutions.two_chains import is_subsequence, split_chains


def _assert_valid(goal, strings, chains):
    first, second = chains
    assert Counter(first) + Counter(second) == Counter(strings)
    for chain in chains:
        prev = ""
        for item in chain:
            assert is_subsequence(prev, item)
            prev = item
        assert is_subsequence(prev, goal)


@pytest.mark.parametrize(
    "a, b, expected",
    [
        ("", "abc", True),
        ("ac", "abc", True),
        ("ca", "abc", False),
        ("abc", "abc", True),
        ("abcd", "abc", False),
        ("aa", "aba", True),
    ],
)
def test_is_subsequence(a, b, expected):
    assert is_subsequence(a, b) is expected


def test_single_chain_with_empty_second():
    strings = ["abc", "a", "ab"]
    result = split_chains("abcd", strings)
    assert result is not None
    _assert_valid("abcd", strings, result)
    assert result[0] == ["a", "ab", "abc"]
    assert result[1] == []


def test_two_branches():
    strings = ["a", "b", "ab"]
    result = split_chains("abc", strings)
    assert result is not None
    _assert_valid("abc", strings, result)


def test_longer_mixed_case():
    strings = ["x", "y", "xz", "yw", "xzq", "ywr"]
    goal = "xzqywr"
    result = split_chains(goal, strings)
    assert result is not None
    _assert_valid(goal, strings, result)


def test_three_incompatible_strings_impossible():
    assert split_chains("abc", ["a", "b", "c"]) is None


def test_last_string_not_in_goal_impossible():
    assert split_chains("ab", ["c"]) is None


def test_main_impossible(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("3 abc\na\nb\nc\n"))
    assert two_chains.main([]) == 0
    assert capsys.readouterr().out == "impossible\n"


def test_main_prints_chains(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("3 abc\na\nb\nab\n"))
    assert two_chains.main([]) == 0
    lines = capsys.readouterr().out.splitlines()
    first_len, second_len = map(int, lines[0].split())
    assert first_len + second_len == 3
    chains = (lines[1 : 1 + first_len], lines[1 + first_len :])
    _assert_valid("abc", ["a", "b", "ab"], chains)