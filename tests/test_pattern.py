import random

import pytest

from contestkit.pattern import Pattern, PatternError


class SeededInts:
    def __init__(self, seed):
        self._rng = random.Random(seed)

    def next_int(self, n):
        return self._rng.randrange(n)


@pytest.mark.parametrize("text", ["mike", "john"])
def test_alternation_matches(text):
    assert Pattern("mike|john").matches(text)


@pytest.mark.parametrize("text", ["mik", "mikejohn", "", "johnn"])
def test_alternation_rejects(text):
    assert not Pattern("mike|john").matches(text)


@pytest.mark.parametrize("text", ["-9999", "9999", "1", "-5", "120"])
def test_signed_integer_pattern_matches(text):
    assert Pattern("-?[1-9][0-9]{0,3}").matches(text)


@pytest.mark.parametrize("text", ["0", "10000", "-0", "--1", "a"])
def test_signed_integer_pattern_rejects(text):
    assert not Pattern("-?[1-9][0-9]{0,3}").matches(text)


@pytest.mark.parametrize("text", ["id-a", "id-bb", "id-c"])
def test_group_matches(text):
    assert Pattern("id-([ac]|b{2})").matches(text)


@pytest.mark.parametrize("text", ["id-b", "id-bbb", "id-ac"])
def test_group_rejects(text):
    assert not Pattern("id-([ac]|b{2})").matches(text)


def test_negated_set_with_star():
    p = Pattern("[^0-9]*")
    assert p.matches("")
    assert p.matches("abc")
    assert not p.matches("a1")


def test_greedy_matching_is_documented_behaviour():
    assert not Pattern("[0-9]?1").matches("1")
    assert Pattern("[0-9]?1").matches("21")


def test_spaces_are_ignored_unless_escaped():
    assert Pattern("a b").matches("ab")
    assert not Pattern("a b").matches("a b")
    assert Pattern("a\\ b").matches("a b")


def test_escaped_meta_character():
    p = Pattern("\\[x\\]")
    assert p.matches("[x]")
    assert not p.matches("x")


def test_plus_requires_one():
    p = Pattern("[ab]+")
    assert p.matches("abba")
    assert not p.matches("")


def test_src_returns_source():
    assert Pattern("[a-z]{1,5}").src() == "[a-z]{1,5}"


@pytest.mark.parametrize("seed", range(20))
def test_generated_strings_match(seed):
    p = Pattern("[a-z]{1,5}")
    out = p.next(SeededInts(seed))
    assert 1 <= len(out) <= 5
    assert out.islower() and out.isalpha()
    assert p.matches(out)


@pytest.mark.parametrize("seed", range(20))
def test_generated_alternation_is_one_of_options(seed):
    out = Pattern("id-([ac]|b{2})").next(SeededInts(seed))
    assert out in {"id-a", "id-c", "id-bb"}


def test_generation_is_deterministic_for_same_source():
    p = Pattern("-?[1-9][0-9]{0,3}")
    first = [p.next(SeededInts(7)) for _ in range(5)]
    second = [p.next(SeededInts(7)) for _ in range(5)]
    assert first == second


def test_star_cannot_generate():
    with pytest.raises(PatternError):
        Pattern("a*").next(SeededInts(1))


@pytest.mark.parametrize(
    "source", ["(a", "a{3,1}", "[z-a]", "a{}", "[a-", "[abc", "a{x}", "a{1,2,3}", ""]
)
def test_illegal_patterns(source):
    with pytest.raises(PatternError):
        Pattern(source)


def test_pattern_error_is_value_error():
    with pytest.raises(ValueError):
        Pattern("a|")