# contestkit

Building blocks for preparing programming-contest problems, plus a set of
reference solutions.

- **`contestkit.pattern`**: `Pattern`, a small regex-like language
  (`"[a-z]{1,5}"`, `"mike|john"`, `"-?[1-9][0-9]{0,3}"`). A pattern can check
  a whole string with `matches` and generate a random string with `next`.
  Matching is greedy, so `"[0-9]?1"` does not match `"1"`. Patterns that hold
  `*` or `+` cannot generate. Illegal patterns raise `PatternError`.
- **`contestkit.rng`**: `Random`, a deterministic 48-bit generator. A given seed
  gives the same values on every platform, so generated tests can be reproduced.
  It offers uniform draws (`next_int`, `next_range`, `next_float`,
  `next_float_range`, `any`) and weighted draws (`wnext`, `wnext_range`,
  `wnext_float`, `wany`). It can also generate strings from patterns
  (`next_pattern`) and shuffle lists in place (`shuffle`). Seeds come from an
  integer (`set_seed`) or from command-line arguments (`set_seed_from_args`).
- **`contestkit.textutil`**: helpers such as `compress`, `trim`, `join`,
  `upper_case`, `lower_case`, `english_ending`, `double_compare` and
  `double_delta`. It also parses numbers strictly with `parse_long`,
  `parse_double` and `parse_strict_double`, which raise `NumberFormatError` on
  a malformed token.

## Installing

```
pip install contestkit
```

To run the test suite:

```
pip install "contestkit[test]"
pytest
```

## Generating tests

```python
from contestkit.rng import Random

rnd = Random(1)
rnd.set_seed_from_args(["10", "20"])
n = rnd.next_range(1, 100)
name = rnd.next_pattern("[a-z]{1,10}")
values = [rnd.wnext(1000, 3) for _ in range(n)]
rnd.shuffle(values)
```

For `wnext`, a positive weight `w` gives the largest of `w + 1` uniform draws
and a negative weight gives the smallest. Weights of 25 or more in size use a
closed form instead.

## Checking tokens

```python
from contestkit.pattern import Pattern
from contestkit.textutil import NumberFormatError, parse_long, parse_strict_double

Pattern("id-([ac]|b{2})").matches("id-bb")   # True
parse_strict_double("3.14", 1, 2)            # 3.14
try:
    parse_long("007")                        # leading zeroes are rejected
except NumberFormatError as error:
    print(error)
```

## Reference solutions

Each solution reads its problem from standard input and writes the answer to
standard output:

```
contestkit-divisor-pairs   < input.txt
contestkit-cut-partition   < input.txt
contestkit-branch-split    < input.txt
contestkit-fold-areas      < input.txt
contestkit-two-chains      < input.txt
contestkit-close-points    < input.txt
contestkit-huffman-codes   < input.txt
contestkit-quotation       < input.txt
contestkit-circle-cover    < input.txt
```

The functions behind them can also be called directly, for example
`contestkit.solutions.circle_cover.min_cover(n, intervals)`,
`contestkit.solutions.quotation.max_depth(counts)` or
`contestkit.solutions.two_chains.split_chains(goal, strings)`.

## What is not included

contestkit has no reader for input, output and answer files, and no checker
runner. It does not map verdicts to exit codes and does not write report files.
It ships no problem-specific checkers; the `contestkit.checkers` package is
empty. Checkers and validators have to do their own file reading and exit
handling. They can use `Pattern` and the `textutil` parsers to check tokens.