# pushswap

`pushswap` sorts a list of distinct integers using two stacks, `a` and `b`,
and a small set of operations. It prints the operations it uses, one per line:

| Operation | Effect |
|-----------|--------|
| `sa`  | swap the top two values of `a` |
| `ra`  | rotate `a` up: the top value becomes the bottom one |
| `rra` | rotate `a` down: the bottom value becomes the top one |
| `pa`  | move the top of `b` onto `a` |
| `pb`  | move the top of `a` onto `b` |

Two to five values are sorted by a fixed, hand-picked sequence of moves. More
than five values are ranked (1 for the smallest) and sorted with a binary
radix sort on those ranks, using `b` as the bucket.

## Installation

```
pip install .
```

## Command line

Give the numbers as separate arguments:

```
pushswap 3 2 1
```

or as a single argument holding numbers separated by spaces:

```
pushswap "4 67 3 87 23"
```

The operations are written to standard output. Input that is already sorted
produces no output.

Every number must be an optional `+` or `-` followed by decimal digits, at most
11 characters long, within the 32-bit signed range, and appear only once.
Otherwise `Error` is written to standard error and nothing else is printed —
for example `pushswap 1 two 3`, `pushswap 1 1` or `pushswap ""`.

The command exits with status 1 when it is given no arguments at all, and
with status 0 in every other case, including input errors.

## Library use

```python
from pushswap.cli import solve
from pushswap.parsing import InputError, parse_arguments
from pushswap.stacks import Stacks, is_sorted

moves = solve([3, 2, 1])               # ['ra', 'sa']

try:
    values = parse_arguments(["5", "-1", "3"])   # [5, -1, 3]
except InputError:
    ...
```

- `pushswap.parsing`: `parse_arguments(argv)` splits a single argument on
  spaces or takes several arguments one number each; `validate(args)` checks a
  list of strings and returns their values. Both raise `InputError` (a
  `ValueError`) on bad input.
- `pushswap.stacks`: `Stacks(values)` holds stack `a` (top first) and an empty
  stack `b`, with one method per operation. Each operation that changes a
  stack is recorded by name in `Stacks.moves`; one with nothing to act on is
  skipped and not recorded. `is_sorted`, `min_position` and `max_position`
  work on any sequence of integers.
- `pushswap.simplesort.simple_sort(stacks)` and
  `pushswap.radix.radix_sort(stacks)` carry out the two strategies on a
  `Stacks` and return its move list. `pushswap.radix.assign_ranks(values)`
  gives each value's rank.
- `pushswap.cli.solve(values)` picks the strategy and returns the moves;
  `pushswap.cli.main(argv)` is the command.

The package also has small helpers: ASCII character tests and case conversion
(`pushswap.chars`), byte-buffer operations (`pushswap.memory`), string
functions (`pushswap.strings`), 32-bit `atoi`/`itoa` (`pushswap.conversions`),
a singly linked list (`pushswap.linkedlist`), stream output
(`pushswap.output`) and a printf-style formatter supporting
`%c %s %d %i %u %x %X %p %%` (`pushswap.formatting`).

## Limits

Only the five operations above are used; there are no operations that act on
`b` alone or on both stacks at once. The package produces moves but does not
read a list of moves back to check whether they sort a given input.

## Tests

```
pip install ".[test]"
pytest
```