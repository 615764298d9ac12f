# pushswap

Sort a list of distinct integers using two stacks, `a` and `b`, and a small
set of instructions. The package prints the instructions it used, and comes
with a checker that replays a sequence of instructions and tells you whether
the result is sorted.

## Instructions

| Instruction | Effect |
|-------------|--------|
| `sa`, `sb`, `ss` | swap the top two elements of `a`, `b`, or both |
| `pa`, `pb` | move the top element of `b` onto `a`, or of `a` onto `b` |
| `ra`, `rb`, `rr` | rotate `a`, `b`, or both up by one (top goes to bottom) |
| `rra`, `rrb`, `rrr` | rotate `a`, `b`, or both down by one (bottom goes to top) |

## Install

```
pip install .
```

## Sorting

Pass the numbers as separate arguments or as a single space-separated string:

```
push-swap 3 2 1 5 4
push-swap "3 2 1 5 4"
```

One instruction is printed per line. If the input is already sorted nothing is
printed. A malformed or out-of-range number (outside the 32-bit signed range),
or a duplicate value, makes the command write `Error` to standard error and
exit with status 1.

Inputs of 2 to 5 numbers use dedicated routines; up to 109 numbers a
single-pass chunking insertion sort is used, up to 399 a multi-pass chunking
insertion sort, and beyond that a recursive split-and-bubble strategy.

From Python, `pushswap.sorter.solve` returns the list of `Action` values:

```python
from pushswap.sorter import Algorithm, solve

actions = solve([3, 2, 1, 5, 4])
radix_actions = solve([3, 2, 1, 5, 4], Algorithm.RADIX)
```

`Algorithm` selects a strategy explicitly: `DEFAULT` (chosen by size),
`RADIX`, `MYSORT`, `MYSORT_LITTLE`, `BBEG` or `BUBBLE`. `solve` raises
`ValueError` when a value occurs twice.

The stacks themselves are available as `pushswap.stacks.Stacks`; each
instruction is a method (`sa()`, `pb()`, `rrr()`, ...) and the instructions
called are collected in its `actions` list.

## Checking

The checker reads instructions from standard input, one per line, applies them
to the given numbers, and prints `OK` if stack `a` ends sorted and stack `b`
empty, `KO` otherwise. An unknown instruction writes `Error` to standard error.
Invalid arguments also write `Error` and exit with status 1; with no arguments
the checker does nothing.

```
push-swap 3 2 1 5 4 | push-swap-checker 3 2 1 5 4
```

A `pa` or `pb` read while the stack it takes from is empty changes nothing, and
is echoed on standard output before the verdict. When the numbers are given as
a single space-separated string, the checker does not reject duplicates.

## Tests

```
pip install .[test]
pytest
```