"""Choose a sorting strategy and produce the instructions that sort the input."""

from __future__ import annotations

import sys
from collections.abc import Callable, Iterable, Sequence
from enum import IntEnum

from .args import ArgumentError, has_duplicates, parse_args
from .bbeg import bbeg_sort
from .mysort import mysort, mysort_little, radix_sort_base
from .small_sorts import (
    bubble_sort,
    is_sorted,
    sort_five_only,
    sort_four_a,
    sort_three_only,
    sort_two_a,
)
from .stacks import Action, Stacks, to_indices

_LITTLE_LIMIT = 110
_MYSORT_LIMIT = 400


class Algorithm(IntEnum):
    """Sorting strategy; DEFAULT picks one from the number of values."""

    DEFAULT = 0
    RADIX = 1
    MYSORT = 2
    MYSORT_LITTLE = 3
    BBEG = 4
    BUBBLE = 5


_Strategy = Callable[[Stacks, Sequence[int]], None]

_STRATEGIES: dict[Algorithm, _Strategy] = {
    Algorithm.RADIX: lambda stacks, sorted_values: radix_sort_base(
        stacks, sorted_values, 2
    ),
    Algorithm.MYSORT: mysort,
    Algorithm.MYSORT_LITTLE: mysort_little,
    Algorithm.BBEG: bbeg_sort,
    Algorithm.BUBBLE: lambda stacks, _sorted_values: bubble_sort(stacks),
}


def first_sort(values: Iterable[int]) -> list[int]:
    """The input values in ascending order."""
    return sorted(values)


def sort(
    stacks: Stacks,
    sorted_values: Sequence[int],
    algorithm: Algorithm = Algorithm.DEFAULT,
) -> None:
    """Sort stack a, which holds the indices of the values, in place.

    ``sorted_values`` are the original values in ascending order.
    """
    if is_sorted(stacks):
        return
    algorithm = Algorithm(algorithm)
    if algorithm is not Algorithm.DEFAULT:
        _STRATEGIES[algorithm](stacks, sorted_values)
        return
    length = stacks.len_a()
    if length == 2:
        sort_two_a(stacks)
    elif length == 3:
        sort_three_only(stacks)
    elif length == 4:
        sort_four_a(stacks)
    elif length == 5:
        sort_five_only(stacks)
    elif length < _LITTLE_LIMIT:
        mysort_little(stacks, sorted_values)
    elif length < _MYSORT_LIMIT:
        mysort(stacks, sorted_values)
    else:
        bbeg_sort(stacks, sorted_values)


def solve(
    values: Iterable[int], algorithm: Algorithm = Algorithm.DEFAULT
) -> list[Action]:
    """Return the instructions that sort ``values`` into stack a.

    Raises ValueError when a value occurs twice.
    """
    values = list(values)
    if has_duplicates(values):
        raise ValueError("duplicate values")
    sorted_values = first_sort(values)
    stacks = Stacks(to_indices(values, sorted_values))
    sort(stacks, sorted_values, algorithm)
    return stacks.actions


def main(argv: Sequence[str] | None = None) -> int:
    """Print the instructions sorting the numbers given as arguments."""
    args = sys.argv[1:] if argv is None else list(argv)
    try:
        values = parse_args(args)
    except ArgumentError:
        sys.stderr.write("Error\n")
        return 1
    actions = solve(values)
    sys.stdout.write("".join(f"{action}\n" for action in actions))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())