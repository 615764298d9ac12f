"""Sorts for a handful of values, and the bubble sorts built on the instructions."""

from __future__ import annotations

from .stacks import Stacks


def is_sorted(stacks: Stacks) -> bool:
    """True when stack a is in ascending order from the top."""
    values = stacks.list_a()
    return all(low <= high for low, high in zip(values, values[1:]))


def sort_two_a(stacks: Stacks) -> None:
    """Order the top two values of a ascending."""
    if stacks.get_a(0) > stacks.get_a(1):
        stacks.sa()


def sort_three_a(stacks: Stacks) -> None:
    """Order the top three values of a ascending, leaving the rest in place."""
    a = stacks.get_a
    if a(0) < a(1) < a(2):
        return
    if a(0) > a(1):
        stacks.sa()
    if a(1) > a(2):
        stacks.ra()
        stacks.sa()
        stacks.rra()
    if a(0) > a(1):
        stacks.sa()


def sort_four_a(stacks: Stacks) -> None:
    """Order the top four values of a ascending, leaving the rest in place."""
    a = stacks.get_a
    if a(0) < a(1) < a(2) < a(3):
        return
    sort_three_a(stacks)
    if not a(1) < a(2) < a(3):
        stacks.ra()
        sort_three_a(stacks)
        stacks.rra()
    sort_three_a(stacks)


def sort_two_b(stacks: Stacks) -> None:
    """Order the top two values of b descending."""
    if stacks.get_b(0) < stacks.get_b(1):
        stacks.sb()


def sort_three_b(stacks: Stacks) -> None:
    """Order the top three values of b descending, leaving the rest in place."""
    b = stacks.get_b
    if b(0) > b(1) > b(2):
        return
    if b(0) < b(1):
        stacks.sb()
    if b(1) < b(2):
        stacks.rb()
        stacks.sb()
        stacks.rrb()
    if b(0) < b(1):
        stacks.sb()


def sort_four_b(stacks: Stacks) -> None:
    """Order the top four values of b descending, leaving the rest in place."""
    b = stacks.get_b
    if b(0) > b(1) > b(2) > b(3):
        return
    sort_three_b(stacks)
    if not b(1) > b(2) > b(3):
        stacks.rb()
        sort_three_b(stacks)
        stacks.rrb()
    sort_three_b(stacks)


def bubble_sort(stacks: Stacks) -> None:
    """Cocktail-style bubble sort of the whole of stack a using sa, ra and rra."""
    remaining = stacks.len_a()
    done = False
    while not done:
        done = True
        for _ in range(remaining - 1):
            if stacks.get_a(0) > stacks.get_a(1):
                stacks.sa()
                done = False
            stacks.ra()
        for _ in range(remaining - 1):
            if stacks.get_a(0) > stacks.get_a(1):
                stacks.sa()
                done = False
            stacks.rra()
        remaining -= 1


def sort_three_only(stacks: Stacks) -> None:
    """Sort a stack a that holds exactly the indices 0, 1 and 2."""
    a = stacks.get_a
    if (a(0), a(1), a(2)) == (2, 0, 1):
        stacks.ra()
        return
    if a(0) > a(1):
        stacks.sa()
    if (a(0), a(1), a(2)) == (1, 2, 0):
        stacks.rra()
        return
    if a(1) > a(2):
        stacks.rra()
        stacks.sa()


def sort_three_from_five(stacks: Stacks) -> None:
    """Sort a stack a that holds exactly the indices 2, 3 and 4."""
    a = stacks.get_a
    if (a(0), a(1), a(2)) == (4, 2, 3):
        stacks.ra()
        return
    if a(0) > a(1):
        stacks.sa()
    if (a(0), a(1), a(2)) == (3, 4, 2):
        stacks.rra()
        return
    if a(1) > a(2):
        stacks.rra()
        stacks.sa()


def sort_five_only(stacks: Stacks) -> None:
    """Sort a stack a that holds exactly the indices 0 to 4."""
    for _ in range(5):
        if stacks.get_a(0) in (0, 1):
            stacks.pb()
        else:
            stacks.ra()
        if stacks.len_a() == 3:
            break
    sort_three_from_five(stacks)
    sort_two_b(stacks)
    while stacks.len_b() > 0:
        stacks.pa()


def chose_better_swap(stacks: Stacks) -> None:
    """Swap a (ascending), b (descending) or both, using ss when both need it."""
    b_needs = stacks.len_b() > 1 and stacks.get_b(0) < stacks.get_b(1)
    a_needs = stacks.get_a(0) > stacks.get_a(1)
    if a_needs and b_needs:
        stacks.ss()
    elif a_needs:
        stacks.sa()
    elif b_needs:
        stacks.sb()


def parallel_bubble_limit(stacks: Stacks, limit: int) -> None:
    """Bubble the top ``limit`` values of a ascending and of b descending together."""
    for depth in range(limit - 2, -1, -1):
        for _ in range(depth):
            chose_better_swap(stacks)
            stacks.rr()
        chose_better_swap(stacks)
        for _ in range(depth):
            stacks.rrr()


def parallel_bubble_limit_odd(stacks: Stacks, limit: int) -> None:
    """Like parallel_bubble_limit, with ``limit + 1`` values on b."""
    for depth in range(limit - 2, -1, -1):
        for _ in range(depth):
            chose_better_swap(stacks)
            stacks.rr()
        chose_better_swap(stacks)
        stacks.rb()
        chose_better_swap(stacks)
        for _ in range(depth):
            stacks.rrr()
        stacks.rrb()
        chose_better_swap(stacks)


def select_good_sort_b(stacks: Stacks, to_sort: int) -> None:
    """Sort the top ``to_sort`` values of b (at most 4) and push them onto a."""
    if to_sort == 2:
        sort_two_b(stacks)
    elif to_sort == 3:
        sort_three_b(stacks)
    elif to_sort == 4:
        sort_four_b(stacks)
    for _ in range(to_sort):
        stacks.pa()


def select_good_sort_a(stacks: Stacks, to_sort: int) -> None:
    """Sort the top ``to_sort`` values of a; beyond 4, bubble-sort all of a."""
    if to_sort == 2:
        sort_two_a(stacks)
    elif to_sort == 3:
        sort_three_a(stacks)
    elif to_sort == 4:
        sort_four_a(stacks)
    else:
        bubble_sort(stacks)