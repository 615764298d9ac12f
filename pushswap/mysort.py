"""Chunked insertion sort and radix sort built on the stack instructions."""

from __future__ import annotations

from collections.abc import Callable, Sequence

from .args import root
from .small_sorts import select_good_sort_a, sort_two_a
from .stacks import Action, Stacks


def _c_div(a: int, b: int) -> int:
    """Integer division truncating toward zero."""
    quotient = abs(a) // abs(b)
    return quotient if (a >= 0) == (b >= 0) else -quotient


def _c_mod(a: int, b: int) -> int:
    """Remainder whose sign follows the dividend."""
    return a - b * _c_div(a, b)


def find_quickest_b(stacks: Stacks, actual_index: int, number: int) -> Action | None:
    """Choose rb or rrb to bring ``number`` to ``actual_index`` in b.

    Returns None when ``number`` is not in b.
    """
    length = stacks.len_b()
    if length == 0:
        return None
    up = 0
    while stacks.get_b(actual_index + up) != number:
        if up > length:
            return None
        up += 1
    down = 0
    while stacks.get_b(actual_index - down) != number:
        if down > length:
            return None
        down += 1
    return Action.RRB if down < up else Action.RB


def find_quickest_inferior_a(stacks: Stacks, number: int) -> Action | None:
    """Choose ra or rra to bring a value not above ``number`` to the top of a.

    Returns None when every value of a is above ``number``.
    """
    length = stacks.len_a()
    if length == 0:
        return None
    up = 0
    while stacks.get_a(up) > number:
        if up > length:
            return None
        up += 1
    down = 0
    while stacks.get_a(-down) > number:
        if down > length:
            return None
        down += 1
    return Action.RRA if down < up else Action.RA


def find_quickest_superior_b(stacks: Stacks, number: int) -> Action | None:
    """Choose rb or rrb to bring a value above ``number`` to the top of b.

    Returns None when no value of b is above ``number``.
    """
    length = stacks.len_b()
    if length == 0:
        return None
    up = 0
    while stacks.get_b(up) <= number:
        if up > length:
            return None
        up += 1
    down = 0
    while stacks.get_b(-down) <= number:
        if down > length:
            return None
        down += 1
    return Action.RRB if down < up else Action.RB


def rotate_to_shortest_inferior_a(stacks: Stacks, limit: int) -> bool:
    """Rotate a the short way until its top is at most ``limit``.

    Returns False, rotating nothing, when no such value exists.
    """
    quickest = find_quickest_inferior_a(stacks, limit)
    if quickest is Action.RA:
        while stacks.get_a(0) > limit:
            stacks.ra()
    elif quickest is Action.RRA:
        while stacks.get_a(0) > limit:
            stacks.rra()
    return quickest is not None


def rotate_to_shortest_superior_b(stacks: Stacks, limit: int) -> bool:
    """Rotate b the short way until its top is above ``limit``.

    Returns False, rotating nothing, when no such value exists.
    """
    quickest = find_quickest_superior_b(stacks, limit)
    if quickest is Action.RB:
        while stacks.get_b(0) <= limit:
            stacks.rb()
    elif quickest is Action.RRB:
        while stacks.get_b(0) <= limit:
            stacks.rrb()
    return quickest is not None


def move_to_b(stacks: Stacks, limit: int) -> None:
    """Pass once over a, pushing every value below ``limit`` onto b."""
    for _ in range(stacks.len_a()):
        if stacks.get_a(0) < limit:
            stacks.pb()
        else:
            stacks.ra()


def move_to_b_bounded(stacks: Stacks, low: int, high: int) -> None:
    """Pass once over a, pushing values below ``high`` onto b.

    Values in ``[low, high)`` are sent to the bottom of b, values below
    ``low`` stay on its top.
    """
    for _ in range(stacks.len_a()):
        top = stacks.get_a(0)
        if low <= top < high:
            stacks.pb()
            stacks.rb()
        elif top < low:
            stacks.pb()
        else:
            stacks.ra()


def rotate_and_push(stacks: Stacks, i: int, rotate: Callable[[], None]) -> int:
    """Bring ``i`` (or ``i - 1`` on the way) from b onto a using ``rotate``.

    When ``i - 1`` is met first it is pushed too and the two are swapped
    into order. Returns the updated ``i``.
    """
    if i - 1 >= 0:
        while stacks.get_b(0) not in (i, i - 1):
            rotate()
        stacks.pa()
    if i - 1 < 0:
        stacks.pa()
    elif stacks.get_a(0) == i - 1:
        while stacks.get_b(0) != i:
            rotate()
        stacks.pa()
        stacks.sa()
        i -= 1
    return i


def i_to_b_first(stacks: Stacks, sorted_values: Sequence[int], parts: int) -> None:
    """Split a into chunks on b, leaving roughly the top quarter-chunk on a."""
    i_len = stacks.len_a()
    if parts == 0:
        parts = 1
    chunk = i_len // parts
    part = 0
    while True:
        part += 1
        if part >= parts:
            break
        if part + 1 < parts:
            move_to_b_bounded(
                stacks, sorted_values[part * chunk], sorted_values[(part + 1) * chunk]
            )
            part += 1
        else:
            move_to_b(stacks, sorted_values[part * chunk])
    move_to_b(stacks, sorted_values[part * chunk - chunk // 4])


def i_to_b(stacks: Stacks, sorted_values: Sequence[int], parts: int) -> None:
    """Move all of a onto b, one chunk of increasing values after another."""
    i_len = stacks.len_a()
    if parts <= 1:
        parts = 2
    chunk = i_len // parts
    for part in range(1, parts):
        limit = sorted_values[part * chunk]
        for _ in range(stacks.len_a()):
            if rotate_to_shortest_inferior_a(stacks, limit):
                stacks.pb()
    while stacks.len_a() > 0:
        stacks.pb()


def i_to_a(stacks: Stacks, sorted_values: Sequence[int], parts: int) -> None:
    """Move all of b onto a, one chunk of decreasing values after another."""
    i_len = stacks.len_b()
    if parts == 0:
        parts = 1
    chunk = i_len // parts
    for part in range(1, parts):
        limit = sorted_values[(parts - part) * chunk]
        for _ in range(stacks.len_b()):
            if rotate_to_shortest_superior_b(stacks, limit):
                stacks.pa()
    while stacks.len_b() > 0:
        stacks.pa()


def full_insert_sort(stacks: Stacks) -> None:
    """Push the indices held in b onto a from the largest down, in order."""
    i = stacks.len_b() - 1
    while i >= 0:
        quickest = find_quickest_b(stacks, 0, i)
        if quickest is Action.RB:
            i = rotate_and_push(stacks, i, stacks.rb)
        elif quickest is Action.RRB:
            i = rotate_and_push(stacks, i, stacks.rrb)
        i -= 1


def mysort(stacks: Stacks, sorted_values: Sequence[int]) -> None:
    """Sort a stack of indices by chunking back and forth, then inserting."""
    parts = root(stacks.len_a()) // 2
    i_to_b_first(stacks, sorted_values, parts // 4)
    i_to_a(stacks, sorted_values, int(parts / 1.2))
    i_to_b(stacks, sorted_values, parts * 3)
    full_insert_sort(stacks)
    sort_two_a(stacks)
    while stacks.len_b():
        stacks.pa()
    sort_two_a(stacks)


def mysort_little(stacks: Stacks, sorted_values: Sequence[int]) -> None:
    """Sort a smaller stack of indices: one chunking pass, then insertion."""
    parts = root(stacks.len_a()) // 2
    i_to_b_first(stacks, sorted_values, parts)
    select_good_sort_a(stacks, stacks.len_a())
    full_insert_sort(stacks)
    sort_two_a(stacks)
    while stacks.len_b() > 0:
        stacks.pa()
    sort_two_a(stacks)


def _radix_push_base(stacks: Stacks, divide: int, base: int) -> int:
    for digit in range(base - 1):
        for _ in range(stacks.len_a()):
            if _c_mod(_c_div(stacks.get_a(0), divide), base) == digit:
                stacks.pb()
            else:
                stacks.ra()
    while stacks.len_b() > 0:
        stacks.pa()
    return divide * base


def radix_sort_base(stacks: Stacks, sorted_values: Sequence[int], base: int) -> None:
    """LSD radix sort of the indices in a, in the given base."""
    largest = sorted_values[stacks.len_a() - 1]
    iterations = 0
    while largest > 0:
        largest = _c_div(largest, base)
        iterations += 1
    divide = 1
    for _ in range(iterations):
        divide = _radix_push_base(stacks, divide, base)