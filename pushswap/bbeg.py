"""Recursive halving sort: split the indices into segments, then bubble-sort each one."""

from __future__ import annotations

from collections.abc import Callable, Sequence
from dataclasses import dataclass
from typing import Optional

from .small_sorts import (
    parallel_bubble_limit,
    parallel_bubble_limit_odd,
    select_good_sort_a,
    select_good_sort_b,
)
from .stacks import Stacks

_SORT_THRESHOLD = 10
_SMALL_SEGMENT = 4


@dataclass(eq=False)
class Segment:
    """A run of consecutive indices held in one stack.

    ``stack`` is ``"a"`` or ``"b"``, ``size`` the number of indices and
    ``minimum`` the lowest of them.
    """

    stack: str
    size: int
    minimum: int

    @property
    def lower_size(self) -> int:
        """Number of indices in the lower half (the larger half for odd sizes)."""
        return self.size - self.size // 2

    def in_lower_half(self, value: int) -> bool:
        """True when ``value`` belongs to the lower half of this segment."""
        return self.minimum <= value < self.minimum + self.lower_size


_Step = Callable[[], Optional["_Step"]]


class BbegSorter:
    """Sorts a stack of indices by splitting it into ever smaller segments.

    Segments are kept newest first. Segments of at most ten indices are
    sorted in place with a pair of bubble sorts running on both stacks.
    """

    def __init__(self, stacks: Stacks, sorted_values: Sequence[int]) -> None:
        self.stacks = stacks
        self.sorted_values = sorted_values
        self.segments: list[Segment] = []
        self.direction = True

    def run(self) -> None:
        """Sort the whole of stack a."""
        self.add_segment("a", self.stacks.len_a(), 0)
        step: Optional[_Step] = self._split_first
        while step is not None:
            step = step()

    def add_segment(self, stack: str, size: int, minimum: int) -> Segment:
        """Record a new segment in front of the others and return it."""
        segment = Segment(stack, size, minimum)
        self.segments.insert(0, segment)
        return segment

    def search_for_a(self) -> Segment | None:
        """The newest segment held in stack a, or None."""
        return next((seg for seg in self.segments if seg.stack == "a"), None)

    def is_alone_in_b(self) -> bool:
        """True when exactly one segment is held in stack b."""
        return sum(1 for seg in self.segments if seg.stack == "b") == 1

    def go_back_if(self, rotations: int) -> None:
        """Bring a segment left at the bottom of a back to the top."""
        if not self.direction:
            for _ in range(rotations):
                self.stacks.rra()
            self.direction = True

    def push_to_b(self, direction: bool, segment: Segment) -> None:
        """Push the lower half of ``segment`` from a onto b.

        With ``direction`` true the segment is read from the top of a,
        otherwise from its bottom.
        """
        stacks = self.stacks
        for _ in range(segment.size):
            if not direction:
                stacks.rra()
            if segment.in_lower_half(stacks.get_a(0)):
                stacks.pb()
            elif direction:
                stacks.ra()

    def push_to_a(self, segment: Segment, alone: bool) -> None:
        """Push the upper half of ``segment`` from b onto a.

        The lower half is rotated out of the way and, unless the segment is
        alone in b, rotated back on top afterwards.
        """
        stacks = self.stacks
        for _ in range(segment.size):
            if segment.in_lower_half(stacks.get_b(0)):
                stacks.rb()
            else:
                stacks.pa()
        if not alone:
            for _ in range(segment.lower_size):
                stacks.rrb()

    def _push_half_from_a(self, segment: Segment) -> None:
        stacks = self.stacks
        pushed = 0
        rotated = 0
        for _ in range(segment.size):
            if pushed >= segment.lower_size:
                break
            if segment.in_lower_half(stacks.get_a(0)):
                pushed += 1
                stacks.pb()
            else:
                rotated += 1
                stacks.ra()
        for _ in range(rotated):
            stacks.rra()

    def _push_half_from_b(self, segment: Segment, alone: bool) -> None:
        stacks = self.stacks
        pushed = 0
        rotated = 0
        for _ in range(segment.size):
            if pushed >= segment.lower_size:
                break
            if segment.in_lower_half(stacks.get_b(0)):
                rotated += 1
                stacks.rb()
            else:
                pushed += 1
                stacks.pa()
        if not alone:
            for _ in range(rotated):
                stacks.rrb()

    def _bubble_halves(self, segment: Segment) -> None:
        half = segment.size // 2
        if segment.size % 2 == 0:
            parallel_bubble_limit(self.stacks, half)
        else:
            parallel_bubble_limit_odd(self.stacks, half)
        for _ in range(segment.lower_size):
            self.stacks.pa()

    def sort_from_a(self, segment: Segment) -> None:
        """Sort a segment of at most ten indices lying on top of a, then forget it."""
        if segment.size <= _SMALL_SEGMENT:
            select_good_sort_a(self.stacks, segment.size)
            self.segments.remove(segment)
            return
        self._push_half_from_a(segment)
        self._bubble_halves(segment)
        self.segments.remove(segment)

    def sort_from_b(self, segment: Segment) -> None:
        """Sort a segment of at most ten indices lying on top of b onto a, then forget it."""
        if segment.size <= _SMALL_SEGMENT:
            select_good_sort_b(self.stacks, segment.size)
            for _ in range(segment.size):
                self.stacks.pa()
            self.segments.remove(segment)
            return
        self._push_half_from_b(segment, self.is_alone_in_b())
        self._bubble_halves(segment)
        self.segments.remove(segment)

    def _add_halves(self, segment: Segment) -> None:
        self.add_segment("a", segment.size // 2, segment.minimum + segment.lower_size)
        self.add_segment("b", segment.lower_size, segment.minimum)

    def _split_first(self) -> Optional[_Step]:
        segment = self.search_for_a()
        if segment is None:
            return self._split_from_b
        if segment.size <= _SORT_THRESHOLD:
            self.sort_from_a(segment)
            return self._split_from_b
        self._add_halves(segment)
        self.push_to_b(True, segment)
        self.segments.remove(segment)
        return self._split_first

    def _split_from_a(self) -> Optional[_Step]:
        segment = self.search_for_a()
        if segment is None:
            return self._split_from_b
        if segment.size <= _SORT_THRESHOLD:
            self.go_back_if(segment.size)
            self.sort_from_a(segment)
            return self._split_from_b
        self._add_halves(segment)
        self.push_to_b(self.direction, segment)
        self.direction = not self.direction
        self.segments.remove(segment)
        return self._split_from_a

    def _split_from_b(self) -> Optional[_Step]:
        if not self.segments:
            return None
        segment = self.segments[0]
        if segment.size <= _SORT_THRESHOLD:
            self.sort_from_b(segment)
            return self._split_from_a
        self.push_to_a(segment, self.is_alone_in_b())
        self._add_halves(segment)
        self.segments.remove(segment)
        return self._split_from_a


def bbeg_sort(stacks: Stacks, sorted_values: Sequence[int]) -> None:
    """Sort a stack of indices 0..n-1 by recursive halving."""
    BbegSorter(stacks, sorted_values).run()