"""The two stacks and the eleven instructions that act on them."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable, Sequence
from enum import Enum


class Action(str, Enum):
    """An instruction, spelled the way it appears on the wire."""

    SA = "sa"
    SB = "sb"
    SS = "ss"
    PA = "pa"
    PB = "pb"
    RA = "ra"
    RB = "rb"
    RR = "rr"
    RRA = "rra"
    RRB = "rrb"
    RRR = "rrr"

    def __str__(self) -> str:
        return self.value


def _swap_top(stack: deque[int]) -> None:
    if len(stack) < 2:
        return
    first = stack.popleft()
    second = stack.popleft()
    stack.appendleft(first)
    stack.appendleft(second)


def _get(stack: deque[int], index: int) -> int:
    if not stack:
        raise IndexError("stack is empty")
    return stack[index % len(stack)]


class Stacks:
    """Stacks ``a`` and ``b``; index 0 is the top of each stack.

    Every instruction called with ``emit`` true is appended to ``actions``.
    A push from an empty stack changes nothing but is always recorded.
    """

    def __init__(self, values: Iterable[int]) -> None:
        self._a: deque[int] = deque(values)
        self._b: deque[int] = deque()
        self.actions: list[Action] = []

    def __repr__(self) -> str:
        return f"Stacks(a={self.list_a()!r}, b={self.list_b()!r})"

    def _record(self, action: Action, emit: bool) -> None:
        if emit:
            self.actions.append(action)

    def len_a(self) -> int:
        """Number of values in stack a."""
        return len(self._a)

    def len_b(self) -> int:
        """Number of values in stack b."""
        return len(self._b)

    def get_a(self, index: int) -> int:
        """Value at ``index`` from the top of a, wrapping around in both directions."""
        return _get(self._a, index)

    def get_b(self, index: int) -> int:
        """Value at ``index`` from the top of b, wrapping around in both directions."""
        return _get(self._b, index)

    def list_a(self) -> list[int]:
        """A copy of stack a, top first."""
        return list(self._a)

    def list_b(self) -> list[int]:
        """A copy of stack b, top first."""
        return list(self._b)

    def sa(self, emit: bool = True) -> None:
        """Swap the first two values of a."""
        _swap_top(self._a)
        self._record(Action.SA, emit)

    def sb(self, emit: bool = True) -> None:
        """Swap the first two values of b."""
        _swap_top(self._b)
        self._record(Action.SB, emit)

    def ss(self, emit: bool = True) -> None:
        """Swap the first two values of both stacks."""
        _swap_top(self._a)
        _swap_top(self._b)
        self._record(Action.SS, emit)

    def pa(self, emit: bool = True) -> None:
        """Move the top of b onto a."""
        if not self._b:
            self.actions.append(Action.PA)
            return
        self._a.appendleft(self._b.popleft())
        self._record(Action.PA, emit)

    def pb(self, emit: bool = True) -> None:
        """Move the top of a onto b."""
        if not self._a:
            self.actions.append(Action.PB)
            return
        self._b.appendleft(self._a.popleft())
        self._record(Action.PB, emit)

    def ra(self, emit: bool = True) -> None:
        """Rotate a up: the top value becomes the last."""
        self._a.rotate(-1)
        self._record(Action.RA, emit)

    def rb(self, emit: bool = True) -> None:
        """Rotate b up: the top value becomes the last."""
        self._b.rotate(-1)
        self._record(Action.RB, emit)

    def rr(self, emit: bool = True) -> None:
        """Rotate both stacks up."""
        self._a.rotate(-1)
        self._b.rotate(-1)
        self._record(Action.RR, emit)

    def rra(self, emit: bool = True) -> None:
        """Rotate a down: the last value becomes the top."""
        self._a.rotate(1)
        self._record(Action.RRA, emit)

    def rrb(self, emit: bool = True) -> None:
        """Rotate b down: the last value becomes the top."""
        self._b.rotate(1)
        self._record(Action.RRB, emit)

    def rrr(self, emit: bool = True) -> None:
        """Rotate both stacks down."""
        self._a.rotate(1)
        self._b.rotate(1)
        self._record(Action.RRR, emit)

    def apply(self, action: Action | str) -> None:
        """Run one instruction without recording it.

        Raises ValueError for a name that is not an instruction.
        """
        operation = {
            Action.SA: self.sa,
            Action.SB: self.sb,
            Action.SS: self.ss,
            Action.PA: self.pa,
            Action.PB: self.pb,
            Action.RA: self.ra,
            Action.RB: self.rb,
            Action.RR: self.rr,
            Action.RRA: self.rra,
            Action.RRB: self.rrb,
            Action.RRR: self.rrr,
        }[Action(action)]
        operation(emit=False)


def to_indices(values: Iterable[int], sorted_values: Sequence[int]) -> list[int]:
    """Replace each value by the position of its first occurrence in ``sorted_values``."""
    positions: dict[int, int] = {}
    for position, value in enumerate(sorted_values):
        positions.setdefault(value, position)
    try:
        return [positions[value] for value in values]
    except KeyError as exc:
        raise ValueError(f"{exc.args[0]} is not among the sorted values") from None