"""Check that a list of instructions read from standard input sorts the arguments."""

from __future__ import annotations

import sys
from collections.abc import Iterable, Sequence
from enum import Enum

from .args import ArgumentError, atoi, check_arg, check_args, parse_args
from .small_sorts import is_sorted
from .stacks import Action, Stacks


class Verdict(Enum):
    """Outcome of running a list of instructions."""

    ERROR_UNKNOWN = 0
    OK = 1
    KO = 2


def parse_action(line: str) -> Action:
    """The instruction a newline-terminated line names.

    Raises ValueError for anything else, a missing newline included.
    """
    for action in Action:
        if line.startswith(f"{action.value}\n"):
            return action
    raise ValueError(f"unknown instruction: {line!r}")


def run_instructions(stacks: Stacks, lines: Iterable[str]) -> Verdict:
    """Apply every line to ``stacks`` and judge the result.

    Stops at the first unknown line with ERROR_UNKNOWN.
    """
    for line in lines:
        try:
            action = parse_action(line)
        except ValueError:
            return Verdict.ERROR_UNKNOWN
        stacks.apply(action)
    if is_sorted(stacks) and stacks.len_b() == 0:
        return Verdict.OK
    return Verdict.KO


def _read_values(args: Sequence[str]) -> list[int]:
    # A single space-separated argument is not checked for duplicates.
    if len(args) == 1:
        if not check_args(args):
            raise ArgumentError("invalid argument")
        words = [word for word in args[0].split(" ") if word]
        if not all(check_arg(word) for word in words):
            raise ArgumentError("invalid argument")
        return [atoi(word) for word in words]
    return parse_args(args)


def main(argv: Sequence[str] | None = None) -> int:
    """Read instructions from standard input and print OK, KO or Error."""
    args = sys.argv[1:] if argv is None else list(argv)
    if not args:
        return 0
    try:
        values = _read_values(args)
    except ArgumentError:
        sys.stderr.write("Error\n")
        return 1
    stacks = Stacks(values)
    verdict = run_instructions(stacks, sys.stdin)
    sys.stdout.write("".join(f"{action}\n" for action in stacks.actions))
    if verdict is Verdict.ERROR_UNKNOWN:
        sys.stderr.write("Error\n")
    else:
        sys.stdout.write(f"{verdict.name}\n")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())