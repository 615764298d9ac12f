"""Command-line argument validation, parsing and small integer helpers."""

from __future__ import annotations

import math
import re
from collections.abc import Sequence

INT_MIN = -2147483648
INT_MAX = 2147483647

_ARG_CHARS = frozenset("0123456789+-")
_LIST_CHARS = frozenset("0123456789+- ")
_ATOI_PATTERN = re.compile(r"[+-]?[0-9]*")


class ArgumentError(ValueError):
    """Raised when the program arguments cannot be turned into a stack."""


def _in_int_range(value: int) -> bool:
    return INT_MIN <= value <= INT_MAX


def _split_sign(arg: str) -> tuple[int, int]:
    """Return the sign of ``arg`` and the index of its first digit."""
    if arg[:1] in ("+", "-"):
        return (-1 if arg[0] == "-" else 1), 1
    return 1, 0


def atoi(text: str) -> int:
    """Read a leading integer the way C's atoi does; 0 when there is none."""
    stripped = text.lstrip(" \t\n\v\f\r")
    match = _ATOI_PATTERN.match(stripped)
    token = match.group(0) if match else ""
    digits = token.lstrip("+-")
    if not digits:
        return 0
    value = int(digits)
    return -value if token.startswith("-") else value


def check_arg(arg: str) -> bool:
    """True when ``arg`` holds only digits and signs and stays within a 32-bit int."""
    if any(ch not in _ARG_CHARS for ch in arg):
        return False
    sign, start = _split_sign(arg)
    value = 0
    for ch in arg[start:]:
        value = 10 * value + ord(ch) - ord("0")
        if not _in_int_range(value * sign):
            return False
    return True


def check_unique_arg(arg: str) -> bool:
    """Check a space-separated list given as one argument.

    Only digits, signs and spaces are allowed; a sparse sample of the
    leading number (every second character) is range-checked as well.
    """
    if any(ch not in _LIST_CHARS for ch in arg):
        return False
    sign, start = _split_sign(arg)
    index = start - 1
    value = 0
    while True:
        index += 1
        if index >= len(arg):
            break
        index += 1
        ch = arg[index] if index < len(arg) else "\0"
        if ch == " ":
            break
        value = 10 * value + ord(ch) - ord("0")
        if not _in_int_range(value * sign):
            return False
        if index >= len(arg):
            break
    return True


def check_args(args: Sequence[str]) -> bool:
    """Validate the program arguments (without the program name)."""
    if len(args) == 1:
        return check_arg(args[0]) or check_unique_arg(args[0])
    return all(check_arg(arg) for arg in args)


def has_duplicates(values: Sequence[int]) -> bool:
    """True when some value occurs more than once."""
    return len(set(values)) != len(values)


def parse_args(args: Sequence[str]) -> list[int]:
    """Turn the program arguments into the initial contents of stack a.

    A single argument is split on spaces. Raises ArgumentError for any
    malformed or out-of-range number and for duplicate values.
    """
    if not check_args(args):
        raise ArgumentError("invalid argument")
    if len(args) == 1:
        words = [word for word in args[0].split(" ") if word]
        if not all(check_arg(word) for word in words):
            raise ArgumentError("invalid argument")
        values = [atoi(word) for word in words]
    else:
        values = [atoi(arg) for arg in args]
    if has_duplicates(values):
        raise ArgumentError("duplicate values")
    return values


def root(n: int) -> int:
    """Integer square root of ``n``, or -1 for a negative ``n``."""
    if n < 0:
        return -1
    return math.isqrt(n)


def power(nb: int, exponent: int) -> int:
    """``nb`` raised to ``exponent``; 1 for a non-positive exponent."""
    if exponent <= 0:
        return 1
    return nb**exponent