"""Turning command-line arguments into the numbers of stack ``a``."""

from __future__ import annotations

from typing import Iterable, List, Sequence

from .chars import is_digit
from .convert import split

INT_MAX = 2**31 - 1
INT_MIN = -(2**31)


class ParseError(ValueError):
    """Raised when the arguments do not describe a valid list of distinct integers."""


def parse_int(text: str) -> int:
    """Parse a whole argument as a signed 32-bit integer.

    One optional leading sign is accepted and every other character must be
    a decimal digit; no whitespace is skipped. A sign or empty text with no
    digits gives 0.
    """
    sign = 1
    body = text
    if body[:1] in ("+", "-"):
        if body[0] == "-":
            sign = -1
        body = body[1:]
    if not all(is_digit(ch) for ch in body):
        raise ParseError(f"not an integer: {text!r}")
    value = sign * int(body) if body else 0
    if not INT_MIN <= value <= INT_MAX:
        raise ParseError(f"integer out of range: {text!r}")
    return value


def compress(values: Sequence[int]) -> List[int]:
    """Replace every value by its rank: one plus the number of values smaller than it."""
    return [1 + sum(other < value for other in values) for value in values]


def has_duplicates(values: Iterable[int]) -> bool:
    """True if any value occurs more than once."""
    seen = set()
    for value in values:
        if value in seen:
            return True
        seen.add(value)
    return False


def parse_arguments(args: Sequence[str]) -> List[int]:
    """Parse the program arguments into ranks, top of the stack first.

    A single argument is split on spaces; several arguments are taken one
    number each. The numbers are replaced by their ranks 1..n.
    """
    words = split(args[0], " ") if len(args) == 1 else list(args)
    if not words:
        raise ParseError("no numbers given")
    ranks = compress([parse_int(word) for word in words])
    if has_duplicates(ranks):
        raise ParseError("duplicate numbers")
    return ranks